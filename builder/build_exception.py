"""BuildException raised when a car cannot be built."""


class BuildException(ValueError):
    """A required field was missing when build() was called."""
