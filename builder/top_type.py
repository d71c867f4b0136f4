"""TopType enum for roof construction."""

from enum import Enum


class TopType(Enum):
    """Roof construction. SOFTTOP means a folding fabric roof."""

    HARDTOP = 1
    SOFTTOP = 2
