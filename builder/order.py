"""Order and OrderBook classes for named car configurations."""
from typing import List, Optional

from .car import Car


class Order:
    """A named car configuration waiting to be built."""

    def __init__(self, name: str, builder: Car.Builder):
        self.name = name
        self.builder = builder

    def build(self) -> Car:
        """Build the car for this order. Raises BuildException."""
        return self.builder.build()


class OrderBook:
    """All orders from one order file."""

    def __init__(self, dealer: Optional[str], orders: Optional[List[Order]] = None):
        self.dealer = dealer
        self.orders = orders or []

    @property
    def title(self) -> str:
        return self.dealer or "Unnamed dealer"

    def get_order(self, name: str) -> Optional[Order]:
        """Find an order by name (case-insensitive)."""
        for order in self.orders:
            if order.name.lower() == name.lower():
                return order
        return None
