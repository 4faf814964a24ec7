"""Beer aggregate: a catalog entry and its current stock.

Each beer knows how many units are in stock (``quantity``) and the most
it is allowed to hold (``max``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from beerstock.domain.exceptions import BeerStockExceededError


class BeerType(Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


@dataclass
class Beer:
    """Aggregate root for a beer in the catalog.

    Invariants:
    - ``quantity`` never exceeds ``max`` after an increment
    - ``id`` is None until the repository persists the beer
    """

    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType
    id: int | None = None

    def can_increment(self, quantity: int) -> bool:
        return self.quantity + quantity <= self.max

    def increment(self, quantity: int) -> None:
        """Add ``quantity`` units to the stock.

        Raises BeerStockExceededError, leaving the beer untouched, if the
        new quantity would go over ``max``. Negative values are not
        rejected here; they simply lower the stock.
        """
        if not self.can_increment(quantity):
            raise BeerStockExceededError(self.id, quantity)
        self.quantity += quantity
