"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each beer-specific error keeps the offending name or id on the instance so
an outer layer can build its own response from it.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BeerAlreadyRegisteredError(ValidationError):

    def __init__(self, name: str) -> None:
        super().__init__(f"Beer with name {name} already registered in the system.")
        self.name = name


class BeerNotFoundError(EntityNotFoundError):

    def __init__(self, identifier: int | str) -> None:
        if isinstance(identifier, int):
            message = f"Beer with id {identifier} not found in the system."
        else:
            message = f"Beer with name {identifier} not found in the system."
        super().__init__(message)
        self.identifier = identifier


class BeerStockExceededError(ValidationError):

    def __init__(self, beer_id: int | None, quantity: int) -> None:
        super().__init__(
            f"Beers with {beer_id} id to increment informed exceeds "
            f"the max stock capacity: {quantity}"
        )
        self.beer_id = beer_id
        self.quantity = quantity
