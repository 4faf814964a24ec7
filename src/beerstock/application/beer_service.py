"""Application service: beer catalog and stock use cases.

Orchestrates the flow between the repository and the Beer aggregate.
Every call is an independent sequence of repository operations; the
service keeps no state of its own between calls.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from beerstock.application.dto import BeerDTO
from beerstock.application.mapper import BeerMapper
from beerstock.domain.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    ValidationError,
)
from beerstock.domain.model.beer import BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 200
MAX_STOCK_CAPACITY = 500


class BeerService:

    def __init__(
        self,
        beer_repo: BeerRepository,
        mapper: BeerMapper | None = None,
    ) -> None:
        self._beer_repo = beer_repo
        self._mapper = mapper or BeerMapper()

    def create_beer(self, dto: BeerDTO) -> BeerDTO:
        """Register a new beer.

        Steps:
        1. Strip the text fields and drop any caller-supplied ID; the
           repository assigns IDs to new beers.
        2. Reject the request if a beer with the same name exists.
        3. Validate the incoming fields.
        4. Persist and return the stored beer as a DTO.
        """
        dto = replace(dto, id=None, name=dto.name.strip(), brand=dto.brand.strip())

        if self._beer_repo.find_by_name(dto.name) is not None:
            logger.warning("Rejected duplicate beer %r", dto.name)
            raise BeerAlreadyRegisteredError(dto.name)

        self._validate(dto)

        saved = self._beer_repo.save(self._mapper.to_model(dto))
        logger.info("Created beer %r with id %s", saved.name, saved.id)
        return self._mapper.to_dto(saved)

    def find_by_name(self, name: str) -> BeerDTO:
        beer = self._beer_repo.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name)
        return self._mapper.to_dto(beer)

    def list_all(self) -> list[BeerDTO]:
        return [self._mapper.to_dto(beer) for beer in self._beer_repo.find_all()]

    def delete_by_id(self, beer_id: int) -> None:
        """Delete a beer, failing if it does not exist.

        The existence check and the delete are two separate repository
        calls, always issued in that order.
        """
        if self._beer_repo.find_by_id(beer_id) is None:
            raise BeerNotFoundError(beer_id)
        self._beer_repo.delete_by_id(beer_id)
        logger.info("Deleted beer with id %s", beer_id)

    def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        """Add stock to a beer without letting it go over its ``max``.

        On BeerStockExceededError nothing is saved.
        """
        beer = self._beer_repo.find_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id)

        try:
            beer.increment(quantity_to_increment)
        except BeerStockExceededError:
            logger.warning(
                "Increment of %s for beer %s rejected (quantity=%s, max=%s)",
                quantity_to_increment, beer_id, beer.quantity, beer.max,
            )
            raise

        saved = self._beer_repo.save(beer)
        logger.info("Beer %s stock is now %s/%s", beer_id, saved.quantity, saved.max)
        return self._mapper.to_dto(saved)

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def _validate(dto: BeerDTO) -> None:
        if not dto.name:
            raise ValidationError("Beer name is required")
        if len(dto.name) > MAX_TEXT_LENGTH:
            raise ValidationError(
                f"Beer name must be at most {MAX_TEXT_LENGTH} characters"
            )
        if len(dto.brand) > MAX_TEXT_LENGTH:
            raise ValidationError(
                f"Beer brand must be at most {MAX_TEXT_LENGTH} characters"
            )
        if not 0 <= dto.max <= MAX_STOCK_CAPACITY:
            raise ValidationError(
                f"Beer max must be between 0 and {MAX_STOCK_CAPACITY}, got {dto.max}"
            )
        if not 0 <= dto.quantity <= dto.max:
            raise ValidationError(
                f"Beer quantity must be between 0 and {dto.max}, got {dto.quantity}"
            )
        if dto.type not in BeerType.__members__:
            raise ValidationError(f"Unknown beer type '{dto.type}'")
