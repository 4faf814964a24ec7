"""Field-by-field mapping between the Beer entity and BeerDTO."""

from __future__ import annotations

from beerstock.application.dto import BeerDTO
from beerstock.domain.model.beer import Beer, BeerType


class BeerMapper:

    @staticmethod
    def to_model(dto: BeerDTO) -> Beer:
        return Beer(
            id=dto.id,
            name=dto.name,
            brand=dto.brand,
            max=dto.max,
            quantity=dto.quantity,
            type=BeerType(dto.type),
        )

    @staticmethod
    def to_dto(beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            max=beer.max,
            quantity=beer.quantity,
            type=beer.type.value,
        )
