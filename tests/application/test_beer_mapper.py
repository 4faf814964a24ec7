"""Unit tests for BeerMapper."""

from beerstock.application.dto import BeerDTO
from beerstock.application.mapper import BeerMapper
from beerstock.domain.model.beer import Beer, BeerType


class TestBeerMapper:

    def test_to_model_copies_every_field(self):
        dto = BeerDTO(id=5, name="Guinness", brand="Diageo", max=30, quantity=12, type="STOUT")
        beer = BeerMapper.to_model(dto)
        assert beer == Beer(
            id=5, name="Guinness", brand="Diageo", max=30, quantity=12, type=BeerType.STOUT,
        )

    def test_to_dto_uses_type_name(self):
        beer = Beer(id=2, name="Hoegaarden", brand="AB InBev", max=40, quantity=3, type=BeerType.WITBIER)
        assert BeerMapper.to_dto(beer).type == "WITBIER"

    def test_new_beer_has_no_id(self):
        beer = BeerMapper.to_model(BeerDTO(name="Skol", brand="Ambev", max=10))
        assert beer.id is None
        assert beer.type is BeerType.LAGER

    def test_dto_to_dict(self):
        dto = BeerDTO(id=1, name="Brahma", brand="Ambev", max=50, quantity=10, type="LAGER")
        assert dto.to_dict() == {
            "name": "Brahma",
            "brand": "Ambev",
            "max": 50,
            "quantity": 10,
            "type": "LAGER",
            "id": 1,
        }
