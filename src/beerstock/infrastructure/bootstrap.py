"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from beerstock.application.beer_service import BeerService
from beerstock.infrastructure.config import Settings, load_settings
from beerstock.infrastructure.persistence.json_beer_repository import (
    JsonBeerRepository,
)


def beer_repository(settings: Settings | None = None) -> JsonBeerRepository:
    settings = settings or load_settings()
    return JsonBeerRepository(settings.beers_file)


def beer_service(settings: Settings | None = None) -> BeerService:
    return BeerService(beer_repo=beer_repository(settings))
