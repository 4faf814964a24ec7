"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from beerstock.domain.model.beer import Beer
from beerstock.domain.repository.beer_repository import BeerRepository


class FakeBeerRepository(BeerRepository):
    """Dict-backed repository that also records every call made to it.

    ``calls`` holds ``(method_name, argument)`` tuples in call order.
    """

    def __init__(self, beers: list[Beer] | None = None) -> None:
        self._store: dict[int, Beer] = {}
        self._next_id = 1
        self.calls: list[tuple[str, object]] = []
        for beer in beers or []:
            self._put(beer)

    def find_by_name(self, name: str) -> Beer | None:
        self.calls.append(("find_by_name", name))
        for beer in self._store.values():
            if beer.name == name:
                return beer
        return None

    def find_by_id(self, beer_id: int) -> Beer | None:
        self.calls.append(("find_by_id", beer_id))
        return self._store.get(beer_id)

    def find_all(self) -> list[Beer]:
        self.calls.append(("find_all", None))
        return list(self._store.values())

    def save(self, beer: Beer) -> Beer:
        self.calls.append(("save", beer))
        return self._put(beer)

    def delete_by_id(self, beer_id: int) -> None:
        self.calls.append(("delete_by_id", beer_id))
        self._store.pop(beer_id, None)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _put(self, beer: Beer) -> Beer:
        if beer.id is None:
            beer.id = self._next_id
        self._next_id = max(self._next_id, beer.id + 1)
        self._store[beer.id] = beer
        return beer
