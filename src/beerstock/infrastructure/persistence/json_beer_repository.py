"""JSON-file-backed implementation of BeerRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class JsonBeerRepository(BeerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BeerRepository interface ---------------------------------------------

    def find_by_name(self, name: str) -> Beer | None:
        for raw in self._load_raw():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def find_by_id(self, beer_id: int) -> Beer | None:
        for raw in self._load_raw():
            if raw["id"] == beer_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Beer]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, beer: Beer) -> Beer:
        records = self._load_raw()
        if beer.id is None:
            beer.id = max((r["id"] for r in records), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(records):
            if raw["id"] == beer.id:
                records[i] = self._to_raw(beer)
                break
        else:
            records.append(self._to_raw(beer))

        self._persist_raw(records)
        return beer

    def delete_by_id(self, beer_id: int) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != beer_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(beer: Beer) -> dict:
        return {
            "id": beer.id,
            "name": beer.name,
            "brand": beer.brand,
            "max": beer.max,
            "quantity": beer.quantity,
            "type": beer.type.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Beer:
        return Beer(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            max=raw["max"],
            quantity=raw["quantity"],
            type=BeerType(raw["type"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d beer record(s) to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
