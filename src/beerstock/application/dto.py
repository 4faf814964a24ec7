"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BeerDTO:
    """A beer as exchanged with callers.

    Mirrors the Beer entity field-for-field; ``type`` travels as the
    enum's name (e.g. "LAGER").
    """

    name: str
    brand: str = ""
    max: int = 0
    quantity: int = 0
    type: str = "LAGER"
    id: int | None = None

    def to_dict(self) -> dict:
        return asdict(self)
