"""Runtime configuration read from environment variables.

Values are read each time ``load_settings`` is called, so a process (or
a test) can change the environment before wiring up the application.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    log_file: str | None = None

    @property
    def beers_file(self) -> Path:
        return self.data_dir / "beers.json"


def load_settings() -> Settings:
    return Settings(
        data_dir=Path(os.getenv("BEERSTOCK_DATA_DIR", "data")),
        log_level=os.getenv("BEERSTOCK_LOG_LEVEL", "WARNING"),
        log_file=os.getenv("BEERSTOCK_LOG_FILE") or None,
    )
