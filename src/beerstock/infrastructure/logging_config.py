"""Logging setup for the command-line entry point.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger, once per process.
"""

from __future__ import annotations

import logging
from pathlib import Path


def setup_logging(level: str = "WARNING", logfile: str | None = None) -> None:
    """Configure the root logger.

    Does nothing if the root logger already has handlers, so repeated
    CLI invocations in one process (e.g. under a test runner) do not
    stack up duplicate output.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
