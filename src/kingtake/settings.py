"""User-configurable settings shared by the console and Qt front ends."""

from __future__ import annotations

import logging
from dataclasses import dataclass

BOARD_THEMES = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_candidates: bool = True

    # Console
    empty_marker: str = "."

    # Diagnostics
    log_level: str = "WARNING"


def configure_logging(level: str = "WARNING") -> None:
    """Route library diagnostics to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
