"""Common type aliases and enumerations.

``TileKey`` names the face image drawn for a tile and is the key into a
theme's design table (see :mod:`mahjong_svg.theme`).
"""

from enum import StrEnum, auto

TileKey = str
"""Suit+rank string such as ``"5p"``, or ``"x"`` / ``"q"`` for back / unknown tiles."""

BASE_TILE_KEY: TileKey = "base"
"""Sentinel key for the tile frame image drawn beneath every face."""

BACK_TILE_KEY: TileKey = "x"
UNKNOWN_TILE_KEY: TileKey = "q"


class Orientation(StrEnum):
    """How a tile is drawn on the canvas."""

    UPRIGHT = auto()
    SIDEWAYS = auto()
    SIDEWAYS_TOP = auto()
