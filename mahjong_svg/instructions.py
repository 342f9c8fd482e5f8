"""Render instructions produced by the notation parser.

A parsed hand is an ordered tuple of instructions. The layout engine folds
over it left to right with a running horizontal cursor, so the position of an
instruction depends only on the instructions before it.
"""

from dataclasses import dataclass
from typing import Dict, Union

from mahjong_svg.types import Orientation, TileKey


@dataclass(frozen=True)
class Tile:
    """A single tile to draw.

    Attributes:
        tile_key: Face image key (e.g. ``"1m"``, ``"x"``).
        orientation: Upright, sideways (called) or the upper half of a stacked call.
    """

    tile_key: TileKey
    orientation: Orientation = Orientation.UPRIGHT


@dataclass(frozen=True)
class Space:
    """Horizontal gap between tile groups; draws nothing."""


RenderInstruction = Union[Tile, Space]


def instruction_row(entry: RenderInstruction) -> Dict[str, str]:
    """Flat, all-string view of an instruction for tables and logs."""
    if isinstance(entry, Tile):
        return {
            "type": "tile",
            "tile_key": entry.tile_key,
            "orientation": entry.orientation.value,
        }
    return {"type": "space", "tile_key": "", "orientation": ""}
