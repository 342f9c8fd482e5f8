"""Mahjong hand notation to SVG.

Two stages, composed with no feedback:

* :mod:`mahjong_svg.notation` parses mpsz text into render instructions.
* :mod:`mahjong_svg.renderer.svg` lays those out into a positioned SVG.

:func:`mahjong_svg.api.render` runs both with a theme from
:mod:`mahjong_svg.theme`; :func:`mahjong_svg.page.run` applies it to every
matching element of a document.
"""

from mahjong_svg.api import render
from mahjong_svg.instructions import RenderInstruction, Space, Tile
from mahjong_svg.notation import parse
from mahjong_svg.theme import RenderConfig, ThemeConfig, get_render_config
from mahjong_svg.types import Orientation

__all__ = [
    "Orientation",
    "RenderConfig",
    "RenderInstruction",
    "Space",
    "ThemeConfig",
    "Tile",
    "get_render_config",
    "parse",
    "render",
]
