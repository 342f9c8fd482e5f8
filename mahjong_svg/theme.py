"""Themes and render configuration.

A theme is a complete :class:`RenderConfig`: a design table mapping every
tile key (plus ``"base"``) to an image reference, and the four layout
constants. Callers tweak a theme through :class:`ThemeConfig`, overriding any
subset of the design table and optionally rooting relative overrides at a base
URL.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

from pyrsistent import pmap
from pyrsistent.typing import PMap

from mahjong_svg.types import (
    BACK_TILE_KEY,
    BASE_TILE_KEY,
    UNKNOWN_TILE_KEY,
    TileKey,
)

Number = Union[int, float]
DesignMap = Mapping[TileKey, str]

DEFAULT_ASSET_ROOT = "assets/tiles"
DEFAULT_TILE_WIDTH = 30
DEFAULT_TILE_HEIGHT = 40
DEFAULT_TILE_GAP = 2
DEFAULT_SPACE_WIDTH = 10

NUMBER_SUITS = ("m", "p", "s")
HONOR_SUIT = "z"
ABSOLUTE_URL_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class RenderConfig:
    """Fully resolved inputs for one render call.

    Attributes:
        tile_designs: Tile key -> image reference. Must contain ``"base"``.
        tile_width: Width of an upright tile.
        tile_height: Height of an upright tile.
        tile_gap: Gap after every tile.
        space_width: Width of a ``-`` gap.
    """

    tile_designs: PMap[TileKey, str]
    tile_width: Number = DEFAULT_TILE_WIDTH
    tile_height: Number = DEFAULT_TILE_HEIGHT
    tile_gap: Number = DEFAULT_TILE_GAP
    space_width: Number = DEFAULT_SPACE_WIDTH


@dataclass(frozen=True)
class ThemeConfig:
    """Caller overrides applied on top of a theme.

    Attributes:
        base_url: Prefix for relative overrides in ``tile_designs``.
        tile_designs: Partial design table; entries win over the theme's.
        theme: Name of a registered theme; ``None`` selects the default.
    """

    base_url: Optional[str] = None
    tile_designs: DesignMap = field(default_factory=dict)
    theme: Optional[str] = None


def all_tile_keys() -> list[TileKey]:
    """Every face key a built-in theme ships, in a stable order."""
    keys = [f"{rank}{suit}" for suit in NUMBER_SUITS for rank in range(10)]
    keys += [f"{rank}{HONOR_SUIT}" for rank in range(1, 8)]
    return keys + [BACK_TILE_KEY, UNKNOWN_TILE_KEY]


def make_tile_designs(
    style: str, base_file: str = "base.svg", asset_root: str = DEFAULT_ASSET_ROOT
) -> PMap[TileKey, str]:
    designs: Dict[TileKey, str] = {
        key: f"{asset_root}/{style}/{key}.svg" for key in all_tile_keys()
    }
    designs[BASE_TILE_KEY] = f"{asset_root}/{style}/{base_file}"
    return pmap(designs)


REGULAR_THEME = RenderConfig(tile_designs=make_tile_designs("regular"))

BLACK_THEME = RenderConfig(
    tile_designs=make_tile_designs("black", base_file="base-black.svg")
)

DEFAULT_THEME_NAME = "regular"

THEME_REGISTRY: Dict[str, RenderConfig] = {
    "regular": REGULAR_THEME,
    "black": BLACK_THEME,
}

DEFAULT_THEME: RenderConfig = THEME_REGISTRY[DEFAULT_THEME_NAME]


def get_theme(name: Optional[str] = None) -> RenderConfig:
    """Look up a registered theme, defaulting to :data:`DEFAULT_THEME`."""
    if name is None:
        return DEFAULT_THEME
    if name not in THEME_REGISTRY:
        raise ValueError(
            f"Unknown theme {name!r}; expected one of {sorted(THEME_REGISTRY)}"
        )
    return THEME_REGISTRY[name]


def resolve_base_url(designs: DesignMap, base_url: Optional[str] = None) -> DesignMap:
    """Prefix relative design references with ``base_url``.

    The base URL gets a trailing ``/`` if it lacks one. Absolute
    (``http://``/``https://``) and empty references pass through untouched.
    Without a base URL the mapping is returned as is.
    """
    if not base_url:
        return designs

    normalized = base_url if base_url.endswith("/") else base_url + "/"
    resolved: Dict[TileKey, str] = {}
    for key, value in designs.items():
        if value and not value.startswith(ABSOLUTE_URL_PREFIXES):
            resolved[key] = normalized + value
        else:
            resolved[key] = value
    return resolved


def get_render_config(theme_config: Optional[ThemeConfig] = None) -> RenderConfig:
    """Merge caller overrides into the selected theme.

    Only the design table is overridable; the layout constants always come
    from the theme.
    """
    if theme_config is None:
        return DEFAULT_THEME

    theme = get_theme(theme_config.theme)
    overrides = resolve_base_url(theme_config.tile_designs, theme_config.base_url)
    return RenderConfig(
        tile_designs=theme.tile_designs.update(overrides),
        tile_width=theme.tile_width,
        tile_height=theme.tile_height,
        tile_gap=theme.tile_gap,
        space_width=theme.space_width,
    )
