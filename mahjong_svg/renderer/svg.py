import html
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from mahjong_svg.instructions import RenderInstruction, Space
from mahjong_svg.notation import parse
from mahjong_svg.theme import Number, RenderConfig, ThemeConfig, get_render_config
from mahjong_svg.types import BASE_TILE_KEY, Orientation, TileKey

LOGGER = logging.getLogger(__name__)

WRAPPER_STYLE = "background-color: green; padding: 0.375rem; border-radius: 6px;"
SVG_STYLE = "display: block;"
ROTATE_TRANSFORM = "rotate(-90)"


@dataclass(frozen=True)
class PlacedImage:
    """One ``<image>`` element in canvas coordinates.

    For ``rotated`` images ``x``/``y`` are in the frame obtained after the
    -90 degree rotation about the origin, exactly as written to the markup.
    """

    href: str
    x: Number
    y: Number
    width: Number
    height: Number
    rotated: bool = False


@dataclass(frozen=True)
class Layout:
    """Positioned output of a render pass.

    Attributes:
        height: Canvas height.
        width: Final horizontal cursor, including the gap after the last tile.
        images: Images in drawing order (later ones paint over earlier ones).
    """

    height: Number
    width: Number
    images: Tuple[PlacedImage, ...]


def svg_height(config: RenderConfig) -> Number:
    """Tall enough for an upright tile or two stacked sideways tiles."""
    return max(config.tile_height, config.tile_width * 2 + config.tile_gap)


def design_for(config: RenderConfig, tile_key: TileKey) -> str:
    href = config.tile_designs.get(tile_key)
    if href is None:
        LOGGER.warning("no tile design for key %r; image will be broken", tile_key)
        return ""
    return href


def _tile_images(
    config: RenderConfig, tile_key: TileKey, x: Number, y: Number, rotated: bool
) -> List[PlacedImage]:
    """Frame first, face on top, at the same spot."""
    return [
        PlacedImage(
            href=design_for(config, key),
            x=x,
            y=y,
            width=config.tile_width,
            height=config.tile_height,
            rotated=rotated,
        )
        for key in (BASE_TILE_KEY, tile_key)
    ]


def layout(
    instructions: Iterable[RenderInstruction], config: RenderConfig
) -> Layout:
    """Fold instructions into positioned images.

    Sideways tiles are drawn with ``rotate(-90)``, so their coordinates are
    given in the rotated frame: ``x`` runs upward (negated canvas y) and ``y``
    runs along the canvas x axis. A sideways-top tile sits one tile width plus
    gap above the sideways tile just drawn and does not move the cursor.
    """
    height = svg_height(config)
    tile_width = config.tile_width
    tile_height = config.tile_height
    tile_gap = config.tile_gap

    images: List[PlacedImage] = []
    cursor: Number = 0
    for entry in instructions:
        if isinstance(entry, Space):
            cursor += config.space_width
            continue

        if entry.orientation == Orientation.UPRIGHT:
            images += _tile_images(
                config, entry.tile_key, cursor, height - tile_height, rotated=False
            )
            cursor += tile_width + tile_gap
        elif entry.orientation == Orientation.SIDEWAYS:
            images += _tile_images(config, entry.tile_key, -height, cursor, rotated=True)
            cursor += tile_height + tile_gap
        elif entry.orientation == Orientation.SIDEWAYS_TOP:
            x_rotated = tile_width - height + tile_gap
            y_rotated = cursor - tile_height - tile_gap
            images += _tile_images(
                config, entry.tile_key, x_rotated, y_rotated, rotated=True
            )

    return Layout(height=height, width=cursor, images=tuple(images))


def format_number(value: Number) -> str:
    """Print a coordinate the way a browser script would: ``61``, ``-2.5``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def image_markup(image: PlacedImage) -> str:
    attrs = (
        f'href="{html.escape(image.href, quote=True)}" '
        f'x="{format_number(image.x)}" y="{format_number(image.y)}" '
        f'width="{format_number(image.width)}" height="{format_number(image.height)}"'
    )
    if image.rotated:
        attrs += f' transform="{ROTATE_TRANSFORM}"'
    return f"<image {attrs} />"


def to_markup(result: Layout) -> str:
    """Wrap the images in the fixed ``<div><svg>`` shell."""
    inner = "".join(image_markup(image) for image in result.images)
    return (
        f'<div style="{WRAPPER_STYLE}">'
        f'<svg width="100%" height="{format_number(result.height)}" style="{SVG_STYLE}">'
        f"{inner}</svg></div>"
    )


def render(instructions: Iterable[RenderInstruction], config: RenderConfig) -> str:
    """Render instructions to an HTML fragment holding one SVG canvas."""
    return to_markup(layout(instructions, config))


class SvgRenderer:
    config: RenderConfig

    def __init__(self, theme_config: Optional[ThemeConfig] = None):
        self.config = get_render_config(theme_config)

    def render(self, notation: str) -> str:
        return render(parse(notation), self.config)
