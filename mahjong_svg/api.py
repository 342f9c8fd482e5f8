"""One-call entry point: notation in, SVG fragment out."""

from typing import Optional

from mahjong_svg.notation import parse
from mahjong_svg.renderer.svg import render as render_instructions
from mahjong_svg.theme import ThemeConfig, get_render_config


def render(notation: str, theme_config: Optional[ThemeConfig] = None) -> str:
    """Render a hand written in mpsz notation.

    Args:
        notation: Hand notation, e.g. ``"123m456p789s-1z'1z1z"``.
        theme_config: Optional theme choice and design overrides.

    Returns:
        str: ``<div><svg>...</svg></div>`` markup ready to embed in a page.

    Raises:
        ValueError: If ``theme_config`` names an unknown theme.
    """
    config = get_render_config(theme_config)
    return render_instructions(parse(notation), config)
