# tests/integration/test_render_integration.py

from mahjong_svg import ThemeConfig, render
from mahjong_svg.renderer.svg import SvgRenderer
from mahjong_svg.theme import DEFAULT_THEME


def test_render_default_theme() -> None:
    markup = render("1p")
    base = DEFAULT_THEME.tile_designs["base"]
    face = DEFAULT_THEME.tile_designs["1p"]
    assert markup.startswith("<div ")
    assert markup.endswith("</svg></div>")
    assert '<svg width="100%" height="62" style="display: block;">' in markup
    assert f'<image href="{base}" x="0" y="22" width="30" height="40" />' in markup
    assert f'<image href="{face}" x="0" y="22" width="30" height="40" />' in markup


def test_render_called_and_stacked_tiles() -> None:
    markup = render('1"p2p')
    assert markup.count("<image ") == 6
    assert markup.count('transform="rotate(-90)"') == 4
    face = DEFAULT_THEME.tile_designs["1p"]
    assert f'<image href="{face}" x="-62" y="0" ' in markup
    assert f'<image href="{face}" x="-30" y="0" ' in markup
    # upright tile after the stacked call starts at tile height + gap
    assert 'x="42" y="22"' in markup


def test_render_with_overrides() -> None:
    markup = render(
        "5z",
        ThemeConfig(base_url="https://cdn.example.com", tile_designs={"5z": "haku.svg"}),
    )
    assert 'href="https://cdn.example.com/haku.svg"' in markup


def test_render_garbled_notation_still_renders() -> None:
    markup = render("?? 1'''p abc")
    assert markup.count("<image ") == 2  # malformed quotes: one upright 1p
    assert "rotate" not in markup


def test_renderer_object_matches_function() -> None:
    renderer = SvgRenderer(ThemeConfig(theme="black"))
    assert renderer.render("123m") == render("123m", ThemeConfig(theme="black"))
