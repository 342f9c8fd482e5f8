# tests/integration/test_page.py

from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from mahjong_svg.api import render
from mahjong_svg.page import DEFAULT_SELECTOR, run
from mahjong_svg.theme import ThemeConfig


@dataclass
class FakeElement:
    inner_html: str
    dataset: Dict[str, str] = field(default_factory=dict)


@dataclass
class FakeDocument:
    elements: Dict[str, List[FakeElement]]
    queries: List[str] = field(default_factory=list)

    def query_selector_all(self, selector: str) -> List[FakeElement]:
        self.queries.append(selector)
        return self.elements.get(selector, [])


def test_run_renders_explicit_nodes() -> None:
    nodes = [FakeElement("  123m \n"), FakeElement("5z")]
    assert run(nodes=nodes) == 2
    assert nodes[0].inner_html == render("123m")
    assert nodes[1].inner_html == render("5z")
    assert all(node.dataset["processed"] == "true" for node in nodes)


def test_run_skips_processed_nodes() -> None:
    done = FakeElement("<div>already</div>", {"processed": "true"})
    fresh = FakeElement("1p")
    assert run(nodes=[done, fresh]) == 1
    assert done.inner_html == "<div>already</div>"
    assert fresh.inner_html == render("1p")


def test_run_is_idempotent() -> None:
    nodes = [FakeElement("1p")]
    run(nodes=nodes)
    first = nodes[0].inner_html
    assert run(nodes=nodes) == 0
    assert nodes[0].inner_html == first


def test_run_queries_document_with_default_selector() -> None:
    element = FakeElement("1s")
    document = FakeDocument({DEFAULT_SELECTOR: [element]})
    assert run(document=document) == 1
    assert document.queries == [".mahjong"]
    assert element.inner_html == render("1s")


def test_run_prefers_nodes_over_selector() -> None:
    document = FakeDocument({".hand": [FakeElement("1s")]})
    nodes = [FakeElement("2s")]
    assert run(nodes=nodes, document=document, query_selector=".hand") == 1
    assert document.queries == []


def test_run_passes_theme_config() -> None:
    theme_config = ThemeConfig(tile_designs={"1p": "https://x.test/1p.svg"})
    nodes = [FakeElement("1p")]
    run(nodes=nodes, theme_config=theme_config)
    assert 'href="https://x.test/1p.svg"' in nodes[0].inner_html


def test_run_without_nodes_or_selector_fails() -> None:
    with pytest.raises(ValueError):
        run(nodes=None, query_selector=None)
    with pytest.raises(ValueError):
        run(nodes=None, query_selector="")


def test_run_with_selector_but_no_document_fails() -> None:
    with pytest.raises(ValueError):
        run()
