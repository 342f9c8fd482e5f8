"""Render every hand notation found in a document.

Works against anything that looks like a DOM: elements expose their markup as
``inner_html`` and a ``dataset`` mapping of ``data-*`` attributes, documents
expose ``query_selector_all``. Each element is rendered once; a
``processed`` flag in its dataset guards against double rendering.
"""

from typing import Iterable, MutableMapping, Optional, Protocol

from mahjong_svg.api import render
from mahjong_svg.theme import ThemeConfig

DEFAULT_SELECTOR = ".mahjong"
PROCESSED_FLAG = "processed"


class Element(Protocol):
    inner_html: str
    dataset: MutableMapping[str, str]


class Document(Protocol):
    def query_selector_all(self, selector: str) -> Iterable[Element]: ...


def run(
    nodes: Optional[Iterable[Element]] = None,
    document: Optional[Document] = None,
    query_selector: Optional[str] = DEFAULT_SELECTOR,
    theme_config: Optional[ThemeConfig] = None,
) -> int:
    """Replace the notation inside each element with its rendered SVG.

    Args:
        nodes: Elements to process. Takes precedence over ``query_selector``.
        document: Document searched with ``query_selector`` when ``nodes`` is None.
        query_selector: CSS selector for elements holding notation.
        theme_config: Theme choice and design overrides for every element.

    Returns:
        int: Number of elements rendered (already processed ones are skipped).

    Raises:
        ValueError: If there is no way to find elements.
    """
    if nodes is not None:
        to_process = nodes
    elif query_selector:
        if document is None:
            raise ValueError(
                f"No document to search with query_selector {query_selector!r}"
            )
        to_process = document.query_selector_all(query_selector)
    else:
        raise ValueError("Nodes and query_selector are both undefined")

    rendered = 0
    for element in list(to_process):
        if element.dataset.get(PROCESSED_FLAG):
            continue
        notation = element.inner_html.strip()
        element.inner_html = render(notation, theme_config)
        element.dataset[PROCESSED_FLAG] = "true"
        rendered += 1
    return rendered
