"""Notation parser: mpsz text to render instructions.

The notation is scanned once, left to right, with a small buffer of pending
rank tokens. Digits and ``X``/``Q`` push a rank, quote marks decorate the most
recent rank, and a suit letter flushes the buffer into :class:`Tile`
instructions. ``-`` emits a :class:`Space`.

Parsing is lenient: stray characters are skipped and malformed quote runs fall
back to an upright tile, so a garbled hand still produces a picture.

Examples::

    parse("123p")   # 1p, 2p, 3p upright
    parse("1p'")    # 1p sideways
    parse('5z"')    # 5z sideways, then 5z stacked on top of it
    parse("12p-3s") # 1p, 2p, Space, 3s
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Tuple

from mahjong_svg.instructions import RenderInstruction, Space, Tile
from mahjong_svg.types import (
    BACK_TILE_KEY,
    UNKNOWN_TILE_KEY,
    Orientation,
    TileKey,
)

LOGGER = logging.getLogger(__name__)

RANK_MARKERS = frozenset("0123456789XQ")
QUOTE_MARKS = frozenset("'\"")
SUIT_LETTERS = frozenset("mpszqx")
GAP_MARKER = "-"

# Rank used when a quote arrives with nothing to attach to.
ORPHAN_QUOTE_RANK = "Q"

QUOTE_ORIENTATIONS: Dict[str, Tuple[Orientation, ...]] = {
    "": (Orientation.UPRIGHT,),
    "'": (Orientation.SIDEWAYS,),
    "''": (Orientation.SIDEWAYS_TOP,),
    '"': (Orientation.SIDEWAYS, Orientation.SIDEWAYS_TOP),
}
"""Quote suffix to the orientations it expands into, in drawing order."""

FALLBACK_ORIENTATIONS: Tuple[Orientation, ...] = (Orientation.UPRIGHT,)


@dataclass(frozen=True)
class RankToken:
    """A rank marker waiting for its suit letter.

    Attributes:
        rank: ``"0"``-``"9"``, ``"X"`` or ``"Q"``.
        quotes: Quote characters seen after the rank, in order.
    """

    rank: str
    quotes: str = ""


def tile_key_for(rank: str, suit: str) -> TileKey:
    """Face key for ``rank`` finalized by ``suit``.

    ``X``/``Q`` ranks always mean back / unknown, and an ``x``/``q`` suit
    overrides whatever rank preceded it.
    """
    if rank in ("X", "Q"):
        return rank.lower()
    if suit in (BACK_TILE_KEY, UNKNOWN_TILE_KEY):
        return suit
    return f"{rank}{suit}".lower()


def orientations_for(quotes: str) -> Tuple[Orientation, ...]:
    return QUOTE_ORIENTATIONS.get(quotes, FALLBACK_ORIENTATIONS)


def finalize(pending: List[RankToken], suit: str) -> List[Tile]:
    """Turn the pending tokens into tiles for ``suit``.

    An empty buffer yields a single rankless tile: ``x`` for the literal ``x``
    suit, ``q`` for every other suit letter.
    """
    if not pending:
        key = BACK_TILE_KEY if suit == BACK_TILE_KEY else UNKNOWN_TILE_KEY
        return [Tile(tile_key=key, orientation=Orientation.UPRIGHT)]

    tiles: List[Tile] = []
    for token in pending:
        key = tile_key_for(token.rank, suit)
        tiles.extend(
            Tile(tile_key=key, orientation=orientation)
            for orientation in orientations_for(token.quotes)
        )
    return tiles


def parse(notation: str) -> Tuple[RenderInstruction, ...]:
    """Parse mpsz notation into an ordered tuple of render instructions.

    Never raises. Tokens still pending when the input ends are dropped, and
    ``-`` does not flush the pending buffer.

    Args:
        notation: Hand notation, e.g. ``"123m456p-7z'7z7z"``.

    Returns:
        Tuple[RenderInstruction, ...]: Instructions in drawing order.
    """
    result: List[RenderInstruction] = []
    pending: List[RankToken] = []

    for char in notation:
        if char in RANK_MARKERS:
            pending.append(RankToken(rank=char))
        elif char in QUOTE_MARKS:
            last = pending.pop() if pending else RankToken(rank=ORPHAN_QUOTE_RANK)
            pending.append(replace(last, quotes=last.quotes + char))
        elif char in SUIT_LETTERS:
            result.extend(finalize(pending, char))
            pending.clear()
        elif char == GAP_MARKER:
            result.append(Space())
        else:
            LOGGER.debug("ignoring character %r in notation %r", char, notation)

    if pending:
        LOGGER.debug(
            "dropping %d unfinished token(s) at end of notation %r",
            len(pending),
            notation,
        )
    return tuple(result)
