"""Card parsing, batch formatting and numpy ordinal tables."""

from typing import Iterable, List

import numpy as np

from .cards import cards as _c

# ============================================================
# Parsing
# ============================================================

_RANK_FROM_ABBR = {abbr: r for r, abbr in enumerate(_c.RANK_ABBR)}
_GROUP_FROM_ABBR = {abbr: g for g, abbr in enumerate(_c.SUIT_ABBR)}
# Real-suit glyphs as produced by display_string()
for _group in range(1, _c.NSUITS + 1):
    _GROUP_FROM_ABBR[chr(_c.UCS_SUIT + _group - 1)] = _group


def string_to_card(card_str: str) -> int:
    """Parse a token like '3h', '3♡', '?c', 'Ab' or 'XX' into an encoded card.

    Abbreviations are case-sensitive: 'C' is the Knight rank, 'c' is Clubs.
    """
    if card_str == _c.INVALID_TOKEN:
        return _c.MAXCARD
    if len(card_str) != 2:
        raise ValueError(f"Invalid card format: {card_str!r}")

    rank_char, group_char = card_str
    try:
        r = _RANK_FROM_ABBR[rank_char]
        group = _GROUP_FROM_ABBR[group_char]
    except KeyError:
        raise ValueError(f"Invalid card: {card_str!r}")
    return group * _c.STRIDE + r


def strings_to_cards(card_strings: Iterable[str]) -> List[int]:
    """Convert list of card strings to encoded cards."""
    return [string_to_card(card_str) for card_str in card_strings]


# ============================================================
# Formatting
# ============================================================

FORMATTERS = {
    "abbr": _c.go_string,
    "display": _c.display_string,
    "name": _c.name,
    "symbol": _c.symbol,
}


def cards_to_strings(cards: Iterable[int], style: str = "abbr") -> List[str]:
    """Render each card with one of the FORMATTERS styles."""
    try:
        fmt = FORMATTERS[style]
    except KeyError:
        raise ValueError(f"Unknown card style {style!r}, expected one of {sorted(FORMATTERS)}")
    return [fmt(int(card)) for card in cards]


def format_cards(cards: Iterable[int], style: str = "abbr") -> str:
    """Format cards for display, space separated."""
    return " ".join(cards_to_strings(cards, style))


# ============================================================
# Ordinal lookup tables
# ============================================================

# ord52() for every byte value, -1 where undefined
CARD_TO_ORD52 = np.array([_c.ord52(c) for c in range(256)], dtype=np.int16)

# new_ord52() for every deck position
ORD52_TO_CARD = np.array([_c.new_ord52(n) for n in range(52)], dtype=np.uint8)

CARD_TO_ORD52.flags.writeable = False
ORD52_TO_CARD.flags.writeable = False


def _as_int_array(values) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size == 0:
        return arr.astype(np.int64)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected integer values, got dtype {arr.dtype}")
    return arr.astype(np.int64)


def ord52_array(cards) -> np.ndarray:
    """Vectorised ord52() over an array-like of card codes."""
    codes = _as_int_array(cards)
    if codes.size and (codes.min() < 0 or codes.max() > 0xFF):
        raise ValueError("Card codes must be in range 0..255")
    return CARD_TO_ORD52[codes]


def cards_from_ord52(ords) -> np.ndarray:
    """Vectorised new_ord52(); positions outside 0..51 become UNKNOWN."""
    ords = _as_int_array(ords)
    in_deck = (ords >= 0) & (ords < 52)
    out = np.full(ords.shape, _c.UNKNOWN, dtype=np.uint8)
    out[in_deck] = ORD52_TO_CARD[ords[in_deck]]
    return out
