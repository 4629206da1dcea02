"""Toy Deck

Compact one-byte playing card encoding. A card packs its rank and its group
(real suit, color, or unknown) into a single integer, and every accessor and
formatter is total over the byte range.

Main components:
- toydeck.cards: encoding constants, accessors, formatters and the Card type
- toydeck.card_utils: parsing, batch formatting and numpy ordinal tables
- toydeck.fill: 52-card symbol grid (``toydeck-fill``)
"""

__version__ = "0.1.0"

from .cards import *  # noqa: F401,F403
from .cards import __all__ as _cards_all
from .card_utils import string_to_card, format_cards, ord52_array, cards_from_ord52

__all__ = list(_cards_all) + [
    "string_to_card",
    "format_cards",
    "ord52_array",
    "cards_from_ord52",
]
