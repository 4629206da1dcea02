"""Core toy deck card system."""

from .cards import (
    UNKNOWN,
    ACE,
    TWO,
    THREE,
    FOUR,
    FIVE,
    SIX,
    SEVEN,
    EIGHT,
    NINE,
    TEN,
    JACK,
    KNIGHT,
    QUEEN,
    KING,
    JOKER,
    SPADES,
    HEARTS,
    DIAMONDS,
    CLUBS,
    BLACK,
    WHITE,
    MAXCARD,
    UNREPRESENTABLE,
    RANKS,
    SUITS,
    COLORS,
    is_valid,
    is_real,
    is_part,
    rank,
    suit,
    color,
    ord52,
    new_ord52,
    go_string,
    display_string,
    name,
    symbol,
    symbol_codepoint,
)
from .card import Card

__all__ = [
    # Ranks
    "UNKNOWN",
    "ACE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    "JACK",
    "KNIGHT",
    "QUEEN",
    "KING",
    "JOKER",
    # Groups
    "SPADES",
    "HEARTS",
    "DIAMONDS",
    "CLUBS",
    "BLACK",
    "WHITE",
    # Constants
    "MAXCARD",
    "UNREPRESENTABLE",
    "RANKS",
    "SUITS",
    "COLORS",
    # Functions
    "is_valid",
    "is_real",
    "is_part",
    "rank",
    "suit",
    "color",
    "ord52",
    "new_ord52",
    "go_string",
    "display_string",
    "name",
    "symbol",
    "symbol_codepoint",
    # Value type
    "Card",
]
