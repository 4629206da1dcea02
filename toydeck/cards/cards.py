"""Core card representation and encoding for toy decks.

A card is one byte: ``group * 16 + rank``. The rank lives in the low nibble and
the group (unknown, one of four real suits, or one of two colors) in the high
bits, so partially specified cards share the same space as real ones.
"""

from typing import Tuple

# ============================================================
# Layout
# ============================================================

STRIDE = 16  # distance between groups
STRIDE52 = 13  # ranks per suit in a standard 52-card deck

# Group indices (high bits)
_SPADES = 1
_HEARTS = 2
_DIAMONDS = 3
_CLUBS = 4
NSUITS = 4
_BLACK = 5
_WHITE = 6
NGROUPS = 7

# Ranks (low nibble)
UNKNOWN = 0
ACE = 1
TWO = 2
THREE = 3
FOUR = 4
FIVE = 5
SIX = 6
SEVEN = 7
EIGHT = 8
NINE = 9
TEN = 10
JACK = 11
KNIGHT = 12
QUEEN = 13
KING = 14
JOKER = 15
MAXRANK = 16

# Groups, already shifted so that rank + group is a card
SPADES = STRIDE * _SPADES  # 16
HEARTS = STRIDE * _HEARTS  # 32
DIAMONDS = STRIDE * _DIAMONDS  # 48
CLUBS = STRIDE * _CLUBS  # 64
BLACK = STRIDE * _BLACK  # 80
WHITE = STRIDE * _WHITE  # 96

MAXCARD = MAXRANK * NGROUPS  # 112
MINSUIT = STRIDE
MAXSUIT = MINSUIT + MAXRANK * NSUITS  # 80

UCS_OFFSET = 0x1F0A0  # PLAYING CARD BACK
UCS_SUIT = 0x2660  # BLACK SPADE SUIT

# Returned by symbol_codepoint() when no codepoint describes the card.
UNREPRESENTABLE = 0xFFFD

RANKS: Tuple[int, ...] = tuple(range(ACE, MAXRANK))
SUITS: Tuple[int, ...] = (SPADES, HEARTS, DIAMONDS, CLUBS)
COLORS: Tuple[int, ...] = (BLACK, WHITE)

INVALID_TOKEN = "XX"

# ============================================================
# Lookup tables
# ============================================================

RANK_ABBR = (
    "?",
    "A", "2", "3", "4", "5",
    "6", "7", "8", "9", "T",
    "J", "C", "Q", "K", "*",
)

SUIT_ABBR = ("?", "s", "h", "d", "c", "b", "w")

# Index order is Jack, Queen, Knight, King; it does not follow RANK_ABBR.
RANK_NAME = (
    "Unranked Card",
    "Ace", "Two", "Three", "Four", "Five",
    "Six", "Seven", "Eight", "Nine", "Ten",
    "Jack", "Queen", "Knight", "King", "Joker",
)

SUIT_NAME = ("Nothing", "Spades", "Hearts", "Diamonds", "Clubs", "Black", "White")

assert len(RANK_ABBR) == len(RANK_NAME) == MAXRANK
assert len(SUIT_ABBR) == len(SUIT_NAME) == NGROUPS


# ============================================================
# Classification
# ============================================================


def is_valid(card_code: int) -> bool:
    """Check whether the code lies inside the card space."""
    return card_code < MAXCARD


def is_real(card_code: int) -> bool:
    """Check whether the card has a concrete rank and a concrete suit.

    Jokers count as real in every group below MAXCARD, including the colors.
    """
    r = card_code % STRIDE
    return card_code > MINSUIT and (
        (card_code < MAXSUIT and r > 0) or (r == JOKER and card_code < MAXCARD)
    )


def is_part(card_code: int) -> bool:
    """Check whether the card is missing its rank or its suit, or only has a color."""
    r = card_code % STRIDE
    return card_code <= MINSUIT or (
        card_code < MAXCARD and (r == 0 or (card_code > MAXSUIT and r < JOKER))
    )


# ============================================================
# Accessors
# ============================================================


def rank(card_code: int) -> int:
    """Extract rank from encoded card (UNKNOWN for invalid codes)."""
    if card_code >= MAXCARD:
        return UNKNOWN
    return card_code % STRIDE


def suit(card_code: int) -> int:
    """Extract the real suit; colors and invalid codes give UNKNOWN."""
    group = card_code // STRIDE
    if group <= NSUITS:
        return group * STRIDE
    return UNKNOWN


def color(card_code: int) -> int:
    """Extract the color (BLACK or WHITE) from a suit or color group."""
    group = card_code // STRIDE
    if group in (_SPADES, _CLUBS, _BLACK):
        return BLACK
    if group in (_HEARTS, _DIAMONDS, _WHITE):
        return WHITE
    return UNKNOWN


# ============================================================
# 52-card ordinals
# ============================================================


def ord52(card_code: int) -> int:
    """Position of the card in a 52-card deck (suit-major), or -1.

    Knights and Jokers are not part of the 52-card deck, so Queen and King
    shift down by one to close the gap left by the Knight.
    """
    if card_code < STRIDE or card_code >= MAXSUIT:
        return -1
    r = card_code % STRIDE
    if r in (UNKNOWN, KNIGHT, JOKER):
        return -1
    if r in (QUEEN, KING):
        r -= 2
    else:
        r -= 1
    return (card_code - STRIDE) // STRIDE * STRIDE52 + r


def new_ord52(ordinal: int) -> int:
    """Encode the card at a 52-card deck position; UNKNOWN outside 0..51."""
    if ordinal < 0 or ordinal >= 52:
        return UNKNOWN
    r = ordinal % STRIDE52 + 1
    if r >= KNIGHT:
        r += 1
    return STRIDE + ordinal // STRIDE52 * STRIDE + r


# ============================================================
# Formatting
# ============================================================


def go_string(card_code: int) -> str:
    """Convert encoded card to an ASCII token like '3h', 'Ab' or '?c'."""
    if card_code >= MAXCARD:
        return INVALID_TOKEN
    return RANK_ABBR[card_code % STRIDE] + SUIT_ABBR[card_code // STRIDE]


def display_string(card_code: int) -> str:
    """Like go_string, but real suits are shown as suit glyphs ('3♡')."""
    if card_code >= MAXCARD:
        return INVALID_TOKEN
    r = RANK_ABBR[card_code % STRIDE]
    group = card_code // STRIDE
    if group == 0:
        return r + "?"
    if group == _BLACK:
        return r + "b"
    if group == _WHITE:
        return r + "w"
    return r + chr(UCS_SUIT + group - 1)


def name(card_code: int) -> str:
    """Describe the card in English, e.g. 'Three of Hearts' or 'Black Ace'."""
    if card_code >= MAXCARD:
        return "Invalid Card"
    if card_code == UNKNOWN:
        return "Unknown Card"
    group = card_code // STRIDE
    suit_name = SUIT_NAME[group]
    rank_name = RANK_NAME[card_code % STRIDE]
    if group >= _BLACK:
        return f"{suit_name} {rank_name}"
    return f"{rank_name} of {suit_name}"


def symbol_codepoint(card_code: int) -> int:
    """Codepoint from the playing cards block that best depicts the card.

    Rank-only cards use their abbreviation and suit-only cards their suit glyph.
    The block has no colored jokers, so black and white jokers borrow the
    diamonds and clubs jokers. Anything else outside the real suits is
    UNREPRESENTABLE.
    """
    if card_code == 0:
        return UCS_OFFSET
    if card_code < STRIDE:
        return ord(RANK_ABBR[card_code])
    if card_code == BLACK + JOKER:
        card_code = DIAMONDS + JOKER
    elif card_code == WHITE + JOKER:
        card_code = CLUBS + JOKER
    elif card_code >= MAXSUIT:
        return UNREPRESENTABLE
    elif card_code % STRIDE == 0:
        return UCS_SUIT + card_code // STRIDE - 1
    return card_code - STRIDE + UCS_OFFSET


def symbol(card_code: int) -> str:
    """Single-character rendering of symbol_codepoint()."""
    return chr(symbol_codepoint(card_code))
