"""Test the Card value type."""

import os
import sys

import numpy as np
import pytest

# Add project root to path for tests
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toydeck.cards import ACE, BLACK, CLUBS, HEARTS, JOKER, KING, MAXCARD, SPADES, THREE, UNKNOWN, WHITE, Card


class TestConstruction:
    """Test building cards from codes, strings and arithmetic."""

    def test_default_is_unknown(self):
        assert Card() == UNKNOWN
        assert Card().name() == "Unknown Card"

    def test_rank_plus_suit(self):
        card = Card(THREE) + HEARTS
        assert isinstance(card, Card)
        assert card == 35
        assert card.name() == "Three of Hearts"

    def test_suit_plus_card(self):
        card = HEARTS + Card(THREE)
        assert isinstance(card, Card), f"Expected Card, got {type(card).__name__}"
        assert card == THREE + HEARTS

    def test_from_string(self):
        assert Card("3h") == THREE + HEARTS
        assert Card("3♡") == THREE + HEARTS
        assert Card("XX") == MAXCARD

    def test_from_ord52(self):
        assert Card.from_ord52(0) == ACE + SPADES
        assert Card.from_ord52(51) == KING + CLUBS
        assert Card.from_ord52(52) == UNKNOWN
        assert isinstance(Card.from_ord52(7), Card)

    def test_from_numpy_scalar(self):
        assert Card(np.uint8(ACE + SPADES)) == ACE + SPADES
        assert Card(np.int64(THREE + HEARTS)).name() == "Three of Hearts"

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_out_of_byte_range(self, value):
        with pytest.raises(ValueError):
            Card(value)

    def test_addition_wraps_like_a_byte(self):
        card = Card(KING + CLUBS) + 200
        assert isinstance(card, Card)
        assert card == (KING + CLUBS + 200) % 256
        assert Card(250) + 10 == 4
        assert 10 + Card(250) == 4
        assert Card(3) + -5 == 254

    def test_addition_with_numpy_integers(self):
        card = Card(THREE) + np.int64(HEARTS)
        assert isinstance(card, Card), f"Expected Card, got {type(card).__name__}"
        assert card == THREE + HEARTS
        assert Card(THREE) + np.uint8(SPADES) == THREE + SPADES

    def test_addition_with_non_integers(self):
        assert Card(THREE) + 0.5 == 3.5
        assert not isinstance(Card(THREE) + 0.5, Card)
        assert not isinstance(Card(THREE) + True, Card)

    @pytest.mark.parametrize("value", [1.5, None, True, [1]])
    def test_bad_types(self, value):
        with pytest.raises(TypeError):
            Card(value)

    def test_bad_string(self):
        with pytest.raises(ValueError):
            Card("zz")


class TestBehaviour:
    """Test that Card methods mirror the encoding functions."""

    def test_str_and_repr(self):
        card = Card(THREE + HEARTS)
        assert str(card) == "3♡"
        assert repr(card) == "Card('3h')"
        assert repr(Card(200)) == "Card('XX')"

    def test_repr_round_trip(self):
        for c in range(MAXCARD):
            card = Card(c)
            assert eval(repr(card), {"Card": Card}) == card

    def test_accessors_return_cards(self):
        card = Card(ACE + BLACK)
        assert card.rank() == ACE
        assert card.suit() == UNKNOWN
        assert card.color() == BLACK
        for value in (card.rank(), card.suit(), card.color()):
            assert isinstance(value, Card)

    def test_chained_sentinels(self):
        assert Card(KING + HEARTS).suit().symbol() == "♡"
        assert Card(255).suit().name() == "Unknown Card"
        assert Card(255).rank().go_string() == "??"

    def test_classification(self):
        assert Card(ACE + SPADES).is_real()
        assert Card(WHITE + JOKER).is_real()
        assert Card(CLUBS).is_part()
        assert Card(MAXCARD - 1).is_valid()
        assert not Card(MAXCARD).is_valid()

    def test_ord52(self):
        for n in range(52):
            assert Card.from_ord52(n).ord52() == n

    def test_symbols(self):
        assert Card(WHITE + JOKER).symbol() == "\U0001F0DF"
        assert Card(BLACK + JOKER).symbol_codepoint() == 0x1F0CF
        assert Card(0).symbol() == "\U0001F0A0"

    def test_behaves_like_int(self):
        card = Card(THREE + HEARTS)
        assert card == 35
        assert hash(card) == hash(35)
        assert {35: "x"}[card] == "x"
        assert card < Card(KING + HEARTS)
