"""Card value type: an immutable byte with the encoding's operations as methods."""

from __future__ import annotations

import operator
from typing import Union

from . import cards as _c


class Card(int):
    """One encoded card.

    ``Card`` is an ``int``, so it compares, hashes and indexes like its code.
    Adding an int to a card yields a card, which is how cards are usually
    built: ``Card(THREE) + HEARTS``. Addition wraps at 256 like a byte.
    """

    __slots__ = ()

    def __new__(cls, value: Union[int, str] = _c.UNKNOWN) -> Card:
        if isinstance(value, str):
            # Imported lazily; card_utils depends on this package.
            from ..card_utils import string_to_card

            value = string_to_card(value)
        elif isinstance(value, bool):
            raise TypeError("Card expects an int or str, got bool")
        else:
            value = operator.index(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Card code out of range 0..255: {value}")
        return super().__new__(cls, value)

    @classmethod
    def from_ord52(cls, ordinal: int) -> Card:
        """Card at a 52-card deck position (UNKNOWN outside 0..51)."""
        return cls(_c.new_ord52(ordinal))

    def __add__(self, other):
        # Codes are bytes, so arithmetic wraps around at 256.
        if isinstance(other, bool):
            return NotImplemented
        try:
            other = operator.index(other)
        except TypeError:
            return NotImplemented
        return Card((int(self) + other) & 0xFF)

    __radd__ = __add__

    def __str__(self) -> str:
        return _c.display_string(int(self))

    def __repr__(self) -> str:
        return f"Card({_c.go_string(int(self))!r})"

    def is_valid(self) -> bool:
        return _c.is_valid(int(self))

    def is_real(self) -> bool:
        return _c.is_real(int(self))

    def is_part(self) -> bool:
        return _c.is_part(int(self))

    def rank(self) -> Card:
        return Card(_c.rank(int(self)))

    def suit(self) -> Card:
        return Card(_c.suit(int(self)))

    def color(self) -> Card:
        return Card(_c.color(int(self)))

    def ord52(self) -> int:
        return _c.ord52(int(self))

    def go_string(self) -> str:
        return _c.go_string(int(self))

    def name(self) -> str:
        return _c.name(int(self))

    def symbol(self) -> str:
        return _c.symbol(int(self))

    def symbol_codepoint(self) -> int:
        return _c.symbol_codepoint(int(self))
