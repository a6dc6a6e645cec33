from __future__ import annotations

from enum import Enum

from cardseed.core.errors import BadCharacter, BadInteger


class Suit(str, Enum):
    SPADES = "S"
    CLUBS = "C"
    HEARTS = "H"
    DIAMONDS = "D"

    @property
    def code(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def all(cls) -> tuple[Suit, ...]:
        """Suits in canonical ordinal order, the order a standard deck is built in."""
        return _ORDER

    @classmethod
    def from_ordinal(cls, x: int) -> Suit:
        if not 0 <= x < len(_ORDER):
            raise BadInteger(x)
        return _ORDER[x]

    @classmethod
    def from_code(cls, c: str) -> Suit:
        try:
            return cls(c)
        except ValueError:
            raise BadCharacter(c) from None

    def __str__(self) -> str:
        return self.value


_ORDER: tuple[Suit, ...] = (Suit.SPADES, Suit.CLUBS, Suit.HEARTS, Suit.DIAMONDS)
