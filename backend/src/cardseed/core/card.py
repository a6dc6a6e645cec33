from __future__ import annotations

from dataclasses import dataclass

from cardseed.core.errors import BadInteger, BadString
from cardseed.core.suit import Suit


SUIT_SIZE = 13
DECK_SIZE = SUIT_SIZE * 4

# Glyph for each face value; ace is the lowest face.
FACES = "A23456789TJQK"


@dataclass(frozen=True)
class Card:
    """A playing card, with ``face`` 0 (ace) through 12 (king).

    Build cards through ``from_index`` or ``from_text``. Constructing one
    directly with a face outside ``[0, 13)`` is a caller bug and trips an
    assertion the first time the card is encoded.
    """

    suit: Suit
    face: int

    @classmethod
    def ace_of_spades(cls) -> Card:
        return cls(suit=Suit.SPADES, face=0)

    @classmethod
    def from_index(cls, x: int) -> Card:
        if not 0 <= x < DECK_SIZE:
            raise BadInteger(x)
        return cls(suit=Suit.from_ordinal(x // SUIT_SIZE), face=x % SUIT_SIZE)

    @classmethod
    def from_text(cls, s: str) -> Card:
        """Parse the first two characters of ``s`` as ``[face][suit]``.

        Anything past the second character is ignored; splitting a deck into
        tokens is the caller's job.
        """
        if len(s) < 2:
            raise BadString(s)
        face = FACES.find(s[0])
        if face < 0:
            raise BadString(s)
        return cls(suit=Suit.from_code(s[1]), face=face)

    def to_index(self) -> int:
        self._check_face()
        return self.suit.ordinal * SUIT_SIZE + self.face

    def to_text(self) -> str:
        self._check_face()
        return f"{FACES[self.face]}{self.suit.code}"

    def __str__(self) -> str:
        return self.to_text()

    def _check_face(self) -> None:
        # Raised explicitly so the check survives python -O.
        if not 0 <= self.face < SUIT_SIZE:
            raise AssertionError(f"card face out of range: {self.face}")
