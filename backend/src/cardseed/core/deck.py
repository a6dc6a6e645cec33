from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cardseed.core.card import DECK_SIZE, Card
from cardseed.utils.hashing import DEFAULT_KDF, KdfConfig, stretch
from cardseed.utils.sampling import IndexSampler, SecureIndexSampler


@dataclass(frozen=True)
class Deck:
    """An ordered run of cards, in the order they were drawn.

    Parsing accepts any number of cards, duplicates included. Use
    ``has_duplicates`` or ``is_complete`` before trusting ``entropy_bits``.
    """

    cards: tuple[Card, ...] = ()

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        object.__setattr__(self, "cards", tuple(cards))

    @classmethod
    def new_standard(cls) -> Deck:
        """Ace to king of spades, clubs, hearts, then diamonds."""
        return cls(Card.from_index(i) for i in range(DECK_SIZE))

    @classmethod
    def from_text(cls, s: str) -> Deck:
        return cls(Card.from_text(token) for token in s.split())

    def to_text(self) -> str:
        return " ".join(card.to_text() for card in self.cards)

    def has_duplicates(self) -> bool:
        return len(set(self.cards)) != len(self.cards)

    def duplicate_cards(self) -> list[Card]:
        seen: set[Card] = set()
        repeated: list[Card] = []
        for card in self.cards:
            if card in seen and card not in repeated:
                repeated.append(card)
            seen.add(card)
        return repeated

    def missing_cards(self) -> list[Card]:
        present = set(self.cards)
        return [card for card in Deck.new_standard() if card not in present]

    def is_complete(self) -> bool:
        return len(self.cards) == DECK_SIZE and not self.has_duplicates()

    def shuffle(self, sampler: IndexSampler | None = None) -> Deck:
        """Return a uniformly shuffled standard deck.

        The result always holds the 52 standard cards whatever this deck
        contains, and this deck is left as it is.
        """
        sampler = sampler or SecureIndexSampler()
        standard = Deck.new_standard().cards
        order = sampler.sample_without_replacement(DECK_SIZE, DECK_SIZE)
        return Deck(standard[i] for i in order)

    def entropy_bits(self) -> float:
        """Bits of Shannon entropy in a uniform shuffle of this many cards.

        This is log2(n!) and says nothing about whether the cards are distinct
        or were actually shuffled well; check ``has_duplicates`` first.
        """
        return math.fsum(math.log2(k) for k in range(2, len(self.cards) + 1))

    def preimage(self, password: str | None = None) -> bytes:
        text = self.to_text()
        if password is not None:
            text = f"{text}:{password}"
        return text.encode("utf-8")

    def derive_secret(
        self,
        password: str | None = None,
        config: KdfConfig = DEFAULT_KDF,
    ) -> bytes:
        """Stretch the canonical text, plus ``:password`` if given, into a secret.

        With the default config this is PBKDF2-HMAC-SHA256 over an empty salt
        at 2**16 iterations, giving 32 bytes.
        """
        return stretch(self.preimage(password), config)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        return self.to_text()
