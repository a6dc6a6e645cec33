from __future__ import annotations

import asyncio
import logging

from cardseed.core.card import DECK_SIZE
from cardseed.core.deck import Deck
from cardseed.core.errors import CardParseError, DerivationError
from cardseed.engine.models import DeckReport, SecretResponse
from cardseed.utils.hashing import DEFAULT_KDF, KDF_VERSION, KdfConfig
from cardseed.utils.sampling import IndexSampler, SecureIndexSampler


logger = logging.getLogger(__name__)


class DeckRejected(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class DeckSeedService:
    """Async front for the deck operations, shared by the HTTP API and the CLI.

    Parse failures surface as ``DeckRejected`` carrying the parse error's code.
    Key stretching runs in a worker thread so concurrent derivations do not
    block the event loop. Deck text, passwords and secrets are never logged.
    """

    def __init__(
        self,
        sampler: IndexSampler | None = None,
        kdf: KdfConfig = DEFAULT_KDF,
    ) -> None:
        self._sampler = sampler or SecureIndexSampler()
        self._kdf = kdf

    async def standard(self) -> DeckReport:
        return self._report(Deck.new_standard())

    async def inspect(self, deck_text: str) -> DeckReport:
        deck = self._parse(deck_text)
        report = self._report(deck)
        logger.info(
            "inspected deck: %d cards, complete=%s, duplicates=%d",
            report.card_count,
            report.is_complete,
            len(report.duplicate_cards),
        )
        return report

    async def shuffle(self) -> DeckReport:
        deck = Deck.new_standard().shuffle(self._sampler)
        logger.info("shuffled a standard deck")
        return self._report(deck)

    async def derive(
        self,
        deck_text: str,
        password: str | None = None,
        require_complete: bool = True,
    ) -> SecretResponse:
        deck = self._parse(deck_text)
        if require_complete and not deck.is_complete():
            raise DeckRejected(
                "INCOMPLETE_DECK",
                f"Deck must hold all {DECK_SIZE} cards exactly once; "
                f"got {len(deck)} cards with {len(deck.duplicate_cards())} duplicated "
                f"and {len(deck.missing_cards())} missing.",
            )
        if deck.has_duplicates():
            logger.warning("deriving from a deck with duplicate cards; entropy estimate is not meaningful")

        logger.debug(
            "stretching %d-card deck: %s, %d iterations",
            len(deck),
            self._kdf.hash_name,
            self._kdf.iterations,
        )
        try:
            secret = await asyncio.to_thread(deck.derive_secret, password, self._kdf)
        except DerivationError as exc:
            raise DeckRejected(exc.code, exc.message) from exc

        return SecretResponse(
            secret_hex=secret.hex(),
            kdf_version=KDF_VERSION if self._kdf.is_default else "custom",
            iterations=self._kdf.iterations,
            entropy_bits=deck.entropy_bits(),
            used_password=password is not None,
        )

    def _parse(self, deck_text: str) -> Deck:
        try:
            return Deck.from_text(deck_text)
        except CardParseError as exc:
            logger.info("rejected deck text: %s", exc.code)
            raise DeckRejected(exc.code, exc.message) from exc

    def _report(self, deck: Deck) -> DeckReport:
        return DeckReport(
            canonical_text=deck.to_text(),
            card_count=len(deck),
            has_duplicates=deck.has_duplicates(),
            duplicate_cards=[card.to_text() for card in deck.duplicate_cards()],
            missing_cards=[card.to_text() for card in deck.missing_cards()],
            is_complete=deck.is_complete(),
            entropy_bits=deck.entropy_bits(),
        )
