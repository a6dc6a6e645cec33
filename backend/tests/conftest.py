from __future__ import annotations

import pytest

from cardseed.core.deck import Deck
from cardseed.engine.service import DeckSeedService
from cardseed.utils.sampling import SeededIndexSampler


@pytest.fixture
def standard_deck() -> Deck:
    return Deck.new_standard()


@pytest.fixture
def service() -> DeckSeedService:
    return DeckSeedService(SeededIndexSampler(7))
