from __future__ import annotations

from cardseed.engine.service import DeckSeedService


seed_service = DeckSeedService()
