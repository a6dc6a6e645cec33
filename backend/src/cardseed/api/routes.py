from __future__ import annotations

from fastapi import APIRouter, HTTPException

from cardseed.api.deps import seed_service
from cardseed.engine.models import (
    DeckReport,
    DeckRequest,
    DeriveRequest,
    SecretResponse,
    ServiceError,
)
from cardseed.engine.service import DeckRejected


router = APIRouter(prefix="/api")


def _bad_request(exc: DeckRejected) -> HTTPException:
    detail = ServiceError(code=exc.code, message=exc.message)
    return HTTPException(status_code=400, detail=detail.model_dump(mode="json"))


@router.get("/decks/standard", response_model=DeckReport)
async def standard_deck() -> DeckReport:
    return await seed_service.standard()


@router.post("/decks/inspect", response_model=DeckReport)
async def inspect_deck(request: DeckRequest) -> DeckReport:
    try:
        return await seed_service.inspect(request.deck_text)
    except DeckRejected as exc:
        raise _bad_request(exc) from exc


@router.post("/decks/derive", response_model=SecretResponse)
async def derive_secret(request: DeriveRequest) -> SecretResponse:
    try:
        return await seed_service.derive(
            request.deck_text,
            password=request.password,
            require_complete=request.require_complete,
        )
    except DeckRejected as exc:
        raise _bad_request(exc) from exc


@router.post("/decks/shuffle", response_model=DeckReport)
async def shuffle_deck() -> DeckReport:
    return await seed_service.shuffle()
