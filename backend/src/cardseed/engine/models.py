from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


SERVICE_VERSION = "0.1.0"


class DeckRequest(BaseModel):
    deck_text: str

    model_config = ConfigDict(extra="forbid")


class DeriveRequest(BaseModel):
    deck_text: str
    password: str | None = None
    require_complete: bool = True

    model_config = ConfigDict(extra="forbid")


class DeckReport(BaseModel):
    canonical_text: str
    card_count: int
    has_duplicates: bool
    duplicate_cards: list[str] = Field(default_factory=list)
    missing_cards: list[str] = Field(default_factory=list)
    is_complete: bool
    entropy_bits: float

    model_config = ConfigDict(extra="forbid")


class SecretResponse(BaseModel):
    secret_hex: str
    kdf_version: str
    iterations: int
    entropy_bits: float
    used_password: bool

    model_config = ConfigDict(extra="forbid")


class ServiceError(BaseModel):
    code: str
    message: str

    model_config = ConfigDict(extra="forbid")
