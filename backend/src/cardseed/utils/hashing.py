from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict

from cardseed.core.errors import DerivationError


KDF_VERSION = "pbkdf2-sha256-v1"
PBKDF2_ITERATIONS = 1 << 16
SECRET_LENGTH = 32


class KdfConfig(BaseModel):
    """Key-stretching parameters. The defaults are the versioned scheme."""

    hash_name: str = "sha256"
    iterations: int = PBKDF2_ITERATIONS
    length: int = SECRET_LENGTH
    salt: bytes = b""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_default(self) -> bool:
        return self == DEFAULT_KDF


DEFAULT_KDF = KdfConfig()


def stretch(preimage: bytes, config: KdfConfig = DEFAULT_KDF) -> bytes:
    try:
        return hashlib.pbkdf2_hmac(
            config.hash_name,
            preimage,
            config.salt,
            config.iterations,
            dklen=config.length,
        )
    except (ValueError, OverflowError) as exc:
        raise DerivationError(f"key stretching failed: {exc}") from exc
