from __future__ import annotations

import random
from typing import Protocol


class IndexSampler(Protocol):
    def sample_without_replacement(self, n: int, k: int) -> list[int]:
        """Return ``k`` distinct indices from ``range(n)`` in random order."""
        ...


class SecureIndexSampler:
    """Samples from the operating system's CSPRNG."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def sample_without_replacement(self, n: int, k: int) -> list[int]:
        return self._rng.sample(range(n), k)


class SeededIndexSampler:
    """Reproducible sampler for tests. Never use it to generate a real secret."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def sample_without_replacement(self, n: int, k: int) -> list[int]:
        return self._rng.sample(range(n), k)
