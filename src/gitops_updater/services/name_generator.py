"""Random, prefix-based names for generated branches."""

import random
import time
from typing import Optional

from src.gitops_updater.protocols import NameGeneratorProtocol

# Consonants and digits only, so generated suffixes never spell words.
ALPHANUMS = "bcdfghjklmnpqrstvwxz2456789"
SUFFIX_LENGTH = 5


class NameGenerator(NameGeneratorProtocol):
    """Appends a random suffix drawn from an explicitly supplied random source."""

    def __init__(self, rng: random.Random, length: int = SUFFIX_LENGTH) -> None:
        self._rng = rng
        self._length = length

    @classmethod
    def from_time(cls, length: int = SUFFIX_LENGTH) -> "NameGenerator":
        """Create a generator seeded from the wall clock."""
        return cls(random.Random(time.time_ns()), length=length)

    @classmethod
    def from_seed(cls, seed: Optional[int], length: int = SUFFIX_LENGTH) -> "NameGenerator":
        """Create a deterministic generator, useful for reproducible runs."""
        return cls(random.Random(seed), length=length)

    def prefixed_name(self, prefix: str) -> str:
        suffix = "".join(self._rng.choice(ALPHANUMS) for _ in range(self._length))
        return f"{prefix}{suffix}"
