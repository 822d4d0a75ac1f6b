# wp_nav/runtime/rng.py
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np

_MASK32 = 0xFFFFFFFF


def _word(part: object) -> int:
    """Entropy word for a stream name or key part: ints are masked, anything else hashed."""
    if isinstance(part, (int, np.integer)):
        return int(part) & _MASK32
    text = part if isinstance(part, str) else repr(part)
    return crc32(text.encode("utf-8")) & _MASK32


@dataclass(frozen=True)
class RNGKey:
    """Stream name plus optional parts (grid dimensions, trial index)."""

    stream: str
    words: tuple[int, ...]

    @classmethod
    def of(cls, stream: str, *parts: object) -> RNGKey:
        return cls(stream=stream, words=(_word(stream), *(_word(p) for p in parts)))


class RNGRegistry:
    """
    Seeded numpy Generators for generated worlds, one per key.

    A generator is seeded from [seed, scenario, *key.words] only, so the
    obstacle layout for one grid never depends on which other grids were
    drawn before it.
    """

    def __init__(self, seed: int, *, scenario: str | int = 0):
        self.seed = seed & _MASK32
        self.scenario = _word(str(scenario))

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        entropy = np.random.SeedSequence([self.seed, self.scenario, *key.words])
        return np.random.Generator(np.random.PCG64(entropy))

    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey.of(name))

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        return self.generator(RNGKey.of(name, *parts))

    def trials(self, name: str, count: int) -> list[np.random.Generator]:
        """One independent generator per trial index, e.g. for batches of random grids."""
        return [self.substream(name, i) for i in range(count)]
