"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Protocol, Sequence, TypeVar

T_co = TypeVar("T_co")


class RandomSource(Protocol):
    """Minimal random interface consumed by combat formulas and policies."""

    def randint(self, a: int, b: int) -> int:
        ...

    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[T_co]) -> T_co:
        ...


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
