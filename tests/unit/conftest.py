"""Shared helpers for the sorting trace test suite."""

from __future__ import annotations

import random

from sortviz.trace_types import Trace


class Tagged:
    """A value compared by *key* only, carrying a *tag* to check stability."""

    __slots__ = ("key", "tag")

    def __init__(self, key: int, tag: str):
        self.key = key
        self.tag = tag

    def __lt__(self, other: "Tagged") -> bool:
        return self.key < other.key

    def __le__(self, other: "Tagged") -> bool:
        return self.key <= other.key

    def __gt__(self, other: "Tagged") -> bool:
        return self.key > other.key

    def __ge__(self, other: "Tagged") -> bool:
        return self.key >= other.key

    def __repr__(self) -> str:
        return f"{self.key}{self.tag}"


def seeded_arrays(count: int = 8, size: int = 12, seed: int = 1234) -> list[list[int]]:
    """Deterministic random arrays, duplicates included."""
    rng = random.Random(seed)
    return [[rng.randint(1, 20) for _ in range(size)] for _ in range(count)]


def steps_with(trace: Trace, field: str) -> list:
    """Steps whose highlight has a non-empty *field*."""
    return [s for s in trace.steps if getattr(s.highlight, field)]
