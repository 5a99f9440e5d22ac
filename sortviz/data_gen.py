"""Synthetic input arrays for the visualizer."""

from __future__ import annotations

import logging
import math
import random

from . import constants

logger = logging.getLogger(__name__)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")


def _evenly_spaced(size: int, low: int, high: int) -> list[int]:
    """Ascending values spread evenly from *low* to *high*, rounded half up."""
    if size == 1:
        return [low]
    step = (high - low) / (size - 1)
    return [math.floor(low + i * step + 0.5) for i in range(size)]


def random_values(
    size: int,
    low: int = constants.VALUE_MIN,
    high: int = constants.VALUE_MAX,
    rng: random.Random | None = None,
) -> list[int]:
    _check_size(size)
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(size)]


def reversed_values(
    size: int,
    low: int = constants.VALUE_MIN,
    high: int = constants.VALUE_MAX,
) -> list[int]:
    """Evenly spaced values in descending order."""
    _check_size(size)
    return _evenly_spaced(size, low, high)[::-1]


def nearly_sorted_values(
    size: int,
    low: int = constants.VALUE_MIN,
    high: int = constants.VALUE_MAX,
    rng: random.Random | None = None,
) -> list[int]:
    """Evenly spaced ascending values with ``size // 10`` random transpositions.

    Each transposition exchanges two distinct positions.
    """
    _check_size(size)
    rng = rng or random.Random()
    values = _evenly_spaced(size, low, high)
    swap_count = math.floor(size * constants.NEARLY_SORTED_SWAP_RATIO)
    for _ in range(swap_count):
        i, j = rng.sample(range(size), 2)
        values[i], values[j] = values[j], values[i]
    return values


def generate(kind: str, size: int, seed: int | None = None) -> list[int]:
    """Build an input array of *kind* (``random``, ``reversed`` or ``nearly``).

    Raises ``ValueError`` for an unknown kind or a negative size.
    """
    rng = random.Random(seed)
    logger.debug("Generating %s array of size %d (seed=%s)", kind, size, seed)
    if kind == constants.DATA_RANDOM:
        return random_values(size, rng=rng)
    if kind == constants.DATA_REVERSED:
        return reversed_values(size)
    if kind == constants.DATA_NEARLY_SORTED:
        return nearly_sorted_values(size, rng=rng)
    raise ValueError(f"Unknown data kind: {kind}")
