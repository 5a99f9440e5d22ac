"""Tests for synthetic input generation."""

import random

import pytest

from sortviz import constants
from sortviz.data_gen import (
    generate,
    nearly_sorted_values,
    random_values,
    reversed_values,
)


class _CountingRandom(random.Random):
    def __init__(self, seed):
        super().__init__(seed)
        self.samples = 0

    def sample(self, population, k, **kwargs):
        self.samples += 1
        return super().sample(population, k, **kwargs)


class TestRandomValues:
    def test_values_within_bounds(self):
        values = random_values(200, rng=random.Random(7))
        assert len(values) == 200
        assert all(constants.VALUE_MIN <= v <= constants.VALUE_MAX for v in values)

    def test_seed_is_reproducible(self):
        assert generate("random", 15, seed=3) == generate("random", 15, seed=3)


class TestReversedValues:
    def test_evenly_spaced_descending(self):
        assert reversed_values(5) == [100, 75, 51, 26, 1]

    def test_strictly_descending_for_default_size(self):
        values = reversed_values(constants.DEFAULT_ARRAY_SIZE)
        assert values == sorted(values, reverse=True)
        assert values[0] == constants.VALUE_MAX
        assert values[-1] == constants.VALUE_MIN

    def test_single_value(self):
        assert reversed_values(1) == [constants.VALUE_MIN]


class TestNearlySortedValues:
    def test_small_arrays_are_fully_sorted(self):
        values = nearly_sorted_values(5, rng=random.Random(1))
        assert values == sorted(values)

    def test_a_tenth_of_the_array_is_transposed(self):
        rng = _CountingRandom(11)
        values = nearly_sorted_values(20, rng=rng)
        ascending = sorted(values)
        displaced = sum(1 for a, b in zip(values, ascending) if a != b)

        assert rng.samples == 2
        assert displaced <= 4
        assert ascending == reversed_values(20)[::-1]


class TestGenerate:
    @pytest.mark.parametrize("kind", constants.DATA_KINDS)
    def test_every_kind_honours_size(self, kind):
        assert len(generate(kind, 12, seed=0)) == 12
        assert generate(kind, 0, seed=0) == []

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown data kind"):
            generate("zigzag", 10)

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate("random", -1)
