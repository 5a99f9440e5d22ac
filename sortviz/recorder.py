"""Per-call accumulator of steps and counters for one sort."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .run_types import SortStats
from .trace_types import Highlight, Step, Trace

logger = logging.getLogger(__name__)


class TraceRecorder:
    """Collects the steps, comparisons and swaps of one ``sort`` call.

    A recorder is created inside ``sort`` and discarded once ``finish``
    returns the trace, so algorithm instances hold no per-call state.
    """

    def __init__(self, algorithm: str):
        self._algorithm = algorithm
        self._steps: list[Step] = []
        self._sorted: frozenset[int] = frozenset()
        self.comparisons: int = 0
        self.swaps: int = 0

    @property
    def sorted_region(self) -> frozenset[int]:
        return self._sorted

    def record(
        self,
        values: Sequence[Any],
        message: str,
        source_line: int,
        *,
        comparing: Iterable[int] = (),
        swapping: Iterable[int] = (),
        pivot: int | None = None,
        current: int | None = None,
        span: tuple[int, int] | None = None,
    ) -> Step:
        """Snapshot *values* with the given highlights and append the step."""
        step = Step(
            step_index=len(self._steps),
            values=tuple(values),
            highlight=Highlight(
                comparing=frozenset(comparing),
                swapping=frozenset(swapping),
                sorted=self._sorted,
                pivot=pivot,
                current=current,
                span=span,
            ),
            message=message,
            source_line=source_line,
        )
        self._steps.append(step)
        return step

    def compare(self) -> None:
        self.comparisons += 1

    def swap(self, values: list[Any], i: int, j: int) -> None:
        """Exchange ``values[i]`` and ``values[j]`` in place and count it."""
        values[i], values[j] = values[j], values[i]
        self.swaps += 1

    def mark_sorted(self, indices: Iterable[int]) -> None:
        """Grow the cumulative sorted region; it never shrinks."""
        self._sorted = self._sorted | frozenset(indices)

    def finish(self, values: Sequence[Any], message: str, source_line: int) -> Trace:
        """Record the terminal all-sorted step and freeze the trace."""
        self.mark_sorted(range(len(values)))
        self.record(values, message, source_line)
        stats = SortStats(
            comparisons=self.comparisons,
            swaps=self.swaps,
            steps=len(self._steps),
        )
        logger.info(
            "%s recorded %d steps (%d comparisons, %d swaps) for %d values",
            self._algorithm,
            stats.steps,
            stats.comparisons,
            stats.swaps,
            len(values),
        )
        return Trace(algorithm=self._algorithm, steps=tuple(self._steps), stats=stats)
