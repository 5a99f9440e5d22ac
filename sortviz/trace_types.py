"""Trace data types for step-by-step sort replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .run_types import SortStats


class Highlight(BaseModel):
    """Indices tagged by the operation a step represents.

    ``sorted`` is the cumulative sorted region at the instant of the step,
    so it never shrinks from one step to the next within a trace.
    """

    model_config = ConfigDict(frozen=True)

    comparing: frozenset[int] = Field(default_factory=frozenset, max_length=2)
    swapping: frozenset[int] = Field(default_factory=frozenset, max_length=2)
    sorted: frozenset[int] = Field(default_factory=frozenset)
    pivot: int | None = None
    current: int | None = None
    span: tuple[int, int] | None = None  # inclusive range under focus

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "comparing": sorted(self.comparing),
            "swapping": sorted(self.swapping),
            "sorted": sorted(self.sorted),
        }
        if self.pivot is not None:
            d["pivot"] = self.pivot
        if self.current is not None:
            d["current"] = self.current
        if self.span is not None:
            d["span"] = list(self.span)
        return d


NO_HIGHLIGHT = Highlight()


@dataclass(frozen=True)
class Step:
    """A single immutable snapshot of the array during a sort.

    ``values`` is a tuple copied from the working array when the step was
    recorded. ``source_line`` is a 1-based line in the algorithm's Python
    listing.
    """

    step_index: int
    values: tuple[Any, ...]
    highlight: Highlight = NO_HIGHLIGHT
    message: str = ""
    source_line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_index": self.step_index,
            "values": list(self.values),
            "highlight": self.highlight.to_dict(),
            "message": self.message,
            "source_line": self.source_line,
        }


@dataclass(frozen=True)
class Trace:
    """Complete record of one sort invocation.

    Holds every recorded step in order, from the unmodified start state to
    the terminal step in which every index is sorted.
    """

    algorithm: str
    steps: tuple[Step, ...] = ()
    stats: SortStats = field(default_factory=SortStats)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @property
    def final_step(self) -> Step:
        return self.steps[-1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "stats": self.stats.to_dict(),
            "steps": [s.to_dict() for s in self.steps],
        }
