"""Text presentation adapters that consume surfaced steps."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TextIO

from .algorithm import SortingAlgorithm
from .trace_types import Step

logger = logging.getLogger(__name__)

# Marker precedence: the first matching role wins.
MARK_SWAPPING = "!"
MARK_COMPARING = "?"
MARK_PIVOT = "P"
MARK_CURRENT = "*"
MARK_SORTED = "."

LINE_MARKER = ">>"


class PresentationError(RuntimeError):
    """A rendering target the adapter needs is missing."""


def _marker(step: Step, index: int) -> str:
    hl = step.highlight
    if index in hl.swapping:
        return MARK_SWAPPING
    if index in hl.comparing:
        return MARK_COMPARING
    if index == hl.pivot:
        return MARK_PIVOT
    if index == hl.current:
        return MARK_CURRENT
    if index in hl.sorted:
        return MARK_SORTED
    return " "


def format_values(step: Step) -> str:
    """Render the step's values on one line, each followed by its role marker."""
    return " ".join(f"{v}{_marker(step, i)}" for i, v in enumerate(step.values))


def format_step(step: Step, index: int | None = None) -> str:
    position = step.step_index if index is None else index
    return f"[{position:>4}] {format_values(step)}  | {step.message}"


class Renderer(ABC):
    """Anything that can present a surfaced step."""

    @abstractmethod
    def render(self, step: Step, index: int) -> None: ...


class TextRenderer(Renderer):
    """Writes one formatted line per step to a text stream."""

    def __init__(self, stream: TextIO | None):
        if stream is None:
            raise PresentationError("No output stream to render steps into")
        self._stream = stream

    def render(self, step: Step, index: int) -> None:
        self._stream.write(format_step(step, index) + "\n")
        self._stream.flush()


class CodeHighlighter(Renderer):
    """Shows an algorithm listing with the executing line marked."""

    def __init__(self, algorithm: SortingAlgorithm, language: str, stream: TextIO | None):
        if stream is None:
            raise PresentationError("No output stream to display code into")
        self._algorithm = algorithm
        self._language = language
        self._lines = algorithm.source_text(language).splitlines()
        self._stream = stream

    @property
    def language(self) -> str:
        return self._language

    def highlight(self, source_line: int | None) -> str:
        """Return the listing with *source_line* (Python numbering) marked."""
        target = None
        if source_line is not None:
            target = self._algorithm.source_line_for(self._language, source_line)
            if target is None:
                logger.debug(
                    "No %s line for %s line %d", self._language, self._algorithm.NAME, source_line
                )
        width = len(str(len(self._lines)))
        out = []
        for number, text in enumerate(self._lines, start=1):
            mark = LINE_MARKER if number == target else " " * len(LINE_MARKER)
            out.append(f"{mark} {number:>{width}} {text}")
        return "\n".join(out)

    def render(self, step: Step, index: int) -> None:
        self._stream.write(self.highlight(step.source_line) + "\n\n")
        self._stream.flush()
