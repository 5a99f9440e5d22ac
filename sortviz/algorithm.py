"""Sorting algorithm contract shared by every variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict

from .trace_types import Trace
from . import constants


class Complexity(BaseModel):
    """Textbook time and space classification, declared per algorithm."""

    model_config = ConfigDict(frozen=True)

    best: str
    average: str
    worst: str
    space: str


class SortingAlgorithm(ABC):
    """Base class for traced sorting algorithms.

    Subclasses set ``KEY`` and ``NAME``, provide listings in
    ``SOURCE_TEXTS`` and map the Python listing lines their steps reference
    onto the other listings through ``LINE_MAPS``.
    """

    KEY: str = ""
    NAME: str = ""

    SOURCE_TEXTS: dict[str, str] = {}
    LINE_MAPS: dict[str, dict[int, int]] = {}

    @abstractmethod
    def sort(self, values: Sequence[Any]) -> Trace:
        """Sort a copy of *values* and return the recorded trace."""
        ...

    @abstractmethod
    def complexity(self) -> Complexity: ...

    def source_text(self, language: str) -> str:
        """Return this algorithm's listing in *language*.

        Raises ``ValueError`` if no listing exists for *language*.
        """
        text = self.SOURCE_TEXTS.get(language)
        if text is None:
            raise ValueError(f"Unsupported language for {self.NAME}: {language}")
        return text

    def source_line_for(self, language: str, line: int) -> int | None:
        """Translate a Python listing *line* to the matching line in *language*.

        Returns ``None`` when the line has no counterpart.
        """
        if language == constants.CANONICAL_LANGUAGE:
            return line
        return self.LINE_MAPS.get(language, {}).get(line)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
