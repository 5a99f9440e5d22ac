"""Run and playback data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class PlaybackState(str, Enum):
    """Lifecycle of a trace replay."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(frozen=True)
class PlaybackConfig:
    """Groups playback engine configuration."""

    speed: int = constants.DEFAULT_SPEED


@dataclass(frozen=True)
class SortStats:
    """Counters accumulated during a single sort invocation."""

    comparisons: int = 0
    swaps: int = 0
    steps: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "steps": self.steps,
        }

    def report(self, title: str = "") -> str:
        lines = [f"═══ {title or 'Sort'} Statistics ═══"]
        lines.append(f"  {'Comparisons':<12} {self.comparisons:>8}")
        lines.append(f"  {'Swaps':<12} {self.swaps:>8}")
        lines.append(f"  {'Steps':<12} {self.steps:>8}")
        return "\n".join(lines)
