"""Composable API functions for recording and replaying sort traces.

Each function corresponds to a CLI workflow (--json, --stats-only, replay)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Sequence

from .algorithms import SUPPORTED_ALGORITHMS, get_algorithm
from .playback import PlaybackEngine, StepCallback
from .run_types import PlaybackConfig, SortStats
from .scheduler import AsyncioScheduler, ManualScheduler
from .trace_types import Trace
from . import constants

logger = logging.getLogger(__name__)


def record_trace(
    values: Sequence[Any], algorithm: str = constants.DEFAULT_ALGORITHM
) -> Trace:
    """Sort *values* with the named algorithm and return its trace.

    Args:
        values: Input values; left untouched.
        algorithm: Registry key (e.g. "bubble", "quick").

    Returns:
        The recorded Trace, including its SortStats.
    """
    logger.info("Recording %s trace for %d values", algorithm, len(values))
    return get_algorithm(algorithm).sort(values)


def dump_trace(trace: Trace, indent: int | None = 2) -> str:
    """Serialize a trace to JSON."""
    return json.dumps(trace.to_dict(), indent=indent, default=str)


def describe_algorithm(algorithm: str) -> dict[str, Any]:
    """Return display metadata: name, complexity and supported languages."""
    algo = get_algorithm(algorithm)
    return {
        "key": algo.KEY,
        "name": algo.NAME,
        "complexity": algo.complexity().model_dump(),
        "languages": [
            lang for lang in constants.SUPPORTED_LANGUAGES if lang in algo.SOURCE_TEXTS
        ],
    }


def compare_algorithms(
    values: Sequence[Any], algorithms: Sequence[str] = SUPPORTED_ALGORITHMS
) -> dict[str, SortStats]:
    """Sort the same input with each algorithm and collect the statistics."""
    return {key: record_trace(values, key).stats for key in algorithms}


async def play_trace(
    trace: Trace,
    speed: int = constants.DEFAULT_SPEED,
    on_step: StepCallback | None = None,
) -> PlaybackEngine:
    """Replay *trace* in real time on the running event loop.

    Returns the engine once playback reaches ``finished``.
    """
    loop = asyncio.get_running_loop()
    done: asyncio.Future[None] = loop.create_future()

    def _finished() -> None:
        if not done.done():
            done.set_result(None)

    engine = PlaybackEngine(AsyncioScheduler(loop), PlaybackConfig(speed=speed))
    engine.on_step(on_step)
    engine.on_finish(_finished)
    engine.load_trace(trace)
    if engine.trace is None:
        logger.debug("Nothing to play for empty %s trace", trace.algorithm)
        return engine
    engine.play()
    await done
    return engine


def replay_instantly(
    trace: Trace, on_step: StepCallback | None = None
) -> PlaybackEngine:
    """Replay *trace* to the end on a virtual clock, without waiting."""
    scheduler = ManualScheduler()
    engine = PlaybackEngine(scheduler)
    engine.on_step(on_step)
    engine.load_trace(trace)
    engine.play()
    scheduler.run_until_idle()
    return engine
