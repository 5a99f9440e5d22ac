"""Playback engine that replays a recorded trace under user control."""

from __future__ import annotations

import logging
from typing import Callable

from .run_types import PlaybackConfig, PlaybackState
from .scheduler import ScheduledTask, Scheduler
from .trace_types import Step, Trace
from . import constants

logger = logging.getLogger(__name__)

StepCallback = Callable[[Step, int], None]
FinishCallback = Callable[[], None]
StateCallback = Callable[[PlaybackState], None]


def clamp_speed(level: int) -> int:
    return max(constants.MIN_SPEED, min(constants.MAX_SPEED, int(level)))


class PlaybackEngine:
    """State machine driving time-based progression through a trace.

    States move ``idle -> playing -> (paused <-> playing) -> finished``;
    ``reset`` and ``load_trace`` return to ``idle`` from anywhere. Each
    observer slot holds one callback and re-registration replaces it.
    Callbacks run synchronously inside the engine's own calls.

    Calls that make no sense yet (stepping with no trace loaded, pausing
    while idle) are silent no-ops.
    """

    def __init__(self, scheduler: Scheduler, config: PlaybackConfig = PlaybackConfig()):
        self._scheduler = scheduler
        self._trace: Trace | None = None
        self._index = 0
        self._state = PlaybackState.IDLE
        self._speed = clamp_speed(config.speed)
        self._pending: ScheduledTask | None = None
        # Bumped on every cancel; a timer firing with an old token is stale.
        self._generation = 0

        self._on_step: StepCallback | None = None
        self._on_finish: FinishCallback | None = None
        self._on_state_change: StateCallback | None = None

    # ── observers ────────────────────────────────────────────────

    def on_step(self, callback: StepCallback | None) -> None:
        self._on_step = callback

    def on_finish(self, callback: FinishCallback | None) -> None:
        self._on_finish = callback

    def on_state_change(self, callback: StateCallback | None) -> None:
        self._on_state_change = callback

    # ── read-only state ──────────────────────────────────────────

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def index(self) -> int:
        return self._index

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def delay(self) -> float:
        """Seconds between timed advances at the current speed."""
        return constants.SPEED_DELAYS_MS[self._speed] / 1000

    @property
    def trace(self) -> Trace | None:
        return self._trace

    @property
    def current_step(self) -> Step | None:
        if not self._has_steps():
            return None
        return self._trace[self._index]

    # ── operations ───────────────────────────────────────────────

    def load_trace(self, trace: Trace) -> None:
        """Replace the loaded trace and rewind to its first step."""
        if len(trace) == 0:
            logger.debug("Ignoring empty trace for %s", trace.algorithm)
            return
        self._cancel_pending()
        self._trace = trace
        self._index = 0
        logger.info("Loaded %s trace with %d steps", trace.algorithm, len(trace))
        self._transition(PlaybackState.IDLE)
        self._surface(0)

    def play(self) -> None:
        if not self._has_steps():
            logger.debug("play() ignored: no trace loaded")
            return
        if self._state is PlaybackState.PLAYING:
            return
        if self._state is PlaybackState.FINISHED:
            self.reset()
        self._transition(PlaybackState.PLAYING)
        self._schedule_advance()

    def pause(self) -> None:
        if self._state is not PlaybackState.PLAYING:
            return
        self._cancel_pending()
        self._transition(PlaybackState.PAUSED)

    def step(self) -> None:
        """Advance exactly one step, leaving any running timer alone."""
        if not self._has_steps():
            logger.debug("step() ignored: no trace loaded")
            return
        if self._index < self._last_index():
            self._index += 1
            self._surface(self._index)
            if self._index == self._last_index():
                self._finish()
        elif self._state is not PlaybackState.FINISHED:
            self._finish()

    def reset(self) -> None:
        self._cancel_pending()
        self._index = 0
        self._transition(PlaybackState.IDLE)
        if self._has_steps():
            self._surface(0)

    def set_speed(self, level: int) -> None:
        """Set the speed level (clamped to 1-5); applies from the next advance."""
        self._speed = clamp_speed(level)

    # ── internals ────────────────────────────────────────────────

    def _has_steps(self) -> bool:
        return self._trace is not None and len(self._trace) > 0

    def _last_index(self) -> int:
        return len(self._trace) - 1

    def _schedule_advance(self) -> None:
        token = self._generation
        self._pending = self._scheduler.call_later(
            self.delay, lambda: self._advance(token)
        )

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _advance(self, token: int) -> None:
        if token != self._generation or self._state is not PlaybackState.PLAYING:
            logger.debug("Stale advance dropped (state=%s)", self._state.value)
            return
        self._pending = None
        if self._index < self._last_index():
            self._index += 1
            self._surface(self._index)
            # The step observer may have paused, reset or rescheduled us.
            if token != self._generation or self._state is not PlaybackState.PLAYING:
                return
        if self._index >= self._last_index():
            self._finish()
            return
        self._schedule_advance()

    def _surface(self, index: int) -> None:
        if not self._has_steps() or not 0 <= index < len(self._trace):
            return
        if self._on_step is not None:
            self._on_step(self._trace[index], index)

    def _finish(self) -> None:
        if self._state is PlaybackState.FINISHED:
            return
        self._cancel_pending()
        self._transition(PlaybackState.FINISHED)
        logger.info("Playback finished at step %d", self._index)
        if self._on_finish is not None:
            self._on_finish()

    def _transition(self, state: PlaybackState) -> None:
        if state is self._state:
            return
        logger.debug("Playback %s -> %s", self._state.value, state.value)
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)
