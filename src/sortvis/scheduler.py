"""
Playback scheduler: the run / pause / step / stop state machine that pulls
steps from the active producer on a timer and applies them to the
observable state.

States:
    IDLE      --start()-->  RUNNING
    IDLE      --step()--->  PAUSED (one step applied)
    RUNNING   --pause()-->  PAUSED
    PAUSED    --start()-->  RUNNING (resumes the same producer)
    RUNNING   --producer exhausted-->  FINISHED
    any       --stop()--->  IDLE
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .arrays import generate_array, reshuffle
from .catalog import CATALOG, lookup
from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_ARRAY_SIZE,
    DEFAULT_INTERVAL_MS,
    clamp_interval,
    validate_array_size,
)
from .metrics import Metrics
from .steps import apply_step

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


class TimerBackend(Protocol):
    """Invokes a callback once after ``interval_ms``, cancelable before it fires."""

    def schedule(self, interval_ms, callback): ...

    def cancel(self, handle): ...


@dataclass(frozen=True)
class PlaybackSnapshot:
    state: PlaybackState
    algorithm_id: str
    array: tuple
    highlighted: tuple
    steps: int
    comparisons: int
    accesses: int
    interval_ms: int

    @property
    def finished(self):
        return self.state is PlaybackState.FINISHED


class PlaybackScheduler:
    def __init__(
        self,
        timer: TimerBackend,
        algorithm_id=DEFAULT_ALGORITHM,
        array_size=DEFAULT_ARRAY_SIZE,
        interval_ms=DEFAULT_INTERVAL_MS,
        catalog=CATALOG,
        rng=None,
        values=None,
    ):
        self.timer = timer
        self.catalog = catalog
        self.rng = rng
        self.descriptor = lookup(algorithm_id, catalog)
        self.interval_ms = clamp_interval(interval_ms)

        if values is None:
            self.array_size = validate_array_size(array_size)
            values = generate_array(self.array_size, rng)
        else:
            values = tuple(values)
            self.array_size = validate_array_size(len(values))
        # The array every fresh session starts from
        self.source = tuple(values)
        self.array = self.source
        self.highlighted = ()
        self.state = PlaybackState.IDLE
        self.metrics = Metrics()

        self._producer = None
        self._timer_handle = None
        # Bumped on every cancellation; callbacks carrying an old token are ignored
        self._tick_token = 0

        self._step_listeners = [self.metrics.record]
        self._change_listeners = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def add_listener(self, callback):
        """Call ``callback(step)`` after each applied step."""
        self._step_listeners.append(callback)

    def add_change_listener(self, callback):
        """Call ``callback(scheduler)`` after every observable change."""
        self._change_listeners.append(callback)

    def _notify(self):
        for callback in self._change_listeners:
            callback(self)

    def snapshot(self):
        return PlaybackSnapshot(
            state=self.state,
            algorithm_id=self.descriptor.id,
            array=self.array,
            highlighted=self.highlighted,
            steps=self.metrics.steps,
            comparisons=self.metrics.comparisons,
            accesses=self.metrics.accesses,
            interval_ms=self.interval_ms,
        )

    @property
    def algorithm_id(self):
        return self.descriptor.id

    @property
    def has_session(self):
        return self._producer is not None

    # ------------------------------------------------------------------
    # Playback operations
    # ------------------------------------------------------------------
    def start(self):
        if self.state is PlaybackState.RUNNING:
            return
        if self._producer is None:
            self._open_session()
        self._set_state(PlaybackState.RUNNING)
        # First step is applied right away, the rest on the timer
        self._cancel_tick()
        self._advance()

    def pause(self):
        if self.state is not PlaybackState.RUNNING:
            return
        self._cancel_tick()
        self._set_state(PlaybackState.PAUSED)
        self._notify()

    def step(self):
        """Apply exactly one step now. Returns the step, or None when the run ended."""
        if self._producer is None:
            self._open_session()
            if self.state is not PlaybackState.RUNNING:
                self._set_state(PlaybackState.PAUSED)
        step = self._pull_and_apply()
        self._notify()
        return step

    def stop(self):
        self._cancel_tick()
        self._producer = None
        self.highlighted = ()
        self.array = self.source
        self._set_state(PlaybackState.IDLE)
        self._notify()

    def set_speed(self, interval_ms):
        """Change the interval used for the next scheduling decision."""
        self.interval_ms = clamp_interval(interval_ms)
        self._notify()

    def set_algorithm(self, algorithm_id):
        descriptor = lookup(algorithm_id, self.catalog)
        self.stop()
        self.descriptor = descriptor
        self.metrics.reset()
        logger.debug("Algorithm set to %s", descriptor.id)
        self._notify()

    def set_array_size(self, size):
        self.array_size = validate_array_size(size)
        self.regenerate()

    def regenerate(self):
        """Replace the source array with a fresh random one."""
        self.stop()
        self._replace_source(generate_array(self.array_size, self.rng))

    def reshuffle(self):
        """Replace the source array with a random permutation of itself."""
        self.stop()
        self._replace_source(reshuffle(self.source, self.rng))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _replace_source(self, values):
        self.source = tuple(values)
        self.array = self.source
        self.metrics.reset()
        self._notify()

    def _set_state(self, state):
        if state is not self.state:
            logger.debug("Playback %s -> %s", self.state.value, state.value)
        self.state = state

    def _open_session(self):
        # May raise a precondition error; the state is left untouched then
        producer = self.descriptor.create_producer(self.source, rng=self.rng)
        self._producer = producer
        self.array = self.source
        self.highlighted = ()
        self.metrics.reset()
        logger.debug("Opened session for %s on %d values", self.descriptor.id, len(self.source))

    def _pull_and_apply(self):
        step = self._producer.next()
        if step is None:
            self._finish()
            return None
        self.array = apply_step(self.array, step)
        self.highlighted = step.indices
        for callback in self._step_listeners:
            callback(step)
        return step

    def _finish(self):
        self._cancel_tick()
        logger.info(
            "%s finished after %d steps (%d comparisons, %d accesses)",
            self.descriptor.display_name,
            self.metrics.steps,
            self.metrics.comparisons,
            self.metrics.accesses,
        )
        self._producer = None
        self.highlighted = ()
        self._set_state(PlaybackState.FINISHED)

    def _schedule_tick(self):
        self._cancel_tick()
        token = self._tick_token
        self._timer_handle = self.timer.schedule(self.interval_ms, lambda: self._on_tick(token))

    def _cancel_tick(self):
        self._tick_token += 1
        if self._timer_handle is not None:
            self.timer.cancel(self._timer_handle)
            self._timer_handle = None

    def _on_tick(self, token):
        if token != self._tick_token or self.state is not PlaybackState.RUNNING:
            return
        self._timer_handle = None
        self._advance()

    def _advance(self):
        try:
            self._pull_and_apply()
        except Exception:
            # Leave a resumable session behind; start() picks up from here
            self._cancel_tick()
            self._set_state(PlaybackState.PAUSED)
            self._notify()
            raise
        if self.state is PlaybackState.RUNNING:
            self._schedule_tick()
        self._notify()
