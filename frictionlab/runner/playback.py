# frictionlab/runner/playback.py
"""
Interactive Playback
====================

Pieces an animation front end needs around the resolver:

- start_ticker / cancel : a recurring background tick with an explicit
  TickHandle. Nothing is kept at module level; whoever starts a ticker
  owns the handle that stops it.
- PlaybackDriver        : owns one run (model, params, state, history).
  Each frame advances `steps_per_frame` fixed steps; playback speed is
  changed by the number of steps per frame, never by the step size.
  Editing parameters always goes through reset().
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from frictionlab.config import validate_params
from frictionlab.core.constants import DT
from frictionlab.core.types import ModelType, SimulationParams, SimulationState
from frictionlab.mechanics import CriticalForces, analyze_critical_force, initialize, step
from frictionlab.runner.history import SimulationHistory

logger = logging.getLogger(__name__)


# ============================================================
# Ticker
# ============================================================

class TickHandle:
    """
    Token for one running ticker.

    ticks   : number of completed callback invocations
    running : True until cancelled or the callback asked to stop
    """

    def __init__(self, interval_s: float):
        self.interval_s = interval_s
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the ticker thread exits; False on timeout."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()


def start_ticker(callback: Callable[[], Optional[bool]], interval_s: float) -> TickHandle:
    """
    Call `callback` every `interval_s` seconds on a background thread.

    The callback may return False to stop the ticker itself.
    """
    if interval_s <= 0.0:
        raise ValueError("interval_s must be positive.")

    handle = TickHandle(interval_s)

    def _loop() -> None:
        while not handle._stop.wait(interval_s):
            try:
                keep_going = callback()
            except Exception:
                logger.exception("Tick callback failed; stopping ticker.")
                handle._stop.set()
                raise
            handle.ticks += 1
            if keep_going is False:
                handle._stop.set()

    handle._thread = threading.Thread(target=_loop, name="frictionlab-ticker", daemon=True)
    handle._thread.start()
    return handle


def cancel(handle: TickHandle, timeout: Optional[float] = 1.0) -> None:
    """Stop a ticker. Safe to call more than once, or from the tick itself."""
    handle._stop.set()
    if handle._thread is not None and handle._thread is not threading.current_thread():
        handle._thread.join(timeout)


# ============================================================
# Driver
# ============================================================

class PlaybackDriver:
    """
    One interactive run: model + params + current state + chart history.

    critical : CriticalForces for the plank model (re-analysed on every
               reset), None for the other models.
    """

    def __init__(
        self,
        model,
        params: SimulationParams,
        steps_per_frame: int = 1,
        history_size: Optional[int] = 600,
        dt: float = DT,
    ):
        if steps_per_frame < 1:
            raise ValueError("steps_per_frame must be >= 1.")
        self.model = ModelType.parse(model)
        self.steps_per_frame = int(steps_per_frame)
        self.dt = dt
        self._lock = threading.Lock()
        self.history = SimulationHistory(self.model, params, maxlen=history_size)
        self.params = params
        self.state: SimulationState
        self.critical: Optional[CriticalForces] = None
        self.reset(params)

    def reset(self, params: Optional[SimulationParams] = None) -> SimulationState:
        """Back to t = 0, optionally with new parameters."""
        if params is not None:
            validate_params(self.model, params)
        with self._lock:
            if params is not None:
                self.params = params
            self.state = initialize(self.model, self.params)
            self.history.clear(self.params)
            self.history.record(self.state)
            self.critical = (
                analyze_critical_force(self.params) if self.model is ModelType.PLANK else None
            )
            return self.state

    @property
    def finished(self) -> bool:
        return self.state.is_terminal

    def advance_frame(self) -> SimulationState:
        """Run one frame's worth of fixed steps and record them."""
        with self._lock:
            state = self.state
            for _ in range(self.steps_per_frame):
                if state.is_terminal:
                    break
                state = step(self.model, state, self.params, self.dt)
                self.history.record(state)
            self.state = state
            return state

    def _tick(self) -> bool:
        return not self.advance_frame().is_terminal

    def play(self, interval_s: float = DT) -> TickHandle:
        """Advance one frame every `interval_s` until cancelled or detached."""
        logger.debug("Starting playback of %s model every %.3f s.", self.model.value, interval_s)
        return start_ticker(self._tick, interval_s)


__all__ = ["TickHandle", "start_ticker", "cancel", "PlaybackDriver"]
