# frictionlab/runner/history.py
"""
Chart History
=============

Bounded sliding window of chart samples built from successive states.

A sample is only appended when simulation time strictly advances, so
redraw ticks that hand over the same state twice (or a frozen, detached
state) do not duplicate rows.

Besides kinematics each sample carries:
    Ek : kinetic energy of the moving bodies [J]
    Q  : cumulative friction heat [J], the kinetic-friction work
         sum(|f * v_rel| * dt) over every sliding interface. Sticking
         interfaces have zero relative velocity and add nothing.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, asdict
from typing import Deque, List, Optional

import pandas as pd

from frictionlab.core.types import ModelType, SimulationParams, SimulationState


@dataclass(frozen=True)
class HistorySample:
    t: float
    x1: float
    x2: float
    v1: float
    v2: float
    a1: float
    a2: float
    Ek: float
    Q: float


def kinetic_energy(model, state: SimulationState, params: SimulationParams) -> float:
    ek = 0.5 * params.mass * state.v1 * state.v1
    if ModelType.parse(model) is ModelType.PLANK:
        ek += 0.5 * params.M_plank * state.v2 * state.v2
    return ek


def friction_power(model, state: SimulationState, params: SimulationParams) -> float:
    """Rate of friction heating [W] for the forces/velocities in `state`."""
    model = ModelType.parse(model)
    f = state.forces
    if model is ModelType.SINGLE:
        return abs(f.friction1 * state.v1)
    if model is ModelType.BELT:
        return abs(f.friction1 * (state.v1 - params.v_belt))
    return abs(f.friction1 * (state.v1 - state.v2)) + abs(f.friction2 * state.v2)


class SimulationHistory:
    """
    Sliding window over the most recent `maxlen` samples.

    Q keeps accumulating across the whole run even after old samples
    fall out of the window; clear() starts over.
    """

    def __init__(self, model, params: SimulationParams, maxlen: Optional[int] = 600):
        self.model = ModelType.parse(model)
        self.params = params
        self._samples: Deque[HistorySample] = deque(maxlen=maxlen)
        self._last_t: Optional[float] = None
        self._heat = 0.0

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def heat(self) -> float:
        return self._heat

    @property
    def samples(self) -> List[HistorySample]:
        return list(self._samples)

    def clear(self, params: Optional[SimulationParams] = None) -> None:
        if params is not None:
            self.params = params
        self._samples.clear()
        self._last_t = None
        self._heat = 0.0

    def record(self, state: SimulationState) -> bool:
        """Append a sample for `state`; False if time did not advance."""
        if self._last_t is not None and state.t <= self._last_t:
            return False

        if self._last_t is not None:
            self._heat += friction_power(self.model, state, self.params) * (state.t - self._last_t)
        self._last_t = state.t

        self._samples.append(
            HistorySample(
                t=state.t,
                x1=state.x1,
                x2=state.x2,
                v1=state.v1,
                v2=state.v2,
                a1=state.a1,
                a2=state.a2,
                Ek=kinetic_energy(self.model, state, self.params),
                Q=self._heat,
            )
        )
        return True

    def to_frame(self) -> pd.DataFrame:
        columns = list(HistorySample.__dataclass_fields__)
        return pd.DataFrame([asdict(s) for s in self._samples], columns=columns)


__all__ = [
    "HistorySample",
    "SimulationHistory",
    "kinetic_energy",
    "friction_power",
]
