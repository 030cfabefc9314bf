# frictionlab/runner/batch.py
"""
Batch Runner
============

Runs one configuration to completion with no UI in the loop:

    run_simulation(cfg: RunConfig) -> RunResult

which returns:
    - df          : one row per fixed step (t = 0 included)
    - events      : status changes, plus BELT_END when a belt slider
                    passes the end of the belt
    - final_state : last SimulationState
    - critical    : CriticalForces (plank model only)

The run stops at t_max_s or at the first terminal (detached) state.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from frictionlab.config import RunConfig, validate_params
from frictionlab.core.types import ModelType, SimulationState, Status
from frictionlab.mechanics import CriticalForces, analyze_critical_force, initialize, step
from frictionlab.runner.history import friction_power, kinetic_energy

logger = logging.getLogger(__name__)


# ============================================================
# Results
# ============================================================

@dataclass
class RunEvent:
    t_s: float
    label: str
    details: Dict[str, Any]


@dataclass
class RunResult:
    df: pd.DataFrame
    events: List[RunEvent]
    final_state: SimulationState
    critical: Optional[CriticalForces]
    meta: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Summary without the full time series."""
        return {
            "n_steps": int(len(self.df)),
            "final_state": self.final_state.to_dict(),
            "critical": self.critical.to_dict() if self.critical is not None else None,
            "events": [e.__dict__ for e in self.events],
            "meta": self.meta,
            "columns": list(self.df.columns),
        }


# ============================================================
# Runner
# ============================================================

def _event_label(status) -> str:
    return Status(status).value.upper().replace(" ", "_").replace("-", "_")


def run_simulation(cfg: RunConfig) -> RunResult:
    model = cfg.model
    params = cfg.params
    dt = cfg.dt_s

    validate_params(model, params)

    # Round so that e.g. 1.0 / 0.016 does not lose the last step.
    n_steps = int(math.floor(cfg.t_max_s / dt + 1e-9))
    logger.info("Running %s model for %d steps (dt=%.4f s).", model.value, n_steps, dt)

    rows: List[Dict[str, Any]] = []
    events: List[RunEvent] = []

    state = initialize(model, params)
    heat = 0.0
    passed_belt_end = False

    def record(s: SimulationState) -> None:
        row = s.to_dict()
        row["Ek"] = kinetic_energy(model, s, params)
        row["Q"] = heat
        rows.append(row)

    record(state)

    for _ in range(n_steps):
        prev = state
        state = step(model, prev, params, dt)
        if state is prev:
            break
        heat += friction_power(model, state, params) * dt

        if state.status != prev.status:
            events.append(RunEvent(state.t, _event_label(state.status), {
                "from": Status(prev.status).value,
                "x1": state.x1,
                "v1": state.v1,
                "x2": state.x2,
                "v2": state.v2,
            }))
            logger.debug("Event %s at t=%.3f s.", events[-1].label, state.t)

        if (
            model is ModelType.BELT
            and not passed_belt_end
            and params.belt_length > 0.0
            and state.x1 >= params.belt_length
        ):
            passed_belt_end = True
            events.append(RunEvent(state.t, "BELT_END", {"x1": state.x1, "v1": state.v1}))

        record(state)

        if state.is_terminal:
            break

    df = pd.DataFrame(rows)
    critical = analyze_critical_force(params) if model is ModelType.PLANK else None

    meta: Dict[str, Any] = {
        "model": model.value,
        "params": params.to_dict(),
        "dt_s": dt,
        "t_max_s": cfg.t_max_s,
        "t_end_s": float(state.t),
        "terminal": state.is_terminal,
        "max_speed_block": float(np.max(np.abs(df["v1"].to_numpy()))),
        "heat_J": heat,
    }

    logger.info("Finished at t=%.3f s with status %r.", state.t, Status(state.status).value)
    return RunResult(df=df, events=events, final_state=state, critical=critical, meta=meta)


__all__ = ["RunEvent", "RunResult", "run_simulation"]
