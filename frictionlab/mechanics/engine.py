# frictionlab/mechanics/engine.py
"""
Resolver Entry Points
=====================

    initialize(model, params) -> SimulationState
    step(model, state, params, dt=DT) -> SimulationState

`step` picks the resolver for the model from a closed table; each
resolver is a plain function (state, params, dt) -> state. A terminal
(detached) state is returned as-is, so repeated calls are no-ops.

The step size is fixed for a run and never derived from wall-clock
time; the resolvers' at-rest band is tuned against DT.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from frictionlab.core.constants import DT
from frictionlab.core.types import ModelType, SimulationParams, SimulationState, Status
from frictionlab.mechanics.belt import resolve_belt
from frictionlab.mechanics.incline import resolve_single
from frictionlab.mechanics.plank import resolve_plank

logger = logging.getLogger(__name__)

Resolver = Callable[[SimulationState, SimulationParams, float], SimulationState]

_RESOLVERS: Dict[ModelType, Resolver] = {
    ModelType.SINGLE: resolve_single,
    ModelType.BELT: resolve_belt,
    ModelType.PLANK: resolve_plank,
}


def initialize(model, params: SimulationParams) -> SimulationState:
    """
    Fresh state at t = 0 for a (re)started run.

    The block starts at x0 with v0. The plank centre starts at 0 with
    v0_plank (plank model only), so in the plank model x0 is the block's
    offset from the plank centre.
    """
    model = ModelType.parse(model)
    return SimulationState(
        t=0.0,
        x1=params.x0,
        v1=params.v0,
        x2=0.0,
        v2=params.v0_plank if model is ModelType.PLANK else 0.0,
        status=Status.READY,
    )


def step(model, state: SimulationState, params: SimulationParams, dt: float = DT) -> SimulationState:
    """Advance one fixed increment."""
    if state.is_terminal:
        return state

    resolver = _RESOLVERS[ModelType.parse(model)]
    nxt = resolver(state, params, dt)

    if nxt.status != state.status:
        logger.debug("t=%.3f s: %s -> %s", nxt.t, Status(state.status).value, nxt.status.value)
        if nxt.status is Status.DETACHED:
            logger.info(
                "Block left the plank at t=%.3f s (x1=%.3f m, x2=%.3f m).",
                nxt.t, nxt.x1, nxt.x2,
            )
    return nxt


__all__ = ["initialize", "step"]
