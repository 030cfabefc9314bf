# frictionlab/mechanics/belt.py
"""
Slider on a conveyor belt.

Same surface model as the incline but without an applied force, and
friction keys off the velocity relative to the belt. A flat belt is
theta = 0.
"""

from __future__ import annotations

import math
from dataclasses import replace

from frictionlab.core.constants import TOLERANCE
from frictionlab.core.types import ForceRecord, SimulationParams, SimulationState, Status
from frictionlab.mechanics._friction import (
    integrate,
    kinetic_friction,
    reversed_within_step,
    sign,
)


def resolve_belt(state: SimulationState, params: SimulationParams, dt: float) -> SimulationState:
    m = params.mass
    g = params.g
    theta = math.radians(params.theta)
    v_belt = params.v_belt

    N = max(0.0, m * g * math.cos(theta))
    f_max = params.mu * N
    G_par = m * g * math.sin(theta)  # pulls toward -x

    v = state.v1
    v_rel = v - v_belt

    if abs(v_rel) > TOLERANCE:
        friction = kinetic_friction(v_rel, f_max)
        a = (friction - G_par) / m
        v_next = v + a * dt
        status = Status.RELATIVE_SLIDING
        if reversed_within_step(v_rel, v_next - v_belt) and abs(G_par) <= f_max:
            friction = G_par
            a = 0.0
            v_next = v_belt
            status = Status.CO_VELOCITY
    elif abs(G_par) <= f_max:
        friction = G_par
        a = 0.0
        v_next = v_belt
        status = Status.CO_VELOCITY
    else:
        # Matching speed but the slope beats static friction.
        friction = sign(G_par) * f_max
        a = (friction - G_par) / m
        v_next = v + a * dt
        status = Status.RELATIVE_SLIDING

    x_next, s_next = integrate(state.x1, v_next, state.s1, dt)

    return replace(
        state,
        t=state.t + dt,
        x1=x_next,
        v1=v_next,
        a1=a,
        s1=s_next,
        status=status,
        forces=ForceRecord(
            friction1=friction,
            normal1=N,
            gravity1=m * g,
        ),
    )


__all__ = ["resolve_belt"]
