# frictionlab/mechanics/incline.py
"""
Single slider on an incline.

Positive x points up the slope. The external force F_mag acts at
F_angle above the surface, so its perpendicular part unloads the
normal force.
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


def resolve_single(state: SimulationState, params: SimulationParams, dt: float) -> SimulationState:
    m = params.mass
    g = params.g
    theta = math.radians(params.theta)
    phi = math.radians(params.F_angle)

    F_par = params.F_mag * math.cos(phi)
    F_perp = params.F_mag * math.sin(phi)

    N = max(0.0, m * g * math.cos(theta) - F_perp)
    f_max = params.mu * N
    F_drive = F_par - m * g * math.sin(theta)

    v = state.v1

    if abs(v) > TOLERANCE:
        friction = kinetic_friction(v, f_max)
        a = (F_drive + friction) / m
        v_next = v + a * dt
        status = Status.KINETIC
        # Friction alone never reverses motion: if it would carry the
        # slider through zero and static friction can hold, it stops here
        # and the step reports the static state it ends in.
        if reversed_within_step(v, v_next) and abs(F_drive) <= f_max:
            friction = -F_drive
            a = 0.0
            v_next = 0.0
            status = Status.STATIC
    elif abs(F_drive) <= f_max:
        friction = -F_drive
        a = 0.0
        v_next = 0.0
        status = Status.STATIC
    else:
        friction = -sign(F_drive) * f_max
        a = (F_drive + friction) / m
        v_next = v + a * dt
        status = Status.BREAKING_STATIC

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
            external1=params.F_mag,
        ),
    )


__all__ = ["resolve_single"]
