# frictionlab/mechanics/plank.py
"""
Block on a Plank on the Ground
==============================

Two bodies, two friction interfaces:

    f1 : block-plank friction, acting on the block (-f1 acts on the plank)
    f2 : plank-ground friction, acting on the plank

x1 is the block position and x2 the plank centre, both along the
ground; the plank is horizontal (theta is not used here).

Per step
--------
1. Ground. If the plank is moving (|v2| > TOLERANCE) ground friction is
   kinetic and opposes v2. Only the plank's own velocity decides this,
   never an average of both bodies. If the plank is at rest, static
   ground friction answers the horizontal load the plank carries: the
   sum of both applied forces when the pair moves as one, or
   F_plank - f1 when the block slides on it. Past f2_max it saturates.
   This deliberately departs from the simpler rule that answers
   F_block + F_plank in both cases: a sliding block only passes f1 to
   the plank, so that rule would let a weak drag creep a heavy plank.
2. Interface sliding (|v1 - v2| > TOLERANCE): f1 is kinetic, the bodies
   accelerate independently.
3. Interface sticking: assume a common acceleration
       a_co = (F_block + F_plank + f2) / (m + M)
   and back-solve the static friction the block needs,
       f1_req = m * a_co - F_block.
   Within f1_max the pair moves together; otherwise static friction
   breaks, f1 saturates with the sign of f1_req, and step 2's equations
   apply.
4. After integration, a relative displacement beyond L/2 (+ margin)
   detaches the block for good.

Sticking events
---------------
One step of kinetic friction changes a velocity by mu*g*DT, which is
much wider than the rest band. So a relative velocity can jump across
zero without ever landing inside it. When kinetic friction would
reverse the block-plank slip, the step is redone as a sticking step
from the momentum-weighted common velocity. When ground friction would
reverse the plank while the static ground limit can hold it, the plank
stops. While sticking, both bodies share one velocity exactly.
"""

from __future__ import annotations

from dataclasses import replace
from typing import NamedTuple, Optional, Tuple

from frictionlab.core.constants import DETACH_MARGIN, STATIC_SLACK, TOLERANCE
from frictionlab.core.types import ForceRecord, SimulationParams, SimulationState, Status
from frictionlab.mechanics._friction import (
    integrate,
    kinetic_friction,
    reversed_within_step,
    sign,
    static_friction,
)


class _Resolution(NamedTuple):
    a1: float
    a2: float
    f1: float
    f2: float
    v1: float  # next velocities
    v2: float
    status: Status


def resolve_plank(state: SimulationState, params: SimulationParams, dt: float) -> SimulationState:
    m = params.mass
    M = params.M_plank
    g = params.g
    F1 = params.F_block
    F2 = params.F_plank

    N1 = max(0.0, m * g)
    N2 = max(0.0, (m + M) * g)
    f1_max = params.mu_block * N1
    f2_max = params.mu_ground * N2

    v1 = state.v1
    v2 = state.v2
    v_rel = v1 - v2
    plank_moving = abs(v2) > TOLERANCE

    def ground(load: float) -> float:
        if plank_moving:
            return kinetic_friction(v2, f2_max)
        return static_friction(load, f2_max)

    def sliding(f1: float, status: Status) -> _Resolution:
        f2 = ground(F2 - f1)
        a1 = (F1 + f1) / m
        a2 = (F2 - f1 + f2) / M
        v1n = v1 + a1 * dt
        v2n = v2 + a2 * dt
        if plank_moving and reversed_within_step(v2, v2n) and abs(F2 - f1) <= f2_max:
            f2 = static_friction(F2 - f1, f2_max)
            a2 = 0.0
            v2n = 0.0
        return _Resolution(a1, a2, f1, f2, v1n, v2n, status)

    def sticking(v_common: float) -> Tuple[Optional[_Resolution], float]:
        load = F1 + F2
        f2 = ground(load)
        a_co = (load + f2) / (m + M)
        f1_req = m * a_co - F1
        if abs(f1_req) > f1_max + STATIC_SLACK:
            return None, f1_req

        ground_holds = abs(load) <= f2_max
        if not plank_moving and ground_holds and abs(v_common) <= TOLERANCE:
            return _Resolution(a_co, a_co, f1_req, f2, 0.0, 0.0, Status.AT_REST), f1_req

        v_next = v_common + a_co * dt
        block_holds = abs(F1) <= f1_max + STATIC_SLACK
        if plank_moving and reversed_within_step(v2, v_next) and ground_holds and block_holds:
            # Stopped within the step: report the static forces holding the pair.
            f2_hold = static_friction(load, f2_max)
            return _Resolution(0.0, 0.0, -F1, f2_hold, 0.0, 0.0, Status.AT_REST), f1_req

        at_rest = abs(a_co) <= TOLERANCE and abs(v1) <= TOLERANCE and abs(v2) <= TOLERANCE
        status = Status.AT_REST if at_rest else Status.MOVING_TOGETHER
        return _Resolution(a_co, a_co, f1_req, f2, v_next, v_next, status), f1_req

    v_common = (m * v1 + M * v2) / (m + M)

    if abs(v_rel) > TOLERANCE:
        res = sliding(kinetic_friction(v_rel, f1_max), Status.RELATIVE_SLIDING)
        if reversed_within_step(v_rel, res.v1 - res.v2):
            stuck, _ = sticking(v_common)
            if stuck is not None:
                res = stuck
    else:
        stuck, f1_req = sticking(v_common)
        if stuck is not None:
            res = stuck
        else:
            res = sliding(sign(f1_req) * f1_max, Status.SLIP_ONSET)

    x1n, s1n = integrate(state.x1, res.v1, state.s1, dt)
    x2n, s2n = integrate(state.x2, res.v2, state.s2, dt)

    status = res.status
    if abs(x1n - x2n) > params.L_plank / 2.0 + DETACH_MARGIN:
        status = Status.DETACHED

    return replace(
        state,
        t=state.t + dt,
        x1=x1n,
        v1=res.v1,
        a1=res.a1,
        s1=s1n,
        x2=x2n,
        v2=res.v2,
        a2=res.a2,
        s2=s2n,
        status=status,
        forces=ForceRecord(
            friction1=res.f1,
            friction2=res.f2,
            normal1=N1,
            normal2=N2,
            gravity1=m * g,
            gravity2=M * g,
            external1=F1,
            external2=F2,
        ),
    )


__all__ = ["resolve_plank"]
