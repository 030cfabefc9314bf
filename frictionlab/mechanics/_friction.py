# frictionlab/mechanics/_friction.py
"""Small friction/integration helpers shared by the resolvers."""

from __future__ import annotations

from typing import Tuple


def sign(x: float) -> float:
    if x > 0.0:
        return 1.0
    if x < 0.0:
        return -1.0
    return 0.0


def kinetic_friction(v_rel: float, limit: float) -> float:
    """Fixed-magnitude friction opposing the relative velocity."""
    return -sign(v_rel) * limit


def static_friction(load: float, limit: float) -> float:
    """
    Friction answering a non-friction load on a surface at rest.

    Cancels the load exactly while |load| <= limit, otherwise saturates
    at the limit opposing it.
    """
    if abs(load) <= limit:
        return -load
    return -sign(load) * limit


def reversed_within_step(before: float, after: float) -> bool:
    """True if a (non-zero) relative velocity reached or crossed zero."""
    return before * after <= 0.0


def integrate(x: float, v_next: float, s: float, dt: float) -> Tuple[float, float]:
    """Position + path-length update using the already-updated velocity."""
    dx = v_next * dt
    return x + dx, s + abs(dx)
