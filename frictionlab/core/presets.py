# frictionlab/core/presets.py
"""
Default parameter sets, one per model.

These are the textbook starting points shown before a user edits
anything; callers tweak them with SimulationParams.with_updates().
"""

from __future__ import annotations

from frictionlab.core.types import ModelType, SimulationParams


def default_single_params() -> SimulationParams:
    """
    2 kg slider released from rest on a 30 deg incline, mu = 0.2.
    tan(30 deg) > 0.2 so it slides down.
    """
    return SimulationParams(
        g=9.8,
        theta=30.0,
        mu=0.2,
        mass=2.0,
        v0=0.0,
        x0=1.0,
        F_mag=0.0,
        F_angle=0.0,
        belt_length=10.0,
    )


def default_belt_params() -> SimulationParams:
    """
    1 kg parcel dropped at rest onto a flat belt running at 4 m/s.
    """
    return SimulationParams(
        g=9.8,
        theta=0.0,
        mu=0.5,
        mass=1.0,
        v0=0.0,
        x0=0.0,
        belt_length=8.0,
        v_belt=4.0,
    )


def default_plank_params() -> SimulationParams:
    """
    1 kg block on a 2 kg, 4 m plank, plank pushed with 2 N.
    mu_block = 0.4 (block-plank), mu_ground = 0.1 (plank-ground).
    """
    return SimulationParams(
        g=9.8,
        theta=0.0,
        mu=0.0,
        mass=1.0,
        v0=4.0,
        x0=0.0,
        M_plank=2.0,
        L_plank=4.0,
        mu_ground=0.1,
        mu_block=0.4,
        v0_plank=0.0,
        F_block=0.0,
        F_plank=2.0,
    )


_PRESETS = {
    ModelType.SINGLE: default_single_params,
    ModelType.BELT: default_belt_params,
    ModelType.PLANK: default_plank_params,
}


def default_params(model) -> SimulationParams:
    return _PRESETS[ModelType.parse(model)]()


__all__ = [
    "default_single_params",
    "default_belt_params",
    "default_plank_params",
    "default_params",
]
