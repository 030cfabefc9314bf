"""
FrictionLab
===========

Rigid-body friction simulator for the three classic textbook setups:
a slider on an incline, a slider on a conveyor belt, and a block riding
on a plank that itself rests on the ground.

Subpackages:
- frictionlab.core      : constants, parameter/state types, presets
- frictionlab.mechanics : critical-force analyzer + per-step resolvers
- frictionlab.runner    : fixed-step drivers, history buffer, ticker
"""

from frictionlab.core.constants import DT, TOLERANCE
from frictionlab.core.types import (
    ModelType,
    Status,
    SimulationParams,
    ForceRecord,
    SimulationState,
)
from frictionlab.core.presets import default_params
from frictionlab.mechanics import (
    CriticalForces,
    analyze_critical_force,
    initialize,
    step,
)

__all__ = [
    "core",
    "mechanics",
    "runner",
    "DT",
    "TOLERANCE",
    "ModelType",
    "Status",
    "SimulationParams",
    "ForceRecord",
    "SimulationState",
    "default_params",
    "CriticalForces",
    "analyze_critical_force",
    "initialize",
    "step",
]

__version__ = "0.1.0"
