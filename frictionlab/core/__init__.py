"""
Core Types and Constants
========================

Shared constants, parameter/state records and per-model presets.
"""

from .constants import DT, TOLERANCE, STATIC_SLACK, DETACH_MARGIN, G_DEFAULT
from .types import ModelType, Status, SimulationParams, ForceRecord, SimulationState
from .presets import (
    default_single_params,
    default_belt_params,
    default_plank_params,
    default_params,
)

__all__ = [
    "DT",
    "TOLERANCE",
    "STATIC_SLACK",
    "DETACH_MARGIN",
    "G_DEFAULT",
    "ModelType",
    "Status",
    "SimulationParams",
    "ForceRecord",
    "SimulationState",
    "default_single_params",
    "default_belt_params",
    "default_plank_params",
    "default_params",
]
