"""
Friction Mechanics
==================

Critical-force analyzer plus one step resolver per model.
"""

from .critical import CriticalForces, analyze_critical_force
from .engine import initialize, step
from .incline import resolve_single
from .belt import resolve_belt
from .plank import resolve_plank

__all__ = [
    "CriticalForces",
    "analyze_critical_force",
    "initialize",
    "step",
    "resolve_single",
    "resolve_belt",
    "resolve_plank",
]
