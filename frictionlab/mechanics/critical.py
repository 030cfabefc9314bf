# frictionlab/mechanics/critical.py
"""
Critical-force analyzer for the block-plank system.

For a force applied to one body only, returns the magnitude past which
the block-plank interface can no longer stick. Informational only:
the step resolver never reads these values.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict

from frictionlab.core.types import SimulationParams


@dataclass(frozen=True)
class CriticalForces:
    """
    F1c : threshold for a force applied to the block [N]
    F2c : threshold for a force applied to the plank [N]
    """
    F1c: float = 0.0
    F2c: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def analyze_critical_force(params: SimulationParams) -> CriticalForces:
    """
    f1_max = mu_block * m * g            (block-plank static limit)
    f2_max = mu_ground * (m + M) * g     (plank-ground static limit)

    With the whole system accelerating at a_co = (F - f2_max) / (m + M)
    and the non-driven body held by exactly f1_max:

        F1c = f1_max * (m + M) / M + f2_max
        F2c = f1_max * (m + M) / m + f2_max

    Zero (or missing) mass on either body gives (0, 0).
    """
    m = params.mass
    M = params.M_plank
    if not m or not M or m <= 0.0 or M <= 0.0:
        return CriticalForces(0.0, 0.0)

    f1_max = params.mu_block * m * params.g
    f2_max = params.mu_ground * (m + M) * params.g

    F1c = f1_max * (m + M) / M + f2_max
    F2c = f1_max * (m + M) / m + f2_max

    return CriticalForces(F1c=max(0.0, F1c), F2c=max(0.0, F2c))


__all__ = ["CriticalForces", "analyze_critical_force"]
