from __future__ import annotations

from typing import List

import pytest

from frictionlab import SimulationParams, SimulationState, initialize, step


def run_steps(model, params: SimulationParams, n: int) -> List[SimulationState]:
    """Initial state followed by n stepped states."""
    states = [initialize(model, params)]
    for _ in range(n):
        states.append(step(model, states[-1], params))
    return states


@pytest.fixture
def textbook_plank() -> SimulationParams:
    # 1 kg block thrown at 4 m/s onto a resting 2 kg, 4 m plank
    return SimulationParams(
        g=9.8,
        mass=1.0,
        M_plank=2.0,
        L_plank=4.0,
        mu_block=0.4,
        mu_ground=0.1,
        v0=4.0,
        v0_plank=0.0,
        F_block=0.0,
        F_plank=0.0,
    )
