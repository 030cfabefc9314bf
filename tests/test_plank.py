from __future__ import annotations

import pytest

from frictionlab import DT, SimulationParams, Status, initialize, step
from conftest import run_steps

G = 9.8


def run_until_terminal(params: SimulationParams, max_steps: int = 1000):
    states = [initialize("plank", params)]
    for _ in range(max_steps):
        nxt = step("plank", states[-1], params)
        if nxt is states[-1]:
            break
        states.append(nxt)
    return states


def test_textbook_scenario_first_step(textbook_plank):
    s = run_steps("plank", textbook_plank, 1)[-1]

    assert s.status is Status.RELATIVE_SLIDING
    assert s.a1 == pytest.approx(-0.4 * G)
    # Block drags the plank forward (3.92 N), ground holds back 2.94 N.
    assert s.a2 == pytest.approx((3.92 - 2.94) / 2.0)
    assert s.forces.friction1 == pytest.approx(-3.92)
    assert s.forces.friction2 == pytest.approx(-2.94)


def test_textbook_scenario_settles_without_detaching(textbook_plank):
    states = run_steps("plank", textbook_plank, 600)
    statuses = [s.status for s in states]

    assert Status.DETACHED not in statuses
    assert Status.MOVING_TOGETHER in statuses
    first_together = statuses.index(Status.MOVING_TOGETHER)
    assert all(st is Status.RELATIVE_SLIDING for st in statuses[1:first_together])

    final = states[-1]
    assert final.status is Status.AT_REST
    assert final.v1 == 0.0
    assert final.v2 == 0.0
    # Relative slide of roughly 1.8 m, short of the 2 m half-length.
    assert 1.6 < final.x1 - final.x2 < 2.0


def test_pair_stopping_together_reports_static_forces(textbook_plank):
    states = run_steps("plank", textbook_plank, 600)
    rest = next(i for i, s in enumerate(states) if s.status is Status.AT_REST)
    prev, s = states[rest - 1], states[rest]

    assert prev.status is Status.MOVING_TOGETHER
    assert (s.v1, s.v2) == (0.0, 0.0)
    assert (s.a1, s.a2) == (0.0, 0.0)
    assert s.forces.friction1 == 0.0
    assert s.forces.friction2 == 0.0


def test_ground_stopping_plank_reports_static_ground_friction():
    # Plank shoved out from under a resting block; the ground stops it
    # while the block is still sliding on top.
    params = SimulationParams(
        g=G, mass=1.0, M_plank=2.0, L_plank=10.0, mu_block=0.05, mu_ground=0.5, v0_plank=1.0,
    )
    states = run_steps("plank", params, 100)
    stop = next(i for i, s in enumerate(states) if i > 0 and s.v2 == 0.0)
    prev, s = states[stop - 1], states[stop]

    assert prev.v2 > 0.0
    assert s.status is Status.RELATIVE_SLIDING
    assert s.a2 == 0.0
    # Ground cancels the block's drag on the plank, nothing more.
    assert s.forces.friction2 == pytest.approx(s.forces.friction1)
    assert abs(s.forces.friction2) <= 0.5 * 3.0 * G
    assert s.v1 == pytest.approx(prev.v1 + s.a1 * DT)


def test_co_moving_bodies_share_velocity_exactly(textbook_plank):
    params = textbook_plank.with_updates(v0=0.0, F_plank=6.0)
    states = run_steps("plank", params, 300)

    for s in states[1:]:
        assert s.status is Status.MOVING_TOGETHER
        assert s.v1 == s.v2
        assert s.a1 == s.a2
    assert states[-1].x1 == pytest.approx(states[-1].x2)


def test_hard_push_on_plank_breaks_static_friction(textbook_plank):
    params = textbook_plank.with_updates(v0=0.0, F_plank=20.0)
    states = run_steps("plank", params, 10)
    s = states[1]

    assert s.status is Status.SLIP_ONSET
    assert s.forces.friction1 == pytest.approx(3.92)
    assert s.a1 == pytest.approx(3.92)
    assert s.a2 == pytest.approx((20.0 - 3.92 - 2.94) / 2.0)
    assert states[-1].status is Status.RELATIVE_SLIDING


def test_weak_drag_does_not_creep_the_plank():
    params = SimulationParams(
        g=G, mass=1.0, M_plank=2.0, L_plank=10.0, mu_block=0.05, mu_ground=0.5, v0=1.0,
    )
    states = run_steps("plank", params, 400)

    assert all(s.v2 == 0.0 for s in states)
    assert all(s.x2 == 0.0 for s in states)
    assert states[-1].status is Status.AT_REST
    assert states[-1].v1 == 0.0


def test_detached_state_is_terminal_and_idempotent():
    params = SimulationParams(
        g=G, mass=1.0, M_plank=2.0, L_plank=2.0, mu_block=0.05, mu_ground=0.5, v0=6.0,
    )
    states = run_until_terminal(params)
    last = states[-1]

    assert last.status is Status.DETACHED
    assert last.is_terminal
    assert abs(last.x1 - last.x2) > 1.0

    again = last
    for _ in range(5):
        again = step("plank", again, params)
        assert again is last
    assert again.to_dict() == last.to_dict()


def test_forces_record(textbook_plank):
    params = textbook_plank.with_updates(F_block=1.5, F_plank=0.5)
    f = run_steps("plank", params, 1)[-1].forces

    assert f.normal1 == pytest.approx(G)
    assert f.normal2 == pytest.approx(3.0 * G)
    assert f.gravity1 == pytest.approx(G)
    assert f.gravity2 == pytest.approx(2.0 * G)
    assert f.external1 == 1.5
    assert f.external2 == 0.5


@pytest.mark.parametrize("changes", [
    {},
    {"F_plank": 2.0},
    {"F_block": 7.0},
    {"v0": -3.0, "v0_plank": 1.0},
    {"v0_plank": 3.0, "v0": 0.0},
])
def test_friction_bounds_and_path_lengths(textbook_plank, changes):
    params = textbook_plank.with_updates(**changes)
    f1_max = params.mu_block * params.mass * G
    f2_max = params.mu_ground * (params.mass + params.M_plank) * G

    states = run_steps("plank", params, 400)
    for prev, cur in zip(states, states[1:]):
        assert abs(cur.forces.friction1) <= f1_max + 1e-3
        assert abs(cur.forces.friction2) <= f2_max + 1e-9
        assert cur.s1 >= prev.s1
        assert cur.s2 >= prev.s2
        assert cur.s1 >= abs(cur.x1 - params.x0) - 1e-9
        assert cur.s2 >= abs(cur.x2) - 1e-9
