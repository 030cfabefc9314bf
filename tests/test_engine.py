from __future__ import annotations

import dataclasses
import json

import pytest

from frictionlab import (
    DT,
    ModelType,
    SimulationParams,
    SimulationState,
    Status,
    default_params,
    initialize,
    step,
)


def test_initialize_single_uses_x0_and_v0():
    params = SimulationParams(mass=2.0, v0=1.5, x0=3.0, v0_plank=9.0)
    s = initialize("single", params)

    assert s.t == 0.0
    assert (s.x1, s.v1, s.a1, s.s1) == (3.0, 1.5, 0.0, 0.0)
    assert (s.x2, s.v2, s.a2, s.s2) == (0.0, 0.0, 0.0, 0.0)
    assert s.status is Status.READY
    assert not s.is_terminal


def test_initialize_plank_uses_plank_velocity():
    s = initialize(ModelType.PLANK, default_params("plank"))
    assert s.v1 == 4.0
    assert s.v2 == 0.0

    s = initialize("plank", SimulationParams(mass=1.0, M_plank=1.0, v0_plank=2.0))
    assert s.v2 == 2.0


def test_step_advances_time_by_fixed_increment():
    params = default_params("single")
    s = initialize("single", params)
    for n in range(1, 11):
        s = step("single", s, params)
        assert s.t == pytest.approx(n * DT)


def test_step_accepts_custom_dt():
    params = default_params("belt")
    s = step(ModelType.BELT, initialize("belt", params), params, dt=0.001)
    assert s.t == pytest.approx(0.001)


def test_step_returns_new_snapshot():
    params = default_params("single")
    s0 = initialize("single", params)
    s1 = step("single", s0, params)

    assert s1 is not s0
    assert s0.t == 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        s1.x1 = 5.0


def test_step_is_deterministic():
    params = default_params("plank")
    a = initialize("plank", params)
    b = initialize("plank", params)
    for _ in range(100):
        a = step("plank", a, params)
        b = step("plank", b, params)
    assert a == b


def test_unknown_model_rejected():
    with pytest.raises(ValueError, match="Unknown model"):
        initialize("pulley", default_params("single"))
    with pytest.raises(ValueError):
        step("pulley", SimulationState(), default_params("single"))


def test_terminal_state_returned_unchanged_for_any_model():
    frozen = SimulationState(t=1.0, x1=3.0, status=Status.DETACHED)
    for model in ModelType:
        assert step(model, frozen, default_params(model)) is frozen


def test_state_snapshot_is_json_serializable():
    params = default_params("plank")
    s = step("plank", initialize("plank", params), params)
    d = s.to_dict()

    assert d["status"] == "relative sliding"
    assert set(d) >= {"t", "x1", "v1", "a1", "s1", "x2", "v2", "a2", "s2", "friction1", "friction2"}
    json.dumps(d)


def test_status_compares_as_text():
    assert Status.CO_VELOCITY == "co-velocity"
    assert Status("detached").terminal
    assert not Status.AT_REST.terminal


def test_with_updates_copies():
    p = default_params("plank")
    q = p.with_updates(F_block=3.0)
    assert q.F_block == 3.0
    assert p.F_block == 0.0
    assert q.M_plank == p.M_plank
