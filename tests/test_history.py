from __future__ import annotations

import pytest

from frictionlab import SimulationParams, default_params, initialize, step
from frictionlab.runner import SimulationHistory, kinetic_energy


def test_repeated_tick_at_same_time_is_dropped():
    params = default_params("single")
    hist = SimulationHistory("single", params)
    s = initialize("single", params)

    assert hist.record(s) is True
    assert hist.record(s) is False
    s = step("single", s, params)
    assert hist.record(s) is True
    assert hist.record(s) is False
    assert len(hist) == 2


def test_window_keeps_most_recent_samples():
    params = default_params("belt")
    hist = SimulationHistory("belt", params, maxlen=10)
    s = initialize("belt", params)
    hist.record(s)
    for _ in range(25):
        s = step("belt", s, params)
        hist.record(s)

    assert len(hist) == 10
    assert hist.samples[-1].t == pytest.approx(s.t)
    df = hist.to_frame()
    assert list(df.columns) == ["t", "x1", "x2", "v1", "v2", "a1", "a2", "Ek", "Q"]
    assert df["t"].is_monotonic_increasing


def test_heat_matches_lost_kinetic_energy():
    params = SimulationParams(mass=2.0, mu=0.2, v0=3.0)
    hist = SimulationHistory("single", params)
    s = initialize("single", params)
    hist.record(s)
    for _ in range(30):
        s = step("single", s, params)
        hist.record(s)

    lost = 0.5 * 2.0 * 3.0 ** 2 - kinetic_energy("single", s, params)
    assert hist.heat == pytest.approx(lost, rel=0.02)
    assert hist.samples[-1].Q == hist.heat


def test_co_moving_belt_generates_no_heat():
    params = SimulationParams(mass=1.0, mu=0.5, v0=2.0, v_belt=2.0)
    hist = SimulationHistory("belt", params)
    s = initialize("belt", params)
    hist.record(s)
    for _ in range(50):
        s = step("belt", s, params)
        hist.record(s)
    assert hist.heat == 0.0


def test_plank_energy_counts_both_bodies():
    params = default_params("plank").with_updates(v0=1.0, v0_plank=2.0)
    s = initialize("plank", params)
    assert kinetic_energy("plank", s, params) == pytest.approx(0.5 * 1.0 * 1.0 + 0.5 * 2.0 * 4.0)
    assert kinetic_energy("single", s, params) == pytest.approx(0.5)


def test_clear_resets_window_and_heat():
    params = SimulationParams(mass=1.0, mu=0.3, v0=2.0)
    hist = SimulationHistory("single", params)
    s = initialize("single", params)
    hist.record(s)
    s = step("single", s, params)
    hist.record(s)
    assert hist.heat > 0.0

    hist.clear()
    assert len(hist) == 0
    assert hist.heat == 0.0
    assert hist.record(initialize("single", params)) is True
