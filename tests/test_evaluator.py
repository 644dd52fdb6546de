"""
Tests for the closed-form transient evaluator and its sample grid.
"""

import math

import numpy as np
import pytest

from rlcsim.errors import DegenerateSampling, InvalidParameters
from rlcsim.transient import (
    CircuitParameters,
    DampingRegime,
    SamplePoint,
    TransientSeries,
    analyze,
    evaluate,
    sample_times,
)

OMEGA0 = math.sqrt(20.0)  # L=0.5, C=0.1


def _run(params, q0=1.0, i0=0.0, dt=0.02, duration=10.0):
    derived, regime = analyze(params)
    series = evaluate(regime, derived.alpha, derived.omega0, derived.zeta, q0, i0, dt, duration)
    return derived, regime, series


def _forced(regime, zeta, q0=1.0, i0=0.0, dt=0.01, duration=5.0):
    alpha = zeta * OMEGA0
    return evaluate(regime, alpha, OMEGA0, zeta, q0, i0, dt, duration)


class TestSampleGrid:
    """Uniform grid built from integer step indices."""

    def test_default_grid_length(self):
        t = sample_times(0.02, 10.0)
        assert t.size == int(np.floor(10.0 / 0.02)) + 1
        assert t[0] == 0.0
        assert t[-1] == pytest.approx(10.0)

    def test_spacing_is_constant(self):
        t = sample_times(0.02, 10.0)
        np.testing.assert_allclose(np.diff(t), 0.02, rtol=0, atol=1e-12)
        assert np.all(np.diff(t) > 0)

    def test_times_are_index_times_step(self):
        t = sample_times(0.1, 50.0)
        np.testing.assert_array_equal(t, np.arange(t.size) * 0.1)

    def test_partial_last_step_is_dropped(self):
        t = sample_times(0.3, 1.0)
        np.testing.assert_allclose(t, [0.0, 0.3, 0.6, 0.9])

    @pytest.mark.parametrize("dt, duration", [(2.0, 1.0), (0.5, 0.0)])
    def test_single_sample(self, dt, duration):
        np.testing.assert_array_equal(sample_times(dt, duration), [0.0])

    @pytest.mark.parametrize(
        "dt, duration",
        [(0.0, 1.0), (-0.1, 1.0), (0.1, -1.0), (float("nan"), 1.0), (0.1, float("inf"))],
    )
    def test_degenerate_sampling(self, dt, duration):
        with pytest.raises(DegenerateSampling):
            sample_times(dt, duration)

    @pytest.mark.parametrize("dt", [5e-324, 1e-12])
    def test_unbounded_grid_is_degenerate(self, dt):
        """Steps so small the grid overflows or exceeds the sample cap are rejected up front."""
        with pytest.raises(DegenerateSampling):
            sample_times(dt, 10.0)

    def test_evaluate_rejects_degenerate_sampling(self):
        with pytest.raises(DegenerateSampling):
            evaluate(DampingRegime.UNDERDAMPED, 2.0, OMEGA0, 2.0 / OMEGA0, 1.0, 0.0, 0.0, 10.0)


class TestClosedForms:
    """Per-regime formulas and their initial condition."""

    @pytest.mark.parametrize("R", [0.0, 2.0, 2.0 * math.sqrt(5.0), 10.0])
    @pytest.mark.parametrize("q0, i0", [(1.0, 0.0), (0.3, -1.7), (-2.5, 4.0)])
    def test_initial_charge_is_exact(self, R, q0, i0):
        _, _, series = _run(CircuitParameters(R, 0.5, 0.1), q0=q0, i0=i0)
        assert series.q[0] == q0
        assert series.t[0] == 0.0

    def test_underdamped_matches_formula(self):
        derived, regime, series = _run(CircuitParameters(2.0, 0.5, 0.1))
        assert regime is DampingRegime.UNDERDAMPED
        wd = derived.omega_d
        A2 = derived.alpha / wd
        expected = np.exp(-2.0 * series.t) * (np.cos(wd * series.t) + A2 * np.sin(wd * series.t))
        np.testing.assert_allclose(series.q, expected, rtol=1e-12, atol=1e-15)
        # oscillates: the charge changes sign
        assert np.any(series.q < 0)

    def test_undamped_is_pure_cosine(self):
        _, _, series = _run(CircuitParameters(0.0, 1.0, 1.0))
        np.testing.assert_allclose(series.q, np.cos(series.t), atol=1e-12)

    def test_critically_damped_matches_formula(self):
        derived, regime, series = _run(CircuitParameters(2.0 * math.sqrt(5.0), 0.5, 0.1))
        assert regime is DampingRegime.CRITICALLY_DAMPED
        a = derived.alpha
        expected = (1.0 + a * series.t) * np.exp(-a * series.t)
        np.testing.assert_allclose(series.q, expected, rtol=1e-12, atol=1e-15)

    def test_overdamped_decays_without_oscillation(self):
        _, regime, series = _run(CircuitParameters(10.0, 0.5, 0.1))
        assert regime is DampingRegime.OVERDAMPED
        signs = np.sign(series.q[series.q != 0])
        assert np.count_nonzero(np.diff(signs)) <= 1
        assert np.all(np.diff(series.q) <= 0)
        assert abs(series.q[-1]) < abs(series.q[0])

    def test_overdamped_matches_formula(self):
        derived, _, series = _run(CircuitParameters(10.0, 0.5, 0.1), q0=0.8, i0=0.5)
        a, w0 = derived.alpha, derived.omega0
        root = math.sqrt(a * a - w0 * w0)
        s1, s2 = -a + root, -a - root
        A1 = (0.5 - s2 * 0.8) / (s1 - s2)
        A2 = (s1 * 0.8 - 0.5) / (s1 - s2)
        expected = A1 * np.exp(s1 * series.t) + A2 * np.exp(s2 * series.t)
        np.testing.assert_allclose(series.q, expected, rtol=1e-9, atol=1e-12)

    def test_no_nan_anywhere_in_control_ranges(self):
        for R in np.linspace(0.0, 10.0, 21):
            for L in (0.1, 0.5, 2.0):
                for C in (0.05, 0.1, 0.5):
                    _, _, series = _run(CircuitParameters(float(R), L, C))
                    assert np.all(np.isfinite(series.q))


class TestBoundaryContinuity:
    """Under- and overdamped forms converge to the critical form as zeta -> 1."""

    @pytest.mark.parametrize("i0", [0.0, 1.5])
    def test_underdamped_limit(self, i0):
        critical = _forced(DampingRegime.CRITICALLY_DAMPED, 1.0, i0=i0)
        under = _forced(DampingRegime.UNDERDAMPED, 1.0 - 1e-5, i0=i0)
        np.testing.assert_allclose(under.q, critical.q, atol=1e-4)

    @pytest.mark.parametrize("i0", [0.0, 1.5])
    def test_overdamped_limit(self, i0):
        critical = _forced(DampingRegime.CRITICALLY_DAMPED, 1.0, i0=i0)
        over = _forced(DampingRegime.OVERDAMPED, 1.0 + 1e-5, i0=i0)
        np.testing.assert_allclose(over.q, critical.q, atol=1e-4)

    def test_exact_boundary_with_neighbouring_regime_falls_back(self):
        """Forcing a non-critical form at zeta == 1 yields the critical response, not NaN."""
        critical = _forced(DampingRegime.CRITICALLY_DAMPED, 1.0)
        for regime in (DampingRegime.UNDERDAMPED, DampingRegime.OVERDAMPED):
            series = _forced(regime, 1.0)
            assert np.all(np.isfinite(series.q))
            np.testing.assert_allclose(series.q, critical.q, rtol=1e-12)


class TestEvaluateContract:
    def test_idempotent(self):
        _, _, first = _run(CircuitParameters(3.3, 0.7, 0.2), i0=0.4)
        _, _, second = _run(CircuitParameters(3.3, 0.7, 0.2), i0=0.4)
        assert first.t.tobytes() == second.t.tobytes()
        assert first.q.tobytes() == second.q.tobytes()

    def test_series_is_read_only(self):
        _, _, series = _run(CircuitParameters())
        with pytest.raises(ValueError):
            series.q[0] = 5.0

    def test_points(self):
        _, _, series = _run(CircuitParameters(), dt=0.5, duration=2.0)
        points = series.points()
        assert len(series) == 5
        assert points[0] == SamplePoint(time=0.0, charge=1.0)
        assert [p.time for p in series] == [0.0, 0.5, 1.0, 1.5, 2.0]

    def test_series_copies_caller_arrays(self):
        t = np.array([0.0, 1.0, 2.0])
        q = np.array([1.0, 0.5, 0.25])
        series = TransientSeries(t=t, q=q)
        t[1] = 9.0
        q[0] = 0.0
        assert t.flags.writeable and q.flags.writeable
        np.testing.assert_array_equal(series.t, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(series.q, [1.0, 0.5, 0.25])
        assert not series.q.flags.writeable

    def test_series_accepts_sequences(self):
        series = TransientSeries(t=[0.0, 0.5], q=[1, 0])
        assert series.q.dtype == np.float64
        assert series.points()[1] == SamplePoint(time=0.5, charge=0.0)

    def test_series_shape_mismatch(self):
        with pytest.raises(ValueError):
            TransientSeries(t=[0.0, 0.5], q=[1.0])

    def test_empty_series(self):
        empty = TransientSeries.empty()
        assert len(empty) == 0
        assert empty.points() == []

    @pytest.mark.parametrize(
        "alpha, omega0, zeta",
        [(1.0, 0.0, 1.0), (1.0, float("inf"), 0.0), (float("nan"), 1.0, 0.5), (-1.0, 1.0, -1.0)],
    )
    def test_invalid_constants(self, alpha, omega0, zeta):
        with pytest.raises(InvalidParameters):
            evaluate(DampingRegime.UNDERDAMPED, alpha, omega0, zeta, 1.0, 0.0, 0.02, 1.0)
