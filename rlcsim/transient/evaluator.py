from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import logging
import numpy as np

from ..errors import InvalidParameters
from .damping import DampingRegime
from .parameters import step_count

logger = logging.getLogger(__name__)

Array = np.ndarray


@dataclass(frozen=True)
class SamplePoint:
    time: float
    charge: float


@dataclass(frozen=True, eq=False)
class TransientSeries:
    """
    Charge samples q(t) on a uniform time grid.

    Attributes:
        t: Sample times, starting at 0 and strictly increasing (read-only).
        q: Charge at each sample time (read-only, same length as t).
    """
    t: Array
    q: Array

    def __post_init__(self) -> None:
        # private read-only copies; the caller's buffers stay writable
        t = np.array(self.t, dtype=float)
        q = np.array(self.q, dtype=float)
        if t.shape != q.shape:
            raise ValueError("Time and charge arrays must have the same shape.")
        t.setflags(write=False)
        q.setflags(write=False)
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "q", q)

    @classmethod
    def empty(cls) -> "TransientSeries":
        return cls(t=np.empty(0), q=np.empty(0))

    def __len__(self) -> int:
        return int(self.t.size)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points())

    def points(self) -> list[SamplePoint]:
        return [SamplePoint(time=float(ti), charge=float(qi)) for ti, qi in zip(self.t, self.q)]

    def series(self) -> tuple[Array, Array]:
        return self.t, self.q


def sample_times(time_step: float, total_duration: float) -> Array:
    """
    Uniform grid 0, dt, 2*dt, ... covering [0, total_duration].

    Times are built as index * dt rather than by repeated addition, so the
    last sample does not drift. A step longer than the horizon yields the
    single sample t = 0.

    Raises:
        DegenerateSampling: see `step_count`.
    """
    n_steps = step_count(time_step, total_duration)
    return np.arange(n_steps + 1, dtype=float) * time_step


def underdamped_charge(t: Array, alpha: float, omega0: float, zeta: float,
                       q0: float, i0: float) -> Array:
    omega_d = omega0 * np.sqrt(max(1.0 - zeta * zeta, 0.0))
    if omega_d == 0.0:
        return critically_damped_charge(t, alpha, q0, i0)
    A1 = q0
    A2 = (i0 + alpha * q0) / omega_d
    return np.exp(-alpha * t) * (A1 * np.cos(omega_d * t) + A2 * np.sin(omega_d * t))


def critically_damped_charge(t: Array, alpha: float, q0: float, i0: float) -> Array:
    A1 = q0
    A2 = i0 + alpha * q0
    return (A1 + A2 * t) * np.exp(-alpha * t)


def overdamped_charge(t: Array, alpha: float, omega0: float, q0: float, i0: float) -> Array:
    # round-off near zeta ~ 1 can leave a tiny negative discriminant
    root = np.sqrt(max(alpha * alpha - omega0 * omega0, 0.0))
    if root == 0.0:
        return critically_damped_charge(t, alpha, q0, i0)
    s1 = -alpha + root
    s2 = -alpha - root
    A1 = (i0 - s2 * q0) / (s1 - s2)
    A2 = (s1 * q0 - i0) / (s1 - s2)
    q = A1 * np.exp(s1 * t) + A2 * np.exp(s2 * t)
    # A1 + A2 may differ from q0 in the last bit
    q[t == 0.0] = q0
    return q


def evaluate(regime: DampingRegime, alpha: float, omega0: float, zeta: float,
             initial_charge: float, initial_current: float,
             time_step: float, total_duration: float) -> TransientSeries:
    """
    Evaluate the closed-form charge response of the selected regime.

    Args:
        regime: Damping regime selecting the solution family.
        alpha: Decay rate R / (2L).
        omega0: Natural frequency 1 / sqrt(LC), > 0.
        zeta: Damping ratio alpha / omega0.
        initial_charge: q(0).
        initial_current: q'(0).
        time_step: Sampling interval (s), > 0.
        total_duration: Horizon (s), >= 0.

    Returns:
        TransientSeries with floor(total_duration / time_step) + 1 samples.

    Raises:
        DegenerateSampling: invalid time grid.
        InvalidParameters: non-finite or out-of-domain derived constants.
    """
    t = sample_times(time_step, total_duration)
    for name, value in (("alpha", alpha), ("omega0", omega0), ("zeta", zeta),
                        ("initial charge", initial_charge), ("initial current", initial_current)):
        if not np.isfinite(value):
            raise InvalidParameters(f"{name.capitalize()} must be finite, got {value!r}.")
    if omega0 <= 0:
        raise InvalidParameters("Natural frequency must be positive.")
    if alpha < 0 or zeta < 0:
        raise InvalidParameters("Decay rate and damping ratio must be non-negative.")

    q0, i0 = float(initial_charge), float(initial_current)
    if regime is DampingRegime.UNDERDAMPED:
        q = underdamped_charge(t, alpha, omega0, zeta, q0, i0)
    elif regime is DampingRegime.CRITICALLY_DAMPED:
        q = critically_damped_charge(t, alpha, q0, i0)
    elif regime is DampingRegime.OVERDAMPED:
        q = overdamped_charge(t, alpha, omega0, q0, i0)
    else:
        raise ValueError(f"Unsupported damping regime {regime!r}.")

    q = np.asarray(q, dtype=float)
    logger.debug("Evaluated %d %s samples over %.6g s", t.size, regime.value, float(t[-1]))
    return TransientSeries(t=t, q=q)
