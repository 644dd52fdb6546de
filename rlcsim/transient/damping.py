from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import numpy as np

from .parameters import CircuitParameters

logger = logging.getLogger(__name__)

# Relative band around zeta == 1 treated as critical damping.
ZETA_RTOL = 1e-6


class DampingRegime(Enum):
    """
    Solution family of the unforced series RLC equation.

    Only analytical identity is carried here; labels and colours for display
    live in rlcsim.display.
    """
    UNDERDAMPED = "underdamped"
    CRITICALLY_DAMPED = "critically_damped"
    OVERDAMPED = "overdamped"


@dataclass(frozen=True)
class DerivedQuantities:
    """
    Constants of the characteristic equation s^2 + 2*alpha*s + omega0^2 = 0.

    Attributes:
        alpha: Decay rate R / (2L) [1/s].
        omega0: Undamped natural frequency 1 / sqrt(LC) [rad/s].
        zeta: Damping ratio alpha / omega0 (dimensionless).
    """
    alpha: float
    omega0: float
    zeta: float

    @property
    def omega_d(self) -> float:
        """Damped frequency; 0 unless the circuit is underdamped."""
        return float(self.omega0 * np.sqrt(max(1.0 - self.zeta * self.zeta, 0.0)))


def derive_quantities(params: CircuitParameters) -> DerivedQuantities:
    params.validate()
    alpha = params.resistance / (2.0 * params.inductance)
    omega0 = 1.0 / np.sqrt(params.inductance * params.capacitance)
    return DerivedQuantities(alpha=float(alpha), omega0=float(omega0), zeta=float(alpha / omega0))


def is_critical(zeta: float, rtol: float = ZETA_RTOL) -> bool:
    return bool(np.isclose(zeta, 1.0, rtol=rtol, atol=0.0))


def classify_regime(zeta: float, rtol: float = ZETA_RTOL) -> DampingRegime:
    """
    Map a damping ratio onto its regime.

    The tolerance band is tested first, so a ratio that lands just below 1
    through round-off (e.g. R = 2*sqrt(L/C)) is still critically damped.
    """
    if is_critical(zeta, rtol):
        return DampingRegime.CRITICALLY_DAMPED
    if zeta < 1.0:
        return DampingRegime.UNDERDAMPED
    return DampingRegime.OVERDAMPED


def analyze(params: CircuitParameters) -> tuple[DerivedQuantities, DampingRegime]:
    """
    Derive alpha, omega0, zeta from (R, L, C) and classify the damping regime.

    Raises:
        InvalidParameters: inductance or capacitance not strictly positive,
            negative resistance, or non-finite values.
    """
    derived = derive_quantities(params)
    regime = classify_regime(derived.zeta)
    logger.debug(
        "R=%g L=%g C=%g -> alpha=%.6g omega0=%.6g zeta=%.6g (%s)",
        params.resistance, params.inductance, params.capacitance,
        derived.alpha, derived.omega0, derived.zeta, regime.value,
    )
    return derived, regime
