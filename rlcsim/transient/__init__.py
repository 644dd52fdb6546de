"""
Closed-form transient response of an unforced series RLC circuit.

The damping analyzer derives alpha, omega0 and zeta from (R, L, C) and picks
the regime; the evaluator samples the matching closed-form q(t).
"""

from .parameters import MAX_SAMPLES, CircuitParameters, SimulationConfig, step_count  # noqa: F401
from .damping import (  # noqa: F401
    ZETA_RTOL,
    DampingRegime,
    DerivedQuantities,
    analyze,
    classify_regime,
    derive_quantities,
    is_critical,
)
from .evaluator import SamplePoint, TransientSeries, evaluate, sample_times  # noqa: F401
from .simulator import RLCSimulator, TransientResult, derive_series  # noqa: F401

__all__ = [
    "CircuitParameters",
    "SimulationConfig",
    "MAX_SAMPLES",
    "step_count",
    "ZETA_RTOL",
    "DampingRegime",
    "DerivedQuantities",
    "analyze",
    "classify_regime",
    "derive_quantities",
    "is_critical",
    "SamplePoint",
    "TransientSeries",
    "evaluate",
    "sample_times",
    "RLCSimulator",
    "TransientResult",
    "derive_series",
]
