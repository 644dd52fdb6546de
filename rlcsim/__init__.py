"""
Top-level namespace for the RLC transient simulator.

- rlcsim.transient: damping analysis and closed-form charge response.
- rlcsim.display: labels, colours and control ranges for front ends.
"""

from . import transient  # noqa: F401
from . import display  # noqa: F401
from .errors import TransientError, InvalidParameters, DegenerateSampling  # noqa: F401
from .transient import CircuitParameters, SimulationConfig, derive_series  # noqa: F401

__all__ = [
    "transient",
    "display",
    "TransientError",
    "InvalidParameters",
    "DegenerateSampling",
    "CircuitParameters",
    "SimulationConfig",
    "derive_series",
]
