from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping
import numpy as np

from ..errors import InvalidParameters, DegenerateSampling


@dataclass(frozen=True)
class CircuitParameters:
    """
    Series RLC element values.

    Attributes:
        resistance: R in ohm, >= 0 (0 gives the undamped case).
        inductance: L in henry, > 0.
        capacitance: C in farad, > 0.
    """
    resistance: float = 2.0
    inductance: float = 0.5
    capacitance: float = 0.1

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value):
                raise InvalidParameters(f"{f.name.capitalize()} must be finite, got {value!r}.")
        if self.resistance < 0:
            raise InvalidParameters("Resistance must be non-negative.")
        if self.inductance <= 0:
            raise InvalidParameters("Inductance must be positive.")
        if self.capacitance <= 0:
            raise InvalidParameters("Capacitance must be positive.")

    def replace(self, **changes: float) -> "CircuitParameters":
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ValueError(f"Unknown circuit parameter(s): {', '.join(sorted(unknown))}.")
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: float(v) for k, v in changes.items()})
        return CircuitParameters(**values)


# Upper bound on the sample grid; n >= MAX_SAMPLES steps is rejected.
MAX_SAMPLES = 1_000_000

# camelCase option names accepted alongside the field names
_CONFIG_ALIASES = {
    "timeStep": "time_step",
    "totalDuration": "total_duration",
    "initialCharge": "initial_charge",
    "initialCurrent": "initial_current",
}


@dataclass(frozen=True)
class SimulationConfig:
    """
    Fixed simulation constants.

    Attributes:
        time_step: Sampling interval in seconds.
        total_duration: Simulation horizon in seconds.
        initial_charge: q(0).
        initial_current: i(0) = q'(0).
    """
    time_step: float = 0.02
    total_duration: float = 10.0
    initial_charge: float = 1.0
    initial_current: float = 0.0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SimulationConfig":
        names = {f.name for f in fields(cls)}
        values: dict[str, float] = {}
        for key, value in mapping.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name not in names:
                raise ValueError(f"Unknown simulation option '{key}'.")
            if name in values:
                raise ValueError(f"Simulation option '{name}' given more than once.")
            values[name] = float(value)
        return cls(**values)

    def validate(self) -> None:
        step_count(self.time_step, self.total_duration)
        if not (np.isfinite(self.initial_charge) and np.isfinite(self.initial_current)):
            raise InvalidParameters("Initial charge and current must be finite.")


def step_count(time_step: float, total_duration: float) -> int:
    """
    Number of whole time steps inside [0, total_duration] (samples - 1).

    Raises:
        DegenerateSampling: time_step <= 0, total_duration < 0, non-finite
            values, or a grid with more than MAX_SAMPLES samples.
    """
    if not (np.isfinite(time_step) and np.isfinite(total_duration)):
        raise DegenerateSampling("Time step and total duration must be finite.")
    if time_step <= 0:
        raise DegenerateSampling(f"Time step must be positive, got {time_step}.")
    if total_duration < 0:
        raise DegenerateSampling(f"Total duration must be non-negative, got {total_duration}.")
    n = total_duration / time_step
    if not np.isfinite(n) or n >= MAX_SAMPLES:
        raise DegenerateSampling(
            f"Time step {time_step} s over {total_duration} s exceeds {MAX_SAMPLES} samples."
        )
    return int(np.floor(n))
