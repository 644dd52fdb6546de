from __future__ import annotations
from dataclasses import dataclass
import logging

from ..errors import TransientError
from .damping import DampingRegime, DerivedQuantities, analyze
from .evaluator import TransientSeries, evaluate
from .parameters import CircuitParameters, SimulationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TransientResult:
    """
    Everything derived from one set of circuit parameters.

    The regime and the series always come from the same `params`; the object
    is replaced as a whole when the inputs change.
    """
    params: CircuitParameters
    config: SimulationConfig
    derived: DerivedQuantities
    regime: DampingRegime
    series: TransientSeries


def derive_series(params: CircuitParameters,
                  config: SimulationConfig | None = None) -> TransientResult:
    """
    Classify the circuit and evaluate its charge response from scratch.

    Raises:
        InvalidParameters: invalid circuit values or initial conditions.
        DegenerateSampling: invalid time grid.
    """
    config = config or SimulationConfig()
    config.validate()
    derived, regime = analyze(params)
    series = evaluate(
        regime,
        derived.alpha,
        derived.omega0,
        derived.zeta,
        config.initial_charge,
        config.initial_current,
        config.time_step,
        config.total_duration,
    )
    return TransientResult(params=params, config=config, derived=derived,
                           regime=regime, series=series)


class RLCSimulator:
    """
    Stateful front end for interactive callers (sliders, notebooks).

    Holds the current circuit parameters and the result derived from them.
    Every parameter change triggers a full recomputation. Invalid inputs do
    not raise: the simulator switches to an explicit error state with an
    empty series and `regime` set to None, and `error` holds the exception.

    Attributes:
        config: Simulation constants used for every recomputation.
    """

    def __init__(self, params: CircuitParameters | None = None,
                 config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self._params = params or CircuitParameters()
        self._result: TransientResult | None = None
        self._error: TransientError | None = None
        self._recalculate()

    # ---- parameters ----
    @property
    def params(self) -> CircuitParameters:
        return self._params

    @property
    def resistance(self) -> float:
        return self._params.resistance

    @resistance.setter
    def resistance(self, value: float) -> None:
        self.update(resistance=value)

    @property
    def inductance(self) -> float:
        return self._params.inductance

    @inductance.setter
    def inductance(self, value: float) -> None:
        self.update(inductance=value)

    @property
    def capacitance(self) -> float:
        return self._params.capacitance

    @capacitance.setter
    def capacitance(self, value: float) -> None:
        self.update(capacitance=value)

    def update(self, **changes: float) -> TransientResult | None:
        """
        Change one or more of resistance/inductance/capacitance and recompute once.

        Returns:
            The new result, or None if the parameters were rejected.
        """
        self._params = self._params.replace(**changes)
        return self._recalculate()

    # ---- derived state ----
    @property
    def result(self) -> TransientResult | None:
        return self._result

    @property
    def error(self) -> TransientError | None:
        return self._error

    @property
    def regime(self) -> DampingRegime | None:
        return None if self._result is None else self._result.regime

    @property
    def series(self) -> TransientSeries:
        return TransientSeries.empty() if self._result is None else self._result.series

    def _recalculate(self) -> TransientResult | None:
        try:
            result = derive_series(self._params, self.config)
        except TransientError as exc:
            logger.warning("Rejected parameters %s: %s", self._params, exc)
            self._result, self._error = None, exc
            return None
        self._result, self._error = result, None
        return result
