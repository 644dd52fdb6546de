from __future__ import annotations
from typing import Dict, Tuple

from .transient.damping import DampingRegime

REGIME_LABELS: Dict[DampingRegime, str] = {
    DampingRegime.UNDERDAMPED: "Underdamped",
    DampingRegime.CRITICALLY_DAMPED: "Critically Damped",
    DampingRegime.OVERDAMPED: "Overdamped",
}

# matplotlib colour names
REGIME_COLORS: Dict[DampingRegime, str] = {
    DampingRegime.UNDERDAMPED: "tab:blue",
    DampingRegime.CRITICALLY_DAMPED: "tab:green",
    DampingRegime.OVERDAMPED: "tab:orange",
}

# (min, max, unit) of the interactive controls
PARAMETER_RANGES: Dict[str, Tuple[float, float, str]] = {
    "resistance": (0.0, 10.0, "Ω"),
    "inductance": (0.1, 2.0, "H"),
    "capacitance": (0.05, 0.5, "F"),
}

CHARGE_AXIS_LIMITS: Tuple[float, float] = (-1.1, 1.1)


def regime_label(regime: DampingRegime) -> str:
    return REGIME_LABELS[regime]


def regime_color(regime: DampingRegime) -> str:
    return REGIME_COLORS[regime]


def clamp_to_range(name: str, value: float) -> float:
    """
    Clamp a control value into its allowed range.

    Args:
        name: One of "resistance", "inductance", "capacitance".
        value: Raw value from the control.

    Returns:
        The value limited to PARAMETER_RANGES[name].
    """
    if name not in PARAMETER_RANGES:
        raise KeyError(f"Unknown parameter '{name}'.")
    lo, hi, _ = PARAMETER_RANGES[name]
    return min(max(float(value), lo), hi)


def format_parameter(name: str, value: float) -> str:
    """Slider readout, e.g. 'Resistor (R): 2.00 Ω'."""
    titles = {"resistance": "Resistor (R)", "inductance": "Inductor (L)", "capacitance": "Capacitor (C)"}
    if name not in PARAMETER_RANGES:
        raise KeyError(f"Unknown parameter '{name}'.")
    return f"{titles[name]}: {value:.2f} {PARAMETER_RANGES[name][2]}"
