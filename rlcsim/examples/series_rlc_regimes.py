import logging

from rlcsim.display import CHARGE_AXIS_LIMITS, regime_color, regime_label
from rlcsim.logging_config import setup_logging
from rlcsim.transient import CircuitParameters, RLCSimulator, SimulationConfig


def main() -> None:
    setup_logging(logging.INFO)
    log = logging.getLogger("rlcsim.examples")

    L, C = 0.5, 0.1
    r_critical = 2.0 * (L / C) ** 0.5  # zeta == 1

    sim = RLCSimulator(CircuitParameters(resistance=2.0, inductance=L, capacitance=C),
                       SimulationConfig(total_duration=5.0))
    cases = [2.0, r_critical, 10.0]
    results = []
    for R in cases:
        result = sim.update(resistance=R)
        log.info(
            "R=%.3f ohm: alpha=%.3f 1/s, omega0=%.3f rad/s, zeta=%.3f -> %s",
            R, result.derived.alpha, result.derived.omega0, result.derived.zeta,
            regime_label(result.regime),
        )
        results.append(result)

    try:
        import matplotlib.pyplot as plt

        plt.figure(figsize=(7, 4))
        for result in results:
            t, q = result.series.series()
            plt.plot(t, q, color=regime_color(result.regime),
                     label=f"R={result.params.resistance:.2f} Ω ({regime_label(result.regime)})")
        plt.scatter([0.0], [sim.config.initial_charge], color="black", zorder=3)
        plt.ylim(*CHARGE_AXIS_LIMITS)
        plt.xlabel("Time (s)")
        plt.ylabel("Charge (q)")
        plt.title("Series RLC Transient Response")
        plt.grid(True)
        plt.legend()
        plt.tight_layout()
        plt.show()
    except ImportError:
        pass


if __name__ == "__main__":
    main()
