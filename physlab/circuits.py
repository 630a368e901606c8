"""
Kirchhoff's voltage law (KVL).

The algebraic sum of all voltages around any closed loop of a circuit is
zero. Source EMFs are positive, drops are negative.
"""
from typing import Iterable

import numpy as np

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
KVL_TOLERANCE = 1e-6             # volts; |Σ V| below this counts as balanced


def loop_sum(voltages: Iterable[float]) -> float:
    """Algebraic sum of the voltages around one loop."""
    return float(np.sum(np.asarray(list(voltages), dtype=float)))


def voltage_law_satisfied(voltages: Iterable[float],
                          tolerance: float = KVL_TOLERANCE) -> bool:
    """
    Check whether a closed loop obeys KVL.

    Args:
        voltages: Signed voltages around the loop (V)
        tolerance: Largest residual still accepted as zero (V)

    Returns:
        True if |Σ voltages| < tolerance
    """
    return bool(abs(loop_sum(voltages)) < tolerance)


if __name__ == "__main__":
    print(voltage_law_satisfied([10.0, -4.0, -6.0]))   # True
    print(voltage_law_satisfied([12.0, -5.0, -4.0]))   # False
