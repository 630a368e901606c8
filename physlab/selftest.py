"""
Worked examples that double as self-checks.

Every check prints its inputs, the expected and computed values, and
``TEST PASSED``; a mismatch raises ``SelfTestFailure``.
"""
import cmath
import logging
from typing import Callable, Dict, Iterable, Optional

import numpy as np

from physlab.circuits import voltage_law_satisfied
from physlab.complex import Complex
from physlab.fluids import total_pressure
from physlab.optics import brewster_angle, transmitted_intensity

logger = logging.getLogger(__name__)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_SEED = 2024
CLOSE_TOL    = 1e-9              # tolerance against the builtin complex type


class SelfTestFailure(AssertionError):
    """A worked example did not produce its expected value."""


def _expect(label: str, ok: bool, detail: str = "") -> None:
    if not ok:
        raise SelfTestFailure(f"{label} failed{': ' + detail if detail else ''}")


def _close(a: float, b: float) -> bool:
    return abs(a - b) < CLOSE_TOL


def _same(result: Complex, expected: complex) -> bool:
    return _close(result.real, expected.real) and _close(result.imaginary, expected.imag)


# ─────────────────────────── checks ──────────────────────────────────────── #
def check_complex(seed: int = DEFAULT_SEED) -> None:
    """Compare every Complex operation against the builtin type."""
    rng = np.random.default_rng(seed)
    x1, y1, x2, y2 = (float(v) for v in rng.uniform(-0.5, 0.5, size=4))
    logger.debug("complex operands (%g, %g) and (%g, %g)", x1, y1, x2, y2)

    num1, num2 = Complex(x1, y1), Complex(x2, y2)
    cnum1, cnum2 = complex(x1, y1), complex(x2, y2)
    print(f"num1 = {num1}, num2 = {num2}")

    cases = [
        ("Addition", num1 + num2, cnum1 + cnum2),
        ("Subtraction", num1 - num2, cnum1 - cnum2),
        ("Multiplication", num1 * num2, cnum1 * cnum2),
        ("Division", num1 / num2, cnum1 / cnum2),
        ("Conjugate", ~num1, cnum1.conjugate()),
    ]
    for label, result, expected in cases:
        _expect(label, _same(result, expected), f"{result} != {expected}")
        print(f"{label} test passed")

    _expect("Argument", _close(num1.argument(), cmath.phase(cnum1)))
    print("Argument test passed")
    _expect("Absolute value", _close(num1.magnitude(), abs(cnum1)))
    print("Absolute value test passed")
    print("\nAll tests passed successfully")


def check_kirchhoff(seed: int = DEFAULT_SEED) -> None:
    voltages1 = [10.0, -4.0, -6.0]
    print("KVL Test Case 1 (Balanced Loop)")
    _expect("KVL balanced loop", voltage_law_satisfied(voltages1) is True)
    print("TEST PASSED\n")

    voltages2 = [12.0, -5.0, -4.0]
    print("KVL Test Case 2 (Unbalanced Loop)")
    _expect("KVL unbalanced loop", voltage_law_satisfied(voltages2) is False)
    print("TEST PASSED\n")


def check_brewster(seed: int = DEFAULT_SEED) -> None:
    n1, n2 = 1.0, 1.5            # air → glass
    expected_angle = 56.31
    output_angle = round(brewster_angle(n1, n2), 2)

    print("Brewster's Law Test")
    print(f"Refractive Index 1: {n1}")
    print(f"Refractive Index 2: {n2}")
    print(f"Expected Angle: {expected_angle} degrees")
    print(f"Output Angle: {output_angle} degrees")
    _expect("Brewster angle", output_angle == expected_angle)
    print("TEST PASSED\n")


def check_malus(seed: int = DEFAULT_SEED) -> None:
    initial_intensity = 100.0
    for angle, expected in ((0.0, 100.0), (90.0, 0.0), (45.0, 50.0)):
        output = round(transmitted_intensity(initial_intensity, angle))
        print(f"Polarization Test ({angle:g} degrees)")
        _expect(f"Malus {angle:g} degrees", output == expected,
                f"expected {expected}, got {output}")
        print("TEST PASSED\n")


def check_bernoulli(seed: int = DEFAULT_SEED) -> None:
    pressure = 101325.0          # Pa
    density = 1.225              # kg/m³, air at sea level
    velocity = 10.0              # m/s
    height = 5.0                 # m

    expected_total_pressure = 101446.3
    output = round(total_pressure(pressure, density, velocity, height), 1)

    print("Bernoulli Total Pressure Test")
    print(f"Expected Output: {expected_total_pressure}")
    print(f"Output: {output}")
    _expect("Bernoulli total pressure", output == expected_total_pressure)
    print("TEST PASSED\n")


# every check takes the seed; only the random complex check uses it
CHECKS: Dict[str, Callable[[int], None]] = {
    "complex": check_complex,
    "kirchhoff": check_kirchhoff,
    "brewster": check_brewster,
    "malus": check_malus,
    "bernoulli": check_bernoulli,
}


def run_all(seed: int = DEFAULT_SEED, only: Optional[Iterable[str]] = None) -> int:
    """
    Run the selected checks (all by default).

    Returns:
        Number of checks that passed. Failures are logged, not raised.
    """
    names = list(only) if only else list(CHECKS)
    unknown = [n for n in names if n not in CHECKS]
    if unknown:
        raise ValueError(f"unknown self-test(s): {', '.join(unknown)}")

    passed = 0
    for name in names:
        print(f"── {name} " + "─" * (40 - len(name)))
        try:
            CHECKS[name](seed)
        except SelfTestFailure as exc:
            logger.error("%s self-test failed: %s", name, exc)
            continue
        passed += 1
    logger.info("%d/%d self-tests passed", passed, len(names))
    return passed


if __name__ == "__main__":
    run_all()
