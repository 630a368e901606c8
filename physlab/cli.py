"""
physlab command line.

Usage:
    physlab selftest                 # run every worked example
    physlab complex mul 1 2 3 4      # (-5 + 10i)
    physlab brewster 1.0 1.5
    physlab animate --step 1 --count 360
"""
import argparse
import logging
import math
import sys
from typing import List, Optional

from physlab.circuits import KVL_TOLERANCE, loop_sum, voltage_law_satisfied
from physlab.complex import Complex, DivisionByZero
from physlab.fluids import GRAVITY, total_pressure
from physlab.optics import brewster_angle, transmitted_intensity
from physlab.selftest import CHECKS, DEFAULT_SEED, run_all

logger = logging.getLogger("physlab")

BINARY_OPS = {
    "add": Complex.add,
    "sub": Complex.subtract,
    "mul": Complex.multiply,
    "div": Complex.divide,
}
UNARY_OPS = {
    "abs": Complex.magnitude,
    "arg": Complex.argument,
    "conj": Complex.conjugate,
}


def _run_selftest(args: argparse.Namespace) -> int:
    total = len(args.only) if args.only else len(CHECKS)
    passed = run_all(seed=args.seed, only=args.only)
    print("=" * 40)
    print(f"{passed}/{total} self-tests passed")
    return 0 if passed == total else 1


def _run_complex(args: argparse.Namespace) -> int:
    values = args.values
    if args.op in UNARY_OPS:
        if len(values) != 2:
            logger.error("'%s' takes one complex value (2 numbers), got %d numbers",
                         args.op, len(values))
            return 2
        result = UNARY_OPS[args.op](Complex(*values))
    else:
        if len(values) != 4:
            logger.error("'%s' takes two complex values (4 numbers), got %d numbers",
                         args.op, len(values))
            return 2
        a, b = Complex(*values[:2]), Complex(*values[2:])
        logger.debug("%s %s %s", a, args.op, b)
        result = BINARY_OPS[args.op](a, b)
    print(result)
    return 0


def _run_kvl(args: argparse.Namespace) -> int:
    ok = voltage_law_satisfied(args.voltages, args.tolerance)
    print(f"Σ V = {loop_sum(args.voltages):g} V -> "
          f"{'satisfied' if ok else 'NOT satisfied'}")
    return 0


def _run_brewster(args: argparse.Namespace) -> int:
    print(f"{brewster_angle(args.n1, args.n2):.2f} degrees")
    return 0


def _run_malus(args: argparse.Namespace) -> int:
    print(f"{transmitted_intensity(args.intensity, args.angle):g}")
    return 0


def _run_bernoulli(args: argparse.Namespace) -> int:
    p = total_pressure(args.pressure, args.density, args.velocity,
                       args.height, gravity=args.gravity)
    print(f"{p:.1f} Pa")
    return 0


def _run_animate(args: argparse.Namespace) -> int:
    # matplotlib is only pulled in for this command
    from physlab.phasor_ori import animate_complex, rotation_sequence

    seq = rotation_sequence(math.radians(args.step), args.count)
    animate_complex(seq, interval=args.interval)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="physlab",
        description="Complex numbers and closed-form physics worked examples",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("selftest", help="run the worked examples as self-checks")
    p.add_argument("--seed", type=int, default=DEFAULT_SEED,
                   help="seed for the random complex operands")
    p.add_argument("--only", nargs="+", choices=sorted(CHECKS), metavar="NAME",
                   help=f"run only these checks ({', '.join(CHECKS)})")
    p.set_defaults(func=_run_selftest)

    p = sub.add_parser("complex", help="evaluate a complex-number operation")
    p.add_argument("op", choices=[*BINARY_OPS, *UNARY_OPS])
    p.add_argument("values", type=float, nargs="+",
                   help="real/imaginary pairs: A B [C D]")
    p.set_defaults(func=_run_complex)

    p = sub.add_parser("kvl", help="check Kirchhoff's voltage law for one loop")
    p.add_argument("voltages", type=float, nargs="+")
    p.add_argument("--tolerance", type=float, default=KVL_TOLERANCE)
    p.set_defaults(func=_run_kvl)

    p = sub.add_parser("brewster", help="Brewster angle between two media")
    p.add_argument("n1", type=float)
    p.add_argument("n2", type=float)
    p.set_defaults(func=_run_brewster)

    p = sub.add_parser("malus", help="Malus' law transmitted intensity")
    p.add_argument("intensity", type=float)
    p.add_argument("angle", type=float, help="degrees")
    p.set_defaults(func=_run_malus)

    p = sub.add_parser("bernoulli", help="Bernoulli total pressure")
    p.add_argument("pressure", type=float, help="static pressure (Pa)")
    p.add_argument("density", type=float, help="kg/m^3")
    p.add_argument("velocity", type=float, help="m/s")
    p.add_argument("height", type=float, help="m")
    p.add_argument("--gravity", type=float, default=GRAVITY)
    p.set_defaults(func=_run_bernoulli)

    p = sub.add_parser("animate", help="animate a rotating phasor")
    p.add_argument("--step", type=float, default=1.0, help="degrees per frame")
    p.add_argument("--count", type=int, default=360)
    p.add_argument("--interval", type=int, default=20, help="ms per frame")
    p.set_defaults(func=_run_animate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (DivisionByZero, ValueError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
