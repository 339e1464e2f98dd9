from __future__ import annotations

import argparse
import logging
import sys
import warnings
from typing import List, Optional

from functions import FunctionKind, construct
from integral_core import SumType, integrate
from integral_request import DEFAULT_COEFFICIENTS, RequestError, parse_coefficients

# f(x) = 0 + 0x + 2x^2 over [0, 1] with 2**20 rectangles sampled on the left.
SAMPLES = 1 << 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Riemann sum of a polynomial.")
    parser.add_argument(
        "--coefficients",
        default=",".join(f"{c:g}" for c in DEFAULT_COEFFICIENTS),
        help="comma separated coefficients, constant term first (default: %(default)s)",
    )
    parser.add_argument("--lower", type=float, default=0.0)
    parser.add_argument("--upper", type=float, default=1.0)
    parser.add_argument("-n", "--samples", type=int, default=SAMPLES)
    parser.add_argument("--policy", choices=[p.value for p in SumType], default=SumType.LEFT.value)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    warnings.simplefilter("default", ResourceWarning)
    args = build_parser().parse_args(argv)

    try:
        coefficients = parse_coefficients(args.coefficients)
    except RequestError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.samples < 1:
        print("error: the number of samples must be at least 1", file=sys.stderr)
        return 2

    polynomial = construct(FunctionKind.POLYNOMIAL, len(coefficients) - 1, coefficients)
    if not polynomial:
        print(f"error: {polynomial.reason}", file=sys.stderr)
        return 2

    with polynomial:
        print("%g" % integrate(args.lower, args.upper, polynomial, args.samples, SumType(args.policy)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
