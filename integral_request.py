from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from functions import FunctionKind, construct
from integral_core import N_VALUES, SumType, compute_integrals

DEFAULT_COEFFICIENTS = (0.0, 0.0, 2.0)
MAX_SAMPLES = max(N_VALUES)
MAX_COEFFICIENTS = 64


class RequestError(ValueError):
    """Raised for integration requests that cannot be served."""


@dataclass(frozen=True)
class IntegralRequest:
    lower: float
    upper: float
    coefficients: Tuple[float, ...]
    policy: SumType
    n_values: Tuple[int, ...]


def parse_coefficients(raw: Optional[str]) -> Tuple[float, ...]:
    if raw is None or raw.strip() == "":
        return DEFAULT_COEFFICIENTS
    try:
        coefficients = tuple(float(part) for part in raw.split(","))
    except ValueError:
        raise RequestError("coefficients must be a comma separated list of numbers")
    if len(coefficients) > MAX_COEFFICIENTS:
        raise RequestError(f"at most {MAX_COEFFICIENTS} coefficients are allowed")
    if not all(math.isfinite(c) for c in coefficients):
        raise RequestError("coefficients must be finite")
    return coefficients


def parse_request(lower: Optional[str], upper: Optional[str], params: Mapping[str, str]) -> IntegralRequest:
    """
    Validate the route and query parameters shared by the HTTP front ends.

    Query parameters: coefficients (ascending, default "0,0,2"), policy
    ("left" or "right", default "left") and n (a single sample count of at
    most MAX_SAMPLES instead of the N_VALUES ladder).
    """
    try:
        lo = float(lower)
        up = float(upper)
    except (TypeError, ValueError):
        raise RequestError("lower and upper must be numbers")
    if not (math.isfinite(lo) and math.isfinite(up) and math.isfinite(up - lo)):
        raise RequestError("lower and upper must be finite")

    coefficients = parse_coefficients(params.get("coefficients"))

    try:
        policy = SumType(params.get("policy", "left").lower())
    except ValueError:
        raise RequestError("policy must be 'left' or 'right'")

    raw_n = params.get("n")
    if raw_n is None:
        n_values = tuple(N_VALUES)
    else:
        try:
            n = int(raw_n)
        except ValueError:
            raise RequestError("n must be an integer")
        if n < 1:
            raise RequestError("n must be at least 1")
        if n > MAX_SAMPLES:
            raise RequestError(f"n must be at most {MAX_SAMPLES}")
        n_values = (n,)

    return IntegralRequest(lo, up, coefficients, policy, n_values)


def serve_request(request: IntegralRequest) -> Dict[str, Any]:
    function = construct(FunctionKind.POLYNOMIAL, len(request.coefficients) - 1, request.coefficients)
    if not function:
        raise RequestError(function.reason)
    with function:
        payload = compute_integrals(function, request.lower, request.upper, request.policy, request.n_values)

    # large bounds or degrees can still overflow while summing
    if not all(math.isfinite(row["value"]) for row in payload["results"]):
        raise RequestError("integral is not finite for these bounds and coefficients")
    return payload
