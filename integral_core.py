from __future__ import annotations

import logging
import operator
import time
from enum import Enum
from typing import Any, Dict, List, Sequence

from functions import Function, FunctionKind, evaluate

logger = logging.getLogger(__name__)

N_VALUES = [10, 100, 1000, 10_000, 100_000, 1_000_000]


class SumType(Enum):
    RIGHT = "right"
    LEFT = "left"


def integrate(lower: float, upper: float, function: Function, sample_count: int, policy: SumType) -> float:
    """
    Riemann sum of `function` over [lower, upper] using `sample_count`
    rectangles, sampled at the right or left edge of each one.

    lower > upper is allowed and gives the orientation-reversed result.
    sample_count may be any integral type (int, numpy.int64, ...) but not bool.
    """
    if isinstance(sample_count, bool):
        raise ValueError(f"sample_count must be an integer, got {sample_count!r}")
    try:
        sample_count = operator.index(sample_count)
    except TypeError:
        raise ValueError(f"sample_count must be an integer, got {sample_count!r}")
    if sample_count < 1:
        raise ValueError(f"sample_count must be at least 1, got {sample_count}")

    step = (upper - lower) / sample_count

    if policy is SumType.RIGHT:
        return _riemann_right(lower, function, sample_count, step)
    if policy is SumType.LEFT:
        return _riemann_left(lower, function, sample_count, step)
    logger.critical("FATAL: unknown sum type: %r", policy)
    raise SystemExit(1)


def _riemann_right(a: float, function: Function, n: int, step: float) -> float:
    total = 0.0
    for i in range(1, n + 1):
        total += evaluate(function, a + i * step)
    return total * step


def _riemann_left(a: float, function: Function, n: int, step: float) -> float:
    total = 0.0
    for i in range(n):
        total += evaluate(function, a + i * step)
    return total * step


def describe(function: Function) -> str:
    """Human-readable polynomial, highest power first, e.g. 'x^3 + 1'."""
    if function.kind is not FunctionKind.POLYNOMIAL:
        return function.kind.value

    text = ""
    coefficients = function.state.coefficients
    for i in range(len(coefficients) - 1, -1, -1):
        c = coefficients[i]
        if c == 0:
            continue
        magnitude = abs(c)
        if i == 0:
            body = f"{magnitude:g}"
        else:
            factor = "" if magnitude == 1 else f"{magnitude:g}"
            body = factor + ("x" if i == 1 else f"x^{i}")
        if not text:
            text = ("-" if c < 0 else "") + body
        else:
            text += f" {'-' if c < 0 else '+'} {body}"
    return text or "0"


def compute_integrals(
    function: Function,
    lower: float,
    upper: float,
    policy: SumType = SumType.LEFT,
    n_values: Sequence[int] = N_VALUES,
) -> Dict[str, Any]:
    results: List[Dict[str, Any]] = []
    overall_start = time.perf_counter()

    for n in n_values:
        start = time.perf_counter()
        val = integrate(lower, upper, function, n, policy)
        elapsed_ms = (time.perf_counter() - start) * 1000
        results.append({"n": n, "value": val, "time_ms": elapsed_ms})

    overall_ms = (time.perf_counter() - overall_start) * 1000
    logger.debug("Computed %d integrals of %s in %.1f ms", len(results), describe(function), overall_ms)

    return {
        "function": describe(function),
        "lower": lower,
        "upper": upper,
        "policy": policy.value,
        "results": results,
        "total_time_ms": overall_ms,
    }
