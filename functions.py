from __future__ import annotations

import logging
import operator
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


class FunctionKind(Enum):
    POLYNOMIAL = "polynomial"


@dataclass(frozen=True)
class Polynomial:
    """Coefficients in ascending order: coefficients[i] multiplies x**i."""

    degree: int
    coefficients: Tuple[float, ...]


@dataclass(frozen=True)
class ConstructionFailure:
    kind: Any
    reason: str

    def __bool__(self) -> bool:
        return False


def _fatal(message: str) -> None:
    logger.critical("FATAL: %s", message)
    raise SystemExit(1)


def polynomial_new(degree: int, coeffs: Sequence[float]) -> Polynomial:
    if isinstance(degree, bool):
        raise TypeError(f"degree must be an integer, got {degree!r}")
    degree = operator.index(degree)
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    coefficients = tuple(float(c) for c in coeffs[: degree + 1])
    if len(coefficients) != degree + 1:
        raise ValueError(
            f"degree {degree} needs {degree + 1} coefficients, got {len(coefficients)}"
        )
    return Polynomial(degree, coefficients)


def polynomial_eval(x: float, p: Polynomial) -> float:
    """
    Sum of coefficients[i] * x**i using a running power of x.

    The power is carried from term to term (one multiply per term) instead of
    calling pow(x, i), so results can differ from a pow-based sum in the last
    bits for non-integer x.
    """
    acc = 0.0
    power = 1.0
    for c in p.coefficients:
        acc += c * power
        power *= x
    return acc


class Function:
    """
    A scalar real function owning its state.

    Use construct() to build one and destroy() (or a with block) to release
    it. An instance collected while still holding its state emits a
    ResourceWarning. Python ignores ResourceWarning by default; enable it
    with -X dev, -W default::ResourceWarning or
    warnings.simplefilter("default", ResourceWarning) (demo.py does this).
    """

    def __init__(self, kind: FunctionKind, state: Polynomial) -> None:
        self._kind = kind
        self._state = state

    @property
    def kind(self) -> FunctionKind:
        return self._kind

    @property
    def state(self) -> Polynomial:
        if self._state is None:
            raise ValueError("function has already been destroyed")
        return self._state

    @property
    def destroyed(self) -> bool:
        return self._state is None

    def evaluate(self, x: float) -> float:
        return evaluate(self, x)

    def destroy(self) -> None:
        destroy(self)

    def __call__(self, x: float) -> float:
        return evaluate(self, x)

    def __enter__(self) -> "Function":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.destroyed:
            destroy(self)

    def __del__(self) -> None:
        if getattr(self, "_state", None) is not None:
            warnings.warn(
                f"function {self!r} was never destroyed",
                ResourceWarning,
                source=self,
            )

    def __repr__(self) -> str:
        kind = getattr(self._kind, "value", self._kind)
        return f"Function(kind={kind}, state={self._state!r})"


def construct(kind: Union[FunctionKind, str], *args: Any) -> Union[Function, ConstructionFailure]:
    """
    Build a Function of the given kind.

    For FunctionKind.POLYNOMIAL the arguments are (degree, coefficients); the
    first degree + 1 coefficients are copied. Returns a ConstructionFailure
    (falsy) instead of raising when the kind is unknown, the arguments do not
    fit the kind, or memory runs out.
    """
    try:
        tag = FunctionKind(kind)
    except ValueError:
        logger.warning("Unknown function kind: %r", kind)
        return ConstructionFailure(kind, f"unknown function kind: {kind!r}")

    try:
        if tag is FunctionKind.POLYNOMIAL:
            if len(args) != 2:
                raise TypeError(
                    f"polynomial takes (degree, coefficients), got {len(args)} arguments"
                )
            state = polynomial_new(*args)
        else:
            return ConstructionFailure(kind, f"unknown function kind: {kind!r}")
        function = Function(tag, state)
    except MemoryError:
        logger.warning("Out of memory while constructing %s", tag.value)
        return ConstructionFailure(tag, "out of memory")
    except (TypeError, ValueError) as error:
        logger.warning("Invalid arguments for %s: %s", tag.value, error)
        return ConstructionFailure(tag, str(error))

    logger.debug("Constructed %r", function)
    return function


def evaluate(function: Function, x: float) -> float:
    state = function.state
    if function.kind is FunctionKind.POLYNOMIAL:
        return polynomial_eval(x, state)
    _fatal(f"cannot evaluate function of kind {function.kind!r}")


def destroy(function: Function) -> None:
    if function.destroyed:
        raise ValueError("function has already been destroyed")
    if function.kind is FunctionKind.POLYNOMIAL:
        function._state = None
    else:
        _fatal(f"cannot destroy function of kind {function.kind!r}")
    logger.debug("Destroyed %s function", function.kind.value)
