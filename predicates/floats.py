"""
Approximate float equality.

Two floats are close when any of these holds:
- they compare equal (covers matching infinities and +0.0 / -0.0)
- |item - target| <= epsilon
- they are at most max_ulps representable float64 values apart

NaN is never close to anything, itself included. An infinity is close only
to the same infinity.

    a = 0.15 + 0.15 + 0.15
    b = 0.1 + 0.1 + 0.25
    float_is_close(a).evaluate(b)                 # True
    float_is_close(a).tolerance(0).evaluate(b)    # False
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np

from .core import Predicate
from .reflection import Case, Parameter, Product

EPSILON = float(np.finfo(np.float64).eps)
DEFAULT_EPSILON = 2.0 * EPSILON
DEFAULT_MAX_ULPS = 2

_INT64_MIN = int(np.iinfo(np.int64).min)


def ulp_distance(a: float, b: float) -> int:
    """
    Number of representable float64 values between a and b.

    The IEEE-754 bit patterns are reinterpreted as int64 and negative values
    are remapped so that integer order follows float order across zero.
    """
    bits = np.array([a, b], dtype=np.float64).view(np.int64)
    ia, ib = (int(v) for v in bits)
    if ia < 0:
        ia = _INT64_MIN - ia
    if ib < 0:
        ib = _INT64_MIN - ib
    return abs(ia - ib)


@dataclass(frozen=True)
class IsClosePredicate(Predicate[float]):
    """
    Item is within epsilon or max_ulps of target.

    Attributes:
        target: Value the item is compared against
        eps: Absolute difference bound
        ulps: ULP distance bound
    """
    target: float
    eps: float = DEFAULT_EPSILON
    ulps: int = DEFAULT_MAX_ULPS

    def epsilon(self, epsilon: float) -> "IsClosePredicate":
        """Set the absolute difference bound."""
        return replace(self, eps=float(epsilon))

    def max_ulps(self, ulps: int) -> "IsClosePredicate":
        """Set the ULP distance bound."""
        if ulps < 0:
            raise ValueError(f"max_ulps must be >= 0, got {ulps}")
        return replace(self, ulps=int(ulps))

    def tolerance(self, distance: int) -> "IsClosePredicate":
        """
        Set both bounds from one distance: epsilon = distance * machine
        epsilon, max_ulps = distance.

        Examples:
            float_is_close(1.0).tolerance(5)
        """
        if distance < 0:
            raise ValueError(f"tolerance must be >= 0, got {distance}")
        return replace(self, eps=distance * EPSILON, ulps=int(distance))

    def _measure(self, item: float) -> tuple[float, int]:
        return abs(float(item) - self.target), ulp_distance(item, self.target)

    def evaluate(self, item: float) -> bool:
        if np.isnan(item) or np.isnan(self.target):
            return False
        if item == self.target:
            return True
        if np.isinf(item) or np.isinf(self.target):
            return False
        actual_eps, actual_ulps = self._measure(item)
        return actual_eps <= self.eps or actual_ulps <= self.ulps

    def find_case(self, expected: bool, item: float) -> Optional[Case]:
        result = self.evaluate(item)
        if result != expected:
            return None
        case = Case(self, result)
        if not (np.isfinite(item) and np.isfinite(self.target)):
            return case
        actual_eps, actual_ulps = self._measure(item)
        return (
            case.add_product(Product("actual epsilon", actual_eps))
            .add_product(Product("actual ulps", actual_ulps))
        )

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("epsilon", self.eps)
        yield Parameter("ulps", self.ulps)

    def __str__(self) -> str:
        return f"var ~= {self.target!r}"


def float_is_close(target: float) -> IsClosePredicate:
    """Item must be within 2 machine epsilons or 2 ULPs of target."""
    return IsClosePredicate(float(target))


__all__ = [
    "EPSILON",
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_ULPS",
    "ulp_distance",
    "IsClosePredicate",
    "float_is_close",
]
