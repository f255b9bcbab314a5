"""
Comparison predicates over equality and ordering.

Equality needs only ==/!= on the item type; ordering needs a partial order
(<, <=, >=, >). The constant is owned by the predicate and displayed with
repr(), so equal_to("5") and equal_to(5) render differently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, TypeVar

from .core import Predicate, default_find_case
from .reflection import Case, Parameter, Product
from .types import EqOp, OrdOp

T = TypeVar("T")


# =============================================================================
# Equality
# =============================================================================

@dataclass(frozen=True)
class EqPredicate(Predicate[T]):
    """
    Compare the item to a constant with the item type's equality.

    Attributes:
        constant: Value to compare against
        op: EQUAL or NOT_EQUAL
    """
    constant: T
    op: EqOp

    def evaluate(self, item: T) -> bool:
        return self.op.apply(item, self.constant)

    def find_case(self, expected: bool, item: T) -> Optional[Case]:
        case = default_find_case(self, expected, item)
        if case is None:
            return None
        return case.add_product(Product("var", repr(item)))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("constant", repr(self.constant))

    def __str__(self) -> str:
        return f"var {self.op.value} {self.constant!r}"


def equal_to(constant: Any) -> EqPredicate:
    """
    Item must equal constant.

    Examples:
        equal_to(5).evaluate(5)    # True
        str(equal_to(5))           # "var == 5"
    """
    return EqPredicate(constant, EqOp.EQUAL)


def not_equal_to(constant: Any) -> EqPredicate:
    """Item must differ from constant."""
    return EqPredicate(constant, EqOp.NOT_EQUAL)


# =============================================================================
# Ordering
# =============================================================================

@dataclass(frozen=True)
class OrdPredicate(Predicate[T]):
    """
    Compare the item to a constant with the item type's ordering.

    Incomparable values (e.g. NaN) follow the type's own operators, which
    makes every ordering check false for them.
    """
    constant: T
    op: OrdOp

    def evaluate(self, item: T) -> bool:
        return self.op.apply(item, self.constant)

    def find_case(self, expected: bool, item: T) -> Optional[Case]:
        case = default_find_case(self, expected, item)
        if case is None:
            return None
        return case.add_product(Product("var", repr(item)))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("constant", repr(self.constant))

    def __str__(self) -> str:
        return f"var {self.op.value} {self.constant!r}"


def less_than(constant: Any) -> OrdPredicate:
    """Item must be strictly less than constant."""
    return OrdPredicate(constant, OrdOp.LESS_THAN)


def less_or_equal(constant: Any) -> OrdPredicate:
    """Item must be less than or equal to constant."""
    return OrdPredicate(constant, OrdOp.LESS_OR_EQUAL)


def greater_or_equal(constant: Any) -> OrdPredicate:
    """Item must be greater than or equal to constant."""
    return OrdPredicate(constant, OrdOp.GREATER_OR_EQUAL)


def greater_than(constant: Any) -> OrdPredicate:
    """Item must be strictly greater than constant."""
    return OrdPredicate(constant, OrdOp.GREATER_THAN)


__all__ = [
    "EqPredicate",
    "OrdPredicate",
    "equal_to",
    "not_equal_to",
    "less_than",
    "less_or_equal",
    "greater_or_equal",
    "greater_than",
]
