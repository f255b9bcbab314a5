"""
Boolean combinators.

This module defines the internal nodes of a predicate tree:
- AndPredicate: both operands must be true
- OrPredicate: either operand must be true
- NotPredicate: negates its operand

Operands are evaluated left to right with short-circuit semantics. Each node
owns its operands and never changes after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .core import Item, Predicate
from .reflection import Case, Child


# =============================================================================
# AND / OR
# =============================================================================

@dataclass(frozen=True)
class AndPredicate(Predicate[Item]):
    """
    AND expression: both operands must be true.

    Short-circuit evaluation: when left is false, right is not evaluated.

    Attributes:
        left: Evaluated first
        right: Evaluated only when left is true

    Examples:
        AndPredicate(greater_than(0), less_than(10))  # (var > 0 && var < 10)
    """
    left: Predicate[Item]
    right: Predicate[Item]

    def evaluate(self, item: Item) -> bool:
        return self.left.evaluate(item) and self.right.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        """
        Explain the AND result.

        A true result needs both operands' cases. A false result is explained
        by the first operand that fails.
        """
        left_case = self.left.find_case(expected, item)
        if expected:
            if left_case is None:
                return None
            right_case = self.right.find_case(expected, item)
            if right_case is None:
                return None
            return Case(self, expected).add_child(left_case).add_child(right_case)

        if left_case is not None:
            return Case(self, expected).add_child(left_case)
        right_case = self.right.find_case(expected, item)
        if right_case is None:
            return None
        return Case(self, expected).add_child(right_case)

    def children(self) -> Iterator[Child]:
        yield Child("left", self.left)
        yield Child("right", self.right)

    def __str__(self) -> str:
        return f"({self.left} && {self.right})"


@dataclass(frozen=True)
class OrPredicate(Predicate[Item]):
    """
    OR expression: either operand must be true.

    Short-circuit evaluation: when left is true, right is not evaluated.

    Attributes:
        left: Evaluated first
        right: Evaluated only when left is false
    """
    left: Predicate[Item]
    right: Predicate[Item]

    def evaluate(self, item: Item) -> bool:
        return self.left.evaluate(item) or self.right.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        """
        Explain the OR result.

        A true result is explained by the first operand that passes. A false
        result needs both operands' cases.
        """
        left_case = self.left.find_case(expected, item)
        if not expected:
            if left_case is None:
                return None
            right_case = self.right.find_case(expected, item)
            if right_case is None:
                return None
            return Case(self, expected).add_child(left_case).add_child(right_case)

        if left_case is not None:
            return Case(self, expected).add_child(left_case)
        right_case = self.right.find_case(expected, item)
        if right_case is None:
            return None
        return Case(self, expected).add_child(right_case)

    def children(self) -> Iterator[Child]:
        yield Child("left", self.left)
        yield Child("right", self.right)

    def __str__(self) -> str:
        return f"({self.left} || {self.right})"


# =============================================================================
# NOT
# =============================================================================

@dataclass(frozen=True)
class NotPredicate(Predicate[Item]):
    """
    NOT expression: negates the operand.

    Attributes:
        inner: The predicate to negate

    Examples:
        NotPredicate(always())  # (! true)
    """
    inner: Predicate[Item]

    def evaluate(self, item: Item) -> bool:
        return not self.inner.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        # The operand is explained for the opposite outcome.
        inner_case = self.inner.find_case(not expected, item)
        if inner_case is None:
            return None
        return Case(self, expected).add_child(inner_case)

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return f"(! {self.inner})"


__all__ = [
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
]
