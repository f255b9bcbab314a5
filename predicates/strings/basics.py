"""
Plain string checks: emptiness and substring patterns.

    string_starts_with("Hello").evaluate("Hello World")   # True
    string_contains("Two").count(2).evaluate("One Two Three Two One")   # True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..core import Predicate, default_find_case
from ..reflection import Case, Parameter, Product
from ..types import PatternOp
from .adapters import StrPredicateExt


@dataclass(frozen=True)
class IsEmptyPredicate(StrPredicateExt, Predicate[str]):
    """Item has length zero."""

    def evaluate(self, item: str) -> bool:
        return len(item) == 0

    def __str__(self) -> str:
        return "var.is_empty()"


@dataclass(frozen=True)
class PatternPredicate(StrPredicateExt, Predicate[str]):
    """
    Substring check selected by op.

    Attributes:
        pattern: Literal text to look for
        op: STARTS_WITH, ENDS_WITH or CONTAINS
    """
    pattern: str
    op: PatternOp

    def evaluate(self, item: str) -> bool:
        return self.op.apply(item, self.pattern)

    def count(self, count: int) -> "MatchesPredicate":
        """
        Require exactly count non-overlapping occurrences of the pattern.

        Only meaningful for string_contains(); the op is dropped.
        """
        return MatchesPredicate(self.pattern, count)

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        case = default_find_case(self, expected, item)
        if case is None:
            return None
        return case.add_product(Product("var", repr(item)))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("pattern", repr(self.pattern))

    def __str__(self) -> str:
        return f"var.{self.op.value}({self.pattern!r})"


@dataclass(frozen=True)
class MatchesPredicate(StrPredicateExt, Predicate[str]):
    """Item contains pattern exactly count times (non-overlapping)."""
    pattern: str
    count: int

    def evaluate(self, item: str) -> bool:
        return item.count(self.pattern) == self.count

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        actual = item.count(self.pattern)
        result = actual == self.count
        if result != expected:
            return None
        return Case(self, result).add_product(Product("actual count", actual))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("pattern", repr(self.pattern))
        yield Parameter("count", self.count)

    def __str__(self) -> str:
        return f"var.contains({self.pattern!r}).count({self.count})"


def string_is_empty() -> IsEmptyPredicate:
    """Item must be the empty string."""
    return IsEmptyPredicate()


def string_starts_with(pattern: str) -> PatternPredicate:
    """Item must start with pattern."""
    return PatternPredicate(pattern, PatternOp.STARTS_WITH)


def string_ends_with(pattern: str) -> PatternPredicate:
    """Item must end with pattern."""
    return PatternPredicate(pattern, PatternOp.ENDS_WITH)


def string_contains(pattern: str) -> PatternPredicate:
    """Item must contain pattern."""
    return PatternPredicate(pattern, PatternOp.CONTAINS)


__all__ = [
    "IsEmptyPredicate",
    "PatternPredicate",
    "MatchesPredicate",
    "string_is_empty",
    "string_starts_with",
    "string_ends_with",
    "string_contains",
]
