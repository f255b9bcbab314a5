"""
Regular-expression predicates.

The pattern is compiled once at construction; an invalid pattern raises
RegexError and no predicate is created.

    regex_matches("T[a-z]*").count(3).evaluate("One Two Three Two One")   # True
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from ..core import Predicate, default_find_case
from ..errors import RegexError
from ..reflection import Case, Parameter, Product
from ..utils.logger import get_logger
from .adapters import StrPredicateExt


@dataclass(frozen=True)
class RegexPredicate(StrPredicateExt, Predicate[str]):
    """Pattern matches somewhere in the item."""
    regex: re.Pattern

    def evaluate(self, item: str) -> bool:
        return self.regex.search(item) is not None

    def count(self, count: int) -> "RegexMatchesPredicate":
        """Require exactly count non-overlapping matches instead."""
        return RegexMatchesPredicate(self.regex, count)

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        case = default_find_case(self, expected, item)
        if case is None:
            return None
        return case.add_product(Product("var", repr(item)))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("pattern", self.regex.pattern)

    def __str__(self) -> str:
        return f"var.is_match({self.regex.pattern})"


@dataclass(frozen=True)
class RegexMatchesPredicate(StrPredicateExt, Predicate[str]):
    """Number of non-overlapping matches equals count."""
    regex: re.Pattern
    count: int

    def _count(self, item: str) -> int:
        return sum(1 for _ in self.regex.finditer(item))

    def evaluate(self, item: str) -> bool:
        return self._count(item) == self.count

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        actual = self._count(item)
        result = actual == self.count
        if result != expected:
            return None
        return Case(self, result).add_product(Product("actual count", actual))

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("pattern", self.regex.pattern)
        yield Parameter("count", self.count)

    def __str__(self) -> str:
        return f"var.is_match({self.regex.pattern}).count({self.count})"


def regex_matches(pattern: Union[str, re.Pattern]) -> RegexPredicate:
    """
    Item must match pattern (re.search semantics).

    Raises:
        RegexError: If pattern does not compile
    """
    if isinstance(pattern, re.Pattern):
        return RegexPredicate(pattern)
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        get_logger().debug(f"Rejected regex pattern {pattern!r}: {e}")
        raise RegexError(pattern, e) from e
    return RegexPredicate(compiled)


__all__ = [
    "RegexPredicate",
    "RegexMatchesPredicate",
    "regex_matches",
]
