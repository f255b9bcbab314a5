"""
Set-membership predicates.

Three tiers, chosen by what the value type supports:
- InPredicate: equality only, linear scan, O(n)
- OrdInPredicate: total order, binary search, O(log n)
- HashableInPredicate: hashable, set lookup, O(1) average

All three answer the same question for the same source values. The linear
variant is not suited to large sets; call .sorted() or use
membership_hashed() instead.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from .core import Predicate, default_find_case
from .reflection import Case, Parameter, Product


def _membership_case(predicate: Predicate, expected: bool, item: Any) -> Optional[Case]:
    case = default_find_case(predicate, expected, item)
    if case is None:
        return None
    return case.add_product(Product("var", repr(item)))


@dataclass(frozen=True)
class InPredicate(Predicate[Any]):
    """Linear containment scan over an ordered tuple of values."""
    values: tuple[Any, ...]

    def evaluate(self, item: Any) -> bool:
        return item in self.values

    def sorted(self) -> "OrdInPredicate":
        """Convert to the binary-search variant (values must be orderable)."""
        return OrdInPredicate(tuple(sorted(self.values)))

    def find_case(self, expected: bool, item: Any) -> Optional[Case]:
        return _membership_case(self, expected, item)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("values", list(self.values))

    def __str__(self) -> str:
        return f"var in {list(self.values)!r}"


@dataclass(frozen=True)
class OrdInPredicate(Predicate[Any]):
    """Binary search over a sorted tuple of values."""
    values: tuple[Any, ...]

    def evaluate(self, item: Any) -> bool:
        if item != item:
            # NaN has no place in the order; match by identity like `in` does
            return any(value is item for value in self.values)
        index = bisect_left(self.values, item)
        return index < len(self.values) and self.values[index] == item

    def find_case(self, expected: bool, item: Any) -> Optional[Case]:
        return _membership_case(self, expected, item)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("values", list(self.values))

    def __str__(self) -> str:
        return f"var in {list(self.values)!r}"


@dataclass(frozen=True)
class HashableInPredicate(Predicate[Any]):
    """Hash-set lookup."""
    values: frozenset

    def evaluate(self, item: Any) -> bool:
        return item in self.values

    def find_case(self, expected: bool, item: Any) -> Optional[Case]:
        return _membership_case(self, expected, item)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("values", self._display_values())

    def _display_values(self) -> list:
        # Sets have no stable order; sort when the values allow it.
        try:
            return sorted(self.values)
        except TypeError:
            return list(self.values)

    def __str__(self) -> str:
        return f"var in {{{', '.join(repr(v) for v in self._display_values())}}}"


def membership(values: Iterable[Any]) -> InPredicate:
    """
    Item must be one of values (linear scan).

    Examples:
        membership([1, 3, 5]).evaluate(3)          # True
        membership([5, 1, 3]).sorted().evaluate(4) # False
    """
    return InPredicate(tuple(values))


def membership_hashed(values: Iterable[Any]) -> HashableInPredicate:
    """Item must be one of values (hash lookup)."""
    return HashableInPredicate(frozenset(values))


__all__ = [
    "InPredicate",
    "OrdInPredicate",
    "HashableInPredicate",
    "membership",
    "membership_hashed",
]
