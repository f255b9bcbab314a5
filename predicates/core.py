"""
The predicate capability contract.

A Predicate is a single-argument boolean function assembled at runtime:

    pred = greater_than(3).and_(less_than(10)).named("in range")
    pred.evaluate(5)     # True
    pred(12)             # False, __call__ is evaluate
    str(pred)            # "in range"

Design principles:
- evaluate() is pure: a function of construction-time configuration and the
  item, never of evaluation history
- Building a tree never evaluates it
- Reflection (find_case, parameters, children) never changes the outcome
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from .reflection import Case, PredicateReflection

if TYPE_CHECKING:
    from .boolean import AndPredicate, NotPredicate, OrPredicate
    from .boxed import BoxPredicate
    from .name import NamePredicate

Item = TypeVar("Item")


class Predicate(PredicateReflection, ABC, Generic[Item]):
    """
    Base class every predicate variant derives from.

    Subclasses implement evaluate() and __str__(). find_case() has a default
    that wraps the plain boolean; leaves override it to attach products and
    combinators override it to attach child cases.
    """

    @abstractmethod
    def evaluate(self, item: Item) -> bool:
        """Execute this predicate against item."""

    @abstractmethod
    def __str__(self) -> str:
        """Short human-readable expression, e.g. "var == 5"."""

    def __call__(self, item: Item) -> bool:
        return self.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        """
        Find a case explaining why evaluate(item) == expected.

        Returns:
            A Case whose result equals expected, or None when the predicate
            evaluates to the opposite value.
        """
        return default_find_case(self, expected, item)

    @property
    def thread_safe(self) -> bool:
        """
        Whether this predicate may be evaluated from several threads at once.

        Nodes are safe when every child is; leaves with opaque callables
        override this with an explicit flag.
        """
        return all(child.predicate.thread_safe for child in self.children())

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def and_(self, other: "Predicate[Item]") -> "AndPredicate[Item]":
        """
        Logical AND of two predicates. The right side is skipped when the
        left side is false.

        Examples:
            always().and_(never()).evaluate(4)   # False
        """
        from .boolean import AndPredicate

        return AndPredicate(self, other)

    def or_(self, other: "Predicate[Item]") -> "OrPredicate[Item]":
        """
        Logical OR of two predicates. The right side is skipped when the
        left side is true.
        """
        from .boolean import OrPredicate

        return OrPredicate(self, other)

    def not_(self) -> "NotPredicate[Item]":
        """Logical NOT of this predicate."""
        from .boolean import NotPredicate

        return NotPredicate(self)

    def boxed(self) -> "BoxPredicate[Item]":
        """
        Wrap this predicate behind a type-erased handle.

        Raises:
            ThreadSafetyError: If this predicate has not opted in to shared use
        """
        from .boxed import BoxPredicate

        return BoxPredicate(self)

    def named(self, name: str) -> "NamePredicate[Item]":
        """Same evaluation, displayed as name."""
        from .name import NamePredicate

        return NamePredicate(self, name)

    def __and__(self, other: "Predicate[Item]") -> "AndPredicate[Item]":
        return self.and_(other)

    def __or__(self, other: "Predicate[Item]") -> "OrPredicate[Item]":
        return self.or_(other)

    def __invert__(self) -> "NotPredicate[Item]":
        return self.not_()


def default_find_case(
    predicate: Predicate[Item], expected: bool, item: Item
) -> Optional[Case]:
    """Case with no products when the predicate evaluates to expected."""
    actual = predicate.evaluate(item)
    if actual == expected:
        return Case(predicate, actual)
    return None


__all__ = [
    "Item",
    "Predicate",
    "default_find_case",
]
