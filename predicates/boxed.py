"""
Type-erased predicate handle.

A BoxPredicate stores any predicate tree behind one concrete type so that
heterogeneous trees can live in the same list or mapping:

    checks = {
        "positive": greater_than(0).boxed(),
        "small": less_than(10).and_(not_equal_to(5)).boxed(),
    }

Evaluation, find_case, reflection and display all forward to the wrapped
predicate. Boxing is the point where a tree is declared shareable, so the
wrapped predicate must be thread-safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .core import Item, Predicate
from .errors import ThreadSafetyError
from .reflection import Case, Child, Parameter


@dataclass(frozen=True)
class BoxPredicate(Predicate[Item]):
    """Forwarding wrapper around a predicate of unknown concrete type."""
    inner: Predicate[Item]

    def __post_init__(self):
        """Reject predicates that have not opted in to shared use."""
        if not self.inner.thread_safe:
            raise ThreadSafetyError(str(self.inner))

    def evaluate(self, item: Item) -> bool:
        return self.inner.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        return self.inner.find_case(expected, item)

    def parameters(self) -> Iterator[Parameter]:
        return self.inner.parameters()

    def children(self) -> Iterator[Child]:
        return self.inner.children()

    @property
    def thread_safe(self) -> bool:
        return self.inner.thread_safe

    def boxed(self) -> "BoxPredicate[Item]":
        return self

    def __str__(self) -> str:
        return str(self.inner)


__all__ = ["BoxPredicate"]
