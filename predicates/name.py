"""Diagnostic renaming of a predicate expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .core import Item, Predicate
from .reflection import Case, Child


@dataclass(frozen=True)
class NamePredicate(Predicate[Item]):
    """
    Evaluates exactly like inner but displays as a literal name.

    Examples:
        greater_than(17).named("adult")   # displays "adult"
    """
    inner: Predicate[Item]
    name: str

    def evaluate(self, item: Item) -> bool:
        return self.inner.evaluate(item)

    def find_case(self, expected: bool, item: Item) -> Optional[Case]:
        inner_case = self.inner.find_case(expected, item)
        if inner_case is None:
            return None
        return Case(self, expected).add_child(inner_case)

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return self.name


__all__ = ["NamePredicate"]
