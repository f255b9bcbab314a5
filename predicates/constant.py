"""Constant predicates: always true or always false."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .core import Predicate


@dataclass(frozen=True)
class BooleanPredicate(Predicate[Any]):
    """Ignores the item and returns a fixed boolean."""
    retval: bool

    def evaluate(self, item: Any) -> bool:
        return self.retval

    def __str__(self) -> str:
        return "true" if self.retval else "false"


def always() -> BooleanPredicate:
    """Predicate that is true for every item."""
    return BooleanPredicate(True)


def never() -> BooleanPredicate:
    """Predicate that is false for every item."""
    return BooleanPredicate(False)


__all__ = [
    "BooleanPredicate",
    "always",
    "never",
]
