"""
Projection adapter: evaluate a predicate over a transformed item.

    adults = map_item(lambda user: user["age"], greater_or_equal(18), name="age")
    adults.evaluate({"age": 21})   # True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .core import Predicate
from .reflection import Case, Child, Parameter, Product

DEFAULT_MAP_NAME = "map"


@dataclass(frozen=True)
class MapPredicate(Predicate[Any]):
    """
    Apply transform to the item, then delegate to inner.

    Attributes:
        transform: Pure function from item to the inner predicate's item type
        inner: Predicate evaluated on the transformed value
        name: Display name of the transform
        thread_safe: Whether transform may run concurrently (default True)
    """
    transform: Callable[[Any], Any]
    inner: Predicate[Any]
    name: str = DEFAULT_MAP_NAME
    thread_safe: bool = True

    def __post_init__(self):
        # Both the callable and the operand must allow shared use.
        object.__setattr__(self, "thread_safe", self.thread_safe and self.inner.thread_safe)

    def evaluate(self, item: Any) -> bool:
        return self.inner.evaluate(self.transform(item))

    def find_case(self, expected: bool, item: Any) -> Optional[Case]:
        mapped = self.transform(item)
        inner_case = self.inner.find_case(expected, mapped)
        if inner_case is None:
            return None
        return (
            Case(self, expected)
            .add_product(Product("mapped", repr(mapped)))
            .add_child(inner_case)
        )

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("transform", self.name)

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return f"{self.name}(var) |> {self.inner}"


def map_item(
    transform: Callable[[Any], Any],
    predicate: Predicate[Any],
    name: str = DEFAULT_MAP_NAME,
    thread_safe: bool = True,
) -> MapPredicate:
    """Evaluate predicate on transform(item)."""
    return MapPredicate(transform, predicate, name, thread_safe)


__all__ = [
    "MapPredicate",
    "map_item",
]
