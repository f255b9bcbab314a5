"""Predicates wrapping an arbitrary callable."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterator

from .core import Predicate
from .reflection import Parameter

DEFAULT_FN_NAME = "fn"


@dataclass(frozen=True)
class FnPredicate(Predicate[Any]):
    """
    Call function(item) and coerce the result to bool.

    The callable is opaque, so thread-safety is declared by the caller
    rather than derived.

    Attributes:
        function: The wrapped callable
        name: Display name, shown as "name(var)"
        thread_safe: Whether function may run concurrently (default True)
    """
    function: Callable[[Any], Any]
    name: str = DEFAULT_FN_NAME
    thread_safe: bool = True

    def evaluate(self, item: Any) -> bool:
        return bool(self.function(item))

    def fn_name(self, name: str) -> "FnPredicate":
        """Return a copy displayed as name(var)."""
        return replace(self, name=name)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("thread_safe", self.thread_safe)

    def __str__(self) -> str:
        return f"{self.name}(var)"


def wrap_function(
    function: Callable[[Any], Any],
    name: str = DEFAULT_FN_NAME,
    thread_safe: bool = True,
) -> FnPredicate:
    """
    Wrap a callable as a predicate.

    Examples:
        is_even = wrap_function(lambda n: n % 2 == 0).fn_name("is_even")
        is_even.evaluate(4)   # True
        str(is_even)          # "is_even(var)"
    """
    return FnPredicate(function, name, thread_safe)


__all__ = [
    "DEFAULT_FN_NAME",
    "FnPredicate",
    "wrap_function",
]
