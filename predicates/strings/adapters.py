"""
String adapters: preprocess the item, then delegate to a string predicate.

- TrimPredicate: strip surrounding whitespace
- Utf8Predicate: decode bytes / OS strings as UTF-8, False when undecodable
- NormalizedPredicate: convert CRLF and CR line endings to LF

Adapters display as their inner predicate; they change the input, not the
question being asked.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ..core import Predicate
from ..reflection import Case, Child
from ..utils.logger import get_logger


class StrPredicateExt:
    """Adapter shortcuts for predicates over str."""

    def trim(self) -> "TrimPredicate":
        """Strip whitespace from the item before evaluating."""
        return TrimPredicate(self)

    def from_utf8(self) -> "Utf8Predicate":
        """Accept bytes or OS strings, decoding them as UTF-8."""
        return Utf8Predicate(self)

    def normalize(self) -> "NormalizedPredicate":
        """Normalize line endings to LF before evaluating."""
        return NormalizedPredicate(self)


def _wrap_case(adapter: Predicate, expected: bool, inner_case: Optional[Case]) -> Optional[Case]:
    if inner_case is None:
        return None
    return Case(adapter, expected).add_child(inner_case)


@dataclass(frozen=True)
class TrimPredicate(StrPredicateExt, Predicate[str]):
    """Evaluate inner on item.strip()."""
    inner: Predicate[str]

    def evaluate(self, item: str) -> bool:
        return self.inner.evaluate(item.strip())

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        return _wrap_case(self, expected, self.inner.find_case(expected, item.strip()))

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return str(self.inner)


@dataclass(frozen=True)
class Utf8Predicate(StrPredicateExt, Predicate[Any]):
    """
    Decode the item as UTF-8 and evaluate inner on the text.

    Accepts bytes-like objects, str and os.PathLike. A str is accepted only
    if it is encodable as UTF-8 (OS strings decoded with surrogateescape are
    not). Anything undecodable evaluates to False.
    """
    inner: Predicate[str]

    def _decode(self, item: Any) -> Optional[str]:
        if isinstance(item, os.PathLike):
            item = os.fspath(item)
        try:
            if isinstance(item, (bytes, bytearray, memoryview)):
                return bytes(item).decode("utf-8")
            item.encode("utf-8")
            return item
        except UnicodeError as e:
            get_logger().soft_failure(self, "item is not valid UTF-8", error=e.reason)
            return None

    def evaluate(self, item: Any) -> bool:
        text = self._decode(item)
        if text is None:
            return False
        return self.inner.evaluate(text)

    def find_case(self, expected: bool, item: Any) -> Optional[Case]:
        text = self._decode(item)
        if text is None:
            return Case(self, False) if not expected else None
        return _wrap_case(self, expected, self.inner.find_case(expected, text))

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return str(self.inner)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(frozen=True)
class NormalizedPredicate(StrPredicateExt, Predicate[str]):
    """Evaluate inner with line endings normalized to LF."""
    inner: Predicate[str]

    def evaluate(self, item: str) -> bool:
        return self.inner.evaluate(normalize_line_endings(item))

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        normalized = normalize_line_endings(item)
        return _wrap_case(self, expected, self.inner.find_case(expected, normalized))

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return str(self.inner)


def trim(predicate: Predicate[str]) -> TrimPredicate:
    """Evaluate predicate on the item with surrounding whitespace removed."""
    return TrimPredicate(predicate)


def from_utf8(predicate: Predicate[str]) -> Utf8Predicate:
    """Evaluate predicate on bytes decoded as UTF-8; undecodable -> False."""
    return Utf8Predicate(predicate)


def normalize_newlines(predicate: Predicate[str]) -> NormalizedPredicate:
    """Evaluate predicate on the item with line endings normalized to LF."""
    return NormalizedPredicate(predicate)


__all__ = [
    "StrPredicateExt",
    "TrimPredicate",
    "Utf8Predicate",
    "NormalizedPredicate",
    "normalize_line_endings",
    "trim",
    "from_utf8",
    "normalize_newlines",
]
