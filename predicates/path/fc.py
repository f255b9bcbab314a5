"""Adapter turning a predicate over file bytes into a predicate over paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..core import Predicate
from ..reflection import Case, Child, Product
from ..utils.logger import get_logger
from .existence import PathItem
from .fs import read_file


@dataclass(frozen=True)
class FileContentPredicate(Predicate[PathItem]):
    """
    Read the file at the item path and evaluate inner on its bytes.

    An unreadable file evaluates to False without consulting inner.

    Examples:
        from_file_path(string_contains("TODO").from_utf8()).evaluate("notes.txt")
    """
    inner: Predicate[bytes]

    def _read(self, item: PathItem) -> tuple[Optional[bytes], Optional[Exception]]:
        try:
            return read_file(item), None
        except (OSError, ValueError) as e:
            get_logger().soft_failure(self, "cannot read candidate", path=item, error=e)
            return None, e

    def evaluate(self, item: PathItem) -> bool:
        content, _ = self._read(item)
        if content is None:
            return False
        return self.inner.evaluate(content)

    def find_case(self, expected: bool, item: PathItem) -> Optional[Case]:
        content, error = self._read(item)
        if content is None:
            if expected:
                return None
            return Case(self, False).add_product(
                Product("error", getattr(error, "strerror", None) or str(error))
            )
        inner_case = self.inner.find_case(expected, content)
        if inner_case is None:
            return None
        return Case(self, expected).add_child(inner_case)

    def children(self) -> Iterator[Child]:
        yield Child("predicate", self.inner)

    def __str__(self) -> str:
        return str(self.inner)


def from_file_path(predicate: Predicate[bytes]) -> FileContentPredicate:
    """Evaluate predicate on the content of the file at the item path."""
    return FileContentPredicate(predicate)


__all__ = [
    "FileContentPredicate",
    "from_file_path",
]
