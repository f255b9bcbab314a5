"""Path existence predicates."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from ..core import Predicate
from ..reflection import Parameter
from ..utils.logger import get_logger

PathItem = Union[str, os.PathLike]


@dataclass(frozen=True)
class ExistencePredicate(Predicate[PathItem]):
    """
    Path exists (exists=True) or is absent (exists=False).

    Symbolic links are followed, so a dangling link counts as missing. When
    the filesystem cannot answer (permission denied on a parent, ...) neither
    condition is confirmed and the predicate is False.
    """
    exists: bool

    def _lookup(self, item: PathItem) -> Optional[bool]:
        try:
            Path(item).stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except ValueError as e:
            # Not representable as an OS path (embedded NUL): nothing exists there
            get_logger().soft_failure(self, "invalid path", path=item, error=e)
            return False
        except OSError as e:
            get_logger().soft_failure(self, "cannot stat path", path=item, error=e)
            return None
        return True

    def evaluate(self, item: PathItem) -> bool:
        found = self._lookup(item)
        if found is None:
            return False
        return found == self.exists

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("exists", self.exists)

    def __str__(self) -> str:
        return f"{'exists' if self.exists else 'missing'}(var)"


def path_exists() -> ExistencePredicate:
    """Path must exist."""
    return ExistencePredicate(True)


def path_missing() -> ExistencePredicate:
    """Path must not exist."""
    return ExistencePredicate(False)


__all__ = [
    "PathItem",
    "ExistencePredicate",
    "path_exists",
    "path_missing",
]
