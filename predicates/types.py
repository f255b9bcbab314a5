"""
Operator enums shared by the leaf predicates.

Each enum carries both the comparison it performs and the symbol used when
the predicate is displayed.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable


class EqOp(Enum):
    """Equality operators."""

    EQUAL = "=="
    NOT_EQUAL = "!="

    def apply(self, variable: Any, constant: Any) -> bool:
        if self is EqOp.EQUAL:
            return variable == constant
        return variable != constant


class OrdOp(Enum):
    """Ordering operators (partial order is enough)."""

    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    GREATER_THAN = ">"

    def apply(self, variable: Any, constant: Any) -> bool:
        return _ORD_FUNCS[self](variable, constant)


_ORD_FUNCS: dict[OrdOp, Callable[[Any, Any], bool]] = {
    OrdOp.LESS_THAN: operator.lt,
    OrdOp.LESS_OR_EQUAL: operator.le,
    OrdOp.GREATER_OR_EQUAL: operator.ge,
    OrdOp.GREATER_THAN: operator.gt,
}


class PatternOp(Enum):
    """Plain substring checks."""

    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    CONTAINS = "contains"

    def apply(self, variable: str, pattern: str) -> bool:
        if self is PatternOp.STARTS_WITH:
            return variable.startswith(pattern)
        if self is PatternOp.ENDS_WITH:
            return variable.endswith(pattern)
        return pattern in variable


class FileType(Enum):
    """Filesystem entry kinds checked by path type predicates."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"


class DistanceOp(Enum):
    """
    Polarity of a diff-distance predicate.

    SIMILAR passes when the measure satisfies the limit; DIFFERENT passes when
    it does not.
    """

    SIMILAR = "similar"
    DIFFERENT = "different"


class DiffAlgorithm(Enum):
    """
    Edit-operation producers for diff-distance predicates.

    Both are backed by difflib.SequenceMatcher:
    - SEQUENCE: exhaustive matching (autojunk disabled)
    - AUTOJUNK: difflib's popular-element heuristic, faster on long inputs
    """

    SEQUENCE = "sequence"
    AUTOJUNK = "autojunk"

    @classmethod
    def from_name(cls, name: str) -> "DiffAlgorithm":
        """
        Parse an algorithm name (case-insensitive).

        Raises:
            ValueError: If the name is not a known algorithm
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(
                f"Unknown diff algorithm '{name}'. Valid: {valid}"
            ) from None


__all__ = [
    "EqOp",
    "OrdOp",
    "PatternOp",
    "FileType",
    "DistanceOp",
    "DiffAlgorithm",
]
