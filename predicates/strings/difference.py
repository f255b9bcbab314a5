"""
String similarity / diff-distance predicates.

Evaluation computes the edit operations between a fixed reference string and
the candidate (difflib.SequenceMatcher opcodes: equal, delete, insert,
replace) and derives one of two measures:

- change count: number of non-equal operations, whatever their span length
- similarity ratio: 2 * unchanged / (len(reference) + len(candidate)),
  1.0 when both strings are empty

Exactly one limit is active; configuring a new one replaces the old one.
similar_to() passes when the measure satisfies the limit (count <= max,
ratio >= min); diff_distance() passes when it does not.

Usage:
    similar_to("Hello World!").max_changes(1).evaluate("Hello World?")   # True
    diff_distance("Hello World!").max_changes(1).evaluate("Hello World!") # False
    similar_to("kitten").min_ratio(0.6).evaluate("sitting")              # True
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from difflib import SequenceMatcher
from enum import Enum
from typing import Iterator, Optional, Union

from ..core import Predicate
from ..reflection import Case, Parameter, Product
from ..types import DiffAlgorithm, DistanceOp
from ..utils.logger import Colors
from .adapters import StrPredicateExt

# (tag, i1, i2, j1, j2) as produced by SequenceMatcher.get_opcodes()
Opcode = tuple[str, int, int, int, int]


# =============================================================================
# Limits
# =============================================================================

class LimitKind(Enum):
    """Which measure a diff limit constrains."""
    CHANGES = "changes"
    RATIO = "ratio"


@dataclass(frozen=True)
class DiffLimit:
    """
    The active limit of a diff predicate.

    Attributes:
        kind: CHANGES (value is a maximum count) or RATIO (value is a minimum)
        value: The bound itself
    """
    kind: LimitKind
    value: Union[int, float]

    def measure(self, opcodes: list[Opcode], original_len: int, candidate_len: int) -> Union[int, float]:
        """Derive this limit's measure from an edit-operation sequence."""
        if self.kind is LimitKind.CHANGES:
            return count_changes(opcodes)
        return similarity_ratio(opcodes, original_len, candidate_len)

    def satisfied(self, measure: Union[int, float]) -> bool:
        if self.kind is LimitKind.CHANGES:
            return measure <= self.value
        return measure >= self.value

    def format_measure(self, measure: Union[int, float]) -> str:
        if self.kind is LimitKind.CHANGES:
            return f"changes({measure})"
        return f"ratio({measure:.2f})"

    def __str__(self) -> str:
        if self.kind is LimitKind.CHANGES:
            return f"changes <= {self.value}"
        return f"ratio >= {self.value}"


def count_changes(opcodes: list[Opcode]) -> int:
    """Number of delete/insert/replace operations."""
    return sum(1 for tag, *_ in opcodes if tag != "equal")


def similarity_ratio(opcodes: list[Opcode], original_len: int, candidate_len: int) -> float:
    """Share of the combined length left unchanged, in [0, 1]."""
    total = original_len + candidate_len
    if total == 0:
        return 1.0
    unchanged = sum(i2 - i1 for tag, i1, i2, _, _ in opcodes if tag == "equal")
    return 2.0 * unchanged / total


# =============================================================================
# Rendering
# =============================================================================

# (open, close) per non-equal tag
COLOR_MARKERS = {
    "delete": (Colors.GREEN, Colors.RESET),
    "insert": (Colors.RED, Colors.RESET),
    "replace": (Colors.MAGENTA, Colors.RESET),
}

PLAIN_MARKERS = {
    "delete": ("[-", "-]"),
    "insert": ("{+", "+}"),
    "replace": ("{~", "~}"),
}


def render_diff(original: str, candidate: str, opcodes: list[Opcode], color: bool) -> str:
    """
    Render edit operations as one string.

    Equal spans are copied verbatim. Deleted text comes from original;
    inserted and replacing text comes from candidate. Each kind of change is
    wrapped in its own marker pair.
    """
    markers = COLOR_MARKERS if color else PLAIN_MARKERS
    parts: list[str] = []
    for tag, i1, i2, j1, j2 in opcodes:
        if tag == "equal":
            parts.append(original[i1:i2])
            continue
        text = original[i1:i2] if tag == "delete" else candidate[j1:j2]
        open_marker, close_marker = markers[tag]
        parts.append(f"{open_marker}{text}{close_marker}")
    return "".join(parts)


# =============================================================================
# Predicate
# =============================================================================

@dataclass(frozen=True)
class DiffPredicate(StrPredicateExt, Predicate[str]):
    """
    Compare the item against a reference string by edit operations.

    Attributes:
        original: Reference text, owned by the predicate
        op: SIMILAR or DIFFERENT polarity
        limit: The single active limit (default: at most 0 changes)
        diff_algorithm: Edit-operation producer
    """
    original: str
    op: DistanceOp
    limit: DiffLimit = DiffLimit(LimitKind.CHANGES, 0)
    diff_algorithm: DiffAlgorithm = DiffAlgorithm.SEQUENCE

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def max_changes(self, changes: int) -> "DiffPredicate":
        """
        Limit by change count, replacing any ratio limit.

        Raises:
            ValueError: If changes is negative
        """
        if changes < 0:
            raise ValueError(f"max_changes must be >= 0, got {changes}")
        return replace(self, limit=DiffLimit(LimitKind.CHANGES, changes))

    def min_ratio(self, ratio: float) -> "DiffPredicate":
        """
        Limit by similarity ratio, replacing any change-count limit.

        Raises:
            ValueError: If ratio is outside [0, 1]
        """
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"min_ratio must be in [0.0, 1.0], got {ratio}")
        return replace(self, limit=DiffLimit(LimitKind.RATIO, float(ratio)))

    def algorithm(self, algorithm: Union[DiffAlgorithm, str]) -> "DiffPredicate":
        """Select the edit-operation producer by enum or name."""
        if not isinstance(algorithm, DiffAlgorithm):
            algorithm = DiffAlgorithm.from_name(algorithm)
        return replace(self, diff_algorithm=algorithm)

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def opcodes(self, candidate: str) -> list[Opcode]:
        """Edit operations turning original into candidate."""
        matcher = SequenceMatcher(
            None,
            self.original,
            candidate,
            autojunk=self.diff_algorithm is DiffAlgorithm.AUTOJUNK,
        )
        return matcher.get_opcodes()

    def _judge(self, measure: Union[int, float]) -> bool:
        satisfied = self.limit.satisfied(measure)
        if self.op is DistanceOp.SIMILAR:
            return satisfied
        return not satisfied

    def evaluate(self, item: str) -> bool:
        opcodes = self.opcodes(item)
        return self._judge(self.limit.measure(opcodes, len(self.original), len(item)))

    def find_case(self, expected: bool, item: str) -> Optional[Case]:
        from ..config import use_color

        opcodes = self.opcodes(item)
        measure = self.limit.measure(opcodes, len(self.original), len(item))
        result = self._judge(measure)
        if result != expected:
            return None
        color = use_color()
        return (
            Case(self, result)
            .add_product(Product("distance", self.limit.format_measure(measure)))
            .add_product(Product("diff", render_diff(self.original, item, opcodes, color)))
        )

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("original", repr(self.original))
        yield Parameter("limit", str(self.limit))
        yield Parameter("algorithm", self.diff_algorithm.value)

    def __str__(self) -> str:
        if self.limit.kind is LimitKind.CHANGES:
            if self.op is DistanceOp.SIMILAR:
                return f"var - original <= {self.limit.value}"
            return f"{self.limit.value} < var - original"
        if self.op is DistanceOp.SIMILAR:
            return f"similarity(var, original) >= {self.limit.value}"
        return f"similarity(var, original) < {self.limit.value}"


def _new_diff(original: str, op: DistanceOp) -> DiffPredicate:
    from ..config import get_config

    return DiffPredicate(original, op, diff_algorithm=get_config().diff.algorithm)


def diff_distance(original: str) -> DiffPredicate:
    """
    Item must differ from original by more than the limit.

    Default limit: more than 0 changes, i.e. any difference at all.
    """
    return _new_diff(original, DistanceOp.DIFFERENT)


def similar_to(original: str) -> DiffPredicate:
    """
    Item must be within the limit of original.

    Default limit: 0 changes, i.e. identical text.
    """
    return _new_diff(original, DistanceOp.SIMILAR)


__all__ = [
    "LimitKind",
    "DiffLimit",
    "DiffPredicate",
    "count_changes",
    "similarity_ratio",
    "render_diff",
    "diff_distance",
    "similar_to",
]
