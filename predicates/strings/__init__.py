"""
String predicates.

- basics: emptiness and substring checks
- regex: regular-expression match and match counting
- difference: diff-distance / similarity against a reference string
- adapters: trim, UTF-8 decoding and line-ending normalization
"""

from .adapters import (
    StrPredicateExt,
    TrimPredicate,
    Utf8Predicate,
    NormalizedPredicate,
    normalize_line_endings,
    trim,
    from_utf8,
    normalize_newlines,
)
from .basics import (
    IsEmptyPredicate,
    PatternPredicate,
    MatchesPredicate,
    string_is_empty,
    string_starts_with,
    string_ends_with,
    string_contains,
)
from .regex import RegexPredicate, RegexMatchesPredicate, regex_matches
from .difference import (
    LimitKind,
    DiffLimit,
    DiffPredicate,
    count_changes,
    similarity_ratio,
    render_diff,
    diff_distance,
    similar_to,
)

__all__ = [
    # Adapters
    "StrPredicateExt",
    "TrimPredicate",
    "Utf8Predicate",
    "NormalizedPredicate",
    "normalize_line_endings",
    "trim",
    "from_utf8",
    "normalize_newlines",
    # Basics
    "IsEmptyPredicate",
    "PatternPredicate",
    "MatchesPredicate",
    "string_is_empty",
    "string_starts_with",
    "string_ends_with",
    "string_contains",
    # Regex
    "RegexPredicate",
    "RegexMatchesPredicate",
    "regex_matches",
    # Difference
    "LimitKind",
    "DiffLimit",
    "DiffPredicate",
    "count_changes",
    "similarity_ratio",
    "render_diff",
    "diff_distance",
    "similar_to",
]
