"""
Construction-time errors for predicates.

A predicate is either built completely or not at all. Failures that can only
be detected while building (bad pattern, unreadable reference file) surface
here; evaluation never raises for a candidate that fails to load or decode.
"""

from __future__ import annotations

import re
from pathlib import Path


class PredicateError(Exception):
    """Base class for all predicate construction errors."""


class RegexError(PredicateError):
    """Raised when a regex pattern does not compile."""

    def __init__(self, pattern: str, error: re.error):
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid pattern {pattern!r}: {error}")


class FileContentError(PredicateError):
    """Raised when the reference file of a content predicate cannot be read."""

    def __init__(self, path: Path, error: Exception):
        self.path = path
        self.error = error
        reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"Cannot read reference file '{path}': {reason}")


class EncodingError(PredicateError):
    """Raised when a byte snapshot is not valid UTF-8 text."""

    def __init__(self, path: Path, error: UnicodeDecodeError):
        self.path = path
        self.error = error
        super().__init__(
            f"Reference file '{path}' is not valid UTF-8 "
            f"(byte {error.start}: {error.reason})"
        )


class ThreadSafetyError(PredicateError):
    """Raised when boxing a predicate that has not opted in to shared use."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(
            f"Predicate '{description}' is not thread-safe and cannot be boxed. "
            "Pass thread_safe=True to the wrapped callable if it is pure."
        )


__all__ = [
    "PredicateError",
    "RegexError",
    "FileContentError",
    "EncodingError",
    "ThreadSafetyError",
]
