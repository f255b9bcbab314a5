"""
File content equality.

file_equals() reads the reference file once, at construction, and keeps the
bytes. Every evaluation re-reads the candidate path. A candidate that cannot
be read (or, for the text form, decoded) is simply not equal.

    pred = file_equals("expected.txt")
    pred.evaluate("actual.txt")
    pred.as_text().evaluate("actual.txt")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from ..core import Predicate
from ..errors import EncodingError, FileContentError
from ..reflection import Parameter
from ..utils.logger import get_logger
from .existence import PathItem

BytesLike = (bytes, bytearray, memoryview)


def read_file(path: PathItem) -> bytes:
    """Read the whole file at path. Raises OSError, or ValueError for a path with an embedded NUL."""
    return Path(path).read_bytes()


def _truncate(value: Union[bytes, str], limit: int = 60) -> str:
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


@dataclass(frozen=True)
class BinaryFilePredicate(Predicate[Union[PathItem, bytes]]):
    """
    Candidate bytes equal the reference snapshot.

    The item is a path to read, or the bytes themselves.

    Attributes:
        path: Reference file, kept for display
        content: Snapshot taken at construction
    """
    path: Path
    content: bytes

    def _load(self, item: Union[PathItem, bytes]) -> Optional[bytes]:
        if isinstance(item, BytesLike):
            return bytes(item)
        try:
            return read_file(item)
        except (OSError, ValueError) as e:
            get_logger().soft_failure(self, "cannot read candidate", path=item, error=e)
            return None

    def evaluate(self, item: Union[PathItem, bytes]) -> bool:
        actual = self._load(item)
        return actual is not None and actual == self.content

    def as_text(self) -> "StrFilePredicate":
        """
        Compare decoded text instead of bytes.

        Raises:
            EncodingError: If the snapshot is not valid UTF-8
        """
        try:
            text = self.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(self.path, e) from e
        return StrFilePredicate(self.path, text)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("content", _truncate(self.content))

    def __str__(self) -> str:
        return f"var is {self.path}"


@dataclass(frozen=True)
class StrFilePredicate(Predicate[PathItem]):
    """
    Candidate file, decoded as UTF-8, equals the reference text.

    Invalid UTF-8 in the candidate means "not equal".
    """
    path: Path
    content: str

    def _load(self, item: PathItem) -> Optional[str]:
        try:
            return read_file(item).decode("utf-8")
        except UnicodeDecodeError as e:
            get_logger().soft_failure(self, "candidate is not valid UTF-8", path=item, error=e.reason)
        except (OSError, ValueError) as e:
            get_logger().soft_failure(self, "cannot read candidate", path=item, error=e)
        return None

    def evaluate(self, item: PathItem) -> bool:
        actual = self._load(item)
        return actual is not None and actual == self.content

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("content", _truncate(self.content))

    def __str__(self) -> str:
        return f"var is {self.path}"


def file_equals(path: PathItem) -> BinaryFilePredicate:
    """
    Candidate file content must equal the content of path.

    Raises:
        FileContentError: If the reference file cannot be read
    """
    reference = Path(path)
    try:
        content = read_file(reference)
    except (OSError, ValueError) as e:
        get_logger().debug(f"Cannot snapshot reference file {reference}: {e}")
        raise FileContentError(reference, e) from e
    return BinaryFilePredicate(reference, content)


__all__ = [
    "read_file",
    "BinaryFilePredicate",
    "StrFilePredicate",
    "file_equals",
]
