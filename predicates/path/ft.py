"""
File type predicates.

Links are not followed by default, so path_is_symlink() sees the link itself
and path_is_file() is False for a link to a file until follow_links() is set.
"""

from __future__ import annotations

import stat
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator

from ..core import Predicate
from ..reflection import Parameter
from ..types import FileType
from ..utils.logger import get_logger
from .existence import PathItem

_MODE_CHECKS = {
    FileType.FILE: stat.S_ISREG,
    FileType.DIR: stat.S_ISDIR,
    FileType.SYMLINK: stat.S_ISLNK,
}


@dataclass(frozen=True)
class FileTypePredicate(Predicate[PathItem]):
    """
    Filesystem entry at the path has the requested type.

    Attributes:
        ft: FILE, DIR or SYMLINK
        follow: Use stat() (True) or lstat() (False)
    """
    ft: FileType
    follow: bool = False

    def follow_links(self, yes: bool = True) -> "FileTypePredicate":
        """Treat symbolic links as the files and directories they point to."""
        return replace(self, follow=yes)

    def evaluate(self, item: PathItem) -> bool:
        path = Path(item)
        try:
            st = path.stat() if self.follow else path.lstat()
        except (OSError, ValueError) as e:
            get_logger().soft_failure(self, "cannot read metadata", path=item, error=e)
            return False
        return _MODE_CHECKS[self.ft](st.st_mode)

    def parameters(self) -> Iterator[Parameter]:
        yield Parameter("follow_links", self.follow)

    def __str__(self) -> str:
        return f"var is {self.ft.value}"


def path_is_file() -> FileTypePredicate:
    """Path must be a regular file."""
    return FileTypePredicate(FileType.FILE)


def path_is_dir() -> FileTypePredicate:
    """Path must be a directory."""
    return FileTypePredicate(FileType.DIR)


def path_is_symlink() -> FileTypePredicate:
    """Path must be a symbolic link (not followed)."""
    return FileTypePredicate(FileType.SYMLINK)


__all__ = [
    "FileTypePredicate",
    "path_is_file",
    "path_is_dir",
    "path_is_symlink",
]
