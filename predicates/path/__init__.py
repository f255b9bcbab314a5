"""
Path predicates.

Items are paths (str or os.PathLike). Filesystem errors while evaluating are
soft failures: the predicate is False and the error is logged at DEBUG on the
"predicates.eval" channel.
"""

from .existence import PathItem, ExistencePredicate, path_exists, path_missing
from .ft import FileTypePredicate, path_is_file, path_is_dir, path_is_symlink
from .fs import read_file, BinaryFilePredicate, StrFilePredicate, file_equals
from .fc import FileContentPredicate, from_file_path

__all__ = [
    "PathItem",
    # Existence
    "ExistencePredicate",
    "path_exists",
    "path_missing",
    # File type
    "FileTypePredicate",
    "path_is_file",
    "path_is_dir",
    "path_is_symlink",
    # Content
    "read_file",
    "BinaryFilePredicate",
    "StrFilePredicate",
    "file_equals",
    "FileContentPredicate",
    "from_file_path",
]
