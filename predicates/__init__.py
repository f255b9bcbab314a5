"""
predicates - composable boolean predicates with explanations.

Build single-argument boolean functions at runtime from leaves and
combinators, then ask any of them why it passed or failed:

    from predicates import greater_than, less_than, tree_eval

    in_range = greater_than(0).and_(less_than(10)).named("in range")
    in_range.evaluate(5)          # True
    result, text = tree_eval(greater_than(0) & less_than(10), 12)
    print(text)

Submodules:
- core / reflection: the Predicate contract, Case and friends
- boolean, name, boxed, map: combinators and adapters
- constant, ord, function, iter, floats: value leaves
- strings: substring, regex and diff-distance leaves plus string adapters
- path: existence, file type and file content leaves
- tree: rich rendering of explanation cases
"""

__version__ = "0.9.0"

from .errors import (
    PredicateError,
    RegexError,
    FileContentError,
    EncodingError,
    ThreadSafetyError,
)
from .types import EqOp, OrdOp, PatternOp, FileType, DistanceOp, DiffAlgorithm
from .reflection import PredicateReflection, Parameter, Child, Product, Case
from .core import Item, Predicate, default_find_case
from .boolean import AndPredicate, OrPredicate, NotPredicate
from .boxed import BoxPredicate
from .name import NamePredicate
from .constant import BooleanPredicate, always, never
from .ord import (
    EqPredicate,
    OrdPredicate,
    equal_to,
    not_equal_to,
    less_than,
    less_or_equal,
    greater_or_equal,
    greater_than,
)
from .function import FnPredicate, wrap_function
from .iter import (
    InPredicate,
    OrdInPredicate,
    HashableInPredicate,
    membership,
    membership_hashed,
)
from .map import MapPredicate, map_item
from .floats import IsClosePredicate, float_is_close
from .strings import (
    TrimPredicate,
    Utf8Predicate,
    NormalizedPredicate,
    trim,
    from_utf8,
    normalize_newlines,
    IsEmptyPredicate,
    PatternPredicate,
    MatchesPredicate,
    string_is_empty,
    string_starts_with,
    string_ends_with,
    string_contains,
    RegexPredicate,
    RegexMatchesPredicate,
    regex_matches,
    DiffPredicate,
    render_diff,
    diff_distance,
    similar_to,
)
from .path import (
    ExistencePredicate,
    FileTypePredicate,
    BinaryFilePredicate,
    StrFilePredicate,
    FileContentPredicate,
    path_exists,
    path_missing,
    path_is_file,
    path_is_dir,
    path_is_symlink,
    file_equals,
    from_file_path,
)
from .tree import case_tree, format_case_tree, tree_eval

__all__ = [
    "__version__",
    # Errors
    "PredicateError",
    "RegexError",
    "FileContentError",
    "EncodingError",
    "ThreadSafetyError",
    # Operators
    "EqOp",
    "OrdOp",
    "PatternOp",
    "FileType",
    "DistanceOp",
    "DiffAlgorithm",
    # Contract and reflection
    "PredicateReflection",
    "Parameter",
    "Child",
    "Product",
    "Case",
    "Item",
    "Predicate",
    "default_find_case",
    # Combinators
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "BoxPredicate",
    "NamePredicate",
    "MapPredicate",
    "map_item",
    # Leaves
    "BooleanPredicate",
    "always",
    "never",
    "EqPredicate",
    "OrdPredicate",
    "equal_to",
    "not_equal_to",
    "less_than",
    "less_or_equal",
    "greater_or_equal",
    "greater_than",
    "FnPredicate",
    "wrap_function",
    "InPredicate",
    "OrdInPredicate",
    "HashableInPredicate",
    "membership",
    "membership_hashed",
    "IsClosePredicate",
    "float_is_close",
    # Strings
    "TrimPredicate",
    "Utf8Predicate",
    "NormalizedPredicate",
    "trim",
    "from_utf8",
    "normalize_newlines",
    "IsEmptyPredicate",
    "PatternPredicate",
    "MatchesPredicate",
    "string_is_empty",
    "string_starts_with",
    "string_ends_with",
    "string_contains",
    "RegexPredicate",
    "RegexMatchesPredicate",
    "regex_matches",
    "DiffPredicate",
    "render_diff",
    "diff_distance",
    "similar_to",
    # Paths
    "ExistencePredicate",
    "FileTypePredicate",
    "BinaryFilePredicate",
    "StrFilePredicate",
    "FileContentPredicate",
    "path_exists",
    "path_missing",
    "path_is_file",
    "path_is_dir",
    "path_is_symlink",
    "file_equals",
    "from_file_path",
    # Rendering
    "case_tree",
    "format_case_tree",
    "tree_eval",
]
