"""
Explanation trees.

Render a Case (and its nested child cases) as a rich Tree:

    result, text = tree_eval(not_equal_to(5).and_(greater_or_equal(5)), 7)
    print(text)

    (var != 5 && var >= 5) ✓
    ├── var != 5 ✓
    │   └── var: 7
    └── var >= 5 ✓
        └── var: 7
"""

from __future__ import annotations

import io
from typing import Any, Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from .core import Predicate
from .reflection import Case, Product

PASS_MARK = "✓"
FAIL_MARK = "✗"


def _case_label(case: Case) -> Text:
    label = str(case.predicate) if case.predicate is not None else "<synthesized>"
    if case.result:
        return Text.assemble((label, "green"), " ", (PASS_MARK, "bold green"))
    return Text.assemble((label, "red"), " ", (FAIL_MARK, "bold red"))


def _product_label(product: Product) -> Text:
    # Diff products may carry ANSI markers of their own
    value = Text.from_ansi(str(product.value))
    return Text.assemble((f"{product.name}: ", "cyan"), value)


def _add_case(parent: Tree, case: Case) -> None:
    branch = parent.add(_case_label(case))
    _fill(branch, case)


def _fill(node: Tree, case: Case) -> None:
    for product in case.products:
        node.add(_product_label(product))
    for child in case.children:
        _add_case(node, child)


def case_tree(case: Case) -> Tree:
    """Build a rich Tree: products as leaves, child cases as branches."""
    tree = Tree(_case_label(case))
    _fill(tree, case)
    return tree


def format_case_tree(case: Case, color: Optional[bool] = None, width: int = 120) -> str:
    """
    Render a case tree to a string.

    Args:
        case: Case to render
        color: Emit ANSI styles; None follows the configured color mode
        width: Console width used for wrapping
    """
    if color is None:
        from .config import use_color

        color = use_color()

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=color,
        color_system="standard" if color else None,
        width=width,
    )
    console.print(case_tree(case))
    return buffer.getvalue()


def tree_eval(predicate: Predicate[Any], item: Any, color: Optional[bool] = None) -> tuple[bool, str]:
    """
    Evaluate predicate and render the case explaining the result.

    Returns:
        (result, rendered tree)
    """
    result = predicate.evaluate(item)
    case = predicate.find_case(result, item)
    if case is None:
        case = Case(predicate, result)
    return result, format_case_tree(case, color=color)


__all__ = [
    "PASS_MARK",
    "FAIL_MARK",
    "case_tree",
    "format_case_tree",
    "tree_eval",
]
