"""
Introspection of predicates.

Reflection is an optional capability layered over evaluation:
- parameters(): leaf configuration as (name, value) pairs
- children(): nested predicates as (name, predicate) pairs
- Case: why one evaluation produced one boolean, with named Products

Cases are frozen. add_product()/add_child() return a new Case, so a case
handed to a caller can never change underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterator, Optional

if TYPE_CHECKING:
    from .core import Predicate


class PredicateReflection:
    """
    Introspect the state of a predicate.

    Defaults describe a node with no parameters and no children. Every
    reflectable node must also render itself through __str__.
    """

    def parameters(self) -> Iterator["Parameter"]:
        """Leaf configuration of this node, in declaration order."""
        return iter(())

    def children(self) -> Iterator["Child"]:
        """Direct operands of this node, exactly those used by evaluate()."""
        return iter(())


@dataclass(frozen=True)
class Parameter:
    """A named piece of leaf configuration exposed by reflection."""

    name: str
    value: Any

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class Child:
    """A named nested predicate exposed by reflection."""

    name: str
    predicate: "Predicate"

    def __str__(self) -> str:
        return f"{self.name}: {self.predicate}"


@dataclass(frozen=True)
class Product:
    """
    A named artifact attached to a Case.

    Examples:
        Product("var", 7)
        Product("distance", "changes(2)")
    """

    name: str
    value: Any

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class Case:
    """
    Explanation of a single evaluation outcome.

    Attributes:
        predicate: The predicate that produced the result (None if synthesized)
        result: The boolean the predicate evaluated to
        products: Named artifacts (diff text, counts, the evaluated item)
        children: Cases of the operands that justify this result
    """

    predicate: Optional["Predicate"]
    result: bool
    products: tuple[Product, ...] = field(default_factory=tuple)
    children: tuple["Case", ...] = field(default_factory=tuple)

    def add_product(self, product: Product) -> "Case":
        """Return a copy of this case with one more product."""
        return replace(self, products=self.products + (product,))

    def add_child(self, child: "Case") -> "Case":
        """Return a copy of this case with one more child case."""
        return replace(self, children=self.children + (child,))

    def product(self, name: str) -> Optional[Product]:
        """
        Look up a product by name.

        Duplicate names resolve to the most recently added product.
        """
        for product in reversed(self.products):
            if product.name == name:
                return product
        return None

    def product_value(self, name: str) -> Optional[str]:
        """Display string of the named product, or None if absent."""
        product = self.product(name)
        if product is None:
            return None
        return str(product.value)

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "predicate": str(self.predicate) if self.predicate is not None else None,
            "result": self.result,
            "products": {p.name: str(p.value) for p in self.products},
            "children": [c.to_dict() for c in self.children],
        }

    def __str__(self) -> str:
        label = str(self.predicate) if self.predicate is not None else "<synthesized>"
        return f"{label} -> {self.result}"


__all__ = [
    "PredicateReflection",
    "Parameter",
    "Child",
    "Product",
    "Case",
]
