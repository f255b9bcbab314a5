"""
Tests for reflection: parameters, children, cases and tree rendering.

Validates that:
1. children() lists exactly the operands evaluate() uses
2. find_case(expected, x) exists iff evaluate(x) == expected
3. Combinator cases nest the child cases that justify them
4. Products resolve by name, last one wins
5. Case trees render through rich
"""

import pytest

from predicates import (
    Case,
    Child,
    Parameter,
    Product,
    always,
    case_tree,
    equal_to,
    format_case_tree,
    greater_or_equal,
    greater_than,
    less_than,
    map_item,
    membership,
    never,
    not_equal_to,
    regex_matches,
    similar_to,
    string_contains,
    tree_eval,
    wrap_function,
)


SAMPLES = [
    (greater_than(4), [3, 4, 5]),
    (greater_than(0).and_(less_than(10)), [-1, 5, 10]),
    (never().or_(equal_to(5)), [4, 5]),
    (equal_to(5).not_(), [4, 5]),
    (membership([1, 3, 5]).named("odd small"), [1, 2]),
    (greater_than(2).boxed(), [1, 3]),
    (map_item(len, equal_to(3), name="len"), ["abc", "ab"]),
    (string_contains("Two").count(2), ["One Two Two", "Two"]),
    (regex_matches("T[a-z]*"), ["Tea", "coffee"]),
    (similar_to("Hello").max_changes(1), ["Hello", "Jello", "Yellow!"]),
]


def _walk(predicate):
    yield predicate
    for child in predicate.children():
        yield from _walk(child.predicate)


class TestParametersAndChildren:
    """Static introspection of predicate trees."""

    def test_leaf_has_no_children(self):
        assert list(greater_than(3).children()) == []

    def test_leaf_parameters(self):
        params = list(equal_to(5).parameters())
        assert params == [Parameter("constant", "5")]
        assert str(params[0]) == "constant: 5"

    def test_and_children_are_operands(self):
        """AND exposes left then right, the exact operand objects."""
        left, right = greater_than(0), less_than(10)
        pred = left.and_(right)

        children = list(pred.children())
        assert [c.name for c in children] == ["left", "right"]
        assert children[0].predicate is left
        assert children[1].predicate is right

    def test_not_and_name_have_single_child(self):
        inner = greater_than(0)

        assert list(inner.not_().children()) == [Child("predicate", inner)]
        assert list(inner.named("positive").children()) == [Child("predicate", inner)]

    def test_combinators_have_no_parameters(self):
        pred = greater_than(0).and_(less_than(10)).or_(always()).not_()
        assert list(pred.parameters()) == []

    def test_walk_reaches_every_leaf(self):
        """Recursing through children() finds every leaf exactly once."""
        a, b, c = greater_than(0), less_than(10), equal_to(5)
        pred = a.and_(b).or_(c.not_())

        leaves = [p for p in _walk(pred) if not list(p.children())]
        assert leaves == [a, b, c]


class TestFindCaseAgreement:
    """find_case(expected) succeeds exactly when evaluate() agrees."""

    @pytest.mark.parametrize("predicate,items", SAMPLES, ids=[str(p) for p, _ in SAMPLES])
    def test_case_matches_evaluate(self, predicate, items):
        for item in items:
            actual = predicate.evaluate(item)

            case = predicate.find_case(actual, item)
            assert case is not None
            assert case.result == actual

            assert predicate.find_case(not actual, item) is None

    def test_find_case_does_not_change_evaluation(self):
        """Reflection has no side effects on later evaluations."""
        pred = greater_than(0).and_(less_than(10))
        before = [pred.evaluate(i) for i in range(-2, 12)]
        for i in range(-2, 12):
            pred.find_case(True, i)
            pred.find_case(False, i)
        after = [pred.evaluate(i) for i in range(-2, 12)]

        assert before == after


class TestCaseNesting:
    """Combinators attach the child cases behind their result."""

    def test_and_true_has_both_children(self):
        pred = not_equal_to(5).and_(greater_or_equal(5))
        case = pred.find_case(True, 7)

        assert [str(c.predicate) for c in case.children] == ["var != 5", "var >= 5"]
        assert all(c.result for c in case.children)

    def test_and_false_blames_first_failure(self):
        pred = greater_than(0).and_(less_than(10))

        left_fails = pred.find_case(False, -1)
        assert [str(c.predicate) for c in left_fails.children] == ["var > 0"]

        right_fails = pred.find_case(False, 20)
        assert [str(c.predicate) for c in right_fails.children] == ["var < 10"]

    def test_or_true_credits_first_success(self):
        pred = less_than(0).or_(greater_than(10))
        case = pred.find_case(True, 20)

        assert [str(c.predicate) for c in case.children] == ["var > 10"]

    def test_or_false_has_both_children(self):
        pred = less_than(0).or_(greater_than(10))
        case = pred.find_case(False, 5)

        assert len(case.children) == 2
        assert not any(c.result for c in case.children)

    def test_not_explains_inner_opposite(self):
        case = equal_to(5).not_().find_case(True, 4)

        assert case.result is True
        assert case.children[0].result is False
        assert str(case.children[0].predicate) == "var == 5"

    def test_name_wraps_inner_case(self):
        case = greater_than(17).named("adult").find_case(True, 30)

        assert str(case.predicate) == "adult"
        assert str(case.children[0].predicate) == "var > 17"

    def test_boxed_forwards_case(self):
        case = greater_than(17).boxed().find_case(True, 30)
        assert str(case.predicate) == "var > 17"
        assert case.children == ()

    def test_map_records_mapped_value(self):
        case = map_item(len, equal_to(3), name="len").find_case(True, "abc")

        assert case.product_value("mapped") == "3"
        assert case.children[0].product_value("var") == "3"


class TestProducts:
    """Case products and the immutable Case API."""

    def test_leaf_records_item(self):
        case = greater_than(3).find_case(True, 7)
        assert case.product_value("var") == "7"

    def test_missing_product(self):
        case = always().find_case(True, 1)
        assert case.product("var") is None
        assert case.product_value("var") is None

    def test_last_product_wins(self):
        case = Case(None, True).add_product(Product("x", 1)).add_product(Product("x", 2))

        assert case.product("x").value == 2
        assert [p.value for p in case.products] == [1, 2]

    def test_add_returns_new_case(self):
        base = Case(None, False)
        extended = base.add_product(Product("reason", "nope"))

        assert base.products == ()
        assert extended.products == (Product("reason", "nope"),)

    def test_to_dict(self):
        case = greater_than(0).and_(less_than(10)).find_case(True, 5)
        data = case.to_dict()

        assert data["predicate"] == "(var > 0 && var < 10)"
        assert data["result"] is True
        assert data["children"][0]["products"] == {"var": "5"}

    def test_function_leaf_has_no_products(self):
        case = wrap_function(bool, name="truthy").find_case(True, 1)
        assert case.products == ()
        assert str(case.predicate) == "truthy(var)"


class TestTreeRendering:
    """rich-based rendering of cases."""

    def test_tree_eval_example(self):
        """The AND example renders both passing operands and their items."""
        result, text = tree_eval(not_equal_to(5).and_(greater_or_equal(5)), 7)

        assert result is True
        lines = text.splitlines()
        assert lines[0].startswith("(var != 5 && var >= 5) ✓")
        assert "├── var != 5 ✓" in text
        assert "└── var >= 5 ✓" in text
        assert text.count("var: 7") == 2

    def test_failure_marker(self):
        result, text = tree_eval(greater_than(10), 3)

        assert result is False
        assert text.startswith("var > 10 ✗")

    def test_plain_output_has_no_ansi(self):
        case = greater_than(0).find_case(True, 1)
        assert "\x1b[" not in format_case_tree(case, color=False)

    def test_color_output_has_ansi(self):
        case = greater_than(0).find_case(True, 1)
        assert "\x1b[" in format_case_tree(case, color=True)

    def test_case_tree_structure(self):
        case = greater_than(0).and_(less_than(10)).find_case(True, 5)
        tree = case_tree(case)

        # one branch per child case, one leaf per product
        assert len(tree.children) == 2
        assert len(tree.children[0].children) == 1

    def test_synthesized_case_renders(self):
        text = format_case_tree(Case(None, True), color=False)
        assert "<synthesized>" in text
