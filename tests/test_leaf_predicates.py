"""
Tests for value leaves: constants, comparisons, functions and membership.

Validates that:
1. Each leaf applies its evaluate rule and renders its display string
2. The three membership tiers agree for the same values
3. Builders return new predicates and leave the original untouched
"""

import math

import pytest

from predicates import (
    always,
    equal_to,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    membership,
    membership_hashed,
    never,
    not_equal_to,
    wrap_function,
)
from predicates.iter import OrdInPredicate


class TestConstants:
    """always() / never()."""

    @pytest.mark.parametrize("item", [0, "x", None, [1, 2]])
    def test_constants_ignore_item(self, item):
        assert always().evaluate(item) is True
        assert never().evaluate(item) is False

    def test_display(self):
        assert str(always()) == "true"
        assert str(never()) == "false"


class TestComparisons:
    """Equality and ordering against a constant."""

    def test_equality(self):
        assert equal_to(5).evaluate(5) is True
        assert equal_to(5).evaluate(6) is False
        assert not_equal_to(5).evaluate(6) is True
        assert not_equal_to(5).evaluate(5) is False

    @pytest.mark.parametrize("pred,passing,failing", [
        (less_than(5), [4], [5, 6]),
        (less_or_equal(5), [4, 5], [6]),
        (greater_or_equal(5), [5, 6], [4]),
        (greater_than(5), [6], [4, 5]),
    ], ids=["lt", "le", "ge", "gt"])
    def test_ordering(self, pred, passing, failing):
        for item in passing:
            assert pred.evaluate(item) is True
        for item in failing:
            assert pred.evaluate(item) is False

    def test_display_uses_repr(self):
        """String constants are quoted, numbers are not."""
        assert str(equal_to(5)) == "var == 5"
        assert str(equal_to("5")) == "var == '5'"
        assert str(less_or_equal(2.5)) == "var <= 2.5"
        assert str(not_equal_to(None)) == "var != None"

    def test_strings_order_lexicographically(self):
        assert less_than("b").evaluate("a") is True
        assert less_than("b").evaluate("c") is False

    def test_nan_is_incomparable(self):
        """Every ordering check is False for NaN."""
        nan = float("nan")
        for pred in (less_than(1.0), less_or_equal(1.0), greater_or_equal(1.0), greater_than(1.0)):
            assert pred.evaluate(nan) is False
        assert equal_to(nan).evaluate(nan) is False


class TestFunction:
    """Callable wrapping."""

    def test_result_is_coerced_to_bool(self):
        pred = wrap_function(lambda s: len(s))

        assert pred.evaluate("abc") is True
        assert pred.evaluate("") is False

    def test_default_display(self):
        assert str(wrap_function(math.isfinite)) == "fn(var)"

    def test_fn_name_returns_copy(self):
        original = wrap_function(lambda n: n % 2 == 0)
        renamed = original.fn_name("is_even")

        assert str(renamed) == "is_even(var)"
        assert str(original) == "fn(var)"
        assert renamed.evaluate(4) is True

    def test_thread_safe_flag(self):
        assert wrap_function(bool).thread_safe is True
        assert wrap_function(bool, thread_safe=False).thread_safe is False
        assert dict((p.name, p.value) for p in wrap_function(bool).parameters()) == {"thread_safe": True}


class TestMembership:
    """Linear, sorted and hashed membership."""

    VALUES = [9, 1, 5, 3, 7, 3]

    @pytest.mark.parametrize("item", range(-1, 12))
    def test_tiers_agree(self, item):
        """All three variants give the same answer for the same values."""
        linear = membership(self.VALUES)
        ordered = membership(self.VALUES).sorted()
        hashed = membership_hashed(self.VALUES)

        expected = item in self.VALUES
        assert linear.evaluate(item) is expected
        assert ordered.evaluate(item) is expected
        assert hashed.evaluate(item) is expected

    def test_tiers_agree_on_nan(self):
        """NaN matches itself by identity in every tier, never another NaN."""
        nan = float("nan")
        values = [1.0, nan, 3.0]
        tiers = [membership(values), membership(values).sorted(), membership_hashed(values)]

        for pred in tiers:
            assert pred.evaluate(nan) is True
            assert pred.evaluate(float("nan")) is False

    def test_sorted_variant(self):
        ordered = membership([5, 1, 3]).sorted()

        assert isinstance(ordered, OrdInPredicate)
        assert ordered.values == (1, 3, 5)

    def test_empty_membership(self):
        assert membership([]).evaluate(1) is False
        assert membership([]).sorted().evaluate(1) is False
        assert membership_hashed([]).evaluate(1) is False

    def test_strings(self):
        pred = membership(["a", "b"])
        assert pred.evaluate("a") is True
        assert pred.evaluate("c") is False

    def test_display(self):
        assert str(membership([1, 3, 5])) == "var in [1, 3, 5]"
        assert str(membership_hashed([5, 1, 3])) == "var in {1, 3, 5}"

    def test_case_records_item(self):
        case = membership([1, 3]).find_case(False, 2)
        assert case.product_value("var") == "2"
        assert dict((p.name, p.value) for p in case.predicate.parameters()) == {"values": [1, 3]}
