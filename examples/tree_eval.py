"""
Print the explanation tree for a small AND expression.

    python examples/tree_eval.py
"""

from predicates import greater_or_equal, not_equal_to, tree_eval


def main():
    predicate = not_equal_to(5).and_(greater_or_equal(5))
    result, text = tree_eval(predicate, 7)
    print(f"{predicate} on 7 -> {result}")
    print(text, end="")


if __name__ == "__main__":
    main()
