import pytest
from hypothesis import given, strategies as st

from algokit.stacks import infix_to_postfix, next_greater, previous_greater


def test_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_left_associative():
    assert infix_to_postfix("a-b+c") == "ab-c+"


def test_whitespace_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")


expressions = st.recursive(
    st.sampled_from("abcdxyz"),
    lambda inner: st.one_of(
        st.tuples(inner, st.sampled_from("+-*/"), inner).map("".join),
        inner.map(lambda e: f"({e})"),
    ),
    max_leaves=10,
)


@given(expressions)
def test_operands_keep_order_and_parentheses_vanish(expression):
    result = infix_to_postfix(expression)
    assert [c for c in result if c.isalpha()] == [c for c in expression if c.isalpha()]
    assert sorted(result) == sorted(c for c in expression if c not in "()")


def test_unbalanced_parentheses():
    with pytest.raises(ValueError):
        infix_to_postfix("(a+b")
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


def test_decreasing_sequence():
    assert previous_greater([5, 4, 3]) == [None, 5, 4]
    assert next_greater([5, 4, 3]) == [None, None, None]


def test_empty():
    assert previous_greater([]) == []
    assert next_greater([]) == []


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=40))
def test_previous_greater_is_nearest_not_smaller(values):
    result = previous_greater(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        earlier = [v for v in values[:i] if v >= values[i]]
        if found is None:
            assert earlier == []
        else:
            assert found == earlier[-1]


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=40))
def test_next_greater_mirrors_previous(values):
    assert next_greater(values) == list(reversed(previous_greater(list(reversed(values)))))