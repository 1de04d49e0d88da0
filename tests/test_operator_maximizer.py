import math

import pytest

from interview_riddles.operator_maximizer import Expression, MaxFinder


@pytest.mark.parametrize(
    "values, expected_text, expected_value",
    [
        ([3, 4, 5, 1], "(3.0)*(4.0)*(5.0+1.0)", 72),
        ([1, 1, 1, 5], "(1.0+1.0+1.0)*(5.0)", 15),
        ([3, 1, 2], "(3.0)*(1.0+2.0)", 9),
        ([4, 1, 1, 1, 2, 1, 5], "(4.0)*(1.0+1.0+1.0)*(2.0+1.0)*(5.0)", 180),
        ([4, 1, 1, 1, 2, 1, 1, 5], "(4.0)*(1.0+1.0+1.0)*(2.0)*(1.0+1.0)*(5.0)", 240),
        ([2.1, 0.1, 0.1, 2.1, 2.3], "(2.1+0.1)*(0.1+2.1)*(2.3)", 11.132),
        ([2.1, 0.3, 0.3, 1.8, 0.5], "(2.1+0.3)*(0.3+1.8+0.5)", 6.24),
    ],
)
def test_known_answers(values, expected_text, expected_value):
    text, value = MaxFinder(values).find_max_operators()
    assert text == expected_text
    assert value == pytest.approx(expected_value, rel=1e-3)


def test_either_equal_grouping_is_accepted():
    text, value = MaxFinder([1, 1, 1, 1, 1, 2]).find_max_operators()
    assert text in ("(1.0+1.0)*(1.0+1.0+1.0)*(2.0)", "(1.0+1.0+1.0)*(1.0+1.0)*(2.0)")
    assert value == pytest.approx(12, rel=1e-3)


def test_empty_input():
    assert MaxFinder([]).find_max_operators() == ("", 0)


def test_single_value():
    text, value = MaxFinder([5]).find_max_operators()
    assert text == "(5.0)"
    assert value == pytest.approx(5)


def test_repeated_calls_agree():
    finder = MaxFinder([2.1, 0.3, 0.3, 1.8, 0.5])
    first_text, first_value = finder.find_max_operators()
    second_text, second_value = finder.find_max_operators()
    assert first_text == "(2.1+0.3)*(0.3+1.8+0.5)"
    assert second_text == first_text
    assert first_value == pytest.approx(6.24, rel=1e-3)
    assert second_value == pytest.approx(first_value)


def _groups(text):
    return [
        [float(term) for term in group.strip("()").split("+")]
        for group in text.split("*")
    ]


@pytest.mark.parametrize(
    "values",
    [
        [3, 4, 5, 1],
        [0.5, 0.5, 3, 0.2, 4, 1.5, 1.5],
        [2, 2, 2, 2],
        [1, 0, 1, 1, 1, 7, 0.4],
        [0.9, 3.3, 0.9, 0.9, 0.9, 2.5],
    ],
)
def test_text_keeps_all_values_in_order(values):
    text, _ = MaxFinder(values).find_max_operators()
    flattened = [term for group in _groups(text) for term in group]
    assert flattened == [pytest.approx(float(v)) for v in values]


@pytest.mark.parametrize(
    "values",
    [
        [3, 4, 5, 1],
        [0.5, 0.5, 3, 0.2, 4, 1.5, 1.5],
        [1, 0, 1, 1, 1, 7, 0.4],
    ],
)
def test_value_is_product_of_group_sums(values):
    text, value = MaxFinder(values).find_max_operators()
    assert value == pytest.approx(math.prod(sum(group) for group in _groups(text)))


def test_expression_text_and_sum():
    expr = Expression([3.0, 1.0, 2.0], 1, 3)
    assert str(expr) == "(1.0+2.0)"
    assert expr.sum() == pytest.approx(3.0)
    assert len(expr) == 2


@pytest.mark.parametrize("start, end", [(-1, 2), (2, 1), (0, 4)])
def test_expression_rejects_bad_range(start, end):
    with pytest.raises(ValueError):
        Expression([1.0, 2.0, 3.0], start, end)