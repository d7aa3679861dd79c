"""Unit tests for codes and clue matching."""

import pytest

from src.lock.model import (
    Constraint,
    InvalidArgumentError,
    format_code,
    to_code,
    to_digits,
    with_leading_zero,
)
from src.utils.trace import Tracer


def test_with_leading_zero_pads_to_size():
    assert with_leading_zero(7, 3) == "007"
    assert with_leading_zero(0, 1) == "0"
    assert with_leading_zero(999, 3) == "999"


def test_with_leading_zero_rejects_values_that_do_not_fit():
    with pytest.raises(InvalidArgumentError):
        with_leading_zero(1000, 3)
    with pytest.raises(InvalidArgumentError):
        with_leading_zero(-1, 3)
    with pytest.raises(InvalidArgumentError):
        with_leading_zero(1, 0)


def test_to_digits_and_format_code():
    assert to_digits("064") == (0, 6, 4)
    assert format_code((0, 6, 4)) == "064"
    with pytest.raises(InvalidArgumentError):
        to_digits("")
    with pytest.raises(InvalidArgumentError):
        to_digits("1a3")


def test_to_code_accepts_strings_and_int_sequences():
    assert to_code("147") == (1, 4, 7)
    assert to_code([1, 4, 7]) == (1, 4, 7)
    for bad in (None, [], [1, 10, 2], [1, -1], [True, 0], 123):
        with pytest.raises(InvalidArgumentError):
            to_code(bad)


def test_constraint_validates_counts():
    Constraint((0, 1, 2), 0, 1)
    Constraint((0, 1, 2), 3, 3)
    for right, in_place in ((-1, 1), (0, -1), (0, 10), (4, 0)):
        with pytest.raises(InvalidArgumentError):
            Constraint((0, 1, 2), right, in_place)


def test_constraint_is_frozen():
    constraint = Constraint("147", 1, 0)
    assert constraint.pattern == (1, 4, 7)
    with pytest.raises(AttributeError):
        constraint.right = 2


def test_matches_rejects_missing_or_wrong_length_candidate():
    constraint = Constraint((0, 1, 2), 0, 1)
    with pytest.raises(InvalidArgumentError):
        constraint.matches(None)
    with pytest.raises(InvalidArgumentError):
        constraint.matches((0, 1))


def test_own_pattern_counts_every_pair_of_equal_digits():
    constraint = Constraint((0, 1, 2), 0, 1)
    assert constraint.digits_right((0, 1, 2)) == 3
    assert constraint.digits_right_in_place((0, 1, 2)) == 3
    assert not constraint.matches((0, 1, 2))
    assert Constraint((0, 1, 2), 3, 3).matches((0, 1, 2))


def test_duplicate_digits_count_as_cross_product():
    constraint = Constraint((1, 1, 2), 3, 1)
    # 1 appears twice in each: 2*2, plus 2 once in each: 1*1.
    assert constraint.digits_right((1, 2, 1)) == 5
    assert constraint.digits_right_in_place((1, 2, 1)) == 1
    assert not constraint.matches((1, 2, 1))
    # A clue with repeated digits cannot match its own pattern with right <= size.
    assert not Constraint((1, 1, 2), 3, 3).matches((1, 1, 2))


def test_matches_requires_both_counts():
    constraint = Constraint((1, 4, 7), 1, 0)
    assert constraint.matches((6, 7, 9))
    assert not constraint.matches((1, 7, 9))  # 2 right
    assert not constraint.matches((1, 0, 0))  # 1 right but in place


def test_matches_records_comparison_when_traced():
    tracer = Tracer()
    Constraint((1, 4, 7), 1, 0).matches((6, 7, 9), tracer)

    assert len(tracer.steps) == 1
    step = tracer.steps[0]
    assert step.action_type == "constraint_check"
    assert step.candidate == "679"
    assert step.constraint_checked == "147 right=1 in_place=0"
    assert step.digits_right == 1
    assert step.digits_in_place == 0
    assert step.is_valid is True
