import pytest

from pushswap.parsing import (
    InputError,
    assign_order,
    parse_int,
    parse_values,
    split_arguments,
)
from pushswap.stacks import Stacks


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-17", -17),
        ("  +8", 8),
        ("\t\n5", 5),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", 0),
        ("-2147483649", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_split_single_argument_on_spaces():
    assert split_arguments(["3 1  2"]) == ["3", "1", "2"]


def test_split_blank_argument_gives_nothing():
    assert split_arguments(["   "]) == []


def test_split_keeps_several_arguments():
    assert split_arguments(["1 2", "3"]) == ["1 2", "3"]


def test_parse_values_accepts_zero_and_negatives():
    assert parse_values(["3", "0", "-1"]) == [3, 0, -1]


def test_parse_values_leading_zeros():
    assert parse_values(["007", "1"]) == [7, 1]


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1", "1"], ["2147483648", "1"], ["-0", "1"], ["", "1"]],
)
def test_parse_values_rejects(args):
    with pytest.raises(InputError):
        parse_values(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_values(["a", "b"])


def test_assign_order_ranks_and_returns_max():
    stacks = Stacks([30, -5, 10])
    assert assign_order(stacks) == 30
    assert [item.order for item in stacks.a] == [2, 0, 1]
    assert all(item.seen for item in stacks.a)


def test_assign_order_ranks_are_a_permutation():
    values = [9, -3, 4, 100, 0, 7]
    stacks = Stacks(values)
    assert assign_order(stacks) == max(values)
    assert sorted(item.order for item in stacks.a) == list(range(len(values)))


def test_assign_order_empty():
    with pytest.raises(ValueError):
        assign_order(Stacks([]))