import pytest

from interview_riddles.linked import make_list
from interview_riddles.reverse_list import (
    is_sequential,
    list_length,
    main,
    make_range_list,
    reverse_by_swapping,
    reverse_recursive,
    reverse_with_copy,
)

REVERSALS = [reverse_with_copy, reverse_recursive, reverse_by_swapping]


def test_make_range_list_values_and_length():
    head = make_range_list(5)
    assert list(head) == [0, 1, 2, 3, 4]
    assert list_length(head) == 5


@pytest.mark.parametrize("length", [0, -3])
def test_make_range_list_empty(length):
    assert make_range_list(length) is None
    assert list_length(None) == 0


def test_is_sequential_detects_order():
    assert is_sequential(make_range_list(6))
    assert not is_sequential(make_range_list(6), descending=True)
    assert is_sequential(make_list([3, 2, 1, 0]), descending=True)
    assert not is_sequential(make_list([0, 2, 1]))


@pytest.mark.parametrize("reverse", REVERSALS)
@pytest.mark.parametrize("length", [0, 1, 2, 5, 10, 33])
def test_reversal_gives_descending_values(reverse, length):
    head = make_range_list(length)
    reverse(head)
    assert is_sequential(head, descending=True)
    assert list(head or []) == list(range(length - 1, -1, -1))


@pytest.mark.parametrize("reverse", REVERSALS)
def test_reversing_twice_restores(reverse):
    original = [7, -2, 9, 9, 4, 0, 13]
    head = make_list(original)
    reverse(head)
    assert list(head) == original[::-1]
    reverse(head)
    assert list(head) == original


def test_reversals_keep_node_identity():
    head = make_range_list(4)
    second = head.next
    reverse_by_swapping(head)
    assert head.next is second
    assert second.value == 2


def test_main_prints_a_row_per_length(capsys):
    assert main(["4", "7"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("   len,")
    assert out[1].startswith("     4,")
    assert out[2].startswith("     7,")
    assert not any("Error" in line for line in out)


def test_main_without_lengths_prints_header_only(capsys):
    assert main([]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_main_rejects_non_numbers(capsys):
    assert main(["ten"]) == 2
    assert "invalid list length" in capsys.readouterr().err