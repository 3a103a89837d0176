import pytest

from algobox.linked_list import ListNode, add_two_numbers


def to_list(number):
    return ListNode.from_iterable(int(ch) for ch in reversed(str(number)))


def to_int(node):
    return int("".join(str(digit) for digit in reversed(list(node))))


@pytest.mark.parametrize("values", [[1], [2, 4, 3], [0, 0, 9, 1]])
def test_from_iterable_round_trip(values):
    assert list(ListNode.from_iterable(values)) == values


def test_from_empty_iterable_gives_none():
    assert ListNode.from_iterable([]) is None


def test_example_sum():
    result = add_two_numbers(ListNode.from_iterable([2, 4, 3]), ListNode.from_iterable([5, 6, 4]))
    assert list(result) == [7, 0, 8]


def test_both_empty():
    assert add_two_numbers(None, None) is None


@pytest.mark.parametrize(
    "a, b",
    [(0, 0), (342, 465), (9999999, 9999), (1, 999), (5, 5), (123456789, 0)],
)
def test_sum_matches_integer_addition(a, b):
    assert to_int(add_two_numbers(to_list(a), to_list(b))) == a + b


def test_one_side_empty_copies_the_other():
    number = to_list(9081)
    assert list(add_two_numbers(number, None)) == list(number)
    assert list(add_two_numbers(None, number)) == list(number)


def test_addition_is_commutative():
    a, b = to_list(98765), to_list(4321)
    assert add_two_numbers(a, b) == add_two_numbers(b, a)