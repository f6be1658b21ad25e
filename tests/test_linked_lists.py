import pytest

from dsakit.linked_lists import (
    ListNode,
    MultiNode,
    add_numbers,
    flatten,
    from_values,
    has_cycle,
    intersection,
    is_palindrome,
    merge_sorted,
    middle,
    remove_nth_from_end,
    reverse,
    rotate_right,
    to_values,
)


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits)))


def _int_to_digits(number):
    return [int(c) for c in reversed(str(number))]


def _column(values):
    head = None
    for value in reversed(values):
        head = MultiNode(value, bottom=head)
    return head


def _down(node):
    values = []
    while node is not None:
        values.append(node.value)
        node = node.bottom
    return values


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4], ["a", "b"]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_iteration_yields_values():
    head = from_values([5, 6, 7])
    assert list(head) == [5, 6, 7]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_reverse(values):
    assert to_values(reverse(from_values(values))) == values[::-1]


def test_has_cycle_detects_loop():
    head = from_values([1, 2, 3])
    head.next.next.next = head.next
    assert has_cycle(head) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_has_cycle_false_for_plain_lists(values):
    assert has_cycle(from_values(values)) is False


def test_merge_sorted():
    first, second = [1, 3, 5], [2, 4, 6]
    merged = merge_sorted(from_values(first), from_values(second))
    assert to_values(merged) == sorted(first + second)


def test_merge_sorted_with_empty_side():
    assert to_values(merge_sorted(None, from_values([1, 2]))) == [1, 2]
    assert merge_sorted(None, None) is None


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3, 4], [9]])
def test_middle(values):
    assert middle(from_values(values)).value == values[len(values) // 2]


def test_middle_of_empty_list():
    assert middle(None) is None


@pytest.mark.parametrize("n", [1, 2, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    expected = values[:]
    del expected[len(values) - n]
    assert to_values(remove_nth_from_end(from_values(values), n)) == expected


@pytest.mark.parametrize("n", [0, 6])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3, 4, 5]), n)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2, 3, 2, 1], True), ([1, 2, 3], False), ([], True), ([7], True)],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_values(values)) is expected


def test_is_palindrome_leaves_list_intact():
    head = from_values([1, 2, 3, 4])
    is_palindrome(head)
    assert to_values(head) == [1, 2, 3, 4]


@pytest.mark.parametrize("a, b", [(342, 465), (999, 1), (0, 0), (5, 12345)])
def test_add_numbers(a, b):
    result = add_numbers(from_values(_int_to_digits(a)), from_values(_int_to_digits(b)))
    assert _digits_to_int(to_values(result)) == a + b


def test_intersection_found():
    common = from_values([8, 10])
    first = ListNode(3, ListNode(6, common))
    second = ListNode(4, common)
    assert intersection(first, second) is common


def test_intersection_absent():
    assert intersection(from_values([1, 2]), from_values([1, 2])) is None


def test_rotate_right_example():
    assert to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [0, 1, 3, 5, 7, 12])
def test_rotate_right_matches_slicing(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[:len(values) - shift]
    assert to_values(rotate_right(from_values(values), k)) == expected


def test_rotate_right_empty():
    assert rotate_right(None, 3) is None


def test_flatten():
    columns = [[5, 7, 8, 30], [10, 20], [19, 22, 50]]
    root = _column(columns[0])
    root.next = _column(columns[1])
    root.next.next = _column(columns[2])
    flat = flatten(root)
    assert _down(flat) == sorted(v for column in columns for v in column)


def test_flatten_single_column():
    root = _column([1, 2, 3])
    assert flatten(root) is root
    assert _down(root) == [1, 2, 3]