import pytest

from tinkerkit.linked_list import (
    LinkedList,
    Node,
    find_middle,
    merge_sort_nodes,
    merge_sorted,
)


def _chain(values):
    head = None
    for value in reversed(values):
        head = Node(value, head)
    return head


def _values(head):
    out = []
    while head is not None:
        out.append(head.data)
        head = head.next
    return out


def _source_list():
    lst = LinkedList()
    lst.insert_at_beginning(5)
    for value in (6, 2, 3, 4, 1, 8, 9):
        lst.insert_at_end(value)
    lst.insert_at_position(7, 0)
    return lst


def test_build_like_source():
    assert list(_source_list()) == [7, 5, 6, 2, 3, 4, 1, 8, 9]


def test_constructor_and_len():
    values = [4, 2, 8]
    lst = LinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)
    assert len(LinkedList()) == 0


def test_insert_at_position_middle_and_end():
    lst = LinkedList([1, 2, 3])
    lst.insert_at_position(9, 1)
    assert list(lst) == [1, 9, 2, 3]
    lst.insert_at_position(10, len(lst))
    assert list(lst)[-1] == 10


def test_insert_at_position_out_of_range():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at_position(5, 4)
    with pytest.raises(IndexError):
        LinkedList().insert_at_position(5, 1)
    assert list(lst) == [1, 2]


def test_insert_into_empty_at_zero():
    lst = LinkedList()
    lst.insert_at_position(3, 0)
    assert list(lst) == [3]


def test_delete():
    lst = LinkedList([1, 2, 3, 2])
    assert lst.delete(1) is True
    assert lst.delete(2) is True
    assert list(lst) == [3, 2]
    assert lst.delete(42) is False
    assert list(lst) == [3, 2]


def test_delete_last_and_only():
    lst = LinkedList([5])
    assert lst.delete(5) is True
    assert list(lst) == []
    assert lst.delete(5) is False


def test_update():
    lst = LinkedList([1, 2, 3])
    lst.update(2, 20)
    assert list(lst) == [1, 20, 3]
    with pytest.raises(KeyError):
        lst.update(99, 0)


def test_reverse():
    values = list(range(6))
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


@pytest.mark.parametrize("n", [1, 2, 3, 4, 9, 10])
def test_middle(n):
    values = list(range(n))
    assert LinkedList(values).middle() == values[(n - 1) // 2]


def test_middle_empty():
    with pytest.raises(ValueError):
        LinkedList().middle()
    assert find_middle(None) is None


def test_sort_merged_source_lists():
    first = _source_list()
    second = LinkedList([7, 2, 3, 4])
    combined = LinkedList()
    combined.head = merge_sorted(first.head, second.head)
    expected = sorted([7, 5, 6, 2, 3, 4, 1, 8, 9, 7, 2, 3, 4])
    combined.sort()
    assert list(combined) == expected


def test_merge_sorted_chains():
    left, right = [1, 4, 6], [2, 3, 7]
    assert _values(merge_sorted(_chain(left), _chain(right))) == sorted(left + right)
    assert _values(merge_sorted(None, _chain(right))) == right


def test_merge_sorted_prefers_right_on_tie():
    left, right = Node(1), Node(1)
    head = merge_sorted(left, right)
    assert head is right
    assert head.next is left


def test_merge_sort_nodes():
    values = [2, 1, 4, 3, 3, 5, 4, 9, 6]
    assert _values(merge_sort_nodes(_chain(values))) == sorted(values)
    assert merge_sort_nodes(None) is None


def test_render():
    lst = LinkedList([3, 5])
    assert lst.render() == "3 5"
    assert lst.render(lambda v: f"{v}->") == "3-> 5->"
    assert LinkedList().render() == ""