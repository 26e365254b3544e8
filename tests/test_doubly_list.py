import pytest

from tinkerkit.doubly_list import DoublyLinkedList


def test_values_keep_order_both_ways():
    dl = DoublyLinkedList([1, 2, 3, 4])
    assert list(dl) == [1, 2, 3, 4]
    assert list(reversed(dl)) == [4, 3, 2, 1]
    assert len(dl) == 4


def test_insert_at_beginning_and_end():
    dl = DoublyLinkedList()
    dl.insert_at_end(2)
    dl.insert_at_beginning(1)
    dl.insert_at_end(3)
    assert list(dl) == [1, 2, 3]
    assert list(reversed(dl)) == [3, 2, 1]


def test_source_build_sequence():
    dl = DoublyLinkedList(range(1, 11))
    dl.insert_at_beginning(0)
    dl.insert_at_position(11, 11)
    assert list(dl) == list(range(12))
    assert list(reversed(dl)) == list(range(11, -1, -1))


def test_insert_in_middle_links_both_ways():
    dl = DoublyLinkedList([1, 2, 4])
    dl.insert_at_position(3, 2)
    assert list(dl) == [1, 2, 3, 4]
    assert list(reversed(dl)) == [4, 3, 2, 1]


def test_insert_position_out_of_range():
    dl = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        dl.insert_at_position(5, 3)
    with pytest.raises(IndexError):
        dl.insert_at_position(5, -1)
    assert list(dl) == [1, 2]


def test_delete_at_head_tail_and_middle():
    dl = DoublyLinkedList(range(6))
    assert dl.delete_at(0) == 0
    assert dl.delete_at(len(dl) - 1) == 5
    assert dl.delete_at(1) == 2
    assert list(dl) == [1, 3, 4]
    assert list(reversed(dl)) == [4, 3, 1]


def test_delete_at_out_of_range():
    dl = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        dl.delete_at(1)
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_at(0)


def test_delete_only_value_empties_list():
    dl = DoublyLinkedList([9])
    assert dl.delete_at(0) == 9
    assert len(dl) == 0
    assert list(reversed(dl)) == []


def test_reverse_round_trip():
    values = [3, 1, 4, 1, 5, 9]
    dl = DoublyLinkedList(values)
    dl.reverse()
    assert list(dl) == values[::-1]
    assert list(reversed(dl)) == values
    dl.reverse()
    assert list(dl) == values


def test_reverse_then_append():
    dl = DoublyLinkedList([1, 2, 3])
    dl.reverse()
    dl.insert_at_end(0)
    assert list(dl) == [3, 2, 1, 0]


def test_update_replaces_first_match():
    dl = DoublyLinkedList([6, 7, 6])
    dl.update(6, 16)
    assert list(dl) == [16, 7, 6]


def test_update_missing_key():
    dl = DoublyLinkedList([1, 2])
    with pytest.raises(KeyError):
        dl.update(5, 5)