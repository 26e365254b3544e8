import pytest

from tinkerkit.circular_list import CircularList


def test_values_keep_order():
    cl = CircularList([1, 2, 3])
    assert list(cl) == [1, 2, 3]
    assert len(cl) == 3


def test_empty_list_string():
    assert str(CircularList()) == "List is empty"


def test_string_joins_values():
    assert str(CircularList([4, 5, 6])) == "4 5 6"


def test_insert_at_beginning_on_empty():
    cl = CircularList()
    cl.insert_at_beginning(1)
    assert list(cl) == [1]


def test_insert_at_beginning_and_end():
    cl = CircularList([2])
    cl.insert_at_beginning(1)
    cl.insert_at_end(3)
    assert list(cl) == [1, 2, 3]


def test_source_walkthrough():
    cl = CircularList()
    cl.insert_at_beginning(1)
    for value in range(2, 11):
        cl.insert_at_end(value)
    assert list(cl) == list(range(1, 11))

    cl.insert_at_position(11, 0)
    assert list(cl) == [11] + list(range(1, 11))

    cl.insert_at_position(12, 5)
    assert list(cl) == [11, 1, 2, 3, 4, 12, 5, 6, 7, 8, 9, 10]

    cl.insert_at_position(13, 12)
    assert list(cl)[-1] == 13
    assert len(cl) == 13

    assert cl.delete(1)
    assert 1 not in list(cl)
    assert cl.delete(6)
    assert cl.delete(13)
    assert list(cl) == [11, 2, 3, 4, 12, 5, 7, 8, 9, 10]


def test_insert_position_out_of_range():
    cl = CircularList([1, 2])
    with pytest.raises(IndexError):
        cl.insert_at_position(9, 3)
    with pytest.raises(IndexError):
        cl.insert_at_position(9, -1)
    assert list(cl) == [1, 2]


def test_insert_at_end_position_then_append_keeps_ring():
    cl = CircularList([1, 2])
    cl.insert_at_position(3, 2)
    cl.insert_at_end(4)
    assert list(cl) == [1, 2, 3, 4]


def test_delete_missing_key():
    cl = CircularList([1, 2, 3])
    assert cl.delete(7) is False
    assert list(cl) == [1, 2, 3]


def test_delete_from_empty():
    assert CircularList().delete(1) is False


def test_delete_only_node():
    cl = CircularList([5])
    assert cl.delete(5)
    assert len(cl) == 0
    assert str(cl) == "List is empty"


def test_delete_tail_then_append():
    cl = CircularList([1, 2, 3])
    assert cl.delete(3)
    cl.insert_at_end(4)
    assert list(cl) == [1, 2, 4]


def test_delete_head_then_prepend():
    cl = CircularList([1, 2, 3])
    assert cl.delete(1)
    cl.insert_at_beginning(0)
    assert list(cl) == [0, 2, 3]