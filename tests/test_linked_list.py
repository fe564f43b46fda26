import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import LinkedList, Node


@pytest.fixture
def sample():
    linked = LinkedList()
    linked.insert_at_head(10)
    linked.insert_at_tail(20)
    linked.insert_at_tail(30)
    linked.insert_at(2, 15)
    return linked


def test_insertions(sample):
    assert str(sample) == "10 -> 15 -> 20 -> 30 -> NULL"


def test_delete_at_position(sample):
    sample.delete_at(3)
    assert str(sample) == "10 -> 15 -> 30 -> NULL"


def test_reverse_after_delete(sample):
    sample.delete_at(3)
    sample.reverse()
    assert str(sample) == "30 -> 15 -> 10 -> NULL"


def test_clear(sample):
    sample.clear()
    assert str(sample) == "NULL"
    assert len(sample) == 0


def test_insert_at_front_and_past_end():
    linked = LinkedList([1, 2])
    linked.insert_at(0, 0)
    linked.insert_at(99, 3)
    assert list(linked) == [0, 1, 2, 3]


def test_insert_at_into_empty_list():
    linked = LinkedList()
    linked.insert_at(5, 7)
    assert list(linked) == [7]


def test_delete_past_end_is_noop():
    linked = LinkedList([1, 2, 3])
    linked.delete_at(10)
    assert list(linked) == [1, 2, 3]


def test_delete_head_and_empty():
    linked = LinkedList([1, 2])
    linked.delete_at(1)
    assert list(linked) == [2]
    linked.delete_at(1)
    assert list(linked) == []
    linked.delete_at(1)
    assert list(linked) == []


def test_delete_invalid_position_raises():
    linked = LinkedList([1, 2])
    with pytest.raises(IndexError):
        linked.delete_at(0)


def test_head_node_links():
    linked = LinkedList([4, 5])
    assert linked.head == Node(4, Node(5))


@given(st.lists(st.integers()))
def test_reverse_round_trip(values):
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.reverse()
    assert list(linked) == values
    assert len(linked) == len(values)


@given(st.lists(st.integers(), max_size=10), st.data())
def test_insert_then_delete_round_trip(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values) + 1))
    linked = LinkedList(values)
    linked.insert_at(position, "x")
    assert list(linked)[position - 1] == "x"
    assert len(linked) == len(values) + 1
    linked.delete_at(position)
    assert list(linked) == values


@given(st.lists(st.integers()))
def test_head_insertions_reverse_order(values):
    linked = LinkedList()
    for value in values:
        linked.insert_at_head(value)
    assert list(linked) == values[::-1]