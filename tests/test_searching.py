from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    binary_search,
    fibonacci_search,
    linear_search,
    search_rotated,
)

distinct_sorted = st.sets(st.integers(min_value=-500, max_value=500), max_size=50).map(
    sorted
)


@given(values=distinct_sorted, data=st.data())
def test_sorted_search_finds_present(values, data):
    if not values:
        values = [0]
    key = data.draw(st.sampled_from(values))
    assert binary_search(values, key) == values.index(key)
    assert fibonacci_search(values, key) == values.index(key)


@given(values=distinct_sorted, key=st.integers(min_value=-600, max_value=600))
def test_sorted_search_absent_gives_none(values, key):
    binary = binary_search(values, key)
    fibonacci = fibonacci_search(values, key)
    if key in values:
        assert binary == values.index(key)
        assert fibonacci == values.index(key)
    else:
        assert binary is None
        assert fibonacci is None


def test_sorted_search_with_duplicates_hits_key():
    values = [1, 2, 2, 2, 3, 4, 4, 9]
    for key in values:
        assert values[binary_search(values, key)] == key
        assert values[fibonacci_search(values, key)] == key


def test_empty_sequence():
    assert binary_search([], 3) is None
    assert fibonacci_search([], 3) is None
    assert linear_search([], 3) is None
    assert search_rotated([], 3) is None


def test_linear_search_first_occurrence():
    values = [4, 3, 6, 7, 3]
    assert linear_search(values, 3) == 1
    assert linear_search(values, 8) is None


@given(values=st.lists(st.integers(min_value=-20, max_value=20), max_size=30), key=st.integers(-25, 25))
def test_linear_search_matches_index(values, key):
    expected = values.index(key) if key in values else None
    assert linear_search(values, key) == expected


def test_binary_search_worked_example():
    values = [1, 3, 5, 7]
    assert binary_search(values, 5) == values.index(5)


@given(values=distinct_sorted, data=st.data())
def test_search_rotated_finds_every_item(values, data):
    if not values:
        values = [1]
    shift = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    rotated = values[shift:] + values[:shift]
    for item in rotated:
        assert search_rotated(rotated, item) == rotated.index(item)


@given(values=distinct_sorted, data=st.data(), target=st.integers(min_value=-600, max_value=600))
def test_search_rotated_absent(values, data, target):
    if not values:
        values = [1]
    shift = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    rotated = values[shift:] + values[:shift]
    expected = rotated.index(target) if target in rotated else None
    assert search_rotated(rotated, target) == expected


def test_search_rotated_example():
    values = [4, 5, 6, 7, 0, 1, 2]
    assert search_rotated(values, 0) == values.index(0)
    assert search_rotated(values, 3) is None