import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    heap_sort,
    heapify,
    partition,
    quick_sort,
    radix_sort,
    read_numbers,
    write_numbers,
)


def test_heap_sort_source_example():
    data = [12, 11, 13, 5, 6, 7]
    assert heap_sort(data) == sorted(data)


def test_heap_sort_leaves_input_untouched():
    data = [3, 1, 2]
    heap_sort(data)
    assert data == [3, 1, 2]


@given(st.lists(st.integers()))
def test_heap_sort_matches_sorted(data):
    assert heap_sort(data) == sorted(data)


@given(st.lists(st.integers(), min_size=1))
def test_heapify_builds_max_heap(data):
    size = len(data)
    for root in reversed(range(size // 2)):
        heapify(data, size, root)
    for index in range(1, size):
        assert data[(index - 1) // 2] >= data[index]


def test_radix_sort_source_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_empty():
    assert radix_sort([]) == []


def test_radix_sort_all_zero():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        radix_sort([1.5, 2])


@given(st.lists(st.integers(min_value=0, max_value=10**9)))
def test_radix_sort_matches_sorted(data):
    assert radix_sort(data) == sorted(data)


@given(st.lists(st.integers()))
def test_quick_sort_matches_sorted(data):
    assert quick_sort(data) == sorted(data)


def test_quick_sort_with_duplicates():
    data = [5, 5, 1, 5, 1, 9, 9, 0]
    assert quick_sort(data) == sorted(data)


@given(st.lists(st.integers(), min_size=1))
def test_partition_splits_around_pivot(data):
    items = list(data)
    pivot = items[0]
    index = partition(items, 0, len(items))
    assert items[index] == pivot
    assert all(value <= pivot for value in items[:index])
    assert all(value >= pivot for value in items[index + 1:])
    assert sorted(items) == sorted(data)


def test_write_and_read_round_trip(tmp_path):
    path = tmp_path / "numbers.txt"
    numbers = [41, 18467, 6334, 26500]
    write_numbers(path, numbers)
    assert read_numbers(path, len(numbers)) == numbers
    assert read_numbers(path) == numbers


def test_write_numbers_format(tmp_path):
    path = tmp_path / "numbers.txt"
    write_numbers(path, [1, 2])
    assert path.read_text(encoding="utf-8") == "1 2 "


def test_read_numbers_partial(tmp_path):
    path = tmp_path / "numbers.txt"
    write_numbers(path, [7, 8, 9])
    assert read_numbers(path, 2) == [7, 8]


def test_read_numbers_too_few(tmp_path):
    path = tmp_path / "numbers.txt"
    write_numbers(path, [7])
    with pytest.raises(ValueError):
        read_numbers(path, 3)


def test_read_numbers_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_numbers(tmp_path / "absent.txt", 1)


def test_read_then_quick_sort(tmp_path):
    path = tmp_path / "numbers.txt"
    numbers = [9, 3, 7, 1]
    write_numbers(path, numbers)
    assert quick_sort(read_numbers(path, 4)) == sorted(numbers)