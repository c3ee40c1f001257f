import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.sorting import (
    bin_sort,
    bubble_sort,
    cocktail_sort,
    counting_sort,
    cycle_sort,
    exchange_insertion_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    pancake_sort,
    quick_sort,
    radix_passes,
    radix_sort,
    sort_characters,
)

SOURCE_ARRAYS = [
    [3, 8, 5, 4, 1, 9, -2],
    [5, 1, 4, 2, 8, 0, 2],
    [12, 11, 13, 5, 6, 7],
    [23, 10, 20, 11, 12, 6, 7],
    [5, 4, 9, 123, 58, 37, 324, 444, 699, 347, -1, 0, 200],
]

integers = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40)
naturals = st.lists(st.integers(min_value=0, max_value=5000), max_size=40)


def _assert_all_general_sorts(data):
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert exchange_insertion_sort(data) == expected
    assert cocktail_sort(data) == expected
    assert cycle_sort(data) == expected
    assert merge_sort(data) == expected
    assert pancake_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected


@pytest.mark.parametrize("data", SOURCE_ARRAYS)
def test_general_sorts_on_source_arrays(data):
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert exchange_insertion_sort(data) == expected
    assert cocktail_sort(data) == expected
    assert cycle_sort(data) == expected
    assert merge_sort(data) == expected
    assert pancake_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected


@given(data=integers)
def test_general_sorts_match_sorted(data):
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert exchange_insertion_sort(data) == expected
    assert cocktail_sort(data) == expected
    assert cycle_sort(data) == expected
    assert merge_sort(data) == expected
    assert pancake_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected


def test_input_is_left_untouched():
    data = [4, 2, 9, 1]
    assert insertion_sort(data) == [1, 2, 4, 9]
    assert exchange_insertion_sort(data) == [1, 2, 4, 9]
    assert cocktail_sort(data) == [1, 2, 4, 9]
    assert cycle_sort(data) == [1, 2, 4, 9]
    assert merge_sort(data) == [1, 2, 4, 9]
    assert pancake_sort(data) == [1, 2, 4, 9]
    assert quick_sort(data) == [1, 2, 4, 9]
    assert heap_sort(data) == [1, 2, 4, 9]
    assert data == [4, 2, 9, 1]


def test_empty_input():
    assert insertion_sort([]) == []
    assert exchange_insertion_sort([]) == []
    assert cocktail_sort([]) == []
    assert cycle_sort([]) == []
    assert merge_sort([]) == []
    assert pancake_sort([]) == []
    assert quick_sort([]) == []
    assert heap_sort([]) == []
    assert bin_sort([]) == []
    assert radix_sort([]) == []
    assert counting_sort([]) == []


@given(data=naturals)
def test_bin_sort_matches_sorted(data):
    assert bin_sort(data) == sorted(data)


def test_bin_sort_source_example():
    data = [2, 5, 8, 12, 3, 6, 7, 10]
    assert bin_sort(data) == sorted(data)


def test_bin_sort_rejects_negative():
    with pytest.raises(ValueError):
        bin_sort([3, -1, 2])


@given(data=naturals)
def test_radix_sort_matches_sorted(data):
    assert radix_sort(data) == sorted(data)


def test_radix_pass_count_follows_largest_value():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    passes = list(radix_passes(data))
    assert len(passes) == len(str(max(data)))
    assert passes[-1] == sorted(data)


def test_radix_first_pass_orders_by_last_digit():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    first = next(radix_passes(data))
    assert sorted(first) == sorted(data)
    last_digits = [value % 10 for value in first]
    assert last_digits == sorted(last_digits)


def test_radix_all_zero_makes_no_pass():
    assert list(radix_passes([0, 0])) == []
    assert radix_sort([0, 0]) == [0, 0]


def test_radix_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([5, -3])


@given(left=integers, right=integers)
def test_merge_sorted_combines(left, right):
    merged = merge_sorted(sorted(left), sorted(right))
    assert merged == sorted(left + right)


def test_merge_sorted_prefers_left_on_ties():
    left = [1.0, 2]
    right = [1, 3]
    merged = merge_sorted(left, right)
    assert merged == [1, 1, 2, 3]
    assert isinstance(merged[0], float)
    assert isinstance(merged[1], int)


def test_merge_sort_is_stable():
    data = [2.0, 1, 2, 1.0]
    result = merge_sort(data)
    assert [type(v) for v in result] == [int, float, float, int]


@given(data=integers)
def test_bubble_sort_ascending(data):
    assert bubble_sort(data, operator.lt) == sorted(data)


def test_bubble_sort_source_comparator_is_descending():
    data = [5, 4, 9, 123, 58, 37, 324, 444, 699, 347, -1, 0, 200]
    assert bubble_sort(data, operator.gt) == sorted(data, reverse=True)


@given(data=st.lists(st.integers(min_value=0, max_value=5), max_size=30))
def test_counting_sort_with_limit(data):
    assert counting_sort(data, 6) == sorted(data)


def test_counting_sort_source_example():
    assert counting_sort([1, 5, 4, 3, 2], 6) == [1, 2, 3, 4, 5]


@given(data=naturals)
def test_counting_sort_default_limit(data):
    assert counting_sort(data) == sorted(data)


def test_counting_sort_default_limit_bounds():
    assert counting_sort([100000, 0]) == [0, 100000]
    with pytest.raises(ValueError):
        counting_sort([100001])


@pytest.mark.parametrize("bad", [[6], [-1]])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort(bad, 6)


def test_sort_characters_source_example():
    text = "techgeekbuzz"
    assert sort_characters(text) == "".join(sorted(text))


@given(text=st.text(alphabet=st.characters(max_codepoint=255)))
def test_sort_characters_matches_sorted(text):
    assert sort_characters(text) == "".join(sorted(text))


def test_sort_characters_rejects_wide_characters():
    with pytest.raises(ValueError):
        sort_characters("ab\u0100")


def test_quick_sort_handles_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(reversed(data)) == data


@given(data=integers)
def test_cycle_sort_is_permutation(data):
    result = cycle_sort(data)
    assert sorted(result) == sorted(data)
    assert all(a <= b for a, b in zip(result, result[1:]))