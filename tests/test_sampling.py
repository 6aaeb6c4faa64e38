import random
from collections import Counter

import pytest

from cantusfirmus.sampling import select_random_items


@pytest.mark.parametrize(
    "items, count, expected",
    [
        ([], 3, 0),
        ([1, 2, 3], 0, 0),
        ([1, 2, 3], -1, 0),
        ([1, 2, 3, 4, 5], 5, 5),
        ([1, 2, 3], 5, 3),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 3, 3),
    ],
)
def test_result_size_and_membership(items, count, expected):
    result = select_random_items(items, count)
    assert len(result) == expected
    assert set(result) <= set(items)


def test_full_selection_is_a_copy_in_order():
    items = [4, 8, 15, 16]
    result = select_random_items(items, 10)
    assert result == items
    result.append(23)
    assert items == [4, 8, 15, 16]


def test_no_item_chosen_twice():
    items = list(range(50))
    result = select_random_items(items, 20)
    assert len(set(result)) == 20


def test_probability_distribution():
    random.seed(20250621)
    iterations = 10000
    items = list(range(1, 11))
    select_size = 3

    counts = Counter()
    for _ in range(iterations):
        counts.update(select_random_items(items, select_size))

    expected_probability = select_size / len(items)
    assert set(counts) == set(items)
    for item, count in counts.items():
        assert abs(count / iterations - expected_probability) <= 0.02, item