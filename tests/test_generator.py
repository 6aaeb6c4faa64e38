import pytest

from cantusfirmus.generator import (
    COMPLETE_VALIDATORS,
    LEAPS,
    PARTIAL_VALIDATORS,
    STEPS,
    generate_cantus,
)
from cantusfirmus.melodic_rules import all_rules


@pytest.mark.parametrize(
    "n, allowed_leaps",
    [
        (1, [2, 3]),
        (10, []),
        (10, [9, 10]),
    ],
)
def test_invalid_input_gives_no_sequences(n, allowed_leaps):
    assert generate_cantus(n, allowed_leaps) == []


@pytest.fixture(scope="module")
def ten_interval_result():
    return generate_cantus(10, [2, 3, 4])


@pytest.mark.parametrize(
    "n, allowed_leaps",
    [
        (5, [1, 2]),
        (8, [2, 3]),
    ],
)
def test_valid_input_small(n, allowed_leaps):
    result = generate_cantus(n, allowed_leaps)
    _check_sequences(result, n, allowed_leaps)


def test_valid_input_ten(ten_interval_result):
    _check_sequences(ten_interval_result, 10, [2, 3, 4])


def _check_sequences(result, n, allowed_leaps):
    assert len(result) > 0
    for sequence in result:
        assert len(sequence) == n
        assert sum(sequence) == 0
        assert sequence[-2] in STEPS
        assert sequence[-1] in STEPS
        body = sequence[:-2]
        assert all(value in STEPS or value in LEAPS for value in body)
        leaps_count = sum(1 for value in body if value in LEAPS)
        assert leaps_count in allowed_leaps


@pytest.mark.parametrize(
    "target",
    [
        [2, -1, -1, 3, -1, 2, -1, -1, -1, -1],
        [1, 2, -1, 1, 1, 1, -1, -2, -1, -1],
    ],
)
def test_contains_known_cantus(ten_interval_result, target):
    assert target in ten_interval_result


def test_results_satisfy_all_rules(ten_interval_result):
    for sequence in ten_interval_result:
        assert all_rules(sequence, PARTIAL_VALIDATORS)
        assert all_rules(sequence, COMPLETE_VALIDATORS)


def test_results_are_unique(ten_interval_result):
    as_tuples = [tuple(sequence) for sequence in ten_interval_result]
    assert len(set(as_tuples)) == len(as_tuples)


def test_results_are_independent_lists(ten_interval_result):
    first = ten_interval_result[0]
    assert first is not ten_interval_result[-1] or len(ten_interval_result) == 1
    snapshot = list(ten_interval_result[-1])
    first.append(99)
    try:
        assert ten_interval_result[-1] == snapshot or len(ten_interval_result) == 1
    finally:
        first.pop()