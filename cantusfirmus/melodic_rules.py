"""Melodic rules checked on the interval sequence of a cantus firmus.

Every rule takes a sequence of diatonic intervals between consecutive notes
(see :class:`cantusfirmus.note.Interval`) and returns True when the sequence
obeys the rule. The rules also accept partial sequences, so that a generator
can prune candidates early.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate, groupby

Validator = Callable[[Sequence[int]], bool]


def _contrary(first: int, second: int) -> bool:
    """True when the two intervals move in opposite directions.

    Zero counts as descending motion.
    """
    return (first > 0) != (second > 0)


def all_rules(intervals: Sequence[int], validators: Iterable[Validator]) -> bool:
    """True when every validator accepts the intervals."""
    return all(validate(intervals) for validate in validators)


def no_begin_with_five(intervals: Sequence[int]) -> bool:
    """The melody must not open with an ascending sixth."""
    return not intervals or intervals[0] != 5


def limit_directional_motion(intervals: Sequence[int]) -> bool:
    """Limit motion in one direction.

    At most four consecutive intervals may move in the same direction, and
    their combined span may not exceed a sixth.
    """
    for _, run in groupby(intervals, key=lambda value: value > 0):
        total = 0
        for count, interval in enumerate(run, start=1):
            total += interval
            if count >= 5 or abs(total) > 5:
                return False
    return True


def no_excessive_note_repetition(intervals: Sequence[int]) -> bool:
    """No pitch may be sounded more than three times."""
    counts = Counter(accumulate(intervals, initial=0))
    return all(count <= 3 for count in counts.values())


def no_range_exceeds_decima(intervals: Sequence[int]) -> bool:
    """The distance between the lowest and highest notes is at most a tenth."""
    heights = list(accumulate(intervals, initial=0))
    return max(heights) - min(heights) <= 9


def prepared_leaps(intervals: Sequence[int]) -> bool:
    """The last interval, if a leap of a fourth or more, must be prepared.

    Preparation means contrary motion before the leap, of an amount that
    grows with the size of the leap. An ascending sixth is the only sixth
    allowed.
    """
    if len(intervals) <= 1:
        return True

    size = abs(intervals[-1])
    if size == 3:
        return _fourth_prepared(intervals)
    if size == 4:
        return _fifth_prepared(intervals)
    if size == 5:
        return _sixth_prepared(intervals)
    return True


def _fourth_prepared(intervals: Sequence[int]) -> bool:
    return _contrary(intervals[-2], intervals[-1])


def _fifth_prepared(intervals: Sequence[int]) -> bool:
    last, prev = intervals[-1], intervals[-2]
    if _contrary(prev, last) and abs(prev) >= 2:
        return True
    if len(intervals) >= 3:
        return _contrary(prev, last) and _contrary(intervals[-3], last)
    return False


def _sixth_prepared(intervals: Sequence[int]) -> bool:
    if intervals[-1] != 5:
        return False

    before = list(reversed(intervals[:-1]))
    if len(before) >= 3 and all(value < 0 for value in before[:3]):
        return True
    if len(before) >= 2:
        first, second = before[0], before[1]
        if first < 0 and second < 0 and (abs(first) >= 2 or abs(second) >= 2):
            return True
    return before[0] < 0 and abs(before[0]) >= 3


def validate_leap_resolution(intervals: Sequence[int]) -> bool:
    """Every leap of a fourth or more must be resolved by contrary motion.

    A leap at the very end still awaits its resolution and is accepted.
    """
    if len(intervals) <= 1:
        return True

    resolvers = {
        3: _fourth_resolved,
        4: _fifth_resolved,
        5: _sixth_resolved,
    }
    for index, leap in enumerate(intervals[:-1]):
        resolver = resolvers.get(abs(leap))
        if resolver is not None and not resolver(intervals[index:]):
            return False
    return True


def _fourth_resolved(tail: Sequence[int]) -> bool:
    return _contrary(tail[0], tail[1])


def _fifth_resolved(tail: Sequence[int]) -> bool:
    leap, next1 = tail[0], tail[1]
    if len(tail) == 2:
        return _contrary(leap, next1)
    next2 = tail[2]
    return _contrary(leap, next1) and (abs(next1) >= 2 or _contrary(leap, next2))


def _sixth_resolved(tail: Sequence[int]) -> bool:
    leap = tail[0]
    if leap != 5:
        return False

    next1 = tail[1]
    if len(tail) == 2:
        return _contrary(leap, next1)

    next2 = tail[2]
    single_large = next1 < 0 and abs(next1) >= 3
    if len(tail) == 3:
        return single_large or (_contrary(leap, next1) and _contrary(leap, next2))

    next3 = tail[3]
    return (
        single_large
        or (next1 < 0 and next2 < 0 and abs(next1) + abs(next2) >= 3)
        or (next1 < 0 and next2 < 0 and next3 < 0)
    )


def no_note_repetition_after_leap(intervals: Sequence[int]) -> bool:
    """No leap may be followed by an equal leap straight back."""
    return not any(
        abs(current) > 1 and abs(current) == abs(following) and _contrary(current, following)
        for current, following in zip(intervals, intervals[1:])
    )


def no_close_large_leaps(intervals: Sequence[int]) -> bool:
    """Two leaps of a fourth or more may not be one interval apart."""
    return not any(
        abs(first) > 2 and abs(third) > 2
        for first, third in zip(intervals, intervals[2:])
    )


def no_more_than_two_consecutive_thirds(intervals: Sequence[int]) -> bool:
    """At most two thirds in a row."""
    return all(
        sum(1 for _ in run) <= 2
        for is_third, run in groupby(intervals, key=lambda value: abs(value) == 2)
        if is_third
    )