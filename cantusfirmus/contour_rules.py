"""Rules on the overall shape of a cantus firmus.

Each rule takes a sequence of diatonic intervals between consecutive notes
and returns True when the melody obeys the rule. Most of them work on the
note heights relative to the first note, i.e. the running sums of the
intervals.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, groupby

# Intervals counted as leaps when looking for repeated figures.
_LEAPS = frozenset({-4, -3, -2, 2, 3, 4, 5})

# (pattern length, number of notes between the two occurrences)
_REPEATED_HEIGHT_PATTERNS = ((2, 0), (3, 0), (3, 1), (3, 2), (3, 3))

# Height -> allowed (previous, next) heights around it.
_LEADING_TONE_NEIGHBOURS = {
    -1: frozenset({(0, 0), (-2, 0), (0, -2)}),
    6: frozenset({(7, 7), (5, 7), (7, 5)}),
    -8: frozenset({(-7, -7), (-9, -7), (-7, -9)}),
}

_SEVENTHS_AND_NINTHS = frozenset({6, 8, 12, 16})


def _sign(value: int) -> int:
    """1 for positive values, -1 otherwise (zero is treated as descending)."""
    return 1 if value > 0 else -1


def _heights(intervals: Sequence[int]) -> list[int]:
    """Note heights relative to the first note, first note included."""
    return list(accumulate(intervals, initial=0))


def _inner_extrema(heights: Sequence[int]) -> list[int]:
    """Strict peaks and valleys, leaving out the first and last notes."""
    return [
        here
        for before, here, after in zip(heights, heights[1:], heights[2:])
        if (here > before and here > after) or (here < before and here < after)
    ]


def no_repeating_patterns(intervals: Sequence[int]) -> bool:
    """No short pitch figure may be repeated.

    Forbidden are a, b, a, b; a, b, c, a, b, c; and a, b, c followed by
    a, b, c again after one, two or three other notes.
    """
    if len(intervals) < 3:
        return True

    heights = _heights(intervals)
    for length, gap in _REPEATED_HEIGHT_PATTERNS:
        span = 2 * length + gap
        for start in range(len(heights) - span + 1):
            again = start + length + gap
            if heights[start : start + length] == heights[again : again + length]:
                return False
    return True


def no_triple_alternating_note(intervals: Sequence[int]) -> bool:
    """No note may return twice in the pattern a, b, a, c, a."""
    if len(intervals) < 4:
        return True

    heights = _heights(intervals)
    return not any(
        first == third == fifth
        for first, third, fifth in zip(heights, heights[2:], heights[4:])
    )


def no_repeating_extremes(intervals: Sequence[int]) -> bool:
    """No peak or valley may recur as the next-but-one extremum."""
    if len(intervals) < 3:
        return True

    extrema = _inner_extrema(_heights(intervals))
    return not any(first == third for first, third in zip(extrema, extrema[2:]))


def avoid_seventh_between_extrema(intervals: Sequence[int]) -> bool:
    """Adjacent extrema, counting the first and last notes, may not be a seventh apart."""
    if not intervals:
        return True

    heights = _heights(intervals)
    extrema = [heights[0], *_inner_extrema(heights), heights[-1]]
    return not any(abs(first - second) == 6 for first, second in zip(extrema, extrema[1:]))


def min_direction_changes(intervals: Sequence[int]) -> bool:
    """The complete melody must change direction at least twice."""
    if len(intervals) < 3:
        return False

    runs = sum(1 for _ in groupby(intervals, key=_sign))
    return runs - 1 >= 2


def validate_climax(intervals: Sequence[int]) -> bool:
    """The melody must have a single climax.

    A melody that never goes below its first note needs a unique highest
    note, one that never goes above it a unique lowest note, and one that
    goes both ways needs both.
    """
    if not intervals:
        return True

    heights = _heights(intervals)
    highest, lowest = max(heights), min(heights)
    single_max = heights.count(highest) == 1
    single_min = heights.count(lowest) == 1

    if lowest >= 0:
        return single_max
    if highest <= 0:
        return single_min
    return single_max and single_min


def no_sequences(intervals: Sequence[int]) -> bool:
    """The melody may contain no melodic sequences.

    Forbidden are the alternation a, b, a, b, a (a != b), a three-interval
    figure repeated after one other interval, and a figure holding a leap
    that is repeated as a whole.
    """
    values = list(intervals)
    return not (
        _has_alternating_pattern(values)
        or _has_separated_triplets(values)
        or _has_repeating_leap_pattern(values)
    )


def _has_alternating_pattern(values: list[int]) -> bool:
    return any(
        a != b and values[i + 2] == a and values[i + 3] == b and values[i + 4] == a
        for i, (a, b) in enumerate(zip(values, values[1:]))
        if i + 4 < len(values)
    )


def _has_separated_triplets(values: list[int]) -> bool:
    return any(
        values[i : i + 3] == values[i + 4 : i + 7] for i in range(len(values) - 6)
    )


def _has_repeating_leap_pattern(values: list[int]) -> bool:
    if len(values) < 3:
        return False

    candidates = [
        (start, triplet)
        for start, triplet in enumerate(zip(values, values[1:], values[2:]))
        if len(set(triplet)) > 1 and any(value in _LEAPS for value in triplet)
    ]

    for position, (first_start, triplet) in enumerate(candidates):
        for second_start, other in candidates[position + 1 :]:
            if other != triplet:
                continue
            length = second_start - first_start
            if second_start + length > len(values):
                continue
            if values[first_start:second_start] == values[second_start : second_start + length]:
                return True
    return False


def avoid_seventh_ninth_between_extremes(intervals: Sequence[int]) -> bool:
    """No seventh or ninth between the tonic and the extremes, or between the extremes."""
    if not intervals:
        return True

    heights = _heights(intervals)
    highest, lowest = max(heights), min(heights)
    return not any(
        abs(distance) in _SEVENTHS_AND_NINTHS
        for distance in (highest, lowest, highest - lowest)
    )


def validate_leading_tone(intervals: Sequence[int]) -> bool:
    """Leading tones below the tonic and its octaves must move by step to the tonic.

    The notes a second below the tonic, a second below the upper octave and
    a second below the lower octave may appear only between the tonic and
    itself or between the tonic and the note below them.
    """
    if not intervals:
        return True

    heights = _heights(intervals)
    for index, height in enumerate(heights):
        allowed = _LEADING_TONE_NEIGHBOURS.get(height)
        if allowed is None:
            continue
        if index == 0 or index == len(heights) - 1:
            return False
        if (heights[index - 1], heights[index + 1]) not in allowed:
            return False
    return True