"""Exhaustive generation of cantus firmus interval contours."""

from __future__ import annotations

from collections.abc import Iterable

from cantusfirmus.contour_rules import (
    avoid_seventh_between_extrema,
    avoid_seventh_ninth_between_extremes,
    min_direction_changes,
    no_repeating_extremes,
    no_repeating_patterns,
    no_sequences,
    no_triple_alternating_note,
    validate_climax,
    validate_leading_tone,
)
from cantusfirmus.melodic_rules import (
    all_rules,
    limit_directional_motion,
    no_begin_with_five,
    no_close_large_leaps,
    no_excessive_note_repetition,
    no_more_than_two_consecutive_thirds,
    no_note_repetition_after_leap,
    no_range_exceeds_decima,
    prepared_leaps,
    validate_leap_resolution,
)

STEPS = (-1, 1)
LEAPS = (-4, -3, -2, 2, 3, 4, 5)

# Rules that can already be judged on a partial melody.
PARTIAL_VALIDATORS = (
    no_begin_with_five,
    no_excessive_note_repetition,
    limit_directional_motion,
    no_range_exceeds_decima,
    no_repeating_patterns,
    prepared_leaps,
    validate_leap_resolution,
    no_triple_alternating_note,
    no_note_repetition_after_leap,
    no_repeating_extremes,
    avoid_seventh_between_extrema,
    no_sequences,
    no_close_large_leaps,
    no_more_than_two_consecutive_thirds,
)

# Rules that only make sense for a finished melody.
COMPLETE_VALIDATORS = (
    min_direction_changes,
    validate_climax,
    avoid_seventh_ninth_between_extremes,
    validate_leading_tone,
)


def generate_cantus(n: int, allowed_leaps: Iterable[int]) -> list[list[int]]:
    """All interval sequences of length ``n`` that form a valid cantus firmus.

    Every sequence returns to its starting pitch, ends with two steps and
    contains a number of leaps (before the final two steps) taken from
    ``allowed_leaps``. Invalid arguments give an empty list.
    """
    if n < 2:
        return []

    leap_counts = {count for count in allowed_leaps if 0 <= count <= n - 2}
    if not leap_counts:
        return []
    max_leaps = max(leap_counts)

    results: list[list[int]] = []
    prefix: list[int] = []

    def extend(total: int, leaps_used: int) -> None:
        if not all_rules(prefix, PARTIAL_VALIDATORS):
            return

        if len(prefix) == n - 2:
            if leaps_used not in leap_counts:
                return
            for first in STEPS:
                for second in STEPS:
                    candidate = [*prefix, first, second]
                    if not all_rules(candidate, PARTIAL_VALIDATORS):
                        continue
                    if total + first + second == 0 and all_rules(
                        candidate, COMPLETE_VALIDATORS
                    ):
                        results.append(candidate)
            return

        if n - 2 - leaps_used > 0:
            for step in STEPS:
                prefix.append(step)
                extend(total + step, leaps_used)
                prefix.pop()

        if leaps_used < max_leaps:
            for leap in LEAPS:
                prefix.append(leap)
                extend(total + leap, leaps_used + 1)
                prefix.pop()

    extend(0, 0)
    return results