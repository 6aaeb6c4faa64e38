"""Checks of a realized melody for augmented and diminished intervals."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from cantusfirmus.melody import is_note_surrounded_by_linear_motion
from cantusfirmus.note import Note, interval_quality

_DISSONANT_QUALITIES = frozenset({"A", "d"})


def is_free_of_augmented_diminished(notes: Sequence[Note]) -> bool:
    """True when the melody avoids forbidden augmented and diminished intervals.

    Two conditions must hold:

    * notes at most two positions apart may form an augmented or diminished
      interval only when one of them lies inside stepwise linear motion;
    * no maximal run of notes moving in one direction may span an augmented
      or diminished interval from its first to its last note.
    """
    return _close_notes_are_consonant(notes) and _runs_are_consonant(notes)


def _close_notes_are_consonant(notes: Sequence[Note]) -> bool:
    for i, first in enumerate(notes):
        for j in range(i + 1, min(i + 3, len(notes))):
            if interval_quality(first, notes[j]) not in _DISSONANT_QUALITIES:
                continue
            if not (
                is_note_surrounded_by_linear_motion(notes, i)
                or is_note_surrounded_by_linear_motion(notes, j)
            ):
                return False
    return True


def _direction(first: Note, second: Note) -> int:
    if second.is_higher(first):
        return 1
    if second.is_lower(first):
        return -1
    return 0


def _runs_are_consonant(notes: Sequence[Note]) -> bool:
    moves = (
        (index, _direction(first, second))
        for index, (first, second) in enumerate(zip(notes, notes[1:]))
    )
    for direction, run in groupby(moves, key=lambda move: move[1]):
        if direction == 0:
            continue
        indices = [index for index, _ in run]
        start, end = indices[0], indices[-1] + 1
        if interval_quality(notes[start], notes[end]) in _DISSONANT_QUALITIES:
            return False
    return True