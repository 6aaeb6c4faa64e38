"""Notes, diatonic intervals and interval qualities."""

from __future__ import annotations

import re
from dataclasses import dataclass

NOTE_NAMES = ("C", "D", "E", "F", "G", "A", "B")
_STEP_SEMITONES = (0, 2, 4, 5, 7, 9, 11)
_OCTAVE_PATTERN = re.compile(r"\s*([+-]?\d+)")

# Numerical interval -> (perfect semitones, major semitones)
_STANDARD_SEMITONES = {
    1: (0, 0),
    2: (0, 2),
    3: (0, 4),
    4: (5, 0),
    5: (7, 0),
    6: (0, 9),
    7: (0, 11),
    8: (12, 0),
    9: (0, 14),
    10: (0, 16),
    11: (17, 0),
    12: (19, 0),
    13: (0, 21),
    14: (0, 23),
    15: (24, 0),
}
_PERFECT_NUMERICAL = frozenset({1, 4, 5, 8, 11, 12, 15})

_SIMPLE_NAMES = {
    1: "second",
    2: "third",
    3: "fourth",
    4: "fifth",
    5: "sixth",
    6: "seventh",
    7: "octave",
}


def mod7(n: int) -> int:
    """Return the non-negative remainder of ``n`` divided by 7."""
    return n % 7


@dataclass(frozen=True)
class Note:
    """A pitch: diatonic step (0 = C .. 6 = B), octave and accidental."""

    step: int
    octave: int
    alteration: int = 0

    def __str__(self) -> str:
        symbol = {1: "#", -1: "b"}.get(self.alteration, "")
        return f"{NOTE_NAMES[self.step]}{symbol}{self.octave}"

    @property
    def diatonic_position(self) -> int:
        """Position on the continuous diatonic scale (C0 = 0)."""
        return self.step + self.octave * 7

    def semitones(self) -> int:
        """Number of semitones above C0."""
        return _STEP_SEMITONES[self.step] + self.alteration + self.octave * 12

    def is_lower(self, other: Note) -> bool:
        return self.semitones() < other.semitones()

    def is_higher(self, other: Note) -> bool:
        return self.semitones() > other.semitones()

    def equal_pitch(self, other: Note) -> bool:
        return self.semitones() == other.semitones()


class Interval(int):
    """A signed diatonic interval: 0 is a unison, 1 a second up, -1 a second down."""

    def __str__(self) -> str:
        size = abs(int(self))
        direction = "down" if self < 0 else "up"
        if size == 0:
            return "unison"
        if size in _SIMPLE_NAMES:
            return f"{_SIMPLE_NAMES[size]} {direction}"

        number = size + 1
        if 11 <= number <= 13:
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
        return f"{number}{suffix} {direction}"

    def __repr__(self) -> str:
        return f"Interval({int(self)})"


def parse_note(text: str) -> Note:
    """Parse notation such as ``C4``, ``C#4`` or ``db5`` into a Note.

    Raises ValueError when the text is not a valid note.
    """
    if len(text) < 2:
        raise ValueError("invalid note format: string too short")

    letter = text[0]
    if letter.upper() not in NOTE_NAMES or not letter.isascii():
        raise ValueError(f"invalid note character: {letter}")
    step = NOTE_NAMES.index(letter.upper())

    rest = text[1:]
    alteration = 0
    if rest[:1] == "#":
        alteration, rest = 1, rest[1:]
    elif rest[:1] == "b":
        alteration, rest = -1, rest[1:]

    if not rest:
        raise ValueError("invalid note format: missing octave")

    match = _OCTAVE_PATTERN.match(rest)
    if match is None:
        raise ValueError(f"invalid octave: {rest!r}")

    return Note(step=step, octave=int(match.group(1)), alteration=alteration)


def transpose(note: Note, interval: int) -> Note:
    """Move a note by a diatonic interval; the result carries no accidental."""
    total = note.step + int(interval)
    return Note(step=mod7(total), octave=note.octave + total // 7)


def is_leap(first: Note, second: Note) -> bool:
    """True when the two notes are more than a second apart."""
    return abs(second.diatonic_position - first.diatonic_position) > 1


def interval_quality(first: Note, second: Note) -> str:
    """Quality of the interval between two notes.

    Returns "P" (perfect), "M" (major), "m" (minor), "A" (augmented)
    or "d" (diminished).
    """
    semitone_distance = abs(second.semitones() - first.semitones())
    numerical = abs(second.diatonic_position - first.diatonic_position) + 1

    expected = _STANDARD_SEMITONES.get(numerical)
    if expected is None:
        simple = mod7(numerical - 1) + 1
        shift = (numerical - 1) // 7 * 12
        perfect, major = _STANDARD_SEMITONES[simple]
        expected = (perfect + shift, major + shift)

    perfect, major = expected
    if numerical in _PERFECT_NUMERICAL:
        if semitone_distance == perfect:
            return "P"
        return "A" if semitone_distance > perfect else "d"

    if semitone_distance == major:
        return "M"
    if semitone_distance == major - 1:
        return "m"
    return "A" if semitone_distance > major else "d"