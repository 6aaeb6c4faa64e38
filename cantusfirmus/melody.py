"""Cantus firmus interval contours and their realization in a mode."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum

from cantusfirmus.note import Interval, Note, transpose

_A, _G, _F = 5, 4, 3


class Mode(Enum):
    """The seven diatonic modes, each starting on its own white-key tonic."""

    MAJOR = "Major"
    DORIAN = "Dorian"
    PHRYGIAN = "Phrygian"
    LYDIAN = "Lydian"
    MIXOLYDIAN = "Mixolydian"
    MINOR = "Minor"
    LOCRIAN = "Locrian"

    @property
    def tonic(self) -> Note:
        """The first note of a realization in this mode, in octave 4."""
        return Note(step=_TONIC_STEPS[self], octave=4)

    @classmethod
    def from_name(cls, name: Mode | str) -> Mode:
        """Look a mode up by its name, e.g. ``"Dorian"``.

        Raises ValueError for an unknown name.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown mode: {name}") from None


_TONIC_STEPS = {
    Mode.MAJOR: 0,
    Mode.DORIAN: 1,
    Mode.PHRYGIAN: 2,
    Mode.LYDIAN: 3,
    Mode.MIXOLYDIAN: 4,
    Mode.MINOR: 5,
    Mode.LOCRIAN: 6,
}


@dataclass(frozen=True)
class CantusFirmus:
    """A melodic contour given only as diatonic intervals between notes."""

    intervals: tuple[Interval, ...] = ()

    def __init__(self, intervals: Iterable[int] = ()) -> None:
        object.__setattr__(
            self, "intervals", tuple(Interval(value) for value in intervals)
        )

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def realize(self, mode: Mode | str) -> list[Note]:
        """Turn the contour into concrete notes starting on the mode's tonic.

        In the minor mode the usual leading-tone alterations are applied.
        Raises ValueError for an unknown mode name.
        """
        mode = Mode.from_name(mode)
        current = mode.tonic
        notes = [current]
        for interval in self.intervals:
            current = transpose(current, interval)
            notes.append(current)

        if mode is Mode.MINOR:
            notes = adjust_minor_alterations(notes)
        return notes


def _sharpen(notes: list[Note], index: int) -> None:
    if notes[index].alteration == 0:
        notes[index] = replace(notes[index], alteration=1)


def adjust_minor_alterations(notes: Sequence[Note]) -> list[Note]:
    """Raise the sixth and seventh degrees where a minor melody needs them.

    * A, G, A sharpens the G;
    * F, G, A sharpens the F and the G;
    * A, G, F, G, A sharpens both Gs and the F.

    Notes that already carry an accidental are left alone.
    """
    adjusted = list(notes)
    if len(adjusted) < 3:
        return adjusted

    for i in range(1, len(adjusted) - 1):
        prev, current, nxt = (note.step for note in adjusted[i - 1 : i + 2])

        if (prev, current, nxt) == (_A, _G, _A):
            _sharpen(adjusted, i)

        if (prev, current, nxt) == (_F, _G, _A):
            _sharpen(adjusted, i - 1)
            _sharpen(adjusted, i)

        if 2 <= i < len(adjusted) - 2:
            window = tuple(note.step for note in adjusted[i - 2 : i + 3])
            if window == (_A, _G, _F, _G, _A):
                _sharpen(adjusted, i - 1)
                _sharpen(adjusted, i)
                _sharpen(adjusted, i + 1)

    return adjusted


def is_note_surrounded_by_linear_motion(notes: Sequence[Note], index: int) -> bool:
    """True when the notes around ``index`` move stepwise in one direction.

    The first and last notes, and indices outside the melody, never count.
    """
    if index <= 0 or index >= len(notes) - 1:
        return False

    before = notes[index - 1].diatonic_position
    here = notes[index].diatonic_position
    after = notes[index + 1].diatonic_position
    return (here - before, after - here) in ((1, 1), (-1, -1))