import pytest

from cantusfirmus.melody import (
    CantusFirmus,
    Mode,
    adjust_minor_alterations,
    is_note_surrounded_by_linear_motion,
)
from cantusfirmus.note import Note


@pytest.mark.parametrize(
    "intervals, mode, expected",
    [
        ((0, 1, 2), "Major", ["C4", "C4", "D4", "F4"]),
        ((1, -1, 2), "Dorian", ["D4", "E4", "D4", "F4"]),
        ((-1, -1, -2), "Phrygian", ["E4", "D4", "C4", "A3"]),
        ((7, -7), "Lydian", ["F4", "F5", "F4"]),
        ((1, 2, -3, 4), "Mixolydian", ["G4", "A4", "C5", "G4", "D5"]),
        ((1, 1, -2), "Minor", ["A4", "B4", "C5", "A4"]),
        ((5, -5), "Locrian", ["B4", "G5", "B4"]),
    ],
)
def test_realize(intervals, mode, expected):
    notes = CantusFirmus(intervals).realize(mode)
    assert [str(note) for note in notes] == expected


def test_realize_accepts_mode_member():
    notes = CantusFirmus((1, 1, -2)).realize(Mode.DORIAN)
    assert [str(note) for note in notes] == ["D4", "E4", "F4", "D4"]


def test_realize_unknown_mode():
    with pytest.raises(ValueError, match="unknown mode"):
        CantusFirmus((1, 2)).realize("Blues")


def test_realize_mode_name_is_case_sensitive():
    with pytest.raises(ValueError, match="unknown mode: major"):
        CantusFirmus((1,)).realize("major")


def test_realize_minor_applies_alterations():
    # A4 G4 A4 -> G sharpened
    notes = CantusFirmus((-1, 1)).realize("Minor")
    assert [str(note) for note in notes] == ["A4", "G#4", "A4"]


def test_realize_empty_contour_gives_tonic():
    assert CantusFirmus().realize(Mode.LOCRIAN) == [Note(6, 4)]


def test_mode_tonic():
    assert Mode.MIXOLYDIAN.tonic == Note(4, 4)


def test_cantus_intervals_are_iterable():
    cantus = CantusFirmus([2, -1])
    assert list(cantus) == [2, -1]
    assert len(cantus) == 2


def N(step, alteration=0, octave=4):
    return Note(step=step, octave=octave, alteration=alteration)


@pytest.mark.parametrize(
    "given, expected",
    [
        ([N(5), N(4), N(5)], [N(5), N(4, 1), N(5)]),
        ([N(3), N(4), N(5)], [N(3, 1), N(4, 1), N(5)]),
        ([N(5), N(3), N(5)], [N(5), N(3), N(5)]),
        ([N(5), N(4, -1), N(5)], [N(5), N(4, -1), N(5)]),
        ([N(5), N(4)], [N(5), N(4)]),
        (
            [N(5), N(4), N(5), N(3), N(4), N(5)],
            [N(5), N(4, 1), N(5), N(3, 1), N(4, 1), N(5)],
        ),
        (
            [N(5), N(4), N(3), N(4), N(5)],
            [N(5), N(4, 1), N(3, 1), N(4, 1), N(5)],
        ),
    ],
)
def test_adjust_minor_alterations(given, expected):
    assert adjust_minor_alterations(given) == expected


def test_adjust_minor_alterations_leaves_input_untouched():
    given = [N(5), N(4), N(5)]
    adjust_minor_alterations(given)
    assert given == [N(5), N(4), N(5)]


@pytest.mark.parametrize(
    "notes, index, expected",
    [
        ([N(0), N(1), N(2)], 1, True),
        ([N(2), N(1), N(0)], 1, True),
        ([N(6, octave=3), N(0), N(1)], 1, True),
        ([N(1), N(0), N(6, octave=3)], 1, True),
        ([N(0), N(3), N(2)], 1, False),
        ([N(0), N(2), N(1)], 1, False),
        ([N(0), N(1), N(2)], 0, False),
        ([N(0), N(1), N(2)], 2, False),
        ([N(0)], 0, False),
        ([N(0), N(1)], 0, False),
        ([N(0, 1), N(1), N(2)], 1, True),
        ([N(3, 1), N(4, 1), N(5, 1)], 1, True),
        ([N(0), N(1, -1), N(2)], 1, True),
    ],
)
def test_is_note_surrounded_by_linear_motion(notes, index, expected):
    assert is_note_surrounded_by_linear_motion(notes, index) is expected