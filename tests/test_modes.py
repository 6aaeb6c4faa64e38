import pytest

from cantusfirmus.modes import is_free_of_augmented_diminished
from cantusfirmus.note import Note


def N(step, octave=4, alteration=0):
    return Note(step=step, octave=octave, alteration=alteration)


@pytest.mark.parametrize(
    "notes, expected",
    [
        pytest.param([N(0), N(1), N(2), N(0, 5)], True, id="perfect-major-minor"),
        pytest.param([N(0), N(3, 4, 1)], False, id="augmented"),
        pytest.param([N(3), N(0, 5, -1)], False, id="diminished"),
        pytest.param([N(0)], True, id="single-note"),
        pytest.param([], True, id="empty"),
        pytest.param([N(0), N(1), N(3, 4, 1), N(0, 5)], False, id="mixed"),
        pytest.param([N(5), N(0, 5), N(3, 5)], True, id="minor-intervals"),
        pytest.param([N(0), N(4), N(0, 5)], True, id="perfect-intervals"),
        pytest.param([N(0), N(1), N(3)], True, id="valid-step-2"),
        pytest.param([N(0), N(1), N(3, 4, 1)], False, id="augmented-step-2"),
        pytest.param([N(3), N(4), N(0, 5, -1)], False, id="diminished-step-2"),
        pytest.param(
            [N(0), N(1), N(3), N(4), N(5)], True, id="valid-step-2-longer"
        ),
        pytest.param(
            [N(0), N(1), N(2), N(1), N(0)], True, id="valid-extremum"
        ),
        pytest.param(
            [N(0), N(1), N(3, 4, 1)], False, id="augmented-between-extrema"
        ),
        pytest.param(
            [N(3), N(2), N(0, 5, -1)], False, id="diminished-between-extrema"
        ),
        pytest.param(
            [N(0), N(1), N(2), N(3, 4, 1)],
            False,
            id="augmented-run-between-extrema",
        ),
        pytest.param(
            [N(0), N(1), N(2), N(1), N(0), N(4), N(3), N(2)],
            True,
            id="complex-valid",
        ),
        pytest.param(
            [N(0), N(1), N(3, 4, 1), N(2), N(0, 5, -1)],
            False,
            id="complex-invalid",
        ),
    ],
)
def test_is_free_of_augmented_diminished(notes, expected):
    assert is_free_of_augmented_diminished(notes) is expected


def test_tritone_inside_linear_motion_is_allowed_nearby_but_not_across_run():
    # F4 G4 A4 B4: the run F..B spans an augmented fourth.
    assert is_free_of_augmented_diminished([N(3), N(4), N(5), N(6)]) is False


def test_repeated_pitch_breaks_runs():
    # C4 D4 D4 F#4: no monotonic run reaches from C to F#,
    # but D4 -> F#4 is a major third and C4 -> D4 a major second.
    assert is_free_of_augmented_diminished([N(0), N(1), N(1), N(3, 4, 1)]) is True