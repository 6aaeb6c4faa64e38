# cantusfirmus

Generate every cantus firmus of a given length that obeys the rules of strict
contrapuntal style, realize the melodies in one of the seven diatonic modes,
and save them as a MusicXML score that a notation editor can open.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

```
cantusfirmus
```

The command is interactive. It asks for:

1. the length of the melody, from 8 to 16 whole notes;
2. the mode: `major`, `dorian`, `phrygian`, `lydian`, `mixolydian`, `minor`
   or `locrian`;
3. how many melodic leaps the melody should contain, from 0 up to the length
   minus 4.

Invalid answers are asked for again. The generator then searches every
interval sequence that returns to the tonic, ends with two steps and passes
the melodic and contour rules, realizes each one in the chosen mode starting
on the mode's tonic in octave 4, and drops melodies that contain forbidden
augmented or diminished intervals. It prints how long this took and how many
melodies were found.

Finally it asks how many melodies to keep. Asking for as many as were found,
or more, keeps all of them; asking for fewer picks a random selection. Each
melody becomes one measure of whole notes in a file written to the current
directory, named like
`cantus_length10_dorian_leaps3_20250621_120000.musicxml`.

`cantusfirmus --help` shows a short description. The command exits with
status 1 if input ends before all questions are answered or if the file
cannot be written.

## Library use

```python
from cantusfirmus.generator import generate_cantus
from cantusfirmus.melody import CantusFirmus, Mode
from cantusfirmus.modes import is_free_of_augmented_diminished
from cantusfirmus.musicxml import (
    convert_realizations_to_xml_notes,
    generate_and_save_musicxml,
)

sequences = generate_cantus(9, [3])          # 10-note melodies with 3 leaps
melodies = [CantusFirmus(seq).realize(Mode.DORIAN) for seq in sequences]
melodies = [m for m in melodies if is_free_of_augmented_diminished(m)]

generate_and_save_musicxml(
    convert_realizations_to_xml_notes(melodies), "dorian.musicxml"
)
```

The modules:

- `cantusfirmus.note`: the `Note` dataclass (`step` 0 = C to 6 = B,
  `octave`, `alteration`), the `Interval` integer type, `parse_note`
  (`"C4"`, `"C#4"`, `"db5"`; raises `ValueError` on bad input), `transpose`,
  `is_leap`, `interval_quality` (returns `"P"`, `"M"`, `"m"`, `"A"` or `"d"`)
  and `mod7`.
- `cantusfirmus.melody`: the `Mode` enum, `CantusFirmus` with its `realize`
  method (accepts a `Mode` or a name such as `"Dorian"`; an unknown name
  raises `ValueError`; the minor mode gets its leading-tone sharps via
  `adjust_minor_alterations`), and `is_note_surrounded_by_linear_motion`.
- `cantusfirmus.modes`: `is_free_of_augmented_diminished`, the check applied
  to realized melodies.
- `cantusfirmus.melodic_rules` and `cantusfirmus.contour_rules`: the
  individual rules, plain functions that take a list of intervals and return
  `True` when the rule holds. Combine them with
  `cantusfirmus.melodic_rules.all_rules`.
- `cantusfirmus.generator`: `generate_cantus(n, allowed_leaps)`, which
  returns every valid sequence of `n` intervals whose leap count is in
  `allowed_leaps`, or an empty list for unusable arguments.
- `cantusfirmus.musicxml`: `to_musicxml` renders note sequences as a MusicXML
  string (raises `ValueError` for no sequences or sequences of different
  lengths), `generate_and_save_musicxml` writes it to a file, and
  `convert_realizations_to_xml_notes` copies realized melodies for export.
- `cantusfirmus.sampling`: `select_random_items`, reservoir sampling used
  for the random selection.

Intervals are diatonic step counts: `1` is a second up, `-2` a third down,
`4` a fifth up, and so on.

## What it does not do

The package only writes MusicXML; it does not read scores, play or render
audio, or draw notation. The command takes its parameters only from the
interactive prompts.

## Tests

```
pip install .[test]
pytest
```