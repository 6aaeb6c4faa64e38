"""Writing note sequences as a MusicXML score."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from xml.sax.saxutils import escape

from cantusfirmus.note import NOTE_NAMES, Note

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
_INDENT = "  "
_PART_ID = "P1"
_PART_NAME = "Cantus Firmus"
_TEMPO = 300


@dataclass
class _Element:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: list[_Element] = field(default_factory=list)


def _leaf(tag: str, text: object) -> _Element:
    return _Element(tag, text=str(text))


def _escape_attribute(value: str) -> str:
    return escape(value, {'"': "&#34;"})


def _render(element: _Element, depth: int = 0) -> Iterator[str]:
    pad = _INDENT * depth
    attributes = "".join(
        f' {name}="{_escape_attribute(value)}"'
        for name, value in element.attributes.items()
    )
    opening = f"{pad}<{element.tag}{attributes}>"
    if element.children:
        yield opening
        for child in element.children:
            yield from _render(child, depth + 1)
        yield f"{pad}</{element.tag}>"
    else:
        yield f"{opening}{escape(element.text)}</{element.tag}>"


def _note_element(note: Note) -> _Element:
    pitch = [_leaf("step", NOTE_NAMES[note.step])]
    if note.alteration != 0:
        pitch.append(_leaf("alter", note.alteration))
    pitch.append(_leaf("octave", note.octave))
    return _Element(
        "note",
        children=[
            _Element("pitch", children=pitch),
            _leaf("duration", 4),
            _leaf("type", "whole"),
        ],
    )


def _opening_elements(beats: int) -> list[_Element]:
    attributes = _Element(
        "attributes",
        children=[
            _leaf("divisions", 4),
            _Element("key", children=[_leaf("fifths", 0)]),
            _Element("time", children=[_leaf("beats", beats), _leaf("beat-type", 1)]),
            _Element("clef", children=[_leaf("sign", "G"), _leaf("line", 2)]),
        ],
    )
    direction = _Element(
        "direction",
        {"placement": "above"},
        children=[
            _Element(
                "direction-type",
                children=[
                    _Element(
                        "metronome",
                        children=[
                            _leaf("beat-unit", "quarter"),
                            _leaf("per-minute", _TEMPO),
                        ],
                    )
                ],
            ),
            _Element("sound", {"tempo": str(_TEMPO)}),
        ],
    )
    return [attributes, direction]


def to_musicxml(sequences: Iterable[Sequence[Note]]) -> str:
    """Render note sequences as a MusicXML document, one measure per sequence.

    Raises ValueError when there are no sequences or their lengths differ.
    """
    sequences = [list(sequence) for sequence in sequences]
    if not sequences:
        raise ValueError("cannot create MusicXML from empty sequences")

    expected = len(sequences[0])
    for number, sequence in enumerate(sequences, start=1):
        if len(sequence) != expected:
            raise ValueError(
                f"sequence {number} has length {len(sequence)}, expected {expected}"
            )

    measures = []
    for number, sequence in enumerate(sequences, start=1):
        children = _opening_elements(len(sequence)) if number == 1 else []
        children.extend(_note_element(note) for note in sequence)
        children.append(
            _Element(
                "barline",
                {"location": "right"},
                children=[_leaf("bar-style", "light-heavy")],
            )
        )
        measures.append(_Element("measure", {"number": str(number)}, children=children))

    score = _Element(
        "score-partwise",
        children=[
            _Element(
                "part-list",
                children=[
                    _Element(
                        "score-part",
                        {"id": _PART_ID},
                        children=[_leaf("part-name", _PART_NAME)],
                    )
                ],
            ),
            _Element("part", {"id": _PART_ID}, children=measures),
        ],
    )
    return XML_HEADER + "\n".join(_render(score))


def convert_realizations_to_xml_notes(
    realizations: Iterable[Sequence[Note]],
) -> list[list[Note]]:
    """Copy realized melodies into plain lists of notes for export."""
    return [
        [Note(note.step, note.octave, note.alteration) for note in realization]
        for realization in realizations
    ]


def generate_and_save_musicxml(
    sequences: Iterable[Sequence[Note]], filename: str | Path
) -> None:
    """Write the MusicXML score for the sequences to ``filename``.

    Raises ValueError for unusable sequences and OSError when writing fails.
    """
    document = to_musicxml(sequences)
    Path(filename).write_text(document, encoding="utf-8")