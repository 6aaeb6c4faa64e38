"""Interactive command that generates cantus firmi and saves them as MusicXML."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Sequence
from datetime import datetime

from cantusfirmus.generator import generate_cantus
from cantusfirmus.melody import CantusFirmus, Mode
from cantusfirmus.modes import is_free_of_augmented_diminished
from cantusfirmus.musicxml import (
    convert_realizations_to_xml_notes,
    generate_and_save_musicxml,
)
from cantusfirmus.note import Note
from cantusfirmus.sampling import select_random_items

MODE_NAMES = ("major", "dorian", "phrygian", "lydian", "mixolydian", "minor", "locrian")
_INTEGER = re.compile(r"[+-]?\d+")


def _ask_integer(prompt: str, low: int, high: int) -> int:
    while True:
        answer = input(prompt).strip()
        if _INTEGER.fullmatch(answer) and low <= int(answer) <= high:
            return int(answer)
        print(f"Please enter a number between {low} and {high}")


def _ask_mode() -> str:
    prompt = f"Enter mode ({', '.join(MODE_NAMES)}): "
    while True:
        answer = input(prompt).strip().lower()
        if answer in MODE_NAMES:
            return answer
        print("Invalid mode. Please choose from the available options.")


def _realize_valid(sequences: Sequence[Sequence[int]], mode: str) -> list[list[Note]]:
    chosen = Mode.from_name(mode.title())
    realizations = (CantusFirmus(sequence).realize(chosen) for sequence in sequences)
    return [notes for notes in realizations if is_free_of_augmented_diminished(notes)]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the melody parameters, generate cantus firmi and save them."""
    parser = argparse.ArgumentParser(
        prog="cantusfirmus",
        description="Generate cantus firmi in strict style and save them as MusicXML.",
    )
    parser.parse_args(argv)

    print("=== Cantus Firmus Generator ===")
    print("This program generates all possible cantus firmi in whole notes")
    print("that satisfy the rules of strict style and saves them to a MusicXML file.")
    print()

    try:
        return _run()
    except EOFError:
        print("\nInput ended.", file=sys.stderr)
        return 1


def _run() -> int:
    length = _ask_integer("Enter desired length (8-16 notes): ", 8, 16)
    mode = _ask_mode()
    leaps = _ask_integer(
        f"Enter desired number of leaps in the cantus firmus (0-{length - 4}): ",
        0,
        length - 4,
    )

    print("\nGenerating... Please wait...")
    started = time.perf_counter()

    sequences = generate_cantus(length - 1, [leaps])
    if not sequences:
        print("Generation failed: no sequences could be generated.")
        return 0

    valid = _realize_valid(sequences, mode)

    elapsed = time.perf_counter() - started
    print(f"\nGeneration completed in {elapsed:.3f}s")
    print(f"Found {len(valid)} valid cantus firmi")

    if not valid:
        print("No valid cantus firmi were generated.")
        return 0

    total = len(valid)
    save_count = _ask_integer(
        f"How many cantus firmi to save? (1-{total}, selection will be random "
        "if less than total): ",
        1,
        total * 2,
    )

    if save_count >= total:
        to_save = valid
        print(f"Saving all {total} cantus firmi...")
    else:
        to_save = select_random_items(valid, save_count)
        print(f"Randomly selecting {save_count} out of {total} cantus firmi to save...")

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"cantus_length{length}_{mode.lower()}_leaps{leaps}_{stamp}.musicxml"

    try:
        generate_and_save_musicxml(convert_realizations_to_xml_notes(to_save), filename)
    except (OSError, ValueError) as error:
        print(f"Error saving file: {error}", file=sys.stderr)
        return 1

    print(f"\nSuccessfully saved {len(to_save)} cantus firmi to {filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())