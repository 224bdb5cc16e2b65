"""Pitch classes and their spellings.

Every note in fretwise is one of twelve octave-less pitch classes. They are
named with sharps internally; flat spellings only appear at display time or
in the tabulated key and scale spellings.
"""

from __future__ import annotations

import logging
from enum import Enum, unique
from typing import Dict, Optional

from fretwise.base import ParseError


@unique
class NoteName(Enum):
    """Enumeration of the twelve chromatic pitch classes.

    Values correspond to semitone offsets from C within an octave.
    Uses sharp notation for accidentals (C#, D#, F#, G#, A#).
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    @property
    def sharp(self) -> str:
        """The sharp spelling of this pitch class (e.g. "C#")."""
        return _SHARP_NAMES[self]

    @property
    def flat(self) -> str:
        """The flat spelling of this pitch class (e.g. "Db")."""
        return _FLAT_NAMES[self]

    def add_steps(self, steps: int) -> NoteName:
        """Add semitone steps to this note name.

        Args:
            steps: Number of semitones to add (can be negative).

        Returns:
            The resulting note name after adding the steps.
        """
        return NOTE_LOOKUP[(self.value + steps) % MAX_NOTES]

    def __str__(self) -> str:
        return self.sharp


MAX_NOTES = 12
"""Number of distinct note names in the chromatic scale."""

ALL_NOTES = list(NoteName)
"""The twelve pitch classes in chromatic order starting from C."""

_SHARP_NAMES: Dict[NoteName, str] = {n: n.name.replace("s", "#") for n in NoteName}

_FLAT_NAMES: Dict[NoteName, str] = {
    NoteName.C: "C",
    NoteName.Cs: "Db",
    NoteName.D: "D",
    NoteName.Ds: "Eb",
    NoteName.E: "E",
    NoteName.F: "F",
    NoteName.Fs: "Gb",
    NoteName.G: "G",
    NoteName.Gs: "Ab",
    NoteName.A: "A",
    NoteName.As: "Bb",
    NoteName.B: "B",
}

LETTER_VALUES: Dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}
"""Semitone offset of each natural letter name from C."""


def _build_note_lookup() -> Dict[int, NoteName]:
    d: Dict[int, NoteName] = {}
    for n in NoteName:
        d[n.value] = n
    assert len(d) == MAX_NOTES
    return d


NOTE_LOOKUP = _build_note_lookup()
"""Lookup table from semitone offset (0-11) to NoteName."""

SHARP_LOOKUP: Dict[str, NoteName] = {n.sharp: n for n in NoteName}
"""Lookup table from canonical sharp spelling to NoteName."""


def note_at(open_note: NoteName, fret: int) -> NoteName:
    """Get the pitch class sounded at a fret on a string.

    Args:
        open_note: The pitch class of the open string.
        fret: The fret number (0 is the open string).

    Returns:
        The pitch class ``(open_note + fret) mod 12``.
    """
    return open_note.add_steps(fret)


def spell(note: NoteName, use_flats: bool) -> str:
    """Spell a pitch class with sharps or with flats."""
    return note.flat if use_flats else note.sharp


def note_from_sharp(name: str) -> Optional[NoteName]:
    """Look up a pitch class by its exact canonical sharp spelling."""
    return SHARP_LOOKUP.get(name)


def parse_note(name: str) -> Optional[NoteName]:
    """Resolve any spelled note name to its pitch class.

    Accepts naturals, any run of sharps or flats (ASCII or unicode) and
    double sharps, so key-appropriate spellings such as "E#", "Cb" or
    "Bbb" resolve to the pitch class they sound.

    Args:
        name: The spelled note name.

    Returns:
        The pitch class, or None if the name is not a note name.
    """
    # Imported here since the parser module depends on this one.
    from fretwise.parser import parse_spelled

    try:
        spelled = parse_spelled(name)
    except ParseError:
        logging.debug("Unrecognized note name: %r", name)
        return None
    return spelled.pitch_class
