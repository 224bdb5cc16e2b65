"""Major and melodic minor scale construction.

Pitch classes come from stepping through a whole/half step pattern. Display
names come from a hand-spelled table instead, since the key decides whether
a pitch class is written e.g. "E#" or "F".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional

from fretwise.pitch import NoteName, parse_note


@unique
class ScaleType(Enum):
    """The heptatonic scale types fretwise can build."""

    Major = auto()
    MelodicMinor = auto()

    @property
    def steps(self) -> List[int]:
        """Semitones between successive degrees, wrapping back to the tonic."""
        return _STEP_PATTERNS[self]

    @property
    def degree_labels(self) -> List[str]:
        """Interval label of each degree, in scale order."""
        return _DEGREE_LABELS[self]

    @property
    def label(self) -> str:
        if self == ScaleType.MelodicMinor:
            return "melodic minor"
        return self.name.lower()


_STEP_PATTERNS: Dict[ScaleType, List[int]] = {
    ScaleType.Major: [2, 2, 1, 2, 2, 2, 1],
    ScaleType.MelodicMinor: [2, 1, 2, 2, 2, 2, 1],
}

_DEGREE_LABELS: Dict[ScaleType, List[str]] = {
    ScaleType.Major: ["1", "2", "3", "4", "5", "6", "7"],
    ScaleType.MelodicMinor: ["1", "2", "♭3", "4", "5", "6", "7"],
}

SCALE_KEYS: List[str] = [
    "C", "G", "D", "A", "E", "B", "F#", "F", "Bb", "Eb", "Ab", "Db", "Gb"
]  # fmt: skip
"""Tonics offered for scale building, sharp keys then flat keys."""

# Spellings are literal: melodic minor on Gb keeps its double flat.
_SCALE_SPELLINGS: Dict[ScaleType, Dict[str, List[str]]] = {
    ScaleType.Major: {
        "C": ["C", "D", "E", "F", "G", "A", "B"],
        "G": ["G", "A", "B", "C", "D", "E", "F#"],
        "D": ["D", "E", "F#", "G", "A", "B", "C#"],
        "A": ["A", "B", "C#", "D", "E", "F#", "G#"],
        "E": ["E", "F#", "G#", "A", "B", "C#", "D#"],
        "B": ["B", "C#", "D#", "E", "F#", "G#", "A#"],
        "F#": ["F#", "G#", "A#", "B", "C#", "D#", "E#"],
        "F": ["F", "G", "A", "Bb", "C", "D", "E"],
        "Bb": ["Bb", "C", "D", "Eb", "F", "G", "A"],
        "Eb": ["Eb", "F", "G", "Ab", "Bb", "C", "D"],
        "Ab": ["Ab", "Bb", "C", "Db", "Eb", "F", "G"],
        "Db": ["Db", "Eb", "F", "Gb", "Ab", "Bb", "C"],
        "Gb": ["Gb", "Ab", "Bb", "Cb", "Db", "Eb", "F"],
    },
    ScaleType.MelodicMinor: {
        "C": ["C", "D", "Eb", "F", "G", "A", "B"],
        "G": ["G", "A", "Bb", "C", "D", "E", "F#"],
        "D": ["D", "E", "F", "G", "A", "B", "C#"],
        "A": ["A", "B", "C", "D", "E", "F#", "G#"],
        "E": ["E", "F#", "G", "A", "B", "C#", "D#"],
        "B": ["B", "C#", "D", "E", "F#", "G#", "A#"],
        "F#": ["F#", "G#", "A", "B", "C#", "D#", "E#"],
        "F": ["F", "G", "Ab", "Bb", "C", "D", "E"],
        "Bb": ["Bb", "C", "Db", "Eb", "F", "G", "A"],
        "Eb": ["Eb", "F", "Gb", "Ab", "Bb", "C", "D"],
        "Ab": ["Ab", "Bb", "Cb", "Db", "Eb", "F", "G"],
        "Db": ["Db", "Eb", "Fb", "Gb", "Ab", "Bb", "C"],
        "Gb": ["Gb", "Ab", "Bbb", "Cb", "Db", "Eb", "F"],
    },
}


@dataclass(frozen=True)
class Scale:
    """A scale realized on a tonic.

    The three sequences are parallel: ``notes[i]`` is spelled
    ``display_notes[i]`` and labelled ``intervals[notes[i]]``.
    """

    key: str
    scale_type: ScaleType
    notes: List[NoteName]
    display_notes: List[str]
    intervals: Dict[NoteName, str]

    @property
    def root(self) -> NoteName:
        return self.notes[0]

    def __contains__(self, note: NoteName) -> bool:
        return note in self.intervals


def scale_pitch_classes(root: NoteName, scale_type: ScaleType) -> List[NoteName]:
    """Step from a root through a scale's pattern to get its seven pitch classes."""
    notes = [root]
    current = root
    for step in scale_type.steps[:-1]:
        current = current.add_steps(step)
        notes.append(current)
    return notes


def build_scale(key: str, scale_type: ScaleType) -> Optional[Scale]:
    """Build a scale on one of the tonics in SCALE_KEYS.

    Args:
        key: The tonic name, e.g. "Bb".
        scale_type: The scale type to build.

    Returns:
        The scale, or None if the tonic has no spelling table entry.
    """
    display_notes = _SCALE_SPELLINGS[scale_type].get(key)
    root = parse_note(key)
    if display_notes is None or root is None:
        logging.debug("No %s scale on %r", scale_type.label, key)
        return None
    notes = scale_pitch_classes(root, scale_type)
    intervals = dict(zip(notes, scale_type.degree_labels))
    assert len(intervals) == len(notes)
    return Scale(
        key=key,
        scale_type=scale_type,
        notes=notes,
        display_notes=list(display_notes),
        intervals=intervals,
    )


def scale_formula(scale_type: ScaleType) -> str:
    """Describe a scale's step pattern, e.g. "W - W - H - W - W - W - H"."""
    return " - ".join("W" if step == 2 else "H" for step in scale_type.steps)


def scale_degrees(scale_type: ScaleType) -> str:
    """Join the degree labels of a scale type, e.g. "1 - 2 - ♭3 - 4 - 5 - 6 - 7"."""
    return " - ".join(scale_type.degree_labels)


def note_display_map(scale: Scale) -> Dict[NoteName, str]:
    """Map each scale pitch class to its key-appropriate spelling."""
    return dict(zip(scale.notes, scale.display_notes))
