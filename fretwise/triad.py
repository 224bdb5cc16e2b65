"""Triad construction from a root and a chord quality."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional

from fretwise.pitch import NoteName


@unique
class ChordQuality(Enum):
    """The four triad qualities."""

    Major = auto()
    Minor = auto()
    Diminished = auto()
    Augmented = auto()

    @property
    def intervals(self) -> List[int]:
        """Semitones above the root for root, third and fifth."""
        return _QUALITY_INTERVALS[self]

    @property
    def label(self) -> str:
        return self.name.lower()


_QUALITY_INTERVALS: Dict[ChordQuality, List[int]] = {
    ChordQuality.Major: [0, 4, 7],
    ChordQuality.Minor: [0, 3, 7],
    ChordQuality.Diminished: [0, 3, 6],
    ChordQuality.Augmented: [0, 4, 8],
}

# Semitones above the root to chord-tone label.
_INTERVAL_NAMES: Dict[int, str] = {
    0: "R",
    3: "♭3",
    4: "3",
    6: "♭5",
    7: "5",
    8: "♯5",
}


@dataclass(frozen=True)
class Triad:
    """A three-note chord: root, third and fifth."""

    root: NoteName
    quality: ChordQuality
    notes: List[NoteName]
    """Root, third and fifth pitch classes, in that order."""
    intervals: Dict[NoteName, str]
    """Chord-tone label of each note ("R", "3", "♭5", ...)."""


def build_triad(root: NoteName, quality: ChordQuality) -> Triad:
    """Build a triad on a root.

    Args:
        root: The root pitch class.
        quality: The chord quality.

    Returns:
        The triad with its three pitch classes and their labels.
    """
    notes: List[NoteName] = []
    intervals: Dict[NoteName, str] = {}
    for semitones in quality.intervals:
        note = root.add_steps(semitones)
        notes.append(note)
        intervals[note] = _INTERVAL_NAMES[semitones]
    return Triad(root=root, quality=quality, notes=notes, intervals=intervals)


def is_note_in_triad(note: NoteName, triad: Triad) -> bool:
    """Check if a pitch class is one of the triad's three notes."""
    return note in triad.intervals


def interval_name(note: NoteName, triad: Triad) -> Optional[str]:
    """Get a note's chord-tone label, or None if it is not in the triad."""
    return triad.intervals.get(note)
