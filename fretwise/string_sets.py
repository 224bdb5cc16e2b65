"""String sets: groups of adjacent strings used to practice triad shapes.

String set labels use guitarist numbering, where string 1 is the highest
(thinnest) string. Positions use array indices, where 0 is the lowest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Set

from fretwise import constants
from fretwise.fretboard import StringPos, note_positions_on_string
from fretwise.pitch import NoteName
from fretwise.triad import Triad

ALL_STRINGS = "All"

STRING_SETS: List[str] = [ALL_STRINGS, "1-2-3", "2-3-4", "3-4-5", "4-5-6"]
"""String set labels offered for triad practice."""


@dataclass(frozen=True)
class ChordTone:
    """A triad note at a specific fretboard position."""

    note: NoteName
    interval: str
    pos: StringPos


def string_set_to_indices(
    label: str, num_strings: int = constants.NUM_STRINGS
) -> List[int]:
    """Convert a string set label to string indices.

    Args:
        label: "All" or hyphen-joined string numbers such as "1-2-3".
        num_strings: Number of strings on the instrument.

    Returns:
        String indices (0 = lowest string) in label order, so "1-2-3" gives
        [5, 4, 3]. A malformed label gives an empty list.
    """
    if label == ALL_STRINGS:
        return list(range(num_strings))
    indices: List[int] = []
    for part in label.split("-"):
        try:
            number = int(part)
        except ValueError:
            logging.debug("Malformed string set label: %r", label)
            return []
        indices.append(num_strings - number)
    return indices


def triad_positions(
    triad: Triad, label: str, tuning: List[NoteName], max_fret: int
) -> List[ChordTone]:
    """Find every position of the triad's notes on a string set.

    Frets run from 0 to ``max_fret``. String numbers that do not exist on
    the instrument are skipped.
    """
    positions: List[ChordTone] = []
    for str_index in string_set_to_indices(label, len(tuning)):
        if str_index < 0 or str_index >= len(tuning):
            continue
        for note in triad.notes:
            for fret in note_positions_on_string(note, tuning[str_index], max_fret):
                positions.append(
                    ChordTone(
                        note=note,
                        interval=triad.intervals[note],
                        pos=StringPos(str_index, fret),
                    )
                )
    return positions


def filter_triad_by_string_set(
    triad: Triad, label: str, tuning: List[NoteName], max_fret: int
) -> Set[NoteName]:
    """Get the triad notes playable on a string set.

    For "All" every triad note is returned. Otherwise a triad note that does
    not occur on the selected strings within the fret range is left out.
    """
    if label == ALL_STRINGS:
        return set(triad.notes)
    return {tone.note for tone in triad_positions(triad, label, tuning, max_fret)}
