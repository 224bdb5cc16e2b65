"""Queries deciding which fretboard positions a view should highlight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Dict, List, Optional, Set

from fretwise.fretboard import StringBounds, StringPos, note_at_pos
from fretwise.pitch import NoteName, note_at
from fretwise.scale import Scale


def should_highlight(
    scale: Scale,
    tuning: List[NoteName],
    selected_strings: Collection[int],
    min_fret: int,
    max_fret: int,
    str_index: int,
    fret: int,
) -> bool:
    """Check if a position holds a scale note within the selected region.

    Args:
        scale: The scale being shown.
        tuning: Open string pitch classes, low to high.
        selected_strings: Indices of the strings the user has enabled.
        min_fret: Lowest fret of the selected range, inclusive.
        max_fret: Highest fret of the selected range, inclusive.
        str_index: The string of the position to test.
        fret: The fret of the position to test.

    Returns:
        False if no strings are selected, the string is not selected or the
        fret is out of range; otherwise whether the position sounds a scale note.
    """
    if len(selected_strings) == 0:
        return False
    if str_index not in selected_strings:
        return False
    if fret < min_fret or fret > max_fret:
        return False
    note = note_at_pos(tuning, StringPos(str_index, fret))
    return note is not None and note in scale


def notes_in_view(
    scale: Scale,
    tuning: List[NoteName],
    selected_strings: Collection[int],
    min_fret: int,
    max_fret: int,
    total_frets: int,
) -> Set[NoteName]:
    """Collect the scale notes that appear anywhere in the selected region.

    The fret range is clamped to ``[0, total_frets]`` and string indices
    outside the tuning are ignored.

    Returns:
        The scale pitch classes present on the selected strings.
    """
    found: Set[NoteName] = set()
    low_fret = max(min_fret, 0)
    high_fret = min(max_fret, total_frets)
    for str_index in sorted(set(selected_strings)):
        if str_index < 0 or str_index >= len(tuning):
            continue
        bounds = StringBounds(
            low=StringPos(str_index, low_fret), high=StringPos(str_index, high_fret)
        )
        for str_pos in bounds:
            note = note_at(tuning[str_index], str_pos.fret)
            if note in scale:
                found.add(note)
    return found


@dataclass(frozen=True)
class HighlightInfo:
    """What a single fretboard cell shows."""

    highlighted: bool
    note: NoteName
    interval: Optional[str]
    """Degree or chord-tone label, if the view supplied labels for the note."""


def highlight_info(
    open_note: NoteName,
    fret: int,
    selected_notes: Collection[NoteName],
    intervals: Optional[Dict[NoteName, str]] = None,
) -> HighlightInfo:
    """Describe a fretboard cell for a set of selected notes.

    Args:
        open_note: The pitch class of the open string.
        fret: The fret of the cell.
        selected_notes: The notes the user has picked.
        intervals: Optional labels, e.g. from a Scale or Triad.

    Returns:
        The cell's note, whether it is highlighted, and its label if any.
    """
    note = note_at(open_note, fret)
    interval = intervals.get(note) if intervals is not None else None
    return HighlightInfo(
        highlighted=note in selected_notes, note=note, interval=interval
    )
