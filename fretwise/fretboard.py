"""Fretboard positions and the note search primitive.

Pattern generation and the highlight queries all reduce to one question:
starting at some fret, where does a pitch class next occur on a string?
``find_next_fret`` answers it, and everything else composes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generator, List, Optional

from fretwise import constants
from fretwise.pitch import NoteName, note_at


@dataclass(frozen=True)
class StringPos:
    """A position on the fretboard as a string and fret combination.

    Strings are indexed low to high, so index 0 is the low E string in
    standard tuning.
    """

    str_index: int
    """The string number (0-based index into the tuning, low to high)."""
    fret: int
    """The fret number (0 is the open string)."""


@dataclass(frozen=True)
class StringBounds:
    """Defines a rectangular region of the fretboard.

    Both corners are inclusive.
    """

    low: StringPos
    """The minimum string position (lowest string, lowest fret)."""
    high: StringPos
    """The maximum string position (highest string, highest fret)."""

    def __iter__(self) -> Generator[StringPos, None, None]:
        """Iterate over all string positions within the bounds.

        Yields:
            StringPos instances string by string, frets ascending.
        """
        for str_index in range(self.low.str_index, self.high.str_index + 1):
            for fret in range(self.low.fret, self.high.fret + 1):
                yield StringPos(str_index=str_index, fret=fret)

    def __contains__(self, cand: StringPos) -> bool:
        return (
            cand.str_index >= self.low.str_index
            and cand.str_index <= self.high.str_index
            and cand.fret >= self.low.fret
            and cand.fret <= self.high.fret
        )


def note_at_pos(tuning: List[NoteName], str_pos: StringPos) -> Optional[NoteName]:
    """Get the pitch class at a position, or None if the string does not exist."""
    if str_pos.str_index < 0 or str_pos.str_index >= len(tuning):
        return None
    return note_at(tuning[str_pos.str_index], str_pos.fret)


def find_next_fret(
    tuning: List[NoteName],
    str_index: int,
    note: NoteName,
    min_fret: int,
    max_fret: int = constants.MAX_FRET,
) -> int:
    """Search forward along a string for a pitch class.

    Args:
        tuning: Open string pitch classes, low to high.
        str_index: The string to search.
        note: The pitch class to find.
        min_fret: First fret to consider (clamped to 0).
        max_fret: Last fret to consider, inclusive.

    Returns:
        The first fret in ``[min_fret, max_fret]`` sounding ``note``, or
        ``constants.NOT_FOUND`` if there is none or the string does not exist.
    """
    if str_index < 0 or str_index >= len(tuning):
        return constants.NOT_FOUND
    open_note = tuning[str_index]
    for fret in range(max(min_fret, 0), max_fret + 1):
        if note_at(open_note, fret) == note:
            return fret
    return constants.NOT_FOUND


def find_lowest_fret(
    str_index: int,
    note: NoteName,
    min_fret: int = 1,
    tuning: Optional[List[NoteName]] = None,
) -> int:
    """Find the lowest fretted occurrence of a pitch class on a string.

    Open strings are skipped by default since patterns are anchored on
    fretted notes.
    """
    return find_next_fret(
        constants.STANDARD_TUNING if tuning is None else tuning,
        str_index,
        note,
        min_fret,
    )


def note_positions_on_string(
    note: NoteName, open_note: NoteName, max_fret: int
) -> List[int]:
    """List every fret from 0 to ``max_fret`` where a string sounds ``note``."""
    return [fret for fret in range(max_fret + 1) if note_at(open_note, fret) == note]
