"""Scale fingerings: three-notes-per-string and CAGED patterns.

Both systems tile a seven-note scale across the strings with the same greedy
strategy: anchor on the lowest string, then place each string's notes in
order, every note strictly above the previous one on that string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional

from fretwise import constants
from fretwise.base import MatchException
from fretwise.fretboard import find_lowest_fret, find_next_fret
from fretwise.pitch import NoteName
from fretwise.scale import Scale, ScaleType, build_scale

NUM_THREE_NPS_PATTERNS = 7

CAGED_WINDOW_BELOW = 2
"""How far below the anchor fret a CAGED shape may reach."""

CAGED_WINDOW_ABOVE = 7
"""How far above the anchor fret a CAGED shape may reach."""


@unique
class PatternSystem(Enum):
    """Which fingering system to generate."""

    ThreeNotesPerString = auto()
    Caged = auto()


@unique
class CagedShape(Enum):
    """The five CAGED shapes, named after the open chords they surround."""

    C = auto()
    A = auto()
    G = auto()
    E = auto()
    D = auto()

    @property
    def template(self) -> List[List[int]]:
        """Scale degrees (1-7) on each string, low string first."""
        return _CAGED_TEMPLATES[self]


# Shape offsets from the anchor stay within -1..+3 frets for a major scale.
_CAGED_TEMPLATES: Dict[CagedShape, List[List[int]]] = {
    CagedShape.C: [[3, 4, 5], [6, 7, 1], [2, 3, 4], [5, 6], [7, 1, 2], [3, 4, 5]],
    CagedShape.A: [[5, 6], [7, 1, 2], [3, 4, 5], [6, 7, 1], [2, 3, 4], [5, 6]],
    CagedShape.G: [[6, 7, 1], [2, 3, 4], [5, 6], [7, 1, 2], [3, 4, 5], [6, 7, 1]],
    CagedShape.E: [[7, 1, 2], [3, 4, 5], [6, 7, 1], [2, 3, 4], [5, 6], [7, 1, 2]],
    CagedShape.D: [[2, 3, 4], [5, 6], [7, 1, 2], [3, 4, 5], [6, 7, 1], [2, 3, 4]],
}


@dataclass(frozen=True)
class PatternNote:
    """One placed note of a pattern."""

    note: NoteName
    display_note: str
    """Key-appropriate spelling, e.g. "E#"."""
    interval: str
    """Scale degree label, e.g. "♭3"."""
    fret: int


@dataclass(frozen=True)
class ScalePattern:
    """A fingering of a scale across all strings.

    Exactly one of ``pattern_number`` and ``caged_shape`` is set.
    """

    strings: List[List[PatternNote]]
    """Placed notes per string, low string first, frets ascending."""
    start_fret: int
    """Lowest fret used by the pattern, or NOT_FOUND if nothing was placed."""
    pattern_number: Optional[int] = None
    caged_shape: Optional[CagedShape] = None

    @property
    def name(self) -> str:
        if self.caged_shape is not None:
            return f"{self.caged_shape.name} shape"
        else:
            return f"Pattern {self.pattern_number}"

    @property
    def note_count(self) -> int:
        return sum(len(notes) for notes in self.strings)

    def frets(self) -> List[int]:
        return [pn.fret for notes in self.strings for pn in notes]

    @property
    def end_fret(self) -> int:
        return max(self.frets(), default=constants.NOT_FOUND)


def _pattern_note(scale: Scale, degree: int, fret: int) -> PatternNote:
    note = scale.notes[degree]
    return PatternNote(
        note=note,
        display_note=scale.display_notes[degree],
        interval=scale.intervals[note],
        fret=fret,
    )


def _place_string(
    scale: Scale,
    tuning: List[NoteName],
    str_index: int,
    degrees: List[int],
    min_fret: int,
    max_fret: int = constants.MAX_FRET,
) -> List[PatternNote]:
    """Place 0-indexed scale degrees on one string in ascending fret order.

    Each note is searched from ``min_fret`` or one fret above the previous
    placed note, whichever is higher. Notes that cannot be placed within
    ``max_fret`` are left out.
    """
    placed: List[PatternNote] = []
    for degree in degrees:
        floor = min_fret if not placed else max(min_fret, placed[-1].fret + 1)
        fret = find_next_fret(tuning, str_index, scale.notes[degree], floor, max_fret)
        if fret == constants.NOT_FOUND:
            logging.debug(
                "No fret for degree %d on string %d from fret %d",
                degree + 1,
                str_index,
                floor,
            )
        else:
            placed.append(_pattern_note(scale, degree, fret))
    return placed


def _start_fret(strings: List[List[PatternNote]]) -> int:
    return min(
        (pn.fret for notes in strings for pn in notes), default=constants.NOT_FOUND
    )


def scale_three_nps_pattern(
    scale: Scale, pattern_number: int, tuning: Optional[List[NoteName]] = None
) -> ScalePattern:
    """Build a three-notes-per-string pattern for a scale.

    Pattern 1 starts on the scale's 4th degree on the lowest string, pattern
    2 on the 5th, and so on. Each string carries the next three degrees.

    Args:
        scale: The scale to finger.
        pattern_number: Which pattern (1-7).
        tuning: Open string pitch classes, low to high.

    Returns:
        The pattern. Notes that cannot be placed below the top fret are
        omitted rather than failing the whole pattern.
    """
    if pattern_number < 1 or pattern_number > NUM_THREE_NPS_PATTERNS:
        raise ValueError(f"Pattern number out of range: {pattern_number}")
    tuning = constants.STANDARD_TUNING if tuning is None else tuning
    start_degree = (pattern_number + 2) % 7
    anchor = find_lowest_fret(0, scale.notes[start_degree], tuning=tuning)
    # Later strings may start a little below the anchor to stay in position.
    later_floor = max(1, anchor - 2)
    strings: List[List[PatternNote]] = []
    for str_index in range(len(tuning)):
        string_start = (start_degree + 3 * str_index) % 7
        degrees = [(string_start + i) % 7 for i in range(3)]
        floor = anchor if str_index == 0 else later_floor
        strings.append(_place_string(scale, tuning, str_index, degrees, floor))
    return ScalePattern(
        strings=strings,
        start_fret=_start_fret(strings),
        pattern_number=pattern_number,
    )


def _caged_at_anchor(
    scale: Scale, shape: CagedShape, tuning: List[NoteName], anchor: int
) -> List[List[PatternNote]]:
    low = anchor - CAGED_WINDOW_BELOW
    high = min(anchor + CAGED_WINDOW_ABOVE, constants.MAX_FRET)
    strings: List[List[PatternNote]] = []
    for str_index, degrees in enumerate(shape.template[: len(tuning)]):
        zero_based = [d - 1 for d in degrees]
        strings.append(_place_string(scale, tuning, str_index, zero_based, low, high))
    return strings


def _caged_is_fretted(strings: List[List[PatternNote]], expected: int) -> bool:
    placed = [pn.fret for notes in strings for pn in notes]
    return len(placed) == expected and all(fret > 0 for fret in placed)


def scale_caged_pattern(
    scale: Scale, shape: CagedShape, tuning: Optional[List[NoteName]] = None
) -> ScalePattern:
    """Build a CAGED shape for a scale.

    The shape is anchored on the lowest fretted occurrence of its first
    degree on the lowest string. If the shape would then need an open
    string, or would fall off the low end of the neck, it is moved up an
    octave so every note is fretted.

    Args:
        scale: The scale to finger.
        shape: Which CAGED shape.
        tuning: Open string pitch classes, low to high.

    Returns:
        The pattern, which never uses fret 0.
    """
    tuning = constants.STANDARD_TUNING if tuning is None else tuning
    template = shape.template[: len(tuning)]
    expected = sum(len(degrees) for degrees in template)
    first_degree = template[0][0] - 1
    anchor = find_lowest_fret(0, scale.notes[first_degree], tuning=tuning)
    strings = _caged_at_anchor(scale, shape, tuning, anchor)
    if not _caged_is_fretted(strings, expected):
        logging.debug(
            "%s shape of %s at fret %d needs open strings, moving up an octave",
            shape.name,
            scale.key,
            anchor,
        )
        strings = _caged_at_anchor(scale, shape, tuning, anchor + 12)
        # Whatever could not be fretted an octave up is dropped.
        strings = [[pn for pn in notes if pn.fret > 0] for notes in strings]
    return ScalePattern(
        strings=strings,
        start_fret=_start_fret(strings),
        caged_shape=shape,
    )


def three_nps_pattern(
    key: str,
    scale_type: ScaleType,
    pattern_number: int,
    tuning: Optional[List[NoteName]] = None,
) -> Optional[ScalePattern]:
    """Build a three-notes-per-string pattern, or None for an unknown key."""
    scale = build_scale(key, scale_type)
    if scale is None:
        return None
    return scale_three_nps_pattern(scale, pattern_number, tuning)


def caged_pattern(
    key: str,
    scale_type: ScaleType,
    shape: CagedShape,
    tuning: Optional[List[NoteName]] = None,
) -> Optional[ScalePattern]:
    """Build a CAGED shape, or None for an unknown key."""
    scale = build_scale(key, scale_type)
    if scale is None:
        return None
    return scale_caged_pattern(scale, shape, tuning)


def all_three_nps_patterns(
    key: str, scale_type: ScaleType, tuning: Optional[List[NoteName]] = None
) -> List[ScalePattern]:
    """Build all seven three-notes-per-string patterns in neck order.

    Returns:
        The patterns sorted by start fret, or an empty list for an unknown key.
    """
    scale = build_scale(key, scale_type)
    if scale is None:
        return []
    patterns = [
        scale_three_nps_pattern(scale, number, tuning)
        for number in range(1, NUM_THREE_NPS_PATTERNS + 1)
    ]
    return sorted(patterns, key=lambda p: p.start_fret)


def all_caged_patterns(
    key: str, scale_type: ScaleType, tuning: Optional[List[NoteName]] = None
) -> List[ScalePattern]:
    """Build all five CAGED shapes in neck order."""
    scale = build_scale(key, scale_type)
    if scale is None:
        return []
    patterns = [scale_caged_pattern(scale, shape, tuning) for shape in CagedShape]
    return sorted(patterns, key=lambda p: p.start_fret)


def all_patterns(
    key: str,
    scale_type: ScaleType,
    system: PatternSystem,
    tuning: Optional[List[NoteName]] = None,
) -> List[ScalePattern]:
    """Build every pattern of one fingering system, sorted by start fret."""
    if system == PatternSystem.ThreeNotesPerString:
        return all_three_nps_patterns(key, scale_type, tuning)
    elif system == PatternSystem.Caged:
        return all_caged_patterns(key, scale_type, tuning)
    else:
        raise MatchException(system)
