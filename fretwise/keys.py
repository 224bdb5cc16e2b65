"""Key signature tables for the major and minor keys.

All thirteen major keys are tabulated by hand, following the circle of
fifths from C up to six sharps (F#) and down to six flats (Gb). Minor keys
are derived from their relative majors. Both tables are built once at import
and never mutated.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional, Tuple

from fretwise.base import MatchException, ParseError
from fretwise.parser import parse_spelled
from fretwise.pitch import NoteName


@unique
class KeyType(Enum):
    """Whether a key is major or minor."""

    Major = auto()
    Minor = auto()

    @property
    def label(self) -> str:
        """Lower-case name, as used in display and quiz answers."""
        return self.name.lower()


SHARP_ORDER = ["F", "C", "G", "D", "A", "E", "B"]
"""Order in which sharps are added to key signatures."""

FLAT_ORDER = ["B", "E", "A", "D", "G", "C", "F"]
"""Order in which flats are added to key signatures."""

NATURAL_LETTERS = ["A", "B", "C", "D", "E", "F", "G"]


@dataclass(frozen=True)
class KeyInfo:
    """A major or minor key with its signature and diatonic spelling."""

    key: str
    """Display name of the tonic, as tabulated."""
    key_type: KeyType
    sharps_flats: int
    """Signed accidental count: positive for sharps, negative for flats."""
    signature: List[str]
    """Accidentals in signature order, e.g. ["F#", "C#"]."""
    notes: List[str]
    """The seven diatonic notes, correctly spelled, starting on the tonic."""
    relative: str
    """Relative minor tonic for a major key, relative major tonic for a minor key."""
    enharmonic: Optional[str] = None
    """Alternate spelling of the same tonic with its own table entry, if any."""

    @property
    def tonic(self) -> NoteName:
        return parse_spelled(self.key).pitch_class

    @property
    def relative_type(self) -> KeyType:
        if self.key_type == KeyType.Major:
            return KeyType.Minor
        elif self.key_type == KeyType.Minor:
            return KeyType.Major
        else:
            raise MatchException(self.key_type)


def signature_for(sharps_flats: int) -> List[str]:
    """Build the ordered accidental list for a signed accidental count."""
    if sharps_flats >= 0:
        return [letter + "#" for letter in SHARP_ORDER[:sharps_flats]]
    else:
        return [letter + "b" for letter in FLAT_ORDER[:-sharps_flats]]


# (tonic, signed accidental count, diatonic spelling, relative minor)
_MAJOR_TABLE: List[Tuple[str, int, List[str], str]] = [
    ("C", 0, ["C", "D", "E", "F", "G", "A", "B"], "A"),
    ("G", 1, ["G", "A", "B", "C", "D", "E", "F#"], "E"),
    ("D", 2, ["D", "E", "F#", "G", "A", "B", "C#"], "B"),
    ("A", 3, ["A", "B", "C#", "D", "E", "F#", "G#"], "F#"),
    ("E", 4, ["E", "F#", "G#", "A", "B", "C#", "D#"], "C#"),
    ("B", 5, ["B", "C#", "D#", "E", "F#", "G#", "A#"], "G#"),
    ("F#", 6, ["F#", "G#", "A#", "B", "C#", "D#", "E#"], "D#"),
    ("F", -1, ["F", "G", "A", "Bb", "C", "D", "E"], "D"),
    ("Bb", -2, ["Bb", "C", "D", "Eb", "F", "G", "A"], "G"),
    ("Eb", -3, ["Eb", "F", "G", "Ab", "Bb", "C", "D"], "C"),
    ("Ab", -4, ["Ab", "Bb", "C", "Db", "Eb", "F", "G"], "F"),
    ("Db", -5, ["Db", "Eb", "F", "Gb", "Ab", "Bb", "C"], "Bb"),
    ("Gb", -6, ["Gb", "Ab", "Bb", "Cb", "Db", "Eb", "F"], "Eb"),
]

_ENHARMONIC_PAIRS: Dict[KeyType, Dict[str, str]] = {
    KeyType.Major: {"F#": "Gb", "Gb": "F#"},
    KeyType.Minor: {"D#": "Eb", "Eb": "D#"},
}


def minor_scale_notes(key: str, sharps_flats: int) -> List[str]:
    """Spell the natural minor scale of a tonic from its key signature.

    Walks seven letter names from the tonic's letter and applies the first
    ``abs(sharps_flats)`` accidentals of the sharp or flat order.

    Args:
        key: The minor tonic, e.g. "F#".
        sharps_flats: The signed accidental count of the key.

    Returns:
        The seven diatonic notes starting on the tonic.
    """
    start = NATURAL_LETTERS.index(key[0])
    if sharps_flats > 0:
        altered = SHARP_ORDER[:sharps_flats]
        symbol = "#"
    else:
        altered = FLAT_ORDER[:-sharps_flats]
        symbol = "b"
    notes: List[str] = []
    for i in range(7):
        letter = NATURAL_LETTERS[(start + i) % 7]
        notes.append(letter + symbol if letter in altered else letter)
    return notes


def _build_major_keys() -> Dict[str, KeyInfo]:
    d: Dict[str, KeyInfo] = {}
    for key, sharps_flats, notes, relative in _MAJOR_TABLE:
        d[key] = KeyInfo(
            key=key,
            key_type=KeyType.Major,
            sharps_flats=sharps_flats,
            signature=signature_for(sharps_flats),
            notes=notes,
            relative=relative,
            enharmonic=_ENHARMONIC_PAIRS[KeyType.Major].get(key),
        )
    return d


def _build_minor_keys(major_keys: Dict[str, KeyInfo]) -> Dict[str, KeyInfo]:
    d: Dict[str, KeyInfo] = {}
    for major in major_keys.values():
        minor = major.relative
        assert minor not in d
        d[minor] = KeyInfo(
            key=minor,
            key_type=KeyType.Minor,
            sharps_flats=major.sharps_flats,
            signature=major.signature,
            notes=minor_scale_notes(minor, major.sharps_flats),
            relative=major.key,
            enharmonic=_ENHARMONIC_PAIRS[KeyType.Minor].get(minor),
        )
    return d


MAJOR_KEYS: Dict[str, KeyInfo] = _build_major_keys()
"""The 13 major keys by tonic name."""

MINOR_KEYS: Dict[str, KeyInfo] = _build_minor_keys(MAJOR_KEYS)
"""The relative minor of every major key by tonic name."""

CIRCLE_OF_FIFTHS: List[str] = [
    "C", "G", "D", "A", "E", "B", "F#", "Db", "Ab", "Eb", "Bb", "F"
]  # fmt: skip
"""Major tonics clockwise around the circle of fifths starting from C."""

MINOR_CIRCLE_OF_FIFTHS: List[str] = [
    "A", "E", "B", "F#", "C#", "G#", "D#", "Bb", "F", "C", "G", "D"
]  # fmt: skip
"""Relative minor tonics, parallel to CIRCLE_OF_FIFTHS."""

_KEY_POOLS: Dict[KeyType, List[str]] = {
    KeyType.Major: list(MAJOR_KEYS),
    KeyType.Minor: list(MINOR_CIRCLE_OF_FIFTHS),
}

_KEY_TABLES: Dict[KeyType, Dict[str, KeyInfo]] = {
    KeyType.Major: MAJOR_KEYS,
    KeyType.Minor: MINOR_KEYS,
}


def get_key_info(name: str, key_type: KeyType) -> Optional[KeyInfo]:
    """Look up a key by tonic name.

    Tabulated names match directly, as do the same names with a lower-case
    letter or unicode accidentals ("bb", "F♯"). Other spellings of a
    tabulated pitch class ("C#" major, "A#" minor) are not keys in the
    table; the F#/Gb and D#/Eb pairs are both tabulated.

    Args:
        name: The tonic name as the caller spells it.
        key_type: Major or minor.

    Returns:
        The key info, or None if the name is not a tabulated tonic.
    """
    table = _KEY_TABLES[key_type]
    if name in table:
        return table[name]
    try:
        spelled = parse_spelled(name)
    except ParseError:
        logging.debug("No %s key named %r", key_type.label, name)
        return None
    canonical = spelled.ascii()
    if canonical in table:
        return table[canonical]
    logging.debug("No %s key named %r", key_type.label, name)
    return None


def major_key_info(name: str) -> Optional[KeyInfo]:
    """Look up a major key by tonic name, or None if it is not tabulated."""
    return get_key_info(name, KeyType.Major)


def minor_key_info(name: str) -> Optional[KeyInfo]:
    """Look up a minor key by tonic name, or None if it is not tabulated."""
    return get_key_info(name, KeyType.Minor)


def keys_of_type(key_type: KeyType) -> List[str]:
    """List the tonic names a quiz or selector offers for a key type.

    Minor keys list D# and not Eb, since the two share a pitch class.
    """
    return list(_KEY_POOLS[key_type])


def random_key(
    key_type: Optional[KeyType] = None, rng: Optional[random.Random] = None
) -> Tuple[str, KeyType]:
    """Pick a key uniformly at random.

    Args:
        key_type: Restrict the choice to major or minor keys. If None, the
            type is chosen first with even odds.
        rng: Source of randomness; a fresh one is used if not given.

    Returns:
        A (tonic name, key type) pair.
    """
    gen = rng if rng is not None else random.Random()
    if key_type is None:
        key_type = KeyType.Major if gen.random() < 0.5 else KeyType.Minor
    return gen.choice(_KEY_POOLS[key_type]), key_type


def format_key_signature(info: KeyInfo) -> str:
    """Describe a key signature, e.g. "No sharps or flats" or "3 flats"."""
    if info.sharps_flats == 0:
        return "No sharps or flats"
    count = abs(info.sharps_flats)
    kind = "sharp" if info.sharps_flats > 0 else "flat"
    plural = "s" if count > 1 else ""
    return f"{count} {kind}{plural}"
