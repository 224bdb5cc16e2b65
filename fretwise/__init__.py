from fretwise.keys import KeyInfo, KeyType, get_key_info, major_key_info, minor_key_info
from fretwise.patterns import CagedShape, PatternSystem, ScalePattern
from fretwise.pitch import NoteName, note_at, parse_note, spell
from fretwise.scale import Scale, ScaleType, build_scale
from fretwise.triad import ChordQuality, Triad, build_triad

__all__ = [
    "CagedShape",
    "ChordQuality",
    "KeyInfo",
    "KeyType",
    "NoteName",
    "PatternSystem",
    "Scale",
    "ScalePattern",
    "ScaleType",
    "Triad",
    "build_scale",
    "build_triad",
    "get_key_info",
    "major_key_info",
    "minor_key_info",
    "note_at",
    "parse_note",
    "spell",
]
