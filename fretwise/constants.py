"""Instrument constants and enum helpers for fretwise."""

from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar

from fretwise.pitch import NoteName

E = TypeVar("E", bound=Enum)
"""Type variable for enum types."""


def make_enum_name_lookup(enum_type: Type[E]) -> Dict[str, E]:
    """Create a case-insensitive lookup dictionary from enum names to instances.

    Hyphens and underscores in the key are ignored, so "melodic-minor",
    "melodic_minor" and "MelodicMinor" all find the same member.

    Args:
        enum_type: The enum class to create a lookup for.

    Returns:
        A dictionary mapping normalized names to enum instances.
    """
    lookup: Dict[str, E] = {}
    for name, enum_val in enum_type.__members__.items():
        lookup[normalize_enum_name(name)] = enum_val
    return lookup


def normalize_enum_name(name: str) -> str:
    """Lower-case a name and drop hyphens, underscores and spaces."""
    return name.replace("-", "").replace("_", "").replace(" ", "").lower()


def find_enum(lookup: Dict[str, E], name: str) -> Optional[E]:
    """Find an enum member in a lookup built by make_enum_name_lookup."""
    return lookup.get(normalize_enum_name(name))


NUM_STRINGS = 6
"""Number of strings on the instrument."""

MAX_FRET = 24
"""Highest fret considered by any position search."""

NOT_FOUND = -1
"""Sentinel fret returned when a search finds no position."""

STANDARD_TUNING: List[NoteName] = [
    NoteName.E,
    NoteName.A,
    NoteName.D,
    NoteName.G,
    NoteName.B,
    NoteName.E,
]
"""Open string pitch classes of standard guitar tuning, low to high."""

FRET_COUNT_OPTIONS: List[int] = [12, 15, 20, 22, 24]
"""Fretboard lengths a view may display."""

DEFAULT_NUM_FRETS = 12
"""Default number of frets displayed."""
