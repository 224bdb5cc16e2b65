"""Configuration module for fretwise.

This module defines the settings a fretboard view passes to the theory
layer: the instrument tuning, the visible fret range, which strings are
enabled, and the key and scale being studied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from fretwise import constants
from fretwise.base import ConfigError
from fretwise.keys import KeyType
from fretwise.patterns import PatternSystem
from fretwise.pitch import NoteName
from fretwise.scale import ScaleType


@dataclass(frozen=True)
class Config:
    """Main configuration class containing all view settings."""

    tuning_name: str  # Name of the tuning (e.g., "Standard")
    tuning: List[NoteName]  # Open string pitch classes, low to high
    num_frets: int  # Frets drawn on the fretboard
    use_flats: bool  # Spell accidentals with flats instead of sharps
    min_fret: int  # Lowest fret of the highlighted range
    max_fret: int  # Highest fret of the highlighted range
    selected_strings: List[int]  # Enabled string indices, 0 = lowest string
    key: str  # Tonic of the key or scale being studied
    key_type: KeyType  # Major or minor key
    scale_type: ScaleType  # Scale built on the tonic
    pattern_system: PatternSystem  # Fingering system for scale patterns

    @property
    def num_strings(self) -> int:
        return len(self.tuning)


def init_config(
    num_frets: int = constants.DEFAULT_NUM_FRETS,
    use_flats: bool = False,
    key: str = "C",
    selected_strings: Optional[List[int]] = None,
) -> Config:
    """Initialize a default configuration for a six-string guitar.

    Creates a Config with standard tuning, every string enabled, the whole
    fretboard highlighted, and C major with three-notes-per-string patterns.

    Args:
        num_frets: How many frets to draw; one of FRET_COUNT_OPTIONS.
        use_flats: Whether to spell accidentals with flats.
        key: The tonic to start on.
        selected_strings: Enabled strings, all of them if None.

    Returns:
        A validated Config.
    """
    config = Config(
        tuning_name="Standard",
        tuning=list(constants.STANDARD_TUNING),
        num_frets=num_frets,
        use_flats=use_flats,
        min_fret=0,
        max_fret=num_frets,
        selected_strings=(
            list(range(constants.NUM_STRINGS))
            if selected_strings is None
            else selected_strings
        ),
        key=key,
        key_type=KeyType.Major,
        scale_type=ScaleType.Major,
        pattern_system=PatternSystem.ThreeNotesPerString,
    )
    validate_config(config)
    return config


def validate_config(config: Config) -> None:
    """Check a configuration's ranges.

    Raises:
        ConfigError: If the fret count is not offered, the fret range is
            empty or off the fretboard, or a selected string does not exist.
    """
    if config.num_frets not in constants.FRET_COUNT_OPTIONS:
        raise ConfigError(
            f"Fret count {config.num_frets} not one of {constants.FRET_COUNT_OPTIONS}"
        )
    if config.min_fret < 0 or config.max_fret > config.num_frets:
        raise ConfigError(
            f"Fret range {config.min_fret}-{config.max_fret} outside 0-{config.num_frets}"
        )
    if config.min_fret > config.max_fret:
        raise ConfigError(f"Empty fret range {config.min_fret}-{config.max_fret}")
    for str_index in config.selected_strings:
        if str_index < 0 or str_index >= config.num_strings:
            raise ConfigError(f"No string with index {str_index}")
