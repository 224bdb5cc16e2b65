from dataclasses import replace

import pytest

from fretwise import constants
from fretwise.base import ConfigError
from fretwise.config import init_config, validate_config
from fretwise.keys import KeyType
from fretwise.patterns import PatternSystem
from fretwise.scale import ScaleType


def test_init_config_defaults() -> None:
    config = init_config()
    assert config.tuning == constants.STANDARD_TUNING
    assert config.num_strings == 6
    assert config.num_frets == 12
    assert config.min_fret == 0
    assert config.max_fret == 12
    assert config.selected_strings == [0, 1, 2, 3, 4, 5]
    assert config.key == "C"
    assert config.key_type == KeyType.Major
    assert config.scale_type == ScaleType.Major
    assert config.pattern_system == PatternSystem.ThreeNotesPerString
    assert not config.use_flats


@pytest.mark.parametrize("num_frets", constants.FRET_COUNT_OPTIONS)
def test_fret_count_options(num_frets: int) -> None:
    assert init_config(num_frets=num_frets).max_fret == num_frets


def test_rejects_unknown_fret_count() -> None:
    with pytest.raises(ConfigError):
        init_config(num_frets=13)


def test_rejects_missing_string() -> None:
    with pytest.raises(ConfigError):
        init_config(selected_strings=[0, 6])


def test_empty_selection_is_valid() -> None:
    assert init_config(selected_strings=[]).selected_strings == []


@pytest.mark.parametrize(
    "min_fret, max_fret",
    [(-1, 12), (0, 13), (8, 4)],
)
def test_rejects_bad_fret_range(min_fret: int, max_fret: int) -> None:
    config = replace(init_config(), min_fret=min_fret, max_fret=max_fret)
    with pytest.raises(ConfigError):
        validate_config(config)


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        init_config(num_frets=0)
