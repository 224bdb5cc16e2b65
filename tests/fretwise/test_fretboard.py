from hypothesis import given
from hypothesis import strategies as st

from fretwise import constants
from fretwise.fretboard import (
    StringBounds,
    StringPos,
    find_lowest_fret,
    find_next_fret,
    note_at_pos,
    note_positions_on_string,
)
from fretwise.pitch import NoteName, note_at
from tests.fretwise.hypo import configure_hypo, note_names

configure_hypo()

TUNING = constants.STANDARD_TUNING


def test_find_lowest_fret_skips_open_string() -> None:
    assert find_lowest_fret(0, NoteName.E) == 12
    assert find_lowest_fret(0, NoteName.F) == 1
    assert find_lowest_fret(1, NoteName.C) == 3
    assert find_lowest_fret(0, NoteName.E, min_fret=0) == 0


def test_find_next_fret_bounds() -> None:
    assert find_next_fret(TUNING, 0, NoteName.G, 4) == 15
    assert find_next_fret(TUNING, 0, NoteName.G, 4, max_fret=12) == constants.NOT_FOUND
    assert find_next_fret(TUNING, 6, NoteName.G, 0) == constants.NOT_FOUND
    assert find_next_fret(TUNING, -1, NoteName.G, 0) == constants.NOT_FOUND
    assert find_next_fret(TUNING, 0, NoteName.E, -5) == 0


def test_find_next_fret_past_top() -> None:
    assert find_next_fret(TUNING, 0, NoteName.F, 14) == constants.NOT_FOUND


@given(
    st.integers(min_value=0, max_value=5),
    note_names(),
    st.integers(min_value=0, max_value=12),
)
def test_find_next_fret_is_first_match(str_index: int, note: NoteName, start: int) -> None:
    fret = find_next_fret(TUNING, str_index, note, start)
    assert fret >= start and fret < start + 12
    assert note_at(TUNING[str_index], fret) == note
    for earlier in range(start, fret):
        assert note_at(TUNING[str_index], earlier) != note


def test_note_positions_on_string() -> None:
    assert note_positions_on_string(NoteName.E, NoteName.E, 12) == [0, 12]
    assert note_positions_on_string(NoteName.C, NoteName.B, 24) == [1, 13]
    assert note_positions_on_string(NoteName.C, NoteName.B, 0) == []


def test_note_at_pos() -> None:
    assert note_at_pos(TUNING, StringPos(5, 3)) == NoteName.G
    assert note_at_pos(TUNING, StringPos(6, 3)) is None


def test_string_bounds() -> None:
    bounds = StringBounds(low=StringPos(1, 2), high=StringPos(2, 4))
    assert list(bounds) == [
        StringPos(1, 2),
        StringPos(1, 3),
        StringPos(1, 4),
        StringPos(2, 2),
        StringPos(2, 3),
        StringPos(2, 4),
    ]
    assert StringPos(2, 3) in bounds
    assert StringPos(0, 3) not in bounds
    assert StringPos(1, 5) not in bounds
