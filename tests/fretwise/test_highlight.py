from hypothesis import given
from hypothesis import strategies as st

from fretwise import constants
from fretwise.highlight import HighlightInfo, highlight_info, notes_in_view, should_highlight
from fretwise.pitch import NoteName
from fretwise.scale import Scale, ScaleType, build_scale
from fretwise.triad import ChordQuality, build_triad
from tests.fretwise.hypo import configure_hypo

configure_hypo()

TUNING = constants.STANDARD_TUNING
ALL = list(range(6))


def c_major() -> Scale:
    scale = build_scale("C", ScaleType.Major)
    assert scale is not None
    return scale


@given(
    st.integers(min_value=0, max_value=5),
    st.integers(min_value=0, max_value=24),
)
def test_nothing_selected_is_never_highlighted(str_index: int, fret: int) -> None:
    assert not should_highlight(c_major(), TUNING, [], 0, 24, str_index, fret)


def test_should_highlight() -> None:
    scale = c_major()
    # Low E string, fret 1 is F
    assert should_highlight(scale, TUNING, ALL, 0, 12, 0, 1)
    # Fret 2 is F#
    assert not should_highlight(scale, TUNING, ALL, 0, 12, 0, 2)
    # Out of the fret range
    assert not should_highlight(scale, TUNING, ALL, 3, 12, 0, 1)
    assert not should_highlight(scale, TUNING, ALL, 0, 12, 0, 13)
    # String not selected
    assert not should_highlight(scale, TUNING, [1, 2], 0, 12, 0, 1)


def test_notes_in_view() -> None:
    scale = c_major()
    # Frets 1-2 of the low E string hold F and F#
    assert notes_in_view(scale, TUNING, [0], 1, 2, 12) == {NoteName.F}
    assert notes_in_view(scale, TUNING, ALL, 0, 12, 12) == set(scale.notes)
    assert notes_in_view(scale, TUNING, [], 0, 12, 12) == set()


def test_notes_in_view_clamps_range() -> None:
    scale = c_major()
    # Clamped to frets 0-1 on the high E string: E and F
    assert notes_in_view(scale, TUNING, [5], -4, 30, 1) == {NoteName.E, NoteName.F}
    assert notes_in_view(scale, TUNING, [9], 0, 12, 12) == set()


def test_highlight_info() -> None:
    triad = build_triad(NoteName.C, ChordQuality.Major)
    # A string, fret 3 is C
    assert highlight_info(NoteName.A, 3, triad.notes, triad.intervals) == HighlightInfo(
        highlighted=True, note=NoteName.C, interval="R"
    )
    assert highlight_info(NoteName.A, 2, triad.notes, triad.intervals) == HighlightInfo(
        highlighted=False, note=NoteName.B, interval=None
    )
    assert highlight_info(NoteName.E, 0, {NoteName.E}) == HighlightInfo(
        highlighted=True, note=NoteName.E, interval=None
    )
