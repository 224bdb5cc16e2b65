from typing import Optional

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fretwise.pitch import NoteName, note_at, note_from_sharp, parse_note, spell
from tests.fretwise.hypo import configure_hypo, note_names

configure_hypo()


@given(note_names(), st.integers(min_value=0, max_value=24))
def test_note_at_is_periodic(open_note: NoteName, fret: int) -> None:
    assert note_at(open_note, fret) == note_at(open_note, fret % 12)


@given(note_names(), st.integers(min_value=-30, max_value=30))
def test_add_steps_inverse(note: NoteName, steps: int) -> None:
    assert note.add_steps(steps).add_steps(-steps) == note


def test_note_at_standard_strings() -> None:
    assert note_at(NoteName.E, 0) == NoteName.E
    assert note_at(NoteName.E, 1) == NoteName.F
    assert note_at(NoteName.A, 3) == NoteName.C
    assert note_at(NoteName.B, 13) == NoteName.C


@pytest.mark.parametrize(
    "note, use_flats, expected",
    [
        (NoteName.C, False, "C"),
        (NoteName.C, True, "C"),
        (NoteName.Cs, False, "C#"),
        (NoteName.Cs, True, "Db"),
        (NoteName.Ds, True, "Eb"),
        (NoteName.Fs, True, "Gb"),
        (NoteName.Gs, True, "Ab"),
        (NoteName.As, True, "Bb"),
        (NoteName.As, False, "A#"),
    ],
)
def test_spell(note: NoteName, use_flats: bool, expected: str) -> None:
    assert spell(note, use_flats) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("C", NoteName.C),
        ("F#", NoteName.Fs),
        ("Gb", NoteName.Fs),
        ("E#", NoteName.F),
        ("Cb", NoteName.B),
        ("Fb", NoteName.E),
        ("Bbb", NoteName.A),
        ("B♭", NoteName.As),
        ("F♯", NoteName.Fs),
        ("Cx", NoteName.D),
        ("eb", NoteName.Ds),
        (" A ", NoteName.A),
        ("H", None),
        ("", None),
        ("C#m", None),
        ("not a note", None),
    ],
)
def test_parse_note(name: str, expected: Optional[NoteName]) -> None:
    assert parse_note(name) == expected


def test_note_from_sharp() -> None:
    assert note_from_sharp("G#") == NoteName.Gs
    assert note_from_sharp("Ab") is None
    for note in NoteName:
        assert note_from_sharp(note.sharp) == note
        assert parse_note(note.flat) == note
