import pytest

from fretwise.pitch import NoteName, parse_note
from fretwise.scale import (
    SCALE_KEYS,
    ScaleType,
    build_scale,
    note_display_map,
    scale_degrees,
    scale_formula,
)


def test_c_major() -> None:
    scale = build_scale("C", ScaleType.Major)
    assert scale is not None
    assert scale.notes == [
        NoteName.C,
        NoteName.D,
        NoteName.E,
        NoteName.F,
        NoteName.G,
        NoteName.A,
        NoteName.B,
    ]
    assert scale.display_notes == ["C", "D", "E", "F", "G", "A", "B"]
    assert scale.intervals[NoteName.C] == "1"
    assert scale.intervals[NoteName.B] == "7"
    assert scale.root == NoteName.C


@pytest.mark.parametrize("key", SCALE_KEYS)
@pytest.mark.parametrize("scale_type", list(ScaleType))
def test_seven_distinct_notes(key: str, scale_type: ScaleType) -> None:
    scale = build_scale(key, scale_type)
    assert scale is not None
    assert len(scale.notes) == 7
    assert len(set(scale.notes)) == 7
    assert len(scale.intervals) == 7
    assert [scale.intervals[n] for n in scale.notes] == scale_type.degree_labels


@pytest.mark.parametrize("key", SCALE_KEYS)
@pytest.mark.parametrize("scale_type", list(ScaleType))
def test_spellings_match_pitch_classes(key: str, scale_type: ScaleType) -> None:
    scale = build_scale(key, scale_type)
    assert scale is not None
    assert [parse_note(n) for n in scale.display_notes] == scale.notes
    assert len({n[0] for n in scale.display_notes}) == 7


def test_f_sharp_major_spells_e_sharp() -> None:
    scale = build_scale("F#", ScaleType.Major)
    assert scale is not None
    assert scale.display_notes[6] == "E#"
    assert scale.notes[6] == NoteName.F


def test_melodic_minor_keeps_double_flat() -> None:
    scale = build_scale("Gb", ScaleType.MelodicMinor)
    assert scale is not None
    assert scale.display_notes[2] == "Bbb"
    assert scale.notes[2] == NoteName.A
    assert scale.intervals[NoteName.A] == "♭3"


def test_melodic_minor_labels() -> None:
    scale = build_scale("A", ScaleType.MelodicMinor)
    assert scale is not None
    assert scale.display_notes == ["A", "B", "C", "D", "E", "F#", "G#"]
    assert [scale.intervals[n] for n in scale.notes] == [
        "1",
        "2",
        "♭3",
        "4",
        "5",
        "6",
        "7",
    ]


def test_unknown_key() -> None:
    assert build_scale("H", ScaleType.Major) is None
    assert build_scale("C#", ScaleType.Major) is None


def test_build_is_idempotent() -> None:
    assert build_scale("Eb", ScaleType.MelodicMinor) == build_scale(
        "Eb", ScaleType.MelodicMinor
    )


def test_scale_membership() -> None:
    scale = build_scale("G", ScaleType.Major)
    assert scale is not None
    assert NoteName.Fs in scale
    assert NoteName.F not in scale


def test_formula_and_degrees() -> None:
    assert scale_formula(ScaleType.Major) == "W - W - H - W - W - W - H"
    assert scale_formula(ScaleType.MelodicMinor) == "W - H - W - W - W - W - H"
    assert scale_degrees(ScaleType.Major) == "1 - 2 - 3 - 4 - 5 - 6 - 7"
    assert scale_degrees(ScaleType.MelodicMinor) == "1 - 2 - ♭3 - 4 - 5 - 6 - 7"


def test_note_display_map() -> None:
    scale = build_scale("Db", ScaleType.Major)
    assert scale is not None
    display = note_display_map(scale)
    assert display[NoteName.Cs] == "Db"
    assert display[NoteName.Fs] == "Gb"
    assert display[NoteName.C] == "C"
