from typing import List

import pytest

from fretwise.main import make_parser, run


def run_args(argv: List[str]) -> int:
    return run(make_parser().parse_args(argv))


def test_key(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["key", "G"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "G major: 1 sharp",
        "Signature: F#",
        "Notes: G A B C D E F#",
        "Relative minor: E",
    ]


def test_minor_key(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["key", "D#", "--minor"]) == 0
    out = capsys.readouterr().out
    assert "D# minor: 6 sharps" in out
    assert "Relative major: F#" in out
    assert "Enharmonic: Eb minor" in out


def test_unknown_key(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["key", "H"]) == 1
    assert "error: unknown key: H" in capsys.readouterr().err


def test_scale(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["--type", "melodic-minor", "scale", "A"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "A melodic minor: W - H - W - W - W - W - H"
    assert lines[3] == "  ♭3  C"
    assert len(lines) == 8


def test_unknown_scale_type(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["--type", "dorian", "scale", "A"]) == 1
    assert "error:" in capsys.readouterr().err


def test_triad(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["triad", "C", "major", "--string-set", "1-2-3"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "   R  C",
        "   3  E",
        "   5  G",
    ]


def test_triad_missing_notes(capsys: pytest.CaptureFixture) -> None:
    args = ["--max-fret", "0", "triad", "C", "major", "--string-set", "3-4-5"]
    assert run_args(args) == 0
    assert capsys.readouterr().out.splitlines() == [
        "   R  C  (not on strings 3-4-5)",
        "   3  E  (not on strings 3-4-5)",
        "   5  G",
    ]


def test_triad_flats(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["--flats", "triad", "Eb", "minor"]) == 0
    assert capsys.readouterr().out.split() == ["R", "Eb", "♭3", "Gb", "5", "Bb"]


def test_bad_triad(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["triad", "C", "sus"]) == 1
    assert run_args(["triad", "H", "major"]) == 1
    err = capsys.readouterr().err
    assert "unknown quality: sus" in err
    assert "unknown root: H" in err


def test_patterns(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["--system", "caged", "patterns", "C"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("A shape (frets 2-6)\n")
    for name in ["G shape", "E shape", "D shape", "C shape"]:
        assert name in out


def test_three_nps_patterns(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["patterns", "C"]) == 0
    out = capsys.readouterr().out
    assert out.count("Pattern ") == 7
    assert "Pattern 1 (frets 1-7)" in out


def test_notes_in_region(capsys: pytest.CaptureFixture) -> None:
    args = ["--strings", "0", "--min-fret", "1", "--max-fret", "2", "notes", "C"]
    assert run_args(args) == 0
    assert capsys.readouterr().out.strip() == "F"


def test_notes_with_flats(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["--flats", "notes", "D"]) == 0
    assert capsys.readouterr().out.strip() == "D E Gb G A B Db"


def test_quiz(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["quiz", "--count", "3", "--seed", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("1. Which ")


def test_quiz_counts(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["quiz", "--mode", "count-accidentals", "--count", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert all("How many accidentals" in line for line in lines)


@pytest.mark.parametrize(
    "argv",
    [
        ["--frets", "13", "key", "C"],
        ["--strings", "0,x", "key", "C"],
        ["--strings", "7", "key", "C"],
        ["--min-fret", "5", "--max-fret", "2", "key", "C"],
    ],
)
def test_bad_config(argv: List[str], capsys: pytest.CaptureFixture) -> None:
    assert run_args(argv) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_signatures(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["signatures", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 26
    assert "How many sharps or flats does Gb major have? [-6]" in "\n".join(lines)
    assert "Which major key has 6 sharps? [F#]" in "\n".join(lines)


def test_signatures_single_deck(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["signatures", "--deck", "signature-to-key"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 13
    assert all("Which major key has" in line for line in lines)


def test_signatures_unknown_deck(capsys: pytest.CaptureFixture) -> None:
    assert run_args(["signatures", "--deck", "sideways"]) == 1
    assert "error: unknown deck: sideways" in capsys.readouterr().err
