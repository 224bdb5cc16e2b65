"""Parsers for spelled note names and key names using Lark."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError

from fretwise.base import ParseError
from fretwise.pitch import LETTER_VALUES, NOTE_LOOKUP, MAX_NOTES, NoteName

# Lark grammar for note and key names as they are written in key tables and
# typed into quiz answers: "C", "F#", "Bbb", "E♭", "gb major", "D#min", "am".
NAME_GRAMMAR = """
%import common.WS
%ignore WS

LETTER: /[a-gA-G]/
SHARP: "#" | "♯"
FLAT: "b" | "♭"
DOUBLE_SHARP: "x" | "𝄪"
NATURAL: "♮"
MAJOR: /maj(or)?/i
MINOR: /min(or)?/i | "m"

spelled_note: LETTER accidental*
accidental: SHARP | FLAT | DOUBLE_SHARP | NATURAL

key_name: spelled_note mode?
mode: MAJOR | MINOR
"""


@dataclass(frozen=True)
class SpelledNote:
    """A note name as written: a letter plus a net chromatic alteration."""

    letter: str
    """Upper-case natural letter name (A-G)."""
    alteration: int
    """Net semitone alteration, e.g. -2 for a double flat."""

    @property
    def pitch_class(self) -> NoteName:
        return NOTE_LOOKUP[(LETTER_VALUES[self.letter] + self.alteration) % MAX_NOTES]

    def ascii(self) -> str:
        """Render with ASCII accidentals ("#" and "b")."""
        if self.alteration >= 0:
            return self.letter + "#" * self.alteration
        else:
            return self.letter + "b" * -self.alteration


@dataclass(frozen=True)
class KeyName:
    """A parsed key name with an optional mode word."""

    note: SpelledNote
    mode: Optional[str]
    """Either "major", "minor", or None if no mode word was given."""


class NameTransformer(Transformer):
    """Transform parsed names into SpelledNote and KeyName values."""

    def spelled_note(self, items):
        letter = str(items[0]).upper()
        return SpelledNote(letter, sum(items[1:]))

    def accidental(self, items):
        return items[0]

    def key_name(self, items):
        mode = items[1] if len(items) > 1 else None
        return KeyName(items[0], mode)

    def mode(self, items):
        return items[0]

    def SHARP(self, token):
        return 1

    def FLAT(self, token):
        return -1

    def DOUBLE_SHARP(self, token):
        return 2

    def NATURAL(self, token):
        return 0

    def MAJOR(self, token):
        return "major"

    def MINOR(self, token):
        return "minor"


_NOTE_PARSER = Lark(NAME_GRAMMAR, start="spelled_note")
_KEY_PARSER = Lark(NAME_GRAMMAR, start="key_name")


def parse_spelled(text: str) -> SpelledNote:
    """Parse a spelled note name.

    Args:
        text: A note name such as "C", "F#", "Bbb" or "E♭".

    Returns:
        The parsed SpelledNote.

    Raises:
        ParseError: If the text is not a note name.
    """
    try:
        tree = _NOTE_PARSER.parse(text.strip())
    except LarkError as e:
        raise ParseError(text) from e
    return NameTransformer().transform(tree)


def parse_key_name(text: str) -> KeyName:
    """Parse a key name with an optional mode word.

    Examples:
        >>> parse_key_name("gb major")
        KeyName(note=SpelledNote(letter='G', alteration=-1), mode='major')

        >>> parse_key_name("D#min").mode
        'minor'

    Raises:
        ParseError: If the text is not a key name.
    """
    try:
        tree = _KEY_PARSER.parse(text.strip())
    except LarkError as e:
        raise ParseError(text) from e
    return NameTransformer().transform(tree)
