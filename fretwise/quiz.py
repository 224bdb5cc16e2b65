"""Question generation and answer checking for the key, signature and triad quizzes.

Quiz flow (scoring, pacing, feedback) belongs to the caller. This module only
decides what to ask and whether an answer is right.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Collection, List, Optional, Set, Tuple, Union

from fretwise.base import MatchException, ParseError
from fretwise.keys import (
    MAJOR_KEYS,
    KeyType,
    format_key_signature,
    get_key_info,
    major_key_info,
    random_key,
)
from fretwise.parser import parse_key_name
from fretwise.pitch import ALL_NOTES, NoteName
from fretwise.triad import ChordQuality, build_triad

QUIZ_LENGTHS: List[int] = [12, 24, 48]
"""Triad quiz lengths on offer; 48 covers every root and quality once."""


@unique
class QuizMode(Enum):
    """What a key signature question asks for."""

    NameKey = auto()  # Show the signature, ask for the key
    CountAccidentals = auto()  # Show the key, ask how many accidentals


@dataclass(frozen=True)
class KeyQuizQuestion:
    """A key signature question about one major or minor key."""

    key: str
    key_type: KeyType
    mode: QuizMode
    signature: List[str]
    correct_answer: Union[str, int]
    """The key and type (e.g. "Bb minor") or the accidental count."""


def make_key_question(
    mode: QuizMode, rng: Optional[random.Random] = None
) -> KeyQuizQuestion:
    """Pick a random key and phrase a question about it."""
    key, key_type = random_key(rng=rng)
    info = get_key_info(key, key_type)
    # Every key in the random pools is tabulated.
    assert info is not None
    if mode == QuizMode.NameKey:
        answer: Union[str, int] = f"{key} {key_type.label}"
    elif mode == QuizMode.CountAccidentals:
        answer = abs(info.sharps_flats)
    else:
        raise MatchException(mode)
    return KeyQuizQuestion(
        key=key,
        key_type=key_type,
        mode=mode,
        signature=info.signature,
        correct_answer=answer,
    )


def _normalize(answer: str) -> str:
    return " ".join(answer.lower().split())


def _name_forms(key: str, type_name: str) -> List[str]:
    short = type_name[:3]
    return [
        key,
        f"{key} {type_name}",
        f"{key} {short}",
        f"{key}{type_name}",
        f"{key}{short}",
    ]


def accepted_answers(question: KeyQuizQuestion) -> Set[str]:
    """List the normalized answers accepted for a NameKey question.

    Bare key names, full and three-letter mode words, with or without a
    space, are all accepted, as is the enharmonic spelling of F# major
    (Gb) and D# minor (Eb).
    """
    type_name = question.key_type.label
    accepted = {_normalize(str(question.correct_answer))}
    accepted.update(_name_forms(question.key.lower(), type_name))
    info = get_key_info(question.key, question.key_type)
    if info is not None and info.enharmonic is not None:
        accepted.update(_name_forms(info.enharmonic.lower(), type_name))
    return accepted


def _key_names(question: KeyQuizQuestion) -> Set[str]:
    names = {question.key}
    info = get_key_info(question.key, question.key_type)
    if info is not None and info.enharmonic is not None:
        names.add(info.enharmonic)
    return names


def check_answer(answer: str, question: KeyQuizQuestion) -> bool:
    """Check a typed answer.

    NameKey answers are matched case- and whitespace-insensitively against
    ``accepted_answers``, falling back to parsing so that spellings like
    "F♯ major" also count. CountAccidentals answers must be an integer;
    anything else is simply wrong.
    """
    if question.mode == QuizMode.NameKey:
        normalized = _normalize(answer)
        if not normalized:
            return False
        if normalized in accepted_answers(question):
            return True
        try:
            parsed = parse_key_name(answer)
        except ParseError:
            return False
        if parsed.mode is not None and parsed.mode != question.key_type.label:
            return False
        return parsed.note.ascii() in _key_names(question)
    elif question.mode == QuizMode.CountAccidentals:
        try:
            return int(answer.strip()) == question.correct_answer
        except ValueError:
            logging.debug("Non-numeric accidental count: %r", answer)
            return False
    else:
        raise MatchException(question.mode)


@unique
class SignatureQuestionType(Enum):
    """What a major key signature question asks for."""

    KeyToSignature = auto()  # Show the key, ask for the signed accidental count
    SignatureToKey = auto()  # Describe the signature, ask for the key


@unique
class SignatureQuizMode(Enum):
    """Which question types a signature deck deals."""

    KeyToSignature = auto()
    SignatureToKey = auto()
    Both = auto()

    @property
    def question_types(self) -> List[SignatureQuestionType]:
        """The question types this mode deals, in deck order."""
        if self == SignatureQuizMode.KeyToSignature:
            return [SignatureQuestionType.KeyToSignature]
        elif self == SignatureQuizMode.SignatureToKey:
            return [SignatureQuestionType.SignatureToKey]
        elif self == SignatureQuizMode.Both:
            return list(SignatureQuestionType)
        else:
            raise MatchException(self)


SIGNATURE_KEY_OPTIONS: List[str] = [
    "C", "G", "D", "A", "E", "B", "F#", "Gb", "Db", "Ab", "Eb", "Bb", "F"
]  # fmt: skip
"""Answer ids for SignatureToKey: sharp keys around the circle, then flat keys."""

SIGNATURE_COUNT_OPTIONS: List[str] = [str(n) for n in range(0, 7)] + [
    str(n) for n in range(-1, -7, -1)
]
"""Answer ids for KeyToSignature: none, 1-6 sharps, then 1-6 flats (negative)."""


@dataclass(frozen=True)
class SignatureQuestion:
    """One card of the major key signature deck."""

    question_type: SignatureQuestionType
    key: str
    prompt: str
    correct_answer: str
    """Signed count such as "-6" for KeyToSignature, the tonic for SignatureToKey."""

    @property
    def options(self) -> List[str]:
        """The answer ids a player chooses from."""
        if self.question_type == SignatureQuestionType.KeyToSignature:
            return SIGNATURE_COUNT_OPTIONS
        else:
            return SIGNATURE_KEY_OPTIONS


def make_signature_question(
    key: str, question_type: SignatureQuestionType
) -> Optional[SignatureQuestion]:
    """Phrase a question about a major key's signature.

    Answers are signed, so F# major ("6") and Gb major ("-6") are different
    answers, and "Which major key has 6 flats?" is only answered by Gb.

    Args:
        key: A tabulated major tonic.
        question_type: Which way round to ask.

    Returns:
        The question, or None if the key is not a tabulated major key.
    """
    info = major_key_info(key)
    if info is None:
        return None
    if question_type == SignatureQuestionType.KeyToSignature:
        prompt = f"How many sharps or flats does {info.key} major have?"
        answer = str(info.sharps_flats)
    elif question_type == SignatureQuestionType.SignatureToKey:
        prompt = f"Which major key has {format_key_signature(info).lower()}?"
        answer = info.key
    else:
        raise MatchException(question_type)
    return SignatureQuestion(
        question_type=question_type, key=info.key, prompt=prompt, correct_answer=answer
    )


def build_signature_questions(
    mode: SignatureQuizMode, rng: Optional[random.Random] = None
) -> List[SignatureQuestion]:
    """Deal one shuffled deck of all 13 major keys per question type.

    Returns:
        13 questions for a single type, 26 for both.
    """
    gen = rng if rng is not None else random.Random()
    deck: List[SignatureQuestion] = []
    for question_type in mode.question_types:
        for key in MAJOR_KEYS:
            question = make_signature_question(key, question_type)
            assert question is not None
            deck.append(question)
    gen.shuffle(deck)
    return deck


def check_signature_answer(answer_id: str, question: SignatureQuestion) -> bool:
    """Check a chosen answer id against the question's exact answer."""
    return answer_id.strip() == question.correct_answer


@unique
class TriadQuestionType(Enum):
    TriadToNotes = auto()  # Name the three notes of a given triad
    NotesToTriad = auto()  # Name the triad spelled by three notes


@dataclass(frozen=True)
class TriadQuizQuestion:
    question_type: TriadQuestionType
    root: NoteName
    quality: ChordQuality
    notes: List[NoteName]

    @property
    def prompt(self) -> str:
        if self.question_type == TriadQuestionType.TriadToNotes:
            return f"What are the notes in {self.root} {self.quality.label}?"
        else:
            spelled = "  ".join(str(n) for n in self.notes)
            return f"What triad has these notes: {spelled}?"


def make_triad_question(
    root: NoteName, quality: ChordQuality, question_type: TriadQuestionType
) -> TriadQuizQuestion:
    """Build a question about one triad."""
    triad = build_triad(root, quality)
    return TriadQuizQuestion(
        question_type=question_type, root=root, quality=quality, notes=triad.notes
    )


def build_triad_questions(
    question_types: Collection[TriadQuestionType],
    length: int,
    rng: Optional[random.Random] = None,
) -> List[TriadQuizQuestion]:
    """Draw distinct triad questions from every root, quality and type.

    Args:
        question_types: The kinds of question to mix.
        length: How many questions to draw; capped at the pool size.
        rng: Source of randomness; a fresh one is used if not given.

    Returns:
        The shuffled questions.
    """
    gen = rng if rng is not None else random.Random()
    pool = [
        make_triad_question(root, quality, question_type)
        for question_type in question_types
        for root in ALL_NOTES
        for quality in ChordQuality
    ]
    gen.shuffle(pool)
    return pool[:length]


def check_triad_notes(selected: Collection[str], question: TriadQuizQuestion) -> bool:
    """Check a TriadToNotes answer.

    Answers are compared against the sharp spellings, so "Db" for C# is
    wrong, as in the note buttons the quiz offers.
    """
    chosen = set(selected)
    return len(chosen) == 3 and chosen == {n.sharp for n in question.notes}


def correct_triads(question: TriadQuizQuestion) -> List[Tuple[NoteName, ChordQuality]]:
    """List every (root, quality) that names the question's notes.

    Augmented triads are symmetric, so any of their notes is a valid root.
    """
    if question.quality == ChordQuality.Augmented:
        return [(note, question.quality) for note in question.notes]
    return [(question.root, question.quality)]


def check_triad_name(
    root: NoteName, quality: ChordQuality, question: TriadQuizQuestion
) -> bool:
    """Check a NotesToTriad answer against every correct root and quality."""
    return (root, quality) in correct_triads(question)
