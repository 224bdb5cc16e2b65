"""Main entry point for the fretwise command line.

This module contains the command-line argument handling for fretwise. It
sets up logging, builds a Config from the flags, runs one theory query and
prints a plain-text rendering of the result.
"""

import logging
import random
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import replace
from typing import Dict, List, Optional

from fretwise import constants
from fretwise.base import ConfigError, MatchException
from fretwise.config import Config, init_config, validate_config
from fretwise.constants import find_enum, make_enum_name_lookup
from fretwise.highlight import notes_in_view
from fretwise.keys import KeyType, format_key_signature, get_key_info
from fretwise.patterns import PatternSystem, ScalePattern, all_patterns
from fretwise.pitch import NoteName, parse_note, spell
from fretwise.quiz import (
    QuizMode,
    SignatureQuizMode,
    build_signature_questions,
    make_key_question,
)
from fretwise.scale import ScaleType, build_scale, scale_formula
from fretwise.string_sets import STRING_SETS, filter_triad_by_string_set
from fretwise.triad import ChordQuality, build_triad

_SCALE_TYPES = make_enum_name_lookup(ScaleType)
_QUALITIES = make_enum_name_lookup(ChordQuality)
_QUIZ_MODES = make_enum_name_lookup(QuizMode)
_SIGNATURE_MODES = make_enum_name_lookup(SignatureQuizMode)
_SYSTEMS: Dict[str, PatternSystem] = {
    "3nps": PatternSystem.ThreeNotesPerString,
    "caged": PatternSystem.Caged,
}

STRING_NAMES_WIDTH = 3
CELL_WIDTH = 4


def render_pattern(pattern: ScalePattern, tuning: List[NoteName]) -> str:
    """Draw a pattern as a text fretboard, highest string on top.

    Each placed note shows its degree label; frets run left to right from
    the pattern's lowest to highest fret.
    """
    low = pattern.start_fret
    high = pattern.end_fret
    header = " " * STRING_NAMES_WIDTH + "".join(
        str(fret).center(CELL_WIDTH) for fret in range(low, high + 1)
    )
    lines = [f"{pattern.name} (frets {low}-{high})", header]
    for str_index in reversed(range(len(pattern.strings))):
        by_fret = {pn.fret: pn.interval for pn in pattern.strings[str_index]}
        cells = "".join(
            by_fret.get(fret, "-").center(CELL_WIDTH) for fret in range(low, high + 1)
        )
        lines.append(str(tuning[str_index]).ljust(STRING_NAMES_WIDTH) + cells)
    return "\n".join(lines)


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def run_key(args: Namespace, config: Config) -> int:
    """Print a key's signature, notes and relatives."""
    key_type = KeyType.Minor if args.minor else KeyType.Major
    info = get_key_info(args.name, key_type)
    if info is None:
        return _fail(f"unknown key: {args.name}")
    print(f"{info.key} {key_type.label}: {format_key_signature(info)}")
    if info.signature:
        print(f"Signature: {' '.join(info.signature)}")
    print(f"Notes: {' '.join(info.notes)}")
    print(f"Relative {info.relative_type.label}: {info.relative}")
    if info.enharmonic is not None:
        print(f"Enharmonic: {info.enharmonic} {key_type.label}")
    return 0


def run_scale(args: Namespace, config: Config) -> int:
    scale = build_scale(config.key, config.scale_type)
    if scale is None:
        return _fail(f"unknown scale: {config.key} {args.type}")
    print(f"{scale.key} {scale.scale_type.label}: {scale_formula(scale.scale_type)}")
    for note, display in zip(scale.notes, scale.display_notes):
        print(f"  {scale.intervals[note]:>2}  {display}")
    return 0


def run_triad(args: Namespace, config: Config) -> int:
    root = parse_note(args.root)
    quality = find_enum(_QUALITIES, args.quality)
    if root is None:
        return _fail(f"unknown root: {args.root}")
    if quality is None:
        return _fail(f"unknown quality: {args.quality}")
    triad = build_triad(root, quality)
    playable = filter_triad_by_string_set(
        triad, args.string_set, config.tuning, config.max_fret
    )
    for note in triad.notes:
        mark = "" if note in playable else f"  (not on strings {args.string_set})"
        print(f"  {triad.intervals[note]:>2}  {spell(note, config.use_flats)}{mark}")
    return 0


def run_patterns(args: Namespace, config: Config) -> int:
    """Draw every pattern of the configured system for a scale."""
    patterns = all_patterns(config.key, config.scale_type, config.pattern_system)
    if not patterns:
        return _fail(f"unknown scale: {config.key} {args.type}")
    print("\n\n".join(render_pattern(p, config.tuning) for p in patterns))
    return 0


def run_notes(args: Namespace, config: Config) -> int:
    scale = build_scale(config.key, config.scale_type)
    if scale is None:
        return _fail(f"unknown scale: {config.key} {args.type}")
    found = notes_in_view(
        scale,
        config.tuning,
        config.selected_strings,
        config.min_fret,
        config.max_fret,
        config.num_frets,
    )
    names = [spell(n, config.use_flats) for n in scale.notes if n in found]
    print(" ".join(names))
    return 0


def run_quiz(args: Namespace, config: Config) -> int:
    """Print key quiz questions with their answers in brackets."""
    mode = find_enum(_QUIZ_MODES, args.mode)
    if mode is None:
        return _fail(f"unknown quiz mode: {args.mode}")
    rng = random.Random(args.seed)
    for number in range(1, args.count + 1):
        question = make_key_question(mode, rng)
        if mode == QuizMode.NameKey:
            signature = " ".join(question.signature) or "no accidentals"
            prompt = f"Which {question.key_type.label} key has {signature}?"
        else:
            prompt = f"How many accidentals in {question.key} {question.key_type.label}?"
        print(f"{number}. {prompt} [{question.correct_answer}]")
    return 0


def run_signatures(args: Namespace, config: Config) -> int:
    mode = find_enum(_SIGNATURE_MODES, args.deck)
    if mode is None:
        return _fail(f"unknown deck: {args.deck}")
    questions = build_signature_questions(mode, random.Random(args.seed))
    for number, question in enumerate(questions, start=1):
        print(f"{number}. {question.prompt} [{question.correct_answer}]")
    return 0


def _parse_strings(text: Optional[str]) -> Optional[List[int]]:
    if text is None:
        return None
    return [int(part) for part in text.split(",") if part.strip()]


def make_config(args: Namespace) -> Config:
    """Build a Config from parsed command-line arguments.

    Raises:
        ConfigError: If a flag value is out of range or not recognized.
    """
    try:
        selected = _parse_strings(args.strings)
    except ValueError as e:
        raise ConfigError(f"Malformed string list: {args.strings}") from e
    config = init_config(
        num_frets=args.frets,
        use_flats=args.flats,
        key=getattr(args, "name", "C"),
        selected_strings=selected,
    )
    scale_type = find_enum(_SCALE_TYPES, args.type)
    if scale_type is None:
        raise ConfigError(f"Unknown scale type: {args.type}")
    system = _SYSTEMS.get(args.system)
    if system is None:
        raise ConfigError(f"Unknown pattern system: {args.system}")
    config = replace(
        config,
        min_fret=args.min_fret,
        max_fret=args.frets if args.max_fret is None else args.max_fret,
        scale_type=scale_type,
        pattern_system=system,
    )
    validate_config(config)
    return config


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser with the shared view flags and one subcommand per
        theory query.
    """
    parser = ArgumentParser(prog="fretwise")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--frets", type=int, default=constants.DEFAULT_NUM_FRETS)
    parser.add_argument("--flats", action="store_true")
    parser.add_argument("--strings", help="comma-separated string indices, 0 = low E")
    parser.add_argument("--min-fret", type=int, default=0)
    parser.add_argument("--max-fret", type=int)
    parser.add_argument("--type", default="major", help="major or melodic-minor")
    parser.add_argument("--system", default="3nps", choices=sorted(_SYSTEMS))
    sub = parser.add_subparsers(dest="command", required=True)

    key = sub.add_parser("key", help="show a key signature")
    key.add_argument("name")
    key.add_argument("--minor", action="store_true")

    scale = sub.add_parser("scale", help="show a scale's notes and degrees")
    scale.add_argument("name")

    triad = sub.add_parser("triad", help="show a triad")
    triad.add_argument("root")
    triad.add_argument("quality")
    triad.add_argument("--string-set", default="All", choices=STRING_SETS)

    patterns = sub.add_parser("patterns", help="draw a scale's fingering patterns")
    patterns.add_argument("name")

    notes = sub.add_parser("notes", help="list scale notes in the selected region")
    notes.add_argument("name")

    quiz = sub.add_parser("quiz", help="print key signature quiz questions")
    quiz.add_argument("--mode", default="name-key")
    quiz.add_argument("--count", type=int, default=5)
    quiz.add_argument("--seed", type=int)

    signatures = sub.add_parser(
        "signatures", help="print a shuffled major key signature deck"
    )
    signatures.add_argument(
        "--deck", default="both", help="key-to-signature, signature-to-key or both"
    )
    signatures.add_argument("--seed", type=int)
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def run(args: Namespace) -> int:
    """Run one subcommand and return the process exit status."""
    try:
        config = make_config(args)
    except ConfigError as e:
        return _fail(str(e))
    logging.info("running %s", args.command)
    if args.command == "key":
        return run_key(args, config)
    elif args.command == "scale":
        return run_scale(args, config)
    elif args.command == "triad":
        return run_triad(args, config)
    elif args.command == "patterns":
        return run_patterns(args, config)
    elif args.command == "notes":
        return run_notes(args, config)
    elif args.command == "quiz":
        return run_quiz(args, config)
    elif args.command == "signatures":
        return run_signatures(args, config)
    else:
        raise MatchException(args.command)


def main() -> None:
    """Main entry point for the fretwise command line.

    Parses command-line arguments, configures logging, and runs the
    requested query.
    """
    parser = make_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
