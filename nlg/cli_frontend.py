"""
nlg/cli_frontend.py

Command-line interface for the phrase generation API.

Typical usage:

    phrase-trainer languages

    phrase-trainer patterns --lang czech

    phrase-trainer generate \
        --lang german \
        --pattern pattern-german-1 \
        --count 3 \
        --seed 42

    phrase-trainer check --answer "jsem v kině" --correct "Já jsem v kině" \
        --alternative "Jsem v kině"

The CLI:

- Lists the languages and built-in patterns known to the loaded profiles.
- Generates phrases from a built-in pattern, as text or JSON.
- Checks an answer and reports the result through the exit status
  (0 when correct, 1 otherwise).
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import List, Optional

from app.core.use_cases.generate_phrases import GeneratePhrases
from app.shared.config import settings
from app.shared.languages import get_language_config, list_languages
from nlg.answers import check_answer
from utils.logging_setup import init_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrase-trainer",
        description="Generate and check German/Czech grammar drill phrases.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `languages` command
    subparsers.add_parser("languages", help="List the available languages.")

    # `patterns` command
    pat = subparsers.add_parser("patterns", help="List built-in patterns for a language.")
    pat.add_argument(
        "--lang",
        default=settings.DEFAULT_LANGUAGE,
        help="Language id (e.g. 'german', 'czech').",
    )

    # `generate` command
    gen = subparsers.add_parser(
        "generate",
        help="Generate phrases from a built-in pattern.",
    )

    gen.add_argument(
        "--lang",
        default=settings.DEFAULT_LANGUAGE,
        help="Language id (e.g. 'german', 'czech').",
    )

    gen.add_argument(
        "--pattern",
        default=None,
        help="Pattern id. If omitted, the first built-in pattern is used.",
    )

    gen.add_argument(
        "--count",
        type=int,
        default=settings.DEFAULT_PHRASE_COUNT,
        help="Number of phrases to generate.",
    )

    gen.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible word selection.",
    )

    gen.add_argument(
        "--json",
        action="store_true",
        help="Print the generated phrases as JSON.",
    )

    # `check` command
    chk = subparsers.add_parser("check", help="Check an answer against the correct one.")
    chk.add_argument("--answer", required=True, help="The answer to check.")
    chk.add_argument("--correct", required=True, help="The correct answer.")
    chk.add_argument(
        "--alternative",
        default=None,
        help="An alternative accepted answer (e.g. without the pronoun).",
    )

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_languages(args: argparse.Namespace) -> int:
    for config in list_languages():
        print(f"{config.id}\t{config.name} ({config.native_name})")
    return 0


def _cmd_patterns(args: argparse.Namespace) -> int:
    config = get_language_config(args.lang)
    for pattern in config.default_patterns:
        print(f"{pattern.id}\t{pattern.name}")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    config = get_language_config(args.lang)

    if args.pattern:
        pattern = config.find_pattern(args.pattern)
        if pattern is None:
            raise SystemExit(f"Error: unknown pattern {args.pattern!r} for {config.id!r}.")
    elif config.default_patterns:
        pattern = config.default_patterns[0]
    else:
        raise SystemExit(f"Error: language {config.id!r} has no built-in patterns.")

    rng = random.Random(args.seed) if args.seed is not None else None
    phrases = GeneratePhrases(rng=rng).execute(pattern, count=args.count)

    if args.json:
        payload = [phrase.model_dump(mode="json") for phrase in phrases]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    for phrase in phrases:
        print(phrase.english)
        print(f"  {phrase.target_correct}")
        if phrase.target_without_pronoun:
            print(f"  ({phrase.target_without_pronoun})")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    if check_answer(args.answer, args.correct, args.alternative):
        print("correct")
        return 0
    print(f"incorrect, expected: {args.correct}")
    return 1


_COMMANDS = {
    "languages": _cmd_languages,
    "patterns": _cmd_patterns,
    "generate": _cmd_generate,
    "check": _cmd_check,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    init_logging()

    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(handler(args))


if __name__ == "__main__":
    main(sys.argv[1:])
