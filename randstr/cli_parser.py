"""Command-line parsing for rand-str-gen.

Flags come first, then the length, then pool entries. Everything after the
length is handed to the entry parser untouched, so entries such as ``-m``
are never mistaken for flags.
"""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from typing import List, NoReturn, Optional, Sequence

from common.cli_helpers import add_json_output_argument, add_log_level_argument
from common.exceptions import (
    InvalidIntegerError,
    MissingArgumentError,
    UnknownFlagError,
    UsageError,
)
from randstr.charsets import DEFINED_SETS
from randstr.directives import PoolSpec, parse_entries

PROG = "rand-str-gen"

HELP_FLAGS = frozenset(["-h", "--help"])
SWITCH_FLAGS = frozenset(["-c", "--copy", "--show-pool", "--json"])
VALUE_FLAGS = frozenset(["-r", "--repeat", "--log-level"])

ARGUMENT_ERROR = re.compile(r"^argument (?P<name>\S+): (?P<detail>.*)$")


@dataclass
class GenerationRequest:
    length: int
    repeat: int = 1
    copy: bool = False
    show_pool: bool = False
    json_output: bool = False
    log_level: str = "WARNING"
    pool_spec: PoolSpec = field(default_factory=PoolSpec)


class RandStrArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises rand-str-gen errors instead of exiting."""

    def error(self, message: str) -> NoReturn:
        if "the following arguments are required" in message:
            raise MissingArgumentError("expected arg: length of string")
        match = ARGUMENT_ERROR.match(message)
        if match is None:
            raise UnknownFlagError(f"invalid arg: {message}")
        name, detail = match.group("name"), match.group("detail")
        if detail.startswith("expected one argument"):
            raise MissingArgumentError(f"expected arg: value for {name}")
        raise UsageError(f"invalid value for {name}: {detail}")


def check_flags(argv: Sequence[str]) -> None:
    """Reject unknown flags in the order they appear before the length.

    Raises:
        UnknownFlagError: On the first ``-`` token that is not a known flag
    """
    tokens = iter(argv)
    for token in tokens:
        if not token.startswith("-"):
            return
        if token in HELP_FLAGS:
            return
        if token in SWITCH_FLAGS:
            continue
        if token in VALUE_FLAGS:
            next(tokens, None)
            continue
        if token.startswith("--") and token.split("=", 1)[0] in VALUE_FLAGS:
            continue
        if token.startswith("-r") and not token.startswith("--"):
            continue
        raise UnknownFlagError(f"invalid arg: '{token}'")


def _parse_int(value: str, what: str, minimum: int) -> int:
    # Plain ASCII digits only; int() would also take "1_000", " 5 " or "+5".
    if not (value.isascii() and value.isdigit()):
        raise InvalidIntegerError(f"invalid {what}: '{value}'")
    number = int(value)
    if number < minimum:
        raise InvalidIntegerError(f"invalid {what}: '{value}' must be >= {minimum}")
    return number


def non_negative_int(value: str) -> int:
    return _parse_int(value, "length", 0)


def positive_int(value: str) -> int:
    return _parse_int(value, "count", 1)


def _sets_help() -> str:
    lines = [
        f"     {cs.letter} : {cs.name}, [{', '.join(repr(c) for c in cs.chars)}]"
        if len(cs) < 10
        else f"     {cs.letter} : {cs.name}, {cs.chars[0]}-{cs.chars[-1]}"
        for cs in DEFINED_SETS
    ]
    letters = "".join(cs.letter for cs in DEFINED_SETS)
    lines.append(f"     A : all sets ({letters}), clears every pre-defined set")
    return "\n".join(lines)


EPILOG = f"""
entries: [+|-][entry]
  +  adds entry to the character pool
  -  removes entry from the character pool

  Entries are a sequence of pre-defined and custom sets (not separated by
  white-space or commas). A + or - inside an entry switches the sign for
  what follows. Later entries win, so +d-d leaves digits out.

  Pre-defined sets:
{_sets_help()}

  Custom set: [characters]
    All characters between '[' and ']' are added to or removed from the
    pool. ']' itself cannot be part of a custom set.
    You might have to quote entries that contain custom sets.

  By default, all pre-defined sets are in the pool.

Examples:
  {PROG} 10                    # Random string of length 10
  {PROG} 10 -m                 # Without misc symbols
  {PROG} 10 -m "+[%$^@]"       # With custom characters % $ ^ @
  {PROG} 10 "-[.]"             # Default sets, but without '.'
  {PROG} 4 -u-l-s-m            # Digits only
  {PROG} -r 5 -c 16 -A +ld     # Five lowercase+digit strings, copy the last
"""


def build_parser() -> RandStrArgumentParser:
    parser = RandStrArgumentParser(
        prog=PROG,
        description="Generate random strings from a configurable character pool.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog=EPILOG,
    )
    parser.add_argument(
        "-c", "--copy", action="store_true", help="Put the last generated string in the OS clipboard"
    )
    parser.add_argument(
        "-r",
        "--repeat",
        type=positive_int,
        default=1,
        help="Number of strings to generate, must be a positive integer",
    )
    parser.add_argument(
        "--show-pool", action="store_true", help="Print the character pool before the output"
    )
    add_json_output_argument(parser)
    add_log_level_argument(parser, default="WARNING")
    parser.add_argument(
        "length",
        type=non_negative_int,
        help="Number of characters in each generated string",
    )
    parser.add_argument(
        "entries",
        nargs=argparse.REMAINDER,
        help="Pool entries, see below",
    )
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> GenerationRequest:
    """Parse the command line into a GenerationRequest.

    ``--help`` prints the help text and exits with status 0.

    Raises:
        UsageError: On any malformed flag, count, length or pool entry
    """
    if argv is None:
        argv = sys.argv[1:]
    check_flags(argv)
    args = build_parser().parse_args(argv)
    entries: List[str] = list(args.entries or [])
    return GenerationRequest(
        length=args.length,
        repeat=args.repeat,
        copy=args.copy,
        show_pool=args.show_pool,
        json_output=args.json,
        log_level=args.log_level,
        pool_spec=parse_entries(entries),
    )
