"""hgn — Hangul number converter console.

Encode non-negative integers as short Hangul strings and decode them back.

Usage:
    hgn [interactive]          Prompt for numbers, print all 128 encodings
    hgn encode <number>        One encoding (random seed unless --seed)
    hgn all <number>           All 128 encodings with a round-trip check
    hgn decode <string...>     Decode one or more encoded strings

Environment:
    HGN_COLUMNS     Encodings per row in tables (default: 8)
"""

import argparse
import os
import sys

from hgn.core.alphabet import SIZE
from hgn.core.codec import Codec
from hgn.core.errors import HangulNumberError

DEFAULT_COLUMNS = int(os.environ.get("HGN_COLUMNS", "8"))

RULE = "-" * 50
OK_MARK = "✓"
FAIL_MARK = "✗"


def parse_number(text: str) -> int:
    """Parse user input as an integer, ignoring thousands separators.

    Raises ValueError when the text is not an integer.
    """
    return int(text.strip().replace(",", ""))


def _check_columns(columns):
    if columns < 1:
        raise ValueError(f"Columns must be at least 1, got {columns}")


def format_table(codec, number, encodings, columns=DEFAULT_COLUMNS):
    """Render encodings in rows, each marked with its round-trip result."""
    _check_columns(columns)
    lines = []
    for start in range(0, len(encodings), columns):
        items = []
        for encoded in encodings[start:start + columns]:
            try:
                ok = codec.decode(encoded) == number
            except HangulNumberError:
                ok = False
            items.append(f"{encoded}{OK_MARK if ok else FAIL_MARK}")
        lines.append("  ".join(items))
    if encodings:
        length = len(encodings[0])
        lines.append("")
        lines.append(f"Total: {len(encodings)} variants, Length: {length} chars each")
    return lines


def print_all(codec, number, columns):
    print(f"\nAll {SIZE} encodings for {number:,}:")
    print(RULE)
    for line in format_table(codec, number, codec.encode_all(number), columns):
        print(line)
    print(RULE)
    print()


def run_interactive(codec, columns=DEFAULT_COLUMNS, stream=None):
    """Read numbers until 'exit' or end of input.

    Bad input is reported and the loop keeps going.
    """
    _check_columns(columns)
    stream = stream if stream is not None else sys.stdin

    print("=== Hangul Number Converter (Base-128, Variable Length) ===")
    print("Enter a non-negative integer to encode.")
    print("Type 'exit' to quit.\n")

    while True:
        print("Enter number: ", end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            break

        answer = line.strip()
        if not answer or answer.lower() == "exit":
            break

        try:
            number = parse_number(answer)
        except ValueError:
            print("Please enter a valid number.\n")
            continue
        if number < 0:
            print("Number must be non-negative.\n")
            continue

        try:
            print_all(codec, number, columns)
        except HangulNumberError as e:
            print(f"Error: {e}\n")


def fail(message):
    """Print error and exit."""
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _number_arg(args):
    try:
        return parse_number(args.number)
    except ValueError:
        fail(f"Not a number: {args.number!r}")


# ---- Commands ----

def cmd_interactive(codec, args):
    run_interactive(codec, args.columns)


def cmd_encode(codec, args):
    number = _number_arg(args)
    try:
        if args.seed is None:
            print(codec.encode(number))
        else:
            print(codec.encode_with_seed(number, args.seed))
    except HangulNumberError as e:
        fail(e)


def cmd_all(codec, args):
    number = _number_arg(args)
    try:
        print_all(codec, number, args.columns)
    except HangulNumberError as e:
        fail(e)


def cmd_decode(codec, args):
    failed = False
    for encoded in args.strings:
        try:
            print(codec.decode(encoded))
        except HangulNumberError as e:
            print(f"ERROR: {encoded}: {e}", file=sys.stderr)
            failed = True
    if failed:
        sys.exit(1)


# ---- CLI setup ----

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="hgn",
        description="Hangul Number Converter — base-128 Hangul encoding of integers",
    )
    parser.add_argument("--columns", type=int, default=DEFAULT_COLUMNS,
                        help=f"Encodings per table row (default: {DEFAULT_COLUMNS})")

    sub = parser.add_subparsers(dest="command")

    # interactive
    sub.add_parser("interactive", help="Prompt for numbers (default)")

    # encode
    p_encode = sub.add_parser("encode", help="Encode one number")
    p_encode.add_argument("number", help="Non-negative integer (commas allowed)")
    p_encode.add_argument("--seed", type=int, help="Seed 0-127 (default: random)")

    # all
    p_all = sub.add_parser("all", help="All 128 encodings of a number")
    p_all.add_argument("number", help="Non-negative integer (commas allowed)")

    # decode
    p_decode = sub.add_parser("decode", help="Decode encoded strings")
    p_decode.add_argument("strings", nargs="+", help="Encoded Hangul strings")

    args = parser.parse_args(argv)
    if args.columns < 1:
        parser.error("--columns must be at least 1")

    commands = {
        "interactive": cmd_interactive,
        "encode": cmd_encode,
        "all": cmd_all,
        "decode": cmd_decode,
    }

    commands[args.command or "interactive"](Codec(), args)


if __name__ == "__main__":
    main()
