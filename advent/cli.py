"""Command line entry point that scaffolds a day of puzzles."""

from __future__ import annotations

import argparse
import sys

import jinja2
import requests

from advent.workspace import bootstrap_day

_U16_MAX = 0xFFFF


def _u16(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not 0 <= number <= _U16_MAX:
        raise argparse.ArgumentTypeError(f"number out of range: {value!r}")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent",
        description="Register a day, fetch its input and create its solution file.",
    )
    parser.add_argument("-d", "--day", type=_u16, required=True)
    parser.add_argument("-s", dest="session_id", required=True)
    parser.add_argument("-y", "--year", type=_u16, required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    print(f"Args {args.day}")
    try:
        bootstrap_day(args.year, args.day, args.session_id)
    except (OSError, requests.RequestException, jinja2.TemplateError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())