"""Command line entry point that compiles a XAML file into a C++ header."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from xamlkit.elements import UnknownElementError
from xamlkit.formatter import FormatterError
from xamlkit.xamlclass import XamlClass, XamlParseError

__all__ = ["main"]

_PARSE_FAILURE = 1
_CONTENT_FAILURE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xut",
        description="xut compiles xaml files into intermediate hpp files",
        add_help=False,
    )
    parser.add_argument("-o", "--output", default="", help="output hpp")
    parser.add_argument("-i", "--input", default="", help="input xaml")
    parser.add_argument("-h", "--header", action="store_true", help="header file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the input XAML file and write the header; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        compiled = XamlClass.from_file(args.input)
    except XamlParseError as exc:
        print(exc, file=sys.stderr)
        print(f"Failed{_PARSE_FAILURE}", file=sys.stderr)
        return -1
    except (FormatterError, UnknownElementError) as exc:
        print(exc, file=sys.stderr)
        print(f"Failed{_CONTENT_FAILURE}", file=sys.stderr)
        return -1
    try:
        compiled.write_to_file(args.output)
    except OSError as exc:
        print(f"Failed to write {args.output!r}: {exc.strerror}", file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())