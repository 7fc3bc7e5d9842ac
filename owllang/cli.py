"""Command line entry point: print the tokens of an Owl source file."""

from __future__ import annotations

import sys

from .lexer import Lexer, LexerError
from .tokens import token_name
from .util import has_suffix


def main(argv: list[str] | None = None) -> int:
    """Lex the file named on the command line and print its token kinds."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: owl filename.ow", file=sys.stderr)
        return 1

    filename = args[0]
    if not has_suffix(filename, ".ow"):
        print("File suffix is not .ow", file=sys.stderr)
        print("Please provide a valid Owl file.", file=sys.stderr)
        return 1

    try:
        tokens = Lexer.from_file(filename).scan_tokens()
    except LexerError as exc:
        print(exc, file=sys.stderr)
        return 0

    for token in tokens:
        print(token_name(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())