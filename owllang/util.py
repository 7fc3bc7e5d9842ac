"""Small helpers shared by the command line and the lexer."""

from __future__ import annotations


def has_suffix(text: str, suffix: str) -> bool:
    """Tell whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def report(line: int, where: str, msg: str) -> None:
    """Print an error report for ``line`` on standard output."""
    print(f"[line {line}] Error {where}: {msg}")


def error(line: int, msg: str) -> None:
    """Report an error on ``line`` with no location detail."""
    report(line, "", msg)