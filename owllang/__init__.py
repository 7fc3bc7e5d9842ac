"""Lexer and command-line token printer for the Owl programming language."""

__version__ = "0.1.0"
__all__ = ["tokens", "util", "lexer", "cli"]