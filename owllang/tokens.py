"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the Owl lexer can produce."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COMMA = auto()
    DOT = auto()
    SEMICOLON = auto()
    COLON = auto()

    # Operators
    MINUS = auto()
    PLUS = auto()
    SLASH = auto()
    STAR = auto()
    PERCENT = auto()
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    AND = auto()
    OR = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Special tokens
    COMMENT = auto()
    NEWLINE = auto()

    # Keywords
    CLASS = auto()
    VAR = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    NEW = auto()
    INIT = auto()
    THIS = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()
    RETURN = auto()
    BREAK = auto()
    CONTINUE = auto()
    PRINT = auto()
    FUN = auto()
    SUPER = auto()

    # Type keywords
    INT = auto()
    STRING_TYPE = auto()
    BOOL = auto()
    FLOAT = auto()
    DOUBLE = auto()
    VOID = auto()

    # End of input
    EOF_TOKEN = auto()


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and the line it was read on."""

    type: TokenType
    lexeme: str
    line: int


_DISPLAY_NAMES = {TokenType.EOF_TOKEN: "EOF"}


def token_name(token: Token) -> str:
    """Return the display name of a token's kind."""
    return _DISPLAY_NAMES.get(token.type, token.type.name)