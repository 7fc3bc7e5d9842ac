"""Lexer turning Owl source text into tokens."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .tokens import Token, TokenType

_EOF = ""

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "%": TokenType.PERCENT,
}

# first char -> (expected second char, kind when matched, kind otherwise)
_PAIRED = {
    "!": ("=", TokenType.BANG_EQUAL, TokenType.BANG),
    "=": ("=", TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS),
    "&": ("&", TokenType.AND, TokenType.BANG),
    "|": ("|", TokenType.OR, TokenType.BANG),
}

_KEYWORDS = {
    "class": TokenType.CLASS,
    "var": TokenType.VAR,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "new": TokenType.NEW,
    "init": TokenType.INIT,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "nil": TokenType.NIL,
    "return": TokenType.RETURN,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "print": TokenType.PRINT,
    "fun": TokenType.FUN,
    "super": TokenType.SUPER,
    "int": TokenType.INT,
    "string": TokenType.STRING_TYPE,
    "bool": TokenType.BOOL,
    "float": TokenType.FLOAT,
    "double": TokenType.DOUBLE,
    "void": TokenType.VOID,
}


def _is_space(c: str) -> bool:
    return c != _EOF and c in " \t\n\v\f\r"


def _is_digit(c: str) -> bool:
    return c != _EOF and "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return c != _EOF and c.isascii() and c.isalpha()


def _is_word_char(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c) or c == "_"


class LexerError(Exception):
    """Raised when the lexer cannot read its input."""

    def __init__(self, message: str = "Lexer error occurred") -> None:
        super().__init__(message)


class Lexer:
    """Scans Owl source text into a list of tokens.

    Problems in the text are reported on ``err`` (standard error by
    default) and yield an end-of-file token, after which scanning goes on.
    """

    def __init__(self, source: str, err: TextIO | None = None) -> None:
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: list[Token] = []
        self._text = source
        self._pos = 0
        self._err = err

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Lexer:
        """Create a lexer over the contents of the file at ``path``."""
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise LexerError() from exc
        return cls(data.decode("latin-1"))

    def scan_tokens(self) -> list[Token]:
        """Scan the whole input, leaving out comments."""
        while not self._is_finished():
            self.start = self.current
            token = self.scan_token()
            if token.type is not TokenType.COMMENT:
                self.tokens.append(token)
        return list(self.tokens)

    def scan_token(self) -> Token:
        """Scan and return the next token."""
        while True:
            c = self._advance()
            if self._is_finished():
                return self._eof_token()
            if _is_space(c) and c != "\n":
                self._skip_blanks()
                continue
            if c == "\n":
                return Token(TokenType.NEWLINE, "\\n", self.line - 1)
            if c == "\\":
                if self._peek() == "\n":
                    self._advance()
                    self._skip_blanks()
                    continue
                self._diagnose(f"Unexpected character: '\\' at line: {self.line}")
                return self._eof_token()
            break

        if c in _SINGLE_CHAR:
            return Token(_SINGLE_CHAR[c], c, self.line)
        if c == "#":
            self._skip_line()
            return Token(TokenType.COMMENT, "#", self.line)
        if c in _PAIRED:
            second, matched, fallback = _PAIRED[c]
            kind = matched if self._advance() == second else fallback
            return Token(kind, c, self.line)
        if _is_digit(c):
            return self._number(c)
        if _is_alpha(c) or c == "_":
            return self._word(c)
        if c == '"':
            return self._string()

        self._diagnose(
            f"Unexpected character: '{c}' at line: {self.line}, "
            f"at column: {self.current - self.start}"
        )
        return self._eof_token()

    def _number(self, first: str) -> Token:
        chars = [first]
        c = self._advance()
        while _is_digit(c):
            chars.append(c)
            c = self._advance()
        self._putback(c)
        return Token(TokenType.NUMBER, "".join(chars), self.line)

    def _word(self, first: str) -> Token:
        chars = [first]
        c = self._advance()
        while _is_word_char(c):
            chars.append(c)
            c = self._advance()
        self._putback(c)
        word = "".join(chars)
        return Token(_KEYWORDS.get(word, TokenType.IDENTIFIER), word, self.line)

    def _string(self) -> Token:
        chars = []
        while not self._is_finished():
            c = self._advance()
            if c == '"':
                break
            if c == "\n":
                self._diagnose(f"Unterminated string at line: {self.line}")
                return self._eof_token()
            chars.append(c)
        if self._is_finished():
            self._diagnose(f"Unterminated string at line: {self.line}")
            return self._eof_token()
        return Token(TokenType.STRING, "".join(chars), self.line)

    def _eof_token(self) -> Token:
        return Token(TokenType.EOF_TOKEN, "", self.line)

    def _diagnose(self, message: str) -> None:
        print(message, file=self._err or sys.stderr)

    def _advance(self) -> str:
        self.current += 1
        if self._pos >= len(self._text):
            return _EOF
        c = self._text[self._pos]
        self._pos += 1
        if c == "\n":
            self.line += 1
        return c

    def _putback(self, c: str) -> None:
        # Putting back past the end of input has no effect; the line
        # counter is deliberately left as it is.
        if c != _EOF:
            self._pos -= 1

    def _peek(self) -> str:
        if self._is_finished():
            return "\0"
        return self._text[self._pos]

    def _is_finished(self) -> bool:
        return self._pos >= len(self._text)

    def _skip_blanks(self) -> None:
        c = self._peek()
        while not self._is_finished() and _is_space(c) and c != "\n":
            self._advance()
            c = self._peek()

    def _skip_line(self) -> None:
        c = self._peek()
        while not self._is_finished() and c != "\n":
            self._advance()
            c = self._peek()