# owllang

`owllang` is a lexer for the Owl programming language. It reads Owl source
text and splits it into tokens. These are punctuation, operators, literals,
keywords, type keywords and newlines. Comments are dropped. The package also
has a command that prints the token stream of an `.ow` file.

## Installation

```
pip install .
```

## Command line

```
owl program.ow
```

The command prints the type name of each token, one per line. For example:

```
VAR
IDENTIFIER
EQUAL
NUMBER
NEWLINE
EOF
```

The command takes exactly one argument. If it gets any other number of
arguments, it prints `Usage: owl filename.ow` on standard error and exits with
status 1. If the argument does not end in `.ow`, it says so on standard error
and exits with status 1. If the file cannot be opened, it prints
`Lexer error occurred` on standard error and exits with status 0.

## Language notes

- A comment starts with `#` and runs to the end of the line.
- A backslash at the end of a line joins that line to the next. A backslash
  anywhere else is an error.
- Strings are written in double quotes and may not span lines. The token's
  lexeme is the text between the quotes.
- Numbers are runs of decimal digits. `3.14` comes out as `NUMBER DOT NUMBER`.
- Identifiers start with an ASCII letter or `_`. After that they may also hold
  digits.
- Keywords: `class var if else while for new init this true false nil return
  break continue print fun super`.
- Type keywords: `int string bool float double void`. The type `string` has
  the token type `STRING_TYPE`.
- Two-character operators are `!=`, `==`, `>=`, `<=`, `&&` and `||`. The lexeme
  of every operator token is its first character. A lone `&` or `|` gives
  `BANG`, and the character after it is consumed.
- A newline gives a `NEWLINE` token. Its lexeme is the two characters `\n`,
  and its line is the line it ends.
- The last character of the input is not lexed. The scanner returns an `EOF`
  token in its place.

Problems in the text are reported on standard error. The report is a message
such as `Unexpected character: '@' at line: 3, at column: 1` or
`Unterminated string at line: 2`. The scanner then yields an `EOF` token and
goes on scanning.

## Library use

```python
from owllang.lexer import Lexer
from owllang.tokens import token_name

lexer = Lexer.from_file("program.ow")
for token in lexer.scan_tokens():
    print(token_name(token), repr(token.lexeme), token.line)
```

- `Lexer(source, err=None)` scans a string. Diagnostics go to `err`, or to
  standard error when `err` is not given.
- `Lexer.from_file(path)` reads a file as Latin-1 text. It raises `LexerError`
  when the file cannot be opened.
- `scan_tokens()` scans the remaining input and returns all tokens except
  comments.
- `scan_token()` returns one token at a time.

`owllang.tokens` defines the `TokenType` enum and the frozen `Token`
dataclass. A `Token` has the fields `type`, `lexeme` and `line`.
`token_name(token)` returns the display name of a token's type. This is the
enum member name, except that `EOF_TOKEN` is shown as `EOF`.

`owllang.util` has three helpers:

- `has_suffix(text, suffix)`
- `report(line, where, msg)`, which prints `[line N] Error <where>: <msg>` on
  standard output.
- `error(line, msg)`, which prints the same report with an empty location.

## What it does not do

The package only turns source text into tokens. It does not parse Owl
programs and it cannot run them.

## Running the tests

```
pip install .[test]
pytest
```