"""Token types for the Monkey lexer.

Defines the closed set of token kinds, the keyword table, and the Token
dataclass shared by the lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Int literals are signed 32-bit values.
INT_MAX = 2**31 - 1


class TokenKind(str, Enum):
    """All token types recognized by the Monkey lexer.

    Values double as the display names used in diagnostics.
    """

    ILLEGAL = "Illegal"
    EOF = "Eof"

    # Identifiers and literals
    IDENTIFIER = "Identifier"
    INT = "Int"

    # Operators
    ASSIGN = "Assign"  # =
    PLUS = "Plus"  # +
    MINUS = "Minus"  # -
    BANG = "Bang"  # !
    ASTERISK = "Asterisk"  # *
    SLASH = "Slash"  # /
    LT = "Lt"  # <
    GT = "Gt"  # >
    EQ = "Eq"  # ==
    NOT_EQ = "NotEq"  # !=

    # Delimiters
    COMMA = "Comma"  # ,
    SEMICOLON = "Semicolon"  # ;
    LPAREN = "LParen"  # (
    RPAREN = "RParen"  # )
    LBRACE = "LBrace"  # {
    RBRACE = "RBrace"  # }

    # Keywords
    FUNCTION = "Function"  # fn
    LET = "Let"  # let
    TRUE = "True"  # true
    FALSE = "False"  # false
    IF = "If"  # if
    ELSE = "Else"  # else
    RETURN = "Return"  # return


# Map keyword strings to token kinds
KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}

# Single-character tokens emitted without lookahead
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}


def lookup_identifier(text: str) -> TokenKind:
    """Classify scanned identifier text as a keyword or a plain identifier."""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer.

    Only ``kind`` and ``value`` take part in equality. ``value`` is the
    identifier text for IDENTIFIER, the decoded integer for INT, and None
    for every other kind.
    """

    kind: TokenKind
    value: str | int | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    literal: str = field(default="", compare=False)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, L{self.line}:{self.column})"
