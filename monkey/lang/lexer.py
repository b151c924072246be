"""Hand-written lexer for Monkey source text.

Scans a source string one token at a time. The cursor only moves forward;
once the input is exhausted every call yields an EOF token.
"""

from __future__ import annotations

from monkey.lang.tokens import INT_MAX, SINGLE_CHAR_TOKENS, Token, TokenKind, lookup_identifier

_WHITESPACE = (" ", "\t", "\r", "\n")
_INT_MAX_DIGITS = str(INT_MAX)


class LexerError(Exception):
    """Raised when a token cannot be decoded (integer literal overflow)."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"Lexer error at L{line}:{column}: {message}")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _exceeds_int_max(digits: str) -> bool:
    """Compare a digit run without leading zeros against INT_MAX.

    int() refuses very long digit strings, so the check works on the text.
    """
    if len(digits) != len(_INT_MAX_DIGITS):
        return len(digits) > len(_INT_MAX_DIGITS)
    return digits > _INT_MAX_DIGITS


class Lexer:
    """Tokenize Monkey source text on demand.

    Usage:
        lexer = Lexer("let five = 5;")
        token = lexer.next_token()
        ...
        tokens = Lexer(source).tokenize()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token.

        Raises:
            LexerError: If an integer literal does not fit in 32 bits. The
                literal is consumed first, so scanning can resume.
        """
        self._skip_whitespace()

        line, col = self._line, self._col
        if self._at_end():
            return Token(TokenKind.EOF, line=line, column=col)

        ch = self._peek()

        if ch in ("=", "!"):
            return self._scan_operator(ch, line, col)

        if ch in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[ch], line=line, column=col, literal=ch)

        if _is_letter(ch):
            return self._scan_identifier(line, col)

        if _is_digit(ch):
            return self._scan_number(line, col)

        self._advance()
        return Token(TokenKind.ILLEGAL, line=line, column=col, literal=ch)

    def tokenize(self) -> list[Token]:
        """Scan the remaining source and return all tokens including EOF."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                return tokens

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan_operator(self, ch: str, line: int, col: int) -> Token:
        """Scan `=`, `==`, `!` or `!=`."""
        self._advance()
        if self._peek() == "=":
            self._advance()
            kind = TokenKind.EQ if ch == "=" else TokenKind.NOT_EQ
            return Token(kind, line=line, column=col, literal=ch + "=")

        kind = TokenKind.ASSIGN if ch == "=" else TokenKind.BANG
        return Token(kind, line=line, column=col, literal=ch)

    def _scan_identifier(self, line: int, col: int) -> Token:
        """Scan an identifier or keyword (maximal munch)."""
        start = self._pos
        while not self._at_end() and (_is_letter(self._peek()) or _is_digit(self._peek())):
            self._advance()

        text = self._source[start : self._pos]
        kind = lookup_identifier(text)
        value = text if kind == TokenKind.IDENTIFIER else None
        return Token(kind, value, line=line, column=col, literal=text)

    def _scan_number(self, line: int, col: int) -> Token:
        """Scan a run of ASCII digits into an INT token."""
        start = self._pos
        while not self._at_end() and _is_digit(self._peek()):
            self._advance()

        text = self._source[start : self._pos]
        digits = text.lstrip("0") or "0"
        if _exceeds_int_max(digits):
            shown = text if len(text) <= 20 else f"{text[:20]}... ({len(text)} digits)"
            raise LexerError(f"Integer literal {shown} exceeds {INT_MAX}", line, col)
        return Token(TokenKind.INT, int(digits), line=line, column=col, literal=text)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._pos]

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, carriage returns and newlines."""
        while not self._at_end() and self._peek() in _WHITESPACE:
            self._advance()
