"""Hand-written recursive descent parser for Monkey programs.

Pulls tokens from a Lexer through a two-token window (current and peek) and
produces a Program. Malformed statements are dropped and reported through
the ``errors`` list instead of raising, so one parse can surface several
independent problems.

Only statements are parsed. The tokens making up an expression are skipped
up to the terminating semicolon.
"""

from __future__ import annotations

import logging

from monkey.lang.ast_nodes import LetStatement, Program, ReturnStatement, Statement
from monkey.lang.lexer import Lexer, LexerError
from monkey.lang.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Parser:
    """Parse the token stream of a Lexer into a Program.

    Usage:
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        if parser.errors:
            ...
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._errors: list[str] = []
        self.cur_token = Token(TokenKind.ILLEGAL)
        self.peek_token = Token(TokenKind.ILLEGAL)

        # Fill both cur_token and peek_token
        self.next_token()
        self.next_token()

    @property
    def errors(self) -> list[str]:
        """Diagnostics collected so far, in the order they were found."""
        return list(self._errors)

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def next_token(self) -> None:
        """Shift the peek token into place and pull a new one from the lexer."""
        self.cur_token = self.peek_token
        try:
            self.peek_token = self._lexer.next_token()
        except LexerError as exc:
            logger.warning("%s", exc)
            self._errors.append(str(exc))
            self.peek_token = Token(TokenKind.ILLEGAL, line=exc.line, column=exc.column)

    def parse_program(self) -> Program:
        """Parse statements until EOF."""
        program = Program()

        while not self._cur_token_is(TokenKind.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()

        logger.debug(
            "Parsed %d statements with %d errors", len(program.statements), len(self._errors)
        )
        return program

    def parse_statement(self) -> Statement | None:
        """Parse the statement starting at the current token, if any."""
        if self.cur_token.kind == TokenKind.LET:
            return self.parse_let_statement()
        if self.cur_token.kind == TokenKind.RETURN:
            return self.parse_return_statement()
        return None

    def parse_let_statement(self) -> LetStatement | None:
        """Parse `let <identifier> = ... ;`."""
        line = self.cur_token.line

        if not self.expect_peek_and_advance(TokenKind.IDENTIFIER):
            return None
        name = self.cur_token

        if not self.expect_peek_and_advance(TokenKind.ASSIGN):
            return None

        # TODO: parse the bound expression once expression parsing lands
        self._skip_to_semicolon()
        return LetStatement(name=name, line=line)

    def parse_return_statement(self) -> ReturnStatement:
        """Parse `return ... ;`."""
        line = self.cur_token.line
        self.next_token()

        self._skip_to_semicolon()
        return ReturnStatement(line=line)

    def expect_peek_and_advance(self, kind: TokenKind) -> bool:
        """Advance if the peek token has the given kind, else record an error.

        Only the kind is compared; the payload is ignored. On mismatch the
        window is left where it is.
        """
        if self._peek_token_is(kind):
            self.next_token()
            return True

        self._peek_error(kind)
        return False

    # ------------------------------------------------------------------
    # Token window helpers
    # ------------------------------------------------------------------

    def _cur_token_is(self, kind: TokenKind) -> bool:
        return self.cur_token.kind == kind

    def _peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def _peek_error(self, kind: TokenKind) -> None:
        self._errors.append(
            f"expected next token to be {kind.value}, got {self.peek_token.kind.value} instead"
        )

    def _skip_to_semicolon(self) -> None:
        while not self._cur_token_is(TokenKind.SEMICOLON) and not self._cur_token_is(
            TokenKind.EOF
        ):
            self.next_token()


def parse(source: str) -> tuple[Program, list[str]]:
    """Parse source text, returning the Program and its diagnostics."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors
