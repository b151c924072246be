"""
Unit tests for the statement-level parser.
"""

import pytest

from monkey.lang.ast_nodes import LetStatement, ReturnStatement
from monkey.lang.lexer import Lexer
from monkey.lang.parser import Parser, parse
from monkey.lang.tokens import Token, TokenKind


@pytest.fixture
def make_parser():
    def _make(source):
        return Parser(Lexer(source))

    return _make


class TestLetStatements:
    """Tests for `let` statement parsing."""

    def test_let_statements(self):
        program, errors = parse(
            """
let x = 5;
let y = 10;
let foobar = 838383;
"""
        )

        assert errors == []
        assert len(program.statements) == 3
        for stmt, name in zip(program.statements, ["x", "y", "foobar"]):
            assert isinstance(stmt, LetStatement)
            assert stmt.token_literal() == "let"
            assert stmt.name == Token(TokenKind.IDENTIFIER, name)
            assert stmt.value is None

    def test_let_records_line(self):
        program, _ = parse("\n\nlet a = 1;")
        assert program.statements[0].line == 3

    def test_let_expression_tokens_are_skipped(self):
        program, errors = parse("let add = fn(x, y) { x + y }; let z = 1;")
        assert errors == []
        assert [str(s.name.value) for s in program.statements] == ["add", "z"]

    def test_missing_identifier(self):
        program, errors = parse("let = 5;")
        assert program.statements == []
        assert errors == ["expected next token to be Identifier, got Assign instead"]

    def test_missing_assign(self):
        program, errors = parse("let x 5;")
        assert program.statements == []
        assert errors == ["expected next token to be Assign, got Int instead"]

    def test_keyword_as_name(self):
        _, errors = parse("let if = 1;")
        assert errors == ["expected next token to be Identifier, got If instead"]

    def test_multiple_errors_are_collected(self):
        program, errors = parse("let = 10;\nlet 838383;\nlet x 1;\nlet ok = 2;")

        assert errors == [
            "expected next token to be Identifier, got Assign instead",
            "expected next token to be Identifier, got Int instead",
            "expected next token to be Assign, got Int instead",
        ]
        assert len(program.statements) == 1
        assert program.statements[0].name.value == "ok"

    def test_missing_semicolon_runs_to_eof(self):
        program, errors = parse("let x = 5 let y = 6;")
        assert errors == []
        assert [s.name.value for s in program.statements] == ["x"]

    def test_let_at_end_of_input(self):
        program, errors = parse("let")
        assert program.statements == []
        assert errors == ["expected next token to be Identifier, got Eof instead"]


class TestReturnStatements:
    """Tests for `return` statement parsing."""

    def test_return_statements(self):
        program, errors = parse("return 5;\nreturn 10;\nreturn 993322;")

        assert errors == []
        assert len(program.statements) == 3
        for stmt in program.statements:
            assert isinstance(stmt, ReturnStatement)
            assert stmt.token_literal() == "return"
            assert stmt.value is None

    def test_bare_return(self):
        program, errors = parse("return;")
        assert errors == []
        assert len(program.statements) == 1

    def test_return_without_semicolon(self):
        program, errors = parse("return x")
        assert errors == []
        assert len(program.statements) == 1

    def test_mixed_statement_order(self):
        program, _ = parse("let a = 1; return a; let b = 2;")
        assert [type(s) for s in program.statements] == [
            LetStatement,
            ReturnStatement,
            LetStatement,
        ]


class TestParserProgram:
    """Tests for whole-program behavior."""

    @pytest.mark.parametrize("source", ["", "   ", "\n\t\r\n"])
    def test_whitespace_only(self, source):
        program, errors = parse(source)
        assert program.statements == []
        assert errors == []

    def test_non_statement_tokens_are_ignored(self):
        program, errors = parse("5 + 5; x; @")
        assert program.statements == []
        assert errors == []

    def test_errors_accessor_returns_copy(self, make_parser):
        parser = make_parser("let = 1;")
        parser.parse_program()
        parser.errors.clear()
        assert len(parser.errors) == 1

    def test_overflow_becomes_diagnostic(self):
        program, errors = parse("let big = 99999999999; let ok = 1;")
        assert len(errors) == 1
        assert "99999999999" in errors[0]
        assert [s.name.value for s in program.statements] == ["big", "ok"]

    def test_huge_literal_becomes_diagnostic(self):
        program, errors = parse("let big = " + "9" * 5000 + "; let ok = 1;")
        assert len(errors) == 1
        assert "exceeds" in errors[0]
        assert [s.name.value for s in program.statements] == ["big", "ok"]

    def test_overflow_in_name_position(self):
        program, errors = parse("let 99999999999 = 1;")
        assert program.statements == []
        assert errors[1] == "expected next token to be Identifier, got Illegal instead"


class TestParserWindow:
    """Tests for the two-token lookahead protocol."""

    def test_window_is_primed(self, make_parser):
        parser = make_parser("let x")
        assert parser.cur_token == Token(TokenKind.LET)
        assert parser.peek_token == Token(TokenKind.IDENTIFIER, "x")

    def test_next_token_shifts(self, make_parser):
        parser = make_parser("a b")
        parser.next_token()
        assert parser.cur_token == Token(TokenKind.IDENTIFIER, "b")
        assert parser.peek_token == Token(TokenKind.EOF)

    def test_expect_peek_match_advances(self, make_parser):
        parser = make_parser("let x")
        assert parser.expect_peek_and_advance(TokenKind.IDENTIFIER)
        assert parser.cur_token == Token(TokenKind.IDENTIFIER, "x")
        assert parser.errors == []

    def test_expect_peek_compares_kind_only(self, make_parser):
        parser = make_parser("let anything")
        assert parser.expect_peek_and_advance(TokenKind.IDENTIFIER)

    def test_expect_peek_mismatch_does_not_advance(self, make_parser):
        parser = make_parser("let 5")
        assert not parser.expect_peek_and_advance(TokenKind.IDENTIFIER)
        assert parser.cur_token == Token(TokenKind.LET)
        assert parser.peek_token == Token(TokenKind.INT, 5)
        assert parser.errors == ["expected next token to be Identifier, got Int instead"]

    def test_parse_statement_dispatch(self, make_parser):
        assert make_parser("x = 1;").parse_statement() is None
        assert isinstance(make_parser("return 1;").parse_statement(), ReturnStatement)
        assert isinstance(make_parser("let a = 1;").parse_statement(), LetStatement)

    def test_parse_let_statement_leaves_cur_on_semicolon(self, make_parser):
        parser = make_parser("let a = 1 + 2; return")
        parser.parse_let_statement()
        assert parser.cur_token == Token(TokenKind.SEMICOLON)
        assert parser.peek_token == Token(TokenKind.RETURN)
