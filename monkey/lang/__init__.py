"""Monkey language front end: tokens, lexer, AST, and statement parser.

Usage:
    from monkey.lang import Lexer, Parser

    parser = Parser(Lexer(source))
    program = parser.parse_program()
    errors = parser.errors
"""

from monkey.lang.ast_nodes import (
    Identifier,
    IntegerLiteral,
    LetStatement,
    Program,
    ReturnStatement,
)
from monkey.lang.lexer import Lexer, LexerError
from monkey.lang.parser import Parser, parse
from monkey.lang.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "Identifier",
    "IntegerLiteral",
    "LetStatement",
    "Lexer",
    "LexerError",
    "Parser",
    "Program",
    "ReturnStatement",
    "Token",
    "TokenKind",
    "parse",
]
