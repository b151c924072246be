"""Monkey: lexer and statement parser for a small curly-brace language.

    from monkey import Lexer, Parser

    parser = Parser(Lexer("let x = 5;"))
    program = parser.parse_program()
"""

__version__ = "0.1.0"

from monkey.lang import Lexer, LexerError, Parser, Program, Token, TokenKind, parse

__all__ = [
    "__version__",
    "Lexer",
    "LexerError",
    "Parser",
    "Program",
    "Token",
    "TokenKind",
    "parse",
]
