"""AST node definitions for Monkey programs.

These dataclasses form the abstract syntax tree produced by the parser:

    Program
      -> statements (in source order)
          -> LetStatement (name, value)
          -> ReturnStatement (value)

Expression nodes are defined for the value slots but the parser does not
build them yet; every statement's ``value`` is currently None and renders as
``<expr>``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from monkey.lang.tokens import Token, TokenKind

# Rendered in place of an expression the parser skipped
UNPARSED_EXPRESSION = "<expr>"


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass
class Identifier:
    """A bare name used as an expression."""

    token: Token

    def __post_init__(self) -> None:
        if self.token.kind != TokenKind.IDENTIFIER:
            raise ValueError(f"Identifier needs an Identifier token, got {self.token.kind.value}")

    @property
    def name(self) -> str:
        return str(self.token.value)

    def token_literal(self) -> str:
        return self.token.literal or self.name

    def __str__(self) -> str:
        return self.name


@dataclass
class IntegerLiteral:
    """An integer constant used as an expression."""

    token: Token

    def __post_init__(self) -> None:
        if self.token.kind != TokenKind.INT:
            raise ValueError(f"IntegerLiteral needs an Int token, got {self.token.kind.value}")

    @property
    def value(self) -> int:
        return int(self.token.value)

    def token_literal(self) -> str:
        return self.token.literal or str(self.value)

    def __str__(self) -> str:
        return str(self.value)


Expression = Identifier | IntegerLiteral


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass
class LetStatement:
    """A `let <name> = <expr>;` binding."""

    name: Token
    value: Expression | None = None
    line: int = 0

    def token_literal(self) -> str:
        return "let"

    def __str__(self) -> str:
        value = UNPARSED_EXPRESSION if self.value is None else self.value
        return f"let {self.name.value} = {value};"


@dataclass
class ReturnStatement:
    """A `return <expr>;` statement."""

    value: Expression | None = None
    line: int = 0

    def token_literal(self) -> str:
        return "return"

    def __str__(self) -> str:
        value = UNPARSED_EXPRESSION if self.value is None else self.value
        return f"return {value};"


Statement = LetStatement | ReturnStatement


# ---------------------------------------------------------------------------
# Root node
# ---------------------------------------------------------------------------


@dataclass
class Program:
    """Root of the AST: the top-level statements of one parse, in order."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if not self.statements:
            return ""
        return self.statements[0].token_literal()

    def __str__(self) -> str:
        return "\n".join(str(stmt) for stmt in self.statements)
