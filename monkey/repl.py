"""Interactive read-lex-print loop for Monkey.

Reads one line at a time and echoes the tokens it scans to (tokens mode),
or the statements and diagnostics it parses to (parse mode). Every line
gets a fresh Lexer; nothing carries over between lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from monkey.core.config import REPL_MODES, MonkeyConfig, get_config
from monkey.lang.lexer import Lexer, LexerError
from monkey.lang.parser import Parser
from monkey.lang.tokens import TokenKind

logger = logging.getLogger(__name__)


def start(
    stdin: TextIO | None = None,
    console: Console | None = None,
    config: MonkeyConfig | None = None,
    mode: str | None = None,
) -> None:
    """Run the REPL until end-of-input or an exit command.

    Args:
        stdin: Stream to read lines from. Defaults to sys.stdin.
        console: Rich console for output. Defaults to a new Console.
        config: Settings for prompt and exit commands. Defaults to get_config().
        mode: "tokens" or "parse". Defaults to config.repl_mode.
    """
    stdin = stdin or sys.stdin
    console = console or Console()
    config = config or get_config()
    mode = mode or config.repl_mode
    if mode not in REPL_MODES:
        raise ValueError(f"Unknown REPL mode {mode!r}, expected one of {REPL_MODES}")

    handle_line = _print_tokens if mode == "tokens" else _print_program

    while True:
        console.print(config.prompt, end="", markup=False, highlight=False)
        line = stdin.readline()

        if not line:
            # End of input (Ctrl+D)
            console.print()
            break

        if line.strip() in config.exit_commands:
            break

        handle_line(line, console)


def _print_tokens(line: str, console: Console) -> None:
    """Echo every token in the line, up to and including EOF."""
    lexer = Lexer(line)
    while True:
        try:
            token = lexer.next_token()
        except LexerError as exc:
            logger.warning("%s", exc)
            console.print(str(exc), style="red", markup=False, highlight=False)
            continue

        console.print(str(token), markup=False, highlight=False)
        if token.kind == TokenKind.EOF:
            return


def _print_program(line: str, console: Console) -> None:
    """Echo the statements parsed from the line, then any diagnostics."""
    parser = Parser(Lexer(line))
    program = parser.parse_program()

    for stmt in program.statements:
        console.print(str(stmt), markup=False, highlight=False)
    for error in parser.errors:
        console.print(f"error: {error}", style="red", markup=False, highlight=False)
