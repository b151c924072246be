"""Monkey CLI: front end for the Monkey language.

Usage:
    monkey repl [--mode tokens|parse]
    monkey lex <source_file>
    monkey parse <source_file>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from monkey import __version__
from monkey.core.config import REPL_MODES, get_config


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey: lexer, statement parser and REPL for the Monkey language",
    )
    parser.add_argument("--version", action="version", version=f"monkey {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: MONKEY_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- repl ---
    repl_parser = subparsers.add_parser("repl", help="Start the interactive REPL")
    repl_parser.add_argument(
        "--mode",
        choices=REPL_MODES,
        default=None,
        help="Echo tokens or parsed statements (default: MONKEY_REPL_MODE or tokens)",
    )

    # --- lex ---
    lex_parser = subparsers.add_parser("lex", help="Print the tokens of a source file")
    lex_parser.add_argument("source_file", type=str, help="Path to Monkey source file")

    # --- parse ---
    parse_parser = subparsers.add_parser("parse", help="Parse a source file and report errors")
    parse_parser.add_argument("source_file", type=str, help="Path to Monkey source file")

    return parser


def _read_source(path_str: str) -> str | None:
    path = Path(path_str)
    if not path.is_file():
        print(f"Error: Source file not found: {path}", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Cannot read {path}: {exc}", file=sys.stderr)
        return None


def cmd_repl(args: argparse.Namespace) -> int:
    """Run the interactive REPL on stdin."""
    from monkey.repl import start

    start(mode=args.mode)
    return 0


def cmd_lex(args: argparse.Namespace) -> int:
    """Print every token of a source file with its position."""
    from monkey.lang.lexer import Lexer, LexerError
    from monkey.lang.tokens import TokenKind

    source = _read_source(args.source_file)
    if source is None:
        return 1

    lexer = Lexer(source)
    while True:
        try:
            token = lexer.next_token()
        except LexerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        print(f"{token.line}:{token.column}\t{token}")
        if token.kind == TokenKind.EOF:
            return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse a source file, print its statements and any diagnostics."""
    from monkey.lang.parser import parse

    source = _read_source(args.source_file)
    if source is None:
        return 1

    program, errors = parse(source)
    for stmt in program.statements:
        print(f"  [line {stmt.line}] {stmt}")
    print(f"Parsed {len(program.statements)} statements.")

    if errors:
        for error in errors:
            print(f"  [error] {error}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    level_name = (args.log_level or config.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        print(f"Error: Unknown log level: {level_name}", file=sys.stderr)
        return 1
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    dispatch = {
        "repl": cmd_repl,
        "lex": cmd_lex,
        "parse": cmd_parse,
    }

    if args.command in dispatch:
        return dispatch[args.command](args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
