"""`cqlpy` command line: format, check and dump tokens for CQL files."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
import logging
import os
from pathlib import Path
import sys

from tqdm import tqdm

from cqlpy.format import FormatOptions
from cqlpy.grammar import DEFAULT_VERSION, GrammarTable, grammar_for
from cqlpy.lexer import Lexer, dump_tokens
from cqlpy.pipeline import run_check, run_format
from cqlpy.text import line_column

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process."""
    log_level = (level or os.getenv("CQLPY_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cqlpy", description="Format and check Clinical Quality Language files")
    parser.add_argument("--log-level", default=None, help="Logging level (default: CQLPY_LOG_LEVEL or WARNING)")
    parser.add_argument("--cql-version", default=DEFAULT_VERSION, help=f"CQL grammar version (default: {DEFAULT_VERSION})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_parser = subparsers.add_parser("format", help="Reformat CQL files")
    format_parser.add_argument("paths", nargs="+", type=Path)
    format_parser.add_argument("--indent-size", type=int, default=2, help="Spaces per indent level (default: 2)")
    mode = format_parser.add_mutually_exclusive_group()
    mode.add_argument("--write", action="store_true", help="Rewrite files in place")
    mode.add_argument("--check", action="store_true", help="Exit 1 if any file would be reformatted")
    format_parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")

    check_parser = subparsers.add_parser("check", help="Report unbalanced delimiters and lexer problems")
    check_parser.add_argument("paths", nargs="+", type=Path)
    check_parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")

    tokens_parser = subparsers.add_parser("tokens", help="Dump the classified token stream of one file")
    tokens_parser.add_argument("path", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        grammar = grammar_for(args.cql_version)
    except ValueError as exc:
        parser.error(str(exc))

    match args.command:
        case "format":
            try:
                options = FormatOptions(indent_size=args.indent_size)
            except ValueError as exc:
                parser.error(str(exc))
            return _format_files(
                args.paths,
                options,
                grammar,
                write=args.write,
                check=args.check,
                show_progress=not args.no_progress,
            )
        case "check":
            return _check_files(args.paths, grammar, show_progress=not args.no_progress)
        case "tokens":
            lexer = Lexer(_read(args.path), grammar=grammar)
            dump_tokens(lexer.lex(), lexer.diagnostics)
            return 0
    return 2


def _format_files(
    paths: list[Path],
    options: FormatOptions,
    grammar: GrammarTable,
    *,
    write: bool,
    check: bool,
    show_progress: bool,
) -> int:
    exit_code = 0
    for path in _iterate(paths, "format", show_progress):
        source = _read(path)
        result = run_format(source, options, grammar=grammar)
        if not result.success:
            for error in result.errors:
                print(f"{path}: {error}", file=sys.stderr)
            exit_code = 1
            continue
        if check:
            if result.changed:
                print(f"{path}: would reformat")
                exit_code = 1
        elif write:
            if result.changed:
                logger.info("Rewriting %s", path)
                path.write_text(result.formatted, encoding="utf-8")
        else:
            sys.stdout.write(result.formatted)
    return exit_code


def _check_files(paths: list[Path], grammar: GrammarTable, *, show_progress: bool) -> int:
    exit_code = 0
    for path in _iterate(paths, "check", show_progress):
        source = _read(path)
        result = run_check(source, grammar=grammar)
        for diagnostic in result.diagnostics:
            line, column = line_column(source, diagnostic.range.start.value)
            print(f"{path}:{line}:{column}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}")
        if result.has_errors:
            exit_code = 1
    return exit_code


def _iterate(paths: list[Path], label: str, show_progress: bool) -> Iterable[Path]:
    if show_progress and len(paths) > 1:
        return tqdm(paths, desc=label, unit="file")
    return paths


def _read(path: Path) -> str:
    logger.debug("Reading %s", path)
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
