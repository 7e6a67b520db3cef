"""Command-line host for Lox: runs a script file or an interactive prompt."""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from typing import List, TextIO

from lox.lox import Lox
from lox.lox_ast_printer import LoxASTPrinter
from lox.lox_config import LoxConfig
from lox.lox_error import LoxError, LoxRuntimeError
from lox.lox_parser import LoxParser


# Exit codes follow the BSD sysexits convention
EXIT_OK = 0
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70


def setup_logging(config: LoxConfig) -> None:
    """Configure logging to stderr, or to a rotating log file when one is configured."""
    handlers: List[logging.Handler] = []
    if config.log_file:
        handlers.append(RotatingFileHandler(
            config.log_file,
            maxBytes=1024*1024,
            backupCount=4,
            encoding='utf-8'
        ))

    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def report_error(error: LoxError, stream: TextIO) -> None:
    """Write one line per diagnostic carried by the error."""
    for diagnostic in error.errors:
        print(diagnostic.report(), file=stream)


def run_source(lox: Lox, source: str, config: LoxConfig, output: TextIO) -> None:
    """
    Run source text, dumping tokens and syntax trees first if configured.

    Raises:
        LoxError: If lexing, parsing or execution fails
    """
    tokens = lox.tokenize(source)
    if config.show_tokens:
        for token in tokens:
            print(f"{token.type.name} {token.lexeme}", file=output)

    statements = LoxParser(tokens).parse()
    if config.show_ast:
        printer = LoxASTPrinter()
        for statement in statements:
            print(printer.print(statement), file=output)

    lox.execute(statements)


def run_file(path: str, config: LoxConfig) -> int:
    """
    Run a script file.

    Returns:
        Process exit code
    """
    logger = logging.getLogger("LoxCLI")
    try:
        source = Path(path).read_text(encoding='utf-8')

    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_NO_INPUT

    logger.info("running script %s", path)
    lox = Lox(sys.stdout)
    try:
        run_source(lox, source, config, sys.stdout)

    except LoxRuntimeError as e:
        report_error(e, sys.stderr)
        return EXIT_SOFTWARE

    except LoxError as e:
        report_error(e, sys.stderr)
        return EXIT_DATA_ERROR

    return EXIT_OK


def run_prompt(config: LoxConfig, stdin: TextIO | None = None) -> int:
    """
    Run an interactive prompt until end of input.

    Each line runs against the same environment.  Errors are reported and the
    prompt carries on.

    Returns:
        Process exit code
    """
    stdin = stdin if stdin is not None else sys.stdin
    lox = Lox(sys.stdout)

    while True:
        sys.stdout.write(config.prompt)
        sys.stdout.flush()

        line = stdin.readline()
        if not line:
            sys.stdout.write("\n")
            return EXIT_OK

        try:
            run_source(lox, line, config, sys.stdout)

        except LoxError as e:
            report_error(e, sys.stderr)


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Run a Lox script, or start an interactive prompt when no script is given",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Interactive prompt
  %(prog)s hello.lox            # Run a script
  %(prog)s hello.lox --ast      # Show the syntax tree of each statement, then run
  %(prog)s --config lox.yaml    # Load settings from a YAML file
        """
    )
    parser.add_argument('script', nargs='?', help='Script file to run')
    parser.add_argument('--config', '-c', help='YAML configuration file')
    parser.add_argument('--tokens', action='store_true', default=None,
                        help='Print the tokens of each input before running it')
    parser.add_argument('--ast', action='store_true', default=None,
                        help='Print the syntax tree of each statement before running it')
    parser.add_argument('--log-level', help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', help='Write logs to a rotating log file')
    args = parser.parse_args(argv)

    try:
        config = LoxConfig.load_from_file(args.config) if args.config else LoxConfig()

    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NO_INPUT

    # Command-line flags override the configuration file
    if args.tokens is not None:
        config.show_tokens = args.tokens

    if args.ast is not None:
        config.show_ast = args.ast

    if args.log_level:
        config.log_level = args.log_level

    if args.log_file:
        config.log_file = args.log_file

    setup_logging(config)

    if args.script:
        return run_file(args.script, config)

    return run_prompt(config)
