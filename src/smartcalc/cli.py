"""
Command-line REPL for the calculator.

Reads one line at a time, prints the result or the error message, and
stops on "/exit" or end of input.

Usage:
    smartcalc
    smartcalc --config settings.yaml --log-level debug
    python -m smartcalc
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from smartcalc.config import CalculatorSettings, enable_logging, load_settings
from smartcalc.session import Session

logger = logging.getLogger(__name__)


def run(
    session: Session,
    lines: Iterable[str],
    output: TextIO,
    prompt: str = "",
) -> None:
    """Feeds lines to a session until it stops or the lines run out."""
    if prompt:
        output.write(prompt)
        output.flush()

    for line in lines:
        result = session.handle(line.rstrip("\r\n"))
        if result is not None:
            print(result, file=output)
        if not session.running:
            break
        if prompt:
            output.write(prompt)
            output.flush()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Evaluate integer expressions with +, -, *, /, ^, "
        "parentheses and variables.",
    )
    parser.add_argument("--config", help="YAML or JSON settings file")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        settings: CalculatorSettings = load_settings(args.config)
    except ValueError as error:
        print(f"Invalid configuration: {error}", file=sys.stderr)
        return 2

    enable_logging(args.log_level or settings.log_level)
    logger.debug(
        "session_started",
        extra={"limits": settings.expression_limits},
    )

    session = Session(limits=settings.expression_limits)
    run(session, sys.stdin, sys.stdout, prompt=settings.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
