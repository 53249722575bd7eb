"""Shared CLI utilities for consistent argument parsing."""

from __future__ import annotations

import argparse
import logging
import sys


def add_log_level_argument(
    parser: argparse.ArgumentParser, default: str = "INFO"
) -> None:
    """Add standard --log-level argument.

    Args:
        parser: ArgumentParser to add the argument to
        default: Level used when the flag is not given
    """
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=default,
        help="Logging verbosity",
    )


def setup_logging(level: str) -> None:
    """Configure logging with consistent format.

    Logs go to stderr so that stdout only carries tool output.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def add_json_output_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --json output flag.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )


def report_error(message: str, hint: str) -> None:
    """Print the two-line error report to stdout.

    Args:
        message: Error description, shown after ``ERROR:``
        hint: Usage hint, shown after ``HELP:``
    """
    print(f"ERROR: {message}")
    print(f"HELP: {hint}")
