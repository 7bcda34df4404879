"""
filegen: fill a directory with random filler files.

Usage:
    filegen --count 50 --out ./dist --depth 4
    python -m filegen.main --help
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import GeneratorConfig, Settings, load_settings
from .services.generator import format_report, generate
from .services.monitor import disable_console_logging, enable_console_logging, logger


# ── Option resolver ─────────────────────────────────────────
VALUE_FLAGS = ("--count", "--min", "--max", "--out", "--depth")
HELP_FLAGS = ("-h", "--help")

_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def bind_values(argv: Sequence[str]) -> List[str]:
    """Glue each value flag to the token after it as ``--flag=token``.

    The next token is the value even when it starts with "-"; a value flag
    that is the last token stays bare.
    """
    tokens: List[str] = []
    pending = iter(argv)
    for token in pending:
        if token in VALUE_FLAGS:
            value = next(pending, None)
            tokens.append(token if value is None else f"{token}={value}")
        else:
            tokens.append(token)
    return tokens


def wants_help(tokens: Sequence[str]) -> bool:
    return any(token in HELP_FLAGS for token in tokens)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filegen",
        allow_abbrev=False,
        description="Create randomly named files with random content in random nested directories.",
    )
    # nargs="?" so a trailing flag with no value keeps its default
    parser.add_argument("--count", nargs="?", metavar="N",
                        help=f"Number of files to create (default: {settings.count})")
    parser.add_argument("--min", nargs="?", metavar="N", dest="min_len",
                        help=f"Minimum characters per file content (default: {settings.min_len})")
    parser.add_argument("--max", nargs="?", metavar="N", dest="max_len",
                        help=f"Maximum characters per file content (default: {settings.max_len})")
    parser.add_argument("--out", nargs="?", metavar="DIR", dest="out_dir",
                        help=f"Output base directory (default: ./{settings.out_dir})")
    parser.add_argument("--depth", nargs="?", metavar="N", dest="max_depth",
                        help=f"Max random directory depth (default: {settings.max_depth})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Also stream log messages to stderr")
    return parser


def _to_int(value: Optional[str], fallback: int) -> int:
    if value is None:
        return fallback
    # leading integer only: "12abc" -> 12, "3.5" -> 3
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else fallback


def resolve_options(args: argparse.Namespace, settings: Settings) -> GeneratorConfig:
    return GeneratorConfig(
        out_dir=args.out_dir or settings.out_dir,
        count=_to_int(args.count, settings.count),
        min_len=_to_int(args.min_len, settings.min_len),
        max_len=_to_int(args.max_len, settings.max_len),
        max_depth=_to_int(args.max_depth, settings.max_depth),
    )


def parse_options(argv: Sequence[str], settings: Optional[Settings] = None) -> GeneratorConfig:
    """Turn command-line tokens into a clamped config.

    Bad numbers fall back to the default, unknown tokens are ignored and
    --help exits the process with status 0.
    """
    settings = settings or Settings()
    args, _unknown = build_parser(settings).parse_known_args(bind_values(argv))
    return resolve_options(args, settings)


def _configure_logging(verbose: bool, settings: Settings):
    level = settings.log_level.upper()
    if verbose:
        logger.setLevel(logging.DEBUG)
        enable_console_logging("DEBUG")
    elif level != "WARNING":
        logger.setLevel(level)
        enable_console_logging(level)
    else:
        logger.setLevel(logging.INFO)
        disable_console_logging()


# ── CLI entry-point ─────────────────────────────────────────
def main(argv: Optional[Sequence[str]] = None):
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        tokens = bind_values(argv)
        try:
            settings = load_settings(Path.cwd() / ".env")
        except ValidationError:
            if not wants_help(tokens):
                raise
            # help text only: unvalidated built-in defaults
            settings = Settings.model_construct()
        args, unknown = build_parser(settings).parse_known_args(tokens)
        _configure_logging(args.verbose, settings)
        if unknown:
            logger.info(f"Ignoring unknown arguments: {' '.join(unknown)}")

        config = resolve_options(args, settings)
        created = generate(config)
    except Exception as e:
        logger.error(f"filegen failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in format_report(created, config.out_dir):
        print(line)


if __name__ == "__main__":
    main()
