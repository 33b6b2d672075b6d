#!/usr/bin/env python3
"""
Number Words — Entry Point
==========================

Demonstrates the converter across languages and options.

Usage:
    python main.py                  # Sample table
    python main.py 1234.5 fr        # One number in one language
    LOG_LEVEL=DEBUG python main.py 42 xx
"""

from __future__ import annotations

import logging
import os
import sys

from number_words.converter import (
    convert_to_words,
    get_language_names,
    is_supported_language,
)

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── ANSI Color Constants ───────────────────────────────────────────

_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72

SAMPLE_NUMBERS = (0, 12, 99, 101, 1001, 21000, 2345678, "123.45", -42)


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_section(title: str) -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {title}{_RESET}")
    print(f"{'=' * _WIDTH}")


def _print_row(label: str, words: str) -> None:
    print(f"  {label:<14}{_DIM}→{_RESET} {words}")


def print_samples() -> None:
    """Print every sample number in every supported language."""
    for code, name in get_language_names().items():
        _print_section(f"{name} ({code})")
        for number in SAMPLE_NUMBERS:
            _print_row(str(number), convert_to_words(number, language=code))

    _print_section("Options")
    _print_row("capitalize", convert_to_words(123, language="en", capitalize=True))
    _print_row("no decimals", convert_to_words("123.45", language="en", include_decimal_text=False))
    _print_row("too large", convert_to_words(10**15, language="en"))
    _print_row("not a number", convert_to_words("abc", language="en"))
    print()


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the number given on the command line, or print the samples."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_samples()
        print("  To convert one number: python main.py 42 az\n")
        return 0

    number = args[0]
    language = args[1] if len(args) > 1 else "en"
    if not is_supported_language(language):
        print(f"  {_DIM}'{language}' is not supported; using the default language{_RESET}")
    print(convert_to_words(number, language=language))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())
    sys.exit(main())
