"""
Number-to-words conversion — the public entry point.

Flow:
    input ──► clean (drop spaces / commas) ──► parse (Decimal)
          ──► range check (< 10^15) ──► integer words ──► decimal words
          ──► sign word ──► capitalise

Invalid input is not an exception for callers: ``convert_to_words``
returns the selected language's localised error message instead, so the
return value itself is the signal.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import MagnitudeExceededError, NotANumberError, NumberWordsError
from .languages import LANGUAGES, get_language, is_supported, supported_codes
from .models import ConversionOptions, NumericInput

logger = logging.getLogger(__name__)

# The largest scale word is "trillion", covering up to 999 × 10^12
MAX_MAGNITUDE = Decimal(10) ** 15

# Exponent notation may not expand into more fractional digits than this
MAX_EXPANDED_FRACTION = 100

_SEPARATORS = re.compile(r"[\s,]")

_OPTION_ALIASES = {"includeDecimalText": "include_decimal_text"}


# ─── Parsing ─────────────────────────────────────────────────────────


def parse_number(value: int | float | Decimal | str) -> NumericInput:
    """Validate a number (or numeric string) and split it into parts.

    Raises:
        NotANumberError: The input is empty, boolean, non-finite or not numeric,
            or its exponent expands into an unreasonably long fraction.
        MagnitudeExceededError: ``abs(value) >= 10**15``.
    """
    if isinstance(value, bool) or value is None:
        raise NotANumberError(f"Not a number: {value!r}", {"input": repr(value)})

    cleaned = _SEPARATORS.sub("", str(value))
    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        raise NotANumberError(f"Not a number: {value!r}", {"input": cleaned}) from None

    if not number.is_finite():
        raise NotANumberError(f"Not a finite number: {value!r}", {"input": cleaned})

    if number.is_zero():
        number = Decimal(0)

    # copy_abs is exact; abs() would round to the context precision
    magnitude = number.copy_abs()
    if magnitude >= MAX_MAGNITUDE:
        raise MagnitudeExceededError(
            f"Number too large: {cleaned}", {"input": cleaned, "limit": str(MAX_MAGNITUDE)}
        )

    fraction_length = -number.as_tuple().exponent
    if fraction_length > max(len(cleaned), MAX_EXPANDED_FRACTION):
        raise NotANumberError(
            f"Too many fractional digits: {cleaned}", {"input": cleaned, "digits": fraction_length}
        )

    # Fixed-point text expands exponents: 1E+3 → "1000", 1e-7 → "0.0000001"
    integer_digits, _, decimal_digits = format(magnitude, "f").partition(".")
    return NumericInput(
        negative=number < 0,
        integer_digits=integer_digits,
        decimal_digits=decimal_digits,
    )


# ─── Options ─────────────────────────────────────────────────────────


def _merge_options(
    options: ConversionOptions | dict[str, Any] | None, overrides: dict[str, Any]
) -> ConversionOptions:
    if options is None:
        merged = ConversionOptions()
    elif isinstance(options, ConversionOptions):
        merged = options
    else:
        merged = ConversionOptions.model_validate(options)
    if overrides:
        data = merged.model_dump()
        for key, value in overrides.items():
            data[_OPTION_ALIASES.get(key, key)] = value
        merged = ConversionOptions.model_validate(data)
    return merged


# ─── Main Converter ──────────────────────────────────────────────────


def convert_to_words(
    number: int | float | Decimal | str,
    options: ConversionOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Convert a number to words in the requested language.

    Args:
        number: e.g. 123.45, "-1 000 000", Decimal("7")
        options: a ConversionOptions or a dict of its fields
        **overrides: individual options, e.g. ``language="tr"``

    Returns:
        "one hundred twenty-three point four five", or the localised
        "not a number" / "number too large" message.
    """
    opts = _merge_options(options, overrides)
    language = get_language(opts.language)

    try:
        parsed = parse_number(number)
    except NotANumberError as e:
        logger.debug("Rejected input: %s", e)
        return language.not_a_number
    except MagnitudeExceededError as e:
        logger.debug("Rejected input: %s", e)
        return language.number_too_large

    result = language.render_integer(parsed.integer_digits)

    if opts.include_decimal_text and parsed.decimal_digits:
        decimal_words = language.render_decimal(parsed.decimal_digits)
        if decimal_words:
            result = f"{result} {language.decimal_word} {decimal_words}"

    if parsed.negative:
        result = f"{language.negative_word} {result}"

    if opts.capitalize:
        result = result[:1].upper() + result[1:]

    return result


# ─── Language Queries ────────────────────────────────────────────────


def is_supported_language(code: str) -> bool:
    """True if ``code`` is a registered language (case-insensitive)."""
    return is_supported(code)


def get_supported_language_codes() -> list[str]:
    """Registered language codes in registration order."""
    return supported_codes()


def get_language_names() -> dict[str, str]:
    """Map each registered code to the language's own name."""
    return {code: language.name for code, language in LANGUAGES.items()}


__all__ = [
    "MAX_MAGNITUDE",
    "NumberWordsError",
    "convert_to_words",
    "get_language_names",
    "get_supported_language_codes",
    "is_supported_language",
    "parse_number",
]
