"""
Tests for the conversion entry point: parsing, range checks, options,
sign and decimal assembly, and language fallback.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from number_words.converter import (
    MAX_MAGNITUDE,
    convert_to_words,
    get_language_names,
    get_supported_language_codes,
    is_supported_language,
    parse_number,
)
from number_words.exceptions import (
    MagnitudeExceededError,
    NotANumberError,
    NumberWordsError,
)
from number_words.languages import get_language
from number_words.models import ConversionOptions, NumericInput


# ═══════════════════════════════════════════════════════════════════════
# PARSING
# ═══════════════════════════════════════════════════════════════════════


class TestParseNumber:
    def test_integer(self):
        parsed = parse_number(1234)
        assert parsed == NumericInput(negative=False, integer_digits="1234", decimal_digits="")

    def test_decimal_string(self):
        parsed = parse_number("123.450")
        assert parsed.integer_digits == "123"
        assert parsed.decimal_digits == "45"

    def test_negative(self):
        parsed = parse_number("-7.5")
        assert parsed.negative
        assert parsed.integer_digits == "7"

    def test_negative_zero_is_not_negative(self):
        assert not parse_number("-0").negative
        assert not parse_number("-0.000").negative

    def test_separators_are_stripped(self):
        assert parse_number("1,234,567").integer_digits == "1234567"
        assert parse_number(" 1 000 000 ").integer_digits == "1000000"

    def test_exponent_is_expanded(self):
        assert parse_number("1e3").integer_digits == "1000"
        assert parse_number(1e-7).decimal_digits == "0000001"

    def test_decimal_instance(self):
        assert parse_number(Decimal("0.25")).decimal_digits == "25"

    def test_float(self):
        parsed = parse_number(123.45)
        assert (parsed.integer_digits, parsed.decimal_digits) == ("123", "45")

    @pytest.mark.parametrize("value", ["abc", "", "   ", "1.2.3", "12abc", "nan", "inf", "-Infinity", None, True])
    def test_not_a_number(self, value):
        with pytest.raises(NotANumberError) as exc_info:
            parse_number(value)
        assert exc_info.value.code == "NOT_A_NUMBER"

    def test_largest_value_is_accepted(self):
        assert parse_number("999999999999999").integer_digits == "9" * 15

    def test_fraction_below_limit_is_accepted(self):
        assert parse_number("999999999999999.99").decimal_digits == "99"

    def test_long_fraction_keeps_every_digit(self):
        digits = "12345678901234567890123456789012"
        assert parse_number(f"0.{digits}").decimal_digits == digits

    def test_long_fraction_below_limit_is_not_rounded_up(self):
        parsed = parse_number("999999999999999.99999999999999999")
        assert parsed.integer_digits == "9" * 15
        assert parsed.decimal_digits == "9" * 17

    def test_zero_with_huge_exponent(self):
        assert parse_number("0e-999999").integer_digits == "0"
        assert parse_number("0e999999").decimal_digits == ""

    @pytest.mark.parametrize("value", ["1e-999999", "5E-101"])
    def test_exponent_expanding_into_huge_fraction(self, value):
        with pytest.raises(NotANumberError):
            parse_number(value)

    def test_long_literal_fraction_is_accepted(self):
        digits = "3" * 150
        assert parse_number(f"0.{digits}").decimal_digits == digits

    @pytest.mark.parametrize("value", [10**15, "1000000000000000", "-1000000000000000", 1e20])
    def test_too_large(self, value):
        with pytest.raises(MagnitudeExceededError) as exc_info:
            parse_number(value)
        assert exc_info.value.code == "NUMBER_TOO_LARGE"
        assert exc_info.value.details["limit"] == str(MAX_MAGNITUDE)

    def test_errors_share_a_base(self):
        assert issubclass(NotANumberError, NumberWordsError)
        assert issubclass(MagnitudeExceededError, NumberWordsError)


class TestNumericInput:
    def test_zeros_are_normalised(self):
        parsed = NumericInput(integer_digits="0007", decimal_digits="500")
        assert parsed.integer_digits == "7"
        assert parsed.decimal_digits == "5"

    def test_all_zero_integer_is_zero(self):
        assert NumericInput(integer_digits="000").integer_digits == "0"

    def test_rejects_non_digits(self):
        with pytest.raises(ValidationError):
            NumericInput(integer_digits="12a")

    def test_is_frozen(self):
        parsed = NumericInput(integer_digits="1")
        with pytest.raises(ValidationError):
            parsed.negative = True


# ═══════════════════════════════════════════════════════════════════════
# CONVERSION
# ═══════════════════════════════════════════════════════════════════════


class TestEnglishScenarios:
    @pytest.mark.parametrize(
        "number, words",
        [
            (0, "zero"),
            (19, "nineteen"),
            (99, "ninety-nine"),
            (100, "one hundred"),
            (1001, "one thousand one"),
            (123.45, "one hundred twenty-three point four five"),
            (-1, "negative one"),
            (-1000, "negative one thousand"),
            (1.5, "one point five"),
            (100.01, "one hundred point zero one"),
            ("1,000,000", "one million"),
            ("007", "seven"),
            ("1.50", "one point five"),
            ("1.0", "one"),
            ("-0.5", "negative zero point five"),
        ],
    )
    def test_scenarios(self, number, words):
        assert convert_to_words(number) == words


class TestOtherLanguages:
    @pytest.mark.parametrize(
        "number, language, words",
        [
            (100, "tr", "yüz"),
            (1000, "tr", "bin"),
            (2000, "tr", "iki bin"),
            (100, "az", "bir yüz"),
            (2345, "az", "iki min üç yüz qırx beş"),
            (1.5, "az", "bir tam beş"),
            ("100.01", "az", "bir yüz tam sıfır bir"),
            ("0.123", "az", "sıfır tam bir iki üç"),
            (-1000, "az", "mənfi bir min"),
            (-1.5, "az", "mənfi bir tam beş"),
            ("1.5", "de", "eins Komma fünf"),
            ("-2.25", "fr", "moins deux virgule deux cinq"),
            ("3.14", "ru", "три целых один четыре"),
            ("1.5", "ja", "一 点 五"),
        ],
    )
    def test_scenarios(self, number, language, words):
        assert convert_to_words(number, language=language) == words

    def test_language_code_is_case_insensitive(self):
        assert convert_to_words(2000, language="TR") == "iki bin"


class TestErrors:
    def test_not_a_number_is_returned_not_raised(self):
        assert convert_to_words("abc") == "The provided value is not a number"

    def test_too_large_is_returned_not_raised(self):
        assert convert_to_words(10**15) == "Number too large: maximum 999 trillion is supported"

    def test_messages_are_localised(self, language):
        assert convert_to_words("abc", language=language.code) == language.not_a_number
        assert convert_to_words("1" + "0" * 15, language=language.code) == language.number_too_large

    def test_unknown_language_uses_default_messages(self):
        assert convert_to_words("abc", language="xx") == convert_to_words("abc")

    def test_long_fraction_is_rendered_not_rejected(self):
        words = convert_to_words("999999999999999.99999999999999999")
        assert words.endswith("point " + " ".join(["nine"] * 17))

    def test_huge_exponent_is_not_a_number(self):
        assert convert_to_words("1e-999999") == "The provided value is not a number"


class TestOptions:
    def test_default_language_is_english(self):
        assert convert_to_words(5) == "five"

    def test_none_language_uses_default(self):
        assert convert_to_words(5, language=None) == "five"
        assert ConversionOptions(language=None).language is None

    def test_unknown_language_falls_back(self):
        assert convert_to_words(5, language="invalid") == "five"
        assert convert_to_words(123.45, language="xx") == convert_to_words(123.45, language="en")

    @pytest.mark.parametrize(
        "language, words",
        [("en", "One hundred twenty-three"), ("az", "Bir yüz iyirmi üç"), ("tr", "Yüz yirmi üç")],
    )
    def test_capitalize(self, language, words):
        assert convert_to_words(123, language=language, capitalize=True) == words

    def test_capitalize_only_touches_first_character(self, language):
        plain = convert_to_words(-21.5, language=language.code)
        capital = convert_to_words(-21.5, language=language.code, capitalize=True)
        assert capital[1:] == plain[1:]
        assert capital[0] == plain[0].upper()

    def test_include_decimal_text_false(self):
        assert convert_to_words(1.5, language="en", include_decimal_text=False) == "one"
        assert convert_to_words(1.5, language="az", include_decimal_text=False) == "bir"

    def test_options_model(self):
        options = ConversionOptions(language="tr", capitalize=True)
        assert convert_to_words(1000, options) == "Bin"

    def test_options_dict_with_camel_case(self):
        assert convert_to_words(1.5, {"includeDecimalText": False}) == "one"

    def test_keyword_overrides_options(self):
        options = ConversionOptions(language="tr")
        assert convert_to_words(1000, options, language="az") == "bir min"
        assert convert_to_words(1.5, options, includeDecimalText=False) == "bir"

    def test_options_defaults(self):
        options = ConversionOptions()
        assert options.language == "en"
        assert options.include_decimal_text is True
        assert options.capitalize is False


class TestLanguageQueries:
    def test_is_supported_language(self):
        for code in ("en", "az", "tr", "de", "fr", "es", "EN"):
            assert is_supported_language(code)
        assert not is_supported_language("invalid")

    def test_supported_codes(self):
        codes = get_supported_language_codes()
        assert {"en", "az", "tr"} <= set(codes)
        assert len(codes) == 16

    def test_language_names(self):
        names = get_language_names()
        assert names["en"] == "English"
        assert list(names) == get_supported_language_codes()

    def test_zero_in_every_language(self, language):
        assert convert_to_words(0, language=language.code) == get_language(language.code).digits[0]
