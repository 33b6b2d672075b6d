"""
Pydantic models for conversion input and options.

Both models are frozen: a conversion builds them fresh per call and
nothing mutates them afterwards.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .languages import DEFAULT_LANGUAGE


# ─── Options ────────────────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Per-call settings. Unknown languages are accepted and fall back later."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: Optional[str] = DEFAULT_LANGUAGE  # ISO 639-1 code; None means the default
    include_decimal_text: bool = Field(default=True, alias="includeDecimalText")
    capitalize: bool = False


# ─── Parsed Number ──────────────────────────────────────────────────


class NumericInput(BaseModel):
    """A validated number split into sign, integer digits and decimal digits.

    ``integer_digits`` never has leading zeros (zero is "0") and
    ``decimal_digits`` never has trailing zeros (it may be empty).
    """

    model_config = ConfigDict(frozen=True)

    negative: bool = False
    integer_digits: str = Field(default="0", pattern=r"^\d*$")
    decimal_digits: str = Field(default="", pattern=r"^\d*$")

    @field_validator("integer_digits")
    @classmethod
    def _strip_leading_zeros(cls, value: str) -> str:
        return value.lstrip("0") or "0"

    @field_validator("decimal_digits")
    @classmethod
    def _strip_trailing_zeros(cls, value: str) -> str:
        return value.rstrip("0")
