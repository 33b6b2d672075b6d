"""
Number Words — FastAPI Server
=============================

RESTful API for converting numbers to words.

Endpoints:
    POST /convert           Convert a number to words
    GET  /languages         List supported languages
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Config:
    NUMBER_WORDS_LANGUAGE=tr               # Default language for requests without one
"""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Optional, Union

from fastapi import FastAPI
from pydantic import BaseModel, Field

from number_words import __version__
from number_words.converter import (
    convert_to_words,
    get_language_names,
    is_supported_language,
)
from number_words.languages import DEFAULT_LANGUAGE, get_language

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


def _default_language() -> str:
    return os.environ.get("NUMBER_WORDS_LANGUAGE", DEFAULT_LANGUAGE)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "Render integers and decimals as natural-language words in 16 languages, "
        "with grammatical agreement, elision and compounding handled per language."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    number: Union[Decimal, str] = Field(
        ...,
        description="A number or numeric string; spaces and commas are ignored.",
        json_schema_extra={"example": "1,234.5"},
    )
    language: Optional[str] = Field(
        default=None,
        description="ISO 639-1 code. Unknown codes fall back to the default language.",
        json_schema_extra={"example": "en"},
    )
    include_decimal_text: bool = True
    capitalize: bool = False


class ConvertResponse(BaseModel):
    """Words for the requested number."""

    words: str
    language: str = Field(description="The language actually used for rendering")
    is_supported: bool = Field(description="Whether the requested code was recognised")


class LanguageOut(BaseModel):
    code: str
    name: str


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Render ``number`` as words.

    Invalid or out-of-range numbers are not HTTP errors: the response
    carries the language's localised message in **words**, exactly as the
    library returns it.
    """
    requested = request.language or _default_language()
    # Send numbers as text so Decimal input keeps its exact digits
    words = convert_to_words(
        str(request.number),
        language=requested,
        include_decimal_text=request.include_decimal_text,
        capitalize=request.capitalize,
    )
    return ConvertResponse(
        words=words,
        language=get_language(requested).code,
        is_supported=is_supported_language(requested),
    )


@app.get(
    "/languages",
    summary="List supported languages",
    tags=["Languages"],
)
def list_languages() -> list[LanguageOut]:
    """Supported languages in registration order."""
    return [LanguageOut(code=code, name=name) for code, name in get_language_names().items()]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(get_language_names()),
    )
