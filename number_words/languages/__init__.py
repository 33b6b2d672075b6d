"""
Language registry — maps ISO 639-1 codes to their renderers.

The registry is built once at import time and is read-only afterwards.
Lookups are case-insensitive and never fail: an unknown code resolves to
the default language.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from .ar import Arabic
from .az import Azerbaijani
from .base import Language, ScaleGroup, split_groups
from .de import German
from .en import English
from .es import Spanish
from .fi import Finnish
from .fr import French
from .hi import Hindi
from .it import Italian
from .ja import Japanese
from .nl import Dutch
from .pl import Polish
from .pt import Portuguese
from .ru import Russian
from .sv import Swedish
from .tr import Turkish

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

LANGUAGES: MappingProxyType[str, Language] = MappingProxyType({
    language.code: language
    for language in (
        Arabic(),
        Azerbaijani(),
        German(),
        English(),
        Spanish(),
        Finnish(),
        French(),
        Hindi(),
        Italian(),
        Japanese(),
        Dutch(),
        Polish(),
        Portuguese(),
        Russian(),
        Swedish(),
        Turkish(),
    )
})


# ─── Lookup ──────────────────────────────────────────────────────────


def get_language(code: str | None) -> Language:
    """Return the renderer for ``code``, or the default language if unknown."""
    language = LANGUAGES.get((code or "").lower())
    if language is None:
        logger.debug("Unsupported language %r, falling back to %r", code, DEFAULT_LANGUAGE)
        return LANGUAGES[DEFAULT_LANGUAGE]
    return language


def is_supported(code: str | None) -> bool:
    """True if ``code`` names a registered language (case-insensitive)."""
    return (code or "").lower() in LANGUAGES


def supported_codes() -> list[str]:
    """All registered codes in registration order."""
    return list(LANGUAGES)


# ─── Core Rendering Contract ─────────────────────────────────────────


def render_integer(code: str | None, integer_digits: str) -> str:
    """Render a non-negative integer digit string in the given language."""
    return get_language(code).render_integer(integer_digits)


def render_decimal(code: str | None, decimal_digits: str) -> str:
    """Render fractional digits one by one; empty when they are all zero."""
    return get_language(code).render_decimal(decimal_digits)


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "Language",
    "ScaleGroup",
    "get_language",
    "is_supported",
    "render_decimal",
    "render_integer",
    "split_groups",
    "supported_codes",
]
