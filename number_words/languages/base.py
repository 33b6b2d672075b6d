"""
Shared rendering skeleton for every language.

A language renders an integer in three steps:

  1. Split the digit string into scale groups (ones, thousands, millions, ...)
  2. Render each non-zero group with its scale word
  3. Join the rendered groups, most significant first

Subclasses supply the word tables and override only the hooks their
grammar needs (scale-word agreement, conjunctions, fused compounds).
Everything here is a pure function of the input digits and the class-level
tables; instances carry no mutable state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


# ─── Scale Groups ────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleGroup:
    """One magnitude tier of an integer."""

    value: int  # Numeric value of the chunk, e.g. 345
    level: int  # 0 = ones, 1 = thousands, 2 = millions, ...
    digits: str  # The chunk exactly as it appeared, e.g. "045"


def split_groups(digits: str, width: int = 3) -> list[ScaleGroup]:
    """Partition a digit string into fixed-width groups, least significant first.

    >>> [g.value for g in split_groups("1234567")]
    [567, 234, 1]
    """
    groups: list[ScaleGroup] = []
    end = len(digits)
    level = 0
    while end > 0:
        start = max(0, end - width)
        chunk = digits[start:end]
        groups.append(ScaleGroup(value=int(chunk), level=level, digits=chunk))
        end = start
        level += 1
    return groups


def select_slavic_form(value: int) -> int:
    """Pick one of three inflected forms from the last two digits.

    0 — ends in 1 (but not 11):        тысяча, миллион
    1 — ends in 2–4 (but not 12–14):   тысячи, миллиона
    2 — everything else:               тысяч, миллионов
    """
    last_two = value % 100
    last = value % 10
    if 11 <= last_two <= 14:
        return 2
    if last == 1:
        return 0
    if 2 <= last <= 4:
        return 1
    return 2


# ─── Language Base Class ─────────────────────────────────────────────


class Language(ABC):
    """Word tables plus the rendering hooks for one locale."""

    code: str = ""
    name: str = ""

    digits: tuple[str, ...] = ()  # 0–9
    teens: tuple[str, ...] = ()  # 10–19
    tens: tuple[str, ...] = ()  # 20, 30, ... 90
    hundreds: tuple[str, ...] = ()  # 100, 200, ... 900 (irregular languages only)
    scales: tuple[str, ...] = ()  # indexed by level; scales[0] is always ""

    negative_word: str = ""
    decimal_word: str = ""
    not_a_number: str = ""
    number_too_large: str = ""

    group_width: int = 3
    decimal_separator: str = " "

    # ── Tables ───────────────────────────────────────────────────────

    @property
    def zero(self) -> str:
        return self.digits[0]

    @property
    def decimal_digits(self) -> tuple[str, ...]:
        """Digit names used after the decimal marker."""
        return self.digits

    def below_hundred(self, value: int) -> str:
        """Render 0–99 as tens-then-ones separated by a space."""
        if value == 0:
            return ""
        if value < 10:
            return self.digits[value]
        if value < 20:
            return self.teens[value - 10]
        tens, ones = divmod(value, 10)
        if ones == 0:
            return self.tens[tens - 2]
        return f"{self.tens[tens - 2]} {self.digits[ones]}"

    # ── Hooks ────────────────────────────────────────────────────────

    @abstractmethod
    def render_group(self, value: int, level: int) -> str:
        """Render one group value (no scale word). Zero renders as ""."""

    def scale_word(self, value: int, level: int) -> str:
        """Scale word for a group; invariant unless a language inflects it."""
        return self.scales[level]

    def render_scaled_group(self, group: ScaleGroup) -> str:
        numeral = self.render_group(group.value, group.level)
        scale = self.scale_word(group.value, group.level) if group.level else ""
        return " ".join(part for part in (numeral, scale) if part)

    def split(self, digits: str) -> list[ScaleGroup]:
        return split_groups(digits, self.group_width)

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return " ".join(text for _, text in parts)

    # ── Public Operations ────────────────────────────────────────────

    def render_integer(self, integer_digits: str) -> str:
        """Render a non-negative integer digit string as words.

        Leading zeros are ignored; an empty or all-zero string renders as
        the zero word. Zero groups contribute nothing.
        """
        digits = integer_digits.lstrip("0")
        if not digits:
            return self.zero

        parts: list[tuple[ScaleGroup, str]] = []
        for group in reversed(self.split(digits)):
            if group.value == 0:
                continue
            parts.append((group, self.render_scaled_group(group)))
        return self.join_groups(parts)

    def render_decimal(self, decimal_digits: str) -> str:
        """Render fractional digits one by one. Trailing zeros are dropped."""
        digits = decimal_digits.rstrip("0")
        names = self.decimal_digits
        return self.decimal_separator.join(names[int(d)] for d in digits)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.code!r}>"


def fuse_below_million(parts: list[tuple[ScaleGroup, str]]) -> str:
    """Join groups with spaces, but write thousands and ones as one word.

    German, Italian and Swedish spell everything under a million as a single
    compound ("zweitausenddreihundert") and separate the larger scales.
    """
    words: list[str] = []
    fused = ""
    for group, text in parts:
        if group.level <= 1:
            fused += text
        else:
            words.append(text)
    if fused:
        words.append(fused)
    return " ".join(words)
