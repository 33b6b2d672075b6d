"""German number words.

German writes everything below a million as one compound word, puts the
ones before the tens ("einundzwanzig") and inflects the digit one:
"eins" when it ends a number, "ein" inside a compound and "eine" before
the feminine nouns Million, Milliarde, Billion.
"""

from __future__ import annotations

from .base import Language, ScaleGroup, fuse_below_million


class German(Language):
    code = "de"
    name = "Deutsch"

    digits = ("null", "ein", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun")
    standalone = ("null", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun")
    teens = (
        "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
        "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
    )
    tens = ("zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig")
    scales = ("", "tausend", "Million", "Milliarde", "Billion")
    scales_plural = ("", "tausend", "Millionen", "Milliarden", "Billionen")

    negative_word = "minus"
    decimal_word = "Komma"
    not_a_number = "Der angegebene Wert ist keine Zahl"
    number_too_large = "Zahl zu groß: maximal 999 Billionen werden unterstützt"

    @property
    def decimal_digits(self) -> tuple[str, ...]:
        return self.standalone

    def below_hundred(self, value: int) -> str:
        if value < 20:
            return super().below_hundred(value)
        tens, ones = divmod(value, 10)
        if ones == 0:
            return self.tens[tens - 2]
        return f"{self.digits[ones]}und{self.tens[tens - 2]}"

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        word = f"{self.digits[hundreds]}hundert" if hundreds else ""
        if rest == 1:
            if level == 0:
                return word + "eins"
            if level >= 2:
                return word + "eine"
        return word + self.below_hundred(rest)

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_plural[level]

    def render_scaled_group(self, group: ScaleGroup) -> str:
        if group.level == 1:
            return self.render_group(group.value, 1) + "tausend"
        return super().render_scaled_group(group)

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return fuse_below_million(parts)
