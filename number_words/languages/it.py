"""Italian number words.

Italian writes numbers below a million as one word and elides vowels at
the seams: a tens word loses its final vowel before "uno" and "otto"
("ventuno", "trentotto"), "cento" loses its "o" before "otto" and
"ottanta" ("centottanta"), and a "tre" that ends the number is accented
("ventitré", but "ventitremila").
"""

from __future__ import annotations

from .base import Language, ScaleGroup, fuse_below_million

_VOWELS = "aeiou"


class Italian(Language):
    code = "it"
    name = "Italiano"

    digits = ("zero", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove")
    teens = (
        "dieci", "undici", "dodici", "tredici", "quattordici",
        "quindici", "sedici", "diciassette", "diciotto", "diciannove",
    )
    tens = ("venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta")
    scales = ("", "mille", "milione", "miliardo", "bilione")
    scales_plural = ("", "mila", "milioni", "miliardi", "bilioni")

    negative_word = "negativo"
    decimal_word = "virgola"
    not_a_number = "Il valore fornito non è un numero"
    number_too_large = "Numero troppo grande: è supportato un massimo di 999 bilioni"

    def below_hundred(self, value: int, final: bool = True) -> str:
        if value < 20:
            return super().below_hundred(value)
        tens, ones = divmod(value, 10)
        word = self.tens[tens - 2]
        if ones == 0:
            return word
        one = "tré" if ones == 3 and final else self.digits[ones]
        if one[0] in _VOWELS:
            word = word[:-1]
        return word + one

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        word = ""
        if hundreds:
            word = "cento" if hundreds == 1 else f"{self.digits[hundreds]}cento"
        if not rest:
            return word
        final = level == 0
        tail = "tré" if rest == 3 and hundreds and final else self.below_hundred(rest, final)
        if word and tail[0] == "o":
            word = word[:-1]
        return word + tail

    def render_scaled_group(self, group: ScaleGroup) -> str:
        if group.value == 1:
            return "mille" if group.level == 1 else f"un {self.scales[group.level]}"
        numeral = self.render_group(group.value, group.level)
        if group.level == 1:
            return numeral + self.scales_plural[1]
        if numeral.endswith("uno"):
            numeral = numeral[:-1]  # "ventun milioni"
        return f"{numeral} {self.scales_plural[group.level]}"

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return fuse_below_million(parts)
