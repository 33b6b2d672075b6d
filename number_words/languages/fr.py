"""French number words.

The irregular part of French lives between 70 and 99, which are built on
the bases 60 ("soixante") and 80 ("quatre-vingt") plus a teen:

    71 → soixante-et-onze     80 → quatre-vingts
    77 → soixante-dix-sept    91 → quatre-vingt-onze

"quatre-vingts" and "cents" keep their plural "s" only when they end the
number or precede a noun scale (millions); "mille" never takes a numeral
for one and never inflects.
"""

from __future__ import annotations

from .base import Language


class French(Language):
    code = "fr"
    name = "Français"

    digits = ("zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf")
    teens = (
        "dix", "onze", "douze", "treize", "quatorze",
        "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
    )
    tens = ("vingt", "trente", "quarante", "cinquante", "soixante", "soixante", "quatre-vingt", "quatre-vingt")
    scales = ("", "mille", "million", "milliard", "billion")
    scales_plural = ("", "mille", "millions", "milliards", "billions")

    negative_word = "moins"
    decimal_word = "virgule"
    not_a_number = "La valeur fournie n'est pas un nombre"
    number_too_large = "Nombre trop grand: maximum de 999 billions pris en charge"

    def below_hundred(self, value: int, plural: bool = True) -> str:
        if value < 20:
            return super().below_hundred(value)
        tens, ones = divmod(value, 10)
        base = self.tens[tens - 2]
        if tens in (7, 9):
            # soixante / quatre-vingt + 10..19
            if value == 71:
                return "soixante-et-onze"
            return f"{base}-{self.teens[ones]}"
        if ones == 0:
            return base + "s" if value == 80 and plural else base
        if ones == 1 and tens != 8:
            return f"{base}-et-un"
        return f"{base}-{self.digits[ones]}"

    def render_group(self, value: int, level: int) -> str:
        if value == 1 and level == 1:
            return ""
        # Plural marks drop before "mille", which is an adjective here
        plural = level != 1
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds == 1:
            words.append("cent")
        elif hundreds:
            ending = "s" if rest == 0 and plural else ""
            words.append(f"{self.digits[hundreds]} cent{ending}")
        if rest:
            words.append(self.below_hundred(rest, plural))
        return " ".join(words)

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_plural[level]
