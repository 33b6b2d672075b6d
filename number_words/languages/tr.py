"""Turkish number words.

Turkish never counts a single hundred or thousand: 100 is "yüz" and 1000
is "bin", wherever the group appears (1 001 000 is "bir milyon bin").
Millions and above keep "bir".
"""

from __future__ import annotations

from .base import Language


class Turkish(Language):
    code = "tr"
    name = "Türkçe"

    digits = ("sıfır", "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz")
    teens = (
        "on", "on bir", "on iki", "on üç", "on dört",
        "on beş", "on altı", "on yedi", "on sekiz", "on dokuz",
    )
    tens = ("yirmi", "otuz", "kırk", "elli", "altmış", "yetmiş", "seksen", "doksan")
    scales = ("", "bin", "milyon", "milyar", "trilyon")

    negative_word = "eksi"
    decimal_word = "virgül"
    not_a_number = "Verilen değer bir sayı değil"
    number_too_large = "Çok büyük sayı: maksimum 999 trilyon destekleniyor"

    def render_group(self, value: int, level: int) -> str:
        if value == 1 and level == 1:
            return ""
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds == 1:
            words.append("yüz")
        elif hundreds:
            words.append(f"{self.digits[hundreds]} yüz")
        if rest:
            words.append(self.below_hundred(rest))
        return " ".join(words)
