"""Azerbaijani number words.

Unlike Turkish, Azerbaijani keeps the numeral before "yüz" and "min":
100 is "bir yüz" and 1000 is "bir min".
"""

from __future__ import annotations

from .base import Language


class Azerbaijani(Language):
    code = "az"
    name = "Azərbaycanca"

    digits = ("sıfır", "bir", "iki", "üç", "dörd", "beş", "altı", "yeddi", "səkkiz", "doqquz")
    teens = (
        "on", "on bir", "on iki", "on üç", "on dörd",
        "on beş", "on altı", "on yeddi", "on səkkiz", "on doqquz",
    )
    tens = ("iyirmi", "otuz", "qırx", "əlli", "altmış", "yetmiş", "səksən", "doxsan")
    scales = ("", "min", "milyon", "milyard", "trilyon")

    negative_word = "mənfi"
    decimal_word = "tam"
    not_a_number = "Verilən dəyər bir rəqəm deyil"
    number_too_large = "Çox böyük nömrə: maksimum 999 trilyon dəstəklənir"

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(f"{self.digits[hundreds]} yüz")
        if rest:
            words.append(self.below_hundred(rest))
        return " ".join(words)
