"""Polish number words.

Polish scale nouns take three forms chosen from the last two digits of
their group, like Russian: "jeden tysiąc", "dwa tysiące", "pięć tysięcy".
A group ending in 1 keeps the singular ("dwadzieścia jeden tysiąc") and
12–14 always take the genitive plural ("dwanaście tysięcy").
"""

from __future__ import annotations

from .base import Language, select_slavic_form


class Polish(Language):
    code = "pl"
    name = "Polski"

    digits = ("zero", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć")
    teens = (
        "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście",
        "piętnaście", "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
    )
    tens = (
        "dwadzieścia", "trzydzieści", "czterdzieści", "pięćdziesiąt",
        "sześćdziesiąt", "siedemdziesiąt", "osiemdziesiąt", "dziewięćdziesiąt",
    )
    hundreds = (
        "sto", "dwieście", "trzysta", "czterysta", "pięćset",
        "sześćset", "siedemset", "osiemset", "dziewięćset",
    )
    scales = ("", "tysiąc", "milion", "miliard", "bilion")
    scales_plural = ("", "tysiące", "miliony", "miliardy", "biliony")
    scales_genitive = ("", "tysięcy", "milionów", "miliardów", "bilionów")

    negative_word = "minus"
    decimal_word = "przecinek"
    not_a_number = "Podana wartość nie jest liczbą"
    number_too_large = "Zbyt duża liczba: maksymalnie obsługiwane jest 999 bilionów"

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(self.hundreds[hundreds - 1])
        if rest:
            words.append(self.below_hundred(rest))
        return " ".join(words)

    def scale_word(self, value: int, level: int) -> str:
        forms = (self.scales, self.scales_plural, self.scales_genitive)
        return forms[select_slavic_form(value)][level]
