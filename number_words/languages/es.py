"""Spanish number words.

Irregularities:
  - 100 alone is "cien", 101–199 use "ciento"
  - 500, 700 and 900 are "quinientos", "setecientos", "novecientos"
  - 21–29 fuse into one word ("veintitrés")
  - "uno" shortens to "un" before "mil" and the scale nouns
  - 1000 is "mil", never "un mil"; 10^6 is "un millón"
"""

from __future__ import annotations

from .base import Language, ScaleGroup


class Spanish(Language):
    code = "es"
    name = "Español"

    digits = ("cero", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve")
    teens = (
        "diez", "once", "doce", "trece", "catorce",
        "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    )
    twenties = (
        "veinte", "veintiuno", "veintidós", "veintitrés", "veinticuatro",
        "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
    )
    tens = ("veinte", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa")
    hundreds = (
        "ciento", "doscientos", "trescientos", "cuatrocientos", "quinientos",
        "seiscientos", "setecientos", "ochocientos", "novecientos",
    )
    scales = ("", "mil", "millón", "billón", "trillón")
    scales_plural = ("", "mil", "millones", "billones", "trillones")

    negative_word = "negativo"
    decimal_word = "coma"
    not_a_number = "El valor proporcionado no es un número"
    number_too_large = "Número demasiado grande: se admite un máximo de 999 trillones"

    def below_hundred(self, value: int, apocope: bool = False) -> str:
        if 20 <= value < 30:
            words = self.twenties[value - 20]
        elif value < 30:
            words = super().below_hundred(value)
        else:
            tens, ones = divmod(value, 10)
            words = self.tens[tens - 2]
            if ones:
                words = f"{words} y {self.digits[ones]}"
        if apocope and value % 10 == 1 and value != 11:
            words = "veintiún" if value == 21 else words[:-1]
        return words

    def render_group(self, value: int, level: int) -> str:
        """Render 1–999; before a scale word a final "uno" becomes "un"."""
        if value == 100:
            return "cien"
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(self.hundreds[hundreds - 1])
        if rest:
            words.append(self.below_hundred(rest, apocope=level > 0))
        return " ".join(words)

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_plural[level]

    def render_scaled_group(self, group: ScaleGroup) -> str:
        if group.value == 1 and group.level == 1:
            return "mil"
        return super().render_scaled_group(group)
