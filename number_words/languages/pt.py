"""Portuguese number words (Brazilian short scale).

Hundreds have their own words ("duzentos", "quinhentos"), and 100 alone
is "cem" while 101–199 use "cento". Portuguese links hundreds, tens and
ones with "e", and also links a scale group to a following group that is
below 100 or a round hundred ("mil e duzentos", "mil duzentos e trinta").
"""

from __future__ import annotations

from .base import Language, ScaleGroup


class Portuguese(Language):
    code = "pt"
    name = "Português"

    digits = ("zero", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove")
    teens = (
        "dez", "onze", "doze", "treze", "catorze",
        "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
    )
    tens = ("vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa")
    hundreds = (
        "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
        "seiscentos", "setecentos", "oitocentos", "novecentos",
    )
    scales = ("", "mil", "milhão", "bilhão", "trilhão")
    scales_plural = ("", "mil", "milhões", "bilhões", "trilhões")

    negative_word = "negativo"
    decimal_word = "vírgula"
    not_a_number = "O valor fornecido não é um número"
    number_too_large = "Número muito grande: o máximo suportado é 999 trilhões"

    def below_hundred(self, value: int) -> str:
        return super().below_hundred(value).replace(" ", " e ")

    def render_group(self, value: int, level: int) -> str:
        if value == 1 and level == 1:
            return ""
        if value == 100:
            return "cem"
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(self.hundreds[hundreds - 1])
        if rest:
            words.append(self.below_hundred(rest))
        return " e ".join(words)

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_plural[level]

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        words = []
        for index, (group, text) in enumerate(parts):
            if index and (group.value < 100 or group.value % 100 == 0):
                words.append("e")
            words.append(text)
        return " ".join(words)
