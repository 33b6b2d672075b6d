"""Finnish number words.

Finnish compounds within a group ("kaksikymmentäkolme", "kolmesataa"),
and after any count other than one the scale word goes into the partitive
case: "tuhat" but "kaksituhatta", "miljoona" but "kaksi miljoonaa".
"""

from __future__ import annotations

from .base import Language, ScaleGroup


class Finnish(Language):
    code = "fi"
    name = "Suomi"

    digits = ("nolla", "yksi", "kaksi", "kolme", "neljä", "viisi", "kuusi", "seitsemän", "kahdeksan", "yhdeksän")
    teens = (
        "kymmenen", "yksitoista", "kaksitoista", "kolmetoista", "neljätoista",
        "viisitoista", "kuusitoista", "seitsemäntoista", "kahdeksantoista", "yhdeksäntoista",
    )
    tens = (
        "kaksikymmentä", "kolmekymmentä", "neljäkymmentä", "viisikymmentä",
        "kuusikymmentä", "seitsemänkymmentä", "kahdeksankymmentä", "yhdeksänkymmentä",
    )
    scales = ("", "tuhat", "miljoona", "miljardi", "biljoona")
    scales_partitive = ("", "tuhatta", "miljoonaa", "miljardia", "biljoonaa")

    negative_word = "miinus"
    decimal_word = "pilkku"
    not_a_number = "Annettu arvo ei ole numero"
    number_too_large = "Liian suuri luku: enintään 999 biljoonaa tuetaan"

    def below_hundred(self, value: int) -> str:
        return super().below_hundred(value).replace(" ", "")

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        word = ""
        if hundreds == 1:
            word = "sata"
        elif hundreds:
            word = f"{self.digits[hundreds]}sataa"
        return word + self.below_hundred(rest)

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_partitive[level]

    def render_scaled_group(self, group: ScaleGroup) -> str:
        if group.level == 1:
            if group.value == 1:
                return self.scales[1]
            return self.render_group(group.value, 1) + self.scales_partitive[1]
        return super().render_scaled_group(group)
