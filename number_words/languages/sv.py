"""Swedish number words.

Swedish fuses everything below a million ("tvåtusenetthundratjugoett").
The neuter "ett" counts hundreds and thousands, while the common-gender
nouns miljon, miljard and biljon are counted with "en".
"""

from __future__ import annotations

from .base import Language, ScaleGroup, fuse_below_million


class Swedish(Language):
    code = "sv"
    name = "Svenska"

    digits = ("noll", "ett", "två", "tre", "fyra", "fem", "sex", "sju", "åtta", "nio")
    teens = (
        "tio", "elva", "tolv", "tretton", "fjorton",
        "femton", "sexton", "sjutton", "arton", "nitton",
    )
    tens = ("tjugo", "trettio", "fyrtio", "femtio", "sextio", "sjuttio", "åttio", "nittio")
    scales = ("", "tusen", "miljon", "miljard", "biljon")
    scales_plural = ("", "tusen", "miljoner", "miljarder", "biljoner")

    negative_word = "minus"
    decimal_word = "komma"
    not_a_number = "Det angivna värdet är inte ett nummer"
    number_too_large = "För stort tal: högst 999 biljoner stöds"

    def below_hundred(self, value: int) -> str:
        return super().below_hundred(value).replace(" ", "")

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        word = f"{self.digits[hundreds]}hundra" if hundreds else ""
        word += self.below_hundred(rest)
        if level >= 2 and word.endswith("ett"):
            word = word[:-3] + "en"
        return word

    def scale_word(self, value: int, level: int) -> str:
        return self.scales[level] if value == 1 else self.scales_plural[level]

    def render_scaled_group(self, group: ScaleGroup) -> str:
        if group.level == 1:
            if group.value == 1:
                return "tusen"
            # "tjugoett" + "tusen" is spelled "tjugoettusen"
            return (self.render_group(group.value, 1) + "tusen").replace("ttt", "tt")
        return super().render_scaled_group(group)

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return fuse_below_million(parts)
