"""Dutch number words.

Dutch puts the ones before the tens joined by "en" ("eenentwintig"),
spelled "ën" after a vowel ("tweeëntwintig"). A single hundred or
thousand is written without "een"; "miljoen" and larger do not inflect.
"""

from __future__ import annotations

from .base import Language


class Dutch(Language):
    code = "nl"
    name = "Nederlands"

    digits = ("nul", "een", "twee", "drie", "vier", "vijf", "zes", "zeven", "acht", "negen")
    teens = (
        "tien", "elf", "twaalf", "dertien", "veertien",
        "vijftien", "zestien", "zeventien", "achttien", "negentien",
    )
    tens = ("twintig", "dertig", "veertig", "vijftig", "zestig", "zeventig", "tachtig", "negentig")
    scales = ("", "duizend", "miljoen", "miljard", "biljoen")

    negative_word = "negatief"
    decimal_word = "komma"
    not_a_number = "De opgegeven waarde is geen getal"
    number_too_large = "Getal te groot: maximaal 999 biljoen wordt ondersteund"

    def below_hundred(self, value: int) -> str:
        if value < 20:
            return super().below_hundred(value)
        tens, ones = divmod(value, 10)
        if ones == 0:
            return self.tens[tens - 2]
        one = self.digits[ones]
        glue = "ën" if one.endswith("e") else "en"
        return f"{one}{glue}{self.tens[tens - 2]}"

    def render_group(self, value: int, level: int) -> str:
        if value == 1 and level == 1:
            return ""
        hundreds, rest = divmod(value, 100)
        word = ""
        if hundreds == 1:
            word = "honderd"
        elif hundreds:
            word = f"{self.digits[hundreds]}honderd"
        return word + self.below_hundred(rest)

    def render_scaled_group(self, group):
        if group.level == 1:
            # "duizend", "tweeduizend", "honderdduizend"
            return self.render_group(group.value, 1) + self.scales[1]
        return super().render_scaled_group(group)
