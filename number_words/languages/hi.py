"""Hindi number words (Indian numbering system).

The last three digits form the first group; every higher group holds two
digits: हज़ार (10^3), लाख (10^5), करोड़ (10^7), अरब (10^9), खरब (10^11),
नील (10^13). Every number from 21 to 99 has its own irregular word.
"""

from __future__ import annotations

from .base import Language, ScaleGroup, split_groups


class Hindi(Language):
    code = "hi"
    name = "हिन्दी"

    digits = ("शून्य", "एक", "दो", "तीन", "चार", "पांच", "छह", "सात", "आठ", "नौ")
    teens = ("दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस")
    tens = ("बीस", "तीस", "चालीस", "पचास", "साठ", "सत्तर", "अस्सी", "नब्बे")
    compounds = (
        ("इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस"),
        ("इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस"),
        ("इकतालीस", "बयालीस", "तैंतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास"),
        ("इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ"),
        ("इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर"),
        ("इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी"),
        ("इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी"),
        ("इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे"),
    )
    scales = ("", "हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील")

    negative_word = "ऋण"
    decimal_word = "दशमलव"
    not_a_number = "दिया गया मान एक संख्या नहीं है"
    number_too_large = "बहुत बड़ी संख्या: अधिकतम 99 नील समर्थित है"

    def below_hundred(self, value: int) -> str:
        tens, ones = divmod(value, 10)
        if tens >= 2 and ones:
            return self.compounds[tens - 2][ones - 1]
        return super().below_hundred(value)

    def split(self, digits: str) -> list[ScaleGroup]:
        head, tail = digits[:-3], digits[-3:]
        groups = [ScaleGroup(value=int(tail), level=0, digits=tail)]
        for group in split_groups(head, 2):
            groups.append(ScaleGroup(value=group.value, level=group.level + 1, digits=group.digits))
        return groups

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(f"{self.digits[hundreds]} सौ")
        if rest:
            words.append(self.below_hundred(rest))
        return " ".join(words)
