"""Arabic number words.

Arabic puts the ones before the tens ("واحد وعشرون"), links every part
with the conjunction "و", and picks the scale noun by the count:

    1      → singular alone          ألف
    2      → dual alone              ألفان
    3–10   → numeral + plural        ثلاثة آلاف
    11+    → numeral + singular      أحد عشر ألف
"""

from __future__ import annotations

from .base import Language, ScaleGroup


class Arabic(Language):
    code = "ar"
    name = "العربية"

    digits = ("صفر", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة")
    teens = (
        "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
        "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
    )
    tens = ("عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون")
    hundreds = ("مائة", "مائتان", "ثلاثمائة", "أربعمائة", "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة")
    scales = ("", "ألف", "مليون", "مليار", "تريليون")
    scales_dual = ("", "ألفان", "مليونان", "ملياران", "تريليونان")
    scales_plural = ("", "آلاف", "ملايين", "مليارات", "تريليونات")

    negative_word = "سالب"
    decimal_word = "فاصلة"
    not_a_number = "القيمة المقدمة ليست رقما"
    number_too_large = "الرقم كبير جدا: الحد الأقصى المدعوم هو 999 تريليون"

    def below_hundred(self, value: int) -> str:
        if value < 20:
            return super().below_hundred(value)
        tens, ones = divmod(value, 10)
        if ones == 0:
            return self.tens[tens - 2]
        return f"{self.digits[ones]} و{self.tens[tens - 2]}"

    def render_group(self, value: int, level: int) -> str:
        if level and value in (1, 2):
            return ""
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(self.hundreds[hundreds - 1])
        if rest:
            words.append(self.below_hundred(rest))
        return " و".join(words)

    def scale_word(self, value: int, level: int) -> str:
        if value == 1:
            return self.scales[level]
        if value == 2:
            return self.scales_dual[level]
        if 3 <= value <= 10:
            return self.scales_plural[level]
        return self.scales[level]

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return " و".join(text for _, text in parts)
