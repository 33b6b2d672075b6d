"""English number words (short scale)."""

from __future__ import annotations

from .base import Language


class English(Language):
    code = "en"
    name = "English"

    digits = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
    teens = (
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    )
    tens = ("twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
    scales = ("", "thousand", "million", "billion", "trillion")

    negative_word = "negative"
    decimal_word = "point"
    not_a_number = "The provided value is not a number"
    number_too_large = "Number too large: maximum 999 trillion is supported"

    def below_hundred(self, value: int) -> str:
        # 21–99 are hyphenated: "ninety-nine"
        words = super().below_hundred(value)
        return words.replace(" ", "-") if value > 20 else words

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        words = []
        if hundreds:
            words.append(f"{self.digits[hundreds]} hundred")
        if rest:
            words.append(self.below_hundred(rest))
        return " ".join(words)
