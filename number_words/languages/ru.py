"""Russian number words.

Each scale noun has three forms chosen from the last two digits of its own
group (тысяча / тысячи / тысяч), and "тысяча" is feminine, so the thousands
group counts with "одна" and "две" instead of "один" and "два".
"""

from __future__ import annotations

from .base import Language, select_slavic_form


class Russian(Language):
    code = "ru"
    name = "Русский"

    digits = ("ноль", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")
    digits_feminine = ("ноль", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")
    teens = (
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
        "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    )
    tens = (
        "двадцать", "тридцать", "сорок", "пятьдесят",
        "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
    )
    hundreds = ("сто", "двести", "триста", "четыреста", "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот")
    scale_forms = (
        (),
        ("тысяча", "тысячи", "тысяч"),
        ("миллион", "миллиона", "миллионов"),
        ("миллиард", "миллиарда", "миллиардов"),
        ("триллион", "триллиона", "триллионов"),
    )

    negative_word = "минус"
    decimal_word = "целых"
    not_a_number = "Предоставленное значение не является числом"
    number_too_large = "Слишком большое число: поддерживается максимум 999 триллионов"

    def render_group(self, value: int, level: int) -> str:
        hundreds, rest = divmod(value, 100)
        tens, ones = divmod(rest, 10)
        words = []
        if hundreds:
            words.append(self.hundreds[hundreds - 1])
        if 10 <= rest < 20:
            words.append(self.teens[rest - 10])
        else:
            if tens:
                words.append(self.tens[tens - 2])
            if ones:
                names = self.digits_feminine if level == 1 else self.digits
                words.append(names[ones])
        return " ".join(words)

    def scale_word(self, value: int, level: int) -> str:
        return self.scale_forms[level][select_slavic_form(value)]
