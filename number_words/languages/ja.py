"""Japanese number words (kanji numerals).

Japanese groups by four digits (万, 億, 兆) and writes without spaces.
Inside a group 十, 百 and 千 drop a leading 一, but the group scales keep
it: 1000 is 千 and 10000 is 一万.
"""

from __future__ import annotations

from .base import Language, ScaleGroup

_POSITIONS = ("千", "百", "十", "")


class Japanese(Language):
    code = "ja"
    name = "日本語"

    digits = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
    scales = ("", "万", "億", "兆")

    negative_word = "マイナス"
    decimal_word = "点"
    not_a_number = "指定された値は数値ではありません"
    number_too_large = "数値が大きすぎます：最大999兆まで対応しています"

    group_width = 4
    decimal_separator = ""

    def render_group(self, value: int, level: int) -> str:
        word = ""
        for position, digit in zip(_POSITIONS, f"{value:04d}"):
            digit = int(digit)
            if digit == 0:
                continue
            if digit == 1 and position:
                word += position
            else:
                word += self.digits[digit] + position
        return word

    def render_scaled_group(self, group: ScaleGroup) -> str:
        return self.render_group(group.value, group.level) + self.scales[group.level]

    def join_groups(self, parts: list[tuple[ScaleGroup, str]]) -> str:
        return "".join(text for _, text in parts)
