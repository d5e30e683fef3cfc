# どこで: `src/autodialog/core/color.py`。
# 何を: カラーピッカー用の色値（Color）と、その文字列パース / 正規 16 進表記を提供する。
# なぜ: 色の入出力表記を 1 箇所に閉じ、コントロール側は「不透明な値型」として扱えるようにするため。

from __future__ import annotations

import re
from dataclasses import dataclass

_HTML_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_ASS_RE = re.compile(r"&[hH]([0-9a-fA-F]{1,8})&?")
_RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)


def _clamp_byte(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA の色値。

    a は字幕スタイル流の透明度（0 が不透明）。各チャンネルは 0..255。
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def parse(cls, text: str) -> Color:
        """色の文字列表記を読み、Color を返す。

        受け付ける表記:
        - `#RGB` / `#RRGGBB` / `#RRGGBBAA`
        - `&HBBGGRR&` / `&HAABBGGRR&`
        - `rgb(r, g, b)`

        解釈できない入力は黒（`Color()`）を返す。
        """

        s = str(text).strip()

        m = _HTML_RE.fullmatch(s)
        if m is not None:
            digits = m.group(1)
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            r = int(digits[0:2], 16)
            g = int(digits[2:4], 16)
            b = int(digits[4:6], 16)
            a = int(digits[6:8], 16) if len(digits) == 8 else 0
            return cls(r, g, b, a)

        m = _ASS_RE.fullmatch(s)
        if m is not None:
            packed = int(m.group(1), 16)
            return cls(
                packed & 0xFF,
                (packed >> 8) & 0xFF,
                (packed >> 16) & 0xFF,
                (packed >> 24) & 0xFF,
            )

        m = _RGB_RE.fullmatch(s)
        if m is not None:
            r, g, b = (_clamp_byte(int(x)) for x in m.groups())
            return cls(r, g, b, 0)

        return cls()

    def hex_formatted(self, alpha: bool = False) -> str:
        """`#RRGGBB`（alpha=True なら `#RRGGBBAA`）を返す。"""

        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if alpha:
            text += f"{self.a:02X}"
        return text


__all__ = ["Color"]
