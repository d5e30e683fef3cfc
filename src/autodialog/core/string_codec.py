# どこで: `src/autodialog/core/string_codec.py`。
# 何を: 区切り文字（`|` / `:` など）を含む文字列を 1 トークンへ埋め込むためのインライン符号化を提供する。
# なぜ: フラット文字列 `name:token|...` の永続化形式で、任意の文字列を曖昧さなく往復させるため。

from __future__ import annotations

_ESCAPED_BYTES = frozenset({0x23, 0x2C, 0x3A, 0x7C})  # '#', ',', ':', '|'
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _needs_escape(byte: int) -> bool:
    # 制御文字と非 ASCII バイトもすべて #XX にする。
    return byte <= 0x1F or byte >= 0x80 or byte in _ESCAPED_BYTES


def inline_string_encode(text: str) -> str:
    """text を `#XX` エスケープ済みのトークンへ変換して返す。"""

    out: list[str] = []
    for byte in text.encode("utf-8"):
        if _needs_escape(byte):
            out.append(f"#{byte:02X}")
        else:
            out.append(chr(byte))
    return "".join(out)


def inline_string_decode(token: str) -> str:
    """`inline_string_encode` の逆変換。

    `#` の後に 16 進 2 桁が続かない箇所はそのまま残す。
    """

    raw = token.encode("utf-8")
    out = bytearray()
    i = 0
    n = len(raw)
    while i < n:
        byte = raw[i]
        if (
            byte == 0x23
            and i + 2 < n
            and raw[i + 1] in _HEX_DIGITS
            and raw[i + 2] in _HEX_DIGITS
        ):
            out.append(int(raw[i + 1 : i + 3], 16))
            i += 3
            continue
        out.append(byte)
        i += 1
    return out.decode("utf-8", errors="replace")


__all__ = ["inline_string_encode", "inline_string_decode"]
