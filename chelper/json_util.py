"""Escaping and unescaping of JSON string literals with position tracking."""

from __future__ import annotations

from dataclasses import dataclass, field

from chelper.error_reason import ErrorReason

_ESCAPED = frozenset('"\\/\b\f\n\r\t')
_SIMPLE_ESCAPES = frozenset('"\\/bfnrt')
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass
class ConvertResult:
    """Result of decoding a JSON string literal."""

    result: str = ""
    index_convert_list: list[int] = field(default_factory=list)
    is_complete: bool = False
    error_reason: ErrorReason | None = None

    def convert(self, index: int) -> int:
        """Map an index in the decoded text to a position in the source."""
        return self.index_convert_list[index]


def string_to_json_string(text: str) -> str:
    """Put a backslash in front of every character that JSON escapes."""
    return "".join("\\" + ch if ch in _ESCAPED else ch for ch in text)


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def next(self) -> str | None:
        """Advance one character and return it, or None past the end."""
        if self.index < len(self.text):
            self.index += 1
        if self.index < len(self.text):
            return self.text[self.index]
        return None


def json_string_to_string(text: str) -> ConvertResult:
    """Decode a JSON string literal that starts with its opening quote."""
    result = ConvertResult()
    if not text:
        result.error_reason = ErrorReason.incomplete(0, 0, "json字符串必须在双引号内")
        return result
    reader = _Reader(text)
    chars: list[str] = []
    result.index_convert_list.append(reader.index)
    while True:
        ch = reader.next()
        if ch is None:
            result.is_complete = False
            break
        if ch == '"':
            result.is_complete = True
            break
        if ch != "\\":
            chars.append(ch)
            result.index_convert_list.append(reader.index)
            continue
        ch = reader.next()
        if ch is None:
            result.error_reason = ErrorReason.incomplete(
                reader.index - 1, reader.index, "转义字符缺失后半部分"
            )
        elif ch in _SIMPLE_ESCAPES:
            chars.append(ch)
            result.index_convert_list.append(reader.index)
        elif ch == "u":
            _read_unicode_escape(reader, chars, result)
        else:
            result.error_reason = ErrorReason.content_error(
                reader.index - 1, reader.index + 1, f"未知的转义字符 -> \\{ch}"
            )
        if result.error_reason is not None:
            break
    result.result = "".join(chars)
    return result


def _read_unicode_escape(reader: _Reader, chars: list[str], result: ConvertResult) -> None:
    sequence = ""
    for i in range(4):
        ch = reader.next()
        if ch is None:
            result.error_reason = ErrorReason.content_error(
                reader.index - 2 - i, reader.index, f"字符串转义缺失后半部分 -> \\u{sequence}"
            )
            break
        sequence += ch
    if len(sequence) < 4:
        return
    bad = next((ch for ch in sequence if ch not in _HEX_DIGITS), None)
    if bad is not None:
        result.error_reason = ErrorReason.incomplete(
            reader.index - len(sequence) - 1,
            reader.index + 1,
            f"字符串转义出现非法字符{bad} -> \\u{sequence}",
        )
        return
    value = int(sequence, 16)
    if value <= 0 or value > 0x10FFFF:
        result.error_reason = ErrorReason.content_error(
            reader.index - len(sequence) - 1,
            reader.index + 1,
            f"字符串转义的Unicode值无效 -> \\u{sequence}",
        )
        return
    chars.append(chr(value))
    result.index_convert_list.append(reader.index)