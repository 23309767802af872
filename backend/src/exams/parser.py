"""Decoding of exam file contents.

Two formats are recognised by file extension:

* ``.json`` is parsed as strict RFC 8259 JSON with the standard library
  decoder. The ``NaN``/``Infinity`` extensions Python normally tolerates are
  rejected.
* ``.jsonc`` is JSON with ``//`` and ``/* */`` comments and trailing commas.
  Those are blanked out in a single pass, then the text goes through the same
  strict decoder, so the grammar is otherwise identical.

Either way the result is a plain Python value (``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` or ``dict``) with the nesting and key order of the
source document.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from .errors import ExamParseError


class ContentFormat(str, Enum):
    JSON = "json"
    JSONC = "jsonc"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["ContentFormat"]:
        """Map a file extension (leading dot included) to a format, or ``None``."""
        for fmt in cls:
            if fmt.extension == extension:
                return fmt
        return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name!r}")


def _decode_text(data: bytes) -> str:
    text = data.decode("utf-8")
    if text.startswith("\ufeff"):
        raise ValueError("unexpected UTF-8 byte order mark")
    return text


def _blank(chars: list[str], start: int, end: int) -> None:
    for index in range(start, end):
        if chars[index] not in "\r\n":
            chars[index] = " "


def strip_jsonc(text: str) -> str:
    """Replace comments and trailing commas in ``text`` with whitespace.

    Line and column positions are unchanged, so decoder errors still point at
    the right place. A comma counts as trailing only when it follows a value
    and is followed (ignoring whitespace and comments) by ``]`` or ``}``.
    """
    chars = list(text)
    length = len(text)
    index = 0
    in_string = False
    previous = ""
    pending_comma: Optional[int] = None

    while index < length:
        char = text[index]
        if in_string:
            if char == "\\":
                index += 2
                continue
            if char == '"':
                in_string = False
                previous = char
            index += 1
            continue

        if text.startswith("//", index):
            end = text.find("\n", index)
            end = length if end < 0 else end
            _blank(chars, index, end)
            index = end
            continue
        if text.startswith("/*", index):
            end = text.find("*/", index + 2)
            if end < 0:
                raise ValueError(f"unterminated block comment at char {index}")
            _blank(chars, index, end + 2)
            index = end + 2
            continue

        if char.isspace():
            index += 1
            continue

        if char in "]}" and pending_comma is not None:
            chars[pending_comma] = " "
        pending_comma = index if char == "," and previous not in ("", "[", "{", ",") else None
        if char == '"':
            in_string = True
        previous = char
        index += 1

    return "".join(chars)


def parse_content(data: bytes, fmt: ContentFormat, path: str | Path | None = None) -> Any:
    """Parse ``data`` according to ``fmt``.

    Raises :class:`ExamParseError` carrying ``path`` when the content is not
    valid for its format, including documents nested too deeply to decode.
    Nothing is returned for partially valid input.
    """
    fmt = ContentFormat(fmt)
    try:
        text = _decode_text(data)
        if fmt is ContentFormat.JSONC:
            text = strip_jsonc(text)
        return json.loads(text, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise ExamParseError(path, fmt.value, str(exc)) from exc
    except RecursionError as exc:
        raise ExamParseError(path, fmt.value, "maximum nesting depth exceeded") from exc
