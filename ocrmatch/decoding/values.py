# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Minimal value-tree parser for OCR payload objects.

Values are parsed into plain Python nodes (``str``, ``int``, ``float``,
``bool``, ``None``, ``list`` and ``dict``). :func:`parse_value` is strict.
:func:`parse_members` is the tolerant entry point used by the decoder: it
reads the top-level members of one object and skips any member it cannot
parse instead of failing the whole object.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

_NUMBER_RE = re.compile(r"[+-]?\d+(\.\d+)?([eE][+-]?\d+)?")
_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")
_WHITESPACE = " \t\r\n"
_REPLACEMENT_CHAR = "\ufffd"

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_LITERALS = (("true", True), ("false", False), ("null", None))


class NumberLiteral(float):
    """Float parsed from a lexeme that is not a plain ``-?digits`` integer.

    The lexeme is kept so integer fields can apply the leading-digits rule.
    """

    def __new__(cls, lexeme: str) -> "NumberLiteral":
        value = super().__new__(cls, lexeme)
        value.lexeme = lexeme
        return value


class ValueSyntaxError(ValueError):
    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class _Reader:
    """Cursor over ``text[pos:end]``; parses without slicing the source."""

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None) -> None:
        self.text = text
        self.pos = start
        self.end = len(text) if end is None else end

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < self.end else ""

    def skip_ws(self) -> None:
        while self.pos < self.end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise ValueSyntaxError(f"expected {ch!r}", self.pos)
        self.pos += 1

    def parse_value(self) -> Any:
        self.skip_ws()
        ch = self.peek()
        if ch == '"':
            return self.parse_string()
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == "-" or ch == "+" or ch.isdigit():
            return self.parse_number()
        for word, value in _LITERALS:
            if self.text.startswith(word, self.pos, self.end):
                self.pos += len(word)
                return value
        raise ValueSyntaxError("expected a value", self.pos)

    def parse_string(self) -> str:
        self.expect('"')
        text = self.text
        chunks: List[str] = []
        run_start = self.pos
        while self.pos < self.end:
            ch = text[self.pos]
            if ch == '"':
                chunks.append(text[run_start:self.pos])
                self.pos += 1
                return "".join(chunks)
            if ch != "\\":
                self.pos += 1
                continue
            chunks.append(text[run_start:self.pos])
            if self.pos + 1 >= self.end:
                break
            code = text[self.pos + 1]
            if code in _SIMPLE_ESCAPES:
                chunks.append(_SIMPLE_ESCAPES[code])
                self.pos += 2
            elif code == "u" and self._hex4(self.pos + 2) is not None:
                chunks.append(self._parse_unicode_escape())
            else:
                # unknown escape, kept as written
                chunks.append(text[self.pos:self.pos + 2])
                self.pos += 2
            run_start = self.pos
        raise ValueSyntaxError("unterminated string", self.pos)

    def _hex4(self, at: int) -> Optional[int]:
        if _HEX4_RE.fullmatch(self.text, at, min(at + 4, self.end)) is None:
            return None
        return int(self.text[at:at + 4], 16)

    def _parse_unicode_escape(self) -> str:
        """Decode ``\\uXXXX`` at the cursor, joining UTF-16 surrogate pairs."""

        unit = self._hex4(self.pos + 2)
        self.pos += 6
        if 0xD800 <= unit <= 0xDBFF and self.text.startswith("\\u", self.pos, self.end):
            low = self._hex4(self.pos + 2)
            if low is not None and 0xDC00 <= low <= 0xDFFF:
                self.pos += 6
                return chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))
        if 0xD800 <= unit <= 0xDFFF:
            return _REPLACEMENT_CHAR
        return chr(unit)

    def parse_number(self) -> Any:
        match = _NUMBER_RE.match(self.text, self.pos, self.end)
        if match is None:
            raise ValueSyntaxError("malformed number", self.pos)
        self.pos = match.end()
        lexeme = match.group(0)
        if lexeme[0] != "+" and match.group(1) is None and match.group(2) is None:
            return int(lexeme)
        return NumberLiteral(lexeme)

    def parse_array(self) -> List[Any]:
        self.expect("[")
        items: List[Any] = []
        self.skip_ws()
        if self.peek() == "]":
            self.pos += 1
            return items
        while True:
            items.append(self.parse_value())
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
                continue
            self.expect("]")
            return items

    def parse_object(self) -> Dict[str, Any]:
        self.expect("{")
        members: Dict[str, Any] = {}
        self.skip_ws()
        if self.peek() == "}":
            self.pos += 1
            return members
        while True:
            self.skip_ws()
            key = self.parse_string()
            self.skip_ws()
            self.expect(":")
            value = self.parse_value()
            members.setdefault(key, value)
            self.skip_ws()
            if self.peek() == ",":
                self.pos += 1
                continue
            self.expect("}")
            return members

    def resync(self) -> bool:
        """Advance past the current member.

        Stops after the next top-level ``,`` (returns ``True``) or on the
        closing ``}`` of the enclosing object or the end of input (returns
        ``False``).
        """

        text = self.text
        depth = 0
        in_string = False
        escape_next = False
        while self.pos < self.end:
            ch = text[self.pos]
            if in_string:
                if escape_next:
                    escape_next = False
                elif ch == "\\":
                    escape_next = True
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif ch in "{[":
                depth += 1
            elif ch in "}]":
                if depth == 0 and ch == "}":
                    return False
                depth = max(0, depth - 1)
            elif ch == "," and depth == 0:
                self.pos += 1
                return True
            self.pos += 1
        return False


def parse_value(text: str) -> Any:
    """Parse exactly one value from ``text``; surrounding whitespace is allowed."""

    reader = _Reader(text)
    value = reader.parse_value()
    reader.skip_ws()
    if not reader.at_end():
        raise ValueSyntaxError("unexpected trailing content", reader.pos)
    return value


def parse_members(text: str, start: int = 0, end: Optional[int] = None) -> Dict[str, Any]:
    """Parse the top-level members of the object at ``text[start:end]``.

    Never raises. Members with a malformed key or value are skipped, a
    missing comma before the next quoted key is tolerated and the first
    occurrence of a duplicated key wins. Anything that does not start with
    ``{`` yields an empty mapping.
    """

    reader = _Reader(text, start, end)
    reader.skip_ws()
    if reader.peek() != "{":
        return {}
    reader.pos += 1

    members: Dict[str, Any] = {}
    while True:
        reader.skip_ws()
        ch = reader.peek()
        if ch == "" or ch == "}":
            break
        if ch == ",":
            reader.pos += 1
            continue
        member_start = reader.pos
        try:
            key = reader.parse_string()
            reader.skip_ws()
            reader.expect(":")
            value = reader.parse_value()
        except ValueSyntaxError:
            # rescan from the member start so nesting opened by the bad value is tracked
            reader.pos = member_start
            if reader.resync():
                continue
            break
        members.setdefault(key, value)

        reader.skip_ws()
        ch = reader.peek()
        if ch == ",":
            reader.pos += 1
        elif ch == '"':
            continue
        elif ch == "" or ch == "}":
            break
        elif not reader.resync():
            break
    return members


__all__ = ["NumberLiteral", "ValueSyntaxError", "parse_members", "parse_value"]
