# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Split an OCR payload into its top-level objects.

The scanner only tracks quoted strings, escapes and brace depth. It does not
validate the grammar inside an object, so braces or commas that appear
inside string values never affect segmentation.

Unbalanced input fails closed: :class:`ScanError` is raised as soon as the
imbalance is detected. Spans found before that point may already have been
yielded by :func:`iter_object_spans`; callers that need all-or-nothing
behaviour should materialise the spans first (``decode`` does).
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

Span = Tuple[int, int]

_ABSENT_MARKERS = frozenset({"", "null", "[]"})


class ScanError(ValueError):
    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.offset = offset


def _trimmed_bounds(text: str) -> Span:
    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())
    return start, max(start, end)


def _scan(text: str, start: int, stop: int) -> Iterator[Span]:
    depth = 0
    in_string = False
    escape_next = False
    object_start = start
    string_start = start

    i = start
    while i < stop:
        ch = text[i]
        if in_string:
            if escape_next:
                escape_next = False
            elif ch == "\\":
                escape_next = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            string_start = i
        elif ch == "{":
            if depth == 0:
                object_start = i
            depth += 1
        elif ch == "}":
            if depth == 0:
                raise ScanError("unmatched '}'", i)
            depth -= 1
            if depth == 0:
                yield object_start, i + 1
                i += 1
                while i < stop and (text[i] == "," or text[i].isspace()):
                    i += 1
                continue
        i += 1

    if in_string:
        raise ScanError("unterminated string", string_start)
    if depth:
        raise ScanError(f"{depth} unclosed '{{'", object_start)


def iter_object_spans(text: Optional[str]) -> Iterator[Span]:
    """Yield ``(start, end)`` offsets of each top-level object in ``text``.

    Accepts the absence markers (``None``, blank, ``null``, ``[]``), a bare
    object or an array of objects. Offsets index into ``text`` itself and
    are half-open, so ``text[start:end]`` is the object including braces.
    """

    if text is None:
        return
    start, end = _trimmed_bounds(text)
    if text[start:end] in _ABSENT_MARKERS:
        return

    first = text[start]
    if first == "[":
        if text[end - 1] != "]":
            raise ScanError("array is missing its closing ']'", end - 1)
        yield from _scan(text, start + 1, end - 1)
    elif first == "{":
        if text[end - 1] != "}":
            raise ScanError("object is missing its closing '}'", end - 1)
        spans = list(_scan(text, start, end))
        if len(spans) != 1 or spans[0] != (start, end):
            raise ScanError("unexpected content after the top-level object", spans[0][1])
        yield spans[0]
    else:
        raise ScanError("expected '[' or '{'", start)


def split(text: Optional[str]) -> List[str]:
    """Return the raw substring of every top-level object, in input order."""

    if text is None:
        return []
    return [text[start:end] for start, end in iter_object_spans(text)]


__all__ = ["ScanError", "Span", "iter_object_spans", "split"]
