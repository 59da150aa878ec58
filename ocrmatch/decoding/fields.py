# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Project parsed object members onto typed record fields.

Every projection succeeds. An absent key, or a value of the wrong shape,
resolves to the zero value of the requested :class:`FieldKind`. Only the
top-level keys of an object are considered, so a field name that occurs
inside a nested string or sub-object never matches.
"""
from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping, Union

from .models import FieldKind, FieldValue
from .values import NumberLiteral, parse_members

_MISSING = object()
_LEADING_INTEGER_RE = re.compile(r"-?\d+")


def fold_members(members: Mapping[str, Any]) -> Dict[str, Any]:
    """Index ``members`` by case-folded key; the first spelling wins."""

    folded: Dict[str, Any] = {}
    for key, value in members.items():
        folded.setdefault(key.casefold(), value)
    return folded


def project(value: Any, kind: Union[FieldKind, str]) -> FieldValue:
    kind = FieldKind(kind)
    if kind is FieldKind.TEXT:
        return value if isinstance(value, str) else ""

    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return kind.zero
    if isinstance(value, float) and not math.isfinite(value):
        return kind.zero
    if kind is FieldKind.INTEGER:
        if isinstance(value, NumberLiteral):
            # leading "-?digits" of the lexeme; a "+" sign has none
            match = _LEADING_INTEGER_RE.match(value.lexeme)
            return int(match.group(0)) if match else 0
        return int(value)
    return float(value)


def lookup(folded: Mapping[str, Any], field_name: str, kind: Union[FieldKind, str]) -> FieldValue:
    value = folded.get(field_name.casefold(), _MISSING)
    if value is _MISSING:
        return FieldKind(kind).zero
    return project(value, kind)


def extract(object_text: str, field_name: str, kind: Union[FieldKind, str]) -> FieldValue:
    """Return ``field_name`` from ``object_text`` as ``kind``, or its zero value."""

    if not object_text:
        return FieldKind(kind).zero
    return lookup(fold_members(parse_members(object_text)), field_name, kind)


__all__ = ["extract", "fold_members", "lookup", "project"]
