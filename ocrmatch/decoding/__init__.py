"""Tolerant decoder for the JSON-like output of the screen OCR script."""

from .assembler import build_record, decode, iter_records
from .fields import extract, fold_members, lookup, project
from .models import MATCH_FIELDS, FieldKind, FieldSpec, MatchRecord
from .scanner import ScanError, iter_object_spans, split
from .values import NumberLiteral, ValueSyntaxError, parse_members, parse_value

__all__ = [
    "FieldKind",
    "FieldSpec",
    "MATCH_FIELDS",
    "MatchRecord",
    "NumberLiteral",
    "ScanError",
    "ValueSyntaxError",
    "build_record",
    "decode",
    "extract",
    "fold_members",
    "iter_object_spans",
    "iter_records",
    "lookup",
    "parse_members",
    "parse_value",
    "project",
    "split",
]
