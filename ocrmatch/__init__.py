"""OCRMatch public package surface."""

from __future__ import annotations

from ._version import __version__
from .decoding import FieldKind, MatchRecord, decode, extract, iter_records, split
from .errors import ContainerDecodeError, OcrMatchError, WorkflowError

__all__ = [
    "ContainerDecodeError",
    "FieldKind",
    "MatchRecord",
    "OcrMatchError",
    "WorkflowError",
    "__version__",
    "decode",
    "extract",
    "iter_records",
    "split",
]
