# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Assemble :class:`MatchRecord` objects from an OCR payload.

:func:`iter_records` is a single forward pass: each record is projected as
soon as the scanner reports the closing brace of its object, and members are
parsed in place from the payload. :func:`decode` is the all-or-nothing form
that either returns every record or raises :class:`ContainerDecodeError`.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Mapping, Optional

from ..errors import ContainerDecodeError
from .fields import fold_members, lookup
from .models import MATCH_FIELDS, MatchRecord
from .scanner import ScanError, Span, iter_object_spans
from .values import parse_members

logger = logging.getLogger(__name__)


def build_record(members: Mapping[str, Any]) -> MatchRecord:
    """Project the top-level members of one object onto a record."""

    folded = fold_members(members)
    values = {spec.attribute: lookup(folded, spec.key, spec.kind) for spec in MATCH_FIELDS}
    return MatchRecord(**values)


def _next_span(spans: Iterator[Span], payload: Optional[str]) -> Optional[Span]:
    try:
        return next(spans)
    except StopIteration:
        return None
    except ScanError as exc:
        raise ContainerDecodeError(str(exc), payload, exc.offset) from exc
    except (IndexError, TypeError, AttributeError) as exc:
        raise ContainerDecodeError(f"{type(exc).__name__}: {exc}", payload) from exc


def iter_records(payload: Optional[str]) -> Iterator[MatchRecord]:
    """Yield one record per top-level object, in input order.

    The iterator is one-shot. Records preceding a structural error are
    yielded before :class:`ContainerDecodeError` is raised.
    """

    spans = iter_object_spans(payload)
    while True:
        span = _next_span(spans, payload)
        if span is None:
            return
        start, end = span
        yield build_record(parse_members(payload, start, end))


def decode(payload: Optional[str]) -> List[MatchRecord]:
    """Decode a whole payload into records.

    ``None``, blank text, ``null`` and ``[]`` decode to an empty list. A
    bare object decodes to exactly one record.
    """

    records = list(iter_records(payload))
    logger.debug("decoded %d OCR match record(s)", len(records))
    return records


__all__ = ["build_record", "decode", "iter_records"]
