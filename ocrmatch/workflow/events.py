# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Event logging for the workflow layer (JSON lines or plain text)."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

LOGGER_NAME = "ocrmatch.workflow"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def get_logger(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def format_event(event: str, payload: Dict[str, Any], fmt: str = "json") -> str:
    record = {"ts": _utc_now_iso(), "event": event, **payload}
    if fmt == "json":
        return json.dumps(record, ensure_ascii=False, default=str)
    return f"{record.get('ts')} {event} {payload}"


def log_event(
    logger: logging.Logger,
    event: str,
    payload: Dict[str, Any],
    *,
    level: str = "info",
    fmt: str = "json",
) -> None:
    fn = getattr(logger, level, logger.info)
    fn(format_event(event, payload, fmt))


__all__ = ["LOGGER_NAME", "format_event", "get_logger", "log_event"]
