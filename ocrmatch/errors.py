# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Exception hierarchy shared by the decoder and the workflow layer."""
from __future__ import annotations

from typing import Optional

_PREVIEW_CHARS = 200


def _preview(payload: Optional[str]) -> str:
    if payload is None:
        return "None"
    if len(payload) <= _PREVIEW_CHARS:
        return payload
    return payload[:_PREVIEW_CHARS] + f"... ({len(payload)} chars)"


class OcrMatchError(Exception):
    """Base class for all errors raised by :mod:`ocrmatch`."""


class ContainerDecodeError(OcrMatchError, ValueError):
    """Object boundaries could not be established for a whole payload.

    The offending text is kept on :attr:`payload` so callers can log or
    persist it; :attr:`offset` points at the character where the scan gave
    up when that is known.
    """

    def __init__(self, reason: str, payload: Optional[str], offset: Optional[int] = None) -> None:
        self.reason = reason
        self.payload = payload
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"Failed to decode OCR payload{where}: {reason}. Payload: {_preview(payload)}")


class WorkflowError(OcrMatchError, RuntimeError):
    """Base class for failures of the external OCR workflow."""


class ScriptNotFoundError(WorkflowError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"OCR script not found at: {path}")


class CommandFailedError(WorkflowError):
    """The shell exited with a non-zero status."""

    def __init__(self, exit_code: int, output: str = "", error_output: str = "") -> None:
        self.exit_code = exit_code
        self.output = output
        self.error_output = error_output
        detail = error_output.strip() or output.strip()
        super().__init__(f"Command failed (exit code: {exit_code}): {detail}")


class WindowActivationError(WorkflowError):
    pass


class ClickError(WorkflowError):
    pass


__all__ = [
    "ClickError",
    "CommandFailedError",
    "ContainerDecodeError",
    "OcrMatchError",
    "ScriptNotFoundError",
    "WindowActivationError",
    "WorkflowError",
]
