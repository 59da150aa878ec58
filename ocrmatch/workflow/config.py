# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Runtime configuration for the screen OCR workflow.

Nothing here is hard-coded to a machine: the OCR script location must be
supplied explicitly or through ``OCRMATCH_SCRIPT_PATH``. Empty or invalid
environment values fall back to the defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..errors import WorkflowError

DEFAULT_SHELL = "powershell.exe"


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_truthy(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class WorkflowConfig:
    script_path: str
    shell: str = DEFAULT_SHELL
    activation_wait_ms: int = 2000
    # 0 disables the timeout
    command_timeout_sec: float = 0.0
    check_script: bool = True
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def command_timeout(self) -> Optional[float]:
        return self.command_timeout_sec if self.command_timeout_sec > 0 else None

    @classmethod
    def from_env(cls, script_path: Optional[str] = None) -> "WorkflowConfig":
        path = script_path or _env_str("OCRMATCH_SCRIPT_PATH", "")
        if not path:
            raise WorkflowError("OCR script path is not configured; set OCRMATCH_SCRIPT_PATH")
        return cls(
            script_path=path,
            shell=_env_str("OCRMATCH_SHELL", DEFAULT_SHELL),
            activation_wait_ms=max(0, _env_int("OCRMATCH_ACTIVATION_WAIT_MS", 2000)),
            command_timeout_sec=max(0.0, _env_float("OCRMATCH_COMMAND_TIMEOUT_SEC", 0.0)),
            check_script=_env_truthy("OCRMATCH_CHECK_SCRIPT", True),
            log_level=_env_str("OCRMATCH_LOG_LEVEL", "INFO").upper(),
            log_format=_env_str("OCRMATCH_LOG_FORMAT", "json").lower(),
        )


__all__ = ["DEFAULT_SHELL", "WorkflowConfig"]
