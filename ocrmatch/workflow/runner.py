# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Command runner backed by a PowerShell subprocess.

Both output streams are captured through ``subprocess.run``, which drains
stdout and stderr concurrently before waiting for the exit status, so a
chatty script cannot block on a full pipe buffer.
"""
from __future__ import annotations

import subprocess
from typing import List, Optional

from ..errors import WorkflowError
from .config import DEFAULT_SHELL
from .interfaces import CommandResult, CommandRunner


class PowerShellRunner(CommandRunner):
    """Run script text with ``<shell> -Command``.

    Args:
        shell: PowerShell executable (``powershell.exe`` or ``pwsh``).
        timeout: Seconds before the process is killed; ``None`` waits forever.
    """

    def __init__(self, shell: str = DEFAULT_SHELL, timeout: Optional[float] = None) -> None:
        self.shell = shell
        self.timeout = timeout

    def build_args(self, text: str) -> List[str]:
        return [
            self.shell,
            "-ExecutionPolicy",
            "Bypass",
            "-NoProfile",
            "-NonInteractive",
            "-Command",
            text,
        ]

    def run_command(self, text: str) -> CommandResult:
        try:
            proc = subprocess.run(
                self.build_args(text),
                check=False,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise WorkflowError(f"{self.shell} did not finish within {self.timeout}s") from exc
        except OSError as exc:
            raise WorkflowError(f"Failed to launch {self.shell}: {exc}") from exc
        return CommandResult(
            output=proc.stdout or "",
            error_output=proc.stderr or "",
            exit_code=proc.returncode,
        )
