# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Screen OCR workflow driven through an external PowerShell script.

Every command dot-sources the configured OCR script and then calls one of
its functions (``Find-WindowByTitle``, ``Find-TextOnScreen``,
``Click-Coordinates``). Process handling is delegated to an injected
:class:`~ocrmatch.workflow.interfaces.CommandRunner`, so tests can swap in
:class:`~ocrmatch.workflow.mocks.MockCommandRunner`.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ..decoding import MatchRecord, decode
from ..errors import ClickError, CommandFailedError, ScriptNotFoundError, WindowActivationError
from .config import WorkflowConfig
from .events import get_logger, log_event
from .interfaces import CommandRunner

ACTIVATION_MARKER = "SUCCESS"
CLICK_MARKER = "CLICK_SUCCESS"


def quote_ps(value: object) -> str:
    """Render ``value`` as a single-quoted PowerShell string literal."""

    return "'" + str(value).replace("'", "''") + "'"


def format_results(search_term: str, records: Sequence[MatchRecord]) -> List[str]:
    lines = [f"Search for '{search_term}': Found {len(records)} matches"]
    for idx, match in enumerate(records):
        lines.append(
            f"  Match {idx}: '{match.text}' at ({match.center_x}, {match.center_y}) "
            f"confidence: {match.confidence}"
        )
    return lines


class OcrWorkflow:
    def __init__(
        self,
        config: WorkflowConfig,
        runner: CommandRunner,
        *,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self._sleep = sleep
        self.logger = logger or get_logger(config.log_level)

    def _log(self, event: str, level: str = "info", **payload) -> None:
        log_event(self.logger, event, payload, level=level, fmt=self.config.log_format)

    def run_script(self, body: str) -> str:
        """Run ``body`` after dot-sourcing the OCR script; return stdout."""

        script_path = self.config.script_path
        if self.config.check_script and not Path(script_path).is_file():
            raise ScriptNotFoundError(script_path)

        command = f". {quote_ps(script_path)}\n{body}"
        result = self.runner.run_command(command)
        if result.exit_code != 0:
            self._log(
                "command_failed",
                level="warning",
                exit_code=result.exit_code,
                stderr=result.error_output.strip(),
            )
            raise CommandFailedError(result.exit_code, result.output, result.error_output)
        return result.output

    def activate_window(self, partial_title: str, wait_ms: Optional[int] = None) -> bool:
        """Bring the first window whose title contains ``partial_title`` to front."""

        title = quote_ps(partial_title)
        body = "\n".join(
            [
                f"$windows = @(Find-WindowByTitle -Title {title})",
                "if ($windows.Count -eq 0) {",
                f"    throw ('No windows found with title containing: ' + {title})",
                "}",
                "[Win32]::SetForegroundWindow($windows[0]) | Out-Null",
                "Start-Sleep -Milliseconds 500",
                f"Write-Output '{ACTIVATION_MARKER}'",
            ]
        )
        try:
            output = self.run_script(body)
        except CommandFailedError as exc:
            raise WindowActivationError(f"Window activation failed: {exc}") from exc

        wait = self.config.activation_wait_ms if wait_ms is None else wait_ms
        if wait > 0:
            self._sleep(wait / 1000.0)

        activated = ACTIVATION_MARKER in output
        self._log("window_activated", title=partial_title, activated=activated)
        return activated

    def click_at(self, x: int, y: int) -> bool:
        body = f"Click-Coordinates -X {int(x)} -Y {int(y)}\nWrite-Output '{CLICK_MARKER}'"
        try:
            output = self.run_script(body)
        except CommandFailedError as exc:
            raise ClickError(f"Click operation failed: {exc}") from exc
        clicked = CLICK_MARKER in output
        self._log("click", x=int(x), y=int(y), clicked=clicked)
        return clicked

    def click_match(self, record: MatchRecord) -> bool:
        return self.click_at(record.center_x, record.center_y)

    def find_text(self, search_term: str) -> List[MatchRecord]:
        """Search the screen for ``search_term`` and decode the matches."""

        body = f"Find-TextOnScreen -SearchText {quote_ps(search_term)} | ConvertTo-Json -Depth 4 -Compress"
        records = decode(self.run_script(body))
        self.log_results(search_term, records)
        return records

    def find_and_click(self, search_term: str, index: int = 0) -> Optional[MatchRecord]:
        records = self.find_text(search_term)
        if not records:
            return None
        if not 0 <= index < len(records):
            raise IndexError(f"match index {index} out of range for {len(records)} matches")
        record = records[index]
        if not self.click_match(record):
            raise ClickError(f"Click on '{record.text}' was not confirmed by the script")
        return record

    def log_results(self, search_term: str, records: Sequence[MatchRecord]) -> None:
        self._log(
            "search_results",
            term=search_term,
            count=len(records),
            lines=format_results(search_term, records),
        )


__all__ = ["OcrWorkflow", "format_results", "quote_ps"]
