# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Interfaces for the external collaborators of the OCR workflow."""
from __future__ import annotations

from typing import NamedTuple, Protocol


class CommandResult(NamedTuple):
    output: str
    error_output: str
    exit_code: int


class CommandRunner(Protocol):
    def run_command(self, text: str) -> CommandResult:
        ...
