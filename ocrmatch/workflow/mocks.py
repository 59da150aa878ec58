"""Mock implementations of workflow collaborators for testing."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .interfaces import CommandResult, CommandRunner


class MockCommandRunner(CommandRunner):
    """Return queued results in order, then ``default`` for every other call."""

    def __init__(
        self,
        responses: Optional[Iterable[CommandResult]] = None,
        default: CommandResult = CommandResult(output="", error_output="", exit_code=0),
    ) -> None:
        self.calls: List[str] = []
        self.responses: List[CommandResult] = list(responses or [])
        self.default = default

    def queue(self, output: str = "", error_output: str = "", exit_code: int = 0) -> None:
        self.responses.append(CommandResult(output=output, error_output=error_output, exit_code=exit_code))

    def run_command(self, text: str) -> CommandResult:
        self.calls.append(text)
        if self.responses:
            return self.responses.pop(0)
        return self.default


class RecordingSleep:
    """Stand-in for ``time.sleep`` that only records requested delays."""

    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
