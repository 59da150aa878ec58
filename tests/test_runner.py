import subprocess
from types import SimpleNamespace

import pytest

from ocrmatch.errors import WorkflowError
from ocrmatch.workflow import CommandResult, PowerShellRunner


def test_runner_captures_both_streams(monkeypatch):
    calls = []

    def fake_run(args, check, capture_output, text, timeout):
        calls.append((args, check, capture_output, text, timeout))
        return SimpleNamespace(stdout="out", stderr="err", returncode=4)

    monkeypatch.setattr("ocrmatch.workflow.runner.subprocess.run", fake_run)

    runner = PowerShellRunner(shell="pwsh", timeout=30.0)
    result = runner.run_command("Write-Output 'x'")

    assert result == CommandResult(output="out", error_output="err", exit_code=4)
    args, check, capture_output, text, timeout = calls[0]
    assert args[0] == "pwsh"
    assert args[-2:] == ["-Command", "Write-Output 'x'"]
    assert "-NoProfile" in args
    assert check is False
    assert capture_output is True
    assert text is True
    assert timeout == 30.0


def test_runner_normalises_missing_streams(monkeypatch):
    monkeypatch.setattr(
        "ocrmatch.workflow.runner.subprocess.run",
        lambda *a, **kw: SimpleNamespace(stdout=None, stderr=None, returncode=0),
    )

    assert PowerShellRunner().run_command("x") == CommandResult("", "", 0)


def test_runner_wraps_launch_failures(monkeypatch):
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("powershell.exe")

    monkeypatch.setattr("ocrmatch.workflow.runner.subprocess.run", fake_run)

    with pytest.raises(WorkflowError, match="Failed to launch"):
        PowerShellRunner().run_command("x")


def test_runner_wraps_timeouts(monkeypatch):
    def fake_run(args, **kwargs):
        raise subprocess.TimeoutExpired(args, kwargs.get("timeout"))

    monkeypatch.setattr("ocrmatch.workflow.runner.subprocess.run", fake_run)

    with pytest.raises(WorkflowError, match="did not finish"):
        PowerShellRunner(timeout=1.0).run_command("x")
