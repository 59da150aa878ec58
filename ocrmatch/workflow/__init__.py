"""Screen OCR workflow: configuration, command runners and the session."""

from .config import WorkflowConfig
from .events import format_event, get_logger, log_event
from .interfaces import CommandResult, CommandRunner
from .mocks import MockCommandRunner, RecordingSleep
from .runner import PowerShellRunner
from .session import OcrWorkflow, format_results, quote_ps

__all__ = [
    "CommandResult",
    "CommandRunner",
    "MockCommandRunner",
    "OcrWorkflow",
    "PowerShellRunner",
    "RecordingSleep",
    "WorkflowConfig",
    "format_event",
    "format_results",
    "get_logger",
    "log_event",
    "quote_ps",
]
