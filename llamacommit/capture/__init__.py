"""Command output capture for llamacommit.

This package provides:
- exceptions: CaptureError and DiffError hierarchies
- buffer: CapturedOutput
- runner: capture_command, read_stream
- diff: get_staged_diff
"""

from llamacommit.capture.exceptions import (
    AbnormalTerminationError,
    CaptureError,
    CaptureMemoryError,
    CaptureReadError,
    CaptureReapError,
    CaptureSpawnError,
    DiffCommandError,
    DiffError,
    NoStagedChangesError,
)
from llamacommit.capture.buffer import CapturedOutput
from llamacommit.capture.runner import capture_command, read_stream
from llamacommit.capture.diff import get_staged_diff


__all__ = [
    # Exceptions
    "AbnormalTerminationError",
    "CaptureError",
    "CaptureMemoryError",
    "CaptureReadError",
    "CaptureReapError",
    "CaptureSpawnError",
    "DiffCommandError",
    "DiffError",
    "NoStagedChangesError",
    # Buffer
    "CapturedOutput",
    # Runner
    "capture_command",
    "read_stream",
    # Diff
    "get_staged_diff",
]
