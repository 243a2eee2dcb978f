"""Capture-related exception classes.

Contains all exception classes for command output capture:
- CaptureError: Base exception for capture failures
- CaptureSpawnError: The capture command could not be launched
- CaptureMemoryError: The capture buffer could not grow
- CaptureReadError: Reading the command's output failed
- CaptureReapError: Waiting for the command to finish failed
- AbnormalTerminationError: The command was killed by a signal
- DiffError: Base exception for staged diff problems
- DiffCommandError: The diff command exited with a non-zero status
- NoStagedChangesError: The staged diff is empty
"""


class CaptureError(Exception):
    """Base exception for command capture errors."""

    stage = "capture"


class CaptureSpawnError(CaptureError):
    """Raised when the capture command cannot be launched."""

    pass


class CaptureMemoryError(CaptureError):
    """Raised when the capture buffer cannot be grown."""

    pass


class CaptureReadError(CaptureError):
    """Raised when reading the command's output stream fails."""

    pass


class CaptureReapError(CaptureError):
    """Raised when waiting for the capture command fails."""

    pass


class AbnormalTerminationError(CaptureError):
    """Raised when the capture command is terminated by a signal."""

    pass


class DiffError(Exception):
    """Base exception for staged diff errors."""

    stage = "diff"


class DiffCommandError(DiffError):
    """Raised when the diff command exits with a non-zero status."""

    pass


class NoStagedChangesError(DiffError):
    """Raised when there are no staged changes."""

    pass
