"""Command output capture.

Contains:
- capture_command: Run a shell command and capture its entire stdout
- read_stream: Read a stream to completion into a CapturedOutput
"""

import logging
from typing import Optional

from llamacommit.capture.buffer import CapturedOutput
from llamacommit.capture.exceptions import (
    AbnormalTerminationError,
    CaptureReadError,
    CaptureReapError,
    CaptureSpawnError,
)
from llamacommit.config import DEFAULT_CHUNK_SIZE, DEFAULT_INITIAL_CAPACITY
from llamacommit.launcher import ProcessLauncher, os_error_reason
from llamacommit.result import ChildProcessResult

LOGGER = logging.getLogger(__name__)


def read_stream(
    stream,
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> CapturedOutput:
    """Read a binary stream until end of file.

    Before every read the buffer is doubled while less than one chunk (plus
    one byte) of free space remains.

    Args:
        stream: Raw binary stream supporting ``readinto``.
        initial_capacity: Starting buffer size in bytes.
        chunk_size: Minimum free space kept available for each read.

    Returns:
        The captured output.

    Raises:
        CaptureMemoryError: If the buffer cannot grow.
        CaptureReadError: If reading the stream fails.
    """
    output = CapturedOutput(initial_capacity)
    while True:
        output.reserve(chunk_size + 1)
        try:
            n = output.fill_from(stream)
        except OSError as e:
            raise CaptureReadError(f"read failed: {os_error_reason(e)}") from e
        if n == 0:
            break
    return output


def capture_command(
    command: str,
    launcher: Optional[ProcessLauncher] = None,
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> CapturedOutput:
    """Run a shell command and capture everything it writes to stdout.

    The command's exit status is recorded on the result but not checked
    here; callers decide what a non-zero status means.

    Args:
        command: Shell command string.
        launcher: Process launcher (defaults to a real one).
        initial_capacity: Starting buffer size in bytes.
        chunk_size: Minimum free space kept available for each read.

    Returns:
        The captured output with ``returncode`` set.

    Raises:
        CaptureSpawnError: If the command cannot be started.
        CaptureMemoryError: If the buffer cannot grow.
        CaptureReadError: If reading the output fails.
        CaptureReapError: If waiting for the command fails.
        AbnormalTerminationError: If the command is killed by a signal.
    """
    launcher = launcher or ProcessLauncher()

    try:
        proc = launcher.open_reader(command)
    except OSError as e:
        raise CaptureSpawnError(f"cannot run '{command}': {os_error_reason(e)}") from e

    output = None
    try:
        output = read_stream(proc.stdout, initial_capacity, chunk_size)
    finally:
        proc.stdout.close()
        if output is None:
            # Reading failed; don't leave the child running or unreaped
            proc.kill()
            proc.wait()

    try:
        returncode = proc.wait()
    except OSError as e:
        raise CaptureReapError(f"waiting for '{command}' failed: {os_error_reason(e)}") from e

    result = ChildProcessResult.from_returncode(returncode)
    if not result.exited:
        raise AbnormalTerminationError(f"'{command}' {result.describe()}")

    output.returncode = result.returncode
    LOGGER.debug(
        "Captured %d bytes from '%s' (%s)", output.length, command, result.describe()
    )
    return output
