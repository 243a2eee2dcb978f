"""Staged diff acquisition.

Contains:
- get_staged_diff: Capture the staged diff and check that there is one
"""

import logging
from typing import Optional

from llamacommit.capture.buffer import CapturedOutput
from llamacommit.capture.exceptions import DiffCommandError, NoStagedChangesError
from llamacommit.capture.runner import capture_command
from llamacommit.config import PipelineConfig
from llamacommit.launcher import ProcessLauncher

LOGGER = logging.getLogger(__name__)

NO_STAGED_CHANGES_MESSAGE = "No staged changes. Stage files first (git add ...)."


def get_staged_diff(
    config: PipelineConfig,
    launcher: Optional[ProcessLauncher] = None,
) -> CapturedOutput:
    """Capture the staged diff using the configured diff command.

    Args:
        config: Pipeline configuration.
        launcher: Process launcher (defaults to a real one).

    Returns:
        The non-empty captured diff.

    Raises:
        CaptureError: If the diff command output cannot be captured.
        DiffCommandError: If the diff command fails and status checks are on.
        NoStagedChangesError: If the diff is empty.
    """
    diff = capture_command(
        config.diff_command,
        launcher=launcher,
        initial_capacity=config.initial_capacity,
        chunk_size=config.chunk_size,
    )

    if config.check_diff_status and diff.returncode != 0:
        raise DiffCommandError(
            f"'{config.diff_command}' exited with status {diff.returncode}"
        )

    if not diff:
        raise NoStagedChangesError(NO_STAGED_CHANGES_MESSAGE)

    LOGGER.debug("Staged diff is %d bytes", len(diff))
    return diff
