"""Model invocation and output relay.

Contains:
- run_model: Run the model command with the prompt file as stdin
- exit_code_for: Map the model's termination to this program's exit code
"""

import logging
from pathlib import Path
from typing import Optional

from llamacommit.config import PipelineConfig
from llamacommit.invoke.exceptions import ModelSpawnError, ModelTerminatedError
from llamacommit.launcher import ProcessLauncher, os_error_reason, split_command
from llamacommit.result import ChildProcessResult

LOGGER = logging.getLogger(__name__)


def run_model(
    prompt_path: Path,
    config: PipelineConfig,
    launcher: Optional[ProcessLauncher] = None,
) -> ChildProcessResult:
    """Run the model command, feeding it the prompt file on stdin.

    The model's stdout and stderr are inherited, so its output reaches the
    terminal unbuffered and untouched. Blocks until the model exits.

    Args:
        prompt_path: Path to the prompt file.
        config: Pipeline configuration.
        launcher: Process launcher (defaults to a real one).

    Returns:
        How the model command terminated.

    Raises:
        ModelSpawnError: If the command is malformed or cannot be launched.
    """
    launcher = launcher or ProcessLauncher()
    command = config.get_model_command()

    try:
        args = split_command(command)
    except ValueError as e:
        raise ModelSpawnError(f"invalid model command '{command}': {e}") from e

    try:
        stdin = open(prompt_path, "rb")
    except OSError as e:
        raise ModelSpawnError(f"cannot open {prompt_path}: {os_error_reason(e)}") from e

    with stdin:
        try:
            returncode = launcher.run(args, stdin=stdin)
        except OSError as e:
            raise ModelSpawnError(f"cannot run '{command}': {os_error_reason(e)}") from e

    result = ChildProcessResult.from_returncode(returncode)
    LOGGER.debug("Model command %s", result.describe())
    return result


def exit_code_for(result: ChildProcessResult) -> int:
    """Translate the model's termination into this program's exit code.

    Args:
        result: The model command's termination descriptor.

    Returns:
        The model's own exit status.

    Raises:
        ModelTerminatedError: If the model did not exit normally.
    """
    if not result.exited:
        raise ModelTerminatedError(f"model command {result.describe()}")
    return result.returncode
