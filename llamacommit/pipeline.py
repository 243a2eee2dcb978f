"""End-to-end commit message pipeline.

Server start (optional) -> staged diff capture -> prompt file -> model run
-> prompt file removal -> server stop (optional).
"""

import logging
from typing import Optional

from llamacommit.capture import CaptureError, DiffError, get_staged_diff
from llamacommit.config import PipelineConfig
from llamacommit.global_config import GlobalConfigError
from llamacommit.invoke import (
    InvokeError,
    ServerError,
    ServerLifecycle,
    exit_code_for,
    run_model,
)
from llamacommit.launcher import ProcessLauncher
from llamacommit.prompt import PromptFileError, prompt_file

LOGGER = logging.getLogger(__name__)

# Every local failure the CLI reports as "<stage>: <reason>" with exit code 1
PIPELINE_ERRORS = (
    CaptureError,
    DiffError,
    PromptFileError,
    InvokeError,
    ServerError,
    GlobalConfigError,
)


def generate_commit_message(
    config: PipelineConfig,
    launcher: Optional[ProcessLauncher] = None,
) -> int:
    """Run the pipeline once.

    The model's output goes straight to the inherited stdout; nothing else
    is written there.

    Args:
        config: Pipeline configuration.
        launcher: Process launcher shared by every stage.

    Returns:
        The model command's exit status.

    Raises:
        One of PIPELINE_ERRORS on the first failing stage. The prompt file
        and a managed server are cleaned up before the error propagates.
    """
    launcher = launcher or ProcessLauncher()

    with ServerLifecycle(config, launcher):
        diff = get_staged_diff(config, launcher)
        diff_bytes = diff.to_bytes()
        diff.release()

        with prompt_file(diff_bytes, config.prompt_dir) as path:
            LOGGER.debug("Prompt written to %s", path)
            result = run_model(path, config, launcher)

    return exit_code_for(result)
