"""Configuration for the llamacommit pipeline.

Configuration is loaded from ~/.llamacommit/config.yaml
Use 'llamacommit config' commands to modify settings.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.llamacommit/config.yaml doesn't set them

DEFAULT_DIFF_COMMAND = "git diff --staged --no-color"
DEFAULT_MODEL = "llama3"
DEFAULT_RUN_COMMAND = "ollama run {model}"
DEFAULT_SERVE_COMMAND = "ollama serve"
DEFAULT_STOP_COMMAND = 'pkill -f "ollama serve"'

# Capture buffer sizing: start large enough for a typical staged diff and
# double whenever less than one read chunk of free space remains.
DEFAULT_INITIAL_CAPACITY = 8192
DEFAULT_CHUNK_SIZE = 4096


class PipelineConfig(BaseModel):
    """Effective settings for one commit message run."""

    # Allow the model_command field name
    model_config = ConfigDict(protected_namespaces=())

    diff_command: str = DEFAULT_DIFF_COMMAND
    model: str = DEFAULT_MODEL
    run_command: str = DEFAULT_RUN_COMMAND
    # Full model command; when set, run_command and model are ignored
    model_command: Optional[str] = None
    manage_server: bool = False
    serve_command: str = DEFAULT_SERVE_COMMAND
    stop_command: str = DEFAULT_STOP_COMMAND
    check_diff_status: bool = True
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    chunk_size: int = DEFAULT_CHUNK_SIZE
    prompt_dir: Optional[Path] = None

    @field_validator("diff_command", "model", "run_command", "serve_command", "stop_command")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty command strings."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("initial_capacity", "chunk_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Buffer sizes must be positive."""
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    def get_model_command(self) -> str:
        """Get the command line used to run the model.

        Returns:
            The explicit model_command if configured, otherwise run_command
            with each {model} replaced by the model name. Other braces are
            left alone so awk or jq programs pass through.
        """
        if self.model_command:
            return self.model_command
        return self.run_command.replace("{model}", self.model)


# Keys that may be stored in config.yaml
CONFIG_KEYS = tuple(PipelineConfig.model_fields)


def load_config(**overrides: Any) -> PipelineConfig:
    """Build the effective configuration.

    Defaults are overlaid with ~/.llamacommit/config.yaml, then with any
    override that is not None (CLI flags).

    Args:
        **overrides: Field values taking precedence over the config file.

    Returns:
        The validated PipelineConfig.

    Raises:
        GlobalConfigError: If the config file cannot be read or holds invalid values.
    """
    # Import here to avoid circular dependency
    from llamacommit import global_config

    values = {
        key: value
        for key, value in global_config.load_global_config().items()
        if key in CONFIG_KEYS
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return PipelineConfig(**values)
    except ValidationError as e:
        raise global_config.GlobalConfigError(f"Invalid configuration: {e}")
