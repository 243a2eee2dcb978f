"""Global configuration management for llamacommit.

Handles user-level configuration stored in ~/.llamacommit/config.yaml.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""

    stage = "config"


_CONFIG_DIR = Path.home() / ".llamacommit"


def get_global_config_dir() -> Path:
    """Get the global llamacommit configuration directory.

    Returns:
        Path to ~/.llamacommit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.llamacommit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.llamacommit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.llamacommit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.llamacommit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> None:
    """Set a single key in global config.

    Args:
        key: Configuration key (must be a PipelineConfig field).
        value: Value to store.

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    from llamacommit.config import CONFIG_KEYS, PipelineConfig
    from pydantic import ValidationError

    if key not in CONFIG_KEYS:
        raise GlobalConfigError(
            f"Unknown configuration key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}"
        )

    config = load_global_config()
    config[key] = value

    # Validate the whole file before writing it back
    try:
        validated = PipelineConfig(**{k: v for k, v in config.items() if k in CONFIG_KEYS})
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid value for {key}: {e}")

    # Store the coerced value so "true"/"8192" land as bool/int in YAML
    coerced = getattr(validated, key)
    config[key] = str(coerced) if isinstance(coerced, Path) else coerced
    save_global_config(config)


def initialize_default_config() -> None:
    """Initialize config.yaml with default values if it doesn't exist."""
    from llamacommit.config import (
        DEFAULT_CHUNK_SIZE,
        DEFAULT_DIFF_COMMAND,
        DEFAULT_INITIAL_CAPACITY,
        DEFAULT_MODEL,
        DEFAULT_RUN_COMMAND,
        DEFAULT_SERVE_COMMAND,
        DEFAULT_STOP_COMMAND,
    )

    config_file = get_config_file_path()

    if config_file.exists():
        return

    ensure_global_config_dir()

    default_config = {
        "diff_command": DEFAULT_DIFF_COMMAND,
        "model": DEFAULT_MODEL,
        "run_command": DEFAULT_RUN_COMMAND,
        "manage_server": False,
        "serve_command": DEFAULT_SERVE_COMMAND,
        "stop_command": DEFAULT_STOP_COMMAND,
        "check_diff_status": True,
        "initial_capacity": DEFAULT_INITIAL_CAPACITY,
        "chunk_size": DEFAULT_CHUNK_SIZE,
    }

    save_global_config(default_config)


def is_configured() -> bool:
    """Check if llamacommit has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
