"""Invocation-related exception classes.

Contains all exception classes for running the model and its server:
- InvokeError: Base exception for model invocation errors
- ModelSpawnError: The model command could not be launched
- ModelTerminatedError: The model command was killed by a signal
- ServerError: Base exception for server lifecycle errors
- ServerStartError: The background server could not be launched
"""


class InvokeError(Exception):
    """Base exception for model invocation errors."""

    stage = "invoke"


class ModelSpawnError(InvokeError):
    """Raised when the model command cannot be launched."""

    pass


class ModelTerminatedError(InvokeError):
    """Raised when the model command ends without an exit status."""

    pass


class ServerError(Exception):
    """Base exception for inference server lifecycle errors."""

    stage = "server"


class ServerStartError(ServerError):
    """Raised when the background server cannot be launched."""

    pass
