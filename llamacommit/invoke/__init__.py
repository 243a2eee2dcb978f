"""Model invocation for llamacommit.

This package runs the inference command and optionally manages the
background server it talks to.
"""

from dotenv import load_dotenv

from llamacommit.invoke.exceptions import (
    InvokeError,
    ModelSpawnError,
    ModelTerminatedError,
    ServerError,
    ServerStartError,
)
from llamacommit.invoke.model import exit_code_for, run_model
from llamacommit.invoke.server import ServerLifecycle

# Load environment variables (e.g. OLLAMA_HOST) from .env so they reach the
# model and server commands
load_dotenv()


__all__ = [
    "InvokeError",
    "ModelSpawnError",
    "ModelTerminatedError",
    "ServerError",
    "ServerStartError",
    "exit_code_for",
    "run_model",
    "ServerLifecycle",
]
