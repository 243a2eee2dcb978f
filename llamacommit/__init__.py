"""One-line commit message generator backed by a local Ollama model."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("llamacommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
