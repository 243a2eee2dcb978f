"""Prompt-file exception classes."""


class PromptFileError(Exception):
    """Raised when the temporary prompt file cannot be created or written."""

    stage = "prompt"
