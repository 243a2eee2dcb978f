"""Prompt assembly for llamacommit."""

from llamacommit.prompt.exceptions import PromptFileError
from llamacommit.prompt.template import FIXED_TEMPLATE, build_prompt
from llamacommit.prompt.file import (
    PROMPT_FILE_PREFIX,
    prompt_file,
    remove_prompt_file,
    write_prompt_file,
)


__all__ = [
    "PromptFileError",
    "FIXED_TEMPLATE",
    "build_prompt",
    "PROMPT_FILE_PREFIX",
    "prompt_file",
    "remove_prompt_file",
    "write_prompt_file",
]
