"""Temporary prompt file handling.

Contains:
- write_prompt_file: Create a unique temp file holding template + diff
- remove_prompt_file: Delete a prompt file if it still exists
- prompt_file: Context manager that always removes the file afterwards
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from llamacommit.prompt.exceptions import PromptFileError
from llamacommit.prompt.template import build_prompt

LOGGER = logging.getLogger(__name__)

PROMPT_FILE_PREFIX = "ollama_prompt_"


def remove_prompt_file(path: Path) -> None:
    """Delete a prompt file, ignoring one that is already gone."""
    try:
        path.unlink()
        LOGGER.debug("Removed prompt file %s", path)
    except FileNotFoundError:
        pass


def write_prompt_file(
    diff: bytes,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """Write the full prompt to a freshly created temporary file.

    The file is created with O_EXCL and mode 0600 under ``directory`` (the
    system temp directory by default), so it never replaces or follows an
    existing file. On return it is flushed and closed.

    Args:
        diff: Raw staged diff bytes.
        directory: Directory for the file.

    Returns:
        Path to the prompt file. The caller must remove it.

    Raises:
        PromptFileError: If the prompt cannot be built, or the file cannot be
            created or written. A file created before any failure, including
            an interrupt, is removed first.
    """
    try:
        prompt = build_prompt(diff)
    except MemoryError as e:
        raise PromptFileError(f"cannot build prompt for {len(diff)} byte diff: out of memory") from e

    try:
        fd, name = tempfile.mkstemp(prefix=PROMPT_FILE_PREFIX, dir=directory)
    except OSError as e:
        raise PromptFileError(f"cannot create temp file: {e.strerror or e}") from e

    path = Path(name)
    LOGGER.debug("Created prompt file %s", path)

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(prompt)
    except OSError as e:
        remove_prompt_file(path)
        raise PromptFileError(f"cannot write {path}: {e.strerror or e}") from e
    except BaseException:
        remove_prompt_file(path)
        raise

    return path


@contextmanager
def prompt_file(
    diff: bytes,
    directory: Optional[Union[str, Path]] = None,
) -> Iterator[Path]:
    """Provide a prompt file for the duration of a ``with`` block.

    The file is removed when the block exits, whether it succeeds or raises.
    """
    path = write_prompt_file(diff, directory)
    try:
        yield path
    finally:
        remove_prompt_file(path)
