"""Process launching for the pipeline.

Every child process the pipeline starts goes through a ProcessLauncher so
tests can substitute a fake launcher and fake child processes.

Contains:
- ProcessLauncher: Start reader, foreground and detached child processes
- split_command: Split a configured command line into argv
- os_error_reason: strerror-style description of an OSError
"""

import logging
import os
import shlex
import subprocess
from typing import IO, Optional, Union

LOGGER = logging.getLogger(__name__)


def os_error_reason(error: OSError) -> str:
    """Describe an OSError the way strerror() would."""
    if error.errno is not None:
        return os.strerror(error.errno)
    return str(error) or error.__class__.__name__


def split_command(command: str) -> list[str]:
    """Split a configured command line into an argument list.

    Args:
        command: Command line using POSIX shell quoting.

    Returns:
        The argv list.

    Raises:
        ValueError: If the command is empty or has unbalanced quotes.
    """
    args = shlex.split(command)
    if not args:
        raise ValueError("empty command")
    return args


class ProcessLauncher:
    """Starts child processes on behalf of the pipeline."""

    def open_reader(self, command: str) -> subprocess.Popen:
        """Start a shell command with its stdout connected to a pipe.

        Stdin comes from /dev/null so the command never waits for input.
        The pipe is unbuffered so each read returns whatever is available.

        Args:
            command: Shell command string.

        Returns:
            The running child; the caller reads ``stdout`` and reaps it.

        Raises:
            OSError: If the child cannot be launched.
        """
        LOGGER.debug("Starting reader: %s", command)
        return subprocess.Popen(
            command,
            shell=True,
            bufsize=0,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )

    def run(
        self,
        args: list[str],
        stdin: Optional[IO[bytes]] = None,
        stdout: Optional[Union[int, IO[bytes]]] = None,
    ) -> int:
        """Run a command in the foreground and wait for it.

        Stdout and stderr are inherited unless ``stdout`` says otherwise, so
        the child writes straight to the caller's terminal.

        Args:
            args: Command argv.
            stdin: Open file to use as the child's stdin.
            stdout: Where the child's stdout goes (e.g. subprocess.DEVNULL).

        Returns:
            The child's return code (negative for signal termination).

        Raises:
            OSError: If the child cannot be launched.
        """
        LOGGER.debug("Running: %s", shlex.join(args))
        result = subprocess.run(args, stdin=stdin, stdout=stdout)
        LOGGER.debug("%s exited with %d", args[0], result.returncode)
        return result.returncode

    def spawn_detached(self, args: list[str]) -> subprocess.Popen:
        """Start a command in the background without waiting for it.

        Output goes to /dev/null and the child gets its own session so it
        outlives terminal signals sent to this process group.

        Args:
            args: Command argv.

        Returns:
            The running child; the pipeline only reaps it after stopping it.

        Raises:
            OSError: If the child cannot be launched.
        """
        LOGGER.debug("Spawning in background: %s", shlex.join(args))
        return subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
