"""Optional background inference server lifecycle.

Some setups expect llamacommit to bring up ``ollama serve`` itself and shut
it down afterwards; others run the server independently. ServerLifecycle
covers the first case and is a no-op when ``manage_server`` is off.
"""

import logging
import subprocess
from typing import Optional

from llamacommit.config import PipelineConfig
from llamacommit.invoke.exceptions import ServerStartError
from llamacommit.launcher import ProcessLauncher, os_error_reason, split_command

LOGGER = logging.getLogger(__name__)

# Seconds to wait for the server to exit after the stop command
SERVER_EXIT_TIMEOUT = 5


class ServerLifecycle:
    """Start and stop the inference server around a run."""

    def __init__(self, config: PipelineConfig, launcher: Optional[ProcessLauncher] = None):
        self.config = config
        self.launcher = launcher or ProcessLauncher()
        self.started = False
        self.process: Optional[subprocess.Popen] = None

    @property
    def enabled(self) -> bool:
        return self.config.manage_server

    def start(self) -> None:
        """Launch the server in the background without waiting for it.

        Only launch failures are detected; a server that dies later is not.

        Raises:
            ServerStartError: If the serve command cannot be launched.
        """
        if not self.enabled:
            return

        command = self.config.serve_command
        try:
            self.process = self.launcher.spawn_detached(split_command(command))
        except ValueError as e:
            raise ServerStartError(f"invalid serve command '{command}': {e}") from e
        except OSError as e:
            raise ServerStartError(
                f"failed to start server '{command}': {os_error_reason(e)}"
            ) from e

        self.started = True
        LOGGER.debug("Started inference server: %s", command)

    def stop(self) -> None:
        """Run the stop command if this lifecycle started the server.

        The stop command's stdout is discarded so only the model's output
        reaches stdout. A failing stop command is logged; it does not change
        the run's outcome. After a successful stop command the server
        process is reaped.
        """
        if not self.started:
            return

        command = self.config.stop_command
        self.started = False
        try:
            returncode = self.launcher.run(split_command(command), stdout=subprocess.DEVNULL)
        except (ValueError, OSError) as e:
            LOGGER.warning("Could not stop inference server with '%s': %s", command, e)
        else:
            LOGGER.debug("Stop command '%s' exited with %d", command, returncode)
            self._reap()

    def _reap(self) -> None:
        """Collect the server's exit status once the stop command has run."""
        if self.process is None:
            return
        try:
            returncode = self.process.wait(timeout=SERVER_EXIT_TIMEOUT)
        except subprocess.TimeoutExpired:
            LOGGER.debug("Inference server still running after stop command")
            return
        LOGGER.debug("Inference server exited with %d", returncode)

    def __enter__(self) -> "ServerLifecycle":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
