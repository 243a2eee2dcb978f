"""Shared test fixtures and configuration."""

import io
import tempfile
from pathlib import Path

import pytest

from llamacommit.config import PipelineConfig
from llamacommit.launcher import ProcessLauncher


SAMPLE_DIFF = b"diff --git a/x b/x\n+hello\n"


class FakeReaderProcess:
    """Stands in for a Popen whose stdout is a pipe."""

    def __init__(self, data: bytes, returncode: int = 0):
        self.stdout = io.BytesIO(data)
        self.returncode = returncode
        self.killed = False

    def wait(self):
        return self.returncode

    def kill(self):
        self.killed = True


class FakeServerProcess:
    """Stands in for the detached server Popen."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.wait_timeouts = []

    def wait(self, timeout=None):
        self.wait_timeouts.append(timeout)
        return self.returncode


class FakeLauncher(ProcessLauncher):
    """Records every launch instead of starting real processes."""

    def __init__(
        self,
        diff: bytes = SAMPLE_DIFF,
        diff_returncode: int = 0,
        model_returncode: int = 0,
        model_error: Exception = None,
        serve_error: Exception = None,
    ):
        self.diff = diff
        self.diff_returncode = diff_returncode
        self.model_returncode = model_returncode
        self.model_error = model_error
        self.serve_error = serve_error
        self.calls = []
        self.prompts = []
        self.prompt_paths = []
        self.run_stdouts = []
        self.server_process = FakeServerProcess()

    def open_reader(self, command):
        self.calls.append(("read", command))
        return FakeReaderProcess(self.diff, self.diff_returncode)

    def run(self, args, stdin=None, stdout=None):
        self.calls.append(("run", args))
        self.run_stdouts.append(stdout)
        if stdin is not None:
            self.prompt_paths.append(Path(stdin.name))
            self.prompts.append(stdin.read())
            if self.model_error is not None:
                raise self.model_error
            return self.model_returncode
        return 0

    def spawn_detached(self, args):
        self.calls.append(("spawn", args))
        if self.serve_error is not None:
            raise self.serve_error
        return self.server_process


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config_dir(mocker, temp_dir):
    """Point the global config directory at a temp location."""
    config_dir = temp_dir / ".llamacommit"
    mocker.patch("llamacommit.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def sample_diff():
    """Short staged diff."""
    return SAMPLE_DIFF


@pytest.fixture
def prompt_dir(temp_dir):
    """Directory that receives prompt files during a test."""
    path = temp_dir / "prompts"
    path.mkdir()
    return path


@pytest.fixture
def config(prompt_dir):
    """Default pipeline config writing prompt files to prompt_dir."""
    return PipelineConfig(prompt_dir=prompt_dir)


@pytest.fixture
def fake_launcher():
    """Launcher that returns SAMPLE_DIFF and a zero model exit."""
    return FakeLauncher()
