"""Tests for llamacommit.cli module."""

import errno

from typer.testing import CliRunner

from llamacommit.capture import NoStagedChangesError
from llamacommit.cli import app
from llamacommit.config import PipelineConfig
from llamacommit.global_config import load_global_config, save_global_config, set_config_value
from llamacommit.invoke import ModelSpawnError, ModelTerminatedError
from llamacommit.prompt import PromptFileError


runner = CliRunner()


class TestMainCommand:
    """Tests for the default llamacommit command."""

    def test_shows_help(self):
        """Test that help is displayed."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--model" in result.output
        assert "--manage-server" in result.output
        assert "config" in result.output

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "llamacommit" in result.output

    def test_success_exit_code(self, mocker):
        """Test the model's zero status becomes the exit code."""
        mock_generate = mocker.patch(
            "llamacommit.cli.main.generate_commit_message", return_value=0
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert result.output == ""
        mock_generate.assert_called_once_with(PipelineConfig())

    def test_model_exit_code_passthrough(self, mocker):
        """Test a non-zero model status is passed through."""
        mocker.patch("llamacommit.cli.main.generate_commit_message", return_value=17)

        result = runner.invoke(app, [])

        assert result.exit_code == 17

    def test_options_override_config(self, mocker):
        """Test CLI options reach the pipeline config."""
        save_global_config({"model": "phi3"})
        mock_generate = mocker.patch(
            "llamacommit.cli.main.generate_commit_message", return_value=0
        )

        runner.invoke(app, [
            "--model", "mistral",
            "--diff-command", "git diff --cached",
            "--manage-server",
        ])

        config = mock_generate.call_args[0][0]
        assert config.model == "mistral"
        assert config.diff_command == "git diff --cached"
        assert config.manage_server is True

    def test_config_file_used_without_options(self, mocker):
        """Test config.yaml settings apply when no options are given."""
        save_global_config({"model": "phi3", "manage_server": True})
        mock_generate = mocker.patch(
            "llamacommit.cli.main.generate_commit_message", return_value=0
        )

        runner.invoke(app, [])

        config = mock_generate.call_args[0][0]
        assert config.model == "phi3"
        assert config.manage_server is True

    def test_no_manage_server_flag(self, mocker):
        """Test --no-manage-server overrides the config file."""
        save_global_config({"manage_server": True})
        mock_generate = mocker.patch(
            "llamacommit.cli.main.generate_commit_message", return_value=0
        )

        runner.invoke(app, ["--no-manage-server"])

        assert mock_generate.call_args[0][0].manage_server is False

    def test_no_staged_changes(self, mocker):
        """Test an empty diff exits 1 with a diff diagnostic."""
        mocker.patch(
            "llamacommit.cli.main.generate_commit_message",
            side_effect=NoStagedChangesError("No staged changes. Stage files first (git add ...)."),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "diff: No staged changes" in result.output

    def test_spawn_failure_diagnostic(self, mocker):
        """Test a spawn failure is reported as '<stage>: <reason>'."""
        mocker.patch(
            "llamacommit.cli.main.generate_commit_message",
            side_effect=ModelSpawnError("cannot run 'ollama run llama3': No such file or directory"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "invoke: cannot run 'ollama run llama3': No such file or directory" in result.output

    def test_signal_maps_to_one(self, mocker):
        """Test signal termination exits 1."""
        mocker.patch(
            "llamacommit.cli.main.generate_commit_message",
            side_effect=ModelTerminatedError("model command terminated by SIGKILL"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1

    def test_prompt_failure(self, mocker):
        """Test prompt file errors exit 1."""
        mocker.patch(
            "llamacommit.cli.main.generate_commit_message",
            side_effect=PromptFileError("cannot create temp file: Permission denied"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "prompt: cannot create temp file" in result.output

    def test_invalid_config_file(self, mocker):
        """Test an invalid config file exits 1 without running."""
        save_global_config({"chunk_size": 0})
        mock_generate = mocker.patch("llamacommit.cli.main.generate_commit_message")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "config:" in result.output
        mock_generate.assert_not_called()


class TestConfigCommands:
    """Tests for llamacommit config subcommands."""

    def test_show_defaults(self, mocker):
        """Test show without a config file lists defaults."""
        mock_generate = mocker.patch("llamacommit.cli.main.generate_commit_message")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "using defaults" in result.output
        assert "diff_command: git diff --staged --no-color" in result.output
        assert "Model command: ollama run llama3" in result.output
        mock_generate.assert_not_called()

    def test_show_configured(self):
        """Test show reflects config.yaml."""
        save_global_config({"model": "phi3"})

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "model: phi3" in result.output
        assert "ollama run phi3" in result.output

    def test_show_run_command_with_braces(self):
        """Test show handles a run command holding a jq program."""
        set_config_value("run_command", "my-llm --filter '{.text}' {model}")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Model command: my-llm --filter '{.text}' llama3" in result.output

    def test_init_creates_file(self):
        """Test init writes the default config."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "Created" in result.output
        assert load_global_config()["model"] == "llama3"

    def test_init_existing(self):
        """Test init leaves an existing file alone."""
        save_global_config({"model": "phi3"})

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert load_global_config() == {"model": "phi3"}

    def test_set_value(self):
        """Test set stores a value."""
        result = runner.invoke(app, ["config", "set", "manage_server", "true"])

        assert result.exit_code == 0
        assert load_global_config() == {"manage_server": True}

    def test_set_unknown_key(self):
        """Test set rejects unknown keys."""
        result = runner.invoke(app, ["config", "set", "provider", "openai"])

        assert result.exit_code == 1
        assert "Unknown configuration key" in result.output
