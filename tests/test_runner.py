"""Tests for the sh-backed command runner."""
import pytest
from unittest.mock import patch, MagicMock
import sh

from tfc_setup.errors import MissingTool
from tfc_setup.runner import CommandResult, ShCommandRunner


class TestShCommandRunner:
    """Tests for ShCommandRunner.run."""

    @patch('tfc_setup.runner.sh.Command')
    def test_captured_run(self, mock_command):
        """Captured runs return exit code and decoded output."""
        running = MagicMock(exit_code=0, stdout=b" main.tf | 2 +-\n", stderr=b"")
        mock_command.return_value.return_value = running

        result = ShCommandRunner(cwd="/work").run(["git", "diff", "--stat"])

        mock_command.assert_called_once_with("git")
        mock_command.return_value.assert_called_once_with("diff", "--stat", _return_cmd=True, _cwd="/work")
        assert result == CommandResult(0, " main.tf | 2 +-\n", "")

    @patch('tfc_setup.runner.sh.Command')
    def test_captured_run_failure(self, mock_command):
        """A non-zero exit is returned, not raised."""
        mock_command.return_value.side_effect = sh.ErrorReturnCode_128(
            "git diff --stat", b"", b"fatal: not a git repository"
        )

        result = ShCommandRunner().run(["git", "diff", "--stat"])

        assert result.exit_code == 128
        assert "not a git repository" in result.stderr

    @patch('tfc_setup.runner.sh.Command')
    def test_foreground_run(self, mock_command):
        """Foreground runs attach to the terminal."""
        result = ShCommandRunner(cwd="/work").run(["terraform", "init"], foreground=True)

        mock_command.assert_called_once_with("terraform")
        mock_command.return_value.assert_called_once_with("init", _fg=True, _cwd="/work")
        assert result.exit_code == 0

    @patch('tfc_setup.runner.sh.Command')
    def test_foreground_run_failure(self, mock_command):
        mock_command.return_value.side_effect = sh.ErrorReturnCode_1("terraform plan", b"", b"")

        result = ShCommandRunner().run(["terraform", "plan"], foreground=True)

        assert result.exit_code == 1

    @patch('tfc_setup.runner.sh.Command')
    def test_missing_program(self, mock_command):
        mock_command.side_effect = sh.CommandNotFound("terraform")

        with pytest.raises(MissingTool, match="terraform"):
            ShCommandRunner().run(["terraform", "init"])
