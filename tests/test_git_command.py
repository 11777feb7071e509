"""Tests for git_utils.git.command."""

import subprocess

import pytest

from git_utils.git.command import CommandResult, classify, execute, run
from git_utils.git.errors import ExecutionError, ExternalToolError


class TestClassify:
    def test_success_returns_stdout(self):
        assert classify(True, b"", b"main\n") == "main\n"

    def test_success_ignores_stderr(self):
        # git checkout -b reports "Switched to a new branch" on stderr
        assert classify(True, b"Switched to a new branch 'x'\n", b"") == ""

    def test_failure_with_stderr(self):
        with pytest.raises(ExternalToolError) as exc:
            classify(False, b"fatal: not a git repository\n", b"")
        assert exc.value.stderr == "fatal: not a git repository\n"
        assert str(exc.value) == "fatal: not a git repository"

    def test_failure_with_empty_stderr_is_benign(self):
        assert classify(False, b"", b"") == ""

    def test_failure_with_empty_stderr_keeps_stdout(self):
        assert classify(False, b"", b"partial\n") == "partial\n"

    def test_undecodable_stderr_described(self):
        with pytest.raises(ExternalToolError) as exc:
            classify(False, b"\xff\xfe", b"")
        assert "stderr is not valid utf-8" in str(exc.value)

    def test_undecodable_stdout_not_dropped(self):
        with pytest.raises(ExternalToolError) as exc:
            classify(True, b"", b"\xff")
        assert "stdout is not valid utf-8" in str(exc.value)


class TestExecute:
    def test_captures_streams(self, mocker):
        mock = mocker.patch(
            "git_utils.git.command.subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout=b"out", stderr=b"err"),
        )
        result = execute(["git", "status"], cwd="/repo")
        assert result == CommandResult(("git", "status"), True, b"out", b"err")
        mock.assert_called_once_with(["git", "status"], cwd="/repo", capture_output=True)

    def test_nonzero_exit(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            return_value=subprocess.CompletedProcess([], 128, stdout=b"", stderr=b"fatal"),
        )
        assert execute(["git"]).success is False

    def test_missing_binary(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        )
        with pytest.raises(ExecutionError) as exc:
            execute(["no-such-git", "status"])
        assert "no-such-git" in str(exc.value)
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_permission_denied(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            side_effect=PermissionError(13, "Permission denied"),
        )
        with pytest.raises(ExecutionError):
            execute(["./git"])

    def test_unpassable_argument(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            side_effect=ValueError("embedded null byte"),
        )
        with pytest.raises(ExecutionError, match="embedded null byte"):
            execute(["git", "show-ref", "refs/heads/a\x00b"])

    def test_execution_error_is_not_tool_error(self, mocker):
        mocker.patch("git_utils.git.command.subprocess.run", side_effect=FileNotFoundError())
        with pytest.raises(ExecutionError) as exc:
            execute(["git"])
        assert not isinstance(exc.value, ExternalToolError)


class TestRun:
    def test_trims_output(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout=b"  main\n", stderr=b""),
        )
        assert run(["git", "rev-parse", "--abbrev-ref", "HEAD"]) == "main"

    def test_error_records_args(self, mocker):
        mocker.patch(
            "git_utils.git.command.subprocess.run",
            return_value=subprocess.CompletedProcess([], 1, stdout=b"", stderr=b"boom"),
        )
        with pytest.raises(ExternalToolError) as exc:
            run(["git", "checkout", "-b", "x"])
        assert exc.value.context["args"] == ["git", "checkout", "-b", "x"]
        assert exc.value.stderr == "boom"


@pytest.mark.integration
class TestRealProcess:
    def test_unresolvable_binary(self):
        with pytest.raises(ExecutionError):
            run(["git-utils-definitely-missing-binary"])

    def test_nul_byte_in_argument(self):
        with pytest.raises(ExecutionError):
            run(["git", "show-ref", "refs/heads/a\x00b"])
