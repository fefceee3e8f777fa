"""
Unit tests for CommandExecutor.

Commands are real subprocesses running the current Python interpreter.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cargo_recursive.core.exceptions import (
    CommandFailedError,
    EmptyCommandError,
    SpawnError,
)
from cargo_recursive.core.models import CommandSpec, ExternalCommand, ToolCommand
from cargo_recursive.services.execution import CommandExecutor
from cargo_recursive.services.logging import NullLogger


@pytest.fixture
def presenter():
    return MagicMock()


@pytest.fixture
def executor(presenter):
    return CommandExecutor(presenter=presenter, logger=NullLogger())


def python_spec(script: str, **kwargs) -> CommandSpec:
    return CommandSpec.from_tokens([sys.executable, "-c", script], external=True, **kwargs)


class TestCommandExecutor:
    def test_runs_in_target_directory(self, executor, tmp_path):
        spec = python_spec("import os, sys; sys.stdout.write(os.getcwd())", forward_output=False)

        result = executor.execute(spec, tmp_path)

        assert result.succeeded
        assert Path(result.stdout.decode()).resolve() == tmp_path.resolve()

    def test_captures_stdout_and_stderr(self, executor, tmp_path):
        spec = python_spec(
            "import sys; sys.stdout.write('hello'); sys.stderr.write('oops')",
            forward_output=False,
        )

        result = executor.execute(spec, tmp_path)

        assert result.stdout == b"hello"
        assert result.stderr == b"oops"

    def test_forwards_output_after_completion(self, executor, presenter, tmp_path):
        spec = python_spec("import sys; sys.stdout.write('out'); sys.stderr.write('err')")

        executor.execute(spec, tmp_path)

        presenter.forward_output.assert_called_once_with(b"out", b"err")

    def test_suppressed_output_is_not_forwarded(self, executor, presenter, tmp_path):
        spec = python_spec("print('noise')", forward_output=False)

        executor.execute(spec, tmp_path)

        presenter.forward_output.assert_not_called()

    def test_default_tool_receives_all_tokens(self, executor, tmp_path):
        spec = CommandSpec(
            invocation=ToolCommand(
                tool=sys.executable,
                tokens=("-c", "import sys; sys.stdout.write(' '.join(sys.argv[1:]))", "a", "b"),
            ),
            forward_output=False,
        )

        result = executor.execute(spec, tmp_path)

        assert result.stdout == b"a b"

    def test_nonzero_exit_without_exit_on_error_is_not_an_error(self, executor, tmp_path):
        spec = python_spec("import sys; sys.exit(3)")

        result = executor.execute(spec, tmp_path)

        assert result.exit_code == 3
        assert not result.succeeded

    def test_nonzero_exit_with_exit_on_error_raises(self, executor, tmp_path):
        spec = python_spec("import sys; sys.exit(2)", exit_on_error=True)

        with pytest.raises(CommandFailedError, match="nonzero code 2") as exc_info:
            executor.execute(spec, tmp_path)

        assert exc_info.value.returncode == 2
        assert exc_info.value.signal is None

    def test_failing_command_output_is_still_forwarded(self, executor, presenter, tmp_path):
        spec = python_spec("import sys; print('partial'); sys.exit(1)", exit_on_error=True)

        with pytest.raises(CommandFailedError):
            executor.execute(spec, tmp_path)

        presenter.forward_output.assert_called_once()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_by_signal_with_exit_on_error_raises(self, executor, tmp_path):
        spec = python_spec(
            "import os, signal; os.kill(os.getpid(), signal.SIGKILL)", exit_on_error=True
        )

        with pytest.raises(CommandFailedError, match="terminated abnormally") as exc_info:
            executor.execute(spec, tmp_path)

        assert exc_info.value.returncode is None
        assert exc_info.value.signal == 9

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_by_signal_without_exit_on_error_returns(self, executor, tmp_path):
        spec = python_spec("import os, signal; os.kill(os.getpid(), signal.SIGKILL)")

        result = executor.execute(spec, tmp_path)

        assert result.signal == 9

    @pytest.mark.parametrize("exit_on_error", [True, False])
    def test_missing_binary_is_always_a_spawn_error(self, executor, tmp_path, exit_on_error):
        spec = CommandSpec.from_tokens(
            ["cargo-recursive-no-such-binary", "build"],
            external=True,
            exit_on_error=exit_on_error,
        )

        with pytest.raises(SpawnError) as exc_info:
            executor.execute(spec, tmp_path)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.context["binary"] == "cargo-recursive-no-such-binary"

    def test_missing_default_tool_is_a_spawn_error(self, executor, tmp_path):
        spec = CommandSpec.from_tokens(["build"], tool="cargo-recursive-no-such-tool")

        with pytest.raises(SpawnError, match="cargo-recursive-no-such-tool"):
            executor.execute(spec, tmp_path)

    def test_empty_command_fails_before_spawning(self, executor, tmp_path):
        spec = CommandSpec(invocation=ExternalCommand())

        with patch("cargo_recursive.services.execution.executor.subprocess.run") as mock_run:
            with pytest.raises(EmptyCommandError):
                executor.execute(spec, tmp_path)

        mock_run.assert_not_called()

    def test_resolves_services_from_container_when_not_given(self, tmp_path):
        from cargo_recursive.core.bootstrap import bootstrap
        from cargo_recursive.core.interfaces.presenter import IPresenter

        presenter = MagicMock()
        bootstrap().register_instance(IPresenter, presenter)

        CommandExecutor().execute(python_spec("print('x')"), tmp_path)

        presenter.forward_output.assert_called_once()
