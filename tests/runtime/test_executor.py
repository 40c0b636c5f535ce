"""Tests for ProcessExecutor."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

from toolbridge.catalog.models import ToolDeclaration
from toolbridge.runtime.executor import ProcessExecutor
from toolbridge.runtime.mapper import build_argv
from toolbridge.runtime.models import FailureOutcome, SpawnErrorOutcome, SuccessOutcome

if TYPE_CHECKING:
    from pathlib import Path


class TestProcessExecutorReal:
    async def test_echo_success(self) -> None:
        outcome = await ProcessExecutor().run("echo", ["hello"])
        assert isinstance(outcome, SuccessOutcome)
        assert outcome.stdout == "hello\n"
        assert outcome.text == "hello\n"

    async def test_nonzero_exit_captures_stderr(self) -> None:
        outcome = await ProcessExecutor().run("sh", ["-c", "echo out; echo oops >&2; exit 3"])
        assert isinstance(outcome, FailureOutcome)
        assert outcome.returncode == 3
        assert outcome.stderr == "oops\n"
        assert outcome.stdout == "out\n"
        assert outcome.text == "oops\n"

    async def test_missing_command_is_spawn_error(self) -> None:
        outcome = await ProcessExecutor().run("nonexistent_command_xyz", [])
        assert isinstance(outcome, SpawnErrorOutcome)
        assert outcome.message.startswith("System level error:")
        assert outcome.is_error

    async def test_arguments_passed_verbatim(self) -> None:
        outcome = await ProcessExecutor().run("printf", ["%s|", "a b", "$HOME", "*"])
        assert outcome.text == "a b|$HOME|*|"

    async def test_invalid_utf8_replaced(self) -> None:
        outcome = await ProcessExecutor().run("printf", ["\\377ok"])
        assert isinstance(outcome, SuccessOutcome)
        assert outcome.stdout.endswith("ok")
        assert "�" in outcome.stdout

    async def test_cwd(self, tmp_path: Path) -> None:
        outcome = await ProcessExecutor().run("pwd", [], cwd=str(tmp_path))
        assert outcome.text.strip() == str(tmp_path.resolve())

    async def test_missing_cwd_is_spawn_error(self, tmp_path: Path) -> None:
        outcome = await ProcessExecutor().run("pwd", [], cwd=str(tmp_path / "missing"))
        assert isinstance(outcome, SpawnErrorOutcome)

    async def test_env_overlays_host_environment(self) -> None:
        outcome = await ProcessExecutor().run(
            "sh", ["-c", 'echo "$TOOLBRIDGE_TEST_VAR:${PATH:+has-path}"'],
            env={"TOOLBRIDGE_TEST_VAR": "set"},
        )
        assert outcome.text == "set:has-path\n"

    async def test_base_env(self) -> None:
        executor = ProcessExecutor(base_env={"PATH": "/usr/bin:/bin", "ONLY": "base"})
        outcome = await executor.run("sh", ["-c", 'echo "$ONLY"'])
        assert outcome.text == "base\n"

    async def test_stdin_is_not_inherited(self) -> None:
        outcome = await ProcessExecutor().run("cat", [])
        assert isinstance(outcome, SuccessOutcome)
        assert outcome.stdout == ""


class TestProcessExecutorMocked:
    async def test_exec_called_without_shell(self) -> None:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(return_value=(b"ok", b""))
        mock_proc.returncode = 0

        with patch("asyncio.create_subprocess_exec", return_value=mock_proc) as mock_exec:
            outcome = await ProcessExecutor().run("tool", ["-x", "a b"])

        assert outcome.text == "ok"
        args = mock_exec.call_args.args
        assert args == ("tool", "-x", "a b")
        assert mock_exec.call_args.kwargs["env"] is None

    async def test_permission_error_is_spawn_error(self) -> None:
        with patch(
            "asyncio.create_subprocess_exec",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            outcome = await ProcessExecutor().run("/etc/passwd", [])
        assert isinstance(outcome, SpawnErrorOutcome)
        assert "Permission denied" in outcome.message

    async def test_empty_output(self) -> None:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(return_value=(None, None))
        mock_proc.returncode = 1

        with patch("asyncio.create_subprocess_exec", return_value=mock_proc):
            outcome = await ProcessExecutor().run("tool", [])
        assert isinstance(outcome, FailureOutcome)
        assert outcome.stderr == ""


class TestRunDeclaration:
    async def test_runs_mapped_argv(self) -> None:
        decl = ToolDeclaration.model_validate({
            "command": "echo",
            "parameterMappings": [
                {"literalToken": "-n"},
                {"sourceParam": "text"},
                {"sourceParam": "missing", "literalToken": "--never"},
            ],
            "toolSpec": {"name": "echo"},
        })
        argv = build_argv(decl.parameter_mappings, {"text": "hi"})
        outcome = await ProcessExecutor().run_declaration(decl, argv)
        assert isinstance(outcome, SuccessOutcome)
        assert outcome.stdout == "hi"

    async def test_uses_declared_env(self) -> None:
        decl = ToolDeclaration.model_validate({
            "command": "sh",
            "parameterMappings": [{"literalToken": "-c"}, {"literalToken": "echo $GREETING"}],
            "toolSpec": {"name": "greet"},
            "env": {"GREETING": "hello"},
        })
        outcome = await ProcessExecutor().run_declaration(decl, ["-c", "echo $GREETING"])
        assert outcome.text == "hello\n"
