"""ProcessExecutor: runs a declared command to completion and captures output.

The command is started directly with ``asyncio.create_subprocess_exec``
(no shell).  The caller is blocked until the child exits; there is no
timeout, so a hung child stalls whoever awaits it.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

from toolbridge.runtime.models import FailureOutcome, SpawnErrorOutcome, SuccessOutcome

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from toolbridge.catalog.models import ToolDeclaration
    from toolbridge.runtime.models import ExecutionOutcome

logger = logging.getLogger(__name__)


class ProcessExecutor:
    """Spawns child processes and turns their results into outcomes.

    Never raises for process-level problems: a missing executable becomes a
    :class:`SpawnErrorOutcome` and a non-zero exit a :class:`FailureOutcome`.
    """

    def __init__(self, base_env: Mapping[str, str] | None = None) -> None:
        self._base_env = dict(base_env) if base_env is not None else None

    async def run(
        self,
        command: str,
        argv: Sequence[str],
        *,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ExecutionOutcome:
        """Run *command* with *argv* and wait for it to exit."""
        child_env = self._merge_env(env)

        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=child_env,
            )
            stdout, stderr = await proc.communicate()
        except (OSError, ValueError) as exc:
            logger.debug("Could not start %s: %s", command, exc)
            return SpawnErrorOutcome(command=command, message=f"System level error: {exc}")

        out = stdout.decode(errors="replace") if stdout else ""
        err = stderr.decode(errors="replace") if stderr else ""

        if proc.returncode != 0:
            logger.debug("%s exited with status %s", command, proc.returncode)
            return FailureOutcome(
                command=command,
                returncode=proc.returncode if proc.returncode is not None else -1,
                stdout=out,
                stderr=err,
            )
        return SuccessOutcome(command=command, stdout=out, stderr=err)

    async def run_declaration(
        self,
        declaration: ToolDeclaration,
        argv: Sequence[str],
    ) -> ExecutionOutcome:
        """Run *declaration*'s command with an argv from :func:`build_argv`.

        The declaration's ``cwd`` and ``env`` apply to the child.
        """
        logger.debug("Executing command: %s with args: %s", declaration.command, argv)
        return await self.run(
            declaration.command,
            argv,
            cwd=declaration.cwd,
            env=declaration.env or None,
        )

    def _merge_env(self, extra: Mapping[str, str] | None) -> dict[str, str] | None:
        """Overlay *extra* on the base environment; ``None`` inherits ours."""
        if not extra and self._base_env is None:
            return None
        base = self._base_env if self._base_env is not None else dict(os.environ)
        return {**base, **(extra or {})}
