"""Data models for process execution outcomes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from toolbridge.runtime.errors import ProcessFailureError, ProcessSpawnError


class SuccessOutcome(BaseModel):
    """The process exited with status 0."""

    kind: Literal["success"] = "success"
    command: str = ""
    stdout: str = Field(default="", description="Captured stdout.")
    stderr: str = Field(default="", description="Captured stderr.")

    @property
    def is_error(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return self.stdout

    def raise_for_error(self) -> None:
        """No-op; a successful run never raises."""


class FailureOutcome(BaseModel):
    """The process exited with a non-zero status."""

    kind: Literal["failure"] = "failure"
    command: str = ""
    returncode: int = Field(..., description="Process exit code.")
    stdout: str = Field(default="", description="Captured stdout.")
    stderr: str = Field(default="", description="Captured stderr.")

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.stderr

    def raise_for_error(self) -> None:
        raise ProcessFailureError(self.command, self.returncode, self.stderr)


class SpawnErrorOutcome(BaseModel):
    """The process could not be started at all."""

    kind: Literal["spawn_error"] = "spawn_error"
    command: str = ""
    message: str

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.message

    def raise_for_error(self) -> None:
        raise ProcessSpawnError(self.command, self.message)


ExecutionOutcome = SuccessOutcome | FailureOutcome | SpawnErrorOutcome
