"""Shared error types for argument mapping and process execution."""


class ExecutionError(Exception):
    """Base error for all runtime failures."""


class ArgumentTypeError(ExecutionError):
    """A call argument has a JSON type that cannot become a single token."""

    def __init__(self, param: str, value_type: str) -> None:
        self.param = param
        self.value_type = value_type
        super().__init__(
            f"Argument '{param}' has unsupported type {value_type}; "
            "expected string, number, boolean or null"
        )


class ProcessSpawnError(ExecutionError):
    """The command could not be started (missing, not executable, ...)."""

    def __init__(self, command: str, detail: str = "") -> None:
        self.command = command
        self.detail = detail
        super().__init__(
            f"Failed to start {command}" + (f": {detail}" if detail else "")
        )


class ProcessFailureError(ExecutionError):
    """The command ran but exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{command} exited with status {returncode}")
