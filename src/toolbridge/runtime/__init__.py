"""Runtime layer: argument mapping and process execution."""

from toolbridge.runtime.errors import (
    ArgumentTypeError,
    ExecutionError,
    ProcessFailureError,
    ProcessSpawnError,
)
from toolbridge.runtime.executor import ProcessExecutor
from toolbridge.runtime.mapper import build_argv, coerce_argument
from toolbridge.runtime.models import (
    ExecutionOutcome,
    FailureOutcome,
    SpawnErrorOutcome,
    SuccessOutcome,
)

__all__ = [
    "ArgumentTypeError",
    "ExecutionError",
    "ExecutionOutcome",
    "FailureOutcome",
    "ProcessExecutor",
    "ProcessFailureError",
    "ProcessSpawnError",
    "SpawnErrorOutcome",
    "SuccessOutcome",
    "build_argv",
    "coerce_argument",
]
