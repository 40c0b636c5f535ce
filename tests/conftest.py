"""Shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from toolbridge.catalog.catalog import ToolCatalog
from toolbridge.catalog.models import ToolDeclaration


def _declaration(
    name: str = "echo",
    command: str = "echo",
    mappings: list[dict[str, Any]] | None = None,
    **spec: Any,
) -> ToolDeclaration:
    """Build a declaration from the same camelCase shape the config uses."""
    return ToolDeclaration.model_validate({
        "command": command,
        "parameterMappings": mappings if mappings is not None else [{"sourceParam": "text"}],
        "toolSpec": {"name": name, **spec},
    })


@pytest.fixture
def echo_catalog() -> ToolCatalog:
    return ToolCatalog([_declaration(description="Echo text back")])


@pytest.fixture(autouse=True)
def _reset_toolbridge_logger() -> Iterator[None]:
    """``configure_logging`` detaches the package logger; undo it per test."""
    logger = logging.getLogger("toolbridge")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
