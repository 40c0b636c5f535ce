"""Catalog loader: read the startup tool configuration from YAML or JSON.

Typical usage::

    catalog = CatalogLoader(Path("tools.yaml")).load()
    catalog = parse_catalog('[{"command": "echo", ...}]', format="json")
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from toolbridge.catalog.catalog import ToolCatalog
from toolbridge.catalog.errors import ConfigurationError
from toolbridge.catalog.models import CatalogDocument, ToolDeclaration

if TYPE_CHECKING:
    from pathlib import Path


def parse_catalog(raw: str, *, format: str = "yaml", expand_env: bool = False) -> ToolCatalog:
    """Parse a raw configuration string into a :class:`ToolCatalog`.

    The document is either a bare list of tool declarations or a mapping
    ``{"version": "1", "tools": [...]}``.

    Args:
        raw: The raw document text.
        format: ``"yaml"`` (default) or ``"json"``.
        expand_env: Expand ``$VAR`` references in each declaration's
            ``command``, ``cwd`` and ``env`` values.

    Raises:
        ConfigurationError: On syntax errors, schema violations, or
            duplicate tool names.
    """
    try:
        data: Any = json.loads(raw) if format == "json" else yaml.safe_load(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"JSON parse error: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"YAML parse error: {exc}") from exc

    if isinstance(data, list):
        data = {"tools": data}
    elif not isinstance(data, dict):
        raise ConfigurationError(
            "Tool configuration must be a list of tools or a mapping with 'tools'"
        )

    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc

    tools = document.tools
    if expand_env:
        tools = [_expand_declaration(decl) for decl in tools]
    return ToolCatalog(tools)


def _expand_declaration(decl: ToolDeclaration) -> ToolDeclaration:
    return decl.model_copy(
        update={
            "command": os.path.expandvars(decl.command),
            "cwd": os.path.expandvars(decl.cwd) if decl.cwd is not None else None,
            "env": {key: os.path.expandvars(value) for key, value in decl.env.items()},
        }
    )


class CatalogLoader:
    """Load a :class:`ToolCatalog` from a ``.yaml``, ``.yml`` or ``.json`` file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ToolCatalog:
        """Read the file and build the catalog.

        ``${VAR}`` and ``$VAR`` are expanded in ``command``, ``cwd`` and
        ``env`` values only; literal tokens reach the child as written.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read {self._path}: {exc}") from exc

        fmt = "json" if self._path.suffix == ".json" else "yaml"
        return parse_catalog(raw, format=fmt, expand_env=True)
