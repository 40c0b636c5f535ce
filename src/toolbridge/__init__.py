"""toolbridge: expose local executables as MCP tools over JSON-RPC."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from toolbridge.catalog.catalog import ToolCatalog as ToolCatalog
    from toolbridge.catalog.loader import CatalogLoader as CatalogLoader
    from toolbridge.server.dispatcher import RequestDispatcher as RequestDispatcher

_LAZY_EXPORTS = {
    "ToolCatalog": "toolbridge.catalog.catalog",
    "CatalogLoader": "toolbridge.catalog.loader",
    "RequestDispatcher": "toolbridge.server.dispatcher",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'toolbridge' has no attribute {name!r}")
