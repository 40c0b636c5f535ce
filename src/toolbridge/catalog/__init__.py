"""Tool catalog: declarations, validation, and startup loading."""

from toolbridge.catalog.catalog import ToolCatalog
from toolbridge.catalog.errors import ConfigurationError, DuplicateToolError
from toolbridge.catalog.loader import CatalogLoader, parse_catalog
from toolbridge.catalog.models import CatalogDocument, ParameterMapping, ToolDeclaration, ToolSpec

__all__ = [
    "CatalogDocument",
    "CatalogLoader",
    "ConfigurationError",
    "DuplicateToolError",
    "ParameterMapping",
    "ToolCatalog",
    "ToolDeclaration",
    "ToolSpec",
    "parse_catalog",
]
