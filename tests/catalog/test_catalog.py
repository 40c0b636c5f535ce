"""Tests for ToolCatalog."""

from typing import Any

import pytest

from toolbridge.catalog.catalog import ToolCatalog
from toolbridge.catalog.errors import ConfigurationError, DuplicateToolError
from toolbridge.catalog.models import ToolDeclaration
from toolbridge.protocol.errors import ToolNotFoundError


def _decl(name: str, command: str = "true", **spec: Any) -> ToolDeclaration:
    return ToolDeclaration.model_validate({
        "command": command,
        "toolSpec": {"name": name, **spec},
    })


class TestToolCatalog:
    def test_lookup(self) -> None:
        catalog = ToolCatalog([_decl("a"), _decl("b", command="ls")])
        assert catalog.lookup("b").command == "ls"

    def test_lookup_missing_raises(self) -> None:
        catalog = ToolCatalog([_decl("a")])
        with pytest.raises(ToolNotFoundError, match="nope") as exc_info:
            catalog.lookup("nope")
        assert exc_info.value.name == "nope"

    def test_get_missing_returns_none(self) -> None:
        assert ToolCatalog([]).get("x") is None

    def test_list_all_in_declaration_order(self) -> None:
        names = ["zeta", "alpha", "mid"]
        catalog = ToolCatalog([_decl(n) for n in names])
        assert [spec.name for spec in catalog.list_all()] == names

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(DuplicateToolError) as exc_info:
            ToolCatalog([_decl("a"), _decl("b"), _decl("a", command="ls")])
        assert exc_info.value.name == "a"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_len_iter_contains(self) -> None:
        catalog = ToolCatalog([_decl("a"), _decl("b")])
        assert len(catalog) == 2
        assert [d.name for d in catalog] == ["a", "b"]
        assert "a" in catalog
        assert "c" not in catalog

    def test_source_list_mutation_does_not_leak(self) -> None:
        source = [_decl("a")]
        catalog = ToolCatalog(source)
        source.append(_decl("b"))
        assert len(catalog) == 1
        assert catalog.get("b") is None

    def test_empty_catalog(self) -> None:
        catalog = ToolCatalog([])
        assert catalog.list_all() == []
