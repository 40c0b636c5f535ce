"""ToolCatalog: the read-only set of declared tools."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from toolbridge.catalog.errors import DuplicateToolError
from toolbridge.protocol.errors import ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from toolbridge.catalog.models import ToolDeclaration, ToolSpec


class ToolCatalog:
    """Immutable, ordered collection of :class:`ToolDeclaration` objects.

    Built once at startup and shared by every request; it is never mutated
    afterwards, so it needs no locking.

    Usage::

        catalog = ToolCatalog(declarations)
        decl = catalog.lookup("echo")     # raises ToolNotFoundError
        specs = catalog.list_all()        # declaration order
    """

    def __init__(self, declarations: Iterable[ToolDeclaration]) -> None:
        ordered = tuple(declarations)
        by_name: dict[str, ToolDeclaration] = {}
        for decl in ordered:
            if decl.name in by_name:
                raise DuplicateToolError(decl.name)
            by_name[decl.name] = decl
        self._declarations = ordered
        self._by_name: Mapping[str, ToolDeclaration] = MappingProxyType(by_name)

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[ToolDeclaration]:
        return iter(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> ToolDeclaration | None:
        """Return the declaration for *name*, or ``None``."""
        return self._by_name.get(name)

    def lookup(self, name: str) -> ToolDeclaration:
        """Return the declaration for *name*.

        Raises:
            ToolNotFoundError: If no tool with that name is declared.
        """
        decl = self._by_name.get(name)
        if decl is None:
            raise ToolNotFoundError(name)
        return decl

    def list_all(self) -> list[ToolSpec]:
        """Return every tool spec in declaration order."""
        return [decl.tool_spec for decl in self._declarations]
