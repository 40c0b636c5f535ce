"""Tool declaration models: the startup configuration schema.

A tool declaration binds an externally visible MCP tool spec to a local
executable and an ordered list of parameter mappings that describe how a
call's arguments become command-line tokens.

Example YAML::

    version: "1"
    tools:
      - command: grep
        parameterMappings:
          - literalToken: "--color=never"
          - sourceParam: ignore_case
            literalToken: "-i"
          - sourceParam: pattern
          - sourceParam: path
        toolSpec:
          name: grep
          description: Search a file for a pattern.
          inputSchema:
            type: object
            properties:
              pattern: { type: string }
              path: { type: string }
            required: [pattern, path]
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

CATALOG_SCHEMA_VERSION = "1"


class ParameterMapping(BaseModel):
    """One template entry of a tool's command line.

    * ``source_param`` only: emit the caller's value when present.
    * ``source_param`` and ``literal_token``: emit the token, then the value,
      when the parameter is present.
    * ``literal_token`` only: always emit the token.
    """

    model_config = ConfigDict(frozen=True)

    source_param: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sourceParam", "source_param", "mcp_param"),
        serialization_alias="sourceParam",
    )
    literal_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("literalToken", "literal_token", "command_param"),
        serialization_alias="literalToken",
    )

    @model_validator(mode="after")
    def _require_one_field(self) -> ParameterMapping:
        if self.source_param is None and self.literal_token is None:
            msg = "parameter mapping needs 'sourceParam', 'literalToken', or both"
            raise ValueError(msg)
        return self

    @property
    def is_static(self) -> bool:
        return self.source_param is None


class ToolSpec(BaseModel):
    """MCP tool metadata as advertised by ``tools/list``.

    Unknown keys (``annotations``, ``title``, ...) are kept and echoed back.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str = Field(min_length=1)
    description: str | None = None
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
        validation_alias=AliasChoices("inputSchema", "input_schema"),
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize using MCP's camelCase field names."""
        data = self.model_dump(by_alias=True)
        if data.get("description") is None:
            data.pop("description", None)
        return data


class ToolDeclaration(BaseModel):
    """A declared tool: an executable plus its argument-mapping template."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(min_length=1)
    parameter_mappings: tuple[ParameterMapping, ...] = Field(
        default=(),
        validation_alias=AliasChoices(
            "parameterMappings", "parameter_mappings", "command_parameters"
        ),
    )
    tool_spec: ToolSpec = Field(
        validation_alias=AliasChoices("toolSpec", "tool_spec", "mcp_tool_spec"),
    )
    cwd: str | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("parameter_mappings", mode="before")
    @classmethod
    def _null_means_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def name(self) -> str:
        return self.tool_spec.name


class CatalogDocument(BaseModel):
    """Versioned top-level configuration document."""

    version: str = CATALOG_SCHEMA_VERSION
    tools: list[ToolDeclaration] = []

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value: Any) -> str:
        version = str(value)
        if version != CATALOG_SCHEMA_VERSION:
            msg = (
                f"unsupported catalog version {version!r} "
                f"(expected {CATALOG_SCHEMA_VERSION!r})"
            )
            raise ValueError(msg)
        return version
