"""Error types for loading and building the tool catalog."""


class ConfigurationError(Exception):
    """The startup tool configuration could not be loaded or validated."""


class DuplicateToolError(ConfigurationError):
    """Two tool declarations share the same ``toolSpec.name``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate tool name: {name}")
