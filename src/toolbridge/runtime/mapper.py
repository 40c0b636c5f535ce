"""ParameterMapper: turn a call's arguments into an ordered argv.

The mapping list is the tool's whole command-line contract: tokens are
emitted strictly in declaration order, without reordering, deduplication
or shell quoting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from toolbridge.runtime.errors import ArgumentTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from toolbridge.catalog.models import ParameterMapping


def coerce_argument(param: str, value: Any) -> str | None:
    """Convert one JSON argument value to a command-line token.

    Strings pass through, numbers use ``str()``, booleans become
    ``"true"``/``"false"`` and ``None`` means "not supplied".

    Raises:
        ArgumentTypeError: For arrays, objects, or any other type.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ArgumentTypeError(param, type(value).__name__)


def build_argv(
    mappings: Iterable[ParameterMapping],
    arguments: Mapping[str, Any],
) -> list[str]:
    """Walk *mappings* in order and collect the generated tokens.

    * static mapping: always emit ``literal_token``.
    * bound mapping: if ``source_param`` is absent from *arguments*, emit
      nothing; otherwise emit ``literal_token`` (when set) then the value.
    """
    argv: list[str] = []
    for mapping in mappings:
        if mapping.source_param is None:
            if mapping.literal_token is not None:
                argv.append(mapping.literal_token)
            continue

        token = coerce_argument(mapping.source_param, arguments.get(mapping.source_param))
        if token is None:
            continue
        if mapping.literal_token is not None:
            argv.append(mapping.literal_token)
        argv.append(token)
    return argv
