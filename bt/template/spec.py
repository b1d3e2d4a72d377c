"""
Typed block specification.

Decodes the raw JSON/YAML mapping (camelCase keys, as used by the editor)
into an immutable BlockSpec. Unknown top-level keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from .descriptors import Align, ArgumentDescriptor, decode_descriptor, parse_align, parse_check
from .errors import ConflictingConnectors, MissingArgs, MissingMessage, MissingName
from .plan import ConnectorDecl, LateBound


@dataclass(frozen=True)
class BlockSpec:
    name: str
    message: str
    args: Tuple[ArgumentDescriptor, ...] = ()
    colour: Any = None
    output: Optional[ConnectorDecl] = None
    previous_statement: Optional[ConnectorDecl] = None
    next_statement: Optional[ConnectorDecl] = None
    inputs_inline: Optional[bool] = None
    tooltip: LateBound = None
    help_url: LateBound = None
    last_dummy_align: Optional[Align] = None

    def __post_init__(self):
        if self.output is not None and self.previous_statement is not None:
            raise ConflictingConnectors(self.name)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "BlockSpec":
        """
        Validates and decodes a raw specification.

        Checks run in a fixed order and the first violation wins:
        name, message, args, connectors, then each argument.
        """
        name = require_name(raw)
        message = raw.get("message")
        if not isinstance(message, str):
            raise MissingMessage(name)
        args = raw.get("args")
        if not isinstance(args, (list, tuple)):
            raise MissingArgs(name)
        # A connector is declared when its key is present, even with a null check
        if "output" in raw and "previousStatement" in raw:
            raise ConflictingConnectors(name)

        return cls(
            name=name,
            message=message,
            args=tuple(decode_descriptor(a, name) for a in args),
            colour=raw.get("colour"),
            output=_connector(raw, "output", name),
            previous_statement=_connector(raw, "previousStatement", name),
            next_statement=_connector(raw, "nextStatement", name),
            inputs_inline=raw.get("inputsInline"),
            tooltip=raw.get("tooltip"),
            help_url=raw.get("helpUrl"),
            last_dummy_align=parse_align(raw.get("lastDummyAlign"), name),
        )


def require_name(raw: Mapping[str, Any]) -> str:
    name = raw.get("name") if isinstance(raw, Mapping) else None
    if not isinstance(name, str):
        raise MissingName(name)
    return name


def _connector(raw: Mapping[str, Any], key: str, block_name: str) -> Optional[ConnectorDecl]:
    if key not in raw:
        return None
    return ConnectorDecl(check=parse_check(raw[key], block_name))


__all__ = ["BlockSpec", "require_name"]
