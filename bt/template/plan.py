"""
Build plan: the fully resolved layout of a block.

A plan is immutable and independent of any editor runtime; the initializer
replays it onto a block context.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .descriptors import Align, TypeCheck
from .fields import FieldSpec


class InputKind(enum.Enum):
    VALUE = "value"
    STATEMENT = "statement"
    DUMMY = "dummy"


@dataclass(frozen=True)
class FieldBinding:
    """A field attached to an input, with its optional binding name."""
    field: FieldSpec
    name: Optional[str] = None


@dataclass(frozen=True)
class InputPlan:
    kind: InputKind
    name: Optional[str] = None
    check: TypeCheck = None
    align: Optional[Align] = None
    fields: Tuple[FieldBinding, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "check": list(self.check) if self.check is not None else None,
            "align": self.align.name if self.align is not None else None,
            "fields": [_binding_dict(b) for b in self.fields],
        }


@dataclass(frozen=True)
class ConnectorDecl:
    """
    Declared output or statement connector.

    `check=None` accepts any type; an undeclared connector is represented
    by the absence of a ConnectorDecl, not by a None check.
    """
    check: TypeCheck = None

    def to_dict(self) -> Dict[str, Any]:
        return {"check": list(self.check) if self.check is not None else None}


# Static value or an accessor resolved later by the block runtime
LateBound = Union[str, Callable[..., Any], None]


@dataclass(frozen=True)
class BuildPlan:
    name: str
    colour: Any = None
    inputs: Tuple[InputPlan, ...] = ()
    inputs_inline: Optional[bool] = None
    output: Optional[ConnectorDecl] = None
    previous_statement: Optional[ConnectorDecl] = None
    next_statement: Optional[ConnectorDecl] = None
    tooltip: LateBound = None
    help_url: LateBound = None
    # Fields built but never attached to an input
    dangling_fields: Tuple[FieldBinding, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view; accessors are rendered as '<callable>'."""
        return {
            "name": self.name,
            "colour": self.colour,
            "inputs": [i.to_dict() for i in self.inputs],
            "inputsInline": self.inputs_inline,
            "output": self.output.to_dict() if self.output else None,
            "previousStatement": self.previous_statement.to_dict() if self.previous_statement else None,
            "nextStatement": self.next_statement.to_dict() if self.next_statement else None,
            "tooltip": _late_bound_repr(self.tooltip),
            "helpUrl": _late_bound_repr(self.help_url),
            "danglingFields": [_binding_dict(b) for b in self.dangling_fields],
        }


def _binding_dict(binding: FieldBinding) -> Dict[str, Any]:
    data = binding.field.to_dict()
    data["name"] = binding.name
    return data


def _late_bound_repr(value: LateBound) -> Optional[str]:
    if callable(value):
        return "<callable>"
    return value


__all__ = [
    "InputKind",
    "FieldBinding",
    "InputPlan",
    "ConnectorDecl",
    "LateBound",
    "BuildPlan",
]
