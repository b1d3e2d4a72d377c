"""
Argument descriptors.

Each `%N` placeholder of a block message refers to an argument descriptor:
either a field (a non-connectable widget) or an input (a slot of the block).
Descriptors form a closed set of immutable classes; raw mappings coming from
JSON/YAML are decoded with `decode_descriptor()`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from .errors import InvalidAlign, InvalidCheck, UnknownElementKind


class Align(enum.IntEnum):
    """Input alignment, with the editor's numeric constants."""
    LEFT = -1
    CENTRE = 0
    RIGHT = 1


# None = any type; otherwise the accepted type names
TypeCheck = Optional[Tuple[str, ...]]


def parse_align(value: Any, block_name: Optional[str] = None) -> Optional[Align]:
    """Parses an alignment given by name or by numeric constant."""
    if value is None:
        return None
    if isinstance(value, Align):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key == "CENTER":
            key = "CENTRE"
        if key.startswith("ALIGN_"):
            key = key[len("ALIGN_"):]
        try:
            return Align[key]
        except KeyError:
            raise InvalidAlign(value, block_name)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Align(value)
        except ValueError:
            raise InvalidAlign(value, block_name)
    raise InvalidAlign(value, block_name)


def parse_check(value: Any, block_name: Optional[str] = None) -> TypeCheck:
    """
    Parses a type constraint: null (any type), a type name or a list of names.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise InvalidCheck(value, block_name)


# ---- Fields ----

@dataclass(frozen=True)
class FieldDesc:
    """Base class for field descriptors."""
    name: Optional[str] = None


@dataclass(frozen=True)
class TextFieldDesc(FieldDesc):
    text: str = ""


@dataclass(frozen=True)
class AngleFieldDesc(FieldDesc):
    angle: Any = 0


@dataclass(frozen=True)
class CheckboxFieldDesc(FieldDesc):
    checked: Any = False


@dataclass(frozen=True)
class ColourFieldDesc(FieldDesc):
    colour: Optional[str] = None


@dataclass(frozen=True)
class DateFieldDesc(FieldDesc):
    date: Optional[str] = None


@dataclass(frozen=True)
class VariableFieldDesc(FieldDesc):
    variable: Optional[str] = None


@dataclass(frozen=True)
class DropdownFieldDesc(FieldDesc):
    options: Any = ()


@dataclass(frozen=True)
class ImageFieldDesc(FieldDesc):
    src: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    alt: str = ""


# ---- Inputs ----

@dataclass(frozen=True)
class InputDesc:
    """Base class for input descriptors."""
    name: Optional[str] = None
    check: TypeCheck = None
    align: Optional[Align] = None


@dataclass(frozen=True)
class ValueInputDesc(InputDesc):
    pass


@dataclass(frozen=True)
class StatementInputDesc(InputDesc):
    pass


@dataclass(frozen=True)
class DummyInputDesc(InputDesc):
    pass


ArgumentDescriptor = Union[FieldDesc, InputDesc]

# Wire tag -> (descriptor class, {descriptor attribute: wire key})
FIELD_DESCRIPTORS: Dict[str, Tuple[Type[FieldDesc], Dict[str, str]]] = {
    "field_input": (TextFieldDesc, {"text": "text"}),
    "field_angle": (AngleFieldDesc, {"angle": "angle"}),
    "field_checkbox": (CheckboxFieldDesc, {"checked": "checked"}),
    "field_colour": (ColourFieldDesc, {"colour": "colour"}),
    "field_date": (DateFieldDesc, {"date": "date"}),
    "field_variable": (VariableFieldDesc, {"variable": "variable"}),
    "field_dropdown": (DropdownFieldDesc, {"options": "options"}),
    "field_image": (ImageFieldDesc, {"src": "src", "width": "width", "height": "height", "alt": "alt"}),
}

INPUT_DESCRIPTORS: Dict[str, Type[InputDesc]] = {
    "input_value": ValueInputDesc,
    "input_statement": StatementInputDesc,
    "input_dummy": DummyInputDesc,
}


def _freeze(value: Any) -> Any:
    # Dropdown options arrive as nested lists; descriptors must stay hashable.
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def decode_descriptor(raw: Any, block_name: Optional[str] = None) -> ArgumentDescriptor:
    """
    Decodes one raw argument mapping (as found in JSON/YAML) into a descriptor.

    Args:
        raw: Mapping with a `type` tag and kind-specific keys
        block_name: Name of the block, for error messages

    Returns:
        Typed argument descriptor

    Raises:
        UnknownElementKind: If the tag is not recognized or raw is not a mapping
        InvalidAlign, InvalidCheck: If an input carries malformed options
    """
    if isinstance(raw, (FieldDesc, InputDesc)):
        return raw
    if not isinstance(raw, Mapping):
        raise UnknownElementKind(type(raw).__name__, block_name)

    tag = raw.get("type")
    name = raw.get("name")
    if not isinstance(tag, str):
        raise UnknownElementKind(tag, block_name)

    if tag in FIELD_DESCRIPTORS:
        cls, keys = FIELD_DESCRIPTORS[tag]
        payload = {attr: _freeze(raw[key]) for attr, key in keys.items() if key in raw}
        return cls(name=name, **payload)

    if tag in INPUT_DESCRIPTORS:
        cls_input = INPUT_DESCRIPTORS[tag]
        return cls_input(
            name=name,
            check=parse_check(raw.get("check"), block_name),
            align=parse_align(raw.get("align"), block_name),
        )

    raise UnknownElementKind(tag, block_name)


__all__ = [
    "Align",
    "TypeCheck",
    "parse_align",
    "parse_check",
    "FieldDesc",
    "TextFieldDesc",
    "AngleFieldDesc",
    "CheckboxFieldDesc",
    "ColourFieldDesc",
    "DateFieldDesc",
    "VariableFieldDesc",
    "DropdownFieldDesc",
    "ImageFieldDesc",
    "InputDesc",
    "ValueInputDesc",
    "StatementInputDesc",
    "DummyInputDesc",
    "ArgumentDescriptor",
    "FIELD_DESCRIPTORS",
    "INPUT_DESCRIPTORS",
    "decode_descriptor",
]
