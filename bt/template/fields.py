"""
Concrete field specifications.

These are the declarative widgets handed to the block context; the editor
runtime turns them into real widgets.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Optional


@dataclass(frozen=True)
class FieldSpec:
    kind: ClassVar[str] = "field"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind
        return data


@dataclass(frozen=True)
class LabelField(FieldSpec):
    """Anonymous text taken from the message itself."""
    kind: ClassVar[str] = "label"
    text: str


@dataclass(frozen=True)
class TextInputField(FieldSpec):
    kind: ClassVar[str] = "text_input"
    text: str = ""


@dataclass(frozen=True)
class AngleField(FieldSpec):
    kind: ClassVar[str] = "angle"
    angle: Any = 0


@dataclass(frozen=True)
class CheckboxField(FieldSpec):
    kind: ClassVar[str] = "checkbox"
    checked: Any = False


@dataclass(frozen=True)
class ColourField(FieldSpec):
    kind: ClassVar[str] = "colour"
    colour: Optional[str] = None


@dataclass(frozen=True)
class DateField(FieldSpec):
    kind: ClassVar[str] = "date"
    date: Optional[str] = None


@dataclass(frozen=True)
class VariableField(FieldSpec):
    kind: ClassVar[str] = "variable"
    variable: Optional[str] = None


@dataclass(frozen=True)
class DropdownField(FieldSpec):
    kind: ClassVar[str] = "dropdown"
    options: Any = ()


@dataclass(frozen=True)
class ImageField(FieldSpec):
    kind: ClassVar[str] = "image"
    src: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    alt: str = ""


__all__ = [
    "FieldSpec",
    "LabelField",
    "TextInputField",
    "AngleField",
    "CheckboxField",
    "ColourField",
    "DateField",
    "VariableField",
    "DropdownField",
    "ImageField",
]
