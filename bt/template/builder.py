"""
Field/input builder.

Walks the final element sequence once. Fields (and literal text) are stacked
until the next input appears; the input then takes the whole stack in order.

    "set %1 to %2"  with  [field_variable, input_value]

    "set"  -> stack: [label "set"]
    %1     -> stack: [label "set", variable]
    "to"   -> stack: [label "set", variable, label "to"]
    %2     -> value input, fields = the three above; stack cleared
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Type

from .descriptors import (
    AngleFieldDesc,
    CheckboxFieldDesc,
    ColourFieldDesc,
    DateFieldDesc,
    DropdownFieldDesc,
    DummyInputDesc,
    FieldDesc,
    ImageFieldDesc,
    InputDesc,
    StatementInputDesc,
    TextFieldDesc,
    ValueInputDesc,
    VariableFieldDesc,
)
from .errors import UnknownElementKind
from .fields import (
    AngleField,
    CheckboxField,
    ColourField,
    DateField,
    DropdownField,
    FieldSpec,
    ImageField,
    LabelField,
    TextInputField,
    VariableField,
)
from .plan import FieldBinding, InputKind, InputPlan
from .resolver import Element

logger = logging.getLogger(__name__)


# One factory per field descriptor class
FIELD_FACTORIES: Dict[Type[FieldDesc], Callable[..., FieldSpec]] = {
    TextFieldDesc: lambda d: TextInputField(d.text),
    AngleFieldDesc: lambda d: AngleField(d.angle),
    CheckboxFieldDesc: lambda d: CheckboxField(d.checked),
    ColourFieldDesc: lambda d: ColourField(d.colour),
    DateFieldDesc: lambda d: DateField(d.date),
    VariableFieldDesc: lambda d: VariableField(d.variable),
    DropdownFieldDesc: lambda d: DropdownField(d.options),
    ImageFieldDesc: lambda d: ImageField(d.src, d.width, d.height, d.alt),
}

INPUT_KINDS: Dict[Type[InputDesc], InputKind] = {
    ValueInputDesc: InputKind.VALUE,
    StatementInputDesc: InputKind.STATEMENT,
    DummyInputDesc: InputKind.DUMMY,
}


class FieldStack:
    """Fields waiting for the next input."""

    def __init__(self) -> None:
        self._items: List[FieldBinding] = []

    def push(self, field: FieldSpec, name: Optional[str] = None) -> None:
        self._items.append(FieldBinding(field, name))

    def flush(self) -> Tuple[FieldBinding, ...]:
        """Returns the stacked fields in push order and empties the stack."""
        items = tuple(self._items)
        self._items.clear()
        return items

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class BuildResult:
    inputs: Tuple[InputPlan, ...]
    # Stack contents left over after the last input
    dangling: Tuple[FieldBinding, ...] = ()


class InputBuilder:
    """Builds input plans from a final element sequence."""

    def __init__(self, block_name: Optional[str] = None):
        self.block_name = block_name
        self.stack = FieldStack()

    def build(self, elements: Sequence[Element]) -> BuildResult:
        inputs: List[InputPlan] = []
        for element in elements:
            if isinstance(element, str):
                self.stack.push(LabelField(element))
                continue

            factory = FIELD_FACTORIES.get(type(element))
            if factory is not None:
                self.stack.push(factory(element), element.name)
                continue

            kind = INPUT_KINDS.get(type(element))
            if kind is not None:
                inputs.append(self._make_input(kind, element))
                continue

            raise UnknownElementKind(type(element).__name__, self.block_name)

        dangling = self.stack.flush()
        if dangling:
            logger.debug("%d field(s) left without an input", len(dangling))
        return BuildResult(inputs=tuple(inputs), dangling=dangling)

    def _make_input(self, kind: InputKind, desc: InputDesc) -> InputPlan:
        plan = InputPlan(
            kind=kind,
            name=desc.name,
            check=desc.check,
            align=desc.align,
            fields=self.stack.flush(),
        )
        logger.debug("Built %s input %r with %d field(s)", kind.value, desc.name, len(plan.fields))
        return plan


def build_inputs(elements: Sequence[Element], block_name: Optional[str] = None) -> BuildResult:
    return InputBuilder(block_name).build(elements)


__all__ = [
    "FIELD_FACTORIES",
    "INPUT_KINDS",
    "FieldStack",
    "BuildResult",
    "InputBuilder",
    "build_inputs",
]
