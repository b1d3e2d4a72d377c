"""
Block initializer and the block context protocol.

The block context is the editor runtime's block instance. It is passed in
explicitly, so any object implementing BlockContext (including a recording
stub in tests) can be populated from a plan.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Tuple

from .descriptors import Align
from .fields import FieldSpec
from .plan import BuildPlan, ConnectorDecl, InputKind, LateBound

logger = logging.getLogger(__name__)


class InputHandle(Protocol):
    def set_check(self, check: Tuple[str, ...]) -> Any: ...   # noqa: E701

    def set_align(self, align: Align) -> Any: ...   # noqa: E701

    def append_field(self, field: FieldSpec, name: Optional[str] = None) -> Any: ...   # noqa: E701


class BlockContext(Protocol):
    """Operations of a block instance used during initialization."""

    def set_colour(self, colour: Any) -> None: ...   # noqa: E701

    def append_value_input(self, name: Optional[str]) -> InputHandle: ...   # noqa: E701

    def append_statement_input(self, name: Optional[str]) -> InputHandle: ...   # noqa: E701

    def append_dummy_input(self, name: Optional[str]) -> InputHandle: ...   # noqa: E701

    def set_inputs_inline(self, inline: bool) -> None: ...   # noqa: E701

    def set_output(self, has_output: bool, check: Optional[Tuple[str, ...]]) -> None: ...   # noqa: E701

    def set_previous_statement(self, has_previous: bool, check: Optional[Tuple[str, ...]]) -> None: ...   # noqa: E701

    def set_next_statement(self, has_next: bool, check: Optional[Tuple[str, ...]]) -> None: ...   # noqa: E701

    def set_tooltip(self, tooltip: LateBound) -> None: ...   # noqa: E701

    def set_help_url(self, url: LateBound) -> None: ...   # noqa: E701


class BlockInitializer:
    """
    Applies a build plan to a block context.

    Deterministic: the same plan always produces the same sequence of
    context calls.
    """

    def __init__(self, plan: BuildPlan):
        self.plan = plan

    @property
    def name(self) -> str:
        return self.plan.name

    def __call__(self, block: BlockContext) -> None:
        plan = self.plan
        block.set_colour(plan.colour)

        for input_plan in plan.inputs:
            handle = self._append_input(block, input_plan.kind, input_plan.name)
            if input_plan.check is not None:
                handle.set_check(input_plan.check)
            if input_plan.align is not None:
                handle.set_align(input_plan.align)
            for binding in input_plan.fields:
                handle.append_field(binding.field, binding.name)

        if plan.inputs_inline:
            block.set_inputs_inline(True)

        # Output and previous statement never coexist in a plan
        _connect(plan.output, block.set_output)
        _connect(plan.previous_statement, block.set_previous_statement)
        _connect(plan.next_statement, block.set_next_statement)

        block.set_tooltip(plan.tooltip)
        block.set_help_url(plan.help_url)
        logger.debug("Initialized block '%s'", plan.name)

    @staticmethod
    def _append_input(block: BlockContext, kind: InputKind, name: Optional[str]) -> InputHandle:
        if kind is InputKind.VALUE:
            return block.append_value_input(name)
        if kind is InputKind.STATEMENT:
            return block.append_statement_input(name)
        return block.append_dummy_input(name)

    def __repr__(self) -> str:
        return f"BlockInitializer({self.plan.name!r})"


def _connect(decl: Optional[ConnectorDecl], setter) -> None:
    if decl is not None:
        setter(True, decl.check)


__all__ = ["InputHandle", "BlockContext", "BlockInitializer"]
