"""
Block compiler.

Drives the pipeline for one specification:

    message --lexer--> tokens --resolver--> elements --sequencer--> elements
            --builder--> inputs + dangling fields --> BuildPlan

`compile_block()` raises on the first violated contract; `try_compile()`
returns the outcome as a value instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..config import BtConfig, DanglingPolicy
from .builder import build_inputs
from .errors import DanglingField, TemplateError
from .lexer import tokenize_message
from .plan import BuildPlan
from .resolver import resolve_arguments
from .sequencer import sequence_elements
from .spec import BlockSpec

logger = logging.getLogger(__name__)


def compile_block(spec: Union[BlockSpec, Mapping[str, Any]], config: Optional[BtConfig] = None) -> BuildPlan:
    """
    Compiles a block specification into a build plan.

    Args:
        spec: Typed specification or its raw mapping
        config: Settings (dangling field policy); defaults when omitted

    Returns:
        Immutable build plan

    Raises:
        TemplateError: On any malformed specification
    """
    cfg = config or BtConfig()
    if not isinstance(spec, BlockSpec):
        spec = BlockSpec.from_dict(spec)

    tokens = tokenize_message(spec.message)
    elements = resolve_arguments(tokens, spec.args, spec.name)
    elements = sequence_elements(elements, spec.last_dummy_align)
    result = build_inputs(elements, spec.name)

    if result.dangling:
        if cfg.dangling_fields is DanglingPolicy.ERROR:
            raise DanglingField(len(result.dangling), spec.name)
        if cfg.dangling_fields is DanglingPolicy.WARN:
            logger.warning(
                "Block '%s': %d trailing field(s) are not followed by an input and are not attached",
                spec.name, len(result.dangling),
            )

    plan = BuildPlan(
        name=spec.name,
        colour=spec.colour,
        inputs=result.inputs,
        inputs_inline=spec.inputs_inline,
        output=spec.output,
        previous_statement=spec.previous_statement,
        next_statement=spec.next_statement,
        tooltip=spec.tooltip,
        help_url=spec.help_url,
        dangling_fields=result.dangling,
    )
    logger.debug("Compiled block '%s': %d input(s)", spec.name, len(plan.inputs))
    return plan


@dataclass(frozen=True)
class CompileOutcome:
    """Result of a compilation: exactly one of plan / error is set."""
    plan: Optional[BuildPlan] = None
    error: Optional[TemplateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_compile(spec: Union[BlockSpec, Mapping[str, Any]], config: Optional[BtConfig] = None) -> CompileOutcome:
    """Like compile_block(), but returns template errors instead of raising them."""
    try:
        return CompileOutcome(plan=compile_block(spec, config))
    except TemplateError as e:
        return CompileOutcome(error=e)


__all__ = ["compile_block", "CompileOutcome", "try_compile"]
