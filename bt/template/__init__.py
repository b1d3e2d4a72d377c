"""
Block template compiler.

Turns declarative block specifications into build plans and registers
initializers that apply those plans to editor block instances.
"""

from __future__ import annotations

from .compiler import CompileOutcome, compile_block, try_compile
from .initializer import BlockContext, BlockInitializer, InputHandle
from .lexer import tokenize_message
from .plan import BuildPlan, ConnectorDecl, FieldBinding, InputKind, InputPlan
from .registrar import TemplateRegistrar
from .registry import BlockRegistry
from .spec import BlockSpec

__all__ = [
    "BlockContext",
    "BlockInitializer",
    "BlockRegistry",
    "BlockSpec",
    "BuildPlan",
    "CompileOutcome",
    "ConnectorDecl",
    "FieldBinding",
    "InputHandle",
    "InputKind",
    "InputPlan",
    "TemplateRegistrar",
    "compile_block",
    "tokenize_message",
    "try_compile",
]
