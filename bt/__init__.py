"""
Block Templater: compiles declarative block specifications into
block initializers for a visual programming editor.
"""

from __future__ import annotations

from .errors import BTUserError
from .template import (
    BlockInitializer,
    BlockRegistry,
    BuildPlan,
    TemplateRegistrar,
    compile_block,
    try_compile,
)

__all__ = [
    "BTUserError",
    "BlockInitializer",
    "BlockRegistry",
    "BuildPlan",
    "TemplateRegistrar",
    "compile_block",
    "try_compile",
]
