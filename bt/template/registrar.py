"""
Template registrar: public entry point for adding block templates.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from ..config import BtConfig
from .compiler import compile_block
from .errors import DuplicateName
from .initializer import BlockInitializer
from .registry import BlockRegistry
from .spec import BlockSpec, require_name

logger = logging.getLogger(__name__)


class TemplateRegistrar:
    """
    Compiles specifications and stores their initializers in a registry.

    Registration is atomic: the registry is only touched once the whole
    specification has compiled.
    """

    def __init__(self, registry: BlockRegistry, config: Optional[BtConfig] = None):
        self.registry = registry
        self.config = config or BtConfig()

    def add_template(self, raw: Mapping[str, Any]) -> BlockInitializer:
        """
        Validates and compiles one specification and registers it.

        Args:
            raw: Block specification as loaded from JSON/YAML

        Returns:
            The registered initializer

        Raises:
            TemplateError: If the specification is malformed or the name is taken
        """
        name = require_name(raw)
        if name in self.registry:
            raise DuplicateName(name)

        spec = BlockSpec.from_dict(raw)
        plan = compile_block(spec, self.config)

        initializer = BlockInitializer(plan)
        self.registry.add(name, initializer)
        return initializer

    def add_templates(self, specs: Iterable[Mapping[str, Any]]) -> List[BlockInitializer]:
        """
        Registers several specifications in order.

        Stops at the first failing one; the ones before it stay registered.
        """
        added: List[BlockInitializer] = []
        for raw in specs:
            added.append(self.add_template(raw))
        logger.debug("Registered %d block template(s)", len(added))
        return added


__all__ = ["TemplateRegistrar"]
