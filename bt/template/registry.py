"""
Block registry.

Maps block names to their initializers. Created once by the host and passed
by reference to every registrar; there is no module-level instance.

Entries are only ever added: no removal, no overwrite. The registry is not
thread-safe; hosts registering from several threads must serialize the calls.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .errors import DuplicateName
from .initializer import BlockInitializer

logger = logging.getLogger(__name__)


class BlockRegistry:
    """
    Registry of block initializers.

    Lifecycle: create → add (during startup) → freeze → get.
    """

    def __init__(self):
        self._entries: Dict[str, BlockInitializer] = {}
        self._frozen = False

    def add(self, name: str, initializer: BlockInitializer) -> None:
        """
        Registers a new entry.

        Raises:
            DuplicateName: If the name is already registered
            RuntimeError: If the registry is frozen
        """
        if self._frozen:
            raise RuntimeError(f"Block registry is frozen; cannot register '{name}'")
        if name in self._entries:
            raise DuplicateName(name)
        self._entries[name] = initializer
        logger.info("Registered block '%s'", name)

    def get(self, name: str) -> Optional[BlockInitializer]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._entries)

    def freeze(self) -> None:
        """Ends the registration phase."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


__all__ = ["BlockRegistry"]
