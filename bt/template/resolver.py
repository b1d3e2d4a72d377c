"""
Argument resolver.

Binds every `%N` placeholder of a tokenized message to its argument
descriptor and checks that the message references each argument exactly once.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set, Union

from .descriptors import ArgumentDescriptor
from .errors import DuplicateIndex, IndexOutOfRange, UnreferencedArgument
from .tokens import LiteralToken, Token

logger = logging.getLogger(__name__)

# Literal text or a resolved argument, in display order
Element = Union[str, ArgumentDescriptor]


class ArgumentResolver:
    """
    Resolves placeholder tokens against the argument list of one block.

    Keeps track of the indices already referenced, so a single resolver
    instance must not be reused for a second message.
    """

    def __init__(self, args: Sequence[ArgumentDescriptor], block_name: Optional[str] = None):
        self.args = args
        self.block_name = block_name
        self._seen: Set[int] = set()

    def resolve(self, tokens: Sequence[Token]) -> List[Element]:
        """
        Replaces placeholders with descriptors, keeping literal text as strings.

        Raises:
            IndexOutOfRange: Placeholder index outside [1, len(args)]
            DuplicateIndex: Same index referenced twice
            UnreferencedArgument: Some argument is never referenced
        """
        elements: List[Element] = []
        for token in tokens:
            if isinstance(token, LiteralToken):
                elements.append(token.text)
            else:
                elements.append(self._resolve_index(token.index))

        self._check_coverage()
        return elements

    def _resolve_index(self, index: int) -> ArgumentDescriptor:
        if index < 1 or index > len(self.args):
            raise IndexOutOfRange(index, len(self.args), self.block_name)
        if index in self._seen:
            raise DuplicateIndex(index, self.block_name)
        self._seen.add(index)
        return self.args[index - 1]

    def _check_coverage(self) -> None:
        if len(self._seen) != len(self.args):
            missing = [i for i in range(1, len(self.args) + 1) if i not in self._seen]
            raise UnreferencedArgument(missing, len(self.args), self.block_name)
        logger.debug("All %d argument(s) referenced", len(self.args))


def resolve_arguments(
    tokens: Sequence[Token],
    args: Sequence[ArgumentDescriptor],
    block_name: Optional[str] = None,
) -> List[Element]:
    return ArgumentResolver(args, block_name).resolve(tokens)


__all__ = ["Element", "ArgumentResolver", "resolve_arguments"]
