"""
Lexical analyzer for block messages.

Splits a message such as ``"set %1 to %2"`` into an ordered list of literal
and placeholder tokens.
"""

from __future__ import annotations

import logging
import re
from typing import List

from .tokens import LiteralToken, PlaceholderToken, Token

logger = logging.getLogger(__name__)


class MessageLexer:
    """
    Message tokenizer.

    Rules:
    - `%` followed by one or more digits is a placeholder;
    - `%%` inside literal text stands for a single `%`;
    - literal fragments are trimmed, empty ones are dropped;
    - anything else (`%x`, a lone `%`) stays literal text.
    """

    _PLACEHOLDER = re.compile(r'%([0-9]+)')
    _ESCAPED_PERCENT = re.compile(r'%%')

    def __init__(self, text: str):
        self.text = text

    def tokenize(self) -> List[Token]:
        """
        Tokenizes the whole message and returns the list of tokens.
        """
        tokens: List[Token] = []
        position = 0

        for match in self._PLACEHOLDER.finditer(self.text):
            self._emit_literal(tokens, self.text[position:match.start()], position)
            tokens.append(PlaceholderToken(int(match.group(1)), match.start()))
            position = match.end()

        self._emit_literal(tokens, self.text[position:], position)

        logger.debug("Tokenized message %r into %d token(s)", self.text, len(tokens))
        return tokens

    def _emit_literal(self, tokens: List[Token], raw: str, position: int) -> None:
        text = self._ESCAPED_PERCENT.sub('%', raw).strip()
        if text:
            tokens.append(LiteralToken(text, position))


def tokenize_message(message: str) -> List[Token]:
    """
    Convenience function for tokenizing a block message.
    """
    return MessageLexer(message).tokenize()


__all__ = ["MessageLexer", "tokenize_message"]
