"""
Message tokens.

A block message is split into literal text fragments and `%N` placeholders
referencing the block's arguments (1-based).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LiteralToken:
    """
    Literal text between placeholders, already unescaped and trimmed.
    """
    text: str
    position: int        # Offset in the source message

    def __repr__(self) -> str:
        return f"Literal({self.text!r}@{self.position})"


@dataclass(frozen=True)
class PlaceholderToken:
    """
    `%N` reference to the N-th argument descriptor.
    """
    index: int           # 1-based, exactly as written in the message
    position: int

    @property
    def source(self) -> str:
        return f"%{self.index}"

    def __repr__(self) -> str:
        return f"Placeholder({self.index}@{self.position})"


Token = Union[LiteralToken, PlaceholderToken]


__all__ = [
    "LiteralToken",
    "PlaceholderToken",
    "Token",
]
