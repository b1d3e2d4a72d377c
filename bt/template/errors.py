"""
Errors raised while compiling and registering block templates.

Every error identifies the block it was raised for (when the name is known)
and the contract that was violated.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..errors import BTUserError


class TemplateError(BTUserError):
    """Base class for block template compilation errors."""

    def __init__(self, message: str, block_name: Optional[str] = None):
        if block_name:
            message = f"Block '{block_name}': {message}"
        super().__init__(message)
        self.block_name = block_name


# ---- Structural validation of the specification ----

class MissingName(TemplateError):
    """The specification has no string 'name'."""
    def __init__(self, value: Any = None):
        super().__init__(f"Unnamed block (name must be a string, got {type(value).__name__})")


class MissingMessage(TemplateError):
    """The specification has no string 'message'."""
    def __init__(self, block_name: str):
        super().__init__("No message.", block_name)


class MissingArgs(TemplateError):
    """The specification has no 'args' list."""
    def __init__(self, block_name: str):
        super().__init__("No args.", block_name)


class DuplicateName(TemplateError):
    """A block with this name is already registered."""
    def __init__(self, block_name: str):
        super().__init__("a block with this name is already registered", block_name)


class ConflictingConnectors(TemplateError):
    """Both 'output' and 'previousStatement' are declared."""
    def __init__(self, block_name: str):
        super().__init__("Must not have both an output and a previousStatement.", block_name)


# ---- Message interpolation ----

class IndexOutOfRange(TemplateError):
    def __init__(self, index: int, arg_count: int, block_name: Optional[str] = None):
        self.index = index
        self.arg_count = arg_count
        super().__init__(
            f'Message index "%{index}" out of range (block has {arg_count} arg(s)).',
            block_name,
        )


class DuplicateIndex(TemplateError):
    def __init__(self, index: int, block_name: Optional[str] = None):
        self.index = index
        super().__init__(f'Message index "%{index}" duplicated.', block_name)


class UnreferencedArgument(TemplateError):
    def __init__(self, missing: List[int], arg_count: int, block_name: Optional[str] = None):
        self.missing = missing
        self.arg_count = arg_count
        listed = ", ".join(f"%{i}" for i in missing)
        super().__init__(
            f"Message does not reference all {arg_count} arg(s) (unreferenced: {listed}).",
            block_name,
        )


# ---- Element assembly ----

class UnknownElementKind(TemplateError):
    def __init__(self, kind: Any, block_name: Optional[str] = None):
        self.kind = kind
        super().__init__(f"Unknown element type: {kind!r}", block_name)


class DanglingField(TemplateError):
    """Fields at the end of the message are not followed by any input."""
    def __init__(self, field_count: int, block_name: Optional[str] = None):
        self.field_count = field_count
        super().__init__(
            f"{field_count} trailing field(s) are not followed by an input and would be dropped",
            block_name,
        )


class InvalidAlign(TemplateError):
    def __init__(self, value: Any, block_name: Optional[str] = None):
        self.value = value
        super().__init__(
            f"Invalid alignment {value!r} (expected LEFT, CENTRE, RIGHT or -1, 0, 1)",
            block_name,
        )


class InvalidCheck(TemplateError):
    def __init__(self, value: Any, block_name: Optional[str] = None):
        self.value = value
        super().__init__(
            f"Invalid type check {value!r} (expected null, a string or a list of strings)",
            block_name,
        )


__all__ = [
    "TemplateError",
    "MissingName",
    "MissingMessage",
    "MissingArgs",
    "DuplicateName",
    "ConflictingConnectors",
    "IndexOutOfRange",
    "DuplicateIndex",
    "UnreferencedArgument",
    "UnknownElementKind",
    "DanglingField",
    "InvalidAlign",
    "InvalidCheck",
]
