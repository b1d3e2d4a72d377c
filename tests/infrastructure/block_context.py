"""
Recording block context.

Implements the BlockContext protocol by recording every call, so tests can
assert on the exact sequence an initializer produced.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple


class RecordingInput:
    def __init__(self, kind: str, name: Optional[str], log: List[Tuple]):
        self.kind = kind
        self.name = name
        self.check: Optional[Tuple[str, ...]] = None
        self.align: Any = None
        self.fields: List[Tuple[Any, Optional[str]]] = []
        self._log = log

    def set_check(self, check):
        self.check = check
        self._log.append(("set_check", self.name, check))
        return self

    def set_align(self, align):
        self.align = align
        self._log.append(("set_align", self.name, align))
        return self

    def append_field(self, field, name=None):
        self.fields.append((field, name))
        self._log.append(("append_field", self.name, field, name))
        return self


class RecordingBlock:
    def __init__(self):
        self.calls: List[Tuple] = []
        self.inputs: List[RecordingInput] = []

    def _append(self, kind: str, name: Optional[str]) -> RecordingInput:
        self.calls.append((f"append_{kind}_input", name))
        inp = RecordingInput(kind, name, self.calls)
        self.inputs.append(inp)
        return inp

    def set_colour(self, colour):
        self.calls.append(("set_colour", colour))

    def append_value_input(self, name):
        return self._append("value", name)

    def append_statement_input(self, name):
        return self._append("statement", name)

    def append_dummy_input(self, name):
        return self._append("dummy", name)

    def set_inputs_inline(self, inline):
        self.calls.append(("set_inputs_inline", inline))

    def set_output(self, has_output, check):
        self.calls.append(("set_output", has_output, check))

    def set_previous_statement(self, has_previous, check):
        self.calls.append(("set_previous_statement", has_previous, check))

    def set_next_statement(self, has_next, check):
        self.calls.append(("set_next_statement", has_next, check))

    def set_tooltip(self, tooltip):
        self.calls.append(("set_tooltip", tooltip))

    def set_help_url(self, url):
        self.calls.append(("set_help_url", url))

    def call_names(self) -> List[str]:
        return [c[0] for c in self.calls]


__all__ = ["RecordingBlock", "RecordingInput"]
