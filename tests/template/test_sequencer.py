"""
Tests for the implicit trailing dummy input.
"""

from bt.template.descriptors import Align, DummyInputDesc, TextFieldDesc, ValueInputDesc
from bt.template.sequencer import sequence_elements


class TestSequenceElements:

    def test_trailing_text_gets_dummy_input(self):
        result = sequence_elements(["Hello"])
        assert result == ["Hello", DummyInputDesc()]

    def test_last_dummy_align_applied(self):
        result = sequence_elements(["x", ValueInputDesc(), "end"], Align.RIGHT)
        assert result[-1] == DummyInputDesc(align=Align.RIGHT)

    def test_trailing_input_untouched(self):
        elements = ["a", ValueInputDesc(name="A")]
        assert sequence_elements(elements) == elements

    def test_trailing_field_untouched(self):
        """A message ending with a field gets no implicit input."""
        elements = [TextFieldDesc(text="t")]
        assert sequence_elements(elements) == elements

    def test_empty_sequence(self):
        assert sequence_elements([]) == []

    def test_input_not_mutated(self):
        elements = ["Hello"]
        sequence_elements(elements)
        assert elements == ["Hello"]
