"""
Tests for decoding raw argument mappings.
"""

import pytest

from bt.template.descriptors import (
    Align,
    DropdownFieldDesc,
    DummyInputDesc,
    ImageFieldDesc,
    StatementInputDesc,
    TextFieldDesc,
    ValueInputDesc,
    decode_descriptor,
    parse_align,
    parse_check,
)
from bt.template.errors import InvalidAlign, InvalidCheck, UnknownElementKind


class TestDecodeDescriptor:

    def test_value_input(self):
        desc = decode_descriptor({"type": "input_value", "name": "A", "check": ["Number", "String"], "align": "RIGHT"})
        assert desc == ValueInputDesc(name="A", check=("Number", "String"), align=Align.RIGHT)

    def test_statement_and_dummy_inputs(self):
        assert decode_descriptor({"type": "input_statement", "name": "DO"}) == StatementInputDesc(name="DO")
        assert decode_descriptor({"type": "input_dummy"}) == DummyInputDesc()

    def test_text_field(self):
        assert decode_descriptor({"type": "field_input", "name": "T", "text": "hi"}) == TextFieldDesc(name="T", text="hi")

    def test_image_field_payload(self):
        desc = decode_descriptor({"type": "field_image", "src": "a.png", "width": 15, "height": 15, "alt": "*"})
        assert desc == ImageFieldDesc(src="a.png", width=15, height=15, alt="*")

    def test_dropdown_options_are_frozen(self):
        desc = decode_descriptor({"type": "field_dropdown", "name": "OP", "options": [["+", "ADD"], ["-", "SUB"]]})
        assert isinstance(desc, DropdownFieldDesc)
        assert desc.options == (("+", "ADD"), ("-", "SUB"))
        hash(desc)

    def test_unknown_tag(self):
        with pytest.raises(UnknownElementKind) as exc:
            decode_descriptor({"type": "field_slider"}, "blk")
        assert exc.value.kind == "field_slider"

    def test_missing_tag(self):
        with pytest.raises(UnknownElementKind):
            decode_descriptor({"name": "A"})

    def test_not_a_mapping(self):
        with pytest.raises(UnknownElementKind):
            decode_descriptor("input_value")

    def test_typed_descriptor_passes_through(self):
        desc = ValueInputDesc(name="A")
        assert decode_descriptor(desc) is desc


class TestOptions:

    @pytest.mark.parametrize("raw, expected", [
        (None, None),
        ("LEFT", Align.LEFT),
        ("centre", Align.CENTRE),
        ("CENTER", Align.CENTRE),
        ("ALIGN_RIGHT", Align.RIGHT),
        (-1, Align.LEFT),
        (0, Align.CENTRE),
        (1, Align.RIGHT),
    ])
    def test_parse_align(self, raw, expected):
        assert parse_align(raw) is expected

    @pytest.mark.parametrize("raw", ["TOP", 2, True, 1.5])
    def test_invalid_align(self, raw):
        with pytest.raises(InvalidAlign):
            parse_align(raw)

    def test_parse_check(self):
        assert parse_check(None) is None
        assert parse_check("Number") == ("Number",)
        assert parse_check(["Number", "Boolean"]) == ("Number", "Boolean")

    @pytest.mark.parametrize("raw", [5, {"a": 1}, ["Number", 3]])
    def test_invalid_check(self, raw):
        with pytest.raises(InvalidCheck):
            parse_check(raw)
