"""
Tests for registering templates and the block registry lifecycle.
"""

import pytest

from bt.template import BlockInitializer, BlockRegistry, TemplateRegistrar, compile_block
from bt.template.errors import (
    DanglingField,
    DuplicateIndex,
    DuplicateName,
    IndexOutOfRange,
    MissingMessage,
    UnknownElementKind,
)

from tests.infrastructure import RecordingBlock, block, field, value_input


class TestTemplateRegistrar:

    def test_add_and_get(self, registrar, registry):
        init = registrar.add_template(block(name="math_add", message="%1 + %2", args=[value_input("A"), value_input("B")]))
        assert isinstance(init, BlockInitializer)
        assert registry.get("math_add") is init
        assert "math_add" in registry
        assert len(registry) == 1

    def test_get_missing(self, registry):
        assert registry.get("nope") is None

    def test_duplicate_name_keeps_first(self, registrar, registry):
        first = registrar.add_template(block(name="dup", message="first"))
        with pytest.raises(DuplicateName):
            registrar.add_template(block(name="dup", message="second"))
        assert registry.get("dup") is first
        ctx = RecordingBlock()
        registry.get("dup")(ctx)
        assert ctx.inputs[0].fields[0][0].text == "first"

    def test_duplicate_name_checked_before_message(self, registrar):
        registrar.add_template(block(name="dup", message="x"))
        with pytest.raises(DuplicateName):
            registrar.add_template({"name": "dup"})

    @pytest.mark.parametrize("raw, error", [
        ({"name": "bad", "args": []}, MissingMessage),
        (block(name="bad", message="%1 %1", args=[value_input()]), DuplicateIndex),
        (block(name="bad", message="%1", args=[{"type": "nope"}]), UnknownElementKind),
    ])
    def test_failed_registration_leaves_registry_untouched(self, registrar, registry, raw, error):
        registrar.add_template(block(name="ok", message="fine"))
        with pytest.raises(error):
            registrar.add_template(raw)
        assert registry.names() == ["ok"]
        # the name stays free for a corrected specification
        registrar.add_template(block(name="bad", message="fixed"))
        assert registry.names() == ["ok", "bad"]

    def test_dangling_error_policy_blocks_registration(self, registry, strict_config):
        registrar = TemplateRegistrar(registry, strict_config)
        with pytest.raises(DanglingField):
            registrar.add_template(block(name="t", message="%1", args=[field("input", text="x")]))
        assert "t" not in registry

    def test_add_templates_stops_at_first_failure(self, registrar, registry):
        specs = [
            block(name="a", message="A"),
            block(name="b", message="%2"),
            block(name="c", message="C"),
        ]
        with pytest.raises(IndexOutOfRange):
            registrar.add_templates(specs)
        assert registry.names() == ["a"]

    def test_add_templates_returns_in_order(self, registrar):
        added = registrar.add_templates([block(name="a", message="A"), block(name="b", message="B")])
        assert [i.name for i in added] == ["a", "b"]

    def test_registries_are_independent(self):
        r1, r2 = BlockRegistry(), BlockRegistry()
        TemplateRegistrar(r1).add_template(block(name="x", message="x"))
        assert "x" not in r2
        TemplateRegistrar(r2).add_template(block(name="x", message="x"))


class TestBlockRegistry:

    def test_freeze(self, registry):
        registry.add("a", BlockInitializer(compile_block(block(name="a", message="a"))))
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RuntimeError):
            registry.add("b", BlockInitializer(compile_block(block(name="b", message="b"))))
        assert registry.get("a") is not None

    def test_direct_duplicate(self, registry):
        init = BlockInitializer(compile_block(block(name="a", message="a")))
        registry.add("a", init)
        with pytest.raises(DuplicateName):
            registry.add("a", init)

    def test_iteration_order(self, registrar, registry):
        for n in ("z", "a", "m"):
            registrar.add_template(block(name=n, message=n))
        assert list(registry) == ["z", "a", "m"]
