from pathlib import Path

import pytest

from bt.config import BtConfig, DanglingPolicy
from bt.template import BlockRegistry, TemplateRegistrar

from tests.infrastructure import write_yaml


@pytest.fixture
def registry() -> BlockRegistry:
    return BlockRegistry()


@pytest.fixture
def registrar(registry: BlockRegistry) -> TemplateRegistrar:
    return TemplateRegistrar(registry)


@pytest.fixture
def strict_config() -> BtConfig:
    """Config that rejects fields left without an input."""
    return BtConfig(dangling_fields=DanglingPolicy.ERROR)


@pytest.fixture
def specproj(tmp_path: Path) -> Path:
    """Minimal project: two specification files in blocks/ (JSON and YAML)."""
    root = tmp_path
    (root / "blocks").mkdir()
    (root / "blocks" / "math.json").write_text(
        '[{"name": "math_add", "message": "%1 plus %2", "colour": 230,'
        ' "output": "Number",'
        ' "args": [{"type": "input_value", "name": "A", "check": "Number"},'
        '          {"type": "input_value", "name": "B", "check": "Number"}]}]\n',
        encoding="utf-8",
    )
    write_yaml(root / "blocks" / "text.yaml", """
        blocks:
          - name: text_print
            message: "print %1"
            colour: 160
            previousStatement: null
            nextStatement: null
            args:
              - type: input_value
                name: TEXT
          - name: hello
            message: Hello
            args: []
        """)
    return root
