"""
Unified test infrastructure for Block Templater.

Modules:
- file_utils: Utilities for creating specification and config files
- block_context: Recording block context for initializer tests
- cli_utils: Running the CLI in a subprocess
- spec_builders: Small builders for raw block specifications
"""

from .file_utils import write, write_json, write_yaml
from .block_context import RecordingBlock, RecordingInput
from .cli_utils import run_cli, jload
from .spec_builders import block, value_input, statement_input, dummy_input, field

__all__ = [
    # File utilities
    "write", "write_json", "write_yaml",

    # Block context
    "RecordingBlock", "RecordingInput",

    # CLI utilities
    "run_cli", "jload",

    # Spec builders
    "block", "value_input", "statement_input", "dummy_input", "field",
]
