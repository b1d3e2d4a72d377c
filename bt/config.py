from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ruamel.yaml import YAML

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "bt_config.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    # what to do with fields that end the message without a following input
    "dangling_fields": "warn",
    "spec_extensions": [".json", ".yaml", ".yml"],
}

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


class DanglingPolicy(str, enum.Enum):
    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class BtConfig:
    dangling_fields: DanglingPolicy = DanglingPolicy.WARN
    spec_extensions: Tuple[str, ...] = field(default_factory=lambda: (".json", ".yaml", ".yml"))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BtConfig":
        """Builds a config from a merged raw mapping."""
        policy = data.get("dangling_fields", DanglingPolicy.WARN.value)
        try:
            dangling = DanglingPolicy(policy)
        except ValueError:
            allowed = ", ".join(p.value for p in DanglingPolicy)
            raise ValueError(f"Invalid dangling_fields policy {policy!r} (expected one of: {allowed})")

        exts = data.get("spec_extensions", _DEFAULT_CFG["spec_extensions"])
        if isinstance(exts, str) or not all(isinstance(e, str) for e in exts):
            raise ValueError(f"spec_extensions must be a list of strings, got {exts!r}")

        return cls(
            dangling_fields=dangling,
            spec_extensions=tuple(e if e.startswith(".") else f".{e}" for e in exts),
        )


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of the defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Optional[Path] = None) -> BtConfig:
    """
    Load bt_config.yaml.

    • Missing file (or no path) → defaults.
    • Missing schema_version → assume the current one.
    • Incompatible schema_version → RuntimeError.
    """
    if path is None or not path.exists():
        return BtConfig.from_dict(_DEFAULT_CFG.copy())

    with path.open(encoding="utf-8") as f:
        raw = _yaml.load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping: {path}")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise RuntimeError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    return BtConfig.from_dict(_merge_defaults(raw))


__all__ = ["SCHEMA_VERSION", "DEFAULT_CFG_FILE", "DanglingPolicy", "BtConfig", "load_config"]
