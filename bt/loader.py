"""
Loading block specifications from JSON/YAML files.

Accepted file shapes:
- a single specification mapping;
- a list of specification mappings;
- a mapping with a `blocks:` list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import BTUserError

logger = logging.getLogger(__name__)

# JSON is a subset of YAML, one loader serves both
_yaml = YAML(typ="safe")


class SpecFileError(BTUserError):
    """Raised when a specification file cannot be read or has a wrong shape."""
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load block specifications from {path}: {reason}")


def load_spec_file(path: Path) -> List[Dict[str, Any]]:
    """
    Reads one specification file.

    Returns:
        Raw specification mappings in file order

    Raises:
        SpecFileError: Unreadable file, invalid YAML/JSON or unexpected shape
    """
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SpecFileError(path, str(e))
    except YAMLError as e:
        raise SpecFileError(path, f"invalid YAML/JSON: {e}")

    if raw is None:
        return []
    if isinstance(raw, dict) and "blocks" in raw:
        raw = raw["blocks"]
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        raise SpecFileError(path, f"expected a mapping or a list, got {type(raw).__name__}")

    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise SpecFileError(path, f"entry #{i} is {type(item).__name__}, expected a mapping")

    logger.debug("Loaded %d specification(s) from %s", len(raw), path)
    return raw


def iter_spec_files(root: Path, extensions: Sequence[str]) -> Iterator[Path]:
    """
    Yields specification files: root itself if it is a file,
    otherwise matching files under root in sorted order.
    """
    if root.is_file():
        yield root
        return
    if not root.is_dir():
        raise SpecFileError(root, "no such file or directory")
    exts = {e.lower() for e in extensions}
    for p in sorted(root.rglob("*")):
        if p.is_file() and p.suffix.lower() in exts:
            yield p


def load_specs(paths: Iterable[Path], extensions: Sequence[str]) -> List[Tuple[Path, Dict[str, Any]]]:
    """Loads all specifications found under the given paths, tagged with their source file."""
    out: List[Tuple[Path, Dict[str, Any]]] = []
    for root in paths:
        for file in iter_spec_files(root, extensions):
            out.extend((file, raw) for raw in load_spec_file(file))
    return out


__all__ = ["SpecFileError", "load_spec_file", "iter_spec_files", "load_specs"]
