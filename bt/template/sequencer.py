"""
Element sequencer.

Trailing label text must end up on some input, so a message ending in literal
text gets an implicit dummy input appended.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .descriptors import Align, DummyInputDesc
from .resolver import Element

logger = logging.getLogger(__name__)


def sequence_elements(elements: Sequence[Element], last_dummy_align: Optional[Align] = None) -> List[Element]:
    """
    Returns the final element sequence.

    Args:
        elements: Resolved elements in message order
        last_dummy_align: Alignment for the synthesized trailing dummy input

    Returns:
        New list; the input sequence is left untouched
    """
    result = list(elements)
    if result and isinstance(result[-1], str):
        logger.debug("Message ends with text %r, appending dummy input", result[-1])
        result.append(DummyInputDesc(align=last_dummy_align))
    return result


__all__ = ["sequence_elements"]
