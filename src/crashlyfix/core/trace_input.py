"""Selection of the JavaScript trace inside a crash report.

Crash reports carry several message blocks separated by blank lines (native
threads, device info, ...). Only the block with the JavaScript exception is
symbolicated.
"""

from __future__ import annotations

import structlog

from crashlyfix.utils.errors import InputSelectionError

log = structlog.get_logger()

DEFAULT_MARKER = "JavascriptException"
DEFAULT_BLOCK_SEPARATOR = "\n\n"


def select_trace_block(
    text: str,
    marker: str = DEFAULT_MARKER,
    separator: str = DEFAULT_BLOCK_SEPARATOR,
) -> str:
    """Pick the first block of a crash report that contains the marker.

    Args:
        text: Whole crash report
        marker: Substring identifying the JavaScript trace block
        separator: Text separating blocks

    Returns:
        The selected block

    Raises:
        InputSelectionError: If no block contains the marker
    """
    blocks = text.split(separator)
    for index, block in enumerate(blocks):
        if marker in block:
            log.debug("trace_block_selected", block=index, blocks=len(blocks))
            return block
    raise InputSelectionError(marker)
