"""End-to-end symbolication of a crash report."""

from __future__ import annotations

import structlog

from crashlyfix.core.formatter import DEFAULT_EXCLUDED_MARKER, StackFormatter
from crashlyfix.core.processor import StackProcessor
from crashlyfix.core.resolver import PositionResolver
from crashlyfix.core.trace_input import DEFAULT_BLOCK_SEPARATOR, DEFAULT_MARKER, select_trace_block

log = structlog.get_logger()


def symbolicate(
    trace_text: str,
    resolver: PositionResolver,
    *,
    shorten: bool = True,
    marker: str = DEFAULT_MARKER,
    separator: str = DEFAULT_BLOCK_SEPARATOR,
    excluded_marker: str = DEFAULT_EXCLUDED_MARKER,
) -> str:
    """Translate the JavaScript trace of a crash report to original sources.

    Args:
        trace_text: Whole crash report text
        resolver: Resolver over the bundle's source map
        shorten: Replace the common source prefix with "./"
        marker: Substring identifying the trace block
        separator: Text separating report blocks
        excluded_marker: Substring the shortening prefix may never contain

    Returns:
        Formatted trace, without a trailing newline

    Raises:
        InputSelectionError: If no block contains the marker
        StackParseError: If the trace block has an unrecognized line
    """
    block = select_trace_block(trace_text, marker, separator)
    entries = StackProcessor(resolver).process(block.split("\n"))
    output = StackFormatter(shorten=shorten, excluded_marker=excluded_marker).format(entries)
    log.info("trace_symbolicated", frames=len(entries), shorten=shorten)
    return output
