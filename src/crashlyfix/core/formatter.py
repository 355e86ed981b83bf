"""Formatter for resolved stack traces.

Renders entries in the familiar V8 ``at name (file:line:column)`` shape. By
default source paths are shortened: the prefix shared by every resolved
source is replaced with ``./`` so that deep project paths stay readable.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

import structlog

from crashlyfix.models.stack import PassthroughEntry, ResolvedFrame, StackEntry

log = structlog.get_logger()

DEFAULT_EXCLUDED_MARKER = "node_modules"


def common_source_prefix(
    sources: Sequence[str],
    excluded_marker: str = DEFAULT_EXCLUDED_MARKER,
) -> str:
    """Compute the prefix to strip from displayed source paths.

    The prefix is the longest literal prefix shared by all sources, cut
    back until it no longer contains ``excluded_marker`` so that it lands
    above any dependency directory.

    Args:
        sources: Resolved source paths, in trace order
        excluded_marker: Substring the prefix may never contain

    Returns:
        The prefix, or "" when there is nothing worth stripping
    """
    if len(sources) < 2:
        return ""

    prefix = os.path.commonprefix(list(sources))
    if excluded_marker:
        while excluded_marker in prefix:
            prefix = prefix[:-1]

    # A prefix equal to a whole path means there is a single distinct source
    if prefix == sources[0]:
        return ""
    return prefix


class StackFormatter:
    """Renders stack entries to text.

    Unmapped frames have no original location to show, so they fall back
    to the trace line they came from.

    Example:
        formatter = StackFormatter(shorten=True)
        print(formatter.format(entries))
    """

    INDENT = "  "

    def __init__(
        self,
        shorten: bool = True,
        excluded_marker: str = DEFAULT_EXCLUDED_MARKER,
    ) -> None:
        self.shorten = shorten
        self.excluded_marker = excluded_marker

    def compute_prefix(self, entries: Sequence[StackEntry]) -> str:
        """Get the source prefix for these entries ("" when not shortening)."""
        if not self.shorten:
            return ""

        sources = [
            entry.source
            for entry in entries
            if isinstance(entry, ResolvedFrame) and entry.source is not None
        ]
        prefix = common_source_prefix(sources, self.excluded_marker)
        if prefix:
            log.debug("source_prefix_computed", prefix=prefix, sources=len(sources))
        return prefix

    def format(self, entries: Sequence[StackEntry]) -> str:
        """Render all entries, one per line, without a trailing newline."""
        prefix = self.compute_prefix(entries)
        return "\n".join(self.format_entry(entry, prefix) for entry in entries)

    def format_entry(self, entry: StackEntry, prefix: str = "") -> str:
        """Render a single entry.

        Args:
            entry: Passthrough or resolved entry
            prefix: Source prefix to replace with "./"

        Returns:
            Display line for the entry
        """
        if isinstance(entry, PassthroughEntry):
            return entry.text

        if not entry.is_mapped:
            return f"{self.INDENT}{entry.raw}"

        source = self.display_source(entry.source or "", prefix)
        if entry.name:
            return f"{self.INDENT}at {entry.name} ({source}:{entry.line}:{entry.column})"
        return f"{self.INDENT}at {source}:{entry.line}:{entry.column}"

    @staticmethod
    def display_source(source: str, prefix: str) -> str:
        """Shorten a source path by replacing the prefix with "./"."""
        if prefix and source.startswith(prefix):
            return "./" + source[len(prefix) :]
        return source
