"""Stack processor: turns raw trace lines into resolved entries.

Parsing is a small state machine:

- ``AWAITING_HEADER_OR_FRAME``: the first line. If it is not a frame it is
  kept verbatim as the exception message.
- ``IN_FRAMES``: every line must be a frame. A blank line ends the trace,
  anything else is a parse error.
- ``DONE``: remaining lines are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import structlog

from crashlyfix.core.matcher import StackLineMatcher
from crashlyfix.core.resolver import PositionResolver
from crashlyfix.models.stack import PassthroughEntry, ResolvedFrame, StackEntry
from crashlyfix.utils.errors import StackParseError

log = structlog.get_logger()


class ProcessorState(Enum):
    """Parsing states of the stack processor."""

    AWAITING_HEADER_OR_FRAME = "awaiting_header_or_frame"
    IN_FRAMES = "in_frames"
    DONE = "done"


class StackProcessor:
    """Parses and resolves a block of stack trace lines.

    Example:
        processor = StackProcessor(resolver)
        entries = processor.process(block.split("\\n"))
    """

    def __init__(
        self,
        resolver: PositionResolver,
        matcher: StackLineMatcher | None = None,
    ) -> None:
        self._resolver = resolver
        self._matcher = matcher or StackLineMatcher()

    def process(self, lines: Sequence[str]) -> list[StackEntry]:
        """Parse and resolve every line of a trace block.

        Args:
            lines: Trace lines in order, the first one possibly a message

        Returns:
            Entries in trace order

        Raises:
            StackParseError: If a line after the first is not a frame and not blank
        """
        entries: list[StackEntry] = []
        state = ProcessorState.AWAITING_HEADER_OR_FRAME

        for index, line in enumerate(lines):
            state = self._step(state, index, line, entries)
            if state is ProcessorState.DONE:
                log.debug("stack_terminated", line_number=index + 1, skipped=len(lines) - index - 1)
                break

        log.debug("stack_processed", entries=len(entries))
        return entries

    def _step(
        self,
        state: ProcessorState,
        index: int,
        line: str,
        entries: list[StackEntry],
    ) -> ProcessorState:
        """Consume one line and return the next state."""
        match = self._matcher.match(line)

        if match is not None:
            position = self._resolver.resolve(match.name, match.line, match.column)
            entries.append(ResolvedFrame.from_position(position, raw=line))
            return ProcessorState.IN_FRAMES

        if state is ProcessorState.AWAITING_HEADER_OR_FRAME:
            entries.append(PassthroughEntry(text=line))
            return ProcessorState.IN_FRAMES

        if not line:
            return ProcessorState.DONE

        log.debug("stack_line_unmatched", line_number=index + 1, text=line)
        raise StackParseError(index + 1, line)


def process_stack(lines: Sequence[str], resolver: PositionResolver) -> list[StackEntry]:
    """Parse and resolve trace lines with the default matcher."""
    return StackProcessor(resolver).process(lines)
