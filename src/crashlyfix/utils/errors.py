"""Exception hierarchy for crashlyfix.

Every failure in the pipeline is fatal: nothing is retried and no partial
output is produced. The CLI catches ``CrashlyfixError`` at the top level and
turns it into a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class CrashlyfixError(Exception):
    """Base exception for all crashlyfix errors."""


class MapLoadError(CrashlyfixError):
    """Source map content is unreadable or malformed.

    Attributes:
        path: Path the map was loaded from, if it came from a file.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class InputSelectionError(CrashlyfixError):
    """No block of the stack trace file carries the required marker.

    Attributes:
        marker: The marker substring that was searched for.
    """

    def __init__(self, marker: str) -> None:
        super().__init__(f"No stack trace block contains marker {marker!r}")
        self.marker = marker


class StackParseError(CrashlyfixError):
    """A stack line is neither a known frame, the header, nor blank.

    Attributes:
        line_number: 1-based line number within the trace block.
        text: The offending line.
    """

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(f"Stack trace parse error at line {line_number}: {text}")
        self.line_number = line_number
        self.text = text
