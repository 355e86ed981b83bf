"""Data models for JavaScript stack traces and their resolved frames."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """A stack line recognized by the matcher, in generated coordinates."""

    name: str | None
    line: int
    column: int
    file: str | None = None  # generated path, when the line names one


@dataclass(frozen=True)
class OriginalPosition:
    """Result of a source map lookup. All fields are None when unmapped."""

    source: str | None = None
    line: int | None = None
    column: int | None = None
    name: str | None = None

    @property
    def is_mapped(self) -> bool:
        """Check if the lookup found an original source."""
        return self.source is not None


@dataclass(frozen=True)
class PassthroughEntry:
    """A trace line kept verbatim, e.g. the exception header."""

    text: str


@dataclass(frozen=True)
class ResolvedFrame:
    """A stack frame translated back to its original location."""

    source: str | None
    line: int | None
    column: int | None
    name: str | None
    raw: str = ""  # trace line the frame was parsed from

    @classmethod
    def from_position(cls, position: OriginalPosition, raw: str) -> "ResolvedFrame":
        """Build a frame from a source map lookup result."""
        return cls(
            source=position.source,
            line=position.line,
            column=position.column,
            name=position.name,
            raw=raw,
        )

    @property
    def is_mapped(self) -> bool:
        """Check if this frame points into an original source file."""
        return self.source is not None


StackEntry = PassthroughEntry | ResolvedFrame
