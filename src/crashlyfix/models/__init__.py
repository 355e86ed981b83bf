"""Data models and transfer objects."""

from .stack import MatchResult, OriginalPosition, PassthroughEntry, ResolvedFrame, StackEntry

__all__ = [
    "MatchResult",
    "OriginalPosition",
    "PassthroughEntry",
    "ResolvedFrame",
    "StackEntry",
]
