"""crashlyfix: translate minified JavaScript stack traces back to original sources."""

from crashlyfix.core import (
    PositionResolver,
    StackFormatter,
    StackLineMatcher,
    StackProcessor,
    symbolicate,
)

__all__ = [
    "PositionResolver",
    "StackFormatter",
    "StackLineMatcher",
    "StackProcessor",
    "symbolicate",
]
