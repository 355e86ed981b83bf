"""Core symbolication components.

- PositionResolver: looks up original positions in a source map
- StackLineMatcher: recognizes stack frame lines
- StackProcessor: parses and resolves a trace block
- StackFormatter: renders resolved entries
- symbolicate: runs the whole pipeline on a crash report
"""

from crashlyfix.core.formatter import StackFormatter, common_source_prefix
from crashlyfix.core.matcher import StackLineMatcher
from crashlyfix.core.pipeline import symbolicate
from crashlyfix.core.processor import ProcessorState, StackProcessor, process_stack
from crashlyfix.core.resolver import PositionResolver
from crashlyfix.core.trace_input import select_trace_block

__all__ = [
    "PositionResolver",
    "ProcessorState",
    "StackFormatter",
    "StackLineMatcher",
    "StackProcessor",
    "common_source_prefix",
    "process_stack",
    "select_trace_block",
    "symbolicate",
]
