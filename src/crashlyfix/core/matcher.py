"""Matcher for JavaScript stack frame lines.

Engines print frames in a handful of shapes. Three are recognized, tried in
a fixed order where the first hit wins:

- ``someFun@13:12`` (JavaScriptCore / Hermes style)
- ``at filename:13:12`` (anonymous V8 frame)
- ``at someFun (filename:13:12)`` (named V8 frame)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from crashlyfix.models.stack import MatchResult


@dataclass(frozen=True)
class _LineRule:
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], MatchResult]


def _symbol_at_position(match: re.Match[str]) -> MatchResult:
    return MatchResult(
        name=match.group(1) or None,
        line=int(match.group(2)),
        column=int(match.group(3)),
    )


def _anonymous_frame(match: re.Match[str]) -> MatchResult:
    # The captured text is the generated file, never a symbol
    return MatchResult(
        name=None,
        line=int(match.group(2)),
        column=int(match.group(3)),
        file=match.group(1),
    )


def _named_frame(match: re.Match[str]) -> MatchResult:
    return MatchResult(
        name=match.group(1) or None,
        line=int(match.group(3)),
        column=int(match.group(4)),
        file=match.group(2),
    )


class StackLineMatcher:
    """Recognizes a single stack frame line.

    Example:
        matcher = StackLineMatcher()
        result = matcher.match("at render (main.jsbundle:1:2048)")
        # MatchResult(name="render", line=1, column=2048, file="main.jsbundle")
    """

    RULES: tuple[_LineRule, ...] = (
        _LineRule(re.compile(r"^(.*)@(\d+):(\d+)$", re.ASCII), _symbol_at_position),
        _LineRule(re.compile(r"^at (.*):(\d+):(\d+)$", re.ASCII), _anonymous_frame),
        _LineRule(re.compile(r"^at (.*) \((.*):(\d+):(\d+)\)$", re.ASCII), _named_frame),
    )

    def match(self, line: str) -> MatchResult | None:
        """Match a line against the known frame formats.

        Args:
            line: A single line of trace text

        Returns:
            MatchResult for the first rule that matches, or None
        """
        for rule in self.RULES:
            found = rule.pattern.match(line)
            if found:
                return rule.extract(found)
        return None
