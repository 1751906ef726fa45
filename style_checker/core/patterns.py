"""Declarative text predicates for source-artifact checks.

Each pattern is a small frozen value with a `matches(text)` method, so a
check reads as data:

    AllOf(Contains('$primary-yellow:'), NotContains('-primary-yellow:'))

`text` may be None when an optional artifact is absent. Only Exists and
NotContains say anything useful about absence: Contains, LongerThan and
MaxDepth all fail on None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


class Pattern:
    def matches(self, text: str | None) -> bool:
        raise NotImplementedError

    def __call__(self, text: str | None) -> bool:
        return self.matches(text)


@dataclass(frozen=True)
class Exists(Pattern):
    def matches(self, text: str | None) -> bool:
        return text is not None


@dataclass(frozen=True)
class Contains(Pattern):
    needle: str

    def matches(self, text: str | None) -> bool:
        return text is not None and self.needle in text


@dataclass(frozen=True)
class NotContains(Pattern):
    needle: str

    def matches(self, text: str | None) -> bool:
        return text is None or self.needle not in text


@dataclass(frozen=True)
class LongerThan(Pattern):
    length: int

    def matches(self, text: str | None) -> bool:
        return text is not None and len(text) > self.length


@dataclass(frozen=True)
class MaxDepth(Pattern):
    """Brace nesting never goes deeper than `depth` levels.

    Comments and quoted strings are stripped first so a `{` inside them
    does not count. Interpolation (`#{$x}`) opens and closes on the same
    token and is removed as well.
    """

    depth: int

    def matches(self, text: str | None) -> bool:
        if text is None:
            return False
        return nesting_depth(text) <= self.depth


class AllOf(Pattern):
    def __init__(self, *patterns: Pattern):
        self.patterns = patterns

    def matches(self, text: str | None) -> bool:
        return all(p.matches(text) for p in self.patterns)

    def __repr__(self) -> str:
        return f'AllOf{self.patterns!r}'


class AnyOf(Pattern):
    def __init__(self, *patterns: Pattern):
        self.patterns = patterns

    def matches(self, text: str | None) -> bool:
        return any(p.matches(text) for p in self.patterns)

    def __repr__(self) -> str:
        return f'AnyOf{self.patterns!r}'


def none_of(*needles: str) -> AllOf:
    """Shorthand: the text contains none of the given substrings."""
    return AllOf(*(NotContains(n) for n in needles))


_STRIP = re.compile(
    r'/\*.*?\*/'  # block comments
    r'|//[^\n]*'  # line comments (scss)
    r'|"(?:\\.|[^"\\])*"'
    r"|'(?:\\.|[^'\\])*'"
    r'|#\{[^}]*\}',
    re.DOTALL,
)


def nesting_depth(text: str) -> int:
    """Deepest `{` nesting level in a stylesheet."""
    cleaned = _STRIP.sub('', text)
    depth = deepest = 0
    for ch in cleaned:
        if ch == '{':
            depth += 1
            deepest = max(deepest, depth)
        elif ch == '}':
            depth = max(depth - 1, 0)
    return deepest
