"""
Label matchers for vector selectors.

Matchers keep insertion order and are never validated here: label names,
values and regular expressions are passed through verbatim and only the
remote evaluator can reject them.  The same label may appear any number of
times.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class MatchOp(str, Enum):
    EQUAL = "="
    NOT_EQUAL = "!="
    REGEX_MATCH = "=~"
    REGEX_NOT_MATCH = "!~"


@dataclass(frozen=True)
class LabelMatcher:
    name: str
    op: MatchOp
    value: str

    def render(self) -> str:
        return f'{self.name}{self.op.value}"{self.value}"'


@dataclass
class LabelMatcherSet:
    """Ordered, append-only collection of label matchers."""

    matchers: list[LabelMatcher] = field(default_factory=list)

    def add(self, name: str, op: MatchOp, value: str) -> LabelMatcherSet:
        self.matchers.append(LabelMatcher(name, MatchOp(op), value))
        return self

    def render(self) -> str:
        """Comma-joined matcher text without the surrounding braces."""
        return ",".join(m.render() for m in self.matchers)

    def __iter__(self) -> Iterator[LabelMatcher]:
        return iter(self.matchers)

    def __len__(self) -> int:
        return len(self.matchers)
