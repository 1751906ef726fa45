"""Shared types for style-checker: Check, queries, Outcome, results, Exercise."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar


class ArtifactMissing(FileNotFoundError):
    """A named source artifact does not exist in the exercise directory."""


class ManifestError(ValueError):
    """A manifest artifact exists but could not be parsed."""


class Strategy(Enum):
    COMPUTED_STYLE = 'computed-style'
    SOURCE_TEXT = 'source-text'
    STRUCTURED_ARTIFACT = 'structured-artifact'


@dataclass(frozen=True)
class StyleQuery:
    """Read computed presentation state from the rendered page.

    `read` receives the page accessor and returns whatever the predicate
    needs: a parsed colour, a length, a list of rects, class names...
    """

    read: Callable[[Any], Any]
    strategy: ClassVar[Strategy] = Strategy.COMPUTED_STYLE


@dataclass(frozen=True)
class SourceQuery:
    """Read the raw text of an artifact.

    A required artifact that is absent is a fault. An optional one is
    handed to the predicate as None.
    """

    path: str
    required: bool = True
    strategy: ClassVar[Strategy] = Strategy.SOURCE_TEXT


@dataclass(frozen=True)
class ManifestQuery:
    """Parse a manifest-format artifact (None when absent)."""

    path: str
    strategy: ClassVar[Strategy] = Strategy.STRUCTURED_ARTIFACT


Query = StyleQuery | SourceQuery | ManifestQuery


@dataclass(frozen=True)
class Check:
    """One registered diagnostic.

    `number` is assigned from the check's position when the owning
    Exercise is built; definitions leave it at 0.
    """

    title: str
    query: Query
    predicate: Callable[[Any], bool]
    failure: str
    hint: str
    success: str
    number: int = 0

    @property
    def strategy(self) -> Strategy:
        return self.query.strategy


class Status(Enum):
    PASS = 'pass'
    FAIL = 'fail'
    FAULT = 'fault'


@dataclass(frozen=True)
class Outcome:
    """What a strategy returns for one check. Never raised, always returned."""

    status: Status
    observed: str | None = None
    error: BaseException | None = None

    @classmethod
    def of(cls, passed: bool, observed: str | None = None) -> Outcome:
        return cls(Status.PASS if passed else Status.FAIL, observed=observed)

    @classmethod
    def fault(cls, error: BaseException) -> Outcome:
        return cls(Status.FAULT, error=error)


@dataclass(frozen=True)
class EvaluationResult:
    number: int
    status: Status
    fault: str | None = None  # generic "Error checking ..." text
    observed: str | None = None  # short rendering of the queried value, e.g. 'transparent'

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS


@dataclass(frozen=True)
class Tier:
    """A ratio band: selected when passed/total >= min_ratio."""

    min_ratio: float
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Messages:
    """Closing messages for an exercise, chosen by pass ratio."""

    complete: tuple[str, ...]
    bands: tuple[Tier, ...] = ()
    remaining: str = '🔧 {remaining} issues remaining. Keep debugging!'
    setup_hint: str | None = None
    setup_hint_below: float = 1.0  # setup_hint shows when ratio < this


@dataclass(frozen=True)
class RunReport:
    results: tuple[EvaluationResult, ...]
    total: int
    passed: int
    tier: tuple[str, ...] = ()

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ratio(self) -> float:
        return self.passed / self.total if self.total else 1.0


@dataclass(frozen=True)
class Exercise:
    """A self-registering exercise: its document, ordered checks and messages.

    Usage in an exercise module:

        exercise = Exercise(
            name='sass',
            banner='🟡 SASS DIAGNOSTIC TESTS',
            results_label='SASS RESULTS',
            checks=(Check(...), Check(...)),
            messages=Messages(complete=('🎉 ...',)),
        )
    """

    name: str
    banner: str
    results_label: str
    checks: tuple[Check, ...]
    messages: Messages
    document: str = 'index.html'
    help: str = ''  # one-line description for `list` and subcommand help

    def __post_init__(self) -> None:
        if not self.checks:
            raise ValueError(f'Exercise {self.name} has no checks')
        numbered = tuple(replace(check, number=i) for i, check in enumerate(self.checks, start=1))
        object.__setattr__(self, 'checks', numbered)
