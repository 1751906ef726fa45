"""Evaluation engine: run an exercise's checks in order, one result each.

Every strategy goes through evaluate(), which returns an Outcome instead of
raising. A fault inside one check becomes a failed result with the generic
"Error checking <title>" text and the run moves on. Faults while opening the
document are not caught here: they abort the run.
"""

import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from style_checker.core.browser import open_document
from style_checker.core.env import Settings
from style_checker.core.manifest import read_manifest
from style_checker.core.palette import Colour, describe
from style_checker.core.report import format_text, select_tier
from style_checker.core.sources import SourceInspector
from style_checker.core.types import (
    Check,
    EvaluationResult,
    Exercise,
    ManifestQuery,
    Messages,
    Outcome,
    Query,
    RunReport,
    SourceQuery,
    Status,
    StyleQuery,
)

FaultHook = Callable[[Check, BaseException], None]


@dataclass(frozen=True)
class Accessors:
    """What the strategies read from. `page` is a PageAccessor or a stand-in."""

    page: Any
    sources: SourceInspector


def fetch(query: Query, accessors: Accessors) -> Any:
    """Dispatch a query to the accessor its strategy reads from."""
    if isinstance(query, StyleQuery):
        return query.read(accessors.page)
    if isinstance(query, SourceQuery):
        if query.required:
            return accessors.sources.read_text(query.path)
        return accessors.sources.read_optional(query.path)
    if isinstance(query, ManifestQuery):
        return read_manifest(accessors.sources, query.path)
    raise TypeError(f'Unknown query type: {type(query).__name__}')


def observe(state: Any) -> str | None:
    """Short rendering of a queried value for the report, when it has one."""
    if isinstance(state, Colour):
        return describe(state)
    describer = getattr(state, 'describe', None)
    if callable(describer):
        return describer()
    return None


def evaluate(check: Check, accessors: Accessors) -> Outcome:
    try:
        state = fetch(check.query, accessors)
        passed = bool(check.predicate(state))
        observed = None if passed else observe(state)
    except Exception as e:  # noqa: BLE001
        return Outcome.fault(e)
    return Outcome.of(passed, observed=observed)


def record(check: Check, outcome: Outcome) -> EvaluationResult:
    if outcome.status is Status.FAULT:
        return EvaluationResult(check.number, Status.FAULT, fault=f'Error checking {check.title}')
    return EvaluationResult(check.number, outcome.status, observed=outcome.observed)


def build_report(results: Iterable[EvaluationResult], messages: Messages) -> RunReport:
    """Fold ordered results into a report. Pure."""
    ordered = tuple(results)
    passed = sum(1 for r in ordered if r.passed)
    return RunReport(
        results=ordered,
        total=len(ordered),
        passed=passed,
        tier=select_tier(messages, passed, len(ordered)),
    )


def run(
    checks: Sequence[Check],
    accessors: Accessors,
    messages: Messages,
    on_fault: FaultHook | None = None,
) -> RunReport:
    """Evaluate checks strictly in order and fold the results."""
    results = []
    for check in checks:
        outcome = evaluate(check, accessors)
        if outcome.status is Status.FAULT and on_fault is not None and outcome.error is not None:
            on_fault(check, outcome.error)
        results.append(record(check, outcome))
    return build_report(results, messages)


def print_fault(check: Check, error: BaseException) -> None:
    print(f'style-checker: test {check.number} ({check.title}) raised {type(error).__name__}: {error}', file=sys.stderr)


def run_exercise(exercise: Exercise, directory: str | Path, settings: Settings) -> tuple[RunReport, str]:
    """Load the exercise document, run every check, format the report.

    The page is released after the report text is produced, whatever happens.
    """
    sources = SourceInspector(directory)
    hook = print_fault if settings.debug else None
    with open_document(sources.resolve(exercise.document), settings) as page:
        report = run(exercise.checks, Accessors(page=page, sources=sources), exercise.messages, on_fault=hook)
        text = format_text(exercise, report)
    return report, text
