"""Report builder — the line-oriented text report for one exercise run."""

from style_checker.core.types import Check, EvaluationResult, Exercise, Messages, RunReport, Status

PASS_MARK = '✅'
FAIL_MARK = '❌'
SEPARATOR = '=' * 40


def select_tier(messages: Messages, passed: int, total: int) -> tuple[str, ...]:
    """Pick exactly one closing message block by pass ratio."""
    if passed >= total:
        return messages.complete

    ratio = passed / total
    for band in messages.bands:
        if ratio >= band.min_ratio:
            return band.lines

    lines = [messages.remaining.format(remaining=total - passed)]
    if messages.setup_hint and ratio < messages.setup_hint_below:
        lines.append(messages.setup_hint)
    return tuple(lines)


def format_result(check: Check, result: EvaluationResult) -> list[str]:
    if result.status is Status.FAULT:
        return [f'{FAIL_MARK} Test {check.number}: {result.fault}']
    if result.passed:
        return [f'{PASS_MARK} Test {check.number}: {check.success}']
    lines = [f'{FAIL_MARK} Test {check.number}: {check.failure} (hint: {check.hint})']
    if result.observed:
        lines.append(f'   found: {result.observed}')
    return lines


def format_text(exercise: Exercise, report: RunReport) -> str:
    """Format report as human-readable text."""
    lines = [exercise.banner, '=' * len(exercise.banner), '']

    checks = {c.number: c for c in exercise.checks}
    for result in report.results:
        lines.extend(format_result(checks[result.number], result))

    lines.append('')
    lines.append(SEPARATOR)
    lines.append(f'{exercise.results_label}: {report.passed}/{report.total} tests passing')
    lines.extend(report.tier)
    return '\n'.join(lines)
