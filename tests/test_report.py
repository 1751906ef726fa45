"""Tests for style_checker.core.report — tier selection and text layout."""

import pytest
from style_checker.core.engine import build_report
from style_checker.core.report import SEPARATOR, format_result, format_text, select_tier
from style_checker.core.types import EvaluationResult, Status
from style_checker.exercises import sass, tailwind, vanilla_css


def _results(passed: int, total: int) -> list[EvaluationResult]:
    return [EvaluationResult(n, Status.PASS if n <= passed else Status.FAIL) for n in range(1, total + 1)]


class TestSelectTier:
    def test_complete(self) -> None:
        assert select_tier(sass.exercise.messages, 9, 9) == sass.exercise.messages.complete

    @pytest.mark.parametrize(
        ('passed', 'first_line'),
        [
            (8, '🌊 Great progress! Just a few more issues to fix.'),
            (7, '⚡ Good start! Keep working on those SASS syntax issues.'),
            (5, '⚡ Good start! Keep working on those SASS syntax issues.'),
        ],
    )
    def test_sass_bands(self, passed: int, first_line: str) -> None:
        tier = select_tier(sass.exercise.messages, passed, 9)
        assert tier[0] == first_line
        assert len(tier) == 2

    def test_sass_below_bands(self) -> None:
        tier = select_tier(sass.exercise.messages, 4, 9)
        assert tier == (
            '🔧 5 issues remaining. Keep debugging!',
            '💡 Tip: Make sure you run npm run build:sass to compile your changes.',
        )

    def test_tailwind_setup_hint_below_seven(self) -> None:
        tier = select_tier(tailwind.exercise.messages, 6, 9)
        assert tier == ('🔧 3 issues remaining. Keep debugging!', '💡 Tip: Make sure you completed the SETUP section first')

    def test_tailwind_no_setup_hint_at_seven(self) -> None:
        assert select_tier(tailwind.exercise.messages, 7, 9) == ('🔧 2 issues remaining. Keep debugging!',)

    def test_vanilla_remaining(self) -> None:
        assert select_tier(vanilla_css.exercise.messages, 0, 10) == ('🔧 10 issues remaining. Keep debugging!',)

    def test_exactly_one_block(self) -> None:
        messages = sass.exercise.messages
        blocks = [messages.complete, *(band.lines for band in messages.bands)]
        for passed in range(10):
            tier = select_tier(messages, passed, 9)
            assert sum(1 for block in blocks if block == tier) <= 1


class TestFormatResult:
    check = vanilla_css.exercise.checks[0]

    def test_pass_line(self) -> None:
        lines = format_result(self.check, EvaluationResult(1, Status.PASS))
        assert lines == ['✅ Test 1: Header background color is applied']

    def test_fail_line_with_hint_and_found(self) -> None:
        lines = format_result(self.check, EvaluationResult(1, Status.FAIL, observed='transparent'))
        assert lines == [
            '❌ Test 1: Header should have green background color (hint: check CSS property spelling)',
            '   found: transparent',
        ]

    def test_fail_line_without_observed(self) -> None:
        lines = format_result(self.check, EvaluationResult(1, Status.FAIL))
        assert len(lines) == 1

    def test_fault_line(self) -> None:
        result = EvaluationResult(1, Status.FAULT, fault='Error checking header background')
        assert format_result(self.check, result) == ['❌ Test 1: Error checking header background']


class TestFormatText:
    def test_all_passing_layout(self) -> None:
        ex = vanilla_css.exercise
        text = format_text(ex, build_report(_results(10, 10), ex.messages))
        lines = text.splitlines()
        assert lines[0] == '🌱 VANILLA CSS DIAGNOSTIC TESTS'
        assert lines[1] == '=' * len(lines[0])
        assert lines[2] == ''
        assert lines[3].startswith('✅ Test 1:')
        assert lines[12].startswith('✅ Test 10:')
        assert lines[-3] == SEPARATOR
        assert lines[-2] == 'DIAGNOSTIC RESULTS: 10/10 tests passing'
        assert lines[-1] == '🎉 All diagnostic issues fixed! Move on to the qualitative section.'

    def test_results_in_check_order(self) -> None:
        ex = sass.exercise
        text = format_text(ex, build_report(_results(3, 9), ex.messages))
        numbers = [line.split(':')[0].split()[-1] for line in text.splitlines() if ' Test ' in line]
        assert numbers == [str(n) for n in range(1, 10)]
        assert 'SASS RESULTS: 3/9 tests passing' in text
