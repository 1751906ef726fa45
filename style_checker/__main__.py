"""style-checker — diagnostic tests for styling exercises.

Usage: uv run style-checker <exercise> [exercise_dir]

Exercises are auto-discovered from style_checker/exercises/.
Each exercise's `help` is its one-line summary; its module docstring is the full documentation.
Run `style-checker help <exercise>` for full module docs.

The report goes to stdout. The process exits 0 however many checks fail;
only a run that cannot start (document missing, browser not installed)
ends with an error.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, style-checker looks for a .env file starting
  from the exercise directory and walking up, stopping at the nearest .git
  boundary. See style_checker.core.env for the recognised variables.
"""

import argparse
import sys
from pathlib import Path

from style_checker import registry
from style_checker.core.engine import run_exercise
from style_checker.core.env import Settings, load_env


def _short_doc(name: str) -> str:
    """One-line description: the exercise's `help`, else its module docstring's first line."""
    exercise = registry.get(name)
    if exercise.help:
        return exercise.help
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else ''


def _build_parser() -> argparse.ArgumentParser:
    exercises = registry.all_exercises()

    parser = argparse.ArgumentParser(
        prog='style-checker',
        description='Diagnostic tests for styling exercises.',
        epilog=(
            'Examples:\n'
            '  style-checker vanilla-css ./01-vanilla-css\n'
            '  style-checker tailwind\n'
            '  style-checker help sass\n'
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='exercise', help='Exercise to check')

    for name in sorted(exercises):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('exercise_dir', nargs='?', default='.', help='Exercise directory (default: cwd)')

    sub.add_parser('list', help='List available exercises')
    help_parser = sub.add_parser('help', help='Print full docs for an exercise')
    help_parser.add_argument('command', nargs='?', help='Exercise name')

    return parser


def _print_list() -> None:
    for name, ex in sorted(registry.all_exercises().items()):
        print(f'  {name:<14} {len(ex.checks):>2} checks  {_short_doc(name)}')


def _print_help(command: str | None) -> None:
    if command is None:
        print('Available exercises:\n')
        _print_list()
        print('\nRun: style-checker help <exercise> for full docs.')
        return

    if command not in registry.all_exercises():
        print(f'Unknown exercise: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(registry.all_exercises()))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(command).__doc__ or '').strip()
    print(doc or f'(No module docs for {command!r})')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if not args.exercise:
        parser.print_help()
        sys.exit(1)

    if args.exercise == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if args.exercise == 'list':
        _print_list()
        return

    directory = Path(args.exercise_dir)
    if not directory.is_dir():
        print(f'Error: exercise directory not found: {directory}', file=sys.stderr)
        sys.exit(1)

    env_path = load_env(directory)
    if env_path:
        print(f'style-checker: loaded {env_path}', file=sys.stderr)
    settings = Settings.from_env()

    exercise = registry.get(args.exercise)
    _report, text = run_exercise(exercise, directory, settings)
    print(text)


if __name__ == '__main__':
    main()
