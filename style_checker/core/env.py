"""Environment configuration for style-checker.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file found walking up from the exercise directory, stopping at
     the first .git (file or dir) so nothing outside the repo is read.

Recognised variables:
  STYLE_CHECKER_BROWSER     chromium (default) | firefox | webkit
  STYLE_CHECKER_HEADLESS    1/0, true/false (default true)
  STYLE_CHECKER_SETTLE_MS   hover settle wait in ms (default 200)
  STYLE_CHECKER_TIMEOUT_MS  document load timeout in ms (default 30000)
  STYLE_CHECKER_VIEWPORT    WIDTHxHEIGHT (default 1280x800)
  STYLE_CHECKER_DEBUG       print the exception behind every fault to stderr
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PREFIX = 'STYLE_CHECKER_'
BROWSERS = ('chromium', 'firefox', 'webkit')

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start; None once a .git boundary is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines. Accepts `export KEY=...`, quotes, trailing ` # comments`."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip()
        if value[:1] in ('"', "'") and value[-1:] == value[:1] and len(value) >= 2:
            value = value[1:-1]
        elif ' #' in value:
            value = value.split(' #', 1)[0].rstrip()
        if key:
            values[key] = value
    return values


def load_env(start: str | Path | None = None) -> Path | None:
    """Apply the nearest .env to os.environ without overriding set keys.

    Returns the file that was applied, or None.
    """
    path = find_dotenv(Path(start) if start is not None else Path.cwd())
    if path is None:
        return None
    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _flag(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f'{name} must be a boolean, got {raw!r}')


def _millis(raw: str, name: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer number of milliseconds, got {raw!r}') from None
    if value < 0:
        raise ValueError(f'{name} must not be negative')
    return value


def _viewport(raw: str, name: str) -> tuple[int, int]:
    width, sep, height = raw.lower().partition('x')
    if not sep or not width.strip().isdigit() or not height.strip().isdigit():
        raise ValueError(f'{name} must look like 1280x800, got {raw!r}')
    return (int(width), int(height))


@dataclass(frozen=True)
class Settings:
    browser: str = 'chromium'
    headless: bool = True
    settle_ms: int = 200
    timeout_ms: int = 30000
    viewport: tuple[int, int] = (1280, 800)
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str) -> tuple[str | None, str]:
            key = PREFIX + name
            return env.get(key), key

        browser, key = get('BROWSER')
        browser = (browser or defaults.browser).strip().lower()
        if browser not in BROWSERS:
            raise ValueError(f'{key} must be one of {", ".join(BROWSERS)}, got {browser!r}')

        raw, key = get('HEADLESS')
        headless = defaults.headless if raw is None else _flag(raw, key)
        raw, key = get('SETTLE_MS')
        settle_ms = defaults.settle_ms if raw is None else _millis(raw, key)
        raw, key = get('TIMEOUT_MS')
        timeout_ms = defaults.timeout_ms if raw is None else _millis(raw, key)
        raw, key = get('VIEWPORT')
        viewport = defaults.viewport if raw is None else _viewport(raw, key)
        raw, key = get('DEBUG')
        debug = defaults.debug if raw is None else _flag(raw, key)

        return cls(
            browser=browser,
            headless=headless,
            settle_ms=settle_ms,
            timeout_ms=timeout_ms,
            viewport=viewport,
            debug=debug,
        )
