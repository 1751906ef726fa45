"""Readers for manifest-format artifacts.

`package.json` is plain JSON. `tailwind.config.js` is JavaScript, but the
only fields the checks care about are literals, so it is regex-parsed:
  - `content: [...]` (or `content: { files: [...] }`) → list of strings
  - `key: 'value'` string fields at any depth → str
Does NOT attempt to evaluate JavaScript — regex is sufficient.
"""

import json
import re
from typing import Any

from style_checker.core.sources import SourceInspector
from style_checker.core.types import ManifestError

_CONFIG_SUFFIXES = ('.js', '.cjs', '.mjs', '.ts')

_TOKENS = re.compile(
    r'''("(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'|`[^`]*`)|/\*.*?\*/|//[^\n]*''',
    re.DOTALL,
)


def read_manifest(sources: SourceInspector, path: str) -> dict[str, Any] | None:
    """Parse a manifest artifact. None if absent, ManifestError if unreadable."""
    text = sources.read_optional(path)
    if text is None:
        return None
    if path.endswith('.json'):
        return parse_json_string(text, path)
    if path.endswith(_CONFIG_SUFFIXES):
        return parse_config_string(text)
    raise ManifestError(f'Unsupported manifest format: {path}')


def parse_json_string(text: str, path: str = '<string>') -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f'{path}: invalid JSON ({e.msg} at line {e.lineno})') from e
    if not isinstance(data, dict):
        raise ManifestError(f'{path}: expected an object at top level')
    return data


def parse_config_string(text: str) -> dict[str, Any]:
    """Extract literal fields from a JS config module."""
    body = _strip_comments(text)
    result: dict[str, Any] = {}

    for m in re.finditer(r"""\b([A-Za-z_]\w*)\s*:\s*(['"`])([^'"`]*)\2""", body):
        result.setdefault(m.group(1), m.group(3))

    content = _extract_list(body, 'content')
    if content is None:
        block = _extract_value_block(body, 'content', '{', '}')
        if block is not None:
            content = _extract_list(block, 'files')
    if content is not None:
        result['content'] = content

    return result


def lookup(data: dict[str, Any] | None, *keys: str) -> Any:
    """Nested field access that returns None instead of raising."""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def _strip_comments(text: str) -> str:
    """Drop JS comments; quoted strings (which may hold globs like `/**/`) are kept."""
    return _TOKENS.sub(lambda m: m.group(1) or '', text)


def _extract_list(text: str, key: str) -> list[str] | None:
    block = _extract_value_block(text, key, '[', ']')
    if block is None:
        return None
    return [m.group(2) for m in re.finditer(r"""(['"`])(.*?)\1""", block)]


def _extract_value_block(text: str, key: str, open_ch: str, close_ch: str) -> str | None:
    """Find `key: <open>...<close>` and return the balanced block.

    Walks forward counting brackets to find the matching close.
    """
    m = re.search(rf'\b{re.escape(key)}\s*:\s*{re.escape(open_ch)}', text)
    if not m:
        return None
    start = m.end() - 1
    depth = 0
    for i in range(start, len(text)):
        if text[i] == open_ch:
            depth += 1
        elif text[i] == close_ch:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return text[start:]
