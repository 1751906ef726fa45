"""Rendering accessor: a loaded document in a headless browser.

Wraps a Playwright sync Page with the handful of queries the checks need:
computed style values, bounding rectangles, class attributes, and a pointer
hover followed by a fixed settle wait.

open_document() is the only way to get one. It is a context manager, so the
browser is closed on every exit path, including a failed load.
"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from playwright.sync_api import Page, sync_playwright

from style_checker.core.env import Settings
from style_checker.core.palette import Colour, parse_colour

_STYLE_JS = """(el, props) => {
  const s = window.getComputedStyle(el);
  const out = {};
  for (const p of props) out[p] = s.getPropertyValue(p);
  return out;
}"""

_RECTS_JS = """els => els.map(el => {
  const r = el.getBoundingClientRect();
  return {left: r.left, right: r.right, top: r.top, width: r.width, height: r.height};
})"""

_CLASSES_JS = "els => els.map(el => el.getAttribute('class') || '')"

_PX = re.compile(r'^(-?[\d.]+)px$')


@dataclass(frozen=True)
class Rect:
    left: float
    right: float
    top: float
    width: float
    height: float


def parse_px(value: str) -> float:
    """'15px' → 15.0. Keywords ('auto', 'normal', '') count as 0."""
    m = _PX.match(value.strip())
    return float(m.group(1)) if m else 0.0


class PageAccessor:
    """Read-only queries against one rendered page."""

    def __init__(self, page: Page, settle_ms: int = 200):
        self.page = page
        self.settle_ms = settle_ms

    def count(self, selector: str) -> int:
        return self.page.locator(selector).count()

    def exists(self, selector: str) -> bool:
        return self.count(selector) > 0

    def _require(self, selector: str) -> None:
        if not self.exists(selector):
            raise LookupError(f'no element matches {selector!r}')

    def style(self, selector: str, *props: str) -> dict[str, str]:
        """Computed values of the first element matching selector."""
        self._require(selector)
        return self.page.eval_on_selector(selector, _STYLE_JS, list(props))

    def value(self, selector: str, prop: str) -> str:
        return self.style(selector, prop)[prop]

    def colour(self, selector: str, prop: str = 'background-color') -> Colour:
        return parse_colour(self.value(selector, prop))

    def length(self, selector: str, prop: str) -> float:
        return parse_px(self.value(selector, prop))

    def rects(self, selector: str) -> list[Rect]:
        raw = self.page.eval_on_selector_all(selector, _RECTS_JS)
        return [Rect(**r) for r in raw]

    def rect(self, selector: str) -> Rect:
        rects = self.rects(selector)
        if not rects:
            raise LookupError(f'no element matches {selector!r}')
        return rects[0]

    def class_names(self, selector: str) -> list[str]:
        return self.page.eval_on_selector_all(selector, _CLASSES_JS)

    def hover(self, selector: str) -> None:
        self._require(selector)
        self.page.hover(selector)

    def reset_pointer(self) -> None:
        """Move the pointer to the page origin, clearing any :hover state."""
        self.page.mouse.move(0, 0)

    def wait(self, ms: int | None = None) -> None:
        """Unconditional settle wait. Not polled."""
        self.page.wait_for_timeout(self.settle_ms if ms is None else ms)


@contextmanager
def open_document(document: Path, settings: Settings) -> Iterator[PageAccessor]:
    """Launch a browser, load document, yield an accessor, always close.

    Any failure here (missing file, browser not installed, navigation error)
    propagates: there is nothing to report without a rendered page.
    """
    if not document.is_file():
        raise FileNotFoundError(f'document not found: {document}')

    width, height = settings.viewport
    with sync_playwright() as pw:
        launcher = getattr(pw, settings.browser)
        browser = launcher.launch(headless=settings.headless)
        try:
            page = browser.new_page(viewport={'width': width, 'height': height})
            page.goto(document.resolve().as_uri(), timeout=settings.timeout_ms, wait_until='load')
            yield PageAccessor(page, settle_ms=settings.settle_ms)
        finally:
            browser.close()
