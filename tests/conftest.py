"""Shared test helpers: an in-memory stand-in for the rendered page."""

from pathlib import Path

import pytest
from style_checker.core.browser import Rect, parse_px
from style_checker.core.palette import parse_colour

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


class FakePage:
    """Mimics PageAccessor from plain dicts.

    styles:  selector -> {property: computed value}
    hover:   selector -> {property: value} applied once hovered AND settled
    rects:   selector -> [Rect, ...]
    classes: selector -> [class attribute, ...]
    """

    def __init__(
        self,
        styles: dict | None = None,
        hover: dict | None = None,
        rects: dict | None = None,
        classes: dict | None = None,
    ):
        self.styles = styles or {}
        self.hover_styles = hover or {}
        self._rects = rects or {}
        self.classes = classes or {}
        self.settle_ms = 0
        self.hovered: str | None = None
        self.settled = False
        self.calls: list[str] = []

    def count(self, selector: str) -> int:
        if selector in self._rects:
            return len(self._rects[selector])
        if selector in self.classes:
            return len(self.classes[selector])
        return 1 if selector in self.styles else 0

    def exists(self, selector: str) -> bool:
        return self.count(selector) > 0

    def value(self, selector: str, prop: str) -> str:
        if selector not in self.styles:
            raise LookupError(f'no element matches {selector!r}')
        if self.hovered == selector and self.settled and prop in self.hover_styles.get(selector, {}):
            return self.hover_styles[selector][prop]
        return self.styles[selector][prop]

    def style(self, selector: str, *props: str) -> dict[str, str]:
        return {p: self.value(selector, p) for p in props}

    def colour(self, selector: str, prop: str = 'background-color'):
        return parse_colour(self.value(selector, prop))

    def length(self, selector: str, prop: str) -> float:
        return parse_px(self.value(selector, prop))

    def rects(self, selector: str) -> list[Rect]:
        return list(self._rects.get(selector, []))

    def rect(self, selector: str) -> Rect:
        rects = self.rects(selector)
        if not rects:
            raise LookupError(f'no element matches {selector!r}')
        return rects[0]

    def class_names(self, selector: str) -> list[str]:
        return list(self.classes.get(selector, []))

    def hover(self, selector: str) -> None:
        self.calls.append(f'hover {selector}')
        self.hovered = selector
        self.settled = False

    def wait(self, ms: int | None = None) -> None:
        self.calls.append('wait')
        if self.hovered is not None:
            self.settled = True

    def reset_pointer(self) -> None:
        self.calls.append('reset')
        self.hovered = None
        self.settled = False


@pytest.fixture
def make_page():
    return FakePage


_DEFAULT = object()


def garden_page(styles: dict | None = None, hover=_DEFAULT, rects: dict | None = None) -> FakePage:
    """A vanilla-css page with every defect fixed. Pass selectors to break one."""
    base = {
        '.main-header': {'background-color': 'rgb(47, 133, 90)', 'padding-top': '20px'},
        '.main-nav': {'justify-content': 'space-between'},
        '.main-nav a': {'padding-top': '8px', 'padding-left': '12px'},
        '.crop-card': {'margin-top': '15px', 'margin-right': '15px', 'margin-bottom': '15px', 'margin-left': '15px'},
        '.harvest-btn': {'background-color': 'rgb(104, 211, 145)'},
        '.harvest-section p': {'color': 'rgb(74, 85, 104)'},
        'body': {'background-color': 'rgb(255, 255, 255)'},
        '.volunteer-form fieldset': {'border-top-color': 'rgb(47, 133, 90)'},
        '.submit-btn': {},
        '.volunteer-form': {},
    }
    base.update(styles or {})
    base = {selector: props for selector, props in base.items() if props is not None}
    base_rects = {
        '.crop-card': [Rect(15, 215, 100, 200, 50), Rect(245, 445, 100, 200, 50)],
        '.submit-btn': [Rect(0, 400, 300, 400, 30)],
        '.volunteer-form': [Rect(0, 400, 200, 400, 150)],
    }
    base_rects.update(rects or {})
    if hover is _DEFAULT:
        hover = {'.harvest-btn': {'background-color': 'rgb(56, 161, 105)'}}
    return FakePage(styles=base, hover=hover, rects=base_rects)


@pytest.fixture
def garden():
    """Factory for vanilla-css pages; garden() is fully fixed."""
    return garden_page
