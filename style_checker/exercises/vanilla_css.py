"""Vanilla CSS exercise — the community garden page (10 checks).

Renders index.html and inspects computed styles only:
  1. header background applied         6. harvest button background colour
  2. nav uses justify-content          7. harvest button hover state
  3. nav link padding                  8. paragraph text visibility
  4. crop cards side by side           9. fieldset border visible
  5. card margins carry units         10. submit button spans the form

Seeded defects are things like a misspelled property, justify-items in
place of justify-content, `margin: 15` without a unit, or a hover rule
that loses on specificity.

Example:
    uv run style-checker vanilla-css ./01-vanilla-css
"""

from dataclasses import dataclass

from style_checker.core.palette import DEFAULT_TOLERANCE, WHITE, Colour, close_to, describe, flatten, rgb_distance
from style_checker.core.types import Check, Exercise, Messages, StyleQuery

HARVEST_GREEN = '#68d391'
# A hover colour that only shows up when the specificity bug is "fixed" the wrong way
WRONG_HOVER = 'rgb(219, 112, 147)'
NEAR_INVISIBLE = '#f7fafc'
ADJACENCY_SLACK = 10  # px of overlap still counted as side by side
FULL_WIDTH_RATIO = 0.8


@dataclass(frozen=True)
class HoverProbe:
    before: Colour
    after: Colour

    def describe(self) -> str:
        return f'{describe(self.before)} before hover, {describe(self.after)} after'


@dataclass(frozen=True)
class TextOnBackground:
    text: Colour
    background: Colour

    def describe(self) -> str:
        return f'text {describe(self.text)} on {describe(self.background)}'


def _is_painted(colour: Colour) -> bool:
    return colour.alpha > 0


def _nav_justify(page) -> str:
    return page.value('.main-nav', 'justify-content').strip()


def _link_padding(page) -> tuple[float, float]:
    return (page.length('.main-nav a', 'padding-top'), page.length('.main-nav a', 'padding-left'))


def _cards_in_row(rects) -> bool:
    if len(rects) < 2:
        return False
    first, second = rects[0], rects[1]
    return second.left > first.right - ADJACENCY_SLACK


def _card_margins(page) -> list[float]:
    return [page.length('.crop-card', f'margin-{side}') for side in ('top', 'right', 'bottom', 'left')]


def _hover_background(page) -> HoverProbe:
    before = page.colour('.harvest-btn')
    page.hover('.harvest-btn')
    try:
        page.wait()
        after = page.colour('.harvest-btn')
    finally:
        page.reset_pointer()
    return HoverProbe(before, after)


def _hover_works(probe: HoverProbe) -> bool:
    changed = not close_to(probe.after, probe.before, tolerance=1.0)
    return changed and not close_to(probe.after, WRONG_HOVER)


def _text_on_background(page) -> TextOnBackground | None:
    if not page.exists('.harvest-section p'):
        return None
    background = flatten(page.colour('body', 'background-color'), WHITE)
    text = flatten(page.colour('.harvest-section p', 'color'), background)
    return TextOnBackground(text, background)


def _text_visible(pair: TextOnBackground | None) -> bool:
    if pair is None:
        return True
    distinct = rgb_distance(pair.text.rgb, pair.background.rgb) > DEFAULT_TOLERANCE
    return distinct and not close_to(pair.text, NEAR_INVISIBLE)


def _width_ratio(page) -> float | None:
    if not (page.exists('.submit-btn') and page.exists('.volunteer-form')):
        return None
    form = page.rect('.volunteer-form').width
    if form <= 0:
        return None
    return page.rect('.submit-btn').width / form


CHECKS = (
    Check(
        title='header background',
        query=StyleQuery(lambda page: page.colour('.main-header', 'background-color')),
        predicate=_is_painted,
        failure='Header should have green background color',
        hint='check CSS property spelling',
        success='Header background color is applied',
    ),
    Check(
        title='navigation alignment',
        query=StyleQuery(_nav_justify),
        predicate=lambda justify: justify not in ('normal', 'flex-start', ''),
        failure='Navigation links should align horizontally',
        hint='check your flexbox justify properties',
        success='Navigation links are horizontally aligned',
    ),
    Check(
        title='navigation padding',
        query=StyleQuery(_link_padding),
        predicate=lambda padding: padding[0] > 0 and padding[1] > 0,
        failure='Navigation links need padding for better usability',
        hint='add space around the text',
        success='Navigation links have adequate padding',
    ),
    Check(
        title='crop cards layout',
        query=StyleQuery(lambda page: page.rects('.crop-card')),
        predicate=_cards_in_row,
        failure='Crop cards should display in a row layout',
        hint='missing a display property',
        success='Crop cards are arranged horizontally',
    ),
    Check(
        title='card margins',
        # `margin: 15` is invalid and computes to 0px on every side
        query=StyleQuery(_card_margins),
        predicate=lambda margins: any(m > 0 for m in margins),
        failure='Card spacing looks broken',
        hint='CSS units are required for measurements',
        success='Card margins have proper units',
    ),
    Check(
        title='button background',
        query=StyleQuery(lambda page: page.colour('.harvest-btn', 'background-color')),
        predicate=lambda colour: close_to(colour, HARVEST_GREEN),
        failure='Harvest buttons need proper background color',
        hint='check CSS property spelling',
        success='Harvest buttons have background color',
    ),
    Check(
        title='button hover effect',
        query=StyleQuery(_hover_background),
        predicate=_hover_works,
        failure='Button hover effect not working correctly',
        hint='check CSS specificity rules',
        success='Button hover effects are working',
    ),
    Check(
        title='text visibility',
        query=StyleQuery(_text_on_background),
        predicate=_text_visible,
        failure='Some text is too light and hard to read',
        hint='check color values',
        success='Text colors have good visibility',
    ),
    Check(
        title='fieldset border',
        query=StyleQuery(lambda page: page.colour('.volunteer-form fieldset', 'border-top-color')),
        predicate=_is_painted,
        failure='Form fieldset border should be visible',
        hint='check border color value',
        success='Form fieldset has visible border',
    ),
    Check(
        title='button width',
        query=StyleQuery(_width_ratio),
        predicate=lambda ratio: ratio is not None and ratio > FULL_WIDTH_RATIO,
        failure='Submit button should span full width of form',
        hint='add a width property',
        success='Submit button spans full width',
    ),
)

exercise = Exercise(
    name='vanilla-css',
    banner='🌱 VANILLA CSS DIAGNOSTIC TESTS',
    results_label='DIAGNOSTIC RESULTS',
    help='Community garden page: computed-style checks for seeded CSS bugs.',
    checks=CHECKS,
    messages=Messages(
        complete=('🎉 All diagnostic issues fixed! Move on to the qualitative section.',),
    ),
)
