"""Sass exercise — the Yellow Submarine page (9 checks).

Almost entirely source-text checks against scss/styles.scss, because a
Sass syntax error usually stops the compiler before anything renders:
  1. css/styles.css was compiled
  2. variables use the $ sigil
  3. mixin body statements end with semicolons
  4. mixins are called with @include, not @mixin
  5. no references to an undefined (misspelled) variable
  6. &:hover, not &-hover
  7. nesting stays shallow
  8. calculate-spacing is declared with @function
  9. compiled styles reach the page (header background and padding)

The closing message has two encouragement bands before falling back to
"N issues remaining".

Example:
    uv run style-checker sass ./lab/03-sass
"""

from style_checker.core.palette import is_transparent
from style_checker.core.patterns import AllOf, Contains, Exists, MaxDepth, NotContains, none_of
from style_checker.core.types import Check, Exercise, Messages, SourceQuery, StyleQuery, Tier

SCSS = 'scss/styles.scss'
COMPILED = 'css/styles.css'

# The seeded chain: .hero h1 & + p.subtitle & + div & span
OVER_NESTED = '& + p.subtitle {\n        & + div {\n            & span {'
MAX_NESTING = 5


def _header_styles(page) -> tuple | None:
    if not page.exists('.main-header'):
        return None
    return (page.colour('.main-header', 'background-color'), page.length('.main-header', 'padding-top'))


def _styles_applied(state) -> bool:
    if state is None:
        return False
    background, padding_top = state
    return not is_transparent(background) and padding_top > 0


CHECKS = (
    Check(
        title='CSS compilation',
        query=SourceQuery(COMPILED, required=False),
        predicate=Exists(),
        failure='CSS file not generated',
        hint='run npm run build:sass from main directory',
        success='SASS compiled successfully',
    ),
    Check(
        title='variable syntax',
        query=SourceQuery(SCSS),
        predicate=AllOf(NotContains('-primary-yellow:'), Contains('$primary-yellow:')),
        failure='Invalid variable syntax found',
        hint='SASS variables start with $',
        success='Variable syntax is correct',
    ),
    Check(
        title='mixin syntax',
        query=SourceQuery(SCSS),
        predicate=AllOf(Contains('border-radius: 8px;'), NotContains('border-radius: 8px\n')),
        failure='Missing semicolon in mixin',
        hint='SASS properties need semicolons',
        success='Mixin syntax is correct',
    ),
    Check(
        title='@include usage',
        query=SourceQuery(SCSS),
        predicate=AllOf(NotContains('@mixin card-style;'), Contains('@include')),
        failure='Incorrect mixin usage',
        hint='use @include to call mixins, not @mixin',
        success='Mixin usage is correct',
    ),
    Check(
        title='variable definitions',
        query=SourceQuery(SCSS),
        predicate=none_of('$underfined-color', '$undefined-color'),
        failure='Using undefined variable',
        hint='check variable names for typos',
        success='All variables are properly defined',
    ),
    Check(
        title='pseudo-class syntax',
        query=SourceQuery(SCSS),
        predicate=AllOf(NotContains('&-hover'), Contains('&:hover')),
        failure='Incorrect pseudo-class syntax',
        hint='use &:hover not &-hover',
        success='Pseudo-class syntax is correct',
    ),
    Check(
        title='nesting structure',
        query=SourceQuery(SCSS),
        predicate=AllOf(NotContains(OVER_NESTED), MaxDepth(MAX_NESTING)),
        failure='Overly complex nesting found',
        hint='simplify nested selectors',
        success='Nesting is properly structured',
    ),
    Check(
        title='function syntax',
        query=SourceQuery(SCSS),
        predicate=AllOf(Contains('@function calculate-spacing'), NotContains('@mixin calculate-spacing')),
        failure='Incorrect function syntax',
        hint='use @function for functions, not @mixin',
        success='Function syntax is correct',
    ),
    Check(
        title='applied styles',
        query=StyleQuery(_header_styles),
        predicate=_styles_applied,
        failure='Styles not being applied to page',
        hint='check CSS file is linked and compiling',
        success='Styles are being applied to the page',
    ),
)

exercise = Exercise(
    name='sass',
    banner='🟡 SASS DIAGNOSTIC TESTS',
    results_label='SASS RESULTS',
    help='Yellow Submarine page: Sass syntax defects and compiled output.',
    checks=CHECKS,
    messages=Messages(
        complete=(
            '🎉 Excellent! All SASS issues are fixed!',
            '🟡 The Yellow Submarine website is ready to dive!',
        ),
        bands=(
            Tier(
                8 / 9,
                (
                    '🌊 Great progress! Just a few more issues to fix.',
                    '💡 Focus on the diagnostic fixes first, then the qualitative improvements.',
                ),
            ),
            Tier(
                5 / 9,
                (
                    '⚡ Good start! Keep working on those SASS syntax issues.',
                    '💡 Remember: variables start with $, use @include for mixins, and @function for functions.',
                ),
            ),
        ),
        setup_hint='💡 Tip: Make sure you run npm run build:sass to compile your changes.',
    ),
)
