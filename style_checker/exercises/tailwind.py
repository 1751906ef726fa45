"""Tailwind CSS exercise — Clockwork Repairs (9 checks).

Mixes all three strategies:
  computed style  1. Tailwind loaded (header is amber-900)
                  2. shadow classes on service cards
                  6. focus:ring / focus:border on every form control
  source text     3. no British spelling (items-centre)
                  4. responsive prefix uses a colon (sm:flex-row)
                  5. none of the known broken classes remain
                  8. dist/output.css built, large, contains .bg-amber
  manifest        7. tailwind.config.js content list covers .html
                  9. package.json build:css script runs tailwindcss

Below 7/9 the report reminds the student to finish the SETUP section,
since most of the build checks fail together when it was skipped.

Example:
    uv run style-checker tailwind ./02-tailwind
"""

import re

from style_checker.core.manifest import lookup
from style_checker.core.palette import close_to
from style_checker.core.patterns import AllOf, Contains, Exists, LongerThan, NotContains, none_of
from style_checker.core.types import Check, Exercise, ManifestQuery, Messages, SourceQuery, StyleQuery

BROKEN_SHADOWS = ('shadow-medium', 'shadow-large')
BROKEN_CLASSES = (*BROKEN_SHADOWS, 'items-centre', 'sm-flex-row')
FOCUS_CLASSES = AllOf(Contains('focus:ring'), Contains('focus:border'))
MIN_OUTPUT_SIZE = 10000
# `*.html`, or a brace group that lists it: `*.{html,js}`
MARKUP_GLOB = re.compile(r'\.(?:html\b|\{[^}]*\bhtml\b[^}]*\})')


def _valid_shadows(class_lists: list[str]) -> bool:
    valid = none_of(*BROKEN_SHADOWS)
    return all(valid(classes) for classes in class_lists)


def _consistent_focus(class_lists: list[str]) -> bool:
    return all(FOCUS_CLASSES(classes) for classes in class_lists)


def _content_configured(config) -> bool:
    content = lookup(config, 'content')
    if not isinstance(content, list) or not content:
        return False
    return any(MARKUP_GLOB.search(source) for source in content if isinstance(source, str))


def _build_script(manifest) -> bool:
    script = lookup(manifest, 'scripts', 'build:css')
    return isinstance(script, str) and 'tailwindcss' in script


CHECKS = (
    Check(
        title='Tailwind CSS loading',
        query=StyleQuery(lambda page: page.colour('header', 'background-color')),
        predicate=lambda colour: close_to(colour, 'amber-900'),
        failure='Tailwind CSS not loaded properly',
        hint='check your CSS link and build process',
        success='Tailwind CSS is loaded and working',
    ),
    Check(
        title='shadow classes',
        query=StyleQuery(lambda page: page.class_names('.bg-amber-50')),
        predicate=_valid_shadows,
        failure='Invalid shadow classes found',
        hint='Tailwind uses standard sizes like sm, md, lg, xl',
        success='All shadow classes are valid',
    ),
    Check(
        title='class spelling',
        query=SourceQuery('index.html'),
        predicate=NotContains('items-centre'),
        failure='Found British spelling in class names',
        hint='Tailwind uses American spelling',
        success='All class names use correct spelling',
    ),
    Check(
        title='responsive syntax',
        query=SourceQuery('index.html'),
        predicate=NotContains('sm-flex-row'),
        failure='Incorrect responsive class syntax',
        hint='use colons like sm:flex-row',
        success='Responsive classes use correct syntax',
    ),
    Check(
        title='broken classes',
        query=SourceQuery('index.html'),
        predicate=none_of(*BROKEN_CLASSES),
        failure='Found broken Tailwind classes in HTML',
        hint='check for typos and invalid class names',
        success='No broken Tailwind classes found',
    ),
    Check(
        title='focus states',
        query=StyleQuery(lambda page: page.class_names('input, select, textarea')),
        predicate=_consistent_focus,
        failure='Form elements missing consistent focus states',
        hint='add focus:ring and focus:border classes',
        success='All form elements have proper focus states',
    ),
    Check(
        title='config file',
        query=ManifestQuery('tailwind.config.js'),
        predicate=_content_configured,
        failure='Tailwind config missing or incorrectly configured',
        hint='check content array',
        success='Tailwind config file properly set up',
    ),
    Check(
        title='CSS output file',
        query=SourceQuery('dist/output.css', required=False),
        predicate=AllOf(Exists(), LongerThan(MIN_OUTPUT_SIZE), Contains('.bg-amber')),
        failure='CSS output file missing or empty',
        hint='run npm run build:css',
        success='CSS file properly generated',
    ),
    Check(
        title='package.json',
        query=ManifestQuery('package.json'),
        predicate=_build_script,
        failure='Package.json missing or build script incorrect',
        hint='check build:css script',
        success='Package.json properly configured',
    ),
)

exercise = Exercise(
    name='tailwind',
    banner='🕰️ TAILWIND CSS DIAGNOSTIC TESTS',
    results_label='TAILWIND RESULTS',
    help='Clockwork Repairs page: Tailwind classes, config and build output.',
    checks=CHECKS,
    messages=Messages(
        complete=(
            '🎉 Excellent! Tailwind is fully set up and all issues are fixed!',
            '🕰️ The Clockwork Repairs website is ready for customers!',
        ),
        setup_hint='💡 Tip: Make sure you completed the SETUP section first',
        setup_hint_below=7 / 9,
    ),
)
