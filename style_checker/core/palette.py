"""Colour parsing and comparison for computed style values.

Browsers serialize computed colours as `rgb(r, g, b)` / `rgba(r, g, b, a)`
(or the space-separated CSS Color 4 form). Checks never compare those
strings directly: values are parsed into numeric components and compared by
RGB Euclidean distance with a tolerance.

Newer engines keep the authored colour space instead: `color(srgb r g b)`
for color-mix() results, `oklch(...)` / `oklab(...)` for Tailwind v4 palettes,
`lab(...)` / `lch(...)`. Those are converted to sRGB here (gamut-clipped), so
predicates only ever see 8-bit RGB.

Hex and named colours (used for expected values) go through
PIL.ImageColor, which knows the full CSS named-colour table.
"""

import re
from typing import NamedTuple

import numpy as np
from PIL import ImageColor

# Tailwind v3 colours referenced by the exercises or useful when describing
# an observed value. Not the full palette.
TAILWIND: dict[str, str] = {
    'white': '#ffffff',
    'black': '#000000',
    'amber-50': '#fffbeb',
    'amber-100': '#fef3c7',
    'amber-200': '#fde68a',
    'amber-300': '#fcd34d',
    'amber-400': '#fbbf24',
    'amber-500': '#f59e0b',
    'amber-600': '#d97706',
    'amber-700': '#b45309',
    'amber-800': '#92400e',
    'amber-900': '#78350f',
    'green-100': '#dcfce7',
    'green-400': '#4ade80',
    'green-500': '#22c55e',
    'green-600': '#16a34a',
    'green-700': '#15803d',
    'green-800': '#166534',
    'slate-50': '#f8fafc',
    'slate-100': '#f1f5f9',
    'slate-500': '#64748b',
    'slate-800': '#1e293b',
    'slate-900': '#0f172a',
    'gray-50': '#f9fafb',
    'gray-100': '#f3f4f6',
    'gray-500': '#6b7280',
    'gray-800': '#1f2937',
    'gray-900': '#111827',
}

# Max RGB distance for "same colour". Covers rounding from colour-space
# conversion; neighbouring Tailwind shades (amber-800 vs amber-900 is ~28) stay apart.
DEFAULT_TOLERANCE = 20.0

_FUNCTIONAL = re.compile(
    r'^rgba?\(\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*(?:[,/]\s*([\d.]+)(%?)\s*)?\)$',
    re.IGNORECASE,
)
_CSS4 = re.compile(r'^(color|oklab|oklch|lab|lch)\(\s*(.*?)\s*\)$', re.IGNORECASE)
_NUMBER = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?)(%|deg)?$', re.IGNORECASE)

# CSS Color 4 conversion matrices
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)
_D50_TO_D65 = np.array(
    [
        [0.955473421488075, -0.02309845494876471, 0.06325924320057072],
        [-0.0283697093338637, 1.0099953980813041, 0.021041441191917323],
        [0.012314014864481998, -0.020507649298898964, 1.330365926242124],
    ]
)
_XYZ_TO_LINEAR_SRGB = np.array(
    [
        [3.2409699419045226, -1.537383177570094, -0.4986107602930034],
        [-0.9692436362808796, 1.8759675015077202, 0.04155505740717559],
        [0.05563007969699366, -0.20397695888897652, 1.0569715142428786],
    ]
)
_D50_WHITE = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])
_LAB_EPSILON = 216 / 24389
_LAB_KAPPA = 24389 / 27


class Colour(NamedTuple):
    r: int
    g: int
    b: int
    alpha: float = 1.0

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


TRANSPARENT = Colour(0, 0, 0, 0.0)
WHITE = Colour(255, 255, 255)


def parse_colour(value: str) -> Colour:
    """Parse a computed or authored CSS colour. Raises ValueError if unknown."""
    text = value.strip()
    if text.lower() == 'transparent':
        return TRANSPARENT

    m = _FUNCTIONAL.match(text)
    if m:
        r, g, b = (int(round(float(m.group(i)))) for i in (1, 2, 3))
        alpha = 1.0
        if m.group(4) is not None:
            alpha = float(m.group(4))
            if m.group(5):
                alpha /= 100.0
        return Colour(r, g, b, alpha)

    m = _CSS4.match(text)
    if m:
        return _parse_css4(m.group(1).lower(), m.group(2), value)

    rgb = ImageColor.getrgb(text)
    if len(rgb) == 4:
        return Colour(rgb[0], rgb[1], rgb[2], rgb[3] / 255.0)
    return Colour(rgb[0], rgb[1], rgb[2])


def _component(token: str, percent_of: float, value: str) -> float:
    """One channel: a number, a percentage of `percent_of`, `<n>deg`, or `none` (0)."""
    if token.lower() == 'none':
        return 0.0
    m = _NUMBER.match(token)
    if not m:
        raise ValueError(f'Unknown colour component {token!r} in {value!r}')
    number = float(m.group(1))
    if m.group(2) == '%':
        return number * percent_of / 100.0
    return number


def _parse_css4(function: str, body: str, value: str) -> Colour:
    channels, _, alpha_text = body.partition('/')
    tokens = channels.split()
    space = 'srgb'
    if function == 'color':
        if not tokens:
            raise ValueError(f'Missing colour space in {value!r}')
        space = tokens.pop(0).lower()
    if len(tokens) != 3:
        raise ValueError(f'Expected three channels in {value!r}')
    alpha = _component(alpha_text.strip(), 1.0, value) if alpha_text.strip() else 1.0

    if function == 'color':
        if space == 'srgb':
            rgb = np.array([_component(t, 1.0, value) for t in tokens])
        elif space == 'srgb-linear':
            rgb = _gamma_encode(np.array([_component(t, 1.0, value) for t in tokens]))
        else:
            raise ValueError(f'Unsupported colour space {space!r} in {value!r}')
    elif function in ('oklab', 'oklch'):
        lightness = _component(tokens[0], 1.0, value)
        if function == 'oklab':
            a, b = (_component(t, 0.4, value) for t in tokens[1:])
        else:
            a, b = _polar(_component(tokens[1], 0.4, value), _component(tokens[2], 1.0, value))
        rgb = _oklab_to_srgb(lightness, a, b)
    else:
        lightness = _component(tokens[0], 100.0, value)
        if function == 'lab':
            a, b = (_component(t, 125.0, value) for t in tokens[1:])
        else:
            a, b = _polar(_component(tokens[1], 150.0, value), _component(tokens[2], 1.0, value))
        rgb = _lab_to_srgb(lightness, a, b)

    r, g, b = (int(round(v)) for v in np.clip(rgb, 0.0, 1.0) * 255)
    return Colour(r, g, b, float(np.clip(alpha, 0.0, 1.0)))


def _polar(chroma: float, hue_degrees: float) -> tuple[float, float]:
    hue = np.radians(hue_degrees)
    return float(chroma * np.cos(hue)), float(chroma * np.sin(hue))


def _gamma_encode(linear: np.ndarray) -> np.ndarray:
    magnitude = np.abs(linear)
    encoded = np.where(magnitude > 0.0031308, 1.055 * magnitude ** (1 / 2.4) - 0.055, 12.92 * magnitude)
    return np.sign(linear) * encoded


def _oklab_to_srgb(lightness: float, a: float, b: float) -> np.ndarray:
    lms = (_OKLAB_TO_LMS @ np.array([lightness, a, b])) ** 3
    return _gamma_encode(_LMS_TO_LINEAR_SRGB @ lms)


def _lab_to_srgb(lightness: float, a: float, b: float) -> np.ndarray:
    fy = (lightness + 16) / 116
    f = np.array([fy + a / 500, fy, fy - b / 200])
    xyz = np.where(f**3 > _LAB_EPSILON, f**3, (116 * f - 16) / _LAB_KAPPA)
    if lightness > _LAB_KAPPA * _LAB_EPSILON:
        xyz[1] = fy**3
    else:
        xyz[1] = lightness / _LAB_KAPPA
    return _gamma_encode(_XYZ_TO_LINEAR_SRGB @ (_D50_TO_D65 @ (xyz * _D50_WHITE)))


def resolve(name_or_value: str) -> Colour:
    """Resolve a Tailwind name (`amber-900`) or any CSS colour string."""
    if name_or_value in TAILWIND:
        return parse_colour(TAILWIND[name_or_value])
    return parse_colour(name_or_value)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space. Cast to int first so uint8 cannot wrap."""
    diff = np.array(a, dtype=int) - np.array(b, dtype=int)
    return float(np.linalg.norm(diff))


def is_transparent(colour: Colour) -> bool:
    return colour.alpha <= 0.0


def flatten(colour: Colour, backdrop: Colour = WHITE) -> Colour:
    """Composite a translucent colour over an opaque backdrop."""
    if colour.alpha >= 1.0:
        return colour
    a = max(colour.alpha, 0.0)
    blended = np.array(colour.rgb) * a + np.array(backdrop.rgb) * (1.0 - a)
    r, g, b = (int(round(v)) for v in blended)
    return Colour(r, g, b)


def close_to(colour: Colour, expected: Colour | str, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if an opaque-enough colour sits within tolerance of expected."""
    if isinstance(expected, str):
        expected = resolve(expected)
    if is_transparent(colour):
        return is_transparent(expected)
    return rgb_distance(colour.rgb, expected.rgb) <= tolerance


def nearest_colour(rgb: tuple[int, int, int], threshold: float = 10.0) -> tuple[str | None, float]:
    """Nearest named Tailwind colour within threshold, else (None, distance)."""
    best_name: str | None = None
    best_dist = float('inf')
    for name, hex_val in TAILWIND.items():
        dist = rgb_distance(rgb, parse_colour(hex_val).rgb)
        if dist < best_dist:
            best_name, best_dist = name, dist
    if best_dist > threshold:
        return None, best_dist
    return best_name, best_dist


def describe(colour: Colour) -> str:
    """Short human rendering: 'transparent', 'rgb(120, 53, 15) ~amber-900'."""
    if is_transparent(colour):
        return 'transparent'
    if colour.alpha < 1.0:
        text = f'rgba({colour.r}, {colour.g}, {colour.b}, {colour.alpha:g})'
    else:
        text = f'rgb({colour.r}, {colour.g}, {colour.b})'
    name, _dist = nearest_colour(colour.rgb)
    return f'{text} ~{name}' if name else text
