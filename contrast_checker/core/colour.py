"""Hex, RGB and HSL conversion.

Hex input may be #RGB or #RRGGBB, with or without the leading '#', in any
case. Hex output is always canonical: '#' followed by six uppercase digits.

Only parse_hex and to_rgb raise, always with FormatError. Everything
downstream works on validated RGB values.
"""

import math
import re
from numbers import Integral

from contrast_checker.core.errors import FormatError
from contrast_checker.core.types import HSL, RGB, Colour

_HEX_RE = re.compile(r'(?:[0-9A-F]{3}|[0-9A-F]{6})')


def _round_half_up(x: float) -> int:
    # round() in Python is banker's rounding; channels must round .5 upwards
    return int(math.floor(x + 0.5))


def parse_hex(value: str) -> RGB:
    """Parse '#RGB' / '#RRGGBB' (leading '#' optional) into an RGB triple."""
    clean = value.replace('#', '', 1).upper() if isinstance(value, str) else ''
    if not _HEX_RE.fullmatch(clean):
        raise FormatError(f'Invalid hex color format: {value}. Expected #RGB or #RRGGBB format.')
    if len(clean) == 3:
        clean = ''.join(c * 2 for c in clean)
    return RGB(int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16))


def format_hex(rgb: tuple[float, float, float]) -> str:
    """Format an RGB triple as '#RRGGBB'. Channels are rounded, then clamped to [0, 255]."""

    def _channel(n: float) -> str:
        return f'{_round_half_up(max(0.0, min(255.0, n))):02X}'

    r, g, b = rgb
    return f'#{_channel(r)}{_channel(g)}{_channel(b)}'


def normalize_hex(value: str) -> str:
    return format_hex(parse_hex(value))


def to_rgb(colour: Colour) -> RGB:
    """Accept a hex string or an (r, g, b) triple and return an RGB.

    Triples are validated, not clamped: exactly three integer channels, each
    in [0, 255], or FormatError.
    """
    if isinstance(colour, str):
        return parse_hex(colour)
    channels = tuple(colour) if isinstance(colour, (tuple, list)) else ()
    if len(channels) != 3 or not all(isinstance(c, Integral) and 0 <= c <= 255 for c in channels):
        raise FormatError(f'Invalid RGB color: {colour!r}. Expected three integer channels in [0, 255].')
    return RGB(*(int(c) for c in channels))


def rgb_to_hsl(rgb: tuple[int, int, int]) -> HSL:
    r, g, b = (c / 255 for c in rgb)
    hi = max(r, g, b)
    lo = min(r, g, b)
    diff = hi - lo

    h = 0.0
    s = 0.0
    light = (hi + lo) / 2

    # Achromatic: hue and saturation stay 0
    if diff != 0:
        s = diff / (2 - hi - lo) if light > 0.5 else diff / (hi + lo)
        if hi == r:
            h = (g - b) / diff + (6 if g < b else 0)
        elif hi == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
        h /= 6

    return HSL(h * 360, s * 100, light * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: tuple[float, float, float]) -> RGB:
    h = hsl[0] / 360
    s = hsl[1] / 100
    light = hsl[2] / 100

    if s == 0:
        r = g = b = light
    else:
        q = light * (1 + s) if light < 0.5 else light + s - light * s
        p = 2 * light - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))
