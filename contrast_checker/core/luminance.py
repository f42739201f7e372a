"""WCAG relative luminance and contrast ratio.

relative_luminance follows WCAG 2.x: each channel is scaled to [0, 1],
linearised with the sRGB inverse companding curve, then weighted
0.2126 / 0.7152 / 0.0722.

contrast_ratio is (L_lighter + 0.05) / (L_darker + 0.05). It is symmetric,
exactly 1 for identical colours, and at most 21 (black on white).
"""

from contrast_checker.core.colour import to_rgb
from contrast_checker.core.types import Colour

# sRGB inverse companding: linear below the knee, gamma curve above it
SRGB_KNEE = 0.03928
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# Rec. 709 channel weights (R, G, B)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linear_channel(c: int) -> float:
    v = c / 255
    if v <= SRGB_KNEE:
        return v / SRGB_LINEAR_SLOPE
    return ((v + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def relative_luminance(colour: Colour) -> float:
    """Relative luminance in [0, 1] of a hex string or RGB triple."""
    r, g, b = to_rgb(colour)
    w_r, w_g, w_b = LUMINANCE_WEIGHTS
    return w_r * _linear_channel(r) + w_g * _linear_channel(g) + w_b * _linear_channel(b)


def contrast_ratio(fg: Colour, bg: Colour) -> float:
    """Contrast ratio in [1, 21]. Argument order does not matter."""
    l_fg = relative_luminance(fg)
    l_bg = relative_luminance(bg)
    lighter = max(l_fg, l_bg)
    darker = min(l_fg, l_bg)
    return (lighter + 0.05) / (darker + 0.05)
