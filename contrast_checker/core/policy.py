"""WCAG 2.2 AA threshold policy.

Thresholds:
  - Normal text: 4.5:1
  - Large text (>=18pt, or >=14pt bold): 3:1
  - Essential UI components (borders, icons, focus rings): 3:1

Every comparison of a ratio against a threshold goes through meets_threshold,
which allows EPSILON of slack so that an exact 4.5:1 or 3:1 boundary still
passes after floating-point rounding in the gamma curve.
"""

from contrast_checker.core.luminance import contrast_ratio
from contrast_checker.core.types import Colour, ContrastOptions

EPSILON = 1e-3
NORMAL_TEXT_THRESHOLD = 4.5
LARGE_TEXT_THRESHOLD = 3.0

# CSS pixel equivalents of 14pt bold and 18pt regular
LARGE_BOLD_TEXT_PX = 18.66
LARGE_TEXT_PX = 24.0
BOLD_FONT_WEIGHT = 600


def required_threshold(opts: ContrastOptions | None = None) -> float:
    if opts is not None and (opts.is_large_text or opts.ui_component):
        return LARGE_TEXT_THRESHOLD
    return NORMAL_TEXT_THRESHOLD


def meets_threshold(ratio: float, threshold: float) -> bool:
    return ratio >= threshold - EPSILON


def passes_contrast(fg: Colour, bg: Colour, opts: ContrastOptions | None = None) -> bool:
    """True if fg on bg meets the WCAG AA threshold selected by opts."""
    return meets_threshold(contrast_ratio(fg, bg), required_threshold(opts))


def is_large_text_from_css(font_size_px: float, font_weight: int = 400) -> bool:
    """Classify rendered text as WCAG "large text" from its CSS size and weight.

    Bold means font-weight >= 600. Bold text is large from 18.66px,
    regular text from 24px.
    """
    limit = LARGE_BOLD_TEXT_PX if font_weight >= BOLD_FONT_WEIGHT else LARGE_TEXT_PX
    return font_size_px >= limit
