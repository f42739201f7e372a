"""contrast_checker — WCAG contrast metrics and deterministic colour snapping.

The four functions most callers need:

    relative_luminance(colour)            -> float in [0, 1]
    contrast_ratio(fg, bg)                -> float in [1, 21]
    passes_contrast(fg, bg, opts)         -> bool
    snap_to_passing_color(fg, bg, opts)   -> SnapResult

Colours are '#RGB' / '#RRGGBB' strings (the '#' is optional) or (r, g, b)
tuples. Only malformed hex raises, with FormatError.
"""

from contrast_checker.core.config import SnapConfig, load_config
from contrast_checker.core.errors import ConfigError, ContrastError, FormatError
from contrast_checker.core.luminance import contrast_ratio, relative_luminance
from contrast_checker.core.policy import is_large_text_from_css, passes_contrast, required_threshold
from contrast_checker.core.types import RGB, ContrastOptions, SnapOptions, SnapResult
from contrast_checker.snap import snap_to_passing_color

__all__ = [
    'RGB',
    'ConfigError',
    'ContrastError',
    'ContrastOptions',
    'FormatError',
    'SnapConfig',
    'SnapOptions',
    'SnapResult',
    'contrast_ratio',
    'is_large_text_from_css',
    'load_config',
    'passes_contrast',
    'relative_luminance',
    'required_threshold',
    'snap_to_passing_color',
]
