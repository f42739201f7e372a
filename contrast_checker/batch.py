"""Batch helpers for pipelines that check many colour pairs at once.

luminance_array / contrast_ratios / passes_many vectorise the WCAG maths
with numpy. snap_many runs the snapping engine per pair and reuses the
result for repeated pairs within one call; the engine is deterministic, so
this only saves work.

Any malformed hex raises FormatError; callers that want per-token handling
should validate tokens before batching.

Example:
    ratios = contrast_ratios([('#777', '#fff'), ('#000', '#fff')])
"""

import logging
from collections.abc import Sequence

import numpy as np

from contrast_checker.core.colour import format_hex, to_rgb
from contrast_checker.core.config import SnapConfig
from contrast_checker.core.luminance import (
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA,
    SRGB_KNEE,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
)
from contrast_checker.core.policy import EPSILON, required_threshold
from contrast_checker.core.types import Colour, ContrastOptions, SnapOptions, SnapResult
from contrast_checker.snap import snap_to_passing_color

logger = logging.getLogger(__name__)

_WEIGHTS = np.array(LUMINANCE_WEIGHTS)


def luminance_array(colours: Sequence[Colour]) -> np.ndarray:
    """Relative luminance of each colour, shape (n,)."""
    if len(colours) == 0:
        return np.zeros(0)
    rgb = np.array([to_rgb(c) for c in colours], dtype=float) / 255.0
    linear = np.where(
        rgb <= SRGB_KNEE,
        rgb / SRGB_LINEAR_SLOPE,
        ((rgb + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return linear @ _WEIGHTS


def contrast_ratios(pairs: Sequence[tuple[Colour, Colour]]) -> np.ndarray:
    """Contrast ratio of each (fg, bg) pair, shape (n,)."""
    if len(pairs) == 0:
        return np.zeros(0)
    l_fg = luminance_array([fg for fg, _bg in pairs])
    l_bg = luminance_array([bg for _fg, bg in pairs])
    lighter = np.maximum(l_fg, l_bg)
    darker = np.minimum(l_fg, l_bg)
    return (lighter + 0.05) / (darker + 0.05)


def passes_many(pairs: Sequence[tuple[Colour, Colour]], opts: ContrastOptions | None = None) -> np.ndarray:
    """Boolean mask of pairs that meet the threshold selected by opts."""
    return contrast_ratios(pairs) >= required_threshold(opts) - EPSILON


def snap_many(
    pairs: Sequence[tuple[Colour, Colour]],
    opts: SnapOptions | None = None,
    config: SnapConfig | None = None,
) -> list[SnapResult]:
    """snap_to_passing_color for each pair, in input order."""
    seen: dict[tuple[str, str], SnapResult] = {}
    results = []
    for fg, bg in pairs:
        key = (format_hex(to_rgb(fg)), format_hex(to_rgb(bg)))
        if key not in seen:
            seen[key] = snap_to_passing_color(key[0], key[1], opts, config)
        results.append(seen[key])

    adjusted = sum(1 for r in results if r.adjusted is not None)
    clamped = sum(1 for r in results if r.clamped)
    logger.info(
        'snap_many: %d pairs (%d unique), %d adjusted, %d clamped', len(results), len(seen), adjusted, clamped
    )
    return results
