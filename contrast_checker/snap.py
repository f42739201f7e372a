"""Deterministic snapping of failing colour pairs to the WCAG threshold.

Given a foreground/background pair that fails passes_contrast, find a pair
that passes by moving the HSL lightness of exactly one colour as little as
possible. Hue and saturation are never touched.

Four paths are searched, always in this canonical order:

    fg-lighten   fg-darken   bg-darken   bg-lighten

Each path is a bounded binary search over its lightness sub-range
([L, 100] to lighten, [0, L] to darken). A midpoint that meets the threshold
becomes the path's best and the search moves back toward the start colour;
one that fails pushes the search further away. A search stops after
max_iterations or once the interval is narrower than min_interval, so a
snap costs at most 4 * max_iterations ratio evaluations.

Selection:
  - Passing paths are ranked by lightness change, then canonical order.
    Paths within tie_zone of the smallest change are tied; the tie goes to
    the first background path when only prefer_background_adjust is set,
    otherwise to the first foreground path.
  - If no path passes, the highest ratio wins (canonical order on ties) and
    the result is marked clamped.

Known limitation: change is measured in HSL lightness, which is not
perceptually uniform.

Example:
    >>> snap_to_passing_color('#888888', '#FFFFFF').adjusted
    'fg'
"""

import logging

from contrast_checker.core.colour import format_hex, hsl_to_rgb, rgb_to_hsl, to_rgb
from contrast_checker.core.config import DEFAULT_CONFIG, SnapConfig
from contrast_checker.core.luminance import contrast_ratio
from contrast_checker.core.policy import meets_threshold, required_threshold
from contrast_checker.core.types import HSL, RGB, Candidate, Colour, SnapOptions, SnapPath, SnapResult

logger = logging.getLogger(__name__)

# Order matters: it is the final tie-breaker
SNAP_PATHS: tuple[SnapPath, ...] = (
    SnapPath(name='fg-lighten', side='fg', direction='lighten', order=0),
    SnapPath(name='fg-darken', side='fg', direction='darken', order=1),
    SnapPath(name='bg-darken', side='bg', direction='darken', order=2),
    SnapPath(name='bg-lighten', side='bg', direction='lighten', order=3),
)


def search_lightness(
    start: HSL,
    other: RGB,
    threshold: float,
    path: SnapPath,
    config: SnapConfig = DEFAULT_CONFIG,
) -> Candidate:
    """Binary-search one lightness direction for the smallest passing move."""
    lightening = path.direction == 'lighten'
    lo, hi = (start.l, 100.0) if lightening else (0.0, start.l)

    best_rgb = hsl_to_rgb(start)
    best_ratio = contrast_ratio(best_rgb, other)
    iterations = 0

    for _ in range(config.max_iterations):
        iterations += 1
        mid = (lo + hi) / 2
        test_rgb = hsl_to_rgb(HSL(start.h, start.s, mid))
        test_ratio = contrast_ratio(test_rgb, other)

        if meets_threshold(test_ratio, threshold):
            best_rgb = test_rgb
            best_ratio = test_ratio
            # Passing: pull back toward the start colour
            if lightening:
                hi = mid
            else:
                lo = mid
        elif lightening:
            lo = mid
        else:
            hi = mid

        if abs(hi - lo) < config.min_interval:
            break

    change = abs(start.l - rgb_to_hsl(best_rgb).l)
    return Candidate(path=path, rgb=best_rgb, ratio=best_ratio, iterations=iterations, change=change)


def _preferred_side(opts: SnapOptions) -> str:
    if opts.prefer_background_adjust and not opts.prefer_foreground_adjust:
        return 'bg'
    return 'fg'


def select_candidate(
    candidates: list[Candidate],
    threshold: float,
    opts: SnapOptions | None = None,
    config: SnapConfig = DEFAULT_CONFIG,
) -> tuple[Candidate, bool]:
    """Pick the winning candidate. Returns (candidate, clamped)."""
    if opts is None:
        opts = SnapOptions()

    passing = [c for c in candidates if meets_threshold(c.ratio, threshold)]
    if not passing:
        # max() keeps the first of equal ratios, which is canonical order
        best = max(sorted(candidates, key=lambda c: c.path.order), key=lambda c: c.ratio)
        return best, True

    ranked = sorted(passing, key=lambda c: (c.change, c.path.order))
    min_change = ranked[0].change
    tied = [c for c in ranked if c.change - min_change <= config.tie_zone]
    if len(tied) == 1:
        return tied[0], False

    side = _preferred_side(opts)
    for c in sorted(tied, key=lambda c: c.path.order):
        if c.path.side == side:
            return c, False
    return ranked[0], False


def snap_to_passing_color(
    fg: Colour,
    bg: Colour,
    opts: SnapOptions | None = None,
    config: SnapConfig | None = None,
) -> SnapResult:
    """Minimally adjust fg or bg so the pair meets the WCAG AA threshold.

    Raises FormatError for malformed hex input. Every other outcome,
    including pairs that cannot be repaired, is returned as a SnapResult.
    """
    if opts is None:
        opts = SnapOptions()
    if config is None:
        config = DEFAULT_CONFIG

    fg_rgb = to_rgb(fg)
    bg_rgb = to_rgb(bg)
    threshold = required_threshold(opts)

    ratio = contrast_ratio(fg_rgb, bg_rgb)
    if meets_threshold(ratio, threshold):
        return SnapResult(fg=format_hex(fg_rgb), bg=format_hex(bg_rgb), ratio=ratio)

    # 1:1 means identical colours here; no single-side move is attempted
    if ratio == 1 and threshold > 1:
        logger.debug('snap: %s on %s is 1:1, nothing to adjust', format_hex(fg_rgb), format_hex(bg_rgb))
        return SnapResult(fg=format_hex(fg_rgb), bg=format_hex(bg_rgb), ratio=ratio, clamped=True)

    fg_hsl = rgb_to_hsl(fg_rgb)
    bg_hsl = rgb_to_hsl(bg_rgb)

    candidates = []
    for path in SNAP_PATHS:
        if path.side == 'fg':
            candidates.append(search_lightness(fg_hsl, bg_rgb, threshold, path, config))
        else:
            candidates.append(search_lightness(bg_hsl, fg_rgb, threshold, path, config))

    winner, clamped = select_candidate(candidates, threshold, opts, config)
    logger.debug(
        'snap: %s on %s %.3f:1 -> %s (ratio=%.3f change=%.2f iterations=%d clamped=%s)',
        format_hex(fg_rgb),
        format_hex(bg_rgb),
        ratio,
        winner.path.name,
        winner.ratio,
        winner.change,
        winner.iterations,
        clamped,
    )

    if winner.path.side == 'fg':
        fg_rgb = winner.rgb
    else:
        bg_rgb = winner.rgb

    return SnapResult(
        fg=format_hex(fg_rgb),
        bg=format_hex(bg_rgb),
        ratio=contrast_ratio(fg_rgb, bg_rgb),
        clamped=clamped,
        adjusted=winner.path.side,
        iterations=winner.iterations,
    )
