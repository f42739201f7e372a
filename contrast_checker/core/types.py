"""Shared types for contrast_checker: RGB, HSL, options, SnapPath, Candidate, SnapResult."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, NamedTuple

Side = Literal['fg', 'bg']
Direction = Literal['lighten', 'darken']


class RGB(NamedTuple):
    """Integer sRGB channels, each in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


# Anything the public functions accept as a colour: a hex string or an (r, g, b) triple
Colour = str | RGB | tuple[int, int, int]


@dataclass(frozen=True)
class ContrastOptions:
    """Selects the WCAG threshold. Either flag relaxes 4.5:1 to 3:1."""

    is_large_text: bool = False  # >=18pt regular or >=14pt bold
    ui_component: bool = False  # borders, icons, focus rings


@dataclass(frozen=True)
class SnapOptions(ContrastOptions):
    """Options for snap_to_passing_color.

    lock_hue and lock_chroma are accepted but currently have no effect: the
    engine always holds hue and saturation fixed and moves lightness only.
    """

    lock_hue: bool = False  # reserved, no-op
    lock_chroma: bool = False  # reserved, no-op
    prefer_foreground_adjust: bool = False
    prefer_background_adjust: bool = False


@dataclass(frozen=True)
class SnapPath:
    """One of the four one-dimensional lightness searches."""

    name: str
    side: Side
    direction: Direction
    order: int  # position in the canonical order, used for tie-breaking


@dataclass(frozen=True)
class Candidate:
    """Outcome of a single path search."""

    path: SnapPath
    rgb: RGB
    ratio: float
    iterations: int
    change: float  # absolute lightness delta from the start colour


@dataclass(frozen=True)
class SnapResult:
    """Result of snap_to_passing_color.

    clamped is True when no path reached the threshold (or the colours were
    identical). adjusted and iterations are None when nothing was changed.
    """

    fg: str
    bg: str
    ratio: float
    clamped: bool = False
    adjusted: Side | None = None
    iterations: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain dict, leaving out fields that were never set."""
        out: dict[str, Any] = {'fg': self.fg, 'bg': self.bg, 'ratio': self.ratio}
        if self.clamped or self.adjusted is not None:
            out['clamped'] = self.clamped
        if self.adjusted is not None:
            out['adjusted'] = self.adjusted
        if self.iterations is not None:
            out['iterations'] = self.iterations
        return out
