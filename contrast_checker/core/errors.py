"""Exception types raised by contrast_checker."""


class ContrastError(Exception):
    """Base error for contrast_checker"""


class FormatError(ContrastError, ValueError):
    """Colour string is not #RGB or #RRGGBB"""


class ConfigError(ContrastError):
    """Missing or invalid snapping configuration"""
