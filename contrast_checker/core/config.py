"""Snapping constants and where they come from.

SnapConfig holds the tunable constants of the snapping engine. The defaults
are the WCAG repair behaviour; load_config lets a deployment override them
through environment variables:

  CONTRAST_TIE_ZONE        lightness units within which passing paths tie (0.5)
  CONTRAST_MAX_ITERATIONS  binary-search iterations per path (7)
  CONTRAST_MIN_INTERVAL    stop a search once its interval is narrower (0.1)

Lookup order (first wins):
  1. The process environment (passed in as `environ`, default os.environ).
  2. The .env file at `env_file`, if given.
  3. A .env file found by walking up from cwd, stopping at .git.

Unlike a typical dotenv loader this never writes to os.environ. SnapConfig
checks its own values, so a bad override fails with ConfigError here rather
than inside the engine.
"""

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from contrast_checker.core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = 'CONTRAST_'


@dataclass(frozen=True)
class SnapConfig:
    # Provisional heuristic, pending a perceptual-distance metric
    tie_zone: float = 0.5
    max_iterations: int = 7
    min_interval: float = 0.1

    def __post_init__(self) -> None:
        for name in ('tie_zone', 'min_interval'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigError(f'{name} must be a finite number >= 0, got {value!r}')
        if self.max_iterations < 1:
            raise ConfigError(f'max_iterations must be at least 1, got {self.max_iterations!r}')


DEFAULT_CONFIG = SnapConfig()


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, or None once a .git boundary is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around values are stripped; comments and junk lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def _float_setting(values: Mapping[str, str], name: str, default: float) -> float:
    raw = values.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f'{ENV_PREFIX}{name} must be a number, got {raw!r}') from None
    return value


def _int_setting(values: Mapping[str, str], name: str, default: int) -> int:
    raw = values.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
    return value


def load_config(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> SnapConfig:
    """Build a SnapConfig from the environment, falling back to .env and then to defaults."""
    if environ is None:
        environ = os.environ

    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            raise ConfigError(f'env file not found: {env_file}')
    else:
        path = find_dotenv(Path.cwd())

    values: dict[str, str] = {}
    if path is not None:
        logger.debug('contrast_checker: reading %s', path)
        values.update(read_dotenv(path))
    values.update({k: v for k, v in environ.items() if k.startswith(ENV_PREFIX)})

    return SnapConfig(
        tie_zone=_float_setting(values, 'TIE_ZONE', DEFAULT_CONFIG.tie_zone),
        max_iterations=_int_setting(values, 'MAX_ITERATIONS', DEFAULT_CONFIG.max_iterations),
        min_interval=_float_setting(values, 'MIN_INTERVAL', DEFAULT_CONFIG.min_interval),
    )
