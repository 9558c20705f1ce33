"""Configuration for remote-colour: .env loading and ColourConfig resolution.

Load order (first wins):
  1. Command-line flags.
  2. Existing OS environment variables — a .env never overwrites them.
  3. .env file at --env-file path (if explicitly provided).
  4. .env file walking up from the workspace, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.

Recognised variables:
  REMOTE_COLOUR_SATURATION    0-100 (default 50)
  REMOTE_COLOUR_LIGHTNESS     0-100 (default 40)
  REMOTE_COLOUR_ACCENTS       e.g. statusBar=none,titleBar=darken
  REMOTE_COLOUR_AMOUNT        lighten/darken percentage (default 15)
  REMOTE_COLOUR_OVERRIDE      manual #rrggbb colour
  REMOTE_COLOUR_IDENTITY      literal identifying string instead of the remote URL
  REMOTE_COLOUR_REMOTE        remote name (default origin)
  REMOTE_COLOUR_POLICY        threshold | ratio
  REMOTE_COLOUR_GIT_TIMEOUT   seconds (default 5)

Numeric values out of range are clamped to the boundary, not rejected.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from remote_colour.core.contrast import POLICIES
from remote_colour.core.types import Adjustment, ColourConfig

ENV_PREFIX = 'REMOTE_COLOUR_'


class ConfigError(ValueError):
    """A configuration value that cannot be interpreted."""


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(start: Path | None = None, env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(start or Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value
    return path


def _clamp_int(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def _as_int(name: str, raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f'{name} must be an integer, got {raw!r}') from None


def _as_float(name: str, raw: Any) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f'{name} must be a number, got {raw!r}') from None


def parse_adjustment(raw: str) -> Adjustment:
    try:
        return Adjustment(raw.strip().lower())
    except ValueError:
        choices = ', '.join(a.value for a in Adjustment)
        raise ConfigError(f'Unknown adjustment {raw!r}. Available: {choices}') from None


def parse_accents(specs: list[str] | str) -> dict[str, Adjustment]:
    """Parse 'name=directive' items (a list, or one comma-separated string).

    A bare name means 'none'. Later entries for the same name win.
    """
    if isinstance(specs, str):
        specs = specs.split(',')
    accents: dict[str, Adjustment] = {}
    for item in specs:
        item = item.strip()
        if not item:
            continue
        name, sep, directive = item.partition('=')
        name = name.strip()
        if not name:
            raise ConfigError(f'Accent needs a name: {item!r}')
        accents[name] = parse_adjustment(directive) if sep else Adjustment.NONE
    return accents


def load_config(args: Any = None, environ: Mapping[str, str] | None = None) -> ColourConfig:
    """Build a ColourConfig from the environment, then argparse overrides."""
    env = os.environ if environ is None else environ
    config = ColourConfig()

    def pick(attr: str, var: str) -> Any:
        value = getattr(args, attr, None) if args is not None else None
        if value is not None:
            return value
        return env.get(ENV_PREFIX + var) or None

    saturation = pick('saturation', 'SATURATION')
    if saturation is not None:
        config.saturation = _clamp_int(_as_int('saturation', saturation), 0, 100)

    lightness = pick('lightness', 'LIGHTNESS')
    if lightness is not None:
        config.lightness = _clamp_int(_as_int('lightness', lightness), 0, 100)

    amount = pick('amount', 'AMOUNT')
    if amount is not None:
        config.adjustment_amount = _clamp_int(_as_int('amount', amount), 0, 100)

    accents = pick('accent', 'ACCENTS')
    if accents:
        parsed = parse_accents(accents)
        if parsed:
            config.accents = parsed

    config.colour_override = pick('colour', 'OVERRIDE')
    config.identity_override = pick('text', 'IDENTITY')

    remote = pick('remote', 'REMOTE')
    if remote:
        config.remote_name = remote

    policy = pick('policy', 'POLICY')
    if policy is not None:
        if policy not in POLICIES:
            raise ConfigError(f'Unknown foreground policy {policy!r}. Available: {", ".join(POLICIES)}')
        config.foreground_policy = policy

    timeout = pick('git_timeout', 'GIT_TIMEOUT')
    if timeout is not None:
        config.git_timeout = max(0.0, _as_float('git timeout', timeout))

    return config
