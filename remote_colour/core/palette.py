"""Colour space conversion and shade adjustment.

All colours are '#rrggbb' strings. Generators emit lowercase; the parser
accepts either case. Channel values are rounded half-up so the same input
always produces the same hex, independent of banker's rounding.
"""

import math
import re

from remote_colour.core.types import Adjustment

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{6})')
_OVERRIDE_RE = re.compile(r'#[0-9a-fA-F]{6}')


class ParseError(ValueError):
    """A string that is not a 6-digit hex colour."""


def _round(n: float) -> int:
    return math.floor(n + 0.5)


def _clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def is_hex_colour(value: str | None) -> bool:
    """True for a '#rrggbb' string (the only form accepted as a manual override)."""
    return bool(value) and _OVERRIDE_RE.fullmatch(value) is not None


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse '#rrggbb' (or 'rrggbb') into an (r, g, b) tuple. Raises ParseError otherwise."""
    m = _HEX_RE.fullmatch(hex_str) if isinstance(hex_str, str) else None
    if m is None:
        raise ParseError(f'Not a 6-digit hex colour: {hex_str!r}')
    digits = m.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r, g, b = (int(_clamp(c, 0, 255)) for c in (r, g, b))
    return f'#{r:02x}{g:02x}{b:02x}'


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL (degrees, percent, percent) to hex.

    Hue is taken modulo 360. Saturation and lightness are clamped to [0, 100].
    """
    h = h % 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100  # noqa: E741

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return rgb_to_hex(_round((r + m) * 255), _round((g + m) * 255), _round((b + m) * 255))


def hash_to_hex(hash_value: int, saturation: float, lightness: float) -> str:
    """Map a hash onto the hue circle at fixed saturation and lightness."""
    return hsl_to_hex(hash_value % 360, saturation, lightness)


def adjust_colour(hex_str: str, amount: float) -> str:
    """Lighten (amount > 0) or darken (amount < 0) by a percentage.

    Lightening blends each channel toward 255, darkening scales it toward 0.
    Amount is clamped to [-100, 100]; 0 returns the colour unchanged.
    """
    amount = _clamp(amount, -100, 100)
    r, g, b = hex_to_rgb(hex_str)

    def adjust(c: int) -> int:
        if amount > 0:
            return _round(c + (255 - c) * (amount / 100))
        return _round(c * (1 + amount / 100))

    return rgb_to_hex(adjust(r), adjust(g), adjust(b))


def apply_adjustment(hex_str: str, adjustment: Adjustment, amount: int) -> str:
    """Apply an accent directive with the given magnitude."""
    if adjustment == Adjustment.LIGHTEN:
        return adjust_colour(hex_str, amount)
    if adjustment == Adjustment.DARKEN:
        return adjust_colour(hex_str, -amount)
    return rgb_to_hex(*hex_to_rgb(hex_str))
