"""WCAG 2.0 relative luminance and contrast ratio, and foreground selection."""

from remote_colour.core.palette import hex_to_rgb

DARK_LUMINANCE_THRESHOLD = 0.179

DEFAULT_LIGHT_FG = '#e7e7e7'
DEFAULT_DARK_FG = '#15202b'

POLICIES = ('threshold', 'ratio')

# Minimum contrast ratios per WCAG level
WCAG_LEVELS = {
    'AA': 4.5,
    'AA-large': 3.0,
    'AAA': 7.0,
}


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_str: str) -> float:
    r, g, b = hex_to_rgb(hex_str)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """(L1 + 0.05) / (L2 + 0.05) with L1 the lighter. Symmetric, 1.0 for equal colours."""
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def contrast_foreground(
    background: str,
    light_fg: str = DEFAULT_LIGHT_FG,
    dark_fg: str = DEFAULT_DARK_FG,
    policy: str = 'threshold',
) -> str:
    """Pick the light or dark foreground for a background.

    'threshold': light when the background luminance is below 0.179.
    'ratio': whichever candidate has the higher contrast ratio; a tie keeps
    the threshold choice.
    """
    lum = relative_luminance(background)
    chosen = light_fg if lum < DARK_LUMINANCE_THRESHOLD else dark_fg
    if policy == 'threshold':
        return chosen
    if policy != 'ratio':
        raise ValueError(f'Unknown foreground policy: {policy}. Available: {", ".join(POLICIES)}')

    other = dark_fg if chosen == light_fg else light_fg
    if contrast_ratio(background, other) > contrast_ratio(background, chosen):
        return other
    return chosen


def wcag_levels(ratio: float) -> dict[str, bool]:
    """Pass/fail per WCAG level for a contrast ratio."""
    return {level: ratio >= minimum for level, minimum in WCAG_LEVELS.items()}
