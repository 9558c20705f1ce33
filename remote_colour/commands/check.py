"""Contrast check for every accent background/foreground pair.

Computes the WCAG 2.0 contrast ratio of each pair and which levels it
meets (AA 4.5, AA-large 3.0, AAA 7.0). A pair passes when its ratio is at
least --min-contrast (default 3.0). The CLI exits 1 if any pair fails.

Useful for tuning saturation/lightness: the luminance-threshold
foreground choice can land below AA for some hues; try --policy ratio.

Example:
    uv run remote-colour check .
    uv run remote-colour check . -l 55 --min-contrast 4.5
    uv run remote-colour check . --policy ratio --json
"""

from remote_colour.core.contrast import contrast_ratio, wcag_levels
from remote_colour.core.report import accent_rows
from remote_colour.core.types import Command, Context, Report

command = Command(
    name='check',
    help='Contrast ratio and WCAG levels per accent pair. Exit 1 below --min-contrast.',
)

DEFAULT_MIN_CONTRAST = 3.0


@command.run
def run(ctx: Context, report: Report, args) -> None:
    derived = ctx.state.derived
    if derived is None:
        report.add('check', {'accents': []})
        return

    minimum = getattr(args, 'min_contrast', None)
    if minimum is None:
        minimum = DEFAULT_MIN_CONTRAST

    rows = accent_rows(derived)
    for row in rows:
        ratio = contrast_ratio(row['background'], row['foreground'])
        passed = ratio >= minimum
        row['ratio'] = round(ratio, 2)
        row['levels'] = wcag_levels(ratio)
        row['pass'] = passed
        if passed:
            report.record_pass(row['name'])
        else:
            report.record_fail(row['name'])

    report.add('check', {'base': derived.base, 'min_contrast': minimum, 'accents': rows})
