"""Report builder — text and JSON output for remote-colour results."""

import json
from typing import Any

from remote_colour.core.types import ColourState, DerivedColours, Report


def status_text(state: ColourState) -> tuple[str, str]:
    """Status line and tooltip for the current colour, as an editor status item would show them."""
    if state.colour:
        tooltip = f'Remote colour: {state.colour}'
        if state.remote_url:
            tooltip += f'\nRemote: {state.remote_url}'
        elif state.identity:
            tooltip += f'\nIdentity: {state.identity}'
        return f'● {state.colour}', tooltip
    return '○ No remote', 'No git remote detected'


def _format_accents(accents: list[dict[str, Any]]) -> list[str]:
    lines = []
    for a in accents:
        line = f'  {a["name"]:<12} bg {a["background"]}  fg {a["foreground"]}  ({a["adjustment"]})'
        if 'ratio' in a:
            mark = '✓' if a.get('pass') else '✗'
            levels = ' '.join(level for level, ok in a.get('levels', {}).items() if ok) or '-'
            line += f'  {a["ratio"]:.2f}:1 [{levels}] {mark}'
        lines.append(line)
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'remote-colour: {report.workspace}'
    if report.colour:
        header += f' — {report.colour}'
    lines.append(header)
    if report.remote_url:
        lines.append(f'  remote:   {report.remote_url}')
    if report.identity:
        lines.append(f'  identity: {report.identity}')
    if not report.colour:
        lines.append('  no colour (no remote, override or identity)')
    lines.append('')

    for name, data in report.sections.items():
        lines.append(f'── {name}')
        if name == 'show':
            lines.append(f'  {data["text"]}')
            for tip in data['tooltip'].splitlines():
                lines.append(f'    {tip}')
            if 'applied' in data:
                lines.append(f'  settings     {"applied" if data["applied"] else "not applied"}')
        elif name in ('derive', 'check') and 'accents' in data:
            if 'base' in data:
                lines.append(f'  base         {data["base"]}')
            lines.extend(_format_accents(data['accents']))
        elif name in ('apply', 'reset'):
            action = data.get('action', name)
            lines.append(f'  {action}: {data.get("settings")}')
            for key, value in data.get('colours', {}).items():
                lines.append(f'    {key} = {value}')
            for key in data.get('removed', []):
                lines.append(f'    - {key}')
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {name}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} accents  FAIL {report.fail_count}/{total} accents')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'workspace': report.workspace,
        'colour': report.colour,
        'remote': report.remote_url,
        'identity': report.identity,
        'commands': report.sections,
    }
    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {
            'total': total,
            'pass': report.pass_count,
            'fail': report.fail_count,
        }
    return json.dumps(obj, indent=2)


def accent_rows(derived: DerivedColours) -> list[dict[str, Any]]:
    """Accent colours as plain dicts for report sections."""
    return [
        {
            'name': a.name,
            'adjustment': a.adjustment.value,
            'background': a.background,
            'foreground': a.foreground,
        }
        for a in derived.accents
    ]
