"""Workspace settings store: .vscode/settings.json colour customizations.

Only the keys this tool manages are touched; anything else the user keeps
under workbench.colorCustomizations (or elsewhere in the file) survives.
"""

import json
from pathlib import Path
from typing import Any

CUSTOMIZATIONS_KEY = 'workbench.colorCustomizations'


class SettingsError(ValueError):
    """A settings file that exists but cannot be used."""


def load_settings(path: Path) -> dict[str, Any]:
    """Read a settings file. A missing or empty file is an empty dict."""
    if not path.is_file():
        return {}
    text = path.read_text(encoding='utf-8')
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsError(f'Cannot parse {path}: {e}') from e
    if not isinstance(data, dict):
        raise SettingsError(f'{path} does not contain a JSON object')
    return data


def save_settings(path: Path, settings: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings, indent=4) + '\n', encoding='utf-8')


def _existing_customizations(settings: dict[str, Any], path: Path) -> dict[str, str]:
    existing = settings.get(CUSTOMIZATIONS_KEY) or {}
    if not isinstance(existing, dict):
        raise SettingsError(f'{CUSTOMIZATIONS_KEY} in {path} is not an object')
    return dict(existing)


def current_customizations(path: Path) -> dict[str, str]:
    return _existing_customizations(load_settings(path), path)


def apply_colours(path: Path, colours: dict[str, str], managed: list[str]) -> dict[str, str]:
    """Merge colours into the settings file, dropping stale managed keys first.

    Returns the resulting customization mapping.
    """
    settings = load_settings(path)
    merged = _existing_customizations(settings, path)
    for key in managed:
        merged.pop(key, None)
    merged.update(colours)
    settings[CUSTOMIZATIONS_KEY] = merged
    save_settings(path, settings)
    return merged


def reset_colours(path: Path, managed: list[str]) -> list[str]:
    """Remove managed keys. Drops the customization key entirely when nothing remains.

    Returns the keys that were removed. A missing settings file is left alone.
    """
    if not path.is_file():
        return []
    settings = load_settings(path)
    remaining = _existing_customizations(settings, path)
    removed = [key for key in managed if key in remaining]
    if not removed and CUSTOMIZATIONS_KEY not in settings:
        return []
    for key in removed:
        del remaining[key]
    if remaining:
        settings[CUSTOMIZATIONS_KEY] = remaining
    else:
        settings.pop(CUSTOMIZATIONS_KEY, None)
    save_settings(path, settings)
    return removed
