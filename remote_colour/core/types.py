"""Shared types for remote-colour: Adjustment, ColourConfig, derived colours, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

# (workspace, remote_name) -> remote URL, or None when there is no remote
RemoteLookup = Callable[[str, str], str | None]


class Adjustment(str, Enum):
    """How an accent colour relates to the base colour."""

    NONE = 'none'
    LIGHTEN = 'lighten'
    DARKEN = 'darken'


def _default_accents() -> dict[str, Adjustment]:
    return {'statusBar': Adjustment.NONE}


@dataclass
class ColourConfig:
    """Resolved configuration for one derivation."""

    saturation: int = 50  # clamped to [0, 100]
    lightness: int = 40  # clamped to [0, 100]
    accents: dict[str, Adjustment] = field(default_factory=_default_accents)
    adjustment_amount: int = 15  # percent, clamped to [0, 100]
    colour_override: str | None = None  # '#rrggbb', bypasses hashing
    identity_override: str | None = None  # literal identifying string
    remote_name: str = 'origin'
    light_foreground: str = '#e7e7e7'
    dark_foreground: str = '#15202b'
    foreground_policy: str = 'threshold'  # 'threshold' | 'ratio'
    git_timeout: float = 5.0


@dataclass
class AccentColours:
    """An adjusted background and the foreground chosen to sit on it."""

    name: str
    adjustment: Adjustment
    background: str
    foreground: str


@dataclass
class DerivedColours:
    """Everything derived from one identifying string (or one override colour)."""

    identity: str | None  # normalized identifying string, None for a manual override
    base: str
    accents: list[AccentColours] = field(default_factory=list)


@dataclass
class ColourState:
    """The current colour and where it came from. All None means no colour."""

    colour: str | None = None
    remote_url: str | None = None
    identity: str | None = None
    derived: DerivedColours | None = None

    @property
    def has_colour(self) -> bool:
        return self.colour is not None


@dataclass
class Context:
    """What a command runs against."""

    workspace: Path
    config: ColourConfig
    state: ColourState

    @property
    def settings_path(self) -> Path:
        return self.workspace / '.vscode' / 'settings.json'


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='derive', help='Print derived colours')

        @command.run
        def run(ctx, report, args):
            ...

    Commands that only touch settings pass needs_state=False; the CLI then
    skips the remote lookup and hands them an empty ColourState.
    """

    def __init__(self, name: str, help: str = '', needs_state: bool = True):
        self.name = name
        self.help = help
        self.needs_state = needs_state
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, ctx: Context, report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(ctx, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    workspace: str = ''
    colour: str | None = None
    remote_url: str | None = None
    identity: str | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    @classmethod
    def for_state(cls, workspace: str, state: ColourState) -> Report:
        return cls(
            workspace=workspace,
            colour=state.colour,
            remote_url=state.remote_url,
            identity=state.identity,
        )

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or extend) the results section for a command."""
        self.sections.setdefault(command_name, {}).update(data)

    def record_pass(self, name: str) -> None:
        self.pass_count += 1

    def record_fail(self, name: str) -> None:
        self.fail_count += 1
