"""Colour derivation pipeline.

identifying string -> normalize -> FNV-1a -> hue -> base colour
base colour -> per-accent adjusted background + contrasting foreground

Everything here except resolve_state() is a pure function of its inputs.
resolve_state() takes the remote lookup as an argument so the pipeline
never spawns processes itself.
"""

import sys

from remote_colour.core.contrast import contrast_foreground
from remote_colour.core.hashing import fnv1a_32
from remote_colour.core.palette import apply_adjustment, hash_to_hex, hex_to_rgb, is_hex_colour, rgb_to_hex
from remote_colour.core.remote_url import normalize_remote_url
from remote_colour.core.types import AccentColours, ColourConfig, ColourState, DerivedColours, RemoteLookup

# Elements the host knows how to colour; reset clears all of them
KNOWN_ELEMENTS = ('statusBar', 'titleBar', 'activityBar')

SASH_KEY = 'sash.hoverBorder'


def derive_base_colour(identity: str, saturation: int, lightness: int) -> str:
    return hash_to_hex(fnv1a_32(normalize_remote_url(identity)), saturation, lightness)


def derive_accents(base: str, config: ColourConfig) -> list[AccentColours]:
    accents = []
    for name, adjustment in config.accents.items():
        bg = apply_adjustment(base, adjustment, config.adjustment_amount)
        fg = contrast_foreground(
            bg,
            light_fg=config.light_foreground,
            dark_fg=config.dark_foreground,
            policy=config.foreground_policy,
        )
        accents.append(AccentColours(name=name, adjustment=adjustment, background=bg, foreground=fg))
    return accents


def derive_from_base(base: str, config: ColourConfig, identity: str | None = None) -> DerivedColours:
    """Derive accents from an already-chosen base colour (e.g. a manual override)."""
    base = rgb_to_hex(*hex_to_rgb(base))
    return DerivedColours(identity=identity, base=base, accents=derive_accents(base, config))


def derive_colours(identity: str, config: ColourConfig) -> DerivedColours:
    """Derive the base colour and every configured accent from an identifying string.

    The identity is normalized exactly once; the reported identity is the
    string that was hashed.
    """
    normalized = normalize_remote_url(identity)
    base = hash_to_hex(fnv1a_32(normalized), config.saturation, config.lightness)
    return derive_from_base(base, config, identity=normalized)


def colour_customizations(derived: DerivedColours) -> dict[str, str]:
    """UI key -> colour mapping, ready to merge into workspace settings."""
    colours: dict[str, str] = {}
    for accent in derived.accents:
        colours[f'{accent.name}.background'] = accent.background
        colours[f'{accent.name}.foreground'] = accent.foreground
    # Sash hover border uses the base colour as a subtle accent
    colours[SASH_KEY] = derived.base
    return colours


def managed_keys(config: ColourConfig) -> list[str]:
    """Every settings key this tool may have written for the given config."""
    names = list(KNOWN_ELEMENTS) + [n for n in config.accents if n not in KNOWN_ELEMENTS]
    keys = []
    for name in names:
        keys.append(f'{name}.background')
        keys.append(f'{name}.foreground')
    keys.append(SASH_KEY)
    return keys


def resolve_state(workspace: str, config: ColourConfig, lookup: RemoteLookup) -> ColourState:
    """Work out the current colour for a workspace.

    Order: valid colour override, then literal identity override, then the
    remote URL from lookup(). No source at all gives the empty state.
    """
    override = config.colour_override
    if override:
        if is_hex_colour(override):
            derived = derive_from_base(override, config)
            return ColourState(colour=derived.base, derived=derived)
        print(f'remote-colour: ignoring invalid colour override {override!r}', file=sys.stderr)

    if config.identity_override:
        derived = derive_colours(config.identity_override, config)
        return ColourState(colour=derived.base, identity=derived.identity, derived=derived)

    remote_url = lookup(workspace, config.remote_name)
    if not remote_url:
        return ColourState()

    derived = derive_colours(remote_url, config)
    return ColourState(colour=derived.base, remote_url=remote_url, identity=derived.identity, derived=derived)
