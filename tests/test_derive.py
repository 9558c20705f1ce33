"""Tests for remote_colour.core.derive — the derivation pipeline and state resolution."""

import pytest
from remote_colour.core.derive import (
    KNOWN_ELEMENTS,
    SASH_KEY,
    colour_customizations,
    derive_base_colour,
    derive_colours,
    derive_from_base,
    managed_keys,
    resolve_state,
)
from remote_colour.core.hashing import fnv1a_32
from remote_colour.core.palette import ParseError, hash_to_hex
from remote_colour.core.types import Adjustment, ColourConfig, ColourState


def _lookup_returning(url):
    calls = []

    def lookup(workspace, remote_name):
        calls.append((workspace, remote_name))
        return url

    lookup.calls = calls
    return lookup


class TestDeriveBaseColour:
    def test_known_identity(self):
        # fnv1a_32('a') % 360 == 340
        assert derive_base_colour('a', 50, 40) == '#993355'

    def test_equivalent_urls_share_colour(self):
        a = derive_base_colour('git@github.com:foo/bar.git', 50, 40)
        b = derive_base_colour('https://github.com/foo/bar', 50, 40)
        assert a == b

    def test_different_repos_differ(self):
        a = derive_base_colour('github.com/foo/bar', 50, 40)
        b = derive_base_colour('github.com/baz/qux', 50, 40)
        assert a != b

    def test_saturation_zero_is_grey(self):
        r, g, b = (derive_base_colour('github.com/foo/bar', 0, 40)[i : i + 2] for i in (1, 3, 5))
        assert r == g == b


class TestDeriveColours:
    def test_default_config_has_status_bar(self):
        derived = derive_colours('a', ColourConfig())
        assert derived.base == '#993355'
        assert derived.identity == 'a'
        assert [a.name for a in derived.accents] == ['statusBar']
        status = derived.accents[0]
        assert status.adjustment == Adjustment.NONE
        assert status.background == '#993355'
        assert status.foreground == '#e7e7e7'

    def test_identity_is_normalized(self):
        derived = derive_colours('  A  ', ColourConfig())
        assert derived.identity == 'a'
        assert derived.base == '#993355'

    def test_identity_hashed_as_reported(self):
        # one normalize pass leaves the .git of a .git/ url in place
        derived = derive_colours('https://github.com/foo/bar.git/', ColourConfig())
        assert derived.identity == 'github.com/foo/bar.git'
        assert derived.base == hash_to_hex(fnv1a_32('github.com/foo/bar.git'), 50, 40)
        assert derived.base != derive_colours('github.com/foo/bar', ColourConfig()).base

    def test_accent_directives(self):
        config = ColourConfig(accents={'statusBar': Adjustment.NONE, 'titleBar': Adjustment.DARKEN})
        derived = derive_colours('a', config)
        by_name = {a.name: a for a in derived.accents}
        assert by_name['titleBar'].background == '#822b48'
        assert by_name['statusBar'].background == '#993355'

    def test_custom_foregrounds(self):
        config = ColourConfig(light_foreground='#ffffff', dark_foreground='#000000')
        derived = derive_colours('a', config)
        assert derived.accents[0].foreground == '#ffffff'

    def test_deterministic(self):
        config = ColourConfig(accents={'statusBar': Adjustment.LIGHTEN, 'activityBar': Adjustment.DARKEN})
        first = derive_colours('git@github.com:foo/bar.git', config)
        for _ in range(5):
            assert derive_colours('git@github.com:foo/bar.git', config) == first

    def test_no_accents(self):
        derived = derive_colours('a', ColourConfig(accents={}))
        assert derived.accents == []
        assert colour_customizations(derived) == {SASH_KEY: '#993355'}


class TestDeriveFromBase:
    def test_override_lowercased(self):
        derived = derive_from_base('#ABCDEF', ColourConfig())
        assert derived.base == '#abcdef'
        assert derived.identity is None

    def test_malformed_raises(self):
        with pytest.raises(ParseError):
            derive_from_base('#abc', ColourConfig())


class TestColourCustomizations:
    def test_keys(self):
        config = ColourConfig(accents={'statusBar': Adjustment.NONE, 'titleBar': Adjustment.DARKEN})
        colours = colour_customizations(derive_colours('a', config))
        assert colours == {
            'statusBar.background': '#993355',
            'statusBar.foreground': '#e7e7e7',
            'titleBar.background': '#822b48',
            'titleBar.foreground': '#e7e7e7',
            'sash.hoverBorder': '#993355',
        }


class TestManagedKeys:
    def test_known_elements_always_managed(self):
        keys = managed_keys(ColourConfig(accents={}))
        for name in KNOWN_ELEMENTS:
            assert f'{name}.background' in keys
            assert f'{name}.foreground' in keys
        assert SASH_KEY in keys

    def test_custom_accent_managed(self):
        keys = managed_keys(ColourConfig(accents={'panel': Adjustment.LIGHTEN}))
        assert 'panel.background' in keys
        assert 'panel.foreground' in keys

    def test_no_duplicates(self):
        keys = managed_keys(ColourConfig(accents={'statusBar': Adjustment.NONE}))
        assert len(keys) == len(set(keys))


class TestResolveState:
    def test_remote_lookup(self):
        lookup = _lookup_returning('git@github.com:foo/bar.git')
        state = resolve_state('/work', ColourConfig(remote_name='upstream'), lookup)
        assert lookup.calls == [('/work', 'upstream')]
        assert state.remote_url == 'git@github.com:foo/bar.git'
        assert state.identity == 'github.com/foo/bar'
        assert state.colour == derive_base_colour('github.com/foo/bar', 50, 40)
        assert state.has_colour

    def test_no_remote_is_empty_state(self):
        state = resolve_state('/work', ColourConfig(), _lookup_returning(None))
        assert state == ColourState()
        assert not state.has_colour

    def test_colour_override_wins(self):
        lookup = _lookup_returning('git@github.com:foo/bar.git')
        state = resolve_state('/work', ColourConfig(colour_override='#336699', identity_override='x'), lookup)
        assert state.colour == '#336699'
        assert state.remote_url is None
        assert state.identity is None
        assert lookup.calls == []

    def test_invalid_override_ignored(self, capsys):
        lookup = _lookup_returning('https://github.com/foo/bar')
        state = resolve_state('/work', ColourConfig(colour_override='blue'), lookup)
        assert state.identity == 'github.com/foo/bar'
        assert 'ignoring invalid colour override' in capsys.readouterr().err

    def test_identity_override_skips_lookup(self):
        lookup = _lookup_returning('https://github.com/other/repo')
        state = resolve_state('/work', ColourConfig(identity_override='a'), lookup)
        assert state.colour == '#993355'
        assert state.identity == 'a'
        assert state.remote_url is None
        assert lookup.calls == []

    def test_empty_string_from_lookup_is_absence(self):
        state = resolve_state('/work', ColourConfig(), _lookup_returning(''))
        assert state == ColourState()
