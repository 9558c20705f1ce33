"""Tests for remote_colour.core.contrast — luminance, contrast ratio, foreground choice."""

import pytest
from remote_colour.core.contrast import (
    DEFAULT_DARK_FG,
    DEFAULT_LIGHT_FG,
    contrast_foreground,
    contrast_ratio,
    relative_luminance,
    wcag_levels,
)
from remote_colour.core.palette import ParseError

PAIRS = [
    ('#000000', '#ffffff'),
    ('#336699', '#e7e7e7'),
    ('#997755', '#15202b'),
    ('#ff0000', '#00ff00'),
]


class TestRelativeLuminance:
    def test_black(self):
        assert relative_luminance('#000000') == 0.0

    def test_white(self):
        assert relative_luminance('#ffffff') == pytest.approx(1.0)

    def test_green_dominates(self):
        assert relative_luminance('#00ff00') > relative_luminance('#ff0000') > relative_luminance('#0000ff')

    def test_in_unit_range(self):
        for c in ['#123456', '#997755', '#e7e7e7', '#15202b']:
            assert 0.0 <= relative_luminance(c) <= 1.0

    def test_malformed_raises(self):
        with pytest.raises(ParseError):
            relative_luminance('#xyzxyz')


class TestContrastRatio:
    def test_black_white(self):
        assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)

    def test_same_colour(self):
        for c in ['#000000', '#ffffff', '#997755']:
            assert contrast_ratio(c, c) == pytest.approx(1.0)

    @pytest.mark.parametrize('a,b', PAIRS)
    def test_symmetry(self, a, b):
        assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    @pytest.mark.parametrize('a,b', PAIRS)
    def test_at_least_one(self, a, b):
        assert contrast_ratio(a, b) >= 1.0


class TestContrastForeground:
    def test_dark_background_gets_light(self):
        assert contrast_foreground('#000000') == DEFAULT_LIGHT_FG

    def test_light_background_gets_dark(self):
        assert contrast_foreground('#ffffff') == DEFAULT_DARK_FG

    def test_mid_background_is_legible(self):
        fg = contrast_foreground('#997755')
        assert contrast_ratio('#997755', fg) >= 3

    def test_custom_candidates(self):
        assert contrast_foreground('#000000', '#ffffff', '#000000') == '#ffffff'
        assert contrast_foreground('#ffffff', '#ffffff', '#000000') == '#000000'

    def test_threshold_near_boundary(self):
        # luminance ~0.181: just above the 0.179 threshold
        assert contrast_foreground('#767676') == DEFAULT_DARK_FG

    def test_ratio_policy_picks_higher_contrast(self):
        # light text has slightly better contrast on #767676 than the threshold choice
        assert contrast_foreground('#767676', policy='ratio') == DEFAULT_LIGHT_FG

    def test_ratio_policy_agrees_away_from_boundary(self):
        assert contrast_foreground('#000000', policy='ratio') == DEFAULT_LIGHT_FG
        assert contrast_foreground('#ffffff', policy='ratio') == DEFAULT_DARK_FG

    def test_unknown_policy_raises(self):
        with pytest.raises(ValueError):
            contrast_foreground('#000000', policy='loudest')


class TestWcagLevels:
    def test_max_contrast_passes_all(self):
        assert wcag_levels(21.0) == {'AA': True, 'AA-large': True, 'AAA': True}

    def test_large_text_only(self):
        assert wcag_levels(3.5) == {'AA': False, 'AA-large': True, 'AAA': False}

    def test_boundaries_inclusive(self):
        assert wcag_levels(4.5)['AA']
        assert wcag_levels(7.0)['AAA']
