"""Tests for remote_colour.core.hashing — FNV-1a 32-bit."""

from remote_colour.core.hashing import FNV_OFFSET_BASIS, FNV_PRIME, fnv1a_32


def _fnv_units(units: list[int]) -> int:
    h = FNV_OFFSET_BASIS
    for u in units:
        h = ((h ^ u) * FNV_PRIME) & 0xFFFFFFFF
    return h


class TestFnv1a32:
    def test_empty_is_offset_basis(self):
        assert fnv1a_32('') == 0x811C9DC5

    def test_reference_vectors(self):
        assert fnv1a_32('a') == 0xE40C292C
        assert fnv1a_32('foobar') == 0xBF9CF968

    def test_deterministic(self):
        assert fnv1a_32('hello') == fnv1a_32('hello')

    def test_distinct_inputs(self):
        assert fnv1a_32('github.com/foo/bar') != fnv1a_32('github.com/baz/qux')

    def test_range(self):
        for s in ['', 'a', 'github.com/foo/bar', 'x' * 1000, 'ünïcödé', '\U0001f600']:
            assert 0 <= fnv1a_32(s) <= 0xFFFFFFFF

    def test_hashes_code_units_not_bytes(self):
        # U+00E9 is one UTF-16 code unit but two UTF-8 bytes
        assert fnv1a_32('é') == _fnv_units([0xE9])

    def test_astral_char_is_surrogate_pair(self):
        assert fnv1a_32('\U0001f600') == _fnv_units([0xD83D, 0xDE00])
