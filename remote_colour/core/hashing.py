"""FNV-1a 32-bit string hash.

Hashes UTF-16 code units (not UTF-8 bytes) so that a given string maps to
the same value as in JavaScript-hosted tools that hash `charCodeAt`.
"""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def _code_units(text: str):
    data = text.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def fnv1a_32(text: str) -> int:
    """Return the unsigned 32-bit FNV-1a hash of text. Empty string -> offset basis."""
    h = FNV_OFFSET_BASIS
    for unit in _code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK_32
    return h
