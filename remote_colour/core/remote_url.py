"""Canonical form for git remote URLs.

Equivalent spellings of one remote hash to the same colour:

    git@github.com:foo/bar.git       -> github.com/foo/bar
    https://github.com/foo/bar/      -> github.com/foo/bar
    ssh://git@github.com/foo/bar     -> github.com/foo/bar

Each rewrite runs once, in order, so `.git` is stripped before trailing
slashes: https://github.com/foo/bar.git/ gives github.com/foo/bar.git, and
normalizing that again would drop the `.git`.

Never raises; unrecognised input comes back trimmed and lowercased with
whichever of the rewrites below applied.
"""

import re

_SSH_SHORTHAND = re.compile(r'^[\w-]+@([^:]+):(.+)$', re.ASCII)
_SCHEME = re.compile(r'^(https?://|git://|ssh://)')
_AUTH = re.compile(r'^[^@]+@')
_GIT_SUFFIX = re.compile(r'\.git$')
_TRAILING_SLASHES = re.compile(r'/+$')


def normalize_remote_url(url: str) -> str:
    normalized = url.strip().lower()

    # user@host:path -> host/path
    m = _SSH_SHORTHAND.match(normalized)
    if m:
        normalized = f'{m.group(1)}/{m.group(2)}'

    normalized = _SCHEME.sub('', normalized, count=1)
    # user@ or user:password@
    normalized = _AUTH.sub('', normalized, count=1)
    normalized = _GIT_SUFFIX.sub('', normalized, count=1)
    normalized = _TRAILING_SLASHES.sub('', normalized, count=1)
    return normalized
