"""Git remote URL discovery.

The only process-spawning code in the project. Any failure (git missing,
not a repository, unknown remote, timeout) is reported as None.
"""

import subprocess

DEFAULT_TIMEOUT = 5.0


def get_remote_url(workspace: str, remote_name: str = 'origin', timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """Return `git remote get-url <remote_name>` for workspace, or None."""
    try:
        result = subprocess.run(
            ['git', 'remote', 'get-url', remote_name],
            cwd=workspace,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (FileNotFoundError, NotADirectoryError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    url = result.stdout.strip()
    return url or None


def remote_lookup(timeout: float = DEFAULT_TIMEOUT):
    """Bind a timeout, giving a (workspace, remote_name) -> str | None lookup."""

    def lookup(workspace: str, remote_name: str) -> str | None:
        return get_remote_url(workspace, remote_name, timeout=timeout)

    return lookup
