"""Remote normalization.

Two remote shapes are accepted:

- SSH: ``git@<host>:<owner>/<repo>[.git]``
- HTTPS: ``https://<host>/<owner>/<repo>[.git]``

Anything else raises :class:`MalformedRemoteError`.
"""

from forgelink.core.exceptions import MalformedRemoteError
from forgelink.core.models.remote import Remote

SSH_PREFIX = "git@"
HTTPS_PREFIX = "https://"
GIT_SUFFIX = ".git"


def normalize(remote: str) -> str:
    """Convert a remote to its HTTPS form.

    SSH remotes collapse to their origin:
    ``git@github.com:octo/cat.git`` -> ``https://github.com``.
    HTTPS remotes are returned unchanged.
    """
    if remote.startswith(SSH_PREFIX):
        user_host, sep, _ = remote.partition(":")
        if not sep:
            raise MalformedRemoteError(remote)
        return HTTPS_PREFIX + user_host.removeprefix(SSH_PREFIX)
    if remote.startswith(HTTPS_PREFIX):
        return remote
    raise MalformedRemoteError(remote)


def extract_host(remote: str) -> str:
    """Return the hostname of a remote."""
    return normalize(remote).removeprefix(HTTPS_PREFIX).partition("/")[0]


def extract_repo_slug(remote: str) -> str:
    """Return the ``owner/repo`` portion of a remote, ``.git`` and trailing ``/`` stripped."""
    if remote.startswith(SSH_PREFIX):
        _, sep, slug = remote.partition(":")
        if not sep:
            raise MalformedRemoteError(remote)
    elif remote.startswith(HTTPS_PREFIX):
        prefix = f"{HTTPS_PREFIX}{extract_host(remote)}/"
        slug = remote.removeprefix(prefix) if remote.startswith(prefix) else ""
    else:
        raise MalformedRemoteError(remote)
    return slug.rstrip("/").removesuffix(GIT_SUFFIX)


def parse_remote(remote: str) -> Remote:
    """Parse a raw remote string into a :class:`Remote`."""
    host = extract_host(remote)
    repo_slug = extract_repo_slug(remote)
    if not host or not repo_slug:
        raise MalformedRemoteError(remote)
    return Remote(raw=remote, host=host, repo_slug=repo_slug)
