"""Repository identifier handling.

An identifier names either a local git repository or a repository hosted on GitHub.
"""

import enum
import os
import urllib.parse


class Source(enum.Enum):
    LOCAL = 'local'
    REMOTE = 'remote'


def resolve_source(identifier: str) -> Source:
    """Decide whether the identifier refers to a local or a remote repository.

    Anything that exists on the local file system is a local repository. Everything else is assumed
    to be a remote one; whether it is actually valid is only discovered when it is used.
    """
    if os.path.exists(os.path.expanduser(identifier)):
        return Source.LOCAL
    return Source.REMOTE


def get_project_name(identifier: str) -> tuple[str, str]:
    """Return the owner and project of a remote repository.

    The identifier is either in the form owner/project or a URL like
    https://github.com/owner/project (with an optional .git suffix).
    """
    scheme, netloc, path, query, fragment = urllib.parse.urlsplit(identifier)
    path = path.strip('/')
    path = path.removesuffix('.git')
    parts = path.split('/')
    # Sanity check identifier
    if len(parts) != 2 or not all(parts):
        raise RuntimeError(f'Unsupported repository identifier {identifier}')
    return (parts[0], parts[1])
