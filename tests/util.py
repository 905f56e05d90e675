"""Utility functions used in multiple tests."""

from typing import Any, Optional
from unittest.mock import patch

from commitstyle import config
from commitstyle.commitdef import CommitRecord


def patch_config_get(key: str, value):
    """Mock config.get() to return a specific value for a given key.

    All other keys return the originally-configured value. Multiple items can be overridden by
    calling this more than once, but it cannot be used as a decorator in that case; it must
    be called within the test (for example as a context manager) because each patch must have access
    to the mock installed by the previous call, which isn't the case when called as a decorator.
    """
    def side_effect(k: str):
        return value if k == key else orig_get(k)

    # Use the original (or the previously-patched) get() for unmatched keys
    orig_get = config.get
    return patch('commitstyle.config.get', side_effect=side_effect)


def make_commit(subject: str = 'Subject', body: str = '', author: str = 'A U Thor <a@example.com>',
                commit_hash: str = 'ab' * 20) -> CommitRecord:
    """Return a commit record with reasonable defaults."""
    return CommitRecord(subject=subject, body=body, author=author, hash=commit_hash)


def api_entry(sha: str, message: str, name: str = 'A U Thor', email: Optional[str] = None
              ) -> dict[str, Any]:
    """Return a commits API entry holding only the fields that are used."""
    return {'sha': sha,
            'commit': {'message': message,
                       'author': {'name': name,
                                  'email': email if email is not None else 'a@example.com'}}}
