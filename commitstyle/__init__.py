"""Audit git commit messages against the 50/72 rule."""

__version__ = '0.1'
