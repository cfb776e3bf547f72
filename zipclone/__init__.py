"""
``zipclone``
============

Zips an iterable with repeated copies of a single seed value, handing
the original seed to the final item so that one copy is saved. Copies
are made lazily, and not at all for items passed over with ``skip()``,
``nth()``, ``last()`` or ``count()``.
"""
from ._version import __version__
from . import base
from .adapter import ZipCloneIterator, default_duplicate, zip_clone
from .lookahead import Lookahead


__all__ = [
    "__version__",
    "base",
    "Lookahead",
    "ZipCloneIterator",
    "default_duplicate",
    "zip_clone",
]
