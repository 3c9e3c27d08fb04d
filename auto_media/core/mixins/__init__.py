"""Mixin classes for the auto-media library."""

from .lock import LockMixin

__all__ = [
    "LockMixin",
]
