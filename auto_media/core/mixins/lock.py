"""Lock mixin for thread-safe operations."""

import threading


class LockMixin:
    """Mixin that provides a reentrant lock for thread-safe operations.

    Player backends deliver their notifications on their own threads; the
    lock keeps those callbacks from observing a half-updated session.
    """

    def __init__(self, *args, **kwargs):
        """Initialize the lock."""
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()
