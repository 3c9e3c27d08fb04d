"""BaseSessionPublisher class for platform-specific media sessions."""

import logging
import time
from abc import ABC, abstractmethod

from .state import PlaybackSnapshot
from .track import Track

logger = logging.getLogger(__name__)

__all__ = [
    "BaseSessionPublisher",
]


class BaseSessionPublisher(ABC):
    """Base class for the object that mirrors playback state to remote observers.

    Nothing returned by the publisher is consumed by the controller.
    """

    def activate(self) -> None:
        """Make the session visible to controllers. Called once at service start."""
        logger.debug("%s.activate()", self.__class__.__name__)

    @abstractmethod
    def publish_state(self, snapshot: PlaybackSnapshot) -> None:
        """Publish playback state, position, rate, timestamp and supported actions."""
        raise NotImplementedError()

    @abstractmethod
    def publish_metadata(self, track: Track) -> None:
        """Publish the "now playing" metadata."""
        raise NotImplementedError()

    @abstractmethod
    def release(self) -> None:
        """Tear the session down."""
        raise NotImplementedError()

    def elapsed_realtime(self) -> int:
        """Return the clock used to timestamp published positions, in milliseconds."""
        return int(time.monotonic() * 1000)
