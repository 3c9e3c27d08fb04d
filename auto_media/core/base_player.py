"""BaseMediaPlayer class for platform-specific media players.

This module provides the BaseMediaPlayer abstract base class which defines
the interface the playback controller drives. Decoding, buffering and network
fetch all happen behind it.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

logger = logging.getLogger(__name__)

__all__ = [
    "BaseMediaPlayer",
]


class BaseMediaPlayer(ABC):
    """Base class for platform-specific media players.

    Platform-specific implementations must implement:
    - reset(): Return the player to its idle state, dropping any source
    - set_source(): Attach a resource locator
    - prepare_async(): Start preparing the attached source without blocking
    - start() / pause(): Transport directives
    - current_position(): Playback position in milliseconds
    - release(): Free the underlying platform resources
    """

    @abstractmethod
    def reset(self) -> None:
        """Return the player to its idle state."""
        raise NotImplementedError()

    @abstractmethod
    def set_source(self, locator: str) -> None:
        """Attach the resource to play.

        Args:
            locator: URI or path resolvable by the platform player

        Raises:
            SourceAttachFailed: If the locator is invalid or unreachable
        """
        raise NotImplementedError()

    @abstractmethod
    def prepare_async(self, on_ready: Callable[[], None]) -> None:
        """Prepare the attached source in the background.

        Returns immediately. on_ready is called, possibly from another thread,
        once the source can be started.

        Args:
            on_ready: Callback invoked with no arguments when preparation completes
        """
        raise NotImplementedError()

    @abstractmethod
    def start(self) -> None:
        """Start or resume playback."""
        raise NotImplementedError()

    @abstractmethod
    def pause(self) -> None:
        """Pause playback."""
        raise NotImplementedError()

    @abstractmethod
    def current_position(self) -> int:
        """Return the playback position in milliseconds."""
        raise NotImplementedError()

    def release(self) -> None:
        """Free platform resources. The player must not be used afterwards."""
        logger.debug("%s.release()", self.__class__.__name__)
