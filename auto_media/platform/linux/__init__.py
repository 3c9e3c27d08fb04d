"""Linux platform implementation for the auto-media library.

Playback goes through libvlc; the session is published to the log and kept
in memory, as there is no system-wide media session to feed.
"""

from .player import VLCMediaPlayer
from .session import LoggingSessionPublisher

__all__ = [
    "VLCMediaPlayer",
    "LoggingSessionPublisher",
]
