"""Android platform implementation for the auto-media library.

Playback goes through android.media.MediaPlayer and the state is mirrored on
an android.media.session.MediaSession, both reached through jnius.
"""

from .player import AndroidMediaPlayer
from .session import AndroidSessionPublisher

__all__ = [
    "AndroidMediaPlayer",
    "AndroidSessionPublisher",
]
