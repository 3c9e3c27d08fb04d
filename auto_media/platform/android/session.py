"""Android session publisher using android.media.session.MediaSession.

This module only publishes state and metadata. The Java MediaBrowserService
hosting the interpreter owns the rest of the wiring: it hands `token` to
setSessionToken() and routes its MediaSession.Callback (onPlay, onPause,
onPlayFromMediaId) and its onGetRoot / onLoadChildren to MusicService.
"""

import logging

from auto_media.core.base_session import BaseSessionPublisher
from auto_media.core.state import PlaybackState

from ._android_api import (
    FLAG_HANDLES_MEDIA_BUTTONS,
    FLAG_HANDLES_TRANSPORT_CONTROLS,
    METADATA_KEY_ARTIST,
    METADATA_KEY_DURATION,
    METADATA_KEY_MEDIA_ID,
    METADATA_KEY_TITLE,
    STATE_NONE,
    STATE_PAUSED,
    STATE_PLAYING,
    MediaMetadataBuilder,
    MediaSession,
    PlaybackStateBuilder,
    SystemClock,
    get_context,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidSessionPublisher",
]

# Maps PlaybackState -> android.media.session.PlaybackState constant
_STATE_CODES = {
    PlaybackState.IDLE: STATE_NONE,
    PlaybackState.PAUSED: STATE_PAUSED,
    PlaybackState.PLAYING: STATE_PLAYING,
}


class AndroidSessionPublisher(BaseSessionPublisher):
    """Publishes playback state and metadata on a platform MediaSession.

    The session token (see token) is what a MediaBrowserService hands to
    the platform so browsing clients can attach a MediaController.
    """

    def __init__(self, tag, context=None):
        """Initialize the AndroidSessionPublisher.

        Args:
            tag: Session tag, used by the platform for debugging
            context: Android Context, defaults to the running service or activity
        """
        context = context if context is not None else get_context()
        self._session = MediaSession(context, tag)
        logger.debug("AndroidSessionPublisher initialized: %s", tag)

    @property
    def token(self):
        return self._session.getSessionToken()

    def activate(self):
        logger.debug("AndroidSessionPublisher.activate()")
        self._session.setFlags(FLAG_HANDLES_MEDIA_BUTTONS | FLAG_HANDLES_TRANSPORT_CONTROLS)
        self._session.setActive(True)

    def publish_state(self, snapshot):
        state = (
            PlaybackStateBuilder()
            .setActions(int(snapshot.actions))
            .setState(
                _STATE_CODES[snapshot.state],
                snapshot.position,
                float(snapshot.playback_rate),
                snapshot.updated_at,
            )
            .build()
        )
        self._session.setPlaybackState(state)

    def publish_metadata(self, track):
        logger.debug("AndroidSessionPublisher.publish_metadata(%s)", track.id)
        metadata = (
            MediaMetadataBuilder()
            .putString(METADATA_KEY_MEDIA_ID, track.id)
            .putString(METADATA_KEY_TITLE, track.title)
            .putString(METADATA_KEY_ARTIST, track.artist)
            .putLong(METADATA_KEY_DURATION, track.duration)
            .build()
        )
        self._session.setMetadata(metadata)

    def release(self):
        logger.debug("AndroidSessionPublisher.release()")
        self._session.release()

    def elapsed_realtime(self):
        return SystemClock.elapsedRealtime()
