"""Android API classes and constants for the auto-media library.

Loads all required Android API classes via jnius and exposes the constants
needed for media playback and session publishing.

If loading fails, a critical error is logged and the exception is re-raised.
There is no valid fallback: this module must only be imported on Android.
"""

import logging

logger = logging.getLogger(__name__)

try:
    from jnius import JavaException, PythonJavaClass, autoclass, java_method

    # Playback
    MediaPlayer = autoclass("android.media.MediaPlayer")
    AudioAttributesBuilder = autoclass("android.media.AudioAttributes$Builder")
    Uri = autoclass("android.net.Uri")

    # Session
    MediaSession = autoclass("android.media.session.MediaSession")
    PlaybackStateBuilder = autoclass("android.media.session.PlaybackState$Builder")
    MediaMetadataBuilder = autoclass("android.media.MediaMetadata$Builder")
    SystemClock = autoclass("android.os.SystemClock")

    # Constant sources (not part of public API, only used to read constants below)
    _AudioAttributes = autoclass("android.media.AudioAttributes")
    _PlaybackState = autoclass("android.media.session.PlaybackState")
    _MediaMetadata = autoclass("android.media.MediaMetadata")

    # AudioAttributes constants
    USAGE_MEDIA = _AudioAttributes.USAGE_MEDIA
    CONTENT_TYPE_MUSIC = _AudioAttributes.CONTENT_TYPE_MUSIC

    # MediaSession flags
    FLAG_HANDLES_MEDIA_BUTTONS = MediaSession.FLAG_HANDLES_MEDIA_BUTTONS
    FLAG_HANDLES_TRANSPORT_CONTROLS = MediaSession.FLAG_HANDLES_TRANSPORT_CONTROLS

    # PlaybackState constants
    STATE_NONE = _PlaybackState.STATE_NONE
    STATE_PAUSED = _PlaybackState.STATE_PAUSED
    STATE_PLAYING = _PlaybackState.STATE_PLAYING

    # MediaMetadata keys
    METADATA_KEY_MEDIA_ID = _MediaMetadata.METADATA_KEY_MEDIA_ID
    METADATA_KEY_TITLE = _MediaMetadata.METADATA_KEY_TITLE
    METADATA_KEY_ARTIST = _MediaMetadata.METADATA_KEY_ARTIST
    METADATA_KEY_DURATION = _MediaMetadata.METADATA_KEY_DURATION

except Exception:
    logger.critical("Failed to load Android APIs - cannot continue", exc_info=True)
    raise


def get_context():
    """Return the running python-for-android service, or the activity when there is none."""
    service = autoclass("org.kivy.android.PythonService").mService
    if service is not None:
        return service
    return autoclass("org.kivy.android.PythonActivity").mActivity


__all__ = [
    # jnius helpers needed by the listeners
    "JavaException",
    "PythonJavaClass",
    "java_method",
    # Playback
    "MediaPlayer",
    "AudioAttributesBuilder",
    "Uri",
    # Session
    "MediaSession",
    "PlaybackStateBuilder",
    "MediaMetadataBuilder",
    "SystemClock",
    # Constants
    "USAGE_MEDIA",
    "CONTENT_TYPE_MUSIC",
    "FLAG_HANDLES_MEDIA_BUTTONS",
    "FLAG_HANDLES_TRANSPORT_CONTROLS",
    "STATE_NONE",
    "STATE_PAUSED",
    "STATE_PLAYING",
    "METADATA_KEY_MEDIA_ID",
    "METADATA_KEY_TITLE",
    "METADATA_KEY_ARTIST",
    "METADATA_KEY_DURATION",
    # Helpers
    "get_context",
]
