"""Android media player implementation using android.media.MediaPlayer.

This module provides the AndroidMediaPlayer class which streams a track's
locator through the platform MediaPlayer. Preparation runs in the
background (prepareAsync) and completion is reported through an
OnPreparedListener implemented in Python.
"""

import logging

from auto_media.core.base_player import BaseMediaPlayer
from auto_media.core.exceptions import SourceAttachFailed

from ._android_api import (
    CONTENT_TYPE_MUSIC,
    USAGE_MEDIA,
    AudioAttributesBuilder,
    JavaException,
    MediaPlayer,
    PythonJavaClass,
    Uri,
    get_context,
    java_method,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AndroidMediaPlayer",
]


class _OnPreparedListener(PythonJavaClass):
    """Bridges MediaPlayer.OnPreparedListener to a Python callable.

    Android calls onPrepared on the thread that owns the player's looper.
    """

    __javainterfaces__ = ["android/media/MediaPlayer$OnPreparedListener"]
    __javacontext__ = "app"

    def __init__(self, callback, **kwargs):
        super().__init__(**kwargs)
        self.callback = callback

    @java_method("(Landroid/media/MediaPlayer;)V")
    def onPrepared(self, mp):
        logger.debug("_OnPreparedListener.onPrepared()")
        self.callback()


class AndroidMediaPlayer(BaseMediaPlayer):
    """Media player backed by android.media.MediaPlayer."""

    def __init__(self, context=None):
        """Initialize the AndroidMediaPlayer.

        Args:
            context: Android Context used to resolve locators, defaults to the
                running service or activity
        """
        self._context = context if context is not None else get_context()
        # The listener must outlive prepareAsync(); jnius only keeps a weak link.
        self._prepared_listener = None
        self._mediaplayer = MediaPlayer()
        self._mediaplayer.setAudioAttributes(
            AudioAttributesBuilder().setUsage(USAGE_MEDIA).setContentType(CONTENT_TYPE_MUSIC).build()
        )
        logger.debug("AndroidMediaPlayer initialized")

    def reset(self):
        logger.debug("AndroidMediaPlayer.reset()")
        self._mediaplayer.reset()
        self._prepared_listener = None

    def set_source(self, locator):
        logger.debug("AndroidMediaPlayer.set_source(%s)", locator)
        try:
            self._mediaplayer.setDataSource(self._context, Uri.parse(locator))
        except JavaException as e:
            raise SourceAttachFailed(locator, e) from e

    def prepare_async(self, on_ready):
        logger.debug("AndroidMediaPlayer.prepare_async()")
        self._prepared_listener = _OnPreparedListener(on_ready)
        self._mediaplayer.setOnPreparedListener(self._prepared_listener)
        self._mediaplayer.prepareAsync()

    def start(self):
        logger.debug("AndroidMediaPlayer.start()")
        self._mediaplayer.start()

    def pause(self):
        logger.debug("AndroidMediaPlayer.pause()")
        self._mediaplayer.pause()

    def current_position(self):
        return self._mediaplayer.getCurrentPosition()

    def release(self):
        logger.debug("AndroidMediaPlayer.release()")
        if self._mediaplayer:
            self._mediaplayer.release()
            self._mediaplayer = None
        self._prepared_listener = None
