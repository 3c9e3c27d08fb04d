"""Linux media player implementation using libvlc.

This module provides the VLCMediaPlayer class which streams a track's
locator through python-vlc. Preparation is libvlc's asynchronous media
parsing. libvlc dispatches the parsed event with its event lock held, so the
ready callback is handed to a short-lived thread instead of running there.
"""

import logging
import os
import shlex
import threading

from auto_media.core.base_player import BaseMediaPlayer
from auto_media.core.constants import VLC_ARGS_ENV
from auto_media.core.exceptions import SourceAttachFailed

try:
    import vlc
except ImportError as e:
    raise ImportError(
        "python-vlc is required for playback on Linux. Install it with: pip install auto-media[linux]"
    ) from e


logger = logging.getLogger(__name__)

__all__ = [
    "VLCMediaPlayer",
]

# Milliseconds libvlc may spend fetching a network source while preparing
_PARSE_TIMEOUT_MS = 10_000


class VLCMediaPlayer(BaseMediaPlayer):
    """Media player backed by a libvlc media player.

    Locators with a scheme (``http://``, ``file://``...) are handed to libvlc
    as-is; anything else is treated as a local path and must exist.
    """

    def __init__(self, instance_args=None):
        """Initialize the VLCMediaPlayer.

        Args:
            instance_args: libvlc arguments, defaults to the shell-split value
                of AUTO_MEDIA_VLC_ARGS
        """
        if instance_args is None:
            instance_args = shlex.split(os.environ.get(VLC_ARGS_ENV, ""))
        self._instance = vlc.Instance(instance_args)
        self._player = self._instance.media_player_new()
        self._media = None
        self._on_ready = None
        logger.debug("VLCMediaPlayer initialized: %s", instance_args)

    def reset(self):
        logger.debug("VLCMediaPlayer.reset()")
        self._player.stop()
        self._detach_media()

    def set_source(self, locator):
        logger.debug("VLCMediaPlayer.set_source(%s)", locator)
        if not locator:
            raise SourceAttachFailed(locator, "empty locator")
        if "://" in locator:
            media = self._instance.media_new(locator)
        elif os.path.isfile(locator):
            media = self._instance.media_new_path(locator)
        else:
            raise SourceAttachFailed(locator, "no such file")
        if media is None:
            raise SourceAttachFailed(locator, "rejected by libvlc")
        self._media = media
        self._player.set_media(media)

    def prepare_async(self, on_ready):
        logger.debug("VLCMediaPlayer.prepare_async()")
        if self._media is None:
            raise RuntimeError("prepare_async() called without a source")
        self._on_ready = on_ready
        self._media.event_manager().event_attach(vlc.EventType.MediaParsedChanged, self._on_parsed)
        if self._media.parse_with_options(vlc.MediaParseFlag.network, _PARSE_TIMEOUT_MS) == -1:
            logger.error("libvlc refused to parse %s", self._media.get_mrl())

    def _on_parsed(self, event):
        """Called by libvlc when parsing of the current media ends."""
        media = self._media
        on_ready = self._on_ready
        if media is None or on_ready is None:
            return
        status = media.get_parsed_status()
        logger.debug("VLCMediaPlayer._on_parsed(%s)", status)
        if status in (vlc.MediaParsedStatus.failed, vlc.MediaParsedStatus.timeout):
            logger.error("Failed to prepare %s: %s", media.get_mrl(), status)
            return
        self._on_ready = None
        threading.Thread(target=on_ready, daemon=True, name="VLCReady").start()

    def _detach_media(self):
        if self._media is not None:
            self._media.event_manager().event_detach(vlc.EventType.MediaParsedChanged)
            self._media.release()
        self._media = None
        self._on_ready = None

    def start(self):
        logger.debug("VLCMediaPlayer.start()")
        self._player.play()

    def pause(self):
        logger.debug("VLCMediaPlayer.pause()")
        self._player.set_pause(1)

    def current_position(self):
        # libvlc reports -1 when nothing is loaded
        return max(0, self._player.get_time())

    def release(self):
        logger.debug("VLCMediaPlayer.release()")
        self._player.stop()
        self._detach_media()
        self._player.release()
        self._instance.release()
