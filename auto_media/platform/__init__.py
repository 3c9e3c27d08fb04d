"""Platform-specific implementations for the auto-media library.

This module selects the media player and session publisher for the running
platform.
"""

import logging

from currentplatform import platform

logger = logging.getLogger(__name__)

__all__ = [
    "MediaPlayer",
    "SessionPublisher",
]


if platform in ("linux", "windows"):
    # Linux and Windows share the same libvlc-based implementation
    from .linux import LoggingSessionPublisher as SessionPublisher
    from .linux import VLCMediaPlayer as MediaPlayer
elif platform == "android":
    from .android import AndroidMediaPlayer as MediaPlayer
    from .android import AndroidSessionPublisher as SessionPublisher
else:
    logger.critical("No implementation found for platform %s", platform)
    raise NotImplementedError(f"No implementation available for platform: {platform}")
