"""Session publisher that logs every publication and keeps the latest in memory."""

import logging

from auto_media.core.base_session import BaseSessionPublisher

logger = logging.getLogger(__name__)

__all__ = [
    "LoggingSessionPublisher",
]


class LoggingSessionPublisher(BaseSessionPublisher):
    """Session publisher for platforms without a system media session.

    Attributes:
        tag: Session tag, used as log prefix
        active: True between activate() and release()
        snapshot: Last published PlaybackSnapshot
        metadata: Last published Track
    """

    def __init__(self, tag):
        self.tag = tag
        self.active = False
        self.snapshot = None
        self.metadata = None

    def activate(self):
        logger.debug("LoggingSessionPublisher.activate()")
        self.active = True

    def publish_state(self, snapshot):
        self.snapshot = snapshot
        logger.info(
            "[%s] %s at %dms (rate %.1f)", self.tag, snapshot.state.name, snapshot.position, snapshot.playback_rate
        )

    def publish_metadata(self, track):
        self.metadata = track
        logger.info("[%s] now playing %r by %r", self.tag, track.title, track.artist)

    def release(self):
        logger.debug("LoggingSessionPublisher.release()")
        self.active = False
