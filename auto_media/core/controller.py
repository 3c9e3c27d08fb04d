"""Playback controller: the state machine between commands, player and session.

Commands (play, pause, play from id) arrive serially from the session
transport. The controller updates the current track, directs the player and
publishes a derived snapshot to the session.

Loading a track is two-phase. The PLAYING state and the track metadata are
published optimistically as soon as the source is attached; the player is
only started when its ready notification arrives. Every load bumps a request
token and the ready notification carries the token it was issued with, so a
notification from a superseded load is discarded instead of starting the
wrong track.
"""

import functools
import logging
from dataclasses import dataclass

from .base_player import BaseMediaPlayer
from .base_session import BaseSessionPublisher
from .constants import DEFAULT_PLAYBACK_RATE
from .exceptions import AutoMediaError, SessionReleased, SourceAttachFailed
from .mixins import LockMixin
from .state import DEFAULT_ACTIONS, Action, PlaybackSnapshot, PlaybackState, derive_state
from .track import Catalog, Track

logger = logging.getLogger(__name__)

__all__ = [
    "PlaybackContext",
    "PlaybackController",
]


@dataclass
class PlaybackContext:
    """Session state owned by one controller, from service start to release.

    Attributes:
        catalog: Tracks known to the service
        player: Media player receiving transport directives
        publisher: Session publisher mirroring the state
        current_track: Track most recently selected, or None
        requested: Last transport directive (PLAYING or PAUSED), IDLE before any
        request_token: Identifier of the latest load
        confirmed: True once the player reported ready for request_token
        last_error: Failure of the latest load, if any
        last_snapshot: Last snapshot handed to the publisher
        released: True after release()
    """

    catalog: Catalog
    player: BaseMediaPlayer
    publisher: BaseSessionPublisher
    current_track: Track | None = None
    requested: PlaybackState = PlaybackState.IDLE
    request_token: int = 0
    confirmed: bool = False
    last_error: AutoMediaError | None = None
    last_snapshot: PlaybackSnapshot | None = None
    released: bool = False

    @property
    def state(self) -> PlaybackState:
        return derive_state(self.current_track, self.requested)


class PlaybackController(LockMixin):
    """Translates transport commands into catalog lookups, player directives and publications."""

    def __init__(
        self,
        context: PlaybackContext,
        actions: Action = DEFAULT_ACTIONS,
        playback_rate: float = DEFAULT_PLAYBACK_RATE,
        *args,
        **kwargs,
    ):
        """Initialize the controller.

        Args:
            context: Fresh session state for this controller
            actions: Transport actions advertised with each published state
            playback_rate: Speed reported with each published state
        """
        super().__init__(*args, **kwargs)
        self._context = context
        self._actions = actions
        self._playback_rate = playback_rate

    @property
    def context(self) -> PlaybackContext:
        return self._context

    @property
    def state(self) -> PlaybackState:
        return self._context.state

    @property
    def current_track(self) -> Track | None:
        return self._context.current_track

    def play(self):
        """Start playback.

        Without a current track the first catalog entry is loaded. With one,
        the player is resumed and PLAYING is published; the source is not
        attached again. An empty catalog leaves the session IDLE.
        """
        logger.debug("PlaybackController.play()")
        with self._lock:
            ctx = self._active_context()
            if ctx.current_track is None:
                track = ctx.catalog.first()
                if track is None:
                    logger.warning("play() with an empty catalog, staying idle")
                    return
                ctx.current_track = track
                self._load_and_play()
                return

            ctx.requested = PlaybackState.PLAYING
            if ctx.confirmed:
                ctx.player.start()
            else:
                # the pending ready notification starts the player
                logger.debug("Track %s not ready yet, start deferred", ctx.current_track.id)
            self._publish_state()

    def play_from_id(self, media_id: str):
        """Select the catalog entry with the given id and load it.

        When no entry matches, the current track is kept and reloaded. When
        there is no current track either, nothing happens.

        Args:
            media_id: Identifier of the track to play
        """
        logger.debug("PlaybackController.play_from_id(%s)", media_id)
        with self._lock:
            ctx = self._active_context()
            track = ctx.catalog.find(media_id)
            if track is not None:
                ctx.current_track = track
            elif ctx.current_track is None:
                logger.warning("No track with id %r and nothing selected, ignoring", media_id)
                return
            else:
                logger.warning("No track with id %r, reloading %r", media_id, ctx.current_track.id)
            self._load_and_play()

    def pause(self):
        """Pause the player and publish the derived state.

        The pause directive is issued even when nothing is loaded; the state
        published in that case is IDLE.
        """
        logger.debug("PlaybackController.pause()")
        with self._lock:
            ctx = self._active_context()
            ctx.player.pause()
            if ctx.current_track is not None:
                ctx.requested = PlaybackState.PAUSED
            self._publish_state()

    def release(self):
        """Release the player and the session. Later commands raise SessionReleased."""
        logger.debug("PlaybackController.release()")
        with self._lock:
            ctx = self._context
            if ctx.released:
                return
            ctx.released = True
            ctx.current_track = None
            ctx.requested = PlaybackState.IDLE
            ctx.confirmed = False
            try:
                ctx.player.release()
            finally:
                ctx.publisher.release()

    def _active_context(self) -> PlaybackContext:
        if self._context.released:
            raise SessionReleased("playback session has been released")
        return self._context

    def _load_and_play(self):
        """Attach the current track and prepare it, publishing PLAYING up front.

        Called with the lock held.
        """
        ctx = self._context
        track = ctx.current_track
        ctx.request_token += 1
        ctx.requested = PlaybackState.PLAYING
        ctx.confirmed = False
        ctx.last_error = None

        self._publish_state()
        ctx.publisher.publish_metadata(track)

        try:
            ctx.player.reset()
            ctx.player.set_source(track.locator)
        except SourceAttachFailed as e:
            # Published state stays PLAYING while the player sits idle.
            logger.error("Failed to attach %s", track.locator, exc_info=True)
            ctx.last_error = e
            return

        ctx.player.prepare_async(functools.partial(self._on_ready, ctx.request_token))

    def _on_ready(self, token: int):
        """Player notification: the source of load `token` is prepared.

        May run on a player-owned thread.
        """
        logger.debug("PlaybackController._on_ready(%s)", token)
        with self._lock:
            ctx = self._context
            if ctx.released:
                logger.debug("Ready notification after release, ignoring")
                return
            if token != ctx.request_token:
                logger.debug("Discarding stale ready notification %s (latest is %s)", token, ctx.request_token)
                return
            ctx.confirmed = True
            if ctx.requested == PlaybackState.PLAYING:
                ctx.player.start()
            self._publish_state()

    def _publish_state(self):
        """Publish a snapshot of the derived state. Called with the lock held."""
        ctx = self._context
        snapshot = PlaybackSnapshot(
            state=ctx.state,
            position=ctx.player.current_position(),
            playback_rate=self._playback_rate,
            updated_at=ctx.publisher.elapsed_realtime(),
            actions=self._actions,
            confirmed=ctx.confirmed,
        )
        ctx.last_snapshot = snapshot
        logger.debug("Publishing %s", snapshot)
        ctx.publisher.publish_state(snapshot)
