"""Music service: the entry points a media browser service forwards to.

MusicService ties the catalog, the platform player, the platform session and
the playback controller together and exposes the lifecycle, browse and
session callbacks of a media browser service:

- on_create() / on_destroy(): start and tear down the session
- on_get_root() / on_load_children(): browse the catalog
- on_play() / on_pause() / on_play_from_media_id(): transport commands
"""

import logging

from .core.browser import CatalogBrowser
from .core.config import ServiceConfig
from .core.controller import PlaybackContext, PlaybackController
from .core.exceptions import SessionReleased

logger = logging.getLogger(__name__)

__all__ = [
    "MusicService",
]


class MusicService:
    def __init__(self, config: ServiceConfig | None = None, player=None, publisher=None):
        """Initialize the MusicService.

        Args:
            config: Service configuration, defaults to ServiceConfig.from_env()
            player: Media player to drive, defaults to the platform player
            publisher: Session publisher, defaults to the platform session
        """
        self._config = config if config is not None else ServiceConfig.from_env()
        self._player = player
        self._publisher = publisher
        # Collaborators created by on_create(), dropped again by on_destroy()
        self._owns_player = False
        self._owns_publisher = False
        self._controller: PlaybackController | None = None
        self._browser: CatalogBrowser | None = None

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def controller(self) -> PlaybackController | None:
        return self._controller

    @property
    def publisher(self):
        return self._publisher

    @property
    def running(self) -> bool:
        return self._controller is not None

    def on_create(self):
        """Build the catalog, create the player and session, and activate the session."""
        logger.debug("MusicService.on_create()")
        if self._controller is not None:
            logger.warning("MusicService already created")
            return

        catalog = self._config.build_catalog()
        if self._player is None or self._publisher is None:
            from .platform import MediaPlayer, SessionPublisher

            if self._player is None:
                self._player = MediaPlayer()
                self._owns_player = True
            if self._publisher is None:
                self._publisher = SessionPublisher(self._config.session_tag)
                self._owns_publisher = True

        self._publisher.activate()
        self._controller = PlaybackController(
            PlaybackContext(catalog=catalog, player=self._player, publisher=self._publisher),
            playback_rate=self._config.playback_rate,
        )
        self._browser = CatalogBrowser(catalog, self._config.root_id)
        logger.info("MusicService started with %d tracks", len(catalog))

    def on_destroy(self):
        """Release the player and the session."""
        logger.debug("MusicService.on_destroy()")
        if self._controller is None:
            return
        try:
            self._controller.release()
        finally:
            self._controller = None
            self._browser = None
            if self._owns_player:
                self._player = None
                self._owns_player = False
            if self._owns_publisher:
                self._publisher = None
                self._owns_publisher = False

    # Browse callbacks

    def on_get_root(self, client_package, client_uid, root_hints=None):
        return self._running_browser().get_root(client_package, client_uid, root_hints)

    def on_load_children(self, parent_id):
        return self._running_browser().load_children(parent_id)

    # Session callbacks

    def on_play(self):
        self._running_controller().play()

    def on_play_from_media_id(self, media_id, extras=None):
        self._running_controller().play_from_id(media_id)

    def on_pause(self):
        self._running_controller().pause()

    def _running_controller(self) -> PlaybackController:
        if self._controller is None:
            raise SessionReleased("music service is not running")
        return self._controller

    def _running_browser(self) -> CatalogBrowser:
        if self._browser is None:
            raise SessionReleased("music service is not running")
        return self._browser
