"""Browse surface exposing the catalog to browsing clients as a one-level tree."""

import logging
from dataclasses import dataclass
from enum import IntFlag

from .constants import ROOT_ID
from .track import Catalog, Track

logger = logging.getLogger(__name__)

__all__ = [
    "MediaItemFlag",
    "MediaItem",
    "BrowserRoot",
    "CatalogBrowser",
]


class MediaItemFlag(IntFlag):
    """Item flags, with the bit values of android.media.browse.MediaBrowser.MediaItem."""

    BROWSABLE = 1
    PLAYABLE = 2


@dataclass(frozen=True)
class BrowserRoot:
    root_id: str
    extras: dict | None = None


@dataclass(frozen=True)
class MediaItem:
    """A browse entry describing one track."""

    media_id: str
    title: str
    subtitle: str = ""
    flags: MediaItemFlag = MediaItemFlag.PLAYABLE

    @classmethod
    def from_track(cls, track: Track) -> "MediaItem":
        return cls(media_id=track.id, title=track.title, subtitle=track.artist)

    @property
    def playable(self) -> bool:
        return bool(self.flags & MediaItemFlag.PLAYABLE)


class CatalogBrowser:
    """Serves the catalog under a single constant root.

    Every client is accepted. Children of the root are the catalog entries,
    all playable, in catalog order; no other node has children.
    """

    def __init__(self, catalog: Catalog, root_id: str = ROOT_ID):
        self._catalog = catalog
        self._root_id = root_id
        self._items = [MediaItem.from_track(track) for track in catalog]

    @property
    def root_id(self) -> str:
        return self._root_id

    def get_root(self, client_package: str, client_uid: int, hints: dict | None = None) -> BrowserRoot:
        logger.debug("CatalogBrowser.get_root(%s, %s)", client_package, client_uid)
        return BrowserRoot(self._root_id)

    def load_children(self, parent_id: str) -> list[MediaItem]:
        """Return the children of a node.

        Args:
            parent_id: Identifier of the node being browsed

        Returns:
            A new list of MediaItem, empty for any node but the root
        """
        logger.debug("CatalogBrowser.load_children(%s)", parent_id)
        if parent_id != self._root_id:
            logger.debug("No children under %r", parent_id)
            return []
        return list(self._items)
