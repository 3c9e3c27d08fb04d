"""Service configuration for the auto-media library.

This module provides the ServiceConfig dataclass which gathers the knobs of
the media service: browse root, session tag, reported playback rate and the
catalog itself.
"""

import json
import logging
import os
from dataclasses import dataclass, field

from .constants import CATALOG_ENV, DEFAULT_PLAYBACK_RATE, ROOT_ID, SESSION_TAG
from .exceptions import CatalogError
from .track import Catalog, Track, default_tracks

logger = logging.getLogger(__name__)

__all__ = [
    "ServiceConfig",
]


@dataclass
class ServiceConfig:
    """Configuration for the media service.

    Attributes:
        root_id: Identifier of the browse root returned to clients
        session_tag: Tag used when creating the platform media session
        playback_rate: Speed reported with each published state
        tracks: Catalog entries in presentation order
    """

    root_id: str = ROOT_ID
    session_tag: str = SESSION_TAG
    playback_rate: float = DEFAULT_PLAYBACK_RATE
    tracks: tuple = field(default_factory=default_tracks)

    def __post_init__(self):
        """Validate and normalize configuration parameters."""
        if not self.root_id:
            raise ValueError("root_id must not be empty")

        if not self.session_tag:
            raise ValueError("session_tag must not be empty")

        if self.playback_rate <= 0:
            raise ValueError(f"playback_rate must be positive, got {self.playback_rate}")

        # Accept plain mappings for tracks, as read from a catalog file
        self.tracks = tuple(t if isinstance(t, Track) else Track.from_dict(t) for t in self.tracks)

    def build_catalog(self) -> Catalog:
        """Create the read-only catalog for a service instance."""
        return Catalog(self.tracks)

    @classmethod
    def from_file(cls, path) -> "ServiceConfig":
        """Load a configuration from a JSON file.

        The file holds an object with an optional ``root_id``, ``session_tag``
        and ``playback_rate``, and a ``tracks`` list of track objects.

        Raises:
            CatalogError: If the file cannot be read or is not a valid catalog
        """
        logger.debug("ServiceConfig.from_file(%s)", path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"cannot load catalog file {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"catalog file {path} must contain an object")
        if "tracks" not in data or not isinstance(data["tracks"], list):
            raise CatalogError(f"catalog file {path} has no tracks list")

        kwargs = {key: data[key] for key in ("root_id", "session_tag", "playback_rate") if key in data}
        return cls(tracks=tuple(Track.from_dict(entry) for entry in data["tracks"]), **kwargs)

    @classmethod
    def from_env(cls, environ=None) -> "ServiceConfig":
        """Build the configuration, honoring the AUTO_MEDIA_CATALOG variable.

        Args:
            environ: Mapping to read instead of os.environ
        """
        environ = os.environ if environ is None else environ
        path = environ.get(CATALOG_ENV)
        if path:
            logger.debug("Loading catalog from %s", path)
            return cls.from_file(path)
        return cls()
