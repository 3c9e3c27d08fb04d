"""Track records and the fixed catalog served by the media service."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .constants import DEFAULT_CATALOG
from .exceptions import CatalogError

logger = logging.getLogger(__name__)

__all__ = [
    "Track",
    "Catalog",
    "default_tracks",
]


@dataclass(frozen=True)
class Track:
    """A playable catalog entry.

    Attributes:
        id: Opaque identifier, also used as the resource locator handed to the player
        title: Display title
        artist: Display artist
        duration: Advisory duration in milliseconds (never enforced)
    """

    id: str
    title: str = ""
    artist: str = ""
    duration: int = 0

    def __post_init__(self):
        """Validate the track fields."""
        if not isinstance(self.id, str) or not self.id:
            raise CatalogError(f"track id must be a non-empty string, got {self.id!r}")
        if not isinstance(self.duration, int) or isinstance(self.duration, bool):
            raise CatalogError(f"duration must be an integer, got {self.duration!r}")
        if self.duration < 0:
            raise CatalogError(f"duration must be positive or zero, got {self.duration}")

    @property
    def locator(self) -> str:
        """Resource locator resolved by the player."""
        return self.id

    @classmethod
    def from_dict(cls, data: dict) -> "Track":
        """Build a Track from a mapping as found in a catalog file.

        Args:
            data: Mapping with an ``id`` key and optional ``title``, ``artist``
                and ``duration`` keys

        Raises:
            CatalogError: If the mapping is not a valid track description
        """
        if not isinstance(data, dict):
            raise CatalogError(f"track entry must be an object, got {type(data).__name__}")
        if "id" not in data:
            raise CatalogError(f"track entry without id: {data!r}")
        unknown = set(data) - {"id", "title", "artist", "duration"}
        if unknown:
            raise CatalogError(f"unknown track keys: {', '.join(sorted(unknown))}")
        try:
            duration = int(data.get("duration", 0))
        except (TypeError, ValueError) as e:
            raise CatalogError(f"invalid duration for track {data['id']!r}") from e
        return cls(
            id=data["id"],
            title=str(data.get("title", "")),
            artist=str(data.get("artist", "")),
            duration=duration,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "duration": self.duration,
        }


class Catalog(Sequence):
    """Ordered, read-only list of tracks, fixed for the process lifetime.

    Track ids are unique; lookups return the first (and only) match.
    """

    def __init__(self, tracks: Iterable[Track] = ()):
        """Initialize the catalog.

        Args:
            tracks: Tracks in presentation order

        Raises:
            CatalogError: If two tracks share an id
        """
        self._tracks = tuple(tracks)
        seen = set()
        for track in self._tracks:
            if track.id in seen:
                raise CatalogError(f"duplicate track id {track.id!r}")
            seen.add(track.id)
        logger.debug("Catalog initialized with %d tracks", len(self._tracks))

    def __getitem__(self, index):
        return self._tracks[index]

    def __len__(self) -> int:
        return len(self._tracks)

    def __repr__(self) -> str:
        return f"Catalog({[track.id for track in self._tracks]!r})"

    def first(self) -> Track | None:
        """Return the first track, or None for an empty catalog."""
        return self._tracks[0] if self._tracks else None

    def find(self, media_id: str) -> Track | None:
        """Linear scan for the track whose id equals media_id.

        Returns:
            The matching Track, or None when nothing matches
        """
        for track in self._tracks:
            if track.id == media_id:
                return track
        return None


def default_tracks() -> tuple[Track, ...]:
    """Return the built-in two-track playlist."""
    return tuple(
        Track(id=locator, title=title, artist=artist, duration=duration)
        for locator, title, artist, duration in DEFAULT_CATALOG
    )
