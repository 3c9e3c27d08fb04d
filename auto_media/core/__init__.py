"""Core classes for the auto-media library.

This module contains the platform-independent pieces: catalog, playback
state, controller, browse surface and the player/session interfaces.
"""

from .base_player import BaseMediaPlayer
from .base_session import BaseSessionPublisher
from .browser import BrowserRoot, CatalogBrowser, MediaItem, MediaItemFlag
from .config import ServiceConfig
from .constants import ROOT_ID, SESSION_TAG
from .controller import PlaybackContext, PlaybackController
from .exceptions import AutoMediaError, CatalogError, SessionReleased, SourceAttachFailed
from .state import DEFAULT_ACTIONS, Action, PlaybackSnapshot, PlaybackState, derive_state
from .track import Catalog, Track, default_tracks

__all__ = [
    "Action",
    "AutoMediaError",
    "BaseMediaPlayer",
    "BaseSessionPublisher",
    "BrowserRoot",
    "Catalog",
    "CatalogBrowser",
    "CatalogError",
    "DEFAULT_ACTIONS",
    "MediaItem",
    "MediaItemFlag",
    "PlaybackContext",
    "PlaybackController",
    "PlaybackSnapshot",
    "PlaybackState",
    "ROOT_ID",
    "SESSION_TAG",
    "ServiceConfig",
    "SessionReleased",
    "SourceAttachFailed",
    "Track",
    "default_tracks",
    "derive_state",
]
