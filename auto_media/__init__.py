from .core import (  # noqa: F401
    Catalog,
    PlaybackController,
    PlaybackState,
    ServiceConfig,
    Track,
)
from .service import MusicService  # noqa: F401

__version__ = "0.1.0"
