"""Service-wide constants for the auto-media library."""

# Identifier of the single browsable node exposed to browsing clients
ROOT_ID = "root"

# Tag used when registering the media session with the platform
SESSION_TAG = "MyMusicService"

# Playback speed reported with every published state
DEFAULT_PLAYBACK_RATE = 1.0

# Environment variables read by ServiceConfig.from_env() and the VLC backend
CATALOG_ENV = "AUTO_MEDIA_CATALOG"
VLC_ARGS_ENV = "AUTO_MEDIA_VLC_ARGS"

# Built-in catalog: (locator, title, artist, duration in ms)
DEFAULT_CATALOG = (
    (
        "https://www.mcgill.ca/counselling/files/counselling/a_moment_to_reflect_1.mp3",
        "Music 1",
        "Artist 1",
        30000,
    ),
    (
        "https://www.mcgill.ca/counselling/files/counselling/ocean_imagery.mp3",
        "Music 2",
        "Artist 2",
        30000,
    ),
)

__all__ = [
    "ROOT_ID",
    "SESSION_TAG",
    "DEFAULT_PLAYBACK_RATE",
    "CATALOG_ENV",
    "VLC_ARGS_ENV",
    "DEFAULT_CATALOG",
]
