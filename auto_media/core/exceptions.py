"""Exceptions raised by the auto-media library."""

__all__ = [
    "AutoMediaError",
    "CatalogError",
    "SessionReleased",
    "SourceAttachFailed",
]


class AutoMediaError(Exception):
    """Base class for all auto-media errors."""


class CatalogError(AutoMediaError, ValueError):
    """The catalog definition is malformed (bad file, duplicate ids...)."""


class SessionReleased(AutoMediaError):
    """A command reached a playback session that is not active."""


class SourceAttachFailed(AutoMediaError):
    """The player could not attach a track's resource locator.

    Attributes:
        locator: The locator that was rejected
        reason: The platform error or a short description
    """

    def __init__(self, locator, reason=None):
        self.locator = locator
        self.reason = reason
        message = f"Cannot attach source {locator!r}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
