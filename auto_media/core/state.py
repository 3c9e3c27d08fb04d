"""Playback state, transport actions and the snapshot published to observers."""

from dataclasses import dataclass
from enum import Enum, IntFlag

__all__ = [
    "PlaybackState",
    "Action",
    "DEFAULT_ACTIONS",
    "PlaybackSnapshot",
    "derive_state",
]


class PlaybackState(Enum):
    """Playback state as seen by remote observers."""

    IDLE = 0
    PAUSED = 2
    PLAYING = 3


class Action(IntFlag):
    """Transport actions advertised with each published state.

    Bit values match android.media.session.PlaybackState so the mask can be
    handed to the platform unchanged.
    """

    PAUSE = 1 << 1
    PLAY = 1 << 2
    SKIP_TO_PREVIOUS = 1 << 4
    SKIP_TO_NEXT = 1 << 5
    PLAY_PAUSE = 1 << 9
    PLAY_FROM_MEDIA_ID = 1 << 10


DEFAULT_ACTIONS = (
    Action.PLAY | Action.SKIP_TO_PREVIOUS | Action.SKIP_TO_NEXT | Action.PLAY_FROM_MEDIA_ID | Action.PLAY_PAUSE
)


@dataclass(frozen=True)
class PlaybackSnapshot:
    """A point-in-time view of the session, as handed to the publisher.

    Attributes:
        state: Derived playback state
        position: Player position in milliseconds
        playback_rate: Playback speed (1.0 is normal speed)
        updated_at: Monotonic timestamp in milliseconds at which position was read
        actions: Supported transport actions
        confirmed: True once the player reported ready for the latest request
    """

    state: PlaybackState
    position: int = 0
    playback_rate: float = 1.0
    updated_at: int = 0
    actions: Action = DEFAULT_ACTIONS
    confirmed: bool = False


def derive_state(current_track, requested: PlaybackState) -> PlaybackState:
    """Compute the published state from the current track and the last transport directive.

    A session without a current track is always IDLE; a session with one is
    PLAYING or PAUSED, never IDLE.
    """
    if current_track is None:
        return PlaybackState.IDLE
    if requested == PlaybackState.PLAYING:
        return PlaybackState.PLAYING
    return PlaybackState.PAUSED
