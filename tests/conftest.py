"""Test configuration and fixtures for auto-media tests."""

import pytest

from auto_media.core import Catalog, PlaybackContext, PlaybackController

from .mock_class import TRACK_A, TRACK_B, FakeMediaPlayer, RecordingSessionPublisher


@pytest.fixture
def catalog():
    """Two-track catalog [a, b]."""
    return Catalog([TRACK_A, TRACK_B])


@pytest.fixture
def player():
    return FakeMediaPlayer()


@pytest.fixture
def publisher():
    return RecordingSessionPublisher()


@pytest.fixture
def controller(catalog, player, publisher):
    """Fresh controller over a fresh context for each test."""
    return PlaybackController(PlaybackContext(catalog=catalog, player=player, publisher=publisher))


@pytest.fixture
def make_controller(player, publisher):
    """Build a controller over an arbitrary catalog and the shared fakes."""

    def _create(tracks):
        return PlaybackController(PlaybackContext(catalog=Catalog(tracks), player=player, publisher=publisher))

    return _create
