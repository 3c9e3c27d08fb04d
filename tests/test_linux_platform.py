"""Tests for the Linux backends (libvlc player and logging session)."""

import importlib
import sys
import threading
from unittest.mock import MagicMock, patch

import pytest

from auto_media.core import (
    Catalog,
    PlaybackContext,
    PlaybackController,
    PlaybackSnapshot,
    PlaybackState,
    SourceAttachFailed,
    Track,
)
from auto_media.core.constants import VLC_ARGS_ENV

from .mock_class import TRACK_A, RecordingSessionPublisher


@pytest.fixture
def mock_vlc():
    """Replace the vlc module with a MagicMock for the player module."""
    vlc = MagicMock()
    with patch.dict(sys.modules, {"vlc": vlc}):
        module = importlib.import_module("auto_media.platform.linux.player")
        with patch.object(module, "vlc", vlc):
            yield vlc


@pytest.fixture
def vlc_player(mock_vlc, monkeypatch):
    """Create a VLCMediaPlayer over the mocked vlc module."""
    monkeypatch.delenv(VLC_ARGS_ENV, raising=False)
    from auto_media.platform.linux.player import VLCMediaPlayer

    return VLCMediaPlayer()


def _parsed_callback(mock_vlc):
    """Return the callback attached to the media's MediaParsedChanged event."""
    media = mock_vlc.Instance.return_value.media_new.return_value
    event_manager = media.event_manager.return_value
    event_type, callback = event_manager.event_attach.call_args.args
    assert event_type is mock_vlc.EventType.MediaParsedChanged
    return callback


def _join_ready_threads():
    """Wait for the threads VLCMediaPlayer hands ready callbacks to."""
    for thread in threading.enumerate():
        if thread.name == "VLCReady":
            thread.join(5)


class TestVLCMediaPlayerInit:
    """Tests for VLCMediaPlayer initialization."""

    def test_default_args(self, vlc_player, mock_vlc):
        """Test libvlc is started without arguments by default."""
        mock_vlc.Instance.assert_called_once_with([])
        mock_vlc.Instance.return_value.media_player_new.assert_called_once_with()

    def test_args_from_env(self, mock_vlc, monkeypatch):
        """Test AUTO_MEDIA_VLC_ARGS is shell-split into libvlc arguments."""
        monkeypatch.setenv(VLC_ARGS_ENV, "--no-video --aout=pulse")
        from auto_media.platform.linux.player import VLCMediaPlayer

        VLCMediaPlayer()
        mock_vlc.Instance.assert_called_once_with(["--no-video", "--aout=pulse"])


class TestVLCMediaPlayerSource:
    """Tests for set_source()."""

    def test_url(self, vlc_player, mock_vlc):
        """Test a URL is handed to libvlc as-is."""
        instance = mock_vlc.Instance.return_value
        vlc_player.set_source("https://example.com/a.mp3")
        instance.media_new.assert_called_once_with("https://example.com/a.mp3")
        instance.media_player_new.return_value.set_media.assert_called_once_with(instance.media_new.return_value)

    def test_existing_path(self, vlc_player, mock_vlc, tmp_path):
        """Test a local file is opened as a path."""
        path = tmp_path / "a.mp3"
        path.write_bytes(b"")
        vlc_player.set_source(str(path))
        mock_vlc.Instance.return_value.media_new_path.assert_called_once_with(str(path))

    @pytest.mark.parametrize("locator", ["", "/nonexistent/file.mp3"])
    def test_invalid_locator(self, vlc_player, mock_vlc, locator):
        """Test unusable locators raise SourceAttachFailed."""
        with pytest.raises(SourceAttachFailed) as excinfo:
            vlc_player.set_source(locator)
        assert excinfo.value.locator == locator
        mock_vlc.Instance.return_value.media_player_new.return_value.set_media.assert_not_called()

    def test_media_rejected(self, vlc_player, mock_vlc):
        """Test a locator libvlc cannot build a media for raises SourceAttachFailed."""
        mock_vlc.Instance.return_value.media_new.return_value = None
        with pytest.raises(SourceAttachFailed):
            vlc_player.set_source("bogus://x")


class TestVLCMediaPlayerPrepare:
    """Tests for prepare_async() and the parsed notification."""

    def test_prepare_parses_media(self, vlc_player, mock_vlc):
        """Test prepare_async() starts a network parse."""
        vlc_player.set_source("https://example.com/a.mp3")
        media = mock_vlc.Instance.return_value.media_new.return_value
        media.parse_with_options.return_value = 0
        vlc_player.prepare_async(MagicMock())
        media.parse_with_options.assert_called_once()
        assert media.parse_with_options.call_args.args[0] is mock_vlc.MediaParseFlag.network

    def test_ready_when_parsed(self, vlc_player, mock_vlc):
        """Test on_ready fires once parsing is done."""
        vlc_player.set_source("https://example.com/a.mp3")
        media = mock_vlc.Instance.return_value.media_new.return_value
        media.get_parsed_status.return_value = mock_vlc.MediaParsedStatus.done
        fired = threading.Event()
        on_ready = MagicMock(side_effect=fired.set)
        vlc_player.prepare_async(on_ready)

        _parsed_callback(mock_vlc)(MagicMock())
        assert fired.wait(5)
        on_ready.assert_called_once_with()

    def test_ready_fires_once(self, vlc_player, mock_vlc):
        """Test repeated parsed events only notify once."""
        vlc_player.set_source("https://example.com/a.mp3")
        media = mock_vlc.Instance.return_value.media_new.return_value
        media.get_parsed_status.return_value = mock_vlc.MediaParsedStatus.done
        fired = threading.Event()
        on_ready = MagicMock(side_effect=fired.set)
        vlc_player.prepare_async(on_ready)

        callback = _parsed_callback(mock_vlc)
        callback(MagicMock())
        callback(MagicMock())
        assert fired.wait(5)
        _join_ready_threads()
        on_ready.assert_called_once_with()

    def test_ready_not_run_on_event_thread(self, vlc_player, mock_vlc):
        """Test on_ready runs outside the thread delivering the libvlc event."""
        vlc_player.set_source("https://example.com/a.mp3")
        media = mock_vlc.Instance.return_value.media_new.return_value
        media.get_parsed_status.return_value = mock_vlc.MediaParsedStatus.done
        fired = threading.Event()
        threads = []
        vlc_player.prepare_async(lambda: (threads.append(threading.current_thread()), fired.set()))

        _parsed_callback(mock_vlc)(MagicMock())
        assert fired.wait(5)
        assert threads[0] is not threading.current_thread()

    @pytest.mark.parametrize("status", ["failed", "timeout"])
    def test_no_ready_on_failure(self, vlc_player, mock_vlc, status):
        """Test a failed or timed out parse does not notify."""
        vlc_player.set_source("https://example.com/a.mp3")
        media = mock_vlc.Instance.return_value.media_new.return_value
        media.get_parsed_status.return_value = getattr(mock_vlc.MediaParsedStatus, status)
        on_ready = MagicMock()
        vlc_player.prepare_async(on_ready)

        _parsed_callback(mock_vlc)(MagicMock())
        on_ready.assert_not_called()

    def test_no_ready_after_reset(self, vlc_player, mock_vlc):
        """Test a parsed event arriving after reset() is dropped."""
        vlc_player.set_source("https://example.com/a.mp3")
        on_ready = MagicMock()
        vlc_player.prepare_async(on_ready)
        callback = _parsed_callback(mock_vlc)
        vlc_player.reset()

        callback(MagicMock())
        on_ready.assert_not_called()

    def test_prepare_without_source(self, vlc_player):
        with pytest.raises(RuntimeError):
            vlc_player.prepare_async(MagicMock())


class LockingEventManager:
    """Event manager that, like libvlc, holds its lock while dispatching."""

    def __init__(self):
        self.lock = threading.Lock()
        self.callback = None

    def event_attach(self, event_type, callback):
        with self.lock:
            self.callback = callback

    def event_detach(self, event_type):
        with self.lock:
            self.callback = None

    def fire(self):
        with self.lock:
            if self.callback is not None:
                self.callback(MagicMock())


class TestVLCMediaPlayerWithController:
    """Tests for the libvlc player driven by a PlaybackController."""

    def test_parsed_event_during_track_switch(self, vlc_player, mock_vlc):
        """Test a parsed event racing a track switch neither blocks nor starts playback."""
        events = LockingEventManager()
        instance = mock_vlc.Instance.return_value
        media = instance.media_new.return_value
        media.event_manager.return_value = events
        media.get_parsed_status.return_value = mock_vlc.MediaParsedStatus.done
        media.parse_with_options.return_value = 0
        instance.media_player_new.return_value.get_time.return_value = 0
        catalog = Catalog([Track(id="http://a"), Track(id="http://b")])
        controller = PlaybackController(
            PlaybackContext(catalog=catalog, player=vlc_player, publisher=RecordingSessionPublisher())
        )
        controller.play()

        with controller._lock:
            dispatcher = threading.Thread(target=events.fire)
            dispatcher.start()
            dispatcher.join(5)
            assert not dispatcher.is_alive()
            controller.play_from_id("http://b")

        _join_ready_threads()
        assert controller.current_track.id == "http://b"
        assert controller.context.confirmed is False
        instance.media_player_new.return_value.play.assert_not_called()


class TestVLCMediaPlayerTransport:
    """Tests for start(), pause(), current_position() and release()."""

    def test_start(self, vlc_player, mock_vlc):
        vlc_player.start()
        mock_vlc.Instance.return_value.media_player_new.return_value.play.assert_called_once_with()

    def test_pause(self, vlc_player, mock_vlc):
        """Test pause() uses the idempotent set_pause(1), not the toggle."""
        vlc_player.pause()
        mock_vlc.Instance.return_value.media_player_new.return_value.set_pause.assert_called_once_with(1)

    @pytest.mark.parametrize("reported,expected", [(-1, 0), (0, 0), (1500, 1500)])
    def test_current_position(self, vlc_player, mock_vlc, reported, expected):
        mock_vlc.Instance.return_value.media_player_new.return_value.get_time.return_value = reported
        assert vlc_player.current_position() == expected

    def test_release(self, vlc_player, mock_vlc):
        """Test release() frees the media, the player and the instance."""
        instance = mock_vlc.Instance.return_value
        vlc_player.set_source("https://example.com/a.mp3")
        vlc_player.release()
        instance.media_new.return_value.release.assert_called_once_with()
        instance.media_player_new.return_value.release.assert_called_once_with()
        instance.release.assert_called_once_with()


class TestLoggingSessionPublisher:
    """Tests for the logging session publisher."""

    @pytest.fixture
    def session(self, mock_vlc):
        from auto_media.platform.linux.session import LoggingSessionPublisher

        return LoggingSessionPublisher("Test")

    def test_activate_release(self, session):
        session.activate()
        assert session.active is True
        session.release()
        assert session.active is False

    def test_publish_state(self, session, caplog):
        """Test the snapshot is kept and logged."""
        snapshot = PlaybackSnapshot(state=PlaybackState.PLAYING, position=1200)
        with caplog.at_level("INFO", logger="auto_media.platform.linux.session"):
            session.publish_state(snapshot)
        assert session.snapshot is snapshot
        assert "PLAYING at 1200ms" in caplog.text

    def test_publish_metadata(self, session, caplog):
        with caplog.at_level("INFO", logger="auto_media.platform.linux.session"):
            session.publish_metadata(TRACK_A)
        assert session.metadata is TRACK_A
        assert "Music A" in caplog.text

    def test_elapsed_realtime_is_monotonic(self, session):
        first = session.elapsed_realtime()
        assert session.elapsed_realtime() >= first
