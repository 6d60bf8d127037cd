from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from core.host import HostChannel
from core.models import Track
from core.ordering import SORT_LEXICAL, sort_tracks
from core.tracklist_models import TrackListRow, render_rows
from ui.workers.track_loader import TrackLoader

logger = logging.getLogger(__name__)


class LibraryState(QObject):
    """
    Holds the track collection for one library view.

    `tracks` is None until the host answers find_files, then a sorted tuple that
    is replaced exactly once. Play and pause are forwarded to the host without
    waiting for, or recording, any result.
    """

    tracksChanged = Signal()
    loadFailed = Signal(str)

    def __init__(self, host: HostChannel, sort_mode: str = SORT_LEXICAL):
        super().__init__()
        self.host = host
        self.sort_mode = sort_mode

        self.tracks: Optional[tuple[Track, ...]] = None
        self.load_error: Optional[str] = None
        self._loader: Optional[TrackLoader] = None

    # -------------------------
    # find_files
    # -------------------------
    def load(self) -> None:
        if self._loader is not None:
            return

        logger.debug("Requesting track list from host")
        self._loader = TrackLoader(self.host)
        self._loader.loaded.connect(self._on_loaded)
        self._loader.failed.connect(self._on_failed)
        self._loader.start()

    def is_loading(self) -> bool:
        return self._loader is not None and self._loader.isRunning()

    def wait(self, timeout_ms: int = -1) -> bool:
        """Block until the loader thread exits. True if it did (or never started)."""
        if self._loader is None:
            return True
        return self._loader.wait(None if timeout_ms < 0 else timeout_ms / 1000)

    @Slot(object)
    def _on_loaded(self, records) -> None:
        try:
            tracks = [Track.from_wire(r) for r in records]
        except (KeyError, TypeError, ValueError) as e:
            self._on_failed(f"malformed track record: {e}")
            return

        self.tracks = sort_tracks(tracks, self.sort_mode)
        logger.info("Loaded %d tracks", len(self.tracks))
        self.tracksChanged.emit()

    @Slot(str)
    def _on_failed(self, message: str) -> None:
        logger.warning("Track list unavailable: %s", message)
        self.load_error = message
        self.loadFailed.emit(message)

    # -------------------------
    # render
    # -------------------------
    def rows(self) -> list[TrackListRow]:
        return render_rows(self.tracks)

    # -------------------------
    # play_file / pause_play
    # -------------------------
    def play(self, path: str) -> None:
        self._dispatch("play_file", self.host.play_file, path)

    def toggle_pause(self) -> None:
        self._dispatch("pause_play", self.host.pause_play)

    def _dispatch(self, command: str, fn, *args) -> None:
        try:
            fn(*args)
        except Exception as e:
            logger.debug("%s dropped: %s", command, e)
