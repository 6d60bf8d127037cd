# src/player/player.py
from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QMediaPlayer, QAudioOutput

logger = logging.getLogger(__name__)


class PlayerStatus(Enum):
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()


class Player(QObject):
    def __init__(self, volume_0_to_1: float = 0.7):
        super().__init__()

        self.status = PlayerStatus.STOPPED
        self.path: str | None = None

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)
        self.set_volume(volume_0_to_1)

        self.media.playbackStateChanged.connect(self._on_qt_state_changed)
        self.media.mediaStatusChanged.connect(self._on_qt_media_status)
        self.media.errorOccurred.connect(self._on_qt_error)

    # ----------------------------
    # Qt backend handlers
    # ----------------------------

    def _on_qt_state_changed(self, state: QMediaPlayer.PlaybackState) -> None:
        if state == QMediaPlayer.PlayingState:
            self._set_status(PlayerStatus.PLAYING)
        elif state == QMediaPlayer.PausedState:
            self._set_status(PlayerStatus.PAUSED)
        else:
            self._set_status(PlayerStatus.STOPPED)

    def _on_qt_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.EndOfMedia:
            self._set_status(PlayerStatus.STOPPED)

    def _on_qt_error(self, error, message: str) -> None:
        logger.warning("Playback error for %s: %s", self.path, message)

    def _set_status(self, new_status: PlayerStatus) -> None:
        if self.status != new_status:
            logger.debug("Player status %s -> %s", self.status.name, new_status.name)
            self.status = new_status

    # ----------------------------
    # Public API
    # ----------------------------

    def play_file(self, path: str) -> None:
        # Only one file plays at a time.
        self.stop()
        self.path = path
        logger.info("Playing %s", path)
        self.media.setSource(QUrl.fromLocalFile(path))
        self.media.play()

    def play(self) -> None:
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def stop(self) -> None:
        self.media.stop()

    def has_source(self) -> bool:
        return self.path is not None

    def toggle_play_pause(self) -> None:
        if not self.has_source():
            logger.debug("Nothing loaded; ignoring play/pause")
            return
        if self.media.playbackState() == QMediaPlayer.PlayingState:
            self.pause()
        else:
            self.play()

    def set_volume(self, volume_0_to_1: float) -> None:
        v = min(1.0, max(0.0, float(volume_0_to_1)))
        self.audio.setVolume(v)
