# core/host.py
from __future__ import annotations

import logging
import os
from typing import Any, Protocol

from library.scan_library import scan_tracks

logger = logging.getLogger(__name__)


class HostCommandError(RuntimeError):
    """A host command was rejected."""


class HostChannel(Protocol):
    """
    The three commands the library view can send to the host.
    find_files() is request/response; the other two are fire-and-forget.
    """

    def find_files(self) -> list[dict[str, Any]]: ...

    def play_file(self, path: str) -> None: ...

    def pause_play(self) -> None: ...


class LocalHost:
    """In-process host: scans folders with mutagen and plays through a Player."""

    def __init__(self, music_dirs: list[str], player):
        self.music_dirs = list(music_dirs)
        self.player = player

    def find_files(self) -> list[dict[str, Any]]:
        return [t.to_wire() for t in scan_tracks(self.music_dirs)]

    def play_file(self, path: str) -> None:
        if not path or not os.path.isfile(path):
            raise HostCommandError(f"No such file: {path}")
        self.player.play_file(path)

    def pause_play(self) -> None:
        self.player.toggle_play_pause()
