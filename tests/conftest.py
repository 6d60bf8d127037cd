"""Pytest configuration and fixtures."""

import os
import threading

import pytest

# Widgets and pixmaps need a GUI platform; use the headless one.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


class FakeHost:
    """Records every command; find_files answers with canned records."""

    def __init__(self, records=None, error=None, gate=None):
        self.records = list(records or [])
        self.error = error
        self.gate = gate
        self.find_calls = 0
        self.played: list[str] = []
        self.pause_calls = 0

    def find_files(self):
        self.find_calls += 1
        if self.gate is not None:
            self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.records

    def play_file(self, path):
        self.played.append(path)

    def pause_play(self):
        self.pause_calls += 1


def record(path, track_number=None, title=None, artist=None, album=None, visual=None):
    return {
        "path": path,
        "title": title,
        "artist": artist,
        "group": None,
        "album": album,
        "trackNumber": track_number,
        "visual": visual,
    }


@pytest.fixture
def make_host():
    return FakeHost


@pytest.fixture
def gate():
    g = threading.Event()
    yield g
    g.set()


def wait_loaded(state, qapp, timeout_ms=5000):
    """Let the loader thread finish and deliver its queued signal."""
    assert state.wait(timeout_ms)
    qapp.processEvents()
