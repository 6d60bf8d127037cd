# ui/workers/track_loader.py
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal


class TrackLoader(QObject):
    """
    Runs host.find_files() on a daemon thread. Results reach the GUI thread
    through queued signals; a host that never answers only leaves the thread
    parked until the process exits.
    """

    loaded = Signal(object)     # list of wire records
    failed = Signal(str)        # message

    def __init__(self, host):
        super().__init__()
        self.host = host
        self._thread: Optional[threading.Thread] = None

    def start(self):
        self._thread = threading.Thread(target=self.run, name="find-files", daemon=True)
        self._thread.start()

    def isRunning(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def wait(self, timeout_s: Optional[float] = None) -> bool:
        if self._thread is not None:
            self._thread.join(timeout_s)
        return not self.isRunning()

    def run(self):
        try:
            records = self.host.find_files()
        except Exception as e:
            self.failed.emit(f"find_files failed: {e}")
            return
        self.loaded.emit(list(records or []))
