from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QShortcut, QKeySequence

from core.state import LibraryState
from ui.library_view import LibraryView


class MainWindow(QMainWindow):
    def __init__(self, state: LibraryState):
        super().__init__()
        self.setWindowTitle("trackdeck")
        self.resize(1100, 720)
        self.state = state

        QShortcut(QKeySequence("Space"), self, activated=self.state.toggle_pause)

        self.library_view = LibraryView(self.state, self)
        self.setCentralWidget(self.library_view)
