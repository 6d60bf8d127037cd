# ui/library_view.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize, QByteArray
from PySide6.QtGui import QIcon, QPixmap, QPainter
from PySide6.QtSvg import QSvgRenderer
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QToolButton

from core.state import LibraryState
from ui.widgets.track_list_widget import TrackListWidget


def _svg_icon(path_d: str, size: int = 20, color: str = "#e5e7eb") -> QIcon:
    svg = f"""
    <svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24">
      <path d="{path_d}" fill="{color}"/>
    </svg>
    """.strip()

    renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)

    p = QPainter(pm)
    renderer.render(p)
    p.end()

    return QIcon(pm)


SVG_PAUSE = "M6 5h4v14H6V5zm8 0h4v14h-4V5z"


class LibraryView(QWidget):
    """
    Pause button on top, track table below. The track list is requested the
    first time the view is shown and never again for this instance.
    """

    def __init__(self, state: LibraryState, parent=None):
        super().__init__(parent)
        self.state = state
        self._mounted = False

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        controls = QHBoxLayout()
        controls.setContentsMargins(8, 6, 8, 6)

        # No playing/paused indicator: the host owns that state.
        self.btn_pause = QToolButton()
        self.btn_pause.setObjectName("BtnPause")
        self.btn_pause.setIcon(_svg_icon(SVG_PAUSE, 22))
        self.btn_pause.setIconSize(QSize(22, 22))
        self.btn_pause.setToolTip("Pause / resume")
        self.btn_pause.clicked.connect(self.state.toggle_pause)

        controls.addWidget(self.btn_pause)
        controls.addStretch(1)
        root.addLayout(controls)

        self.track_list = TrackListWidget()
        self.track_list.playTrack.connect(self.state.play)
        root.addWidget(self.track_list, 1)

        self.state.tracksChanged.connect(self.refresh)

        self.setObjectName("LibraryView")
        self._apply_styles()
        self.refresh()

    def showEvent(self, event):
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            self.state.load()

    def refresh(self):
        self.track_list.set_rows(self.state.rows())

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#LibraryView {
            background-color: #020617;
        }

        QToolButton#BtnPause {
            background: #111827;
            border: 1px solid #1f2937;
            border-radius: 999px;
            padding: 8px;
        }
        QToolButton#BtnPause:hover {
            border-color: #38bdf8;
            background: #020617;
        }
        QToolButton#BtnPause:pressed {
            background: #0f172a;
        }
        """)
