# ui/widgets/track_list_widget.py
from __future__ import annotations

from PySide6.QtCore import Signal, QSize
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableView

from ui.models.track_table_model import TrackTableModel, COVER_COLUMN
from core.tracklist_models import TrackListRow, COVER_SIZE


class TrackListWidget(QWidget):
    playTrack = Signal(str)       # path

    def __init__(self):
        super().__init__()

        self.table = QTableView()
        self.model = TrackTableModel([])
        self.table.setModel(self.model)

        self.table.setSelectionBehavior(QTableView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableView.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.setShowGrid(False)
        self.table.setAlternatingRowColors(True)
        self.table.setIconSize(QSize(COVER_SIZE, COVER_SIZE))

        self.table.setColumnWidth(0, 240)
        self.table.setColumnWidth(1, 180)
        self.table.setColumnWidth(2, 180)
        self.table.setColumnWidth(3, 60)
        self.table.setColumnWidth(COVER_COLUMN, COVER_SIZE)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setObjectName("TrackTable")

        self.table.verticalHeader().setDefaultSectionSize(COVER_SIZE)

        self._apply_styles()

        # Every click plays; repeated clicks send repeated commands.
        self.table.clicked.connect(self._on_click)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

    # -------------------------
    # External API
    # -------------------------
    def set_rows(self, rows: list[TrackListRow]):
        self.model.set_rows(rows)

    def row_count(self) -> int:
        return self.model.rowCount()

    def click_row(self, row: int):
        self._on_click(self.model.index(row, 0))

    # -------------------------
    # UI Events
    # -------------------------
    def _on_click(self, index):
        if not index.isValid():
            return
        path = self.model.path_at(index.row())
        if path is not None:
            self.playTrack.emit(path)

    def _apply_styles(self):
        self.setStyleSheet("""
        QTableView#TrackTable {
            background-color: #020617;
            alternate-background-color: #030712;
            border: none;
            color: #e5e7eb;
            gridline-color: #020617;
            selection-background-color: rgba(56, 189, 248, 0.2);
            selection-color: #e5e7eb;
        }

        QHeaderView::section {
            background-color: #020617;
            color: #9ca3af;
            padding: 4px 6px;
            border: none;
            border-bottom: 1px solid #111827;
            font-size: 11px;
            text-transform: uppercase;
            letter-spacing: 0.08em;
        }

        QTableView::item {
            padding: 4px 6px;
        }
        """)
