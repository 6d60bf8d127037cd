# ui/models/track_table_model.py
from __future__ import annotations
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex, QSize
from PySide6.QtGui import QPixmap
from core.tracklist_models import TrackListRow, COVER_SIZE
from core.utils import decode_data_uri

COLUMNS = ["Title", "Artist", "Album", "#", "Cover"]
COVER_COLUMN = 4


def cover_pixmap(image_src: str, size: int = COVER_SIZE) -> QPixmap:
    """Decode a data URI into a size x size pixmap; blank when there is nothing to show."""
    pm = QPixmap()
    try:
        _media_type, data = decode_data_uri(image_src)
    except ValueError:
        data = b""
    if data:
        pm.loadFromData(data)

    if pm.isNull():
        blank = QPixmap(size, size)
        blank.fill(Qt.transparent)
        return blank
    return pm.scaled(size, size, Qt.KeepAspectRatio, Qt.SmoothTransformation)


class TrackTableModel(QAbstractTableModel):
    def __init__(self, rows):
        super().__init__()
        self._rows = list(rows)
        self._covers: dict[int, QPixmap] = {}

    def set_rows(self, rows):
        self.beginResetModel()
        self._rows = list(rows)
        self._covers.clear()
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()) -> int:
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()) -> int:
        return len(COLUMNS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole or orientation != Qt.Horizontal:
            return None
        return COLUMNS[section]

    def data(self, index: QModelIndex, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        row: TrackListRow = self._rows[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == 0:
                return row.title
            if col == 1:
                return row.artist
            if col == 2:
                return row.album
            if col == 3:
                return row.track_number
            return None
        if role == Qt.DecorationRole and col == COVER_COLUMN:
            return self.cover_at(index.row())
        if role == Qt.SizeHintRole and col == COVER_COLUMN:
            return QSize(COVER_SIZE, COVER_SIZE)
        if role == Qt.UserRole:
            return row
        return None

    def cover_at(self, row: int) -> QPixmap:
        pm = self._covers.get(row)
        if pm is None:
            pm = cover_pixmap(self._rows[row].image_src)
            self._covers[row] = pm
        return pm

    def row_at(self, row: int) -> TrackListRow | None:
        if row < 0 or row >= len(self._rows):
            return None
        return self._rows[row]

    def path_at(self, row: int) -> str | None:
        r = self.row_at(row)
        return r.path if r is not None else None
