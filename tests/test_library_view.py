import os
import subprocess
import sys
import textwrap
from pathlib import Path

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, Qt
from PySide6.QtGui import QImage

from core.state import LibraryState
from core.tracklist_models import COVER_SIZE
from core.utils import to_data_uri
from ui.library_view import LibraryView
from ui.models.track_table_model import COVER_COLUMN, cover_pixmap
from conftest import record, wait_loaded


def _png_bytes() -> bytes:
    img = QImage(4, 4, QImage.Format.Format_ARGB32)
    img.fill(Qt.GlobalColor.red)
    ba = QByteArray()
    buf = QBuffer(ba)
    buf.open(QIODevice.OpenModeFlag.WriteOnly)
    img.save(buf, "PNG")
    data = buf.data().data()
    buf.close()
    return data


def _shown_view(qapp, host):
    state = LibraryState(host)
    view = LibraryView(state)
    view.show()
    wait_loaded(state, qapp)
    return view


def test_empty_until_shown(qapp, make_host):
    host = make_host([record("/m/a.mp3")])
    view = LibraryView(LibraryState(host))
    assert host.find_calls == 0
    assert view.track_list.row_count() == 0


def test_show_loads_once(qapp, make_host):
    host = make_host([record("/m/a.mp3"), record("/m/b.mp3")])
    view = _shown_view(qapp, host)

    view.hide()
    view.show()
    qapp.processEvents()

    assert host.find_calls == 1
    assert view.track_list.row_count() == 2
    view.close()


def test_rows_shown_in_sorted_order(qapp, make_host):
    host = make_host([
        record("/m/two.mp3", "2", title="Two"),
        record("/m/none.mp3", None, title="None"),
        record("/m/ten.mp3", "10", title="Ten"),
    ])
    view = _shown_view(qapp, host)
    model = view.track_list.model

    titles = [model.index(r, 0).data() for r in range(model.rowCount())]
    assert titles == ["None", "Ten", "Two"]
    view.close()


def test_click_plays_that_rows_path(qapp, make_host):
    # same artist + title: display keys collide
    host = make_host([
        record("/m/live/song.mp3", "1", title="Song", artist="Band"),
        record("/m/studio/song.mp3", "2", title="Song", artist="Band"),
    ])
    view = _shown_view(qapp, host)

    view.track_list.click_row(1)
    assert host.played == ["/m/studio/song.mp3"]

    view.track_list.click_row(0)
    view.track_list.click_row(0)
    assert host.played == ["/m/studio/song.mp3", "/m/live/song.mp3", "/m/live/song.mp3"]
    view.close()


def test_pause_button(qapp, make_host):
    host = make_host()
    view = LibraryView(LibraryState(host))

    view.btn_pause.click()
    assert host.pause_calls == 1
    view.btn_pause.click()
    assert host.pause_calls == 2


def test_track_without_visual_renders_blank_cover(qapp, make_host):
    host = make_host([record("/m/a.mp3", "1", title="A")])
    view = _shown_view(qapp, host)
    model = view.track_list.model

    pm = model.index(0, COVER_COLUMN).data(Qt.DecorationRole)
    assert pm is not None
    assert (pm.width(), pm.height()) == (COVER_SIZE, COVER_SIZE)
    assert model.index(0, 3).data() == "1"
    assert model.index(0, 1).data() == ""
    view.close()


def test_cover_from_png_visual(qapp, make_host):
    data = _png_bytes()
    host = make_host([
        record("/m/a.mp3", "1", visual={"mediaType": "image/png", "data": list(data)}),
    ])
    view = _shown_view(qapp, host)
    model = view.track_list.model

    row = model.row_at(0)
    assert row.image_src == to_data_uri("image/png", data)
    pm = model.index(0, COVER_COLUMN).data(Qt.DecorationRole)
    assert not pm.isNull()
    assert pm.width() == COVER_SIZE
    view.close()


def test_undecodable_cover_is_blank(qapp):
    pm = cover_pixmap(to_data_uri("image/png", b"not an image"))
    assert (pm.width(), pm.height()) == (COVER_SIZE, COVER_SIZE)


def test_failed_load_keeps_view_empty(qapp, make_host):
    host = make_host(error=OSError("unreachable"))
    view = _shown_view(qapp, host)
    assert view.track_list.row_count() == 0
    view.close()


def test_host_that_never_answers_leaves_view_empty(qapp, make_host, gate):
    host = make_host([record("/m/a.mp3")], gate=gate)
    state = LibraryState(host)
    view = LibraryView(state)
    view.show()

    assert not state.wait(200)
    qapp.processEvents()

    assert host.find_calls == 1
    assert view.track_list.row_count() == 0
    view.close()


CLOSE_WHILE_HANGING = textwrap.dedent("""
    import threading
    from PySide6.QtCore import QTimer
    from PySide6.QtWidgets import QApplication
    from core.state import LibraryState
    from ui.main_window import MainWindow

    class Hang:
        def find_files(self):
            threading.Event().wait()
        def play_file(self, path):
            pass
        def pause_play(self):
            pass

    app = QApplication([])
    window = MainWindow(LibraryState(Hang()))
    window.show()
    QTimer.singleShot(100, window.close)
    QTimer.singleShot(200, app.quit)
    app.exec()
    del window
    print("closed")
""")


def test_closing_window_while_host_hangs_exits_cleanly():
    src = Path(__file__).resolve().parent.parent / "src"
    env = dict(os.environ, QT_QPA_PLATFORM="offscreen", PYTHONPATH=str(src))
    result = subprocess.run(
        [sys.executable, "-c", CLOSE_WHILE_HANGING],
        env=env, capture_output=True, text=True, timeout=60,
    )
    assert result.returncode == 0, result.stderr
    assert "closed" in result.stdout
    assert "Destroyed while thread" not in result.stderr
