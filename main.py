import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import Config, load_config
from core.host import LocalHost
from core.state import LibraryState
from player.player import Player
from ui.main_window import MainWindow

logger = logging.getLogger("trackdeck")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def build_state(config: Config) -> LibraryState:
    player = Player(volume_0_to_1=config.volume)
    host = LocalHost(config.music_dirs, player)
    return LibraryState(host, sort_mode=config.sort_mode)


def main() -> int:
    qt_app = QApplication(sys.argv)

    try:
        config = load_config(argv=qt_app.arguments()[1:])
    except ValueError as e:
        print(f"trackdeck: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level)
    logger.info("Music folders: %s", ", ".join(config.music_dirs))

    state = build_state(config)
    main_window = MainWindow(state)
    main_window.show()

    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
