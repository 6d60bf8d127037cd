# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from core.ordering import SORT_LEXICAL, SORT_MODES

ENV_MUSIC_DIRS = "TRACKDECK_MUSIC_DIRS"
ENV_SORT = "TRACKDECK_SORT"
ENV_VOLUME = "TRACKDECK_VOLUME"
ENV_LOG_LEVEL = "TRACKDECK_LOG_LEVEL"

DEFAULT_VOLUME = 0.7


@dataclass(frozen=True)
class Config:
    music_dirs: list[str] = field(default_factory=list)
    sort_mode: str = SORT_LEXICAL
    volume: float = DEFAULT_VOLUME
    log_level: str = "INFO"


def default_music_dir() -> str:
    from PySide6.QtCore import QStandardPaths

    return QStandardPaths.writableLocation(QStandardPaths.MusicLocation)


def _choice(environ: Mapping[str, str], key: str, default: str, allowed: Sequence[str]) -> str:
    value = (environ.get(key) or default).strip().lower()
    if value not in allowed:
        raise ValueError(f"{key} must be one of {', '.join(allowed)} (got {value!r})")
    return value


def _volume(environ: Mapping[str, str]) -> float:
    raw = environ.get(ENV_VOLUME)
    if not raw:
        return DEFAULT_VOLUME
    try:
        v = float(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_VOLUME} must be a number between 0 and 1 (got {raw!r})") from e
    return min(1.0, max(0.0, v))


def _log_level(environ: Mapping[str, str]) -> str:
    level = (environ.get(ENV_LOG_LEVEL) or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown level {level!r}")
    return level


def load_config(environ: Mapping[str, str] = os.environ, argv: Sequence[str] = ()) -> Config:
    """
    Command-line folders win over TRACKDECK_MUSIC_DIRS, which wins over the
    platform music folder.
    """
    dirs = [a for a in argv if a]
    if not dirs:
        raw = environ.get(ENV_MUSIC_DIRS) or ""
        dirs = [d for d in raw.split(os.pathsep) if d]
    if not dirs:
        dirs = [default_music_dir()]

    return Config(
        music_dirs=dirs,
        sort_mode=_choice(environ, ENV_SORT, SORT_LEXICAL, SORT_MODES),
        volume=_volume(environ),
        log_level=_log_level(environ),
    )
