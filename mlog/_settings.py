"""Ustawienia minilog — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL     = "WARNING"
DEFAULT_PROMPT        = "?- "
DEFAULT_CONSOLE_WIDTH = 120


@dataclass(frozen=True, slots=True)
class Settings:
    log_level:     str
    prompt:        str
    console_width: int


def _log_level(raw: str | None) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def _int(raw: str | None, default: int) -> int:
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def get_settings() -> Settings:
    return Settings(
        log_level     = _log_level(os.getenv("MLOG_LOG_LEVEL")),
        prompt        = os.getenv("MLOG_PROMPT", DEFAULT_PROMPT),
        console_width = _int(os.getenv("MLOG_CONSOLE_WIDTH"), DEFAULT_CONSOLE_WIDTH),
    )
