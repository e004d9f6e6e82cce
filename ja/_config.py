"""Konfiguracja CLI — zmienne środowiskowe, opcjonalnie plik .env w katalogu projektu.

Zmienne:
  JA_LOG_LEVEL      poziom logowania (domyślnie WARNING)
  JA_CONSOLE_WIDTH  szerokość konsoli rich (domyślnie 200)
  JA_EVALUATOR      domyślny ewaluator dla `ja audit`, np. "my_solver:Evaluator"
"""

from __future__ import annotations

import functools
import logging
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

ROOT = pathlib.Path(__file__).resolve().parent.parent


@dataclass(frozen=True, slots=True)
class Settings:
    log_level:     str
    console_width: int
    evaluator:     str | None


_DEFAULT_LOG_LEVEL     = "WARNING"
_DEFAULT_CONSOLE_WIDTH = 200


def _log_level(raw: str | None) -> str:
    level = (raw or _DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in logging.getLevelNamesMapping() else _DEFAULT_LOG_LEVEL


def _console_width(raw: str | None) -> int:
    try:
        width = int(raw) if raw else _DEFAULT_CONSOLE_WIDTH
    except ValueError:
        return _DEFAULT_CONSOLE_WIDTH
    return width if width > 0 else _DEFAULT_CONSOLE_WIDTH


def load_settings() -> Settings:
    """Nieprawidłowe wartości JA_LOG_LEVEL / JA_CONSOLE_WIDTH → wartości domyślne."""
    load_dotenv(ROOT / ".env")
    return Settings(
        log_level     = _log_level(os.getenv("JA_LOG_LEVEL")),
        console_width = _console_width(os.getenv("JA_CONSOLE_WIDTH")),
        evaluator     = os.getenv("JA_EVALUATOR") or None,
    )


@functools.lru_cache(maxsize=1)
def get_console() -> Console:
    return Console(width=load_settings().console_width)


def configure_logging(settings: Settings) -> None:
    """Logi bibliotek (justact.*) idą na stderr przez RichHandler."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
