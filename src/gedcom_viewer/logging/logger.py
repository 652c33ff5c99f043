"""
Logging setup for the GEDCOM viewer.

All loggers hang off ``gedcom_viewer``. That base logger owns the master log
file and a console handler; every module logger adds its own file next to
the master one. Levels, file name and rotation come from the ``logging``
section of ``config/gedcom_viewer.yml``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from gedcom_viewer.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_viewer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    log_dir: Path
    master_file: str
    level: int
    console_level: int
    rotate: bool

    @classmethod
    def from_config(cls, cfg) -> "LogSettings":
        section = cfg.logging or {}
        debug = bool(cfg.debug)

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        return cls(
            log_dir=log_dir,
            master_file=section.get("file", "gedcom_viewer.log"),
            level=logging.DEBUG if debug else level,
            # the CLI writes its results to stdout
            console_level=logging.DEBUG if debug else logging.WARNING,
            rotate=bool(section.get("rotate", False)),
        )

    def file_handler(self, filename: str) -> logging.Handler:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.log_dir / filename

        if self.rotate:
            handler: logging.Handler = RotatingFileHandler(
                path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")

        handler.setLevel(self.level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler


_settings: Optional[LogSettings] = None


def _configure() -> LogSettings:
    """Attach the master file and console handlers once per process."""
    global _settings
    if _settings is not None:
        return _settings

    settings = LogSettings.from_config(get_config())

    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(settings.file_handler(settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    _settings = settings
    return settings


def get_logger(name: str | None = None) -> Logger:
    """
    Logger named ``gedcom_viewer.<name>`` with its own ``logs/<name>.log``.

    Names already under ``gedcom_viewer`` (``__name__`` inside the package)
    are used as-is. Without a name the base logger is returned.
    """
    settings = _configure()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger_name == BASE_LOGGER_NAME:
        return logger

    logger.setLevel(settings.level)
    logger.propagate = True
    if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        handler = settings.file_handler(f"{logger_name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
