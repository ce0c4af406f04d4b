"""Logging setup.

The terminal belongs to the UI, so records go to a rotating file under the
platform log directory unless stderr output is asked for explicitly.
"""

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from platformdirs import PlatformDirs

APP_NAME = "gemini-tui"
LOG_FILE_NAME = "gemini-tui.log"
DEFAULT_LOG_MAX_BYTES = 2_000_000
DEFAULT_LOG_BACKUPS = 3
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class LogConfig:
    log_file: Path
    level: int = logging.INFO
    stderr: bool = False
    max_bytes: int = DEFAULT_LOG_MAX_BYTES
    backup_count: int = DEFAULT_LOG_BACKUPS


def default_log_dir() -> Path:
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_log_path)


def _parse_level(value: Optional[str], default: int) -> int:
    if not value:
        return default
    if value.isdigit():
        return int(value)
    return logging._nameToLevel.get(value.upper(), default)


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def build_log_config(default_level: int = logging.INFO) -> LogConfig:
    log_dir = Path(os.getenv("GEMINI_TUI_LOG_DIR") or default_log_dir())
    return LogConfig(
        log_file=log_dir / LOG_FILE_NAME,
        level=_parse_level(os.getenv("GEMINI_TUI_LOG_LEVEL"), default_level),
        stderr=_parse_bool(os.getenv("GEMINI_TUI_LOG_STDERR"), False),
    )


def configure_logging(config: LogConfig) -> None:
    """Replace root handlers with the file handler (and stderr if enabled)."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(config.level)

    formatter = logging.Formatter(LOG_FORMAT)

    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        config.log_file,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if config.stderr:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    # request URLs carry the API key as a query parameter
    logging.getLogger("httpx").setLevel(logging.WARNING)
