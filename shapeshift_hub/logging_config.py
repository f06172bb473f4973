from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from .infra.settings import SettingsLoader

ROOT_LOGGER_NAME = "shapeshift_hub"

# Каналы логирования: api — вызовы операций, transport — HTTP-обмен.
API_CHANNEL = "api"
TRANSPORT_CHANNEL = "transport"

_channel_loggers: Dict[str, logging.Logger] = {}


def _configure_root(settings: SettingsLoader) -> logging.Logger:
    """Один раз навесить обработчики на общий логгер shapeshift_hub.

    Каналы пишут через него: каждый канал — в свой файл logs/<channel>.log
    и все вместе — в поток.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return root

    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        fmt=settings.get(
            "log_format",
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        ),
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)
    return root


def _file_handler(
    logs_dir: Path,
    channel: str,
    formatter: logging.Formatter,
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        logs_dir / f"{channel}.log",
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def get_logger(channel: str = API_CHANNEL) -> logging.Logger:
    """Вернуть логгер канала shapeshift_hub.<channel>.

    Ленивая инициализация через SettingsLoader. Уровень канала берётся
    из log_levels[channel], иначе из общего log_level — так можно,
    например, включить DEBUG только для transport.
    """
    logger = _channel_loggers.get(channel)
    if logger is not None:
        return logger

    settings = SettingsLoader()
    root = _configure_root(settings)

    logs_dir = Path(settings.get("logs_dir"))
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{channel}")
    levels = settings.get("log_levels", {}) or {}
    logger.setLevel(levels.get(channel, settings.get("log_level", "INFO")))

    if not logger.handlers:
        formatter = root.handlers[0].formatter or logging.Formatter()
        logger.addHandler(_file_handler(logs_dir, channel, formatter))

    _channel_loggers[channel] = logger
    return logger


def get_api_logger() -> logging.Logger:
    """Логгер вызовов операций API (logs/api.log)."""
    return get_logger(API_CHANNEL)


def get_transport_logger() -> logging.Logger:
    """Логгер HTTP-обмена: URL, статус, время ответа (logs/transport.log)."""
    return get_logger(TRANSPORT_CHANNEL)
