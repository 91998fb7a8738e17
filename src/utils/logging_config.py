"""Настройка логирования приложения."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from utils.constants import APP_NAME, USER_DATA_DIR

# Сторонние библиотеки, которые слишком многословны на уровне DEBUG
_NOISY_LOGGERS = ("fontTools", "fpdf", "PIL")


def setup_logging(
    level: int = logging.INFO,
    log_dir: Path | None = None,
    console: bool = True,
) -> Path:
    """Настроить логирование для всего приложения.

    Аргументы:
        level: Уровень логгера приложения и консоли.
        log_dir: Каталог для лог-файлов. По умолчанию ~/.bgvocab/logs.
        console: Дублировать сообщения в stderr.

    Возвращает:
        Путь к лог-файлу.
    """
    log_dir = log_dir or (USER_DATA_DIR / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{APP_NAME}.log"

    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(level)

    # Повторный вызов меняет только уровень
    if app_logger.handlers:
        for handler in app_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.FileHandler
            ):
                handler.setLevel(level)
        return log_file

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        stream = logging.StreamHandler()
        stream.setLevel(level)
        stream.setFormatter(fmt)
        app_logger.addHandler(stream)

    # Ротируемый файл: 5 МБ, 3 резервные копии, всегда DEBUG
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    app_logger.addHandler(file_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Получить дочерний логгер в пространстве имён приложения."""
    return logging.getLogger(f"{APP_NAME}.{name}")
