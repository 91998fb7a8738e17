"""Сервис экспорта пакета с паттерном «Стратегия» для форматов PDF/CSV/JSON."""

from __future__ import annotations

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

from core.pdf_exporter import FlashcardPDFExporter
from models.vocabulary import VocabularyEntry
from utils.exceptions import ExportError
from utils.logging_config import get_logger

logger = get_logger("core.export_service")


class ExportStrategy(ABC):
    """Абстрактная стратегия экспорта."""

    @abstractmethod
    def export(self, entries: list[VocabularyEntry], path: Path) -> None:
        """Экспортировать записи по указанному пути.

        Аргументы:
            entries: Записи словаря для экспорта.
            path: Путь к выходному файлу.

        Исключения:
            ExportError: при ошибках записи.
        """

    @abstractmethod
    def file_extension(self) -> str:
        """Расширение по умолчанию для формата (напр. .json)."""


class JSONExporter(ExportStrategy):
    """Экспорт записей в виде JSON-массива."""

    def export(self, entries: list[VocabularyEntry], path: Path) -> None:
        try:
            data = [e.to_dict() for e in entries]
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            logger.info("Exported %d entries to JSON: %s", len(entries), path)
        except (OSError, TypeError, ValueError) as exc:
            raise ExportError("JSON", str(exc)) from exc

    def file_extension(self) -> str:
        return ".json"


class CSVExporter(ExportStrategy):
    """Экспорт записей в плоский CSV.

    Колонки: key, stressed, translations (через « | »).
    """

    def export(self, entries: list[VocabularyEntry], path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh)
                writer.writerow(["key", "stressed", "translations"])
                for entry in entries:
                    writer.writerow([
                        entry.key,
                        entry.stressed,
                        " | ".join(entry.translations),
                    ])
            logger.info("Exported %d entries to CSV: %s", len(entries), path)
        except OSError as exc:
            raise ExportError("CSV", str(exc)) from exc

    def file_extension(self) -> str:
        return ".csv"


class PDFExporter(ExportStrategy):
    """Экспорт карточек в PDF (по слову на страницу)."""

    def __init__(self, renderer: FlashcardPDFExporter) -> None:
        self._renderer = renderer

    def export(self, entries: list[VocabularyEntry], path: Path) -> None:
        self._renderer.export(entries, path)

    def file_extension(self) -> str:
        return ".pdf"


class ExportService:
    """Фасад: направляет экспорт в нужную стратегию.

    PDF доступен, только если передан настроенный рендерер (нужен каталог шрифтов).
    """

    def __init__(self, pdf_renderer: FlashcardPDFExporter | None = None) -> None:
        self._strategies: dict[str, ExportStrategy] = {
            "json": JSONExporter(),
            "csv": CSVExporter(),
        }
        if pdf_renderer is not None:
            self._strategies["pdf"] = PDFExporter(pdf_renderer)

    def register_strategy(self, key: str, strategy: ExportStrategy) -> None:
        """Зарегистрировать пользовательскую стратегию экспорта."""
        self._strategies[key.lower()] = strategy

    @property
    def available_formats(self) -> list[str]:
        return list(self._strategies.keys())

    def export(
        self,
        entries: list[VocabularyEntry],
        path: Path,
        fmt: str = "json",
    ) -> None:
        """Экспортировать записи в заданном формате по пути.

        Исключения:
            ExportError: при неизвестном формате или ошибке экспорта.
        """
        strategy = self._strategies.get(fmt.lower())
        if strategy is None:
            raise ExportError(fmt, f"Unknown export format: {fmt}")
        strategy.export(entries, path)

    def get_extension(self, fmt: str) -> str:
        """Получить расширение файла для формата."""
        strategy = self._strategies.get(fmt.lower())
        return strategy.file_extension() if strategy else ".txt"
