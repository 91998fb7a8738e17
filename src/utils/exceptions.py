"""Иерархия пользовательских исключений приложения."""

from __future__ import annotations


class VocabError(Exception):
    """Базовое исключение для всех ошибок bgvocab."""


# Ошибки источника словаря

class SourceError(VocabError):
    """Базовый класс ошибок чтения и разбора файла словаря."""


class SourceUnreadableError(SourceError):
    """Вызывается, если файл отсутствует или не может быть прочитан."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        msg = f"Vocabulary could not be read from '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MalformedRecordError(SourceError):
    """Вызывается, если строка не соответствует ожидаемой разметке."""

    def __init__(self, path: str, line_number: int, reason: str = "") -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        msg = f"Unparseable line {line_number} in '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class TruncatedRecordError(SourceError):
    """Вызывается, если за заголовочным словом нет строки перевода."""

    def __init__(self, path: str, line_number: int) -> None:
        self.path = path
        self.line_number = line_number
        super().__init__(
            f"Translation must be present after line {line_number} in '{path}'"
        )


# Ошибки выбора пакета

class BatchError(VocabError):
    """Базовый класс ошибок разбиения словаря на пакеты."""


class BatchSelectionError(BatchError):
    """Вызывается при недопустимых параметрах пакета."""


class EmptyBatchSelection(BatchError):
    """Выбранное окно пакета не содержит ни одного слова.

    Это не сбой: приложение сообщает пользователю и завершается штатно.
    """

    def __init__(self, number: int, size: int, total: int) -> None:
        self.number = number
        self.size = size
        self.total = total
        super().__init__(
            "Sorry, no words in vocabulary in this range. "
            "Try batches of smaller size or batches with smaller indices."
        )


# Ошибки конфигурации

class ConfigurationError(VocabError):
    """Вызывается при ошибках загрузки или проверки конфигурации."""


# Ошибки экспорта

class ExportError(VocabError):
    """Вызывается при сбое экспорта."""

    def __init__(self, fmt: str, reason: str = "") -> None:
        self.fmt = fmt
        msg = f"Export to {fmt} failed"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
