"""Shared fixtures and builders for vocabulary source lines."""

from __future__ import annotations

import pytest

from config.settings import SettingsManager
from core.vocabulary_loader import RecordParserFactory

# 92-byte ASCII wrapper in front of the key, 10-character wrapper after the value
TAGGED_PREFIX = "<" + "x" * 90 + '"'
TAGGED_SUFFIX = "</def></w>"


def tagged_line(key: str, value: str) -> str:
    return f'{TAGGED_PREFIX}{key}">{value}{TAGGED_SUFFIX}\n'


@pytest.fixture(autouse=True)
def _fresh_singletons():
    SettingsManager.reset_instance()
    RecordParserFactory._parsers.clear()
    yield
    SettingsManager.reset_instance()
