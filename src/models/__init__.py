"""Доменные модели словаря карточек."""

from models.enums import MalformedPolicyKind, SourceFormat
from models.vocabulary import Batch, Vocabulary, VocabularyEntry

__all__ = [
    "MalformedPolicyKind",
    "SourceFormat",
    "Batch",
    "Vocabulary",
    "VocabularyEntry",
]
