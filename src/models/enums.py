"""Enumerations for source formats, parsing policies and export targets."""

from __future__ import annotations

from enum import StrEnum


class SourceFormat(StrEnum):
    """Line-record layouts understood by the vocabulary loader."""

    TAGGED = "tagged"
    PAIRED = "paired"

    @classmethod
    def from_suffix(cls, suffix: str) -> SourceFormat | None:
        """Guess the layout from a file suffix (``.xml`` / ``.txt``)."""
        mapping: dict[str, SourceFormat] = {
            ".xml": cls.TAGGED,
            ".txt": cls.PAIRED,
        }
        return mapping.get(suffix.lower())


class MalformedPolicyKind(StrEnum):
    """What the loader does with a line it cannot parse."""

    ABORT = "abort"
    SKIP = "skip"
