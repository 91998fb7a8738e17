"""Domain models: VocabularyEntry, Vocabulary, Batch."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from core.stress_codec import draw, sort_key


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    """One headword with its translations. Immutable once built.

    Attributes:
        key: Diacritic-free, lowercase headword used for lookup and ordering.
        translations: Raw translation strings in source order (may carry HTML).
            Never empty.
        stress_markers: Headword with stressed letters in uppercase
            (e.g. ``дОм``); fed to :func:`core.stress_codec.draw` on display.
    """

    key: str
    translations: tuple[str, ...]
    stress_markers: str = ""

    def __post_init__(self) -> None:
        if not self.translations:
            raise ValueError(f"Entry {self.key!r} has no translations")
        object.__setattr__(self, "translations", tuple(self.translations))

    @property
    def stressed(self) -> str:
        """Headword with combining stress marks drawn in."""
        return draw(self.stress_markers or self.key)

    @property
    def translation(self) -> str:
        return self.translations[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "stressed": self.stressed,
            "translations": list(self.translations),
        }


class Vocabulary(Mapping[str, VocabularyEntry]):
    """Read-only, sorted mapping from normalized headword to entry.

    Ordering is a case-insensitive comparison of the diacritic-free key, so
    iteration, :attr:`entries` and batch slicing are stable.
    """

    def __init__(self, entries: Iterable[VocabularyEntry] = ()) -> None:
        ordered = sorted(entries, key=lambda e: sort_key(e.key))
        self._entries: tuple[VocabularyEntry, ...] = tuple(ordered)
        self._index: dict[str, VocabularyEntry] = {e.key: e for e in ordered}
        if len(self._index) != len(self._entries):
            raise ValueError("Vocabulary keys must be unique")

    def __getitem__(self, key: str) -> VocabularyEntry:
        return self._index[key]

    def __iter__(self) -> Iterator[str]:
        return (e.key for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self)} entries)"

    @property
    def entries(self) -> tuple[VocabularyEntry, ...]:
        """All entries in sort order."""
        return self._entries

    def skip(self, count: int) -> Vocabulary:
        """Return a new vocabulary without the first *count* sorted entries."""
        if count <= 0:
            return self
        return Vocabulary(list(self._entries[count:]))


@dataclass(frozen=True, slots=True)
class Batch:
    """A contiguous window over the sorted vocabulary.

    Attributes:
        number: Zero-based batch index.
        size: Requested batch size.
        entries: Entries inside the window (may be empty).
        total: Size of the vocabulary the batch was cut from.
    """

    number: int
    size: int
    entries: tuple[VocabularyEntry, ...] = ()
    total: int = 0

    @property
    def offset(self) -> int:
        return self.number * self.size

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
