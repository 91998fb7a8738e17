"""Vocabulary loading: line-record parsers behind a factory, plus a pluggable
policy for lines that do not match the expected layout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from core.stress_codec import normalize_key, to_markers
from models.enums import MalformedPolicyKind, SourceFormat
from models.vocabulary import Vocabulary, VocabularyEntry
from utils.constants import (
    TAGGED_DELIMITER,
    TAGGED_PREFIX_BYTES,
    TAGGED_SUFFIX_CHARS,
    TAGGED_VALUE_LEAD,
)
from utils.exceptions import (
    ConfigurationError,
    MalformedRecordError,
    SourceError,
    SourceUnreadableError,
    TruncatedRecordError,
)
from utils.logging_config import get_logger

logger = get_logger("core.vocabulary_loader")


@dataclass(slots=True)
class RawRecord:
    """A single parsed record before it is merged into the vocabulary."""

    line_number: int
    key: str
    stress_markers: str
    translation: str


# --- Malformed-line policies ---


class MalformedLinePolicy(ABC):
    """Decides what happens when a parser hits a bad record."""

    @abstractmethod
    def handle(self, error: SourceError) -> None:
        """Either re-raise *error* or record it and let parsing continue."""


class AbortPolicy(MalformedLinePolicy):
    """Strict contract: any bad record aborts the whole load."""

    def handle(self, error: SourceError) -> None:
        raise error


class SkipPolicy(MalformedLinePolicy):
    """Log the bad record and keep going."""

    def __init__(self) -> None:
        self.skipped: list[SourceError] = []

    def handle(self, error: SourceError) -> None:
        self.skipped.append(error)
        logger.warning("Skipping record: %s", error)


def make_policy(kind: MalformedPolicyKind | str) -> MalformedLinePolicy:
    """Build a policy from its configuration key (``abort`` / ``skip``)."""
    try:
        kind = MalformedPolicyKind(kind)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown malformed-record policy: {kind!r}") from exc
    if kind is MalformedPolicyKind.SKIP:
        return SkipPolicy()
    return AbortPolicy()


# --- Parsers ---


def _chomp(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


class RecordParser(ABC):
    """Abstract base for line-oriented vocabulary formats."""

    @abstractmethod
    def parse(
        self,
        lines: Iterable[str],
        source: str,
        policy: MalformedLinePolicy,
    ) -> Iterator[RawRecord]:
        """Yield records from *lines*.

        Args:
            lines: Source lines, with or without trailing newlines.
            source: Name of the source used in diagnostics.
            policy: Handler for malformed records.
        """

    @abstractmethod
    def source_format(self) -> SourceFormat:
        """The layout this parser understands."""


class TaggedLineParser(RecordParser):
    """One export record per line inside a constant-length tag wrapper.

    Layout::

        <92-byte prefix>KEY">..VALUE<10-char suffix>

    The key may carry combining stress marks; they are moved into the
    uppercase marker encoding and stripped from the lookup key. The value is
    kept as raw markup.
    """

    def parse_line(self, line: str, line_number: int, source: str) -> RawRecord:
        """Parse one line.

        Raises:
            MalformedRecordError: If the line does not fit the fixed layout.
        """
        raw = _chomp(line).encode("utf-8")
        if len(raw) < TAGGED_PREFIX_BYTES:
            raise MalformedRecordError(source, line_number, "line is shorter than the fixed prefix")
        try:
            rest = raw[TAGGED_PREFIX_BYTES:].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(
                source, line_number, "prefix boundary splits a character"
            ) from exc

        pos = rest.find(TAGGED_DELIMITER)
        if pos < 0:
            raise MalformedRecordError(source, line_number, f"delimiter {TAGGED_DELIMITER!r} not found")

        raw_key, tail = rest[:pos], rest[pos:]
        if len(tail) < TAGGED_VALUE_LEAD + TAGGED_SUFFIX_CHARS:
            raise MalformedRecordError(source, line_number, "value is shorter than the fixed suffix")

        key = normalize_key(raw_key)
        if not key:
            raise MalformedRecordError(source, line_number, "empty headword")

        return RawRecord(
            line_number=line_number,
            key=key,
            stress_markers=to_markers(raw_key.lower()),
            translation=tail[TAGGED_VALUE_LEAD:len(tail) - TAGGED_SUFFIX_CHARS],
        )

    def parse(
        self,
        lines: Iterable[str],
        source: str,
        policy: MalformedLinePolicy,
    ) -> Iterator[RawRecord]:
        for line_number, line in enumerate(lines, start=1):
            try:
                yield self.parse_line(line, line_number, source)
            except MalformedRecordError as exc:
                policy.handle(exc)

    def source_format(self) -> SourceFormat:
        return SourceFormat.TAGGED


class PairedLineParser(RecordParser):
    """Records of headword / translation / separator lines.

    The stressed letter of the headword is written in uppercase (``дОм``).
    The separator line is consumed whatever it holds; it may be missing on
    the last record. Blank lines where a headword is expected are skipped,
    so trailing blank lines end the input cleanly.
    """

    def parse(
        self,
        lines: Iterable[str],
        source: str,
        policy: MalformedLinePolicy,
    ) -> Iterator[RawRecord]:
        numbered = enumerate(lines, start=1)
        while True:
            item = next(numbered, None)
            if item is None:
                return
            line_number, headword = item[0], _chomp(item[1]).strip()
            if not headword:
                continue

            translation = next(numbered, None)
            if translation is None:
                policy.handle(TruncatedRecordError(source, line_number))
                return

            yield RawRecord(
                line_number=line_number,
                key=normalize_key(headword),
                stress_markers=to_markers(headword),
                translation=_chomp(translation[1]),
            )
            next(numbered, None)

    def source_format(self) -> SourceFormat:
        return SourceFormat.PAIRED


class RecordParserFactory:
    """Returns the parser for a format, or guesses it from the file suffix."""

    _parsers: dict[SourceFormat, RecordParser] = {}

    @classmethod
    def register(cls, parser: RecordParser) -> None:
        cls._parsers[parser.source_format()] = parser
        logger.debug("Registered parser for '%s'", parser.source_format())

    @classmethod
    def register_defaults(cls) -> None:
        cls.register(TaggedLineParser())
        cls.register(PairedLineParser())

    @classmethod
    def create(cls, path: Path | None = None, fmt: SourceFormat | str | None = None) -> RecordParser:
        """Get a parser by explicit format, falling back to the file suffix.

        Raises:
            SourceUnreadableError: If neither gives a known format.
        """
        if not cls._parsers:
            cls.register_defaults()

        resolved = SourceFormat(fmt) if fmt else None
        if resolved is None and path is not None:
            resolved = SourceFormat.from_suffix(path.suffix)
        parser = cls._parsers.get(resolved) if resolved else None
        if parser is None:
            raise SourceUnreadableError(str(path), "unknown vocabulary format")
        return parser


# --- Loader ---


def _read_lines(path: Path) -> Iterator[str]:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            yield from fh
    except FileNotFoundError as exc:
        raise SourceUnreadableError(str(path), "file does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadableError(str(path), str(exc)) from exc


class VocabularyLoader:
    """Builds a :class:`Vocabulary` by fully draining a source.

    Records sharing a key are merged: translations accumulate in source
    order and the stress markers of the first occurrence are kept.

    Args:
        policy: Malformed-record handling. Defaults to :class:`AbortPolicy`.
        skip_entries: Number of leading sorted entries to drop after parsing.
    """

    def __init__(
        self,
        policy: MalformedLinePolicy | None = None,
        skip_entries: int = 0,
    ) -> None:
        self._policy = policy or AbortPolicy()
        self._skip_entries = max(0, skip_entries)

    @property
    def policy(self) -> MalformedLinePolicy:
        return self._policy

    def load(self, path: Path, fmt: SourceFormat | str | None = None) -> Vocabulary:
        """Load a vocabulary file.

        Raises:
            SourceUnreadableError: If the file is missing or cannot be decoded.
            MalformedRecordError: On a bad tagged line under the abort policy.
            TruncatedRecordError: On a headword without translation under the
                abort policy.
        """
        parser = RecordParserFactory.create(path, fmt)
        vocabulary = self._build(parser, _read_lines(path), str(path))
        logger.info(
            "Loaded %d entries from %s (%s format)",
            len(vocabulary), path, parser.source_format(),
        )
        return vocabulary

    def load_lines(
        self,
        lines: Iterable[str],
        fmt: SourceFormat | str,
        source: str = "<lines>",
    ) -> Vocabulary:
        """Build a vocabulary from in-memory lines."""
        parser = RecordParserFactory.create(fmt=fmt)
        return self._build(parser, lines, source)

    def _build(self, parser: RecordParser, lines: Iterable[str], source: str) -> Vocabulary:
        translations: dict[str, list[str]] = {}
        markers: dict[str, str] = {}
        for record in parser.parse(lines, source, self._policy):
            translations.setdefault(record.key, []).append(record.translation)
            markers.setdefault(record.key, record.stress_markers)

        vocabulary = Vocabulary(
            VocabularyEntry(key=key, translations=tuple(values), stress_markers=markers[key])
            for key, values in translations.items()
        )
        if self._skip_entries:
            logger.debug("Dropping %d leading entries", self._skip_entries)
            vocabulary = vocabulary.skip(self._skip_entries)
        return vocabulary
