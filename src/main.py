"""Application entry point.

Parses the command line, loads configuration and logging, builds the
vocabulary, selects a batch and either exports it or opens the PyQt6
flashcard window.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from config.settings import AppSettings, SettingsManager
from models.enums import MalformedPolicyKind, SourceFormat
from models.vocabulary import Batch, Vocabulary
from utils.constants import APP_NAME, APP_VERSION, EXPORT_FORMATS, FONTS_ENV_VAR
from utils.exceptions import ConfigurationError, EmptyBatchSelection, VocabError
from utils.logging_config import get_logger, setup_logging

logger = get_logger("main")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Vocabulary flashcards with stress marks.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--batch-size", type=int, help="words per batch (at least 3)")
    parser.add_argument("--batch-number", type=int, help="zero-based batch index")
    parser.add_argument("--en", action="store_true", help="use the tagged bg-en export")
    parser.add_argument("--small", action="store_true", help="use the small paired vocabulary")
    parser.add_argument("--source", type=Path, help="explicit vocabulary file")
    parser.add_argument(
        "--format", choices=[f.value for f in SourceFormat], help="source layout (default: by suffix)"
    )
    parser.add_argument("--quiz", action="store_true", help="hide translations until the next key press")
    parser.add_argument("--repeat", type=int, help="play the batch this many times")
    parser.add_argument("--pdf", action="store_true", help="export the batch to PDF and exit")
    parser.add_argument("--export", choices=EXPORT_FORMATS, help="export the batch and exit")
    parser.add_argument("--output", type=Path, help="export target file")
    parser.add_argument("--skip", type=int, help="drop this many leading entries after loading")
    parser.add_argument(
        "--on-malformed",
        choices=[k.value for k in MalformedPolicyKind],
        help="abort on a bad record or skip it with a warning",
    )
    parser.add_argument("--config", type=Path, help="user configuration file")
    return parser


def apply_cli_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Command-line flags win over configuration files."""
    if args.batch_size is not None:
        settings.batch.size = args.batch_size
    if args.batch_number is not None:
        settings.batch.number = args.batch_number
    if args.repeat is not None:
        settings.batch.repeat = args.repeat
    if args.quiz:
        settings.session.quiz = True
    if args.skip is not None:
        settings.source.skip_entries = args.skip
    if args.on_malformed:
        settings.source.on_malformed = args.on_malformed
    if args.format:
        settings.source.format = args.format
    return settings


def resolve_source(settings: AppSettings, args: argparse.Namespace) -> tuple[Path, SourceFormat | None]:
    """Pick the vocabulary file and, when known, its layout."""
    try:
        fmt = SourceFormat(settings.source.format) if settings.source.format else None
    except ValueError as exc:
        raise ConfigurationError(f"Unknown source format: {settings.source.format!r}") from exc
    if args.source is not None:
        return args.source, fmt
    # Named vocabularies have a known layout; only an explicit --format overrides it
    explicit = SourceFormat(args.format) if args.format else None
    if args.en:
        return Path(settings.source.tagged_path), explicit or SourceFormat.TAGGED
    if args.small:
        return Path(settings.source.paired_small_path), explicit or SourceFormat.PAIRED
    return Path(settings.source.paired_path), fmt or SourceFormat.PAIRED


def resolve_fonts_dir(settings: AppSettings) -> Path | None:
    configured = settings.export.fonts_dir or os.environ.get(FONTS_ENV_VAR, "")
    return Path(configured) if configured else None


def load_vocabulary(settings: AppSettings, path: Path, fmt: SourceFormat | None) -> Vocabulary:
    from core.vocabulary_loader import VocabularyLoader, make_policy

    loader = VocabularyLoader(
        policy=make_policy(settings.source.on_malformed),
        skip_entries=settings.source.skip_entries,
    )
    return loader.load(path, fmt)


def export_batch(settings: AppSettings, batch: Batch, fmt: str, output: Path | None) -> int:
    from core.export_service import ExportService
    from core.pdf_exporter import FlashcardPDFExporter

    renderer = None
    if fmt == "pdf":
        fonts_dir = resolve_fonts_dir(settings)
        if fonts_dir is None:
            print("Font directory not found, not generating pdf")
            return 0
        print("Font directory found, will generate pdf")
        renderer = FlashcardPDFExporter(
            fonts_dir,
            family=settings.export.font_family,
            words_per_file=settings.export.words_per_file,
            title_prefix=settings.export.title_prefix,
        )

    service = ExportService(pdf_renderer=renderer)
    target = output or Path(settings.export.output_dir) / f"output{service.get_extension(fmt)}"
    service.export(list(batch.entries), target, fmt)
    return 0


def run_session(settings: AppSettings, batch: Batch, vocabulary_size: int) -> int:
    from PyQt6.QtWidgets import QApplication

    from core.batching import build_deck
    from core.session import FlashcardSession
    from gui.flashcard_window import FlashcardWindow

    session = FlashcardSession(
        build_deck(batch, settings.batch.repeat),
        quiz=settings.session.quiz,
        batch_number=batch.number,
        batch_size=batch.size,
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    window = FlashcardWindow(session, vocabulary_size, wrap_width=settings.session.wrap_width)
    window.show()
    logger.info("Session started: %d cards (quiz=%s)", len(session), session.quiz)
    return app.exec()


def run(argv: list[str] | None = None) -> int:
    """Run the application and return the process exit code."""
    args = build_arg_parser().parse_args(argv)

    from dotenv import load_dotenv
    load_dotenv()

    settings_mgr = SettingsManager(user_config_path=args.config)
    settings = apply_cli_overrides(settings_mgr.load(), args)

    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    setup_logging(level=log_level)

    from core.batching import batch_count, select_batch, validate_batch_size

    try:
        validate_batch_size(settings.batch.size)
        path, fmt = resolve_source(settings, args)
        vocabulary = load_vocabulary(settings, path, fmt)

        print(f"Words in the dictionary: {len(vocabulary)}")
        print(f"Batches amount: {batch_count(vocabulary, settings.batch.size)}")

        batch = select_batch(vocabulary, settings.batch.number, settings.batch.size)
        if batch.is_empty:
            raise EmptyBatchSelection(batch.number, batch.size, batch.total)

        export_fmt = "pdf" if args.pdf else args.export
        if export_fmt:
            return export_batch(settings, batch, export_fmt, args.output)
        return run_session(settings, batch, len(vocabulary))
    except EmptyBatchSelection as exc:
        print(exc, file=sys.stderr)
        return 0
    except VocabError as exc:
        logger.error("%s", exc)
        return 1


def main() -> None:
    """Application main function."""
    sys.exit(run())


if __name__ == "__main__":
    main()
