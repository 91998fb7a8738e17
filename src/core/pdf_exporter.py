"""PDF flashcards: one word per page, split into files of a fixed size."""

from __future__ import annotations

from pathlib import Path

from core.markup import flatten_html
from models.vocabulary import VocabularyEntry
from utils.constants import (
    DEFAULT_FONT_FAMILY,
    PDF_MARGIN_MM,
    PDF_TITLE_PREFIX,
    PDF_TRANSLATION_FONT_SIZE,
    PDF_WORD_FONT_SIZE,
    PDF_WORD_GAP_MM,
    WORDS_PER_PDF,
)
from utils.exceptions import ExportError
from utils.logging_config import get_logger

logger = get_logger("core.pdf_exporter")


class FlashcardPDFExporter:
    """Render vocabulary entries as printable flashcards with fpdf2.

    Cyrillic needs a Unicode TTF font, so a font directory is mandatory: the
    regular face is read from ``<fonts_dir>/<family>-Regular.ttf``.

    Args:
        fonts_dir: Directory holding the TTF files.
        family: Font family name.
        words_per_file: Cards per output file.
        title_prefix: Document title; the part number is appended.
    """

    def __init__(
        self,
        fonts_dir: Path | None,
        family: str = DEFAULT_FONT_FAMILY,
        words_per_file: int = WORDS_PER_PDF,
        title_prefix: str = PDF_TITLE_PREFIX,
    ) -> None:
        self._fonts_dir = fonts_dir
        self._family = family
        self._words_per_file = max(1, words_per_file)
        self._title_prefix = title_prefix

    @property
    def font_path(self) -> Path:
        """Location of the regular font face.

        Raises:
            ExportError: If no font directory is configured or the file is missing.
        """
        if self._fonts_dir is None:
            raise ExportError("PDF", "font directory is not configured")
        path = self._fonts_dir / f"{self._family}-Regular.ttf"
        if not path.is_file():
            raise ExportError("PDF", f"font file not found: {path}")
        return path

    def export(self, entries: list[VocabularyEntry], path: Path) -> list[Path]:
        """Write *entries* to ``<stem>_<i><suffix>`` files next to *path*.

        Returns:
            The written files, in part order.

        Raises:
            ExportError: On missing fonts or write failures.
        """
        from fpdf import FPDF  # type: ignore[import-untyped]

        font_path = self.font_path
        written: list[Path] = []
        chunks = [
            entries[i:i + self._words_per_file]
            for i in range(0, len(entries), self._words_per_file)
        ]
        for part, chunk in enumerate(chunks, start=1):
            pdf = FPDF()
            pdf.add_font(self._family, "", str(font_path))
            pdf.set_title(f"{self._title_prefix}: part {part}")
            pdf.set_margins(PDF_MARGIN_MM, PDF_MARGIN_MM, PDF_MARGIN_MM)
            pdf.set_auto_page_break(auto=True, margin=PDF_MARGIN_MM)

            for entry in chunk:
                pdf.add_page()
                pdf.set_font(self._family, size=PDF_WORD_FONT_SIZE)
                pdf.multi_cell(0, PDF_WORD_FONT_SIZE * 0.5, entry.stressed)
                pdf.ln(PDF_WORD_GAP_MM)
                pdf.set_font(self._family, size=PDF_TRANSLATION_FONT_SIZE)
                pdf.multi_cell(
                    0,
                    PDF_TRANSLATION_FONT_SIZE * 0.5,
                    flatten_html(entry.translation),
                    align="R",
                )

            target = path.with_name(f"{path.stem}_{part}{path.suffix or '.pdf'}")
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                pdf.output(str(target))
            except OSError as exc:
                raise ExportError("PDF", str(exc)) from exc
            written.append(target)
            logger.info("Flashcard PDF part %d (%d words) exported to %s", part, len(chunk), target)
        return written
