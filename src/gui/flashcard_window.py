"""Flashcard window: word, translation and help panels with keyboard navigation."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import QGroupBox, QLabel, QVBoxLayout, QWidget

from core.markup import flatten_html
from core.session import Card, FlashcardSession
from utils.constants import APP_TITLE, DEFAULT_WRAP_WIDTH
from utils.logging_config import get_logger

logger = get_logger("gui.flashcard_window")


class FlashcardWindow(QWidget):
    """
    Single-deck flashcard viewer.

    Layout::

        ┌──────────────────────────────────┐
        │ [i/n]  stressed word             │  10%
        ├──────────────────────────────────┤
        │ translation (hidden in quiz)     │  50%
        ├──────────────────────────────────┤
        │ Help                             │  30%
        └──────────────────────────────────┘

    Keys: Enter next, Backspace previous, Q quit.

    Args:
        session: Navigation state for the deck.
        vocabulary_size: Shown in the help panel.
        wrap_width: Column width for flattened translations.
        parent: Parent widget.
    """

    def __init__(
        self,
        session: FlashcardSession,
        vocabulary_size: int,
        wrap_width: int = DEFAULT_WRAP_WIDTH,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._vocabulary_size = vocabulary_size
        self._wrap_width = wrap_width

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(600, 480)

        self._setup_ui()
        self._setup_shortcuts()
        self._show_card(session.current())

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        bold = QFont()
        bold.setBold(True)

        word_box = QGroupBox()
        word_layout = QVBoxLayout(word_box)
        self._word_label = QLabel()
        word_font = QFont(bold)
        word_font.setPointSize(22)
        self._word_label.setFont(word_font)
        word_layout.addWidget(self._word_label)
        layout.addWidget(word_box, stretch=1)

        translation_box = QGroupBox()
        translation_layout = QVBoxLayout(translation_box)
        self._translation_label = QLabel()
        self._translation_label.setFont(bold)
        self._translation_label.setWordWrap(True)
        self._translation_label.setAlignment(
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop
        )
        self._translation_label.setTextFormat(Qt.TextFormat.PlainText)
        translation_layout.addWidget(self._translation_label)
        layout.addWidget(translation_box, stretch=5)

        help_box = QGroupBox("Help")
        help_layout = QVBoxLayout(help_box)
        help_label = QLabel(
            f"Vocabulary size: {self._vocabulary_size} words\n\n"
            "Press:\n"
            "  <Enter> to see the next word\n"
            "  <Backspace> to see the previous word\n"
            "  q to exit"
        )
        help_label.setFont(bold)
        help_label.setTextFormat(Qt.TextFormat.PlainText)
        help_layout.addWidget(help_label)
        layout.addWidget(help_box, stretch=3)

    def _setup_shortcuts(self) -> None:
        QShortcut(QKeySequence(Qt.Key.Key_Return), self).activated.connect(self._on_next)
        QShortcut(QKeySequence(Qt.Key.Key_Enter), self).activated.connect(self._on_next)
        QShortcut(QKeySequence(Qt.Key.Key_Backspace), self).activated.connect(self._on_previous)
        QShortcut(QKeySequence(Qt.Key.Key_Q), self).activated.connect(self.close)

    # --- User actions ---

    def _on_next(self) -> None:
        self._show_card(self._session.advance())

    def _on_previous(self) -> None:
        self._show_card(self._session.retreat())

    # --- Rendering ---

    def _show_card(self, card: Card) -> None:
        self._word_label.setText(f"[{card.position}/{card.total}]\n\n{card.word}")
        if card.reveal:
            self._translation_label.setText(flatten_html(card.translation, self._wrap_width))
        else:
            self._translation_label.setText("")
        logger.debug("Showing card %d/%d (reveal=%s)", card.position, card.total, card.reveal)
