"""Flashcard session navigation, independent of any widget toolkit."""

from __future__ import annotations

from dataclasses import dataclass

from models.vocabulary import VocabularyEntry
from utils.exceptions import EmptyBatchSelection
from utils.logging_config import get_logger

logger = get_logger("core.session")


@dataclass(frozen=True, slots=True)
class Card:
    """What the window shows for the current step.

    Attributes:
        position: 1-based card number.
        total: Number of cards in the deck.
        entry: The vocabulary entry on the card.
        reveal: Whether the translation is visible.
    """

    position: int
    total: int
    entry: VocabularyEntry
    reveal: bool

    @property
    def word(self) -> str:
        return self.entry.stressed

    @property
    def translation(self) -> str:
        return self.entry.translation if self.reveal else ""


class FlashcardSession:
    """Cycles through a deck in half-steps.

    Every card has two half-steps: word only, then word with translation.
    Review mode jumps two half-steps at a time so the translation is always
    shown; quiz mode stops on both. Navigation wraps around in both
    directions.

    Args:
        deck: Cards to show, in order (repeats allowed).
        quiz: Hide the translation until the next step.
        batch_number: Only used when reporting an empty deck.
        batch_size: Only used when reporting an empty deck.

    Raises:
        EmptyBatchSelection: If *deck* is empty.
    """

    def __init__(
        self,
        deck: list[VocabularyEntry],
        quiz: bool = False,
        batch_number: int = 0,
        batch_size: int = 0,
    ) -> None:
        if not deck:
            raise EmptyBatchSelection(batch_number, batch_size, 0)
        self._deck = deck
        self._quiz = quiz
        self._step = 1 if quiz else 2
        self._index = 0

    @property
    def quiz(self) -> bool:
        return self._quiz

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._deck)

    def current(self) -> Card:
        word_index = self._index // 2
        return Card(
            position=word_index + 1,
            total=len(self._deck),
            entry=self._deck[word_index],
            reveal=not (self._quiz and self._index % 2 == 0),
        )

    def advance(self) -> Card:
        self._index = (self._index + self._step) % self._span
        return self.current()

    def retreat(self) -> Card:
        if self._index == 0:
            self._index = self._span - self._step
        else:
            self._index = (self._index - self._step) % self._span
        return self.current()

    @property
    def _span(self) -> int:
        return len(self._deck) * 2
