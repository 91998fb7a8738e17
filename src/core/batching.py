"""Batch selection over the sorted vocabulary."""

from __future__ import annotations

from models.vocabulary import Batch, Vocabulary, VocabularyEntry
from utils.constants import MIN_BATCH_SIZE
from utils.exceptions import BatchSelectionError
from utils.logging_config import get_logger

logger = get_logger("core.batching")


def validate_batch_size(size: int) -> int:
    """Reject batch sizes too small to be worth a flashcard round.

    Raises:
        BatchSelectionError: If *size* is below ``MIN_BATCH_SIZE``.
    """
    if size < MIN_BATCH_SIZE:
        raise BatchSelectionError(
            f"Batch size of {size} words makes no sense, use at least {MIN_BATCH_SIZE}"
        )
    return size


def batch_count(vocabulary: Vocabulary, size: int) -> int:
    """Number of full batches of *size* in *vocabulary*."""
    _check_window(0, size)
    return len(vocabulary) // size


def _check_window(number: int, size: int) -> None:
    if size < 1:
        raise BatchSelectionError(f"Batch size must be positive, got {size}")
    if number < 0:
        raise BatchSelectionError(f"Batch number must not be negative, got {number}")


def select_batch(vocabulary: Vocabulary, number: int, size: int) -> Batch:
    """Cut batch *number* of *size* entries out of the sorted vocabulary.

    A window past the end yields an empty batch; callers decide how to
    report it. The flashcard minimum is enforced separately by
    :func:`validate_batch_size`.

    Raises:
        BatchSelectionError: On a negative batch number or a non-positive size.
    """
    _check_window(number, size)

    offset = number * size
    window = vocabulary.entries[offset:offset + size]
    logger.debug(
        "Batch %d (size %d): %d of %d entries", number, size, len(window), len(vocabulary)
    )
    return Batch(number=number, size=size, entries=window, total=len(vocabulary))


def build_deck(batch: Batch, repeat: int = 1) -> list[VocabularyEntry]:
    """Entries of *batch* played *repeat* times in a row (at least once)."""
    return list(batch.entries) * max(1, repeat)
