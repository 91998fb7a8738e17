"""Tests for batch selection and deck building."""

import pytest

from core.batching import batch_count, build_deck, select_batch, validate_batch_size
from models.vocabulary import Vocabulary, VocabularyEntry
from utils.exceptions import BatchSelectionError


def make_vocabulary(*keys: str) -> Vocabulary:
    return Vocabulary([VocabularyEntry(key=k, translations=(k.upper(),)) for k in keys])


def test_first_batch_is_first_sorted_keys():
    vocab = make_vocabulary(*[f"w{i:02d}" for i in range(25)][::-1])
    batch = select_batch(vocab, 0, 10)
    assert batch.keys == [f"w{i:02d}" for i in range(10)]
    assert batch.offset == 0
    assert batch.total == 25


def test_partial_final_batch():
    vocab = make_vocabulary("e", "c", "a", "d", "b")
    batch = select_batch(vocab, 2, 2)
    assert batch.keys == ["e"]
    assert len(batch) == 1


def test_batch_beyond_end_is_empty():
    vocab = make_vocabulary("a", "b", "c")
    batch = select_batch(vocab, 5, 3)
    assert batch.is_empty
    assert batch.total == 3


def test_selection_is_pure():
    vocab = make_vocabulary("a", "b", "c", "d")
    assert select_batch(vocab, 1, 3) == select_batch(vocab, 1, 3)


def test_negative_batch_number_rejected():
    with pytest.raises(BatchSelectionError):
        select_batch(make_vocabulary("a"), -1, 3)


def test_zero_size_rejected():
    with pytest.raises(BatchSelectionError):
        select_batch(make_vocabulary("a"), 0, 0)


@pytest.mark.parametrize("size", [0, 1, 2])
def test_flashcard_batch_size_minimum(size):
    with pytest.raises(BatchSelectionError):
        validate_batch_size(size)


def test_validate_batch_size_accepts_three():
    assert validate_batch_size(3) == 3


def test_batch_count_counts_full_batches():
    vocab = make_vocabulary(*"abcdefg")
    assert batch_count(vocab, 3) == 2


def test_build_deck_repeats_batch():
    batch = select_batch(make_vocabulary("a", "b", "c"), 0, 3)
    assert [e.key for e in build_deck(batch, 2)] == ["a", "b", "c", "a", "b", "c"]


@pytest.mark.parametrize("repeat", [0, 1])
def test_build_deck_plays_at_least_once(repeat):
    batch = select_batch(make_vocabulary("a", "b", "c"), 0, 3)
    assert len(build_deck(batch, repeat)) == 3


def test_vocabulary_rejects_duplicate_keys():
    with pytest.raises(ValueError):
        make_vocabulary("a", "a")


def test_vocabulary_skip():
    vocab = make_vocabulary("c", "a", "b")
    assert list(vocab.skip(1)) == ["b", "c"]
    assert vocab.skip(0) is vocab


def test_batch_shares_immutable_entries_with_vocabulary():
    vocab = make_vocabulary("а", "б", "в")
    batch = select_batch(vocab, 0, 3)

    with pytest.raises(AttributeError):
        batch.entries[0].translations.append("X")
    assert vocab["а"].translations == ("А",)


def test_entry_without_translations_rejected():
    with pytest.raises(ValueError):
        VocabularyEntry(key="дом", translations=())
