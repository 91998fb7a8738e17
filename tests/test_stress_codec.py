"""Tests for stress mark drawing and stripping."""

import pytest

from core.stress_codec import (
    STRESS_MARK,
    draw,
    normalize_key,
    sort_key,
    strip,
    stress_count,
    to_markers,
)


def test_draw_after_leading_uppercase():
    assert draw("Дом") == "д\u0301ом"


def test_draw_after_inner_uppercase():
    assert draw("дОм") == "до\u0301м"


def test_draw_last_character():
    assert draw("сестрА") == "сестра\u0301"


def test_draw_without_uppercase_is_unchanged():
    assert draw("дом") == "дом"


def test_draw_honors_every_uppercase_letter():
    drawn = draw("мОлокО")
    assert drawn == "мо\u0301локо\u0301"
    assert stress_count(drawn) == 2


def test_draw_is_noop_on_its_own_output():
    once = draw("кнИга")
    assert draw(once) == once


@pytest.mark.parametrize("word", ["Дом", "дОм", "сестрА", "мОлокО", "дом", "", "Ab-cD"])
def test_strip_draw_gives_lowercase(word):
    assert strip(draw(word)) == word.lower()
    assert stress_count(draw(word)) == sum(ch.isupper() for ch in word)


@pytest.mark.parametrize("text", ["до\u0301м", "дом", "\u0301\u0301", "", "a\u0301b\u0301"])
def test_strip_is_idempotent(text):
    assert strip(strip(text)) == strip(text)
    assert STRESS_MARK not in strip(text)


def test_to_markers_inverts_draw():
    assert to_markers("до\u0301м") == "дОм"
    assert draw(to_markers("ба\u0301ба")) == "ба\u0301ба"


def test_to_markers_drops_leading_mark():
    assert to_markers("\u0301дом") == "дом"


def test_to_markers_keeps_existing_case():
    assert to_markers("Дом") == "Дом"


def test_normalize_key():
    assert normalize_key("ДО\u0301М") == "дом"


def test_sort_key_ignores_case_and_stress():
    assert sort_key("Ба\u0301ба") == sort_key("баба")
