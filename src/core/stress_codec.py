"""Знак ударения: снятие, отрисовка и нормализация ключей словаря.

Ударение кодируется двумя способами:

* маркерами — ударная буква записана заглавной (``дОм``);
* отрисованной формой — после ударной буквы стоит комбинируемый
  акут U+0301 (``до́м``).
"""

from __future__ import annotations

STRESS_MARK = "\u0301"


def strip(word: str) -> str:
    """Удалить все знаки ударения. Идемпотентно.

    Примеры:
        до́м -> дом
        дом  -> дом
    """
    return word.replace(STRESS_MARK, "")


def draw(word: str) -> str:
    """Поставить знак ударения после каждой заглавной буквы и понизить регистр.

    Вставка идёт с конца слова, чтобы не сдвигать ещё не обработанные позиции.
    Слово без заглавных букв возвращается без изменений.

    Примеры:
        Дом    -> д́ом
        дОм    -> до́м
        сестрА -> сестра́
    """
    chars = list(word)
    positions = [idx for idx, ch in enumerate(chars) if ch.isupper()]
    for idx in reversed(positions):
        chars.insert(idx + 1, STRESS_MARK)
    return "".join(chars).lower()


def to_markers(word: str) -> str:
    """Обратное к draw: букву перед знаком ударения сделать заглавной.

    Знак, не следующий за буквой, отбрасывается. Регистр остальных
    символов сохраняется.

    Примеры:
        до́м -> дОм
        ́дом -> дом
    """
    out: list[str] = []
    for ch in word:
        if ch == STRESS_MARK:
            if out and out[-1].isalpha():
                out[-1] = out[-1].upper()
            continue
        out.append(ch)
    return "".join(out)


def normalize_key(word: str) -> str:
    """Ключ словаря: без ударений, в нижнем регистре."""
    return strip(word).lower()


def sort_key(key: str) -> str:
    """Ключ сортировки: регистронезависимый, не зависит от ударений."""
    return strip(key).lower()


def stress_count(word: str) -> int:
    return word.count(STRESS_MARK)
