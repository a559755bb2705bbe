from __future__ import annotations

import logging
from typing import Optional

from . import messages
from .catalog import RuneCatalog
from .models import GenerationResult, Rune, RunicWordEntry
from .runic_word import can_add_to_word, format_word, measure_word_power

logger = logging.getLogger(__name__)


class RunicWordGenerator:
    """
    Жадный подбор рунических слов: каждое новое слово начинается с самой
    сильной свободной руны, использованные руны в следующие слова не попадают.
    """

    MAX_WORDS = 10

    def __init__(self, catalog: RuneCatalog, *, max_words: int = MAX_WORDS):
        self._catalog = catalog
        self._max_words = max_words

    @property
    def max_words(self) -> int:
        return self._max_words

    def generate(self, length) -> GenerationResult:
        error = self._check_length(length)
        if error:
            return GenerationResult.failure(error)

        words = self.build_words(length)
        if not words:
            return GenerationResult.failure(messages.NO_WORDS_CREATED.format(length=length))
        return GenerationResult.success(words)

    def build_words(self, length: int) -> list[RunicWordEntry]:
        ordered = self._catalog.by_power()
        used: set[int] = set()
        words: list[RunicWordEntry] = []

        while len(words) < self._max_words:
            if len(ordered) - len(used) < length:
                break

            picked = self._pick_word(ordered, used, length)
            if picked is None:
                logger.debug("Stopped after %s words: no room for length %s", len(words), length)
                break

            word = format_word(ordered[idx] for idx in picked)
            words.append(RunicWordEntry(word=word, power=measure_word_power(self._catalog, word)))
            used.update(picked)

        return words

    @staticmethod
    def _pick_word(ordered: list[Rune], used: set[int], length: int) -> Optional[list[int]]:
        picked: list[int] = []
        selected: list[Rune] = []
        for idx, rune in enumerate(ordered):
            if len(picked) == length:
                break
            if idx in used:
                continue
            if not can_add_to_word(selected, rune):
                continue
            picked.append(idx)
            selected.append(rune)

        if len(picked) < length:
            return None
        return picked

    def _check_length(self, length) -> Optional[str]:
        """Only int is a length: bool and integral floats such as 2.0 are rejected."""
        if isinstance(length, bool) or not isinstance(length, int):
            return messages.LENGTH_NOT_NUMBER
        if length <= 0:
            return messages.LENGTH_NOT_POSITIVE
        if length > len(self._catalog):
            return messages.LENGTH_TOO_LARGE.format(size=len(self._catalog))
        return None
