from __future__ import annotations

from . import messages
from .catalog import RuneCatalog
from .models import CheckResult, Rune
from .runic_word import can_add_to_word, measure_word_power, split_word


class RunicWordValidator:
    """
    Проверка готового слова: все руны из справочника и не запрещают друг друга.
    """

    def __init__(self, catalog: RuneCatalog):
        self._catalog = catalog

    def check(self, word) -> CheckResult:
        if not isinstance(word, str):
            return CheckResult.failure(messages.WORD_NOT_STRING)
        if not word:
            return CheckResult.failure(messages.WORD_EMPTY)

        names = split_word(word)
        if not names:
            return CheckResult.failure(messages.WORD_BAD_FORMAT)

        selected: list[Rune] = []
        for name in names:
            rune = self._catalog.find(name)
            if rune is None:
                return CheckResult.failure(messages.WORD_UNKNOWN_RUNE.format(rune=name))
            if not can_add_to_word(selected, rune):
                return CheckResult.failure(messages.WORD_ILLEGAL_COMBINATION)
            selected.append(rune)

        return CheckResult.success(measure_word_power(self._catalog, word))
