from __future__ import annotations

from typing import Iterable, Sequence

from .catalog import RuneCatalog
from .models import Rune

WORD_DELIMITER = "-"


def format_word(runes: Iterable[Rune]) -> str:
    return WORD_DELIMITER.join(rune.name for rune in runes)


def split_word(word: str) -> list[str]:
    return word.split(WORD_DELIMITER)


def can_add_to_word(selected: Sequence[Rune], candidate: Rune) -> bool:
    """
    Only the forward direction is checked: a selected rune forbidding the
    candidate blocks it, the candidate's own exclusion is ignored.
    """
    return not any(rune.excludes(candidate) for rune in selected)


def measure_word_power(catalog: RuneCatalog, word: str) -> int:
    # raises UnknownRuneError for names missing from the catalog
    return sum(catalog.get(name).power for name in split_word(word))
