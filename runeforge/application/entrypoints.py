"""
Entry points with the historical return shapes: a list of ``{"word", "power"}``
dicts or an int on success, the error message string on failure.
"""

from __future__ import annotations

from functools import lru_cache

from ..domain import RunicWordGenerator, RunicWordValidator
from ..infrastructure import load_catalog
from .service import RunicWordsService


@lru_cache(maxsize=1)
def default_service() -> RunicWordsService:
    catalog = load_catalog()
    return RunicWordsService(RunicWordGenerator(catalog), RunicWordValidator(catalog))


def generate_runic_words(length, *, service: RunicWordsService | None = None) -> list[dict] | str:
    result = (service or default_service()).generate(length)
    if not result.ok:
        return result.error
    return [entry.as_dict() for entry in result.words]


def check_runic_word(word, *, service: RunicWordsService | None = None) -> int | str:
    result = (service or default_service()).check(word)
    if not result.ok:
        return result.error
    return result.power
