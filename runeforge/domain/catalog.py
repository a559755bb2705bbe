from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .models import Rune


class UnknownRuneError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown rune: {self.name}"


class RuneCatalog:
    """
    Справочник рун: неизменяемая таблица, загружается один раз при старте.
    """

    def __init__(self, runes: Iterable[Rune]):
        self._runes: tuple[Rune, ...] = tuple(runes)
        self._by_name: dict[str, Rune] = {}
        for rune in self._runes:
            if rune.name in self._by_name:
                raise ValueError(f"Duplicate rune in catalog: {rune.name}")
            self._by_name[rune.name] = rune

    def __len__(self) -> int:
        return len(self._runes)

    def __iter__(self) -> Iterator[Rune]:
        return iter(self._runes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def runes(self) -> tuple[Rune, ...]:
        return self._runes

    def find(self, name: str) -> Optional[Rune]:
        return self._by_name.get(name)

    def get(self, name: str) -> Rune:
        rune = self._by_name.get(name)
        if rune is None:
            raise UnknownRuneError(name)
        return rune

    def by_power(self) -> list[Rune]:
        # sorted() is stable with reverse=True, ties keep catalog order
        return sorted(self._runes, key=lambda rune: rune.power, reverse=True)

    def unresolved_exclusions(self) -> list[Rune]:
        return [
            rune
            for rune in self._runes
            if rune.cannot_link_with is not None and rune.cannot_link_with not in self._by_name
        ]
