from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Rune:
    name: str
    power: int
    cannot_link_with: Optional[str] = None

    def excludes(self, other: "Rune") -> bool:
        return self.cannot_link_with == other.name


@dataclass(frozen=True)
class RunicWordEntry:
    word: str
    power: int

    def as_dict(self) -> dict:
        return {"word": self.word, "power": self.power}


class OutcomeKind(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class GenerationResult:
    kind: OutcomeKind
    words: tuple[RunicWordEntry, ...] = ()
    error: Optional[str] = None

    @classmethod
    def success(cls, words) -> "GenerationResult":
        return cls(kind=OutcomeKind.SUCCESS, words=tuple(words))

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(kind=OutcomeKind.FAILURE, error=error)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


@dataclass(frozen=True)
class CheckResult:
    kind: OutcomeKind
    power: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, power: int) -> "CheckResult":
        return cls(kind=OutcomeKind.SUCCESS, power=power)

    @classmethod
    def failure(cls, error: str) -> "CheckResult":
        return cls(kind=OutcomeKind.FAILURE, error=error)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
