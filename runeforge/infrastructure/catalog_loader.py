import yaml
from pathlib import Path

from ..domain import Rune, RuneCatalog

DEFAULT_RUNES_PATH = Path(__file__).resolve().parent.parent / "data" / "runes.yaml"


def load_runes_from_yaml(path: str) -> list[Rune]:
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"runes file not found: {path}")

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "runes" not in data:
        raise RuntimeError("Invalid runes.yaml format")

    entries = data["runes"]
    if not isinstance(entries, list):
        raise RuntimeError("runes must be a list")

    runes = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise RuntimeError(f"Invalid rune entry: {entry}")
        name = entry.get("name")
        power = entry.get("power")
        cannot_link_with = entry.get("cannot_link_with")

        if not isinstance(name, str) or not name.strip():
            raise RuntimeError(f"Invalid rune entry: {entry}")
        if isinstance(power, bool) or not isinstance(power, int) or power <= 0:
            raise RuntimeError(f"Rune power must be a positive integer: {entry}")
        if cannot_link_with is not None and not isinstance(cannot_link_with, str):
            raise RuntimeError(f"Rune exclusion must be a rune name: {entry}")

        runes.append(
            Rune(
                name=name.strip(),
                power=power,
                cannot_link_with=cannot_link_with.strip() if cannot_link_with else None,
            )
        )

    return runes


def load_catalog(path: str | None = None) -> RuneCatalog:
    try:
        return RuneCatalog(load_runes_from_yaml(str(path or DEFAULT_RUNES_PATH)))
    except ValueError as exc:
        raise RuntimeError(str(exc)) from exc
