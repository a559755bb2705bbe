from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ...domain import CheckResult, GenerationResult, RuneCatalog


class RunicWordsPresenter:
    def __init__(self, templates_dir: Path | None = None):
        base_dir = templates_dir or (Path(__file__).resolve().parent / "templates")
        self._env = Environment(
            loader=FileSystemLoader(str(base_dir)),
            autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False, default=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _render(self, template: str, **context) -> str:
        return self._env.get_template(template).render(**context).strip()

    def generation_report(self, length, result: GenerationResult) -> str:
        return self._render(
            "generation_report.j2",
            length=length,
            ok=result.ok,
            words=result.words,
            total_power=sum(entry.power for entry in result.words),
            error=result.error,
        )

    def check_report(self, word, result: CheckResult) -> str:
        return self._render(
            "check_report.j2",
            word=word,
            ok=result.ok,
            power=result.power,
            error=result.error,
        )

    def catalog_report(self, catalog: RuneCatalog) -> str:
        return self._render(
            "catalog_report.j2",
            runes=catalog.by_power(),
            unresolved=catalog.unresolved_exclusions(),
        )
