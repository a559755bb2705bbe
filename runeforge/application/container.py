from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain import RuneCatalog, RunicWordGenerator, RunicWordValidator
from ..infrastructure import load_catalog
from ..infrastructure.metrics import MetricsClient, metrics
from .metrics import attach_metrics_file, detach_metrics_file
from .presenters import RunicWordsPresenter
from .service import RunicWordsService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    runes_path: str | None = None
    max_words: int = RunicWordGenerator.MAX_WORDS
    metrics_log_path: str | None = None
    generate_length: int | None = None
    check_word: str | None = None


class AppContainer:
    def __init__(
        self,
        *,
        config: AppConfig,
        catalog: RuneCatalog,
        generator: RunicWordGenerator,
        validator: RunicWordValidator,
        service: RunicWordsService,
        presenter: RunicWordsPresenter,
        metrics_client: MetricsClient,
    ):
        self.config = config
        self.catalog = catalog
        self.generator = generator
        self.validator = validator
        self.service = service
        self.presenter = presenter

        self._metrics = metrics_client
        self._metrics_attached = False

    def init_resources(self) -> None:
        if self.config.metrics_log_path:
            attach_metrics_file(self._metrics, self.config.metrics_log_path)
            self._metrics_attached = True
        unresolved = self.catalog.unresolved_exclusions()
        for rune in unresolved:
            logger.warning(
                "Rune %s excludes '%s' which is not in the catalog",
                rune.name,
                rune.cannot_link_with,
            )

    def close(self) -> None:
        if self._metrics_attached:
            detach_metrics_file(self._metrics)
            self._metrics_attached = False


def create_container(config: AppConfig) -> AppContainer:
    catalog = load_catalog(config.runes_path)
    logger.info("Loaded %s runes", len(catalog))

    generator = RunicWordGenerator(catalog, max_words=config.max_words)
    validator = RunicWordValidator(catalog)
    service = RunicWordsService(generator, validator, metrics=metrics)
    presenter = RunicWordsPresenter()

    return AppContainer(
        config=config,
        catalog=catalog,
        generator=generator,
        validator=validator,
        service=service,
        presenter=presenter,
        metrics_client=metrics,
    )
