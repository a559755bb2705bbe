from __future__ import annotations

import logging

from ..domain import CheckResult, GenerationResult, RunicWordGenerator, RunicWordValidator
from ..infrastructure.metrics import MetricsClient, metrics as default_metrics

logger = logging.getLogger(__name__)


class RunicWordsService:
    """
    Прикладной слой над генератором и валидатором: логирование и метрики.
    """

    def __init__(
        self,
        generator: RunicWordGenerator,
        validator: RunicWordValidator,
        *,
        metrics: MetricsClient | None = None,
    ):
        self._generator = generator
        self._validator = validator
        self._metrics = metrics or default_metrics

    def generate(self, length) -> GenerationResult:
        with self._metrics.span("runic_words.generate", extra={"length": repr(length)}) as details:
            result = self._generator.generate(length)
            details["outcome"] = result.kind.value
            details["words"] = len(result.words)
        if result.ok:
            logger.debug("Generated %s runic words of length %s", len(result.words), length)
        else:
            logger.info("Runic words generation rejected: %s", result.error)
        return result

    def check(self, word) -> CheckResult:
        with self._metrics.span("runic_words.check", extra={"word": repr(word)}) as details:
            result = self._validator.check(word)
            details["outcome"] = result.kind.value
        if result.ok:
            logger.debug("Runic word %r has power %s", word, result.power)
        else:
            logger.info("Runic word %r rejected: %s", word, result.error)
        return result
