from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ...infrastructure.metrics import MetricsClient

METRICS_LOGGER_NAME = "metrics.actions"


def attach_metrics_file(client: MetricsClient, path: str, *, backups: int = 14) -> logging.Logger:
    """
    Пишет спаны генерации и проверки рунических слов в отдельный файл JSON-строк.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(METRICS_LOGGER_NAME)
    _drop_handlers(logger)

    handler = TimedRotatingFileHandler(
        filename=target,
        when="midnight",
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    client.configure(logger)
    return logger


def detach_metrics_file(client: MetricsClient) -> None:
    logger = logging.getLogger(METRICS_LOGGER_NAME)
    _drop_handlers(logger)
    # spans go back to the regular logging tree
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    client.configure(logger)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
