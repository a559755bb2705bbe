import logging
import os

from dotenv import load_dotenv

from .application.bootstrap import bootstrap_app
from .application.container import AppConfig
from .domain import RunicWordGenerator

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _read_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_app_config() -> AppConfig:
    runes_path = os.getenv("RUNES_PATH", "").strip() or None
    max_words = _read_int("MAX_RUNIC_WORDS", RunicWordGenerator.MAX_WORDS)
    if max_words <= 0:
        raise RuntimeError("MAX_RUNIC_WORDS must be greater than 0")
    metrics_log_path = os.getenv("METRICS_LOG_PATH", "").strip() or None
    generate_length = _read_int("GENERATE_LENGTH", None)
    check_word = os.getenv("CHECK_WORD")
    config = AppConfig(
        runes_path=runes_path,
        max_words=max_words,
        metrics_log_path=metrics_log_path,
        generate_length=generate_length,
        check_word=check_word,
    )
    logger.info(
        "Config loaded: runes_path=%s, max_words=%s, metrics_log=%s",
        config.runes_path or "bundled",
        config.max_words,
        config.metrics_log_path or "off",
    )
    return config


def run(config: AppConfig) -> list[str]:
    reports: list[str] = []
    with bootstrap_app(config) as container:
        presenter = container.presenter
        if config.generate_length is None and config.check_word is None:
            logger.info("Nothing requested, printing the catalog")
            reports.append(presenter.catalog_report(container.catalog))
        if config.generate_length is not None:
            result = container.service.generate(config.generate_length)
            reports.append(presenter.generation_report(config.generate_length, result))
        if config.check_word is not None:
            result = container.service.check(config.check_word)
            reports.append(presenter.check_report(config.check_word, result))
    return reports


def main():
    try:
        config = load_app_config()
        reports = run(config)
    except Exception:
        logger.exception("Runic words run failed")
        raise
    for report in reports:
        print(report)
        print()


if __name__ == "__main__":
    main()
