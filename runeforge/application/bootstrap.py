from __future__ import annotations

from contextlib import contextmanager

from .container import AppConfig, create_container


@contextmanager
def bootstrap_app(config: AppConfig):
    container = create_container(config)
    container.init_resources()
    try:
        yield container
    finally:
        container.close()
