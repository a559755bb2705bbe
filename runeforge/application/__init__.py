from .bootstrap import bootstrap_app
from .container import AppConfig, AppContainer, create_container
from .entrypoints import check_runic_word, default_service, generate_runic_words
from .presenters import RunicWordsPresenter
from .service import RunicWordsService

__all__ = [
    "AppConfig",
    "AppContainer",
    "RunicWordsPresenter",
    "RunicWordsService",
    "bootstrap_app",
    "check_runic_word",
    "create_container",
    "default_service",
    "generate_runic_words",
]
