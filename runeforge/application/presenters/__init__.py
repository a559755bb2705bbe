from .runic_presenter import RunicWordsPresenter

__all__ = ["RunicWordsPresenter"]
