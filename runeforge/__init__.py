from .application import check_runic_word, generate_runic_words

__all__ = ["check_runic_word", "generate_runic_words"]
