from .catalog import RuneCatalog, UnknownRuneError
from .generator import RunicWordGenerator
from .models import CheckResult, GenerationResult, OutcomeKind, Rune, RunicWordEntry
from .runic_word import WORD_DELIMITER, can_add_to_word, format_word, measure_word_power, split_word
from .validator import RunicWordValidator

__all__ = [
    "Rune",
    "RunicWordEntry",
    "OutcomeKind",
    "GenerationResult",
    "CheckResult",
    "RuneCatalog",
    "UnknownRuneError",
    "WORD_DELIMITER",
    "can_add_to_word",
    "format_word",
    "split_word",
    "measure_word_power",
    "RunicWordGenerator",
    "RunicWordValidator",
]
