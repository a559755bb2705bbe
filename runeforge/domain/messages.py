"""
Тексты ошибок, которые видят вызывающие стороны.
Формулировки совпадают с уже существующими клиентами, менять их нельзя.
"""

LENGTH_NOT_NUMBER = "length has to be number"
LENGTH_NOT_POSITIVE = "length has to greater than 0"
LENGTH_TOO_LARGE = "length has to be smaller than {size}"
NO_WORDS_CREATED = "Could not create any Runic Words with a length of {length}"

WORD_NOT_STRING = "runicWord has to be a string in Runic Word Format"
WORD_EMPTY = "runicWord cannot be an empty string"
WORD_BAD_FORMAT = "runicWord has to be in Runic Word Format"
WORD_UNKNOWN_RUNE = "runicWord has to contain only Runes from the list. Cannot use {rune}"
WORD_ILLEGAL_COMBINATION = "This runicWord has an illegal combination of Runes"
