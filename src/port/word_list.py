"""Word list port — inbound source of static word lists."""

from typing import Protocol

from domain.model.word_list import WordList


class WordListSource(Protocol):
    """Port for loading a named word list (e.g. "enable", "sowpods").

    Implementations never raise for a missing list; they return an empty
    WordList so that checks report BAD instead of crashing.
    """

    def load(self, name: str) -> WordList: ...
