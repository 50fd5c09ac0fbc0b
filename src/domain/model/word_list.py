"""Word list Value Object.

A word list is the static set of words considered valid (ENABLE, TWL2014,
SOWPODS). Entries and queries share one canonical form: stripped and
lowercased.
"""

from dataclasses import dataclass, field


def normalize_word(word: str) -> str:
    """Canonical form used for both stored entries and queries."""
    return word.strip().lower()


@dataclass(frozen=True)
class WordList:
    """Immutable set of allowed words."""

    name: str = ""
    words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def load(cls, source_text: str | None, name: str = "") -> "WordList":
        """Build a word list from newline-delimited text.

        Blank lines (including the one after a trailing newline) are dropped.
        None or empty text gives an empty list.
        """
        if not source_text:
            return cls(name=name)
        words = frozenset(
            normalized
            for normalized in (normalize_word(line) for line in source_text.split("\n"))
            if normalized
        )
        return cls(name=name, words=words)

    def contains(self, word: str) -> bool:
        normalized = normalize_word(word)
        return bool(normalized) and normalized in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)
