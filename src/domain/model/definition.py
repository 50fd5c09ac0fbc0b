"""Definition domain models."""

from dataclasses import dataclass, field
from enum import Enum

from domain.model.errors import ValidationError


class Provider(str, Enum):
    """Third-party dictionary services a definition can come from."""

    WORDNIK = "wordnik"
    OXFORD = "oxford"
    WORDSAPI = "wordsapi"

    @classmethod
    def parse(cls, tag: str | None) -> "Provider":
        """Resolve a provider tag, defaulting to WordNik when none is given.

        Raises:
            ValidationError: If the tag names no known provider.
        """
        if tag is None or not tag.strip():
            return cls.WORDNIK
        try:
            return cls(tag.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown definition provider: {tag!r}") from None

    @property
    def attribution(self) -> str:
        return _ATTRIBUTIONS[self]

    def source_url(self, word: str) -> str | None:
        """Public page for the word, where the provider has one."""
        if self is Provider.WORDNIK:
            return f"http://www.wordnik.com/words/{word.lower()}"
        return None


_ATTRIBUTIONS = {
    Provider.WORDNIK: "Powered by WordNik",
    Provider.OXFORD: "Powered by Oxford Dictionaries",
    Provider.WORDSAPI: "Powered by Words API",
}


@dataclass(frozen=True)
class DefinitionEntry:
    """A single definition of a word, normalized across providers."""
    word: str
    definition: str
    part_of_speech: str | None = None


class LookupFailure(str, Enum):
    """Why a definition lookup produced no entries."""

    NETWORK_FAILURE = "network_failure"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_RESULT = "empty_result"
    NOT_CONFIGURED = "not_configured"


@dataclass(frozen=True)
class DefinitionLookup:
    """Outcome of one definition lookup (Value Object).

    entries is always a list; failure is set whenever it is empty.
    """
    word: str
    provider: Provider
    entries: list[DefinitionEntry] = field(default_factory=list)
    failure: LookupFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
