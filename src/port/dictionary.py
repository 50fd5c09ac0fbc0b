"""Dictionary port — outbound interface for definition providers."""

from typing import Protocol

from domain.model.definition import DefinitionEntry, Provider


class DefinitionProviderPort(Protocol):
    """Port for fetching a word's definitions from one provider.

    fetch() returns entries already normalized to DefinitionEntry, so the
    service layer never sees a provider's JSON shape. Failures are raised
    as DefinitionLookupError subclasses; an empty list means the provider
    answered but had nothing for the word.
    """

    provider: Provider

    async def fetch(self, word: str) -> list[DefinitionEntry]: ...
