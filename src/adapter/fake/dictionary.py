"""In-memory implementation of DefinitionProviderPort for testing."""

import asyncio

from domain.model.definition import DefinitionEntry, Provider


class FakeDefinitionProvider:
    """Fake provider that returns preconfigured definitions.

    definitions maps a lowercased word to (definition, part_of_speech)
    pairs. Set error to make every fetch raise it. Set gate to hold fetches
    until the test releases it, which lets a test resolve lookups out of
    order.
    """

    def __init__(
        self,
        definitions: dict[str, list[tuple[str, str | None]]] | None = None,
        provider: Provider = Provider.WORDNIK,
        error: Exception | None = None,
    ):
        self.definitions = definitions or {}
        self.provider = provider
        self.error = error
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}

    def hold(self, word: str) -> asyncio.Event:
        """Block fetches for word until the returned event is set."""
        gate = asyncio.Event()
        self.gates[word.lower()] = gate
        return gate

    async def fetch(self, word: str) -> list[DefinitionEntry]:
        self.calls.append(word)
        gate = self.gates.get(word.lower())
        if gate is not None:
            await gate.wait()
        if self.error is not None:
            raise self.error
        return [
            DefinitionEntry(word=word, definition=definition, part_of_speech=part_of_speech)
            for definition, part_of_speech in self.definitions.get(word.lower(), [])
        ]
