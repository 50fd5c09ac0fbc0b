"""Word check session — per-query state machine with a staleness guard.

Every submitted query bumps a generation counter. A definition lookup
remembers the generation it was started for and, when it resolves, only
updates the session if that generation is still the latest. Slow responses
for an earlier word are dropped instead of overwriting a newer result.
"""

import asyncio
import logging

from domain.model.definition import LookupFailure, Provider
from domain.model.query import QuerySnapshot, QueryState
from domain.model.word_list import WordList, normalize_word
from services.definition_service import DefinitionService
from services.formatting import NO_DEFINITION_MESSAGE, format_definitions

logger = logging.getLogger(__name__)

SEARCHING_MESSAGE = "Searching for definition..."


def check_word(word_list: WordList, word: str) -> QueryState:
    """GOOD/BAD verdict for a single word (IDLE for blank input)."""
    if not normalize_word(word):
        return QueryState.IDLE
    return QueryState.GOOD if word_list.contains(word) else QueryState.BAD


class WordCheckSession:
    """Tracks the latest query and its definition for one front end.

    submit() answers GOOD/BAD immediately; definition lookups run as
    asyncio tasks and never block it.
    """

    def __init__(
        self,
        word_list: WordList,
        definitions: DefinitionService | None = None,
        provider: Provider | None = None,
    ):
        self.word_list = word_list
        self.definitions = definitions
        self.provider = provider
        self._generation = 0
        self._snapshot = QuerySnapshot()
        self._pending: set[asyncio.Task] = set()

    @property
    def snapshot(self) -> QuerySnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def submit(self, text: str) -> QuerySnapshot:
        """Start a new query, superseding any previous one.

        Must be called from a running event loop when a definition service
        is configured, since GOOD words schedule a lookup task.
        """
        self._generation += 1
        generation = self._generation
        word = normalize_word(text)

        self._snapshot = QuerySnapshot(word=word, state=QueryState.CHECKING)
        verdict = check_word(self.word_list, word)
        self._snapshot = QuerySnapshot(word=word, state=verdict)

        if verdict is QueryState.GOOD and self.definitions is not None:
            self._snapshot = QuerySnapshot(
                word=word,
                state=QueryState.FETCHING_DEFINITION,
                definition_text=SEARCHING_MESSAGE,
            )
            task = asyncio.get_running_loop().create_task(self._fetch_definition(generation, word))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

        return self._snapshot

    async def wait_for_definition(self) -> QuerySnapshot:
        """Wait for every in-flight lookup, then return the snapshot."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
        return self._snapshot

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _fetch_definition(self, generation: int, word: str) -> None:
        lookup = await self.definitions.lookup(word, self.provider)

        if not self.is_current(generation):
            logger.debug(
                "Discarding stale definition result",
                extra={"word": word, "current_word": self._snapshot.word},
            )
            return

        failure = lookup.failure
        if lookup.ok:
            try:
                text = format_definitions(lookup.entries)
            except Exception as e:
                logger.error(
                    "Failed to format definitions",
                    extra={"word": word, "provider": lookup.provider.value, "error": str(e)},
                    exc_info=True,
                )
                failure = LookupFailure.MALFORMED_RESPONSE
            else:
                self._snapshot = QuerySnapshot(
                    word=word,
                    state=QueryState.DEFINITION_SHOWN,
                    definition_text=text,
                )
                return

        self._snapshot = QuerySnapshot(
            word=word,
            state=QueryState.DEFINITION_FAILED,
            definition_text=NO_DEFINITION_MESSAGE,
            failure=failure,
        )
