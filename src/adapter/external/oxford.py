"""Oxford Dictionaries adapter.

Oxford nests definitions as results → lexicalEntries → entries → senses →
definitions, with the part of speech on the lexical entry.

API Documentation: https://developer.oxforddictionaries.com
"""

import logging
from typing import Any
from urllib.parse import quote

from adapter.external.http_client import DEFAULT_TIMEOUT_SECONDS, get_json
from domain.model.definition import DefinitionEntry, Provider
from domain.model.errors import MalformedResponseError

logger = logging.getLogger(__name__)

OXFORD_API_BASE_URL = "https://od-api.oxforddictionaries.com/api/v1/entries/en"


def _dicts(value: Any) -> list[dict[str, Any]]:
    """Keep only the dict items of a JSON list; anything else is empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def parse_oxford_definitions(word: str, payload: Any) -> list[DefinitionEntry]:
    """Flatten an Oxford entries response into DefinitionEntry records.

    Only the first top-level result is read. A missing level anywhere below
    it contributes nothing.

    Raises:
        MalformedResponseError: If the payload has no "results" list.
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise MalformedResponseError(Provider.OXFORD.value, "Response has no 'results' list")
    if not results or not isinstance(results[0], dict):
        return []

    if len(results) > 1:
        logger.debug(
            "Oxford returned several results, using the first",
            extra={"word": word, "result_count": len(results)},
        )

    entries: list[DefinitionEntry] = []
    for lexical_entry in _dicts(results[0].get("lexicalEntries")):
        part_of_speech = lexical_entry.get("lexicalCategory")
        if not isinstance(part_of_speech, str):
            part_of_speech = ""
        for entry in _dicts(lexical_entry.get("entries")):
            for sense in _dicts(entry.get("senses")):
                definitions = sense.get("definitions")
                if not isinstance(definitions, list):
                    continue
                entries.extend(
                    DefinitionEntry(word=word, definition=definition, part_of_speech=part_of_speech)
                    for definition in definitions
                    if isinstance(definition, str)
                )
    return entries


class OxfordAdapter:
    """Adapter that fetches definitions from Oxford Dictionaries."""

    provider = Provider.OXFORD

    def __init__(
        self,
        app_id: str,
        app_key: str,
        base_url: str = OXFORD_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url
        self.timeout = timeout

    async def fetch(self, word: str) -> list[DefinitionEntry]:
        url = f"{self.base_url}/{quote(word.lower(), safe='')}"
        logger.info("Querying Oxford Dictionaries for definition", extra={"word": word})

        payload = await get_json(
            self.provider.value,
            url,
            headers={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "Accept": "application/json",
            },
            timeout=self.timeout,
        )
        return parse_oxford_definitions(word, payload)
