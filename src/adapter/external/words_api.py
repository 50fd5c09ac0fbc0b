"""Words API adapter.

Words API answers {results: [{definition, partOfSpeech, ...}]}. Unknown
words come back as a 404 or without "results"; both mean "no definitions",
not an error.

API Documentation: https://www.wordsapi.com/docs/
"""

import logging
from typing import Any
from urllib.parse import quote

from adapter.external.http_client import DEFAULT_TIMEOUT_SECONDS, get_json
from domain.model.definition import DefinitionEntry, Provider
from domain.model.errors import MalformedResponseError

logger = logging.getLogger(__name__)

WORDSAPI_BASE_URL = "https://wordsapiv1.p.mashape.com/words"
WORDSAPI_DEFAULT_HOST = "wordsapiv1.p.mashape.com"


def parse_words_api_definitions(word: str, payload: Any) -> list[DefinitionEntry]:
    """Map a Words API response onto DefinitionEntry records.

    A string partOfSpeech is passed through unchanged; anything else becomes
    None. Results without a definition string are skipped.
    """
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            Provider.WORDSAPI.value,
            f"Expected a JSON object, got {type(payload).__name__}",
        )

    results = payload.get("results")
    if not isinstance(results, list):
        logger.debug("Words API response has no results", extra={"word": word})
        return []

    entries: list[DefinitionEntry] = []
    for result in results:
        if not isinstance(result, dict):
            continue
        definition = result.get("definition")
        if not isinstance(definition, str):
            continue
        part_of_speech = result.get("partOfSpeech")
        entries.append(DefinitionEntry(
            word=word,
            definition=definition,
            part_of_speech=part_of_speech if isinstance(part_of_speech, str) else None,
        ))
    return entries


class WordsApiAdapter:
    """Adapter that fetches definitions from Words API (via Mashape)."""

    provider = Provider.WORDSAPI

    def __init__(
        self,
        api_key: str,
        host: str = WORDSAPI_DEFAULT_HOST,
        base_url: str = WORDSAPI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.host = host
        self.base_url = base_url
        self.timeout = timeout

    async def fetch(self, word: str) -> list[DefinitionEntry]:
        url = f"{self.base_url}/{quote(word.lower(), safe='')}"
        logger.info("Querying Words API for definition", extra={"word": word})

        payload = await get_json(
            self.provider.value,
            url,
            headers={
                "X-Mashape-Key": self.api_key,
                "X-Mashape-Host": self.host,
            },
            timeout=self.timeout,
            not_found_ok=True,
        )
        return parse_words_api_definitions(word, payload)
