"""WordNik adapter.

Implements DefinitionProviderPort against the WordNik v4 definitions
endpoint, which answers with a flat array of {text, partOfSpeech}.

API Documentation: https://developer.wordnik.com/docs
"""

import logging
from typing import Any
from urllib.parse import quote

from adapter.external.http_client import DEFAULT_TIMEOUT_SECONDS, get_json
from domain.model.definition import DefinitionEntry, Provider
from domain.model.errors import MalformedResponseError

logger = logging.getLogger(__name__)

WORDNIK_API_BASE_URL = "http://api.wordnik.com:80/v4/word.json"
WORDNIK_DEFINITION_LIMIT = 20

# WordNik splits verbs by transitivity; everything else is shown as-is
_STANDARD_PARTS_OF_SPEECH = {
    "verb-intransitive": "verb",
    "verb-transitive": "verb",
}


def standardize_part_of_speech(part_of_speech: str) -> str:
    return _STANDARD_PARTS_OF_SPEECH.get(part_of_speech, part_of_speech)


def parse_wordnik_definitions(word: str, payload: Any) -> list[DefinitionEntry]:
    """Map a WordNik definitions array onto DefinitionEntry records.

    Raises:
        MalformedResponseError: If the payload is not an array or any
            element lacks a string "text".
    """
    if not isinstance(payload, list):
        raise MalformedResponseError(
            Provider.WORDNIK.value,
            f"Expected a JSON array, got {type(payload).__name__}",
        )

    entries: list[DefinitionEntry] = []
    for result in payload:
        text = result.get("text") if isinstance(result, dict) else None
        if not isinstance(text, str):
            raise MalformedResponseError(Provider.WORDNIK.value, "Definition without 'text'")
        part_of_speech = result.get("partOfSpeech")
        if not isinstance(part_of_speech, str):
            part_of_speech = ""
        entries.append(DefinitionEntry(
            word=word,
            definition=text,
            part_of_speech=standardize_part_of_speech(part_of_speech),
        ))
    return entries


class WordnikAdapter:
    """Adapter that fetches definitions from WordNik."""

    provider = Provider.WORDNIK

    def __init__(
        self,
        api_key: str,
        base_url: str = WORDNIK_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    async def fetch(self, word: str) -> list[DefinitionEntry]:
        url = f"{self.base_url}/{quote(word.lower(), safe='')}/definitions"
        logger.info("Querying WordNik for definition", extra={"word": word})

        payload = await get_json(
            self.provider.value,
            url,
            headers={"api_key": self.api_key},
            params={"limit": WORDNIK_DEFINITION_LIMIT},
            timeout=self.timeout,
        )
        return parse_wordnik_definitions(word, payload)
