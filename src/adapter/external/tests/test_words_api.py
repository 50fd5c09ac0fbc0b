"""Tests for the Words API adapter and response parsing."""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from adapter.external.words_api import WordsApiAdapter, parse_words_api_definitions
from domain.model.definition import DefinitionEntry
from domain.model.errors import MalformedResponseError


class TestParseWordsApiDefinitions(unittest.TestCase):
    """Test parse_words_api_definitions()."""

    def test_maps_results(self):
        """Test each result becomes an entry, partOfSpeech unchanged."""
        payload = {
            "word": "run",
            "results": [
                {"definition": "move fast by using one's feet", "partOfSpeech": "verb"},
                {"definition": "a score in baseball", "partOfSpeech": "noun"},
            ],
        }

        entries = parse_words_api_definitions("run", payload)

        self.assertEqual(entries, [
            DefinitionEntry(word="run", definition="move fast by using one's feet", part_of_speech="verb"),
            DefinitionEntry(word="run", definition="a score in baseball", part_of_speech="noun"),
        ])

    def test_part_of_speech_not_normalized(self):
        """Test no WordNik-style normalization is applied."""
        payload = {"results": [{"definition": "d", "partOfSpeech": "verb-transitive"}]}

        self.assertEqual(parse_words_api_definitions("run", payload)[0].part_of_speech, "verb-transitive")

    def test_missing_part_of_speech_is_none(self):
        payload = {"results": [{"definition": "d"}]}

        self.assertIsNone(parse_words_api_definitions("run", payload)[0].part_of_speech)

    def test_non_string_part_of_speech_is_none(self):
        payload = {"results": [{"definition": "d", "partOfSpeech": 5}, {"definition": "e", "partOfSpeech": {}}]}

        entries = parse_words_api_definitions("run", payload)

        self.assertEqual([e.part_of_speech for e in entries], [None, None])

    def test_missing_results_is_empty(self):
        """Test a response without results is empty, not an error."""
        self.assertEqual(parse_words_api_definitions("run", {"word": "run", "frequency": 4.2}), [])

    def test_none_payload_is_empty(self):
        """Test an empty body (or tolerated 404) is empty."""
        self.assertEqual(parse_words_api_definitions("run", None), [])

    def test_results_without_definition_are_skipped(self):
        payload = {"results": [{"partOfSpeech": "noun"}, {"definition": "kept", "partOfSpeech": "noun"}]}

        entries = parse_words_api_definitions("run", payload)

        self.assertEqual([e.definition for e in entries], ["kept"])

    def test_array_payload_is_malformed(self):
        with self.assertRaises(MalformedResponseError):
            parse_words_api_definitions("run", [{"definition": "d"}])


class TestWordsApiAdapterFetch(unittest.IsolatedAsyncioTestCase):
    """Test WordsApiAdapter.fetch() request shape and 404 handling."""

    def _mock_client(self, mock_client_class, response) -> AsyncMock:
        mock_client = AsyncMock()
        mock_client.get.return_value = response
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None
        mock_client_class.return_value = mock_client
        return mock_client

    @patch('adapter.external.http_client.httpx.AsyncClient')
    async def test_fetch_sends_mashape_headers(self, mock_client_class):
        """Test URL and X-Mashape headers."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.content = b"{...}"
        mock_response.json.return_value = {"results": [{"definition": "d", "partOfSpeech": "noun"}]}
        mock_client = self._mock_client(mock_client_class, mock_response)

        adapter = WordsApiAdapter(api_key="mashape-key")
        entries = await adapter.fetch("Run")

        mock_client.get.assert_called_once_with(
            "https://wordsapiv1.p.mashape.com/words/run",
            headers={"X-Mashape-Key": "mashape-key", "X-Mashape-Host": "wordsapiv1.p.mashape.com"},
            params=None,
        )
        self.assertEqual(entries, [DefinitionEntry(word="Run", definition="d", part_of_speech="noun")])

    @patch('adapter.external.http_client.httpx.AsyncClient')
    async def test_404_is_empty(self, mock_client_class):
        """Test an unknown word (404) yields no entries instead of raising."""
        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Not found", request=MagicMock(), response=mock_response,
        )
        self._mock_client(mock_client_class, mock_response)

        entries = await WordsApiAdapter(api_key="k").fetch("qwzx")

        self.assertEqual(entries, [])
