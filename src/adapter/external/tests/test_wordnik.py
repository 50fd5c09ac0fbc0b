"""Tests for the WordNik adapter and response parsing."""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from adapter.external.wordnik import (
    WordnikAdapter,
    parse_wordnik_definitions,
    standardize_part_of_speech,
)
from domain.model.definition import DefinitionEntry, Provider
from domain.model.errors import MalformedResponseError


class TestStandardizePartOfSpeech(unittest.TestCase):
    """Test WordNik part-of-speech normalization."""

    def test_verb_transitive(self):
        self.assertEqual(standardize_part_of_speech("verb-transitive"), "verb")

    def test_verb_intransitive(self):
        self.assertEqual(standardize_part_of_speech("verb-intransitive"), "verb")

    def test_noun_passes_through(self):
        self.assertEqual(standardize_part_of_speech("noun"), "noun")

    def test_empty_passes_through(self):
        self.assertEqual(standardize_part_of_speech(""), "")


class TestParseWordnikDefinitions(unittest.TestCase):
    """Test parse_wordnik_definitions()."""

    def test_maps_text_and_part_of_speech(self):
        """Test each array element becomes one entry for the queried word."""
        payload = [
            {"text": "A small domesticated carnivore.", "partOfSpeech": "noun"},
            {"text": "To hoist an anchor.", "partOfSpeech": "verb-transitive"},
        ]

        entries = parse_wordnik_definitions("cat", payload)

        self.assertEqual(entries, [
            DefinitionEntry(word="cat", definition="A small domesticated carnivore.", part_of_speech="noun"),
            DefinitionEntry(word="cat", definition="To hoist an anchor.", part_of_speech="verb"),
        ])

    def test_missing_part_of_speech_becomes_empty_string(self):
        """Test absent partOfSpeech is normalized to ''."""
        entries = parse_wordnik_definitions("cat", [{"text": "A feline."}])

        self.assertEqual(entries[0].part_of_speech, "")

    def test_null_part_of_speech_becomes_empty_string(self):
        """Test null partOfSpeech is normalized to ''."""
        entries = parse_wordnik_definitions("cat", [{"text": "A feline.", "partOfSpeech": None}])

        self.assertEqual(entries[0].part_of_speech, "")

    def test_non_string_part_of_speech_becomes_empty_string(self):
        """Test a number or object partOfSpeech is treated as absent."""
        payload = [{"text": "A feline.", "partOfSpeech": 7}, {"text": "A jazz fan.", "partOfSpeech": {}}]

        entries = parse_wordnik_definitions("cat", payload)

        self.assertEqual([e.part_of_speech for e in entries], ["", ""])

    def test_empty_array(self):
        """Test an empty array yields no entries."""
        self.assertEqual(parse_wordnik_definitions("cat", []), [])

    def test_missing_text_is_malformed(self):
        """Test an element without text fails the whole response."""
        payload = [{"text": "ok", "partOfSpeech": "noun"}, {"partOfSpeech": "verb"}]

        with self.assertRaises(MalformedResponseError):
            parse_wordnik_definitions("cat", payload)

    def test_object_payload_is_malformed(self):
        """Test a non-array payload is malformed."""
        with self.assertRaises(MalformedResponseError):
            parse_wordnik_definitions("cat", {"message": "not found"})

    def test_none_payload_is_malformed(self):
        """Test an empty body is malformed for WordNik."""
        with self.assertRaises(MalformedResponseError):
            parse_wordnik_definitions("cat", None)


class TestWordnikAdapterFetch(unittest.IsolatedAsyncioTestCase):
    """Test WordnikAdapter.fetch() request shape."""

    @patch('adapter.external.http_client.httpx.AsyncClient')
    async def test_fetch_builds_request_and_parses(self, mock_client_class):
        """Test URL, api_key header and limit, with the word lowercased."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.content = b"[...]"
        mock_response.json.return_value = [{"text": "A feline.", "partOfSpeech": "noun"}]

        mock_client = AsyncMock()
        mock_client.get.return_value = mock_response
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None
        mock_client_class.return_value = mock_client

        adapter = WordnikAdapter(api_key="secret")
        entries = await adapter.fetch("CAT")

        mock_client.get.assert_called_once_with(
            "http://api.wordnik.com:80/v4/word.json/cat/definitions",
            headers={"api_key": "secret"},
            params={"limit": 20},
        )
        self.assertEqual(entries, [DefinitionEntry(word="CAT", definition="A feline.", part_of_speech="noun")])

    def test_provider_tag(self):
        self.assertIs(WordnikAdapter(api_key="").provider, Provider.WORDNIK)
