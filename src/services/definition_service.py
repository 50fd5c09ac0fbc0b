"""Definition lookup service — picks a provider and absorbs its failures.

A definition is a best-effort enrichment of a GOOD verdict, so nothing in
this module raises to the caller: every failure is logged and reported as
a DefinitionLookup with an empty entry list and a LookupFailure kind.
"""

import logging
from typing import Mapping

from adapter.external.oxford import OxfordAdapter
from adapter.external.wordnik import WordnikAdapter
from adapter.external.words_api import WordsApiAdapter
from domain.model.definition import DefinitionEntry, DefinitionLookup, LookupFailure, Provider
from domain.model.errors import (
    DefinitionLookupError,
    HttpStatusError,
    NetworkFailureError,
)
from port.dictionary import DefinitionProviderPort
from utils.settings import Settings

logger = logging.getLogger(__name__)


def build_providers(settings: Settings) -> dict[Provider, DefinitionProviderPort]:
    """Create one adapter per provider from explicit settings.

    Providers without credentials get no adapter, so lookups against them
    fail as not_configured instead of sending an unauthenticated request.
    """
    adapters = {
        Provider.WORDNIK: WordnikAdapter(
            api_key=settings.wordnik_api_key,
            timeout=settings.timeout_seconds,
        ),
        Provider.OXFORD: OxfordAdapter(
            app_id=settings.oxford_app_id,
            app_key=settings.oxford_app_key,
            timeout=settings.timeout_seconds,
        ),
        Provider.WORDSAPI: WordsApiAdapter(
            api_key=settings.wordsapi_key,
            host=settings.wordsapi_host,
            timeout=settings.timeout_seconds,
        ),
    }
    return {provider: adapter for provider, adapter in adapters.items() if settings.is_configured(provider)}


def classify_failure(error: DefinitionLookupError) -> LookupFailure:
    if isinstance(error, NetworkFailureError):
        return LookupFailure.NETWORK_FAILURE
    if isinstance(error, HttpStatusError):
        return LookupFailure.HTTP_ERROR
    return LookupFailure.MALFORMED_RESPONSE


class DefinitionService:
    """Looks up word definitions through one of several providers."""

    def __init__(
        self,
        providers: Mapping[Provider, DefinitionProviderPort],
        default_provider: Provider = Provider.WORDNIK,
    ):
        self.providers = dict(providers)
        self.default_provider = default_provider

    @classmethod
    def from_settings(cls, settings: Settings) -> "DefinitionService":
        return cls(build_providers(settings), default_provider=settings.provider)

    async def lookup(self, word: str, provider: Provider | None = None) -> DefinitionLookup:
        """Fetch definitions for word, never raising.

        Args:
            word: Word to define. Entries carry it back unchanged.
            provider: Provider to ask; the service default when None.

        Returns:
            DefinitionLookup with entries, or with a failure kind when
            there are none.
        """
        provider = provider or self.default_provider
        adapter = self.providers.get(provider)
        log_extra = {"word": word, "provider": provider.value}

        if adapter is None:
            logger.warning("No adapter configured for definition provider", extra=log_extra)
            return DefinitionLookup(word=word, provider=provider, failure=LookupFailure.NOT_CONFIGURED)

        try:
            entries = await adapter.fetch(word)
        except HttpStatusError as e:
            logger.warning(
                "Definition provider HTTP error",
                extra={**log_extra, "status_code": e.status_code},
            )
            return DefinitionLookup(word=word, provider=provider, failure=classify_failure(e))
        except DefinitionLookupError as e:
            logger.warning(
                "Definition lookup failed",
                extra={**log_extra, "error_type": type(e).__name__, "error": str(e)},
            )
            return DefinitionLookup(word=word, provider=provider, failure=classify_failure(e))
        except Exception as e:
            logger.error(
                "Unexpected error calling definition provider",
                extra={**log_extra, "error": str(e)},
                exc_info=True,
            )
            return DefinitionLookup(word=word, provider=provider, failure=LookupFailure.MALFORMED_RESPONSE)

        if not entries:
            logger.debug("Definition provider returned no definitions", extra=log_extra)
            return DefinitionLookup(word=word, provider=provider, failure=LookupFailure.EMPTY_RESULT)

        logger.debug(
            "Definition lookup successful",
            extra={**log_extra, "entry_count": len(entries)},
        )
        return DefinitionLookup(word=word, provider=provider, entries=list(entries))

    async def lookup_definition(
        self, word: str, provider: Provider | None = None,
    ) -> list[DefinitionEntry]:
        """Entries for word, or [] on any failure."""
        return (await self.lookup(word, provider)).entries
