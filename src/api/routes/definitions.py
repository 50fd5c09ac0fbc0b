"""Definition lookup endpoint.

Endpoints:
- GET /definitions/{word}?provider=wordnik|oxford|wordsapi: Definitions for
  a valid word, grouped by part of speech for display

Provider failures never turn into HTTP errors; they come back as an empty
entry list with a "failure" kind and the "No definitions found" text.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_definition_service, get_word_list
from api.models import DefinitionEntryResponse, DefinitionResponse
from domain.model.definition import Provider
from domain.model.errors import ValidationError
from domain.model.word_list import WordList, normalize_word
from services.definition_service import DefinitionService
from services.formatting import NO_DEFINITION_MESSAGE, format_definitions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/definitions", tags=["definitions"])


@router.get("/{word}", response_model=DefinitionResponse)
async def define(
    word: str,
    provider: str | None = Query(None, description="wordnik (default), oxford or wordsapi"),
    word_list: WordList = Depends(get_word_list),
    definitions: DefinitionService = Depends(get_definition_service),
) -> DefinitionResponse:
    """Look up definitions for a word that passes the word list check."""
    try:
        selected = Provider.parse(provider) if provider else definitions.default_provider
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    normalized = normalize_word(word)
    if not word_list.contains(normalized):
        return DefinitionResponse(
            word=normalized,
            provider=selected,
            valid=False,
            text=NO_DEFINITION_MESSAGE,
            attribution=selected.attribution,
        )

    lookup = await definitions.lookup(normalized, selected)
    logger.info("Definition lookup finished", extra={
        "word": normalized,
        "provider": selected.value,
        "entry_count": len(lookup.entries),
        "failure": lookup.failure.value if lookup.failure else None,
    })

    return DefinitionResponse(
        word=normalized,
        provider=selected,
        valid=True,
        entries=[DefinitionEntryResponse.from_entry(entry) for entry in lookup.entries],
        text=format_definitions(lookup.entries),
        failure=lookup.failure,
        attribution=selected.attribution,
        source_url=selected.source_url(normalized),
    )
