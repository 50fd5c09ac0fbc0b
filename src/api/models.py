"""Pydantic models for API request/response."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from domain.model.definition import DefinitionEntry, LookupFailure, Provider


Verdict = Literal["GOOD", "BAD"]


class WordCheckResponse(BaseModel):
    """Response model for a word check."""
    word: str = Field(..., description="Normalized (lowercase) word")
    valid: bool
    verdict: Verdict
    word_list: str = Field(..., description="Word list the word was checked against")


class DefinitionEntryResponse(BaseModel):
    """A single definition."""
    word: str
    definition: str
    part_of_speech: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: DefinitionEntry) -> "DefinitionEntryResponse":
        return cls(word=entry.word, definition=entry.definition, part_of_speech=entry.part_of_speech)


class DefinitionResponse(BaseModel):
    """Response model for a definition lookup."""
    word: str
    provider: Provider
    valid: bool = Field(..., description="Whether the word is in the word list")
    entries: list[DefinitionEntryResponse] = Field(default_factory=list)
    text: str = Field(..., description="Definitions rendered for display")
    failure: Optional[LookupFailure] = Field(None, description="Why no definitions were returned")
    attribution: str
    source_url: Optional[str] = None
