from functools import lru_cache

from fastapi import Request

from adapter.filesystem.word_list import FileWordListSource
from domain.model.word_list import WordList
from port.word_list import WordListSource
from services.definition_service import DefinitionService
from utils.settings import Settings, load_settings


@lru_cache
def get_settings() -> Settings:
    return load_settings()


def get_word_list_source(settings: Settings) -> WordListSource:
    return FileWordListSource(settings.word_list_dir)


def get_word_list(request: Request) -> WordList:
    """Word list loaded at startup; empty if the lifespan did not run."""
    word_list = getattr(request.app.state, "word_list", None)
    return word_list if word_list is not None else WordList()


def get_definition_service() -> DefinitionService:
    return DefinitionService.from_settings(get_settings())
