# app/shared/languages.py
from functools import lru_cache
from typing import List

import structlog

from app.core.domain.grammar import enum_value
from app.core.domain.models import LanguageConfig
from app.shared.config import settings
from lexicon.index import (
    LexiconNotFound,
    available_languages,
    clear_cache as clear_profile_cache,
    load_language_profile,
)

logger = structlog.get_logger()


@lru_cache(maxsize=None)
def _load(language: str) -> LanguageConfig:
    return load_language_profile(language)


def get_language_config(language: str) -> LanguageConfig:
    """
    Return the immutable configuration for a language id.

    A card is read from disk once; later lookups are served from memory.
    Ids without a card fall back to the default language (German) with a
    warning; a card that exists but is broken still raises.
    """
    key = str(enum_value(language)).lower()
    try:
        return _load(key)
    except LexiconNotFound:
        if key == settings.DEFAULT_LANGUAGE:
            raise
        logger.warning(
            "unknown_language_fallback",
            language=key,
            fallback=settings.DEFAULT_LANGUAGE,
        )
    return _load(settings.DEFAULT_LANGUAGE)


def list_languages() -> List[LanguageConfig]:
    """Configurations for every language with a profile card."""
    return [_load(language) for language in available_languages()]


def clear_cache() -> None:
    """Forget every loaded card so the next lookup re-reads it from disk."""
    _load.cache_clear()
    clear_profile_cache()
