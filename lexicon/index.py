"""
lexicon/index.py

Loader for per-language profile cards stored in JSON under:

    language_profiles/{language}.json

A card carries everything a `LanguageConfig` needs: case and gender
inventories, pro-drop and past-tense gender flags, preposition tables,
phrase-building word lists, a vocabulary section and the built-in
pronouns, verbs and patterns.

Vocabulary references
---------------------

To keep cards readable, a slot's `options` (and `default_pronouns`) may
be the *name* of a vocabulary list instead of an inline list:

    {
      "vocabulary": {
        "places": [ {"id": "kino", "base_form": "Kino", ...}, ... ]
      },
      "default_patterns": [
        {"id": "going-to-place", "slots": [
            {"id": "place", "type": "object-phrase", "options": "places", ...}
        ]}
      ]
    }

The loader replaces each reference with the list it names before the
payload is validated by pydantic.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import structlog
from pydantic import ValidationError

from app.core.domain.exceptions import LanguageProfileError
from app.core.domain.models import LanguageConfig
from app.shared.config import settings

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LexiconError(Exception):
    """Base exception for profile-card problems."""


class LexiconNotFound(LexiconError, FileNotFoundError):
    """Raised when a {language}.json card cannot be located."""


# ---------------------------------------------------------------------------
# Locating cards
# ---------------------------------------------------------------------------

# Simple in-process cache to avoid re-reading the same JSON files.
_CACHE: Dict[str, LanguageConfig] = {}


def _profiles_dir(base_dir: Optional[Path] = None) -> Path:
    return Path(base_dir) if base_dir is not None else Path(settings.LANGUAGE_PROFILES_DIR)


def available_languages(base_dir: Optional[Path] = None) -> List[str]:
    """
    Inspect the profiles directory and return the sorted language ids
    that have a card, e.g. ["czech", "german"].
    """
    directory = _profiles_dir(base_dir)
    if not directory.exists():
        return []
    return sorted(path.stem for path in directory.glob("*.json"))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _resolve_options(value: Any, vocabulary: Mapping[str, Any], language: str, where: str) -> Any:
    if not isinstance(value, str):
        return value
    if value not in vocabulary:
        raise LanguageProfileError(
            f"Profile '{language}' references unknown vocabulary list "
            f"'{value}' in {where}."
        )
    return vocabulary[value]


def resolve_vocabulary_refs(raw: Mapping[str, Any], language: str) -> Dict[str, Any]:
    """Return a copy of `raw` with vocabulary-name references expanded."""
    data = copy.deepcopy(dict(raw))
    vocabulary = data.get("vocabulary") or {}

    if "default_pronouns" in data:
        data["default_pronouns"] = _resolve_options(
            data["default_pronouns"], vocabulary, language, "default_pronouns"
        )

    for pattern in data.get("default_patterns") or []:
        if not isinstance(pattern, dict):
            continue
        for slot in pattern.get("slots") or []:
            if isinstance(slot, dict) and "options" in slot:
                slot["options"] = _resolve_options(
                    slot["options"],
                    vocabulary,
                    language,
                    f"pattern '{pattern.get('id')}' slot '{slot.get('id')}'",
                )
    return data


def load_language_profile(
    language: str,
    base_dir: Optional[Path] = None,
    *,
    use_cache: bool = True,
) -> LanguageConfig:
    """
    Load and validate the profile card for a language.

    Args:
        language:
            Language id such as "german" or "czech".
        base_dir:
            Optional directory holding the cards. Defaults to
            settings.LANGUAGE_PROFILES_DIR.
        use_cache:
            If True (default), keep a process-local cache per language.

    Raises:
        LexiconNotFound: if the JSON file does not exist.
        LanguageProfileError: if the card is not valid JSON or does not
            validate as a LanguageConfig.
    """
    cache_key = f"{language}@{base_dir}" if base_dir is not None else language
    if use_cache and cache_key in _CACHE:
        return _CACHE[cache_key]

    path = _profiles_dir(base_dir) / f"{language}.json"
    if not path.exists():
        raise LexiconNotFound(
            f"No profile card found for language '{language}' (expected at {path})."
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise LanguageProfileError(f"Profile '{language}' is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise LanguageProfileError(
            f"Profile '{language}' must be a JSON object at top level, got {type(raw).__name__}."
        )

    try:
        config = LanguageConfig.model_validate(resolve_vocabulary_refs(raw, language))
    except ValidationError as exc:
        raise LanguageProfileError(f"Profile '{language}' failed validation: {exc}") from exc

    logger.info(
        "language_profile_loaded",
        language=language,
        patterns=len(config.default_patterns),
        verbs=len(config.default_verbs),
    )

    if use_cache:
        _CACHE[cache_key] = config
    return config


def clear_cache() -> None:
    """Drop every cached profile card."""
    _CACHE.clear()


__all__ = [
    "LexiconError",
    "LexiconNotFound",
    "available_languages",
    "clear_cache",
    "load_language_profile",
    "resolve_vocabulary_refs",
]
