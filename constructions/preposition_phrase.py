"""
constructions/preposition_phrase.py

Preposition + noun phrases, returned as a target/English pair.

Two strategies, chosen by the language's `uses_articles` flag:

- article-fusing (German): preposition + definite article, contracted
  where German contracts ("in das" -> "ins"), then the noun.
- bare (Czech): preposition + noun declined for the preposition's case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from app.core.domain.grammar import GrammaticalCase, enum_value
from app.core.domain.models import LanguageConfig, WordVariant
from app.shared.languages import get_language_config
from constructions.noun_phrase import decline_word
from morphology.base import SINGULAR, DeclensionEngine
from morphology.germanic import merge_preposition_with_article

logger = structlog.get_logger()

DEFAULT_ENGLISH_PREPOSITION = "to the"


@dataclass(frozen=True)
class PhrasePart:
    """A realized fragment in the target language with its English gloss."""

    target: str
    english: str


def _english_noun(word: WordVariant) -> str:
    return word.english or word.base_form.lower()


def build_preposition_phrase(
    word: WordVariant,
    grammatical_case: Optional[str],
    language: str,
    engine: DeclensionEngine,
    preposition: str = "in",
    *,
    language_config: Optional[LanguageConfig] = None,
) -> PhrasePart:
    """
    Build a prepositional phrase for `word`.

    `language_config` defaults to the loaded profile for `language`.
    """
    if not word.gender:
        logger.debug("noun_without_gender", word_id=word.id, base_form=word.base_form)
        return PhrasePart(target=word.base_form, english=word.english or word.base_form)

    config = language_config or get_language_config(language)
    if config.preposition_config.uses_articles:
        return _with_articles(word, grammatical_case, engine, preposition, config)
    return _without_articles(word, grammatical_case, engine, preposition, config)


def _with_articles(
    word: WordVariant,
    grammatical_case: Optional[str],
    engine: DeclensionEngine,
    preposition: str,
    config: LanguageConfig,
) -> PhrasePart:
    case_value = enum_value(grammatical_case) or GrammaticalCase.ACCUSATIVE.value
    article = engine.get_definite_article(case_value, word.gender, SINGULAR)
    head = merge_preposition_with_article(preposition, article)

    english_prep = config.preposition_config.preposition_to_english.get(
        preposition, DEFAULT_ENGLISH_PREPOSITION
    )
    # "in" is location with the dative and direction otherwise
    if preposition == "in":
        english_prep = "in the" if case_value == GrammaticalCase.DATIVE.value else "to the"

    noun = decline_word(word, case_value, engine)
    return PhrasePart(
        target=f"{head} {noun}",
        english=f"{english_prep} {_english_noun(word)}",
    )


def _without_articles(
    word: WordVariant,
    grammatical_case: Optional[str],
    engine: DeclensionEngine,
    preposition: str,
    config: LanguageConfig,
) -> PhrasePart:
    english_prep = config.preposition_config.preposition_to_english.get(
        preposition, DEFAULT_ENGLISH_PREPOSITION
    )

    case_value = enum_value(grammatical_case)
    if not case_value:
        case_value = (config.preposition_config.preposition_to_case or {}).get(
            preposition, GrammaticalCase.ACCUSATIVE.value
        )

    noun = decline_word(word, case_value, engine)
    return PhrasePart(
        target=f"{preposition} {noun}",
        english=f"{english_prep} {_english_noun(word)}",
    )


__all__ = ["build_preposition_phrase", "PhrasePart"]
