"""
constructions/noun_phrase.py

Determiner + adjective + noun phrases.

Shape of the phrase:

    [possessive | definite article] [adjective] noun

- A possessive, when given, heads the phrase and the adjective takes the
  mixed endings.
- Otherwise the definite article heads it and the adjective takes the weak
  endings. Languages without articles (Czech) let the adjective head the
  phrase.

Only singular phrases are built here; number is fixed by the callers.
"""

from __future__ import annotations

from typing import Optional

import structlog

from app.core.domain.grammar import enum_value
from app.core.domain.models import WordVariant
from morphology.base import SINGULAR, DeclensionEngine

logger = structlog.get_logger()


def decline_word(
    word: WordVariant,
    grammatical_case: str,
    engine: DeclensionEngine,
    number: str = SINGULAR,
) -> str:
    """
    Decline a noun, honouring explicit forms authored on the word.

    ``word.declensions`` is keyed ``"<case>_<gender>_<number>"``; an entry
    there wins over the engine's rules.
    """
    key = f"{enum_value(grammatical_case)}_{enum_value(word.gender)}_{enum_value(number)}"
    if key in word.declensions:
        return word.declensions[key]
    return engine.decline_noun(word.base_form, grammatical_case, word.gender, number)


def build_noun_phrase(
    word: WordVariant,
    grammatical_case: str,
    engine: DeclensionEngine,
    possessive: Optional[str] = None,
    adjective: Optional[WordVariant] = None,
) -> str:
    if not word.gender:
        logger.debug("noun_without_gender", word_id=word.id, base_form=word.base_form)
        return word.base_form

    parts = []

    if possessive:
        parts.append(
            engine.decline_possessive(possessive, grammatical_case, word.gender, SINGULAR)
        )
        if adjective is not None:
            parts.append(
                engine.decline_adjective(
                    adjective.base_form,
                    grammatical_case,
                    word.gender,
                    SINGULAR,
                    has_definite_article=False,
                )
            )
    else:
        article = engine.get_definite_article(grammatical_case, word.gender, SINGULAR)
        if article:
            parts.append(article)
        if adjective is not None:
            parts.append(
                engine.decline_adjective(
                    adjective.base_form,
                    grammatical_case,
                    word.gender,
                    SINGULAR,
                    has_definite_article=bool(article),
                )
            )

    parts.append(decline_word(word, grammatical_case, engine))
    return " ".join(p for p in parts if p).strip()


__all__ = ["build_noun_phrase", "decline_word"]
