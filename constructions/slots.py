"""
constructions/slots.py

Realization of a single pattern slot.

Each slot type has one handler; `process_slot` dispatches on
`slot.type` through `SLOT_HANDLERS`. Handlers never raise for incomplete
content: a slot with nothing selected contributes empty strings.
"""

from __future__ import annotations

import random
from typing import Callable, Dict, Mapping, Optional, Sequence

import structlog

from app.core.domain.grammar import GrammaticalCase, SlotType, WordCategory, enum_value
from app.core.domain.models import (
    FixedSlot,
    LanguageConfig,
    ObjectPhraseSlot,
    PronounSlot,
    VerbConjugation,
    VerbSlot,
    WordVariant,
)
from app.shared.languages import get_language_config
from constructions.noun_phrase import build_noun_phrase
from constructions.preposition_phrase import PhrasePart, build_preposition_phrase
from morphology.base import DeclensionEngine, find_verb
from nlg.helpers import get_default_rng

logger = structlog.get_logger()

# Slot output has the same shape as a prepositional phrase part.
SlotResult = PhrasePart

EMPTY_RESULT = SlotResult(target="", english="")


class SlotContext:
    """Everything a slot handler may need besides the slot itself."""

    def __init__(
        self,
        selected_words: Mapping[str, WordVariant],
        language: str,
        verbs: Sequence[VerbConjugation],
        engine: DeclensionEngine,
        preceding_verb: Optional[VerbConjugation],
        rng: random.Random,
        language_config: Optional[LanguageConfig] = None,
    ) -> None:
        self.selected_words = selected_words
        self.language = language
        self.verbs = verbs
        self.engine = engine
        self.preceding_verb = preceding_verb
        self.rng = rng
        self._language_config = language_config

    @property
    def language_config(self) -> LanguageConfig:
        if self._language_config is None:
            self._language_config = get_language_config(self.language)
        return self._language_config

    def subject_pronoun(self) -> str:
        """Base form of the first selected pronoun, or ''."""
        for word in self.selected_words.values():
            if word.category == WordCategory.PRONOUN.value:
                return word.base_form
        return ""


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _process_fixed(slot: FixedSlot, ctx: SlotContext) -> SlotResult:
    # Each side falls back to fixed_text on its own; the pair need not agree.
    target = slot.fixed_text_target if slot.fixed_text_target is not None else slot.fixed_text
    english = slot.fixed_text_english if slot.fixed_text_english is not None else slot.fixed_text
    return SlotResult(target=target or "", english=english or "")


def _process_pronoun(slot: PronounSlot, ctx: SlotContext) -> SlotResult:
    word = ctx.selected_words.get(slot.id)
    if word is None:
        return EMPTY_RESULT
    return SlotResult(
        target=word.base_form,
        english=ctx.engine.translate_pronoun_to_english(word.base_form),
    )


def _process_verb(slot: VerbSlot, ctx: SlotContext) -> SlotResult:
    if not slot.verb_id:
        return EMPTY_RESULT

    pronoun = ctx.subject_pronoun()
    subject_gender = ctx.language_config.gender_for_pronoun(pronoun) if pronoun else None

    conjugated = ctx.engine.conjugate_verb(
        pronoun, slot.verb_id, ctx.verbs, subject_gender=subject_gender
    )

    verb = find_verb(slot.verb_id, ctx.verbs)
    if verb is None:
        logger.debug("verb_not_in_table", verb_id=slot.verb_id, language=ctx.language)
    return SlotResult(
        target=conjugated,
        english=verb.english if verb is not None else conjugated,
    )


def _process_object_phrase(slot: ObjectPhraseSlot, ctx: SlotContext) -> SlotResult:
    word = ctx.selected_words.get(slot.id)
    if word is None:
        return EMPTY_RESULT

    governed = ctx.preceding_verb.governs_case if ctx.preceding_verb else None
    grammatical_case = governed or slot.required_case or GrammaticalCase.NOMINATIVE.value
    config = ctx.language_config

    if slot.preposition:
        return build_preposition_phrase(
            word,
            grammatical_case,
            ctx.language,
            ctx.engine,
            slot.preposition,
            language_config=config,
        )

    building = config.phrase_building
    possessive = ctx.rng.choice(building.possessives) if building.possessives else None

    adjective_list = building.adjectives
    if enum_value(grammatical_case) == GrammaticalCase.DATIVE.value and building.dative_adjectives:
        adjective_list = building.dative_adjectives

    adjective = None
    if adjective_list:
        adjective_base = ctx.rng.choice(adjective_list)
        adjective = WordVariant(
            id=adjective_base,
            base_form=adjective_base,
            english=building.translations.adjectives.get(adjective_base, adjective_base),
            category=WordCategory.ADJECTIVE,
        )

    target = build_noun_phrase(word, grammatical_case, ctx.engine, possessive, adjective)

    english_parts = [
        ctx.engine.translate_possessive_to_english(possessive) if possessive else "",
        adjective.english if adjective is not None else "",
        word.english or word.base_form,
    ]
    return SlotResult(target=target, english=" ".join(p for p in english_parts if p))


SLOT_HANDLERS: Dict[str, Callable[..., SlotResult]] = {
    SlotType.FIXED.value: _process_fixed,
    SlotType.PRONOUN.value: _process_pronoun,
    SlotType.VERB.value: _process_verb,
    SlotType.OBJECT_PHRASE.value: _process_object_phrase,
}


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def process_slot(
    slot,
    selected_words: Mapping[str, WordVariant],
    language: str,
    verbs: Sequence[VerbConjugation],
    engine: DeclensionEngine,
    preceding_verb: Optional[VerbConjugation] = None,
    *,
    rng: Optional[random.Random] = None,
    language_config: Optional[LanguageConfig] = None,
) -> SlotResult:
    """
    Realize one slot as a target/English pair.

    `preceding_verb` is the verb immediately before this slot; its
    `governs_case` overrides an object phrase's `required_case`.
    """
    handler = SLOT_HANDLERS.get(enum_value(slot.type))
    if handler is None:
        return EMPTY_RESULT

    ctx = SlotContext(
        selected_words=selected_words,
        language=enum_value(language),
        verbs=verbs or (),
        engine=engine,
        preceding_verb=preceding_verb,
        rng=rng or get_default_rng(),
        language_config=language_config,
    )
    return handler(slot, ctx)


__all__ = ["process_slot", "SlotResult", "SLOT_HANDLERS"]
