# nlg/api.py

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from app.core.domain.grammar import SlotType, enum_value
from app.core.domain.models import (
    GeneratedPhrase,
    LanguageConfig,
    PhrasePattern,
    TrainingSession,
    VerbConjugation,
    WordVariant,
)
from app.shared.languages import get_language_config
from constructions.slots import process_slot
from morphology.base import find_verb
from nlg.answers import evaluate_answer
from nlg.helpers import capitalize_first, generate_id, get_default_rng

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Phrase generation
# ---------------------------------------------------------------------------


def _select_words(pattern: PhrasePattern, rng: random.Random) -> Dict[str, WordVariant]:
    """Pick one option per slot that offers any, uniformly at random."""
    selected: Dict[str, WordVariant] = {}
    for slot in pattern.slots:
        options = getattr(slot, "options", ())
        if options:
            selected[slot.id] = rng.choice(options)
    return selected


def _build_parts(
    pattern: PhrasePattern,
    selected_words: Dict[str, WordVariant],
    verbs: Sequence[VerbConjugation],
    config: LanguageConfig,
    rng: random.Random,
) -> Tuple[List[str], List[str]]:
    engine = config.engine
    target_parts: List[str] = []
    english_parts: List[str] = []
    current_verb: Optional[VerbConjugation] = None

    for index, slot in enumerate(pattern.slots):
        slot_type = enum_value(slot.type)

        if slot_type == SlotType.VERB.value and slot.verb_id:
            current_verb = find_verb(slot.verb_id, verbs)

        result = process_slot(
            slot,
            selected_words,
            pattern.language,
            verbs,
            engine,
            current_verb,
            rng=rng,
            language_config=config,
        )

        if result.target:
            target_parts.append(capitalize_first(result.target) if index == 0 else result.target)
        if result.english:
            english_parts.append(result.english)

        # Governance reaches only the first object phrase after the verb
        if slot_type == SlotType.OBJECT_PHRASE.value:
            current_verb = None

    return target_parts, english_parts


def _pronoun_drop(target_parts: List[str], config: LanguageConfig) -> Optional[str]:
    if not config.allow_pronoun_drop or len(target_parts) <= 1:
        return None
    rest = list(target_parts[1:])
    rest[0] = capitalize_first(rest[0])
    return " ".join(rest)


def generate_phrase_from_pattern(
    pattern: PhrasePattern,
    verbs: Sequence[VerbConjugation] = (),
    *,
    rng: Optional[random.Random] = None,
    language_config: Optional[LanguageConfig] = None,
) -> GeneratedPhrase:
    """
    Realize one sentence from a pattern.

    Slots are walked in order; a verb slot's `governs_case` forces the case
    of the object phrase that follows it. Pass a seeded `rng` for
    reproducible word selection.
    """
    rng = rng or get_default_rng()
    config = language_config or get_language_config(pattern.language)

    selected_words = _select_words(pattern, rng)
    target_parts, english_parts = _build_parts(pattern, selected_words, verbs, config, rng)

    target_correct = " ".join(target_parts)
    phrase = GeneratedPhrase(
        id=generate_id(),
        pattern_id=pattern.id,
        language=pattern.language,
        english=" ".join(english_parts),
        target_correct=target_correct,
        target_prompt=target_correct,
        target_without_pronoun=_pronoun_drop(target_parts, config),
        selected_words=selected_words,
    )

    logger.debug(
        "phrase_generated",
        pattern_id=pattern.id,
        language=pattern.language,
        target=phrase.target_correct,
    )
    return phrase


def generate_multiple_phrases(
    pattern: PhrasePattern,
    count: int = 5,
    verbs: Sequence[VerbConjugation] = (),
    *,
    rng: Optional[random.Random] = None,
    language_config: Optional[LanguageConfig] = None,
) -> List[GeneratedPhrase]:
    """Independent draws from the same pattern; duplicates are possible."""
    rng = rng or get_default_rng()
    config = language_config or get_language_config(pattern.language)
    return [
        generate_phrase_from_pattern(pattern, verbs, rng=rng, language_config=config)
        for _ in range(count)
    ]


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class PhraseSession:
    """
    Convenience wrapper for drills over the built-in patterns of a language.

    Holds one random generator so a seeded session replays the same words.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        preload_langs: Optional[List[str]] = None,
    ) -> None:
        self._rng = rng or get_default_rng()
        self._config_cache: Dict[str, LanguageConfig] = {}
        if preload_langs:
            for lang in preload_langs:
                self.config(lang)

    # public API -------------------------------------------------------------

    def config(self, language: str) -> LanguageConfig:
        if language not in self._config_cache:
            self._config_cache[language] = get_language_config(language)
        return self._config_cache[language]

    def patterns(self, language: str) -> Tuple[PhrasePattern, ...]:
        return self.config(language).default_patterns

    def generate(
        self,
        language: str,
        pattern_id: Optional[str] = None,
        *,
        count: int = 1,
    ) -> List[GeneratedPhrase]:
        """
        Generate `count` phrases from one built-in pattern.

        Without `pattern_id` a pattern is drawn at random.
        """
        config = self.config(language)
        pattern = self._resolve_pattern(config, pattern_id)
        return generate_multiple_phrases(
            pattern,
            count,
            config.default_verbs,
            rng=self._rng,
            language_config=config,
        )

    def check(self, phrase: GeneratedPhrase, user_answer: str, attempts: int = 1) -> TrainingSession:
        return evaluate_answer(phrase, user_answer, attempts)

    # internal helpers -------------------------------------------------------

    def _resolve_pattern(self, config: LanguageConfig, pattern_id: Optional[str]) -> PhrasePattern:
        if pattern_id is None:
            if not config.default_patterns:
                raise KeyError(f"Language {config.id!r} has no built-in patterns")
            return self._rng.choice(config.default_patterns)

        pattern = config.find_pattern(pattern_id)
        if pattern is None:
            raise KeyError(f"Unknown pattern for {config.id!r}: {pattern_id!r}")
        return pattern


__all__ = [
    "generate_phrase_from_pattern",
    "generate_multiple_phrases",
    "PhraseSession",
]
