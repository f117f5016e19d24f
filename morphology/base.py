"""
morphology/base.py

Shared abstractions for the per-language declension engines.

This module defines:
- The abstract `DeclensionEngine` capability set every language implements.
- Verb table lookup shared by all engines (`find_verb`).
- Small table helpers used by the concrete engines.

Engines are stateless: every method is a pure function of its arguments
and of module-level tables that are never mutated. One instance per
language is created by `router.get_declension_engine` and shared.
"""

from __future__ import annotations

import abc
from typing import Mapping, Optional, Sequence

import structlog

from app.core.domain.grammar import GrammaticalNumber, enum_value, table_key
from app.core.domain.models import VerbConjugation

logger = structlog.get_logger()

SINGULAR = GrammaticalNumber.SINGULAR.value


# ---------------------------------------------------------------------------
# Verb lookup
# ---------------------------------------------------------------------------


def find_verb(
    verb_id_or_form: str, verbs: Optional[Sequence[VerbConjugation]]
) -> Optional[VerbConjugation]:
    """
    Find a verb by id, falling back to a match on the infinitive.
    """
    if not verbs:
        return None
    for verb in verbs:
        if verb.id == verb_id_or_form:
            return verb
    for verb in verbs:
        if verb.infinitive == verb_id_or_form:
            return verb
    return None


def lookup_form(
    table: Mapping[str, str],
    grammatical_case: str,
    gender: str,
    number: str = SINGULAR,
    default: str = "",
) -> str:
    """Look up a case/gender/number entry in an ending or article table."""
    return table.get(table_key(grammatical_case, gender, number), default)


# ---------------------------------------------------------------------------
# Abstract engine interface
# ---------------------------------------------------------------------------


class DeclensionEngine(abc.ABC):
    """
    Base class for all declension engines.

    Subclasses provide the language's rule tables; the verb conjugation
    algorithm (authored table first, built-in fallback table second) is
    shared and lives here.
    """

    #: Language identifier, e.g. "german". Set by subclasses.
    language: str

    #: Built-in conjugations for legacy verb keys: form -> pronoun -> form
    FALLBACK_CONJUGATIONS: Mapping[str, Mapping[str, str]] = {}

    #: Closed translation tables
    PRONOUN_TRANSLATIONS: Mapping[str, str] = {}
    POSSESSIVE_TRANSLATIONS: Mapping[str, str] = {}

    # Articles ------------------------------------------------------------

    @abc.abstractmethod
    def get_definite_article(
        self, grammatical_case: str, gender: str, number: str = SINGULAR
    ) -> str:
        """Definite article, or '' for languages without articles."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_indefinite_article(self, grammatical_case: str, gender: str) -> str:
        """Singular indefinite article, or '' for languages without articles."""
        raise NotImplementedError

    # Declension ----------------------------------------------------------

    @abc.abstractmethod
    def decline_noun(
        self, base_form: str, grammatical_case: str, gender: str, number: str = SINGULAR
    ) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def decline_adjective(
        self,
        base_form: str,
        grammatical_case: str,
        gender: str,
        number: str = SINGULAR,
        has_definite_article: bool = True,
    ) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def decline_possessive(
        self, base_form: str, grammatical_case: str, gender: str, number: str = SINGULAR
    ) -> str:
        raise NotImplementedError

    # Verbs ---------------------------------------------------------------

    def conjugate_verb(
        self,
        pronoun: str,
        verb_id_or_form: str,
        verbs: Optional[Sequence[VerbConjugation]] = None,
        subject_gender: Optional[str] = None,
    ) -> str:
        """
        Conjugate a verb for the given subject pronoun.

        Resolution order:
            1. gender-specific form (when the verb has gender_forms and a
               subject gender is given),
            2. the verb's default conjugation for the pronoun,
            3. the verb's infinitive, when the table has no entry,
            4. for unknown verbs, the built-in fallback table keyed by the
               literal form, then the literal itself.
        """
        verb = find_verb(verb_id_or_form, verbs)

        if verb is not None:
            if verb.gender_forms and subject_gender:
                gendered = verb.gender_forms.get(enum_value(subject_gender), {})
                if pronoun in gendered:
                    return gendered[pronoun]
            if pronoun in verb.conjugations:
                return verb.conjugations[pronoun]
            logger.debug(
                "conjugation_missing_for_pronoun",
                language=self.language,
                verb_id=verb.id,
                pronoun=pronoun,
            )
            return verb.infinitive

        fallback = self.FALLBACK_CONJUGATIONS.get(verb_id_or_form, {})
        if pronoun in fallback:
            return fallback[pronoun]

        logger.debug(
            "conjugation_unresolved",
            language=self.language,
            verb=verb_id_or_form,
            pronoun=pronoun,
        )
        return verb_id_or_form

    # Translation ---------------------------------------------------------

    def translate_pronoun_to_english(self, pronoun: str) -> str:
        return self.PRONOUN_TRANSLATIONS.get(pronoun, pronoun)

    def translate_possessive_to_english(self, possessive: str) -> str:
        return self.POSSESSIVE_TRANSLATIONS.get(possessive, possessive)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"


__all__ = ["DeclensionEngine", "find_verb", "lookup_form", "SINGULAR"]
