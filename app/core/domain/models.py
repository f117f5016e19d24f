# app/core/domain/models.py
from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain.grammar import (
    Gender,
    GrammaticalCase,
    Language,
    VerbTense,
    WordCategory,
    enum_value,
)

if TYPE_CHECKING:
    from morphology.base import DeclensionEngine


class _Frozen(BaseModel):
    """Immutable base: enum fields are stored as their raw string values."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)


# -----------------------------
# Vocabulary
# -----------------------------

class WordVariant(_Frozen):
    """A single vocabulary item offered by a slot or a default word list."""

    id: str
    base_form: str
    english: Optional[str] = None
    # Required for nouns; pronouns and adjectives leave it empty.
    gender: Optional[Gender] = None
    category: WordCategory
    # Explicit surface forms keyed "<case>_<gender>_<number>"
    declensions: Dict[str, str] = Field(default_factory=dict)


class VerbConjugation(_Frozen):
    """
    A conjugation table authored in configuration.

    ``conjugations`` covers the default (gender-neutral or masculine) path;
    ``gender_forms`` carries past-tense gender agreement where the language
    needs it. ``governs_case`` forces the case of the object phrase that
    immediately follows the verb in a pattern.
    """

    id: str
    infinitive: str
    english: str
    language: Language
    tense: VerbTense
    conjugations: Dict[str, str] = Field(default_factory=dict)
    gender_forms: Optional[Dict[str, Dict[str, str]]] = None
    governs_case: Optional[GrammaticalCase] = None

    @field_validator("gender_forms")
    @classmethod
    def _normalize_gender_keys(cls, value):
        if value is None:
            return value
        return {enum_value(Gender(key)): dict(forms) for key, forms in value.items()}


# -----------------------------
# Pattern slots (tagged union)
# -----------------------------

class _SlotBase(_Frozen):
    id: str
    label: str = ""


class FixedSlot(_SlotBase):
    """
    Literal text. The target/English pair may disagree, e.g. an English-only
    "to" with no German or Czech counterpart.
    """

    type: Literal["fixed"] = "fixed"
    fixed_text: Optional[str] = None
    fixed_text_target: Optional[str] = None
    fixed_text_english: Optional[str] = None


class PronounSlot(_SlotBase):
    type: Literal["pronoun"] = "pronoun"
    options: Tuple[WordVariant, ...] = ()


class VerbSlot(_SlotBase):
    type: Literal["verb"] = "verb"
    verb_id: Optional[str] = None


class ObjectPhraseSlot(_SlotBase):
    """Noun phrase slot; a preposition routes it to the preposition builder."""

    type: Literal["object-phrase"] = "object-phrase"
    options: Tuple[WordVariant, ...] = ()
    required_case: Optional[GrammaticalCase] = None
    preposition: Optional[str] = None


PhraseSlot = Annotated[
    Union[FixedSlot, PronounSlot, VerbSlot, ObjectPhraseSlot],
    Field(discriminator="type"),
]


class PhrasePattern(_Frozen):
    """
    A sentence template. The templates are documentation only; generation
    walks ``slots`` in order and that order is the surface word order.
    """

    id: str
    name: str
    language: Language
    english_template: str
    target_template: str
    slots: Tuple[PhraseSlot, ...] = ()
    description: Optional[str] = None


# -----------------------------
# Engine output
# -----------------------------

class GeneratedPhrase(_Frozen):
    id: str
    pattern_id: str
    language: Language
    english: str
    target_correct: str
    # Identical to target_correct until a base-form prompt mode exists.
    target_prompt: str
    target_without_pronoun: Optional[str] = None
    selected_words: Dict[str, WordVariant] = Field(default_factory=dict)


class TrainingSession(_Frozen):
    """Outcome of one submitted answer."""

    id: str
    phrase_id: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    timestamp: int
    attempts: int = 1


# -----------------------------
# Language configuration
# -----------------------------

class PrepositionConfig(_Frozen):
    preposition_to_english: Dict[str, str] = Field(default_factory=dict)
    preposition_to_case: Optional[Dict[str, GrammaticalCase]] = None
    uses_articles: bool = False


class PhraseTranslations(_Frozen):
    possessives: Dict[str, str] = Field(default_factory=dict)
    adjectives: Dict[str, str] = Field(default_factory=dict)


class PhraseBuildingConfig(_Frozen):
    """Word lists used to decorate object phrases with a possessive and adjective."""

    possessives: Tuple[str, ...] = ()
    adjectives: Tuple[str, ...] = ()
    dative_adjectives: Optional[Tuple[str, ...]] = None
    translations: PhraseTranslations = Field(default_factory=PhraseTranslations)


class LanguageConfig(_Frozen):
    """
    Static per-language configuration, loaded once from a language profile
    card and never mutated.
    """

    id: Language
    name: str
    native_name: str = ""
    cases: Tuple[GrammaticalCase, ...] = ()
    genders: Tuple[Gender, ...] = ()
    allow_pronoun_drop: bool = False
    # gender -> pronouns that take that gender's verb forms
    gender_pronoun_map: Optional[Dict[str, Tuple[str, ...]]] = None
    uses_gender_for_past_tense: bool = False
    preposition_config: PrepositionConfig = Field(default_factory=PrepositionConfig)
    phrase_building: PhraseBuildingConfig = Field(default_factory=PhraseBuildingConfig)
    vocabulary: Dict[str, Tuple[WordVariant, ...]] = Field(default_factory=dict)
    default_pronouns: Tuple[WordVariant, ...] = ()
    default_verbs: Tuple[VerbConjugation, ...] = ()
    default_patterns: Tuple[PhrasePattern, ...] = ()

    @field_validator("gender_pronoun_map")
    @classmethod
    def _normalize_pronoun_map(cls, value):
        if value is None:
            return value
        return {enum_value(Gender(key)): tuple(pronouns) for key, pronouns in value.items()}

    @property
    def engine(self) -> "DeclensionEngine":
        """The declension engine registered for this language."""
        from router import get_declension_engine

        return get_declension_engine(self.id)

    def gender_for_pronoun(self, pronoun: str) -> Optional[str]:
        """Grammatical gender a subject pronoun imposes on past-tense verbs, if any."""
        if not self.uses_gender_for_past_tense or not self.gender_pronoun_map:
            return None
        for gender, pronouns in self.gender_pronoun_map.items():
            if pronoun in pronouns:
                return gender
        return None

    def find_pattern(self, pattern_id: str) -> Optional[PhrasePattern]:
        for pattern in self.default_patterns:
            if pattern.id == pattern_id:
                return pattern
        return None
