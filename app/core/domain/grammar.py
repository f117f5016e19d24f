# app/core/domain/grammar.py
"""
Grammar primitives shared by every layer of the phrase trainer.

All enums subclass ``str`` so that they compare equal to their raw JSON
values ("dative", "feminine", ...) and can be used directly as keys in
ending tables.
"""

from __future__ import annotations

from enum import Enum


class GrammaticalCase(str, Enum):
    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    DATIVE = "dative"
    GENITIVE = "genitive"
    # Czech only
    VOCATIVE = "vocative"
    LOCATIVE = "locative"
    INSTRUMENTAL = "instrumental"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalNumber(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class WordCategory(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"
    PRONOUN = "pronoun"
    VERB = "verb"
    PREPOSITION = "preposition"
    ARTICLE = "article"


class SlotType(str, Enum):
    PRONOUN = "pronoun"
    VERB = "verb"
    OBJECT_PHRASE = "object-phrase"
    FIXED = "fixed"


class VerbTense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"
    PERFECT = "perfect"


class Language(str, Enum):
    GERMAN = "german"
    CZECH = "czech"


def enum_value(value):
    """Return the raw string behind an enum member (or the value itself)."""
    return getattr(value, "value", value)


def table_key(
    grammatical_case: str,
    gender: str,
    number: str = GrammaticalNumber.SINGULAR.value,
) -> str:
    """
    Build the lookup key used by every ending table.

    Plural forms are gender-neutral, so the key collapses to
    ``"<case>_plural"``; singular keys are ``"<case>_<gender>_singular"``.
    """
    case_value = enum_value(grammatical_case)
    number_value = enum_value(number)
    if number_value == GrammaticalNumber.PLURAL.value:
        return f"{case_value}_plural"
    return f"{case_value}_{enum_value(gender)}_{number_value}"


__all__ = [
    "GrammaticalCase",
    "Gender",
    "GrammaticalNumber",
    "WordCategory",
    "SlotType",
    "VerbTense",
    "Language",
    "enum_value",
    "table_key",
]
