"""
morphology/germanic.py

Declension engine for German.

German marks case mainly on the determiner, so most of the work here is
table lookup:

- Definite / indefinite article selection
- Possessive pronoun endings (mein, dein, ...)
- Adjective endings, weak (after a definite article) and mixed (after an
  indefinite article or possessive)
- Noun endings for the few places German nouns still inflect in the
  singular (genitive -s/-es, weak masculine -n/-en)
- Preposition + article contraction (in + das -> ins)

Typical usage from a phrase builder:

    from router import get_declension_engine

    engine = get_declension_engine("german")
    engine.get_definite_article("dative", "feminine")      # "der"
    engine.decline_adjective("alt", "nominative", "masculine",
                             has_definite_article=False)  # "alter"
    merge_preposition_with_article("in", "dem")            # "im"
"""

from __future__ import annotations

import re
from typing import Dict

from app.core.domain.grammar import (
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    Language,
    enum_value,
)
from morphology.base import SINGULAR, DeclensionEngine, lookup_form


# ---------------------------------------------------------------------------
# 1. Tables
# ---------------------------------------------------------------------------

DEFINITE_ARTICLES: Dict[str, str] = {
    "nominative_masculine_singular": "der",
    "nominative_feminine_singular": "die",
    "nominative_neuter_singular": "das",
    "nominative_plural": "die",
    "accusative_masculine_singular": "den",
    "accusative_feminine_singular": "die",
    "accusative_neuter_singular": "das",
    "accusative_plural": "die",
    "dative_masculine_singular": "dem",
    "dative_feminine_singular": "der",
    "dative_neuter_singular": "dem",
    "dative_plural": "den",
    "genitive_masculine_singular": "des",
    "genitive_feminine_singular": "der",
    "genitive_neuter_singular": "des",
    "genitive_plural": "der",
}

INDEFINITE_ARTICLES: Dict[str, str] = {
    "nominative_masculine_singular": "ein",
    "nominative_feminine_singular": "eine",
    "nominative_neuter_singular": "ein",
    "accusative_masculine_singular": "einen",
    "accusative_feminine_singular": "eine",
    "accusative_neuter_singular": "ein",
    "dative_masculine_singular": "einem",
    "dative_feminine_singular": "einer",
    "dative_neuter_singular": "einem",
    "genitive_masculine_singular": "eines",
    "genitive_feminine_singular": "einer",
    "genitive_neuter_singular": "eines",
}

# Possessives follow the ein-word pattern, not the adjective tables.
POSSESSIVE_ENDINGS: Dict[str, str] = {
    "nominative_masculine_singular": "",
    "nominative_feminine_singular": "e",
    "nominative_neuter_singular": "",
    "nominative_plural": "e",
    "accusative_masculine_singular": "en",
    "accusative_feminine_singular": "e",
    "accusative_neuter_singular": "",
    "accusative_plural": "e",
    "dative_masculine_singular": "em",
    "dative_feminine_singular": "er",
    "dative_neuter_singular": "em",
    "dative_plural": "en",
    "genitive_masculine_singular": "es",
    "genitive_feminine_singular": "er",
    "genitive_neuter_singular": "es",
    "genitive_plural": "er",
}

# After a definite article
WEAK_ADJECTIVE_ENDINGS: Dict[str, str] = {
    "nominative_masculine_singular": "e",
    "nominative_feminine_singular": "e",
    "nominative_neuter_singular": "e",
    "nominative_plural": "en",
    "accusative_masculine_singular": "en",
    "accusative_feminine_singular": "e",
    "accusative_neuter_singular": "e",
    "accusative_plural": "en",
    "dative_masculine_singular": "en",
    "dative_feminine_singular": "en",
    "dative_neuter_singular": "en",
    "dative_plural": "en",
    "genitive_masculine_singular": "en",
    "genitive_feminine_singular": "en",
    "genitive_neuter_singular": "en",
    "genitive_plural": "en",
}

# After an indefinite article or a possessive
MIXED_ADJECTIVE_ENDINGS: Dict[str, str] = {
    "nominative_masculine_singular": "er",
    "nominative_feminine_singular": "e",
    "nominative_neuter_singular": "es",
    "nominative_plural": "en",
    "accusative_masculine_singular": "en",
    "accusative_feminine_singular": "e",
    "accusative_neuter_singular": "es",
    "accusative_plural": "en",
    "dative_masculine_singular": "en",
    "dative_feminine_singular": "en",
    "dative_neuter_singular": "en",
    "dative_plural": "en",
    "genitive_masculine_singular": "en",
    "genitive_feminine_singular": "en",
    "genitive_neuter_singular": "en",
    "genitive_plural": "en",
}

# Strips an existing inflectional ending from a dictionary form.
_ENDING_RE = re.compile(r"e[nrs]?$")

# Stems that lose an unstressed e before an ending (teuer -> teure).
ADJECTIVE_STEMS: Dict[str, str] = {
    "teuer": "teur",
    "sauer": "saur",
    "dunkel": "dunkl",
    "edel": "edl",
    "hoch": "hoh",
}

POSSESSIVE_STEMS: Dict[str, str] = {
    "unser": "unser",
    "euer": "eur",
}

# Weak masculine nouns (n-declension): -n/-en outside the nominative.
WEAK_MASCULINE_NOUNS = frozenset(
    {
        "Junge",
        "Kollege",
        "Kunde",
        "Neffe",
        "Löwe",
        "Affe",
        "Franzose",
        "Student",
        "Präsident",
        "Polizist",
        "Tourist",
        "Journalist",
        "Mensch",
        "Held",
        "Herr",
        "Nachbar",
        "Bauer",
        "Name",
        "Gedanke",
        "Buchstabe",
    }
)

# Weak nouns that take -n (not -en) after a consonant.
_WEAK_N_AFTER_CONSONANT = frozenset({"Herr", "Nachbar", "Bauer"})

# Mixed declension: weak in accusative/dative, -ns in the genitive.
_WEAK_GENITIVE_NS = frozenset({"Name", "Gedanke", "Buchstabe"})

_SIBILANT_ENDINGS = ("sch", "s", "ß", "x", "z")

FALLBACK_CONJUGATIONS: Dict[str, Dict[str, str]] = {
    "ging": {
        "ich": "ging",
        "du": "gingst",
        "er": "ging",
        "sie": "ging",
        "es": "ging",
        "wir": "gingen",
        "ihr": "gingt",
        "sie-formal": "gingen",
    },
    "gab": {
        "ich": "gab",
        "du": "gabst",
        "er": "gab",
        "sie": "gab",
        "es": "gab",
        "wir": "gaben",
        "ihr": "gabt",
        "sie-formal": "gaben",
    },
}

PRONOUN_TRANSLATIONS: Dict[str, str] = {
    "ich": "I",
    "du": "you",
    "er": "he",
    "sie": "she",
    "es": "it",
    "wir": "we",
    "ihr": "you (plural)",
    "sie-formal": "you",
}

POSSESSIVE_TRANSLATIONS: Dict[str, str] = {
    "mein": "my",
    "dein": "your",
    "sein": "his",
    "ihr": "her",
    "unser": "our",
    "euer": "your",
}


# ---------------------------------------------------------------------------
# 2. Prepositions
# ---------------------------------------------------------------------------

CONTRACTIONS: Dict[str, str] = {
    "in_das": "ins",
    "in_dem": "im",
    "an_das": "ans",
    "an_dem": "am",
    "zu_der": "zur",
    "zu_dem": "zum",
    "bei_dem": "beim",
    "von_dem": "vom",
    "auf_das": "aufs",
}

PREPOSITION_CASES: Dict[str, str] = {
    "in": GrammaticalCase.ACCUSATIVE.value,
    "zu": GrammaticalCase.DATIVE.value,
    "nach": GrammaticalCase.DATIVE.value,
    "bei": GrammaticalCase.DATIVE.value,
    "mit": GrammaticalCase.DATIVE.value,
    "von": GrammaticalCase.DATIVE.value,
    "aus": GrammaticalCase.DATIVE.value,
    "für": GrammaticalCase.ACCUSATIVE.value,
    "durch": GrammaticalCase.ACCUSATIVE.value,
    "ohne": GrammaticalCase.ACCUSATIVE.value,
    "gegen": GrammaticalCase.ACCUSATIVE.value,
    "um": GrammaticalCase.ACCUSATIVE.value,
}


def merge_preposition_with_article(preposition: str, article: str) -> str:
    """
    Fuse a preposition with the following definite article where German
    contracts them (in + dem -> im); otherwise join them with a space.
    """
    return CONTRACTIONS.get(f"{preposition}_{article}", f"{preposition} {article}")


def get_case_for_preposition(preposition: str) -> str:
    """Default case governed by a German preposition (accusative if unknown)."""
    return PREPOSITION_CASES.get(preposition.lower(), GrammaticalCase.ACCUSATIVE.value)


# ---------------------------------------------------------------------------
# 3. Engine
# ---------------------------------------------------------------------------


def _strip_ending(word: str, stems: Dict[str, str]) -> str:
    if word in stems:
        return stems[word]
    return _ENDING_RE.sub("", word)


class GermanDeclension(DeclensionEngine):
    """Article-based case marking: the determiner carries most of the case."""

    language = Language.GERMAN.value

    FALLBACK_CONJUGATIONS = FALLBACK_CONJUGATIONS
    PRONOUN_TRANSLATIONS = PRONOUN_TRANSLATIONS
    POSSESSIVE_TRANSLATIONS = POSSESSIVE_TRANSLATIONS

    def get_definite_article(self, grammatical_case, gender, number=SINGULAR):
        if enum_value(number) == GrammaticalNumber.PLURAL.value:
            return lookup_form(DEFINITE_ARTICLES, grammatical_case, gender, number, "die")
        return lookup_form(DEFINITE_ARTICLES, grammatical_case, gender, number, "der")

    def get_indefinite_article(self, grammatical_case, gender):
        return lookup_form(INDEFINITE_ARTICLES, grammatical_case, gender, SINGULAR, "ein")

    def decline_noun(self, base_form, grammatical_case, gender, number=SINGULAR):
        """
        Singular nouns only inflect in the genitive (masculine/neuter -s/-es)
        and in the n-declension. Plural stems are lexical, so plural forms
        are returned as given.
        """
        case_value = enum_value(grammatical_case)
        if (
            enum_value(number) == GrammaticalNumber.PLURAL.value
            or case_value == GrammaticalCase.NOMINATIVE.value
        ):
            return base_form

        gender_value = enum_value(gender)
        if gender_value == Gender.MASCULINE.value and base_form in WEAK_MASCULINE_NOUNS:
            return self._decline_weak_masculine(base_form, case_value)

        if case_value == GrammaticalCase.GENITIVE.value and gender_value in (
            Gender.MASCULINE.value,
            Gender.NEUTER.value,
        ):
            if base_form.endswith(_SIBILANT_ENDINGS):
                return base_form + "es"
            return base_form + "s"

        return base_form

    @staticmethod
    def _decline_weak_masculine(base_form: str, case_value: str) -> str:
        if base_form.endswith("e") or base_form in _WEAK_N_AFTER_CONSONANT:
            declined = base_form + "n"
        else:
            declined = base_form + "en"
        if case_value == GrammaticalCase.GENITIVE.value and base_form in _WEAK_GENITIVE_NS:
            return declined + "s"
        return declined

    def decline_adjective(
        self,
        base_form,
        grammatical_case,
        gender,
        number=SINGULAR,
        has_definite_article=True,
    ):
        endings = WEAK_ADJECTIVE_ENDINGS if has_definite_article else MIXED_ADJECTIVE_ENDINGS
        ending = lookup_form(endings, grammatical_case, gender, number, "en")
        return _strip_ending(base_form, ADJECTIVE_STEMS) + ending

    def decline_possessive(self, base_form, grammatical_case, gender, number=SINGULAR):
        ending = lookup_form(POSSESSIVE_ENDINGS, grammatical_case, gender, number, "")
        if not ending and base_form in POSSESSIVE_STEMS:
            # unser / euer keep their full form when uninflected
            return base_form
        return _strip_ending(base_form, POSSESSIVE_STEMS) + ending


__all__ = [
    "GermanDeclension",
    "merge_preposition_with_article",
    "get_case_for_preposition",
    "PREPOSITION_CASES",
    "CONTRACTIONS",
]
