"""
Slavic morphology: declension engine for Czech.

Czech has no articles; case is carried by endings on nouns, adjectives
and possessives. This module provides:

- noun declension through a small set of productive paradigms chosen by
  gender and stem ending (žena, růže, kost, město, moře, nádraží,
  muzeum, pán, hrad, muž, stroj, hrdina),
- consonant mutation before -ě / -i (kniha -> knize, kluk -> kluci),
- fleeting vowels (dárek -> dárku, pes -> psa),
- hard-stem adjective endings, shared by declinable possessives,
- a closed list of irregular noun forms.

Animacy is not part of the vocabulary model, so masculine animacy comes
from a closed list of animate nouns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from app.core.domain.grammar import (
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    Language,
    enum_value,
    table_key,
)
from morphology.base import SINGULAR, DeclensionEngine, lookup_form


# ---------------------------------------------------------------------------
# Suffix rules
# ---------------------------------------------------------------------------

def _apply_suffix_rules(word: str, rules: Any, default_suffix: str = "") -> str:
    """
    Apply the first matching suffix replacement rule to `word`.

    Rules are expected to be a list of dicts:
    [{ "ends_with": "...", "replace_with": "..." }, ...]

    If nothing matches, `default_suffix` is appended.
    """
    if not isinstance(rules, list):
        return word + default_suffix

    # Match longer endings first ("ch" before "h")
    sorted_rules = sorted(
        rules,
        key=lambda r: len(r.get("ends_with", "")),
        reverse=True,
    )

    for rule in sorted_rules:
        end = rule.get("ends_with", "")
        repl = rule.get("replace_with", "")
        if end and word.endswith(end):
            stem = word[:-len(end)]
            return stem + repl

    return word + default_suffix


# Dative/locative -ě after a hard stem
E_MUTATION_RULES = [
    {"ends_with": "ch", "replace_with": "še"},
    {"ends_with": "k", "replace_with": "ce"},
    {"ends_with": "h", "replace_with": "ze"},
    {"ends_with": "g", "replace_with": "ze"},
    {"ends_with": "r", "replace_with": "ře"},
    {"ends_with": "l", "replace_with": "le"},
    {"ends_with": "s", "replace_with": "se"},
    {"ends_with": "z", "replace_with": "ze"},
]

# Animate nominative plural -i
I_MUTATION_RULES = [
    {"ends_with": "ch", "replace_with": "ši"},
    {"ends_with": "k", "replace_with": "ci"},
    {"ends_with": "h", "replace_with": "zi"},
    {"ends_with": "g", "replace_with": "zi"},
    {"ends_with": "r", "replace_with": "ři"},
]

# Masculine locative plural -ích after a velar
VELAR_MUTATION_RULES = [
    {"ends_with": "ch", "replace_with": "š"},
    {"ends_with": "k", "replace_with": "c"},
    {"ends_with": "h", "replace_with": "z"},
    {"ends_with": "g", "replace_with": "z"},
]

VOWELS = frozenset("aeiouyáéěíóúůý")
SOFT_CONSONANTS = frozenset("žščřcjďťň")
_VELARS = ("ch", "k", "h", "g")

# Consonants that take an inserted -e- in the genitive plural (taška -> tašek)
_INSERTION_FINALS = frozenset("knrml")
_NO_INSERTION_BEFORE = frozenset("ns")


def _is_velar(stem: str) -> bool:
    return stem.endswith(_VELARS)


def _e_form(stem: str) -> str:
    return _apply_suffix_rules(stem, E_MUTATION_RULES, "ě")


def _genitive_plural(stem: str) -> str:
    if (
        len(stem) >= 2
        and stem[-1] in _INSERTION_FINALS
        and stem[-2] not in VOWELS
        and stem[-2] not in _NO_INSERTION_BEFORE
    ):
        return stem[:-1] + "e" + stem[-1]
    return stem


def _vocative_hard(stem: str) -> str:
    if _is_velar(stem):
        return stem + "u"
    if stem.endswith("r") and len(stem) >= 2 and stem[-2] not in VOWELS:
        return stem[:-1] + "ře"
    return stem + "e"


# ---------------------------------------------------------------------------
# Noun paradigms
# ---------------------------------------------------------------------------

# Ending markers:
#   "="       base form unchanged
#   "ě*"      -ě with consonant mutation
#   "ě*|u"    -u after a velar, otherwise "ě*"
#   "e*"      masculine hard vocative
#   "i*"      -i with consonant mutation
#   "ích*"    -ích with velar mutation, otherwise -ech
#   "ech|ách" -ách after a velar, otherwise -ech
#   "0"       bare stem with inserted -e- where needed


@dataclass(frozen=True)
class Paradigm:
    name: str
    singular: Mapping[str, str]
    plural: Optional[Mapping[str, str]] = None


def _cases(nom, gen, dat, acc, voc, loc, ins) -> Dict[str, str]:
    return {
        GrammaticalCase.NOMINATIVE.value: nom,
        GrammaticalCase.GENITIVE.value: gen,
        GrammaticalCase.DATIVE.value: dat,
        GrammaticalCase.ACCUSATIVE.value: acc,
        GrammaticalCase.VOCATIVE.value: voc,
        GrammaticalCase.LOCATIVE.value: loc,
        GrammaticalCase.INSTRUMENTAL.value: ins,
    }


FEMININE_A = Paradigm(
    "žena",
    _cases("=", "y", "ě*", "u", "o", "ě*", "ou"),
    _cases("y", "0", "ám", "y", "y", "ách", "ami"),
)
FEMININE_SOFT = Paradigm("růže", _cases("=", "=", "i", "i", "=", "i", "í"))
FEMININE_CONSONANT = Paradigm("kost", _cases("=", "i", "i", "=", "i", "i", "í"))

NEUTER_O = Paradigm(
    "město",
    _cases("=", "a", "u", "=", "=", "ě*|u", "em"),
    _cases("a", "0", "ům", "a", "a", "ech|ách", "y"),
)
NEUTER_SOFT = Paradigm("moře", _cases("=", "=", "i", "=", "=", "i", "em"))
NEUTER_I = Paradigm("nádraží", _cases("=", "=", "=", "=", "=", "=", "m"))
NEUTER_UM = Paradigm("muzeum", _cases("=", "a", "u", "=", "=", "u", "em"))

MASCULINE_HARD_ANIMATE = Paradigm(
    "pán",
    _cases("=", "a", "ovi", "a", "e*", "ovi", "em"),
    _cases("i*", "ů", "ům", "y", "i*", "ích*", "y"),
)
MASCULINE_HARD_INANIMATE = Paradigm(
    "hrad",
    _cases("=", "u", "u", "=", "e*", "u", "em"),
    _cases("y", "ů", "ům", "y", "y", "ích*", "y"),
)
MASCULINE_SOFT_ANIMATE = Paradigm(
    "muž",
    _cases("=", "e", "i", "e", "i", "i", "em"),
    _cases("i", "ů", "ům", "e", "i", "ích", "i"),
)
MASCULINE_SOFT_INANIMATE = Paradigm(
    "stroj",
    _cases("=", "e", "i", "=", "i", "i", "em"),
    _cases("e", "ů", "ům", "e", "e", "ích", "i"),
)
MASCULINE_A = Paradigm("hrdina", _cases("=", "y", "ovi", "u", "o", "ovi", "ou"))


ANIMATE_MASCULINE_NOUNS = frozenset(
    {
        "syn",
        "bratr",
        "přítel",
        "pes",
        "lev",
        "otec",
        "muž",
        "kluk",
        "chlapec",
        "pán",
        "student",
        "učitel",
        "ředitel",
        "kamarád",
        "lékař",
        "doktor",
        "soused",
        "dědeček",
        "tatínek",
        "strýc",
        "kocour",
        "hrdina",
        "táta",
    }
)

# Inanimate masculines whose locative singular is -ě rather than -u
LOCATIVE_E_NOUNS = frozenset({"obchod", "les", "hrad", "most", "svět"})

# Stems with a fleeting vowel that the -ek/-ec rule does not cover
FLEETING_STEMS: Dict[str, str] = {
    "pes": "ps",
    "lev": "lv",
    "sen": "sn",
}

# Irregular forms keyed like the ending tables
NOUN_OVERRIDES: Dict[str, Dict[str, str]] = {
    "dcera": {
        "dative_feminine_singular": "dceři",
        "locative_feminine_singular": "dceři",
    },
    "syn": {
        "vocative_masculine_singular": "synu",
        "nominative_plural": "synové",
        "vocative_plural": "synové",
    },
    "přítel": {
        "nominative_plural": "přátelé",
        "genitive_plural": "přátel",
        "dative_plural": "přátelům",
        "accusative_plural": "přátele",
        "vocative_plural": "přátelé",
        "locative_plural": "přátelích",
        "instrumental_plural": "přáteli",
    },
}


def _masculine_stem(base_form: str) -> str:
    if base_form in FLEETING_STEMS:
        return FLEETING_STEMS[base_form]
    if base_form.endswith("ek") and len(base_form) > 3:
        return base_form[:-2] + "k"
    if base_form.endswith("ec") and len(base_form) > 3:
        return base_form[:-2] + "c"
    return base_form


def select_paradigm(base_form: str, gender: str) -> Tuple[Paradigm, str]:
    """Pick the paradigm for a noun and return it with the stem endings attach to."""
    word = base_form.lower()

    if gender == Gender.FEMININE.value:
        if word.endswith("a"):
            return FEMININE_A, base_form[:-1]
        if word.endswith(("e", "ě")):
            return FEMININE_SOFT, base_form[:-1]
        return FEMININE_CONSONANT, base_form

    if gender == Gender.NEUTER.value:
        if word.endswith("um"):
            return NEUTER_UM, base_form[:-2]
        if word.endswith("o"):
            return NEUTER_O, base_form[:-1]
        if word.endswith(("e", "ě")):
            return NEUTER_SOFT, base_form[:-1]
        if word.endswith("í"):
            return NEUTER_I, base_form
        return NEUTER_O, base_form

    # Masculine
    if word.endswith("a"):
        return MASCULINE_A, base_form[:-1]

    animate = word in ANIMATE_MASCULINE_NOUNS
    stem = _masculine_stem(base_form)
    soft = stem[-1:].lower() in SOFT_CONSONANTS or (animate and word.endswith("tel"))
    if soft:
        return (MASCULINE_SOFT_ANIMATE if animate else MASCULINE_SOFT_INANIMATE), stem
    return (MASCULINE_HARD_ANIMATE if animate else MASCULINE_HARD_INANIMATE), stem


def _attach(base_form: str, stem: str, ending: str) -> str:
    if ending == "=":
        return base_form
    if ending == "ě*":
        return _e_form(stem)
    if ending == "ě*|u":
        return stem + "u" if _is_velar(stem) else _e_form(stem)
    if ending == "e*":
        return _vocative_hard(stem)
    if ending == "i*":
        return _apply_suffix_rules(stem, I_MUTATION_RULES, "i")
    if ending == "ích*":
        if _is_velar(stem):
            return _apply_suffix_rules(stem, VELAR_MUTATION_RULES) + "ích"
        return stem + "ech"
    if ending == "ech|ách":
        return stem + ("ách" if _is_velar(stem) else "ech")
    if ending == "0":
        return _genitive_plural(stem)
    if ending.startswith("y") and stem[-1:] in SOFT_CONSONANTS:
        ending = "i" + ending[1:]
    return stem + ending


# ---------------------------------------------------------------------------
# Adjectives, possessives, verbs, translations
# ---------------------------------------------------------------------------

# Hard adjective endings (mladý pattern). Masculine accusative is the animate form.
HARD_ADJECTIVE_ENDINGS: Dict[str, str] = {
    "nominative_masculine_singular": "ý",
    "nominative_feminine_singular": "á",
    "nominative_neuter_singular": "é",
    "genitive_masculine_singular": "ého",
    "genitive_feminine_singular": "é",
    "genitive_neuter_singular": "ého",
    "dative_masculine_singular": "ému",
    "dative_feminine_singular": "é",
    "dative_neuter_singular": "ému",
    "accusative_masculine_singular": "ého",
    "accusative_feminine_singular": "ou",
    "accusative_neuter_singular": "é",
    "vocative_masculine_singular": "ý",
    "vocative_feminine_singular": "á",
    "vocative_neuter_singular": "é",
    "locative_masculine_singular": "ém",
    "locative_feminine_singular": "é",
    "locative_neuter_singular": "ém",
    "instrumental_masculine_singular": "ým",
    "instrumental_feminine_singular": "ou",
    "instrumental_neuter_singular": "ým",
    "nominative_plural": "é",
    "genitive_plural": "ých",
    "dative_plural": "ým",
    "accusative_plural": "é",
    "vocative_plural": "é",
    "locative_plural": "ých",
    "instrumental_plural": "ými",
}

_ADJECTIVE_SUFFIX_RE = re.compile(r"[ýáéíóúůěň]+$")

INDECLINABLE_POSSESSIVES = frozenset({"jeho", "její", "jejich"})

# Legacy participle keys. First and second person carry the auxiliary
# ("šel jsem", "šel jsi"); a bare "šel" is never returned for them.
FALLBACK_CONJUGATIONS: Dict[str, Dict[str, str]] = {
    "šel": {
        "já": "šel jsem",
        "ty": "šel jsi",
        "on": "šel",
        "ona": "šla",
        "ono": "šlo",
        "my": "šli jsme",
        "vy": "šli jste",
        "oni": "šli",
    },
    "dal": {
        "já": "dal jsem",
        "ty": "dal jsi",
        "on": "dal",
        "ona": "dala",
        "ono": "dalo",
        "my": "dali jsme",
        "vy": "dali jste",
        "oni": "dali",
    },
}

PRONOUN_TRANSLATIONS: Dict[str, str] = {
    "já": "I",
    "ty": "you",
    "on": "he",
    "ona": "she",
    "ono": "it",
    "my": "we",
    "vy": "you (plural)",
    "oni": "they",
}

POSSESSIVE_TRANSLATIONS: Dict[str, str] = {
    "můj": "my",
    "tvůj": "your",
    "jeho": "his",
    "její": "her",
    "náš": "our",
    "váš": "your",
    "jejich": "their",
}

CZECH_PREPOSITION_CASES: Dict[str, str] = {
    "do": GrammaticalCase.GENITIVE.value,
    "od": GrammaticalCase.GENITIVE.value,
    "z": GrammaticalCase.GENITIVE.value,
    "bez": GrammaticalCase.GENITIVE.value,
    "u": GrammaticalCase.GENITIVE.value,
    "k": GrammaticalCase.DATIVE.value,
    "proti": GrammaticalCase.DATIVE.value,
    # na also takes the locative for location; accusative covers motion
    "na": GrammaticalCase.ACCUSATIVE.value,
    "v": GrammaticalCase.LOCATIVE.value,
    "o": GrammaticalCase.LOCATIVE.value,
    "při": GrammaticalCase.LOCATIVE.value,
    "s": GrammaticalCase.INSTRUMENTAL.value,
    "před": GrammaticalCase.INSTRUMENTAL.value,
    "za": GrammaticalCase.INSTRUMENTAL.value,
    "nad": GrammaticalCase.INSTRUMENTAL.value,
    "pod": GrammaticalCase.INSTRUMENTAL.value,
}


def get_czech_case_for_preposition(preposition: str) -> str:
    """Default case governed by a Czech preposition (accusative if unknown)."""
    return CZECH_PREPOSITION_CASES.get(preposition.lower(), GrammaticalCase.ACCUSATIVE.value)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class CzechDeclension(DeclensionEngine):
    """Ending-based case marking; no articles."""

    language = Language.CZECH.value

    FALLBACK_CONJUGATIONS = FALLBACK_CONJUGATIONS
    PRONOUN_TRANSLATIONS = PRONOUN_TRANSLATIONS
    POSSESSIVE_TRANSLATIONS = POSSESSIVE_TRANSLATIONS

    def get_definite_article(self, grammatical_case, gender, number=SINGULAR):
        return ""

    def get_indefinite_article(self, grammatical_case, gender):
        return ""

    def decline_noun(self, base_form, grammatical_case, gender, number=SINGULAR):
        case_value = enum_value(grammatical_case)
        gender_value = enum_value(gender)
        plural = enum_value(number) == GrammaticalNumber.PLURAL.value

        override = NOUN_OVERRIDES.get(base_form.lower(), {}).get(
            table_key(case_value, gender_value, number)
        )
        if override:
            return override
        if not plural and case_value == GrammaticalCase.NOMINATIVE.value:
            return base_form

        paradigm, stem = select_paradigm(base_form, gender_value)
        endings = paradigm.plural if plural else paradigm.singular
        if endings is None or case_value not in endings:
            return base_form

        if (
            paradigm is MASCULINE_HARD_INANIMATE
            and not plural
            and case_value == GrammaticalCase.LOCATIVE.value
            and base_form.lower() in LOCATIVE_E_NOUNS
        ):
            return _e_form(stem)

        return _attach(base_form, stem, endings[case_value])

    def decline_adjective(
        self,
        base_form,
        grammatical_case,
        gender,
        number=SINGULAR,
        has_definite_article=True,
    ):
        # Czech adjectives inflect the same way with or without a determiner.
        ending = lookup_form(HARD_ADJECTIVE_ENDINGS, grammatical_case, gender, number, "ý")
        return _ADJECTIVE_SUFFIX_RE.sub("", base_form) + ending

    def decline_possessive(self, base_form, grammatical_case, gender, number=SINGULAR):
        if base_form in INDECLINABLE_POSSESSIVES:
            return base_form
        return self.decline_adjective(
            base_form, grammatical_case, gender, number, has_definite_article=False
        )


__all__ = [
    "CzechDeclension",
    "get_czech_case_for_preposition",
    "select_paradigm",
    "CZECH_PREPOSITION_CASES",
    "INDECLINABLE_POSSESSIVES",
]
