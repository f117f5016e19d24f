# tests/test_german_declension.py
import pytest

from app.core.domain.grammar import Gender, GrammaticalCase
from app.core.domain.models import VerbConjugation
from morphology.germanic import get_case_for_preposition, merge_preposition_with_article


class TestArticles:
    @pytest.mark.parametrize(
        "case, gender, expected",
        [
            ("nominative", "masculine", "der"),
            ("nominative", "feminine", "die"),
            ("nominative", "neuter", "das"),
            ("accusative", "masculine", "den"),
            ("dative", "masculine", "dem"),
            ("dative", "feminine", "der"),
            ("dative", "neuter", "dem"),
            ("genitive", "neuter", "des"),
        ],
    )
    def test_definite(self, german, case, gender, expected):
        assert german.get_definite_article(case, gender) == expected

    def test_definite_plural(self, german):
        assert german.get_definite_article("nominative", "masculine", "plural") == "die"
        assert german.get_definite_article("dative", "feminine", "plural") == "den"

    def test_accepts_enum_members(self, german):
        assert german.get_definite_article(GrammaticalCase.DATIVE, Gender.FEMININE) == "der"

    def test_indefinite(self, german):
        assert german.get_indefinite_article("accusative", "masculine") == "einen"
        assert german.get_indefinite_article("dative", "feminine") == "einer"
        assert german.get_indefinite_article("nominative", "neuter") == "ein"


class TestAdjectives:
    def test_weak_endings_after_definite_article(self, german):
        assert german.decline_adjective("alt", "nominative", "masculine") == "alte"
        assert german.decline_adjective("alt", "accusative", "masculine") == "alten"
        assert german.decline_adjective("alt", "dative", "feminine") == "alten"

    def test_mixed_endings_after_possessive(self, german):
        assert (
            german.decline_adjective("alt", "nominative", "masculine", has_definite_article=False)
            == "alter"
        )
        assert (
            german.decline_adjective("alt", "nominative", "neuter", has_definite_article=False)
            == "altes"
        )
        assert (
            german.decline_adjective("neu", "accusative", "feminine", has_definite_article=False)
            == "neue"
        )

    def test_stem_drops_unstressed_e(self, german):
        assert (
            german.decline_adjective("teuer", "nominative", "feminine", has_definite_article=False)
            == "teure"
        )

    def test_inflected_base_form_is_restripped(self, german):
        assert (
            german.decline_adjective("ältesten", "dative", "masculine", has_definite_article=False)
            == "ältesten"
        )


class TestPossessives:
    @pytest.mark.parametrize(
        "base, case, gender, expected",
        [
            ("mein", "nominative", "masculine", "mein"),
            ("mein", "accusative", "masculine", "meinen"),
            ("mein", "dative", "neuter", "meinem"),
            ("dein", "nominative", "feminine", "deine"),
            ("ihr", "genitive", "feminine", "ihrer"),
            ("unser", "dative", "masculine", "unserem"),
            ("unser", "nominative", "neuter", "unser"),
            ("euer", "nominative", "feminine", "eure"),
            ("euer", "nominative", "masculine", "euer"),
        ],
    )
    def test_endings(self, german, base, case, gender, expected):
        assert german.decline_possessive(base, case, gender) == expected


class TestNouns:
    def test_ordinary_nouns_do_not_change(self, german):
        assert german.decline_noun("Kino", "dative", "neuter") == "Kino"
        assert german.decline_noun("Park", "accusative", "masculine") == "Park"
        assert german.decline_noun("Schule", "genitive", "feminine") == "Schule"

    def test_genitive_s(self, german):
        assert german.decline_noun("Kino", "genitive", "neuter") == "Kinos"
        assert german.decline_noun("Haus", "genitive", "neuter") == "Hauses"

    def test_weak_masculine(self, german):
        assert german.decline_noun("Herr", "accusative", "masculine") == "Herrn"
        assert german.decline_noun("Junge", "dative", "masculine") == "Jungen"
        assert german.decline_noun("Student", "accusative", "masculine") == "Studenten"
        assert german.decline_noun("Name", "genitive", "masculine") == "Namens"
        assert german.decline_noun("Junge", "nominative", "masculine") == "Junge"

    def test_plural_is_lexical(self, german):
        assert german.decline_noun("Kinder", "dative", "neuter", "plural") == "Kinder"


class TestPrepositions:
    @pytest.mark.parametrize(
        "prep, article, expected",
        [
            ("in", "das", "ins"),
            ("in", "dem", "im"),
            ("zu", "der", "zur"),
            ("zu", "dem", "zum"),
            ("bei", "dem", "beim"),
            ("von", "dem", "vom"),
            ("an", "das", "ans"),
            ("an", "dem", "am"),
            ("auf", "das", "aufs"),
            ("in", "der", "in der"),
            ("mit", "dem", "mit dem"),
        ],
    )
    def test_contractions(self, prep, article, expected):
        assert merge_preposition_with_article(prep, article) == expected

    def test_governed_case(self):
        assert get_case_for_preposition("mit") == "dative"
        assert get_case_for_preposition("für") == "accusative"
        assert get_case_for_preposition("in") == "accusative"
        assert get_case_for_preposition("hinter") == "accusative"


class TestVerbs:
    def test_table_lookup_by_id_and_infinitive(self, german, german_verbs):
        assert german.conjugate_verb("ich", "haben-present", german_verbs) == "habe"
        assert german.conjugate_verb("du", "haben", german_verbs) == "hast"

    def test_missing_pronoun_returns_infinitive(self, german, german_verbs):
        assert german.conjugate_verb("wir", "haben-present", german_verbs) == "haben"

    def test_fallback_table(self, german):
        assert german.conjugate_verb("ich", "ging", []) == "ging"
        assert german.conjugate_verb("wir", "ging", []) == "gingen"
        assert german.conjugate_verb("du", "gab", None) == "gabst"

    def test_unknown_verb_is_echoed(self, german):
        assert german.conjugate_verb("ich", "laufen", []) == "laufen"

    def test_gender_forms_ignored_without_entry(self, german):
        verb = VerbConjugation(
            id="x",
            infinitive="x",
            english="x",
            language="german",
            tense="past",
            conjugations={"ich": "xa"},
            gender_forms={"feminine": {"sie": "xf"}},
        )
        assert german.conjugate_verb("ich", "x", [verb], subject_gender="feminine") == "xa"


class TestTranslations:
    def test_pronouns(self, german):
        assert german.translate_pronoun_to_english("ich") == "I"
        assert german.translate_pronoun_to_english("ihr") == "you (plural)"
        assert german.translate_pronoun_to_english("man") == "man"

    def test_possessives(self, german):
        assert german.translate_possessive_to_english("unser") == "our"
        assert german.translate_possessive_to_english("ihr") == "her"
        assert german.translate_possessive_to_english("xyz") == "xyz"


def test_rules_are_deterministic(german):
    first = [
        german.decline_adjective("klein", "dative", "neuter", has_definite_article=False),
        german.decline_possessive("sein", "accusative", "masculine"),
        german.decline_noun("Herr", "dative", "masculine"),
        german.get_definite_article("genitive", "masculine"),
    ]
    for _ in range(5):
        again = [
            german.decline_adjective("klein", "dative", "neuter", has_definite_article=False),
            german.decline_possessive("sein", "accusative", "masculine"),
            german.decline_noun("Herr", "dative", "masculine"),
            german.get_definite_article("genitive", "masculine"),
        ]
        assert again == first
