# tests/test_noun_phrase.py
from app.core.domain.models import WordVariant
from constructions.noun_phrase import build_noun_phrase, decline_word
from tests.conftest import noun


def adjective(base_form):
    return WordVariant(id=base_form, base_form=base_form, category="adjective")


class TestGerman:
    def test_article_and_noun(self, german):
        assert build_noun_phrase(noun("Auto", "neuter"), "nominative", german) == "das Auto"

    def test_article_adjective_noun_uses_weak_endings(self, german):
        phrase = build_noun_phrase(
            noun("Auto", "neuter"), "nominative", german, adjective=adjective("alt")
        )
        assert phrase == "das alte Auto"

    def test_possessive_replaces_article(self, german):
        laptop = noun("Laptop", "masculine")
        assert (
            build_noun_phrase(laptop, "accusative", german, "mein", adjective("neu"))
            == "meinen neuen Laptop"
        )
        assert (
            build_noun_phrase(laptop, "nominative", german, "mein", adjective("alt"))
            == "mein alter Laptop"
        )

    def test_possessive_without_adjective(self, german):
        assert build_noun_phrase(noun("Tasche", "feminine"), "dative", german, "dein") == "deiner Tasche"

    def test_weak_masculine_noun_is_declined(self, german):
        phrase = build_noun_phrase(
            noun("Nachbar", "masculine"), "dative", german, "mein", adjective("alt")
        )
        assert phrase == "meinem alten Nachbarn"

    def test_word_without_gender_returns_base_form(self, german):
        word = WordVariant(id="x", base_form="Etwas", category="noun")
        assert build_noun_phrase(word, "dative", german, "mein", adjective("alt")) == "Etwas"


class TestCzech:
    def test_bare_noun(self, czech):
        assert build_noun_phrase(noun("auto", "neuter"), "nominative", czech) == "auto"

    def test_adjective_heads_phrase(self, czech):
        phrase = build_noun_phrase(
            noun("auto", "neuter"), "nominative", czech, adjective=adjective("starý")
        )
        assert phrase == "staré auto"

    def test_possessive_adjective_noun(self, czech):
        assert (
            build_noun_phrase(noun("kniha", "feminine"), "accusative", czech, "jeho", adjective("starý"))
            == "jeho starou knihu"
        )
        assert (
            build_noun_phrase(noun("pes", "masculine"), "accusative", czech, "jeho", adjective("starý"))
            == "jeho starého psa"
        )


class TestDeclineWord:
    def test_authored_form_wins(self, czech):
        word = noun("dítě", "neuter", declensions={"genitive_neuter_singular": "dítěte"})
        assert decline_word(word, "genitive", czech) == "dítěte"
        assert build_noun_phrase(word, "genitive", czech) == "dítěte"

    def test_falls_back_to_engine(self, german):
        word = noun("Haus", "neuter", declensions={"dative_neuter_singular": "Hause"})
        assert decline_word(word, "genitive", german) == "Hauses"
        assert decline_word(word, "dative", german) == "Hause"
