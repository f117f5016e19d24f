# tests/test_models.py
import pytest
from pydantic import ValidationError

from app.core.domain.grammar import GrammaticalCase, table_key
from app.core.domain.models import (
    FixedSlot,
    ObjectPhraseSlot,
    PhrasePattern,
    VerbConjugation,
    WordVariant,
)


def test_slots_are_parsed_by_type():
    pattern = PhrasePattern.model_validate(
        {
            "id": "p",
            "name": "P",
            "language": "german",
            "english_template": "-",
            "target_template": "-",
            "slots": [
                {"id": "to", "type": "fixed", "fixed_text_english": "to"},
                {
                    "id": "place",
                    "type": "object-phrase",
                    "required_case": "dative",
                    "preposition": "in",
                    "options": [
                        {"id": "kino", "base_form": "Kino", "category": "noun", "gender": "neuter"}
                    ],
                },
            ],
        }
    )
    fixed, place = pattern.slots
    assert isinstance(fixed, FixedSlot)
    assert isinstance(place, ObjectPhraseSlot)
    assert place.required_case == "dative"
    assert place.options[0].gender == "neuter"


def test_unknown_slot_type_is_rejected():
    with pytest.raises(ValidationError):
        PhrasePattern.model_validate(
            {
                "id": "p",
                "name": "P",
                "language": "german",
                "english_template": "-",
                "target_template": "-",
                "slots": [{"id": "x", "type": "adverb"}],
            }
        )


def test_models_are_frozen():
    word = WordVariant(id="kino", base_form="Kino", category="noun", gender="neuter")
    with pytest.raises(ValidationError):
        word.base_form = "Haus"


def test_invalid_enum_values_are_rejected():
    with pytest.raises(ValidationError):
        WordVariant(id="x", base_form="x", category="noun", gender="common")
    with pytest.raises(ValidationError):
        PhrasePattern(
            id="p", name="P", language="french", english_template="-", target_template="-"
        )


def test_gender_form_keys_are_validated():
    with pytest.raises(ValidationError):
        VerbConjugation(
            id="v",
            infinitive="v",
            english="v",
            language="czech",
            tense="past",
            gender_forms={"common": {"já": "x"}},
        )


def test_enum_values_compare_as_strings():
    assert GrammaticalCase.DATIVE == "dative"
    assert table_key("dative", "feminine") == "dative_feminine_singular"
    assert table_key(GrammaticalCase.DATIVE, "feminine", "plural") == "dative_plural"
