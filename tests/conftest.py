# tests/conftest.py
import logging
import random

import pytest
import structlog

from app.core.domain.models import VerbConjugation, WordVariant
from app.shared.languages import get_language_config
from router import get_declension_engine


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    """Only warnings and errors, written to whatever stdout is current."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def german():
    """The German declension engine."""
    return get_declension_engine("german")


@pytest.fixture
def czech():
    """The Czech declension engine."""
    return get_declension_engine("czech")


@pytest.fixture
def german_config():
    return get_language_config("german")


@pytest.fixture
def czech_config():
    return get_language_config("czech")


@pytest.fixture
def rng():
    """Seeded random source so generation is reproducible."""
    return random.Random(1234)


def noun(base_form, gender, english=None, **kwargs):
    return WordVariant(
        id=kwargs.pop("id", base_form.lower()),
        base_form=base_form,
        english=english,
        gender=gender,
        category="noun",
        **kwargs,
    )


def pronoun(base_form, english=None):
    return WordVariant(id=base_form, base_form=base_form, english=english, category="pronoun")


@pytest.fixture
def czech_verbs():
    """Verb table with a genitive-governing verb and a plain one."""
    return [
        VerbConjugation(
            id="bát-se-present",
            infinitive="bát se",
            english="to be afraid of",
            language="czech",
            tense="present",
            conjugations={"já": "bojím se", "ty": "bojíš se", "on": "bojí se"},
            governs_case="genitive",
        ),
        VerbConjugation(
            id="mít-present",
            infinitive="mít",
            english="to have",
            language="czech",
            tense="present",
            conjugations={"já": "mám", "ty": "máš", "on": "má"},
        ),
    ]


@pytest.fixture
def czech_past_verbs():
    return [
        VerbConjugation(
            id="jít-past",
            infinitive="jít",
            english="went",
            language="czech",
            tense="past",
            conjugations={"já": "šel jsem", "ty": "šel jsi", "on": "šel", "ona": "šla"},
            gender_forms={
                "masculine": {"já": "šel jsem", "on": "šel"},
                "feminine": {"já": "šla jsem", "ona": "šla"},
                "neuter": {"ono": "šlo"},
            },
        )
    ]


@pytest.fixture
def german_verbs():
    return [
        VerbConjugation(
            id="haben-present",
            infinitive="haben",
            english="have",
            language="german",
            tense="present",
            conjugations={"ich": "habe", "du": "hast", "er": "hat"},
        ),
        VerbConjugation(
            id="sein-present",
            infinitive="sein",
            english="am",
            language="german",
            tense="present",
            conjugations={"ich": "bin", "du": "bist", "er": "ist"},
        ),
    ]
