# tests/test_languages.py
import json

import pytest

from app.core.domain.exceptions import LanguageProfileError
from app.shared.config import PROJECT_ROOT, settings
from app.shared.languages import clear_cache, get_language_config, list_languages
from lexicon.index import (
    LexiconNotFound,
    available_languages,
    load_language_profile,
    resolve_vocabulary_refs,
)
from morphology.germanic import GermanDeclension
from morphology.slavic import CzechDeclension
from nlg.api import generate_phrase_from_pattern
from router import get_declension_engine, supported_languages


class TestLanguageConfig:
    def test_german(self, german_config):
        assert german_config.id == "german"
        assert len(german_config.cases) == 4
        assert german_config.allow_pronoun_drop is False
        assert german_config.preposition_config.uses_articles is True
        assert german_config.gender_for_pronoun("ich") is None

    def test_czech(self, czech_config):
        assert czech_config.id == "czech"
        assert len(czech_config.cases) == 7
        assert czech_config.allow_pronoun_drop is True
        assert czech_config.uses_gender_for_past_tense is True
        assert czech_config.preposition_config.uses_articles is False
        assert czech_config.gender_for_pronoun("ona") == "feminine"
        assert czech_config.gender_for_pronoun("ono") == "neuter"

    def test_unknown_language_falls_back_to_german(self):
        assert get_language_config("klingon").id == "german"

    def test_lookup_is_case_insensitive(self):
        assert get_language_config("Czech").id == "czech"

    def test_vocabulary_references_are_resolved(self, czech_config):
        pattern = czech_config.find_pattern("pattern-czech-1")
        place_slot = pattern.slots[2]
        assert place_slot.options == czech_config.vocabulary["places"]
        assert czech_config.default_pronouns == czech_config.vocabulary["pronouns"]

    def test_find_pattern(self, german_config):
        assert german_config.find_pattern("pattern-german-3").name == "Being at a place (present)"
        assert german_config.find_pattern("missing") is None

    def test_engine_property(self, czech_config):
        assert isinstance(czech_config.engine, CzechDeclension)

    def test_list_languages(self):
        assert {config.id for config in list_languages()} == {"german", "czech"}


@pytest.fixture
def reset_language_cache(monkeypatch):
    yield monkeypatch
    clear_cache()


class TestLanguageCache:
    def test_loaded_config_survives_missing_directory(
        self, czech_config, reset_language_cache, tmp_path
    ):
        reset_language_cache.setattr(settings, "LANGUAGE_PROFILES_DIR", tmp_path / "gone")

        assert get_language_config("czech") is czech_config
        phrase = generate_phrase_from_pattern(
            czech_config.find_pattern("pattern-czech-4"), czech_config.default_verbs
        )
        assert phrase.language == "czech"
        assert phrase.target_without_pronoun is not None

    def test_clear_cache_rereads_cards(self, german_config, reset_language_cache, tmp_path):
        raw = json.loads(
            (PROJECT_ROOT / "language_profiles" / "german.json").read_text(encoding="utf-8")
        )
        raw["name"] = "Edited German"
        (tmp_path / "german.json").write_text(json.dumps(raw), encoding="utf-8")
        reset_language_cache.setattr(settings, "LANGUAGE_PROFILES_DIR", tmp_path)

        assert get_language_config("german").name == "German"
        clear_cache()
        assert get_language_config("german").name == "Edited German"

    def test_missing_default_card_raises(self, reset_language_cache, tmp_path):
        reset_language_cache.setattr(settings, "LANGUAGE_PROFILES_DIR", tmp_path)
        clear_cache()
        with pytest.raises(LexiconNotFound):
            get_language_config("klingon")


class TestProfileLoading:
    def test_available_languages(self):
        assert available_languages() == ["czech", "german"]

    def test_missing_card(self, tmp_path):
        with pytest.raises(LexiconNotFound):
            load_language_profile("german", base_dir=tmp_path)
        with pytest.raises(FileNotFoundError):
            load_language_profile("german", base_dir=tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(LanguageProfileError):
            load_language_profile("broken", base_dir=tmp_path, use_cache=False)

    def test_failed_validation(self, tmp_path):
        (tmp_path / "german.json").write_text(
            json.dumps({"id": "german", "name": "German", "cases": ["ablative"]}),
            encoding="utf-8",
        )
        with pytest.raises(LanguageProfileError):
            load_language_profile("german", base_dir=tmp_path, use_cache=False)

    def test_top_level_must_be_object(self, tmp_path):
        (tmp_path / "german.json").write_text("[]", encoding="utf-8")
        with pytest.raises(LanguageProfileError):
            load_language_profile("german", base_dir=tmp_path, use_cache=False)

    def test_minimal_card(self, tmp_path):
        (tmp_path / "czech.json").write_text(
            json.dumps({"id": "czech", "name": "Czech"}), encoding="utf-8"
        )
        config = load_language_profile("czech", base_dir=tmp_path, use_cache=False)
        assert config.default_patterns == ()
        assert config.phrase_building.possessives == ()

    def test_unknown_vocabulary_reference(self):
        raw = {
            "vocabulary": {"places": []},
            "default_patterns": [{"id": "p", "slots": [{"id": "s", "options": "animals"}]}],
        }
        with pytest.raises(LanguageProfileError):
            resolve_vocabulary_refs(raw, "czech")

    def test_resolution_does_not_mutate_input(self):
        raw = {
            "vocabulary": {"pronouns": [{"id": "já"}]},
            "default_pronouns": "pronouns",
        }
        resolved = resolve_vocabulary_refs(raw, "czech")
        assert resolved["default_pronouns"] == [{"id": "já"}]
        assert raw["default_pronouns"] == "pronouns"


class TestRouter:
    def test_registered_engines(self):
        assert isinstance(get_declension_engine("german"), GermanDeclension)
        assert isinstance(get_declension_engine("czech"), CzechDeclension)

    def test_engines_are_cached(self):
        assert get_declension_engine("czech") is get_declension_engine("czech")

    def test_unknown_language_falls_back_to_german(self):
        assert isinstance(get_declension_engine("klingon"), GermanDeclension)

    def test_supported_languages(self):
        assert supported_languages() == ["czech", "german"]
