# app/core/use_cases/generate_phrases.py
import random
from typing import List, Optional, Sequence

import structlog

from app.core.domain.exceptions import DomainError, InvalidPatternError
from app.core.domain.models import GeneratedPhrase, PhrasePattern, VerbConjugation
from app.shared.config import settings
from app.shared.languages import get_language_config
from nlg.api import generate_multiple_phrases

logger = structlog.get_logger()

REQUIRED_PATTERN_FIELDS = ("name", "english_template", "target_template")


def validate_pattern(pattern: PhrasePattern) -> None:
    """
    Authoring gate: a pattern needs a name and both templates before it is
    accepted. The generation core itself never calls this.
    """
    missing = [
        field
        for field in REQUIRED_PATTERN_FIELDS
        if not str(getattr(pattern, field, "") or "").strip()
    ]
    if missing:
        raise InvalidPatternError(pattern.id, missing)


class GeneratePhrases:
    """
    Use Case: Turns an authored pattern into a batch of practice phrases.

    Responsibilities:
    1. Validates the pattern at the authoring boundary.
    2. Supplies the language's built-in verb table when the caller has none.
    3. Generates the phrases with the injected random source.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def execute(
        self,
        pattern: PhrasePattern,
        count: Optional[int] = None,
        verbs: Optional[Sequence[VerbConjugation]] = None,
    ) -> List[GeneratedPhrase]:
        count = settings.DEFAULT_PHRASE_COUNT if count is None else count
        logger.info(
            "phrase_generation_started",
            pattern_id=pattern.id,
            language=pattern.language,
            count=count,
        )

        # 1. Validation (Business Rules)
        self._validate(pattern)

        config = get_language_config(pattern.language)
        verb_table = config.default_verbs if verbs is None else verbs

        # 2. Execution
        phrases = generate_multiple_phrases(
            pattern,
            count,
            verb_table,
            rng=self.rng,
            language_config=config,
        )

        logger.info(
            "phrase_generation_success",
            pattern_id=pattern.id,
            generated=len(phrases),
        )
        return phrases

    def _validate(self, pattern: PhrasePattern) -> None:
        try:
            validate_pattern(pattern)
        except DomainError as exc:
            logger.warning("pattern_rejected", pattern_id=pattern.id, error=str(exc))
            raise
