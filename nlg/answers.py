# nlg/answers.py
"""
Answer checking for training sessions.

Comparison is done on normalized text (see `nlg.helpers.normalize_text`),
so case, surrounding whitespace and the punctuation marks . , ! ? ; never
make an answer wrong.
"""

from __future__ import annotations

import time
from typing import Optional

import structlog

from app.core.domain.models import GeneratedPhrase, TrainingSession
from nlg.helpers import generate_id, normalize_text

logger = structlog.get_logger()


def check_answer(
    user_answer: str,
    correct_answer: str,
    alternative_answer: Optional[str] = None,
) -> bool:
    """
    True when the user's answer matches the correct answer or, if given,
    the alternative (e.g. the pro-drop form). Empty answers never match.
    """
    normalized_user = normalize_text(user_answer or "")
    if not normalized_user:
        return False

    normalized_correct = normalize_text(correct_answer or "")
    if normalized_correct and normalized_user == normalized_correct:
        return True

    if alternative_answer:
        return normalized_user == normalize_text(alternative_answer)

    return False


def evaluate_answer(
    phrase: GeneratedPhrase,
    user_answer: str,
    attempts: int = 1,
) -> TrainingSession:
    """Check an answer against a generated phrase and record the outcome."""
    is_correct = check_answer(
        user_answer,
        phrase.target_correct,
        phrase.target_without_pronoun,
    )
    logger.info(
        "answer_evaluated",
        phrase_id=phrase.id,
        is_correct=is_correct,
        attempts=attempts,
    )
    return TrainingSession(
        id=generate_id(),
        phrase_id=phrase.id,
        user_answer=user_answer,
        correct_answer=phrase.target_correct,
        is_correct=is_correct,
        timestamp=int(time.time() * 1000),
        attempts=attempts,
    )


__all__ = ["check_answer", "evaluate_answer"]
