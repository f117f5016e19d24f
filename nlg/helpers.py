# nlg/helpers.py
"""Small text and identity helpers shared by generation and answer checking."""

from __future__ import annotations

import random
import re
import time
import uuid
from typing import Optional

from app.shared.config import settings

_PUNCTUATION_RE = re.compile(r"[.,!?;]")
_WHITESPACE_RE = re.compile(r"\s+")

_default_rng: Optional[random.Random] = None


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def normalize_text(text: str) -> str:
    """
    Lowercase, drop . , ! ? ; and collapse whitespace.

    Punctuation goes first so that "a . b" and "a b" normalize alike and a
    second pass changes nothing.
    """
    text = _PUNCTUATION_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def generate_id() -> str:
    """'<epoch ms>-<9 lowercase alphanumerics>'."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def get_default_rng() -> random.Random:
    """Process-wide generator, seeded from PT_RANDOM_SEED when set."""
    global _default_rng
    if _default_rng is None:
        _default_rng = random.Random(settings.RANDOM_SEED)
    return _default_rng


__all__ = ["capitalize_first", "normalize_text", "generate_id", "get_default_rng"]
