"""
ROUTER
======

Central lookup of declension engines.

The phrase builders never import a concrete engine. They ask this module
for the engine bound to a language id, and the router decides which
morphology module and class implement it.

Responsibilities
----------------
- Map a language id ("german", "czech") to a (module path, class name).
- Import the module lazily and instantiate the engine once per process.
- Fall back to German for unknown language ids, with a warning.

Extendibility
-------------

Adding a language means writing a `DeclensionEngine` subclass in
`morphology/` and registering it in `ENGINE_REGISTRY`. Builders and the
phrase orchestrator do not change.
"""

from __future__ import annotations

import importlib
from typing import Dict, List, Tuple

import structlog

from morphology.base import DeclensionEngine

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Registry: language id -> (module path, engine class name)
# ---------------------------------------------------------------------------

ENGINE_REGISTRY: Dict[str, Tuple[str, str]] = {
    # language   module path            class name
    "german": ("morphology.germanic", "GermanDeclension"),
    "czech": ("morphology.slavic", "CzechDeclension"),
}

FALLBACK_LANGUAGE = "german"

# Engines are stateless, so one shared instance per language is enough.
_engine_cache: Dict[str, DeclensionEngine] = {}


def _build_engine(language: str) -> DeclensionEngine:
    module_path, class_name = ENGINE_REGISTRY[language]

    module = importlib.import_module(module_path)
    try:
        engine_cls = getattr(module, class_name)
    except AttributeError:
        raise ImportError(
            f"Module {module_path!r} does not define engine class {class_name!r}"
        )

    return engine_cls()


def get_declension_engine(language: str) -> DeclensionEngine:
    """
    Return the cached declension engine for a language id.

    Unknown ids resolve to the German engine.
    """
    key = str(getattr(language, "value", language)).lower()
    if key not in ENGINE_REGISTRY:
        logger.warning(
            "unknown_language_engine_fallback",
            language=key,
            fallback=FALLBACK_LANGUAGE,
        )
        key = FALLBACK_LANGUAGE

    if key not in _engine_cache:
        _engine_cache[key] = _build_engine(key)
    return _engine_cache[key]


def supported_languages() -> List[str]:
    """Language ids with a registered engine."""
    return sorted(ENGINE_REGISTRY)


__all__ = [
    "ENGINE_REGISTRY",
    "FALLBACK_LANGUAGE",
    "get_declension_engine",
    "supported_languages",
]
