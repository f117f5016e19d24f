# app/core/use_cases/__init__.py
from .generate_phrases import GeneratePhrases, validate_pattern

__all__ = ["GeneratePhrases", "validate_pattern"]
