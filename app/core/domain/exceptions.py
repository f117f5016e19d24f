# app/core/domain/exceptions.py
"""
Domain-level exceptions.

The generation core itself degrades gracefully and never raises for
incomplete content; these errors belong to the boundaries around it
(authoring gate, configuration loading).
"""


class DomainError(Exception):
    """Base class for all phrase trainer domain errors."""


class InvalidPatternError(DomainError):
    """A pattern is missing a required authoring field."""

    def __init__(self, pattern_id: str, missing: list[str]):
        self.pattern_id = pattern_id
        self.missing = list(missing)
        super().__init__(
            f"Pattern '{pattern_id}' is missing required fields: {', '.join(self.missing)}"
        )


class LanguageProfileError(DomainError):
    """A language profile card exists but cannot be turned into a LanguageConfig."""
