"""Errors raised while normalizing observation payloads"""

__all__ = [
    "ExtractionError",
    "ParseError",
    "MissingDataError",
]


class ExtractionError(ValueError):
    """Base class for failures turning a raw payload into observations"""


class ParseError(ExtractionError):
    """A value is present but cannot be converted (e.g. non-numeric text)"""


class MissingDataError(ExtractionError):
    """A required array or field is absent or empty"""
