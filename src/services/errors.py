"""Errors raised by the annotation core.

Both subclass ValueError so API handlers can treat them as bad input.
"""


class AnnotatorError(ValueError):
    """Base class for annotation errors."""


class ConfigurationError(AnnotatorError):
    """Unrecognized target language or level passed to the matcher."""


class DataError(AnnotatorError):
    """Malformed vocabulary data supplied when building an index."""
