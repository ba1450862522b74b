"""
Exceptions raised inside the transformer.

Only ``ConfigurationError`` escapes to callers; the others are converted to
warnings where they are caught.
"""


class TransformerError(Exception):
    """Base class for transformer errors."""


class ConfigurationError(TransformerError):
    """Invalid or unreadable transformer configuration."""


class FilterValueError(TransformerError, TypeError):
    """A value cannot be rendered as a Typesense filter literal."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Cannot format value of type {type(value).__name__}")


class NegationError(TransformerError):
    """A filter fragment cannot be negated."""

    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(fragment)


class UnsupportedNegationError(NegationError):
    """The fragment has no negated form in the filter grammar."""


class NegatedRangeError(NegationError):
    """A strict ``>`` comparison cannot be negated soundly."""
