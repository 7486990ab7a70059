"""Custom exception hierarchy for czech-identifiers."""

from typing import Any


class IdentifiersError(Exception):
    """Base exception for all czech-identifiers errors."""


class MissingInputError(IdentifiersError, TypeError):
    """Raised when ``None`` is passed where a text, bank code or builder is required."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' must not be None.")
        self.argument = argument


class IdentifierFormatError(IdentifiersError, ValueError):
    """Raised when a text doesn't match the grammar of an identifier."""

    def __init__(self, message: str, text: str, expected_form: str) -> None:
        super().__init__(message)
        self.text = text
        self.expected_form = expected_form


class IdentifierRangeError(IdentifiersError, ValueError):
    """Raised when an identifier is constructed with an out-of-range field."""

    def __init__(self, field: str, value: Any, lower: int, upper: int) -> None:
        super().__init__(
            f"Field '{field}' must be from {lower} to {upper}, but was {value}."
        )
        self.field = field
        self.value = value


class UnknownFormatError(IdentifiersError, ValueError):
    """Raised when a format selector is not supported by an identifier."""

    def __init__(self, format_spec: str, supported: str) -> None:
        super().__init__(
            f"Format value '{format_spec}' is not valid, use one of: {supported}."
        )
        self.format_spec = format_spec


class ResultStateError(IdentifiersError):
    """Raised when a successful parse result is asked for its exception."""


class ConfigurationError(IdentifiersError):
    """Raised when configuration is invalid or missing."""
