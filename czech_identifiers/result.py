"""Result of an attempt to parse text into an identifier."""

from __future__ import annotations

from typing import Generic, TypeVar

from czech_identifiers.exceptions import ResultStateError

T = TypeVar("T")


class ParseResult(Generic[T]):
    """Outcome of a :meth:`Pattern.parse` call.

    A result either holds a parsed value (``success`` is ``True``) or the
    exception describing why parsing failed. Accessing :attr:`value` of a
    failed result raises that exception, so callers can either inspect
    ``success`` first or let the failure surface where the value is used.

    Use :meth:`for_value` and :meth:`for_exception` to create results.
    """

    __slots__ = ("_value", "_exception")

    def __init__(self, value: T | None, exception: Exception | None) -> None:
        self._value = value
        self._exception = exception

    @classmethod
    def for_value(cls, value: T) -> ParseResult[T]:
        """Create a successful result."""
        return cls(value, None)

    @classmethod
    def for_exception(cls, exception: Exception) -> ParseResult[T]:
        """Create a failed result."""
        return cls(None, exception)

    @property
    def success(self) -> bool:
        """Whether parsing succeeded."""
        return self._exception is None

    @property
    def value(self) -> T:
        """Parsed value, raises the parsing failure if there is no value."""
        return self.get_value_or_raise()

    @property
    def exception(self) -> Exception:
        """Exception that caused parsing to fail.

        Raises
        ------
        ResultStateError
            If parsing succeeded.
        """
        if self._exception is None:
            raise ResultStateError("Parsing was successful, there is no exception.")
        return self._exception

    def get_value_or_raise(self) -> T:
        """Return the parsed value or raise the exception that caused the failure."""
        if self._exception is not None:
            # Fresh traceback on every raise.
            raise self._exception.with_traceback(None)
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the parsed value, or ``default`` when parsing failed."""
        if self._exception is not None:
            return default
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._exception is None:
            return f"ParseResult(value={self._value!r})"
        return f"ParseResult(exception={self._exception!r})"
