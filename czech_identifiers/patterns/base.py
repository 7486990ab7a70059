"""Base pattern class shared by all identifier patterns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar

from czech_identifiers.exceptions import MissingInputError
from czech_identifiers.result import ParseResult

T = TypeVar("T")


class TextBuilder(Protocol):
    """Anything text can be appended to, e.g. ``io.StringIO``."""

    def write(self, text: str, /) -> int: ...


B = TypeVar("B", bound=TextBuilder)


def digits_to_int(digits: str) -> int:
    """Convert a string of ASCII digits to an integer, digit by digit."""
    number = 0
    for char in digits:
        number = number * 10 + (ord(char) - ord("0"))
    return number


class Pattern(ABC, Generic[T]):
    """Text pattern of an identifier, used to parse text and format values.

    Parsing and formatting use the same textual shape, although parsing can
    be more generous with accepted input (e.g. leading zeros).
    """

    @abstractmethod
    def parse(self, text: str) -> ParseResult[T]:
        """Parse text into a value.

        Doesn't raise on malformed text, a failed :class:`ParseResult` is
        returned instead.

        Raises
        ------
        MissingInputError
            If ``text`` is ``None``.
        """

    @abstractmethod
    def format(self, value: T) -> str:
        """Format a value according to the pattern."""

    def append_format(self, value: T, builder: B) -> B:
        """Write the formatted ``value`` to ``builder`` and return the builder.

        Raises
        ------
        MissingInputError
            If ``builder`` is ``None``.
        """
        if builder is None:
            raise MissingInputError("builder")
        builder.write(self.format(value))
        return builder

    @staticmethod
    def _require_text(text: str | None) -> str:
        if text is None:
            raise MissingInputError("text")
        return text
