"""Scalar schema kinds: boolean, number and string.

Each constraint method skips values of the wrong primitive kind, so a
malformed input never makes a constraint raise.
"""

from __future__ import annotations

from re import Pattern as RegexPattern

from .constraints import (
    EMAIL_PATTERN,
    URL_PATTERN,
    Equals,
    Integer,
    Length,
    Pattern,
    Prefix,
    Range,
    Suffix,
)
from .schema import Schema, SchemaState


class BooleanSchema(Schema[bool]):
    """Schema for boolean values."""

    def _rebuild(self, state: SchemaState) -> BooleanSchema:
        return BooleanSchema(state)

    def true(self, message: str = "Must be true") -> BooleanSchema:
        """Require exactly ``True``."""
        return self._with_constraint(Equals(True, message))

    def false(self, message: str = "Must be false") -> BooleanSchema:
        """Require exactly ``False``."""
        return self._with_constraint(Equals(False, message))


class NumberSchema(Schema[float]):
    """Schema for numeric values (``int`` and ``float``, not ``bool``).

    Bounds are inclusive: ``min(5)`` and ``max(5)`` both accept exactly 5.
    """

    def _rebuild(self, state: SchemaState) -> NumberSchema:
        return NumberSchema(state)

    def min(self, value: float, message: str | None = None) -> NumberSchema:
        """Require a value of at least ``value``."""
        return self._with_constraint(
            Range(message or f"Must be at least {value}", min=value)
        )

    def max(self, value: float, message: str | None = None) -> NumberSchema:
        """Allow a value of at most ``value``."""
        return self._with_constraint(
            Range(message or f"Must be at most {value}", max=value)
        )

    def integer(self, message: str = "Must be an integer") -> NumberSchema:
        """Require a whole number."""
        return self._with_constraint(Integer(message))

    def positive(self, message: str = "Must be positive") -> NumberSchema:
        """Require a value greater than zero."""
        return self._with_constraint(Range(message, min=0, min_exclusive=True))

    def negative(self, message: str = "Must be negative") -> NumberSchema:
        """Require a value less than zero."""
        return self._with_constraint(Range(message, max=0, max_exclusive=True))

    def nonnegative(self, message: str = "Must be non-negative") -> NumberSchema:
        """Require a value of zero or more."""
        return self._with_constraint(Range(message, min=0))


class StringSchema(Schema[str]):
    """Schema for string values."""

    def _rebuild(self, state: SchemaState) -> StringSchema:
        return StringSchema(state)

    def min(self, length: int, message: str | None = None) -> StringSchema:
        """Require at least ``length`` characters."""
        return self._with_constraint(
            Length(message or f"Must be at least {length} characters", min=length)
        )

    def max(self, length: int, message: str | None = None) -> StringSchema:
        """Allow at most ``length`` characters."""
        return self._with_constraint(
            Length(message or f"Must be at most {length} characters", max=length)
        )

    def regex(
        self, pattern: str | RegexPattern[str], message: str = "Invalid format"
    ) -> StringSchema:
        """Require a match for ``pattern`` somewhere in the value.

        Anchor the pattern with ``^``/``$`` to match the whole string.
        """
        return self._with_constraint(Pattern(pattern, message))

    def starts_with(self, prefix: str, message: str | None = None) -> StringSchema:
        """Require the value to begin with ``prefix``."""
        return self._with_constraint(Prefix(prefix, message))

    def ends_with(self, suffix: str, message: str | None = None) -> StringSchema:
        """Require the value to end with ``suffix``."""
        return self._with_constraint(Suffix(suffix, message))

    def email(self, message: str = "Must be a valid email") -> StringSchema:
        """Require a simple ``local@domain.tld`` shape."""
        return self._with_constraint(Pattern(EMAIL_PATTERN, message))

    def url(self, message: str = "Must be a valid URL") -> StringSchema:
        """Require a host with an optional http(s) scheme and path."""
        return self._with_constraint(Pattern(URL_PATTERN, message))
