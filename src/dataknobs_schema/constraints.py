"""Constraint implementations with a consistent, callable API.

Every constraint is a small immutable object that inspects a value and
returns ``None`` when the value satisfies it, or a human readable message
when it does not. Constraints never raise for bad input values.
"""

from __future__ import annotations

import logging
import math
import re
from abc import ABC, abstractmethod
from numbers import Real
from re import Pattern as RegexPattern
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^(https?://)?([\w-]+\.)+[\w-]+(/[\w\- ./?%&=]*)?$", re.ASCII)


def is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """True for the list-like values array schemas accept."""
    return isinstance(value, (list, tuple))


class Constraint(ABC):
    """Base class for all constraints.

    Subclasses implement :meth:`check`. Instances are callable, so a
    constraint can be used anywhere a ``(value) -> str | None`` function
    is expected.
    """

    message: str

    @abstractmethod
    def check(self, value: Any) -> str | None:
        """Validate a value against this constraint.

        Args:
            value: Value to validate

        Returns:
            None if the value passes, otherwise the error message
        """

    def __call__(self, value: Any) -> str | None:
        return self.check(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class Required(Constraint):
    """Value must be present and non-empty."""

    def __init__(self, message: str = "Required"):
        self.message = message

    def check(self, value: Any) -> str | None:
        """Reject None, blank strings and empty lists/tuples."""
        if value is None:
            return self.message
        if isinstance(value, str) and value.strip() == "":
            return self.message
        if is_sequence(value) and len(value) == 0:
            return self.message
        return None


class Custom(Constraint):
    """Custom constraint using a predicate callable."""

    def __init__(self, predicate: Callable[[Any], Any], message: str = "Invalid value"):
        """Initialize custom constraint.

        Args:
            predicate: Callable returning a truthy value when the value is valid
            message: Error message if the predicate fails
        """
        self.predicate = predicate
        self.message = message

    def check(self, value: Any) -> str | None:
        """Check using the predicate."""
        try:
            passed = self.predicate(value)
        except Exception as e:
            logger.debug(f"Predicate {self.predicate!r} raised for {value!r}: {e}")
            return f"Custom validation error: {e!s}"
        return None if passed else self.message


class Range(Constraint):
    """Numeric value must be in the specified range.

    Non-numeric values are skipped. NaN never satisfies a range.
    """

    def __init__(
        self,
        message: str,
        min: float | None = None,
        max: float | None = None,
        min_exclusive: bool = False,
        max_exclusive: bool = False,
    ):
        """Initialize range constraint.

        Args:
            message: Error message when the value is out of range
            min: Minimum value (inclusive by default)
            max: Maximum value (inclusive by default)
            min_exclusive: If True, value must be > min
            max_exclusive: If True, value must be < max
        """
        if min is not None and max is not None and min > max:
            raise ValueError(f"min ({min}) cannot be greater than max ({max})")
        self.message = message
        self.min = min
        self.max = max
        self.min_exclusive = min_exclusive
        self.max_exclusive = max_exclusive

    def check(self, value: Any) -> str | None:
        """Check if value is in range."""
        if not is_number(value):
            return None
        if isinstance(value, float) and math.isnan(value):
            return self.message

        if self.min is not None:
            if value < self.min or (self.min_exclusive and value == self.min):
                return self.message
        if self.max is not None:
            if value > self.max or (self.max_exclusive and value == self.max):
                return self.message
        return None


class Integer(Constraint):
    """Numeric value must be a whole number."""

    def __init__(self, message: str = "Must be an integer"):
        self.message = message

    def check(self, value: Any) -> str | None:
        if not is_number(value) or isinstance(value, int):
            return None
        if isinstance(value, float):
            return None if value.is_integer() else self.message
        return None if math.floor(value) == value else self.message


class Length(Constraint):
    """String or sequence length must be in the specified range."""

    def __init__(
        self,
        message: str,
        min: int | None = None,
        max: int | None = None,
        kind: type | tuple[type, ...] = str,
    ):
        """Initialize length constraint.

        Args:
            message: Error message when the length is out of range
            min: Minimum length (inclusive)
            max: Maximum length (inclusive)
            kind: Value type(s) the constraint applies to; others are skipped
        """
        if min is not None and min < 0:
            raise ValueError(f"min length cannot be negative: {min}")
        if max is not None and max < 0:
            raise ValueError(f"max length cannot be negative: {max}")
        if min is not None and max is not None and min > max:
            raise ValueError(f"min length ({min}) cannot be greater than max ({max})")
        self.message = message
        self.min = min
        self.max = max
        self.kind = kind

    def check(self, value: Any) -> str | None:
        """Check if value length is in range."""
        if not isinstance(value, self.kind):
            return None
        length = len(value)
        if self.min is not None and length < self.min:
            return self.message
        if self.max is not None and length > self.max:
            return self.message
        return None


class Pattern(Constraint):
    """String value must contain a match for a regex pattern."""

    def __init__(self, pattern: str | RegexPattern[str], message: str = "Invalid format"):
        """Initialize pattern constraint.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Error message if nothing matches
        """
        if isinstance(pattern, str):
            self.regex = re.compile(pattern)
        else:
            self.regex = pattern
        self.message = message

    def check(self, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        return None if self.regex.search(value) else self.message

    def __repr__(self) -> str:
        return f"Pattern({self.regex.pattern!r}, message={self.message!r})"


class Prefix(Constraint):
    """String value must start with a prefix."""

    def __init__(self, prefix: str, message: str | None = None):
        self.prefix = prefix
        self.message = message or f'Must start with "{prefix}"'

    def check(self, value: Any) -> str | None:
        if isinstance(value, str) and not value.startswith(self.prefix):
            return self.message
        return None


class Suffix(Constraint):
    """String value must end with a suffix."""

    def __init__(self, suffix: str, message: str | None = None):
        self.suffix = suffix
        self.message = message or f'Must end with "{suffix}"'

    def check(self, value: Any) -> str | None:
        if isinstance(value, str) and not value.endswith(self.suffix):
            return self.message
        return None


class Equals(Constraint):
    """Value must be exactly the expected singleton (compared by identity)."""

    def __init__(self, expected: Any, message: str):
        self.expected = expected
        self.message = message

    def check(self, value: Any) -> str | None:
        return None if value is self.expected else self.message


class Unique(Constraint):
    """Sequence items must be pairwise distinct.

    Items are compared pairwise in index order, so the reported pair is
    always the first duplicate encountered.
    """

    def __init__(
        self,
        comparator: Callable[[Any, Any], bool] | None = None,
        message: str | None = None,
    ):
        """Initialize unique constraint.

        Args:
            comparator: Equality function for two items; ``==`` if omitted
            message: Fixed error message; by default the message names the
                indices of the duplicate pair
        """
        self.comparator = comparator
        self.message = message or "Duplicate items at index {first} and {second}"
        self._fixed_message = message is not None

    def find_duplicate(self, items: list[Any] | tuple[Any, ...]) -> tuple[int, int] | None:
        """Return the indices of the first duplicate pair, if any."""
        equal = self.comparator or (lambda a, b: a == b)
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if equal(items[i], items[j]):
                    return i, j
        return None

    def check(self, value: Any) -> str | None:
        if not is_sequence(value):
            return None
        try:
            pair = self.find_duplicate(value)
        except Exception as e:
            logger.debug(f"Comparator {self.comparator!r} raised for {value!r}: {e}")
            return f"Comparison error: {e!s}"
        if pair is None:
            return None
        if self._fixed_message:
            return self.message
        return self.message.format(first=pair[0], second=pair[1])
