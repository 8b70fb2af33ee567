"""Base schema with an immutable, chainable constraint pipeline.

Every chain call (``required``, ``refine``, ``optional``, ``transform`` and the
kind-specific constraint methods) returns a new schema of the same concrete
kind. The receiver is never modified, so a schema can be shared as a template
across any number of validation calls and threads.

Example:
    ```python
    from dataknobs_schema import string

    password = (
        string()
        .min(8)
        .regex(r"[A-Z]", "A uppercase letter is required")
        .regex(r"[0-9]", "A number is required")
    )
    password.validate("abc")      # 'Must be at least 8 characters'
    password.validate_all("abc")  # all three messages
    ```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .constraints import Constraint, Custom, Required
from .exceptions import SchemaValidationError
from .result import ParseResult

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound="Schema[Any]")


@dataclass(frozen=True)
class SchemaState:
    """Configuration shared by every schema kind."""

    constraints: tuple[Constraint, ...] = ()
    optional: bool = False
    transform: Callable[[Any], Any] | None = None


class Schema(ABC, Generic[T]):
    """Base class for all schemas.

    Holds an ordered tuple of constraints, an optional flag and an optional
    output transform. Subclasses implement :meth:`_rebuild` to construct a
    sibling of their own kind from a new state.
    """

    def __init__(self, state: SchemaState | None = None):
        self._state = state or SchemaState()

    @abstractmethod
    def _rebuild(self: S, state: SchemaState) -> S:
        """Create a new schema of this kind carrying ``state``."""

    def _with_constraint(self: S, constraint: Constraint) -> S:
        return self._rebuild(
            replace(self._state, constraints=self._state.constraints + (constraint,))
        )

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        """Constraints in declaration order."""
        return self._state.constraints

    @property
    def is_optional(self) -> bool:
        return self._state.optional

    def _skips(self, value: Any) -> bool:
        """True when an optional schema receives an absent value."""
        return self._state.optional and value is None

    def _output(self, value: Any) -> Any:
        """Shape a value that already passed validation into the output."""
        if self._skips(value) or self._state.transform is None:
            return value
        return self._state.transform(value)

    # Validation entry points

    def validate(self, value: Any) -> str | None:
        """Return the first error for ``value``, or None if it is valid."""
        if self._skips(value):
            return None
        for constraint in self._state.constraints:
            error = constraint.check(value)
            if error is not None:
                return error
        return None

    def validate_all(self, value: Any) -> list[str]:
        """Return every error for ``value`` in declaration order."""
        if self._skips(value):
            return []
        errors = []
        for constraint in self._state.constraints:
            error = constraint.check(value)
            if error is not None:
                errors.append(error)
        return errors

    def safe_parse(self, value: Any) -> ParseResult:
        """Validate and shape ``value`` without raising.

        Returns:
            ParseResult with the output on success, the error otherwise
        """
        error = self.validate(value)
        if error is not None:
            return self._failure(error)
        return self._parsed(value)

    def _failure(self, message: str) -> ParseResult:
        return ParseResult.failure(error=message)

    def _parsed(self, value: Any) -> ParseResult:
        """Shape a valid value, reporting a raising transform as a failure."""
        try:
            data = self._output(value)
        except Exception as e:
            logger.debug(f"{type(self).__name__} transform raised for {value!r}: {e}")
            return self._failure(f"Transform error: {e!s}")
        return ParseResult.ok(data)

    def parse(self, value: Any) -> Any:
        """Validate and shape ``value``.

        Returns:
            The transformed value, or ``value`` itself without a transform

        Raises:
            SchemaValidationError: If the value fails validation
        """
        result = self.safe_parse(value)
        if not result.success:
            logger.debug(f"{type(self).__name__} parse failed: {result.messages}")
            raise SchemaValidationError.from_result(result)
        return result.data

    # Universal modifiers

    def required(self: S, message: str = "Required") -> S:
        """Reject None, blank strings and empty sequences."""
        return self._with_constraint(Required(message))

    def optional(self: S) -> S:
        """Accept an absent (None) value without running any constraint."""
        return self._rebuild(replace(self._state, optional=True))

    def refine(self: S, predicate: Callable[[Any], Any], message: str = "Invalid value") -> S:
        """Add a custom check that fails when ``predicate(value)`` is falsy."""
        return self._with_constraint(Custom(predicate, message))

    def transform(self: S, fn: Callable[[Any], Any]) -> S:
        """Set the function ``parse`` applies to valid values.

        ``validate`` and ``validate_all`` never run the transform.
        """
        return self._rebuild(replace(self._state, transform=fn))

    def __repr__(self) -> str:
        flags = ", optional" if self._state.optional else ""
        return f"{type(self).__name__}(constraints={len(self._state.constraints)}{flags})"
