"""Structured result returned by ``safe_parse``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a non-raising parse.

    Scalar schemas report a single ``error`` message. Compound schemas report
    ``errors``, a mapping from field name, stringified index or ``"root"``
    to the message for that key.
    """

    success: bool
    data: Any = None
    error: str | None = None
    errors: dict[str, str] | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check success."""
        return self.success

    @property
    def messages(self) -> list[str]:
        """Failure messages in flattened form.

        Returns:
            ``["key: message", ...]`` for compound failures, ``[error]`` for
            scalar failures, and an empty list on success
        """
        if self.errors:
            return [f"{key}: {message}" for key, message in self.errors.items()]
        if self.error is not None:
            return [self.error]
        return []

    @classmethod
    def ok(cls, data: Any) -> ParseResult:
        """Create a successful result carrying the parsed output."""
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str | None = None,
        errors: dict[str, str] | None = None,
    ) -> ParseResult:
        """Create a failed result.

        Args:
            error: Single error message (scalar schemas)
            errors: Error mapping (compound schemas)

        Returns:
            Failed ParseResult
        """
        return cls(success=False, error=error, errors=errors)
