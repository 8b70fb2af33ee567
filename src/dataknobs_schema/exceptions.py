"""Exceptions for the dataknobs_schema package.

Built on the common exception framework from dataknobs_common.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from dataknobs_common import ValidationError

if TYPE_CHECKING:
    from .result import ParseResult


class SchemaValidationError(ValidationError):
    """Raised by ``Schema.parse`` when a value fails validation.

    For scalar schemas the message is the first error. For array and object
    schemas it is the JSON serialization of the error mapping, which is also
    available as :attr:`errors`.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        self.errors = errors
        super().__init__(
            message,
            context={"errors": errors} if errors is not None else {"error": message},
        )

    @classmethod
    def from_result(cls, result: ParseResult) -> SchemaValidationError:
        """Build the exception for a failed parse result."""
        if result.errors is not None:
            return cls(json.dumps(result.errors), errors=result.errors)
        return cls(result.error or "Validation failed")
