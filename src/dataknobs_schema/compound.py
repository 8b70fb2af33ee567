"""Compound schema kinds: arrays and objects.

Compound schemas validate their children with the child's ``validate`` and
fold the results into an error mapping keyed by stringified index or field
name. Errors attributed to the compound value itself are recorded under
``"root"``. A failing child never stops the remaining children from being
checked.
"""

from __future__ import annotations

import json
from abc import abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .constraints import Length, Unique, is_sequence
from .result import ParseResult
from .schema import Schema, SchemaState

if TYPE_CHECKING:
    from collections.abc import Callable

ROOT = "root"


class CompoundSchema(Schema[Any]):
    """Shared flattening of error mappings for array and object schemas."""

    @abstractmethod
    def _collect_errors(self, value: Any) -> dict[str, str]:
        """Validate ``value`` and return the error mapping (empty if valid)."""

    def _root_error(self, value: Any) -> str | None:
        """First failure among this schema's own constraints."""
        return Schema.validate(self, value)

    def validate(self, value: Any) -> str | None:
        """Return the JSON serialization of the error mapping, or None."""
        if self._skips(value):
            return None
        errors = self._collect_errors(value)
        return json.dumps(errors) if errors else None

    def validate_all(self, value: Any) -> list[str]:
        """Return ``"key: message"`` for every entry of the error mapping."""
        if self._skips(value):
            return []
        errors = self._collect_errors(value)
        return [f"{key}: {message}" for key, message in errors.items()]

    def safe_parse(self, value: Any) -> ParseResult:
        if self._skips(value):
            return ParseResult.ok(value)
        errors = self._collect_errors(value)
        if errors:
            return ParseResult.failure(errors=errors)
        return self._parsed(value)

    def _failure(self, message: str) -> ParseResult:
        return ParseResult.failure(errors={ROOT: message})


class ArraySchema(CompoundSchema):
    """Schema for lists (and tuples) whose items all match one item schema."""

    def __init__(self, item: Schema[Any], state: SchemaState | None = None):
        super().__init__(state)
        self.item = item

    def _rebuild(self, state: SchemaState) -> ArraySchema:
        return ArraySchema(self.item, state)

    def _collect_errors(self, value: Any) -> dict[str, str]:
        if not is_sequence(value):
            return {ROOT: "Must be an array"}

        errors = {}
        for index, element in enumerate(value):
            error = self.item.validate(element)
            if error is not None:
                errors[str(index)] = error

        root_error = self._root_error(value)
        if root_error is not None:
            errors[ROOT] = root_error
        return errors

    def _output(self, value: Any) -> Any:
        if self._skips(value):
            return value
        items = [self.item._output(element) for element in value]
        shaped = tuple(items) if isinstance(value, tuple) else items
        return super()._output(shaped)

    def min(self, length: int, message: str | None = None) -> ArraySchema:
        """Require at least ``length`` items."""
        return self._with_constraint(
            Length(
                message or f"Must contain at least {length} items",
                min=length,
                kind=(list, tuple),
            )
        )

    def max(self, length: int, message: str | None = None) -> ArraySchema:
        """Allow at most ``length`` items."""
        return self._with_constraint(
            Length(
                message or f"Must contain at most {length} items",
                max=length,
                kind=(list, tuple),
            )
        )

    def unique(
        self,
        comparator: Callable[[Any, Any], bool] | None = None,
        message: str | None = None,
    ) -> ArraySchema:
        """Reject arrays containing two equal items.

        Args:
            comparator: Equality function for two items; ``==`` if omitted
            message: Error message; defaults to one naming the duplicate pair
        """
        return self._with_constraint(Unique(comparator, message))

    def __repr__(self) -> str:
        return f"ArraySchema(item={self.item!r}, constraints={len(self.constraints)})"


class ObjectSchema(CompoundSchema):
    """Schema for mappings with a fixed set of declared fields.

    Only declared fields are checked; extra keys in the input are ignored.
    A declared field missing from the input is validated as None, so the
    child schema decides whether absence is acceptable.
    """

    def __init__(self, shape: Mapping[str, Schema[Any]], state: SchemaState | None = None):
        super().__init__(state)
        self._shape = MappingProxyType(dict(shape))

    @property
    def shape(self) -> Mapping[str, Schema[Any]]:
        """Read-only mapping of field name to child schema."""
        return self._shape

    def _rebuild(self, state: SchemaState) -> ObjectSchema:
        return ObjectSchema(self._shape, state)

    def _collect_errors(self, value: Any) -> dict[str, str]:
        if not isinstance(value, Mapping):
            return {ROOT: "Must be an object"}

        errors = {}
        for key, child in self._shape.items():
            error = child.validate(value.get(key))
            if error is not None:
                errors[key] = error

        root_error = self._root_error(value)
        if root_error is not None:
            errors[ROOT] = root_error
        return errors

    def _output(self, value: Any) -> Any:
        if self._skips(value):
            return value
        shaped = dict(value)
        for key, child in self._shape.items():
            if key in shaped:
                shaped[key] = child._output(shaped[key])
        return super()._output(shaped)

    def __repr__(self) -> str:
        return f"ObjectSchema(fields={list(self._shape)}, constraints={len(self.constraints)})"
