"""Schema factory: constructors for every schema kind and config-driven creation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dataknobs_common import ConfigurationError
from dataknobs_config import FactoryBase

from .compound import ArraySchema, ObjectSchema
from .scalar import BooleanSchema, NumberSchema, StringSchema
from .schema import Schema

logger = logging.getLogger(__name__)

# Constraint types each schema kind accepts in configuration, by method name.
_COMMON_CONSTRAINTS = frozenset({"required"})
_KIND_CONSTRAINTS: dict[str, frozenset[str]] = {
    "string": frozenset({"min", "max", "regex", "starts_with", "ends_with", "email", "url"}),
    "number": frozenset({"min", "max", "integer", "positive", "negative", "nonnegative"}),
    "boolean": frozenset({"true", "false"}),
    "array": frozenset({"min", "max", "unique"}),
    "object": frozenset(),
}


class SchemaFactory(FactoryBase):
    """Factory for creating schemas, directly or from configuration.

    Every constructor call returns a fresh schema with no constraints.

    Configuration Options:
        kind (str): string, number, boolean, array or object
        optional (bool): Accept None without running constraints (default: False)
        constraints (list): Constraint definitions, applied in order
        items (dict): Item schema configuration (array only)
        fields (dict): Field name to schema configuration (object only)

    Constraint Definition Options:
        type (str): Constraint method name (min, max, regex, email, ...)
        message (str): Optional error message
        Other keys are passed as arguments to the method, e.g. ``length``
        for string/array ``min``, ``value`` for number ``min``, ``pattern``
        for ``regex``, ``prefix`` for ``starts_with``.

    Example Configuration:
        schemas:
          - name: signup
            factory: dataknobs_schema.SchemaFactory
            kind: object
            fields:
              username:
                kind: string
                constraints:
                  - type: required
                  - type: min
                    length: 3
              age:
                kind: number
                optional: true
                constraints:
                  - type: integer
                  - type: min
                    value: 13
    """

    def string(self) -> StringSchema:
        return StringSchema()

    def number(self) -> NumberSchema:
        return NumberSchema()

    def boolean(self) -> BooleanSchema:
        return BooleanSchema()

    def array(self, item: Schema[Any]) -> ArraySchema:
        """Create an array schema validating each item with ``item``."""
        return ArraySchema(item)

    def object(self, shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
        """Create an object schema from a field name to schema mapping."""
        return ObjectSchema(shape)

    def create(self, **config: Any) -> Schema[Any]:
        """Create a schema from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            ConfigurationError: If the kind, children or constraint
                arguments are invalid
        """
        kind = config.get("kind")
        logger.debug(f"Creating {kind} schema")

        schema = self._build_empty(kind, config)
        for constraint_config in config.get("constraints", []):
            schema = self._apply_constraint(schema, kind, constraint_config)

        if config.get("optional", False):
            schema = schema.optional()
        return schema

    def _build_empty(self, kind: Any, config: Mapping[str, Any]) -> Schema[Any]:
        """Build the constraint-free schema for ``kind``, including children."""
        if kind == "string":
            return self.string()
        if kind == "number":
            return self.number()
        if kind == "boolean":
            return self.boolean()
        if kind == "array":
            items = config.get("items")
            if not isinstance(items, Mapping):
                raise ConfigurationError(
                    "Array schema configuration requires an 'items' mapping",
                    context={"kind": kind},
                )
            return self.array(self._create_child(items, "items"))
        if kind == "object":
            fields = config.get("fields")
            if not isinstance(fields, Mapping):
                raise ConfigurationError(
                    "Object schema configuration requires a 'fields' mapping",
                    context={"kind": kind},
                )
            return self.object({
                name: self._create_child(field, f"fields.{name}") for name, field in fields.items()
            })
        raise ConfigurationError(
            f"Invalid schema kind: {kind}",
            context={"kind": kind, "available_kinds": sorted(_KIND_CONSTRAINTS)},
        )

    def _create_child(self, child_config: Any, location: str) -> Schema[Any]:
        """Build a nested schema, rejecting configurations that are not mappings."""
        if not isinstance(child_config, Mapping):
            raise ConfigurationError(
                f"Schema configuration at '{location}' must be a mapping",
                context={"location": location, "value": child_config},
            )
        return self.create(**child_config)

    def _apply_constraint(
        self, schema: Schema[Any], kind: str, constraint_config: Any
    ) -> Schema[Any]:
        """Chain one configured constraint onto ``schema``."""
        if not isinstance(constraint_config, Mapping):
            raise ConfigurationError(
                f"Constraint configuration for {kind} schema must be a mapping",
                context={"kind": kind, "constraint": constraint_config},
            )
        params = dict(constraint_config)
        constraint_type = str(params.pop("type", "")).lower()

        if constraint_type not in _COMMON_CONSTRAINTS | _KIND_CONSTRAINTS[kind]:
            logger.warning(f"Unknown constraint type for {kind} schema: {constraint_type}")
            return schema

        method = getattr(schema, constraint_type)
        try:
            return method(**params)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid '{constraint_type}' constraint for {kind} schema: {e}",
                context={"kind": kind, "constraint": constraint_type, "params": params},
            ) from e


# Create singleton instance for registration
schema_factory = SchemaFactory()
