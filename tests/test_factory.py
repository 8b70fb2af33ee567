"""Tests for the schema factory and configuration-driven schema creation."""

import logging

import pytest
from dataknobs_common import ConfigurationError
from dataknobs_config import Config

import dataknobs_schema as ds
from dataknobs_schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaFactory,
    StringSchema,
    schema_factory,
)


class TestFactoryConstructors:
    """Test the constructor methods and module-level aliases."""

    def test_constructors(self):
        factory = SchemaFactory()
        assert isinstance(factory.string(), StringSchema)
        assert isinstance(factory.number(), NumberSchema)
        assert isinstance(factory.boolean(), BooleanSchema)
        assert isinstance(factory.array(factory.number()), ArraySchema)
        assert isinstance(factory.object({"a": factory.string()}), ObjectSchema)

    def test_module_aliases(self):
        assert isinstance(ds.string(), StringSchema)
        assert isinstance(ds.number(), NumberSchema)
        assert isinstance(ds.boolean(), BooleanSchema)
        assert isinstance(ds.array(ds.string()), ArraySchema)
        assert isinstance(ds.object({}), ObjectSchema)

    def test_fresh_empty_schemas(self):
        first = schema_factory.string().min(3)
        second = schema_factory.string()
        assert second.constraints == ()
        assert first is not second


class TestFactoryCreate:
    """Test SchemaFactory.create from configuration."""

    def test_string_schema(self):
        schema = schema_factory.create(
            kind="string",
            constraints=[
                {"type": "min", "length": 8},
                {"type": "max", "length": 255},
                {"type": "regex", "pattern": "[A-Z]", "message": "A uppercase letter is required"},
                {"type": "regex", "pattern": "[0-9]", "message": "A number is required"},
            ],
        )
        assert isinstance(schema, StringSchema)
        assert schema.validate_all("abc") == [
            "Must be at least 8 characters",
            "A uppercase letter is required",
            "A number is required",
        ]
        assert schema.validate_all("Abcdef12") == []

    def test_number_schema(self):
        schema = schema_factory.create(
            kind="number",
            optional=True,
            constraints=[
                {"type": "integer"},
                {"type": "min", "value": 13, "message": "Too young"},
            ],
        )
        assert isinstance(schema, NumberSchema)
        assert schema.is_optional is True
        assert schema.validate(None) is None
        assert schema.validate(12) == "Too young"
        assert schema.validate(13.5) == "Must be an integer"

    def test_boolean_schema(self):
        schema = schema_factory.create(kind="boolean", constraints=[{"type": "TRUE"}])
        assert schema.validate(False) == "Must be true"

    def test_nested_schema(self):
        schema = schema_factory.create(
            kind="object",
            fields={
                "email": {"kind": "string", "constraints": [{"type": "required"}, {"type": "email"}]},
                "tags": {
                    "kind": "array",
                    "items": {"kind": "string", "constraints": [{"type": "starts_with", "prefix": "#"}]},
                    "constraints": [{"type": "unique"}, {"type": "max", "length": 2}],
                },
            },
        )
        assert isinstance(schema, ObjectSchema)
        assert list(schema.shape) == ["email", "tags"]
        assert schema.validate_all({"email": "bad", "tags": ["#a", "b"]}) == [
            "email: Must be a valid email",
            'tags: {"1": "Must start with \\"#\\""}',
        ]
        assert schema.validate({"email": "me@example.com", "tags": ["#a"]}) is None

    def test_unknown_constraint_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="dataknobs_schema.factory"):
            schema = schema_factory.create(
                kind="number",
                constraints=[{"type": "email"}, {"type": "positive"}],
            )
        assert len(schema.constraints) == 1
        assert "Unknown constraint type for number schema: email" in caplog.text

    def test_invalid_kind(self):
        with pytest.raises(ConfigurationError, match="Invalid schema kind"):
            schema_factory.create(kind="date")
        with pytest.raises(ConfigurationError):
            schema_factory.create()

    def test_missing_children(self):
        with pytest.raises(ConfigurationError, match="items"):
            schema_factory.create(kind="array")
        with pytest.raises(ConfigurationError, match="fields"):
            schema_factory.create(kind="object")

    def test_non_mapping_entries(self):
        with pytest.raises(ConfigurationError, match="fields.name"):
            schema_factory.create(kind="object", fields={"name": "string"})
        with pytest.raises(ConfigurationError, match="items"):
            schema_factory.create(kind="array", items=["string"])
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            schema_factory.create(kind="string", constraints=["email"])

    def test_invalid_constraint_arguments(self):
        with pytest.raises(ConfigurationError) as exc_info:
            schema_factory.create(kind="string", constraints=[{"type": "min", "size": 3}])
        assert exc_info.value.context["constraint"] == "min"

        with pytest.raises(ConfigurationError):
            schema_factory.create(kind="string", constraints=[{"type": "min", "length": -1}])


class TestConfigIntegration:
    """Test building schemas through dataknobs_config."""

    def test_get_instance(self):
        config = Config(
            {
                "schema": [
                    {
                        "name": "password",
                        "factory": "dataknobs_schema.SchemaFactory",
                        "kind": "string",
                        "constraints": [
                            {"type": "min", "length": 8},
                            {"type": "regex", "pattern": "[0-9]", "message": "A number is required"},
                        ],
                    }
                ]
            }
        )

        schema = config.get_instance("schema", "password")
        assert isinstance(schema, StringSchema)
        assert schema.validate_all("short") == [
            "Must be at least 8 characters",
            "A number is required",
        ]
