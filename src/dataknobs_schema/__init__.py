"""Composable, chainable schema validation.

This package provides immutable schemas that are built by chaining
constraint calls onto a fresh schema from the factory:
- Scalar kinds (boolean, number, string) with kind-specific constraints
- Compound kinds (array, object) that validate nested schemas recursively
- First-error (``validate``) and exhaustive (``validate_all``) checking
- Raising (``parse``) and result-style (``safe_parse``) parsing with
  optional output transforms

Example:
    ```python
    import dataknobs_schema as ds

    user = ds.object({
        "name": ds.string().required().min(3),
        "age": ds.number().integer().nonnegative().optional(),
        "tags": ds.array(ds.string()).unique(),
    })
    user.safe_parse({"name": "al", "tags": ["a", "a"]}).errors
    # {'name': 'Must be at least 3 characters',
    #  'tags': '{"root": "Duplicate items at index 0 and 1"}'}
    ```
"""

from .compound import ArraySchema, CompoundSchema, ObjectSchema
from .constraints import (
    Constraint,
    Custom,
    Equals,
    Integer,
    Length,
    Pattern,
    Prefix,
    Range,
    Required,
    Suffix,
    Unique,
)
from .exceptions import SchemaValidationError
from .factory import SchemaFactory, schema_factory
from .result import ParseResult
from .scalar import BooleanSchema, NumberSchema, StringSchema
from .schema import Schema, SchemaState

string = schema_factory.string
number = schema_factory.number
boolean = schema_factory.boolean
array = schema_factory.array
object = schema_factory.object  # noqa: A001

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Factory
    "SchemaFactory",
    "schema_factory",
    "string",
    "number",
    "boolean",
    "array",
    "object",
    # Schemas
    "Schema",
    "SchemaState",
    "BooleanSchema",
    "NumberSchema",
    "StringSchema",
    "CompoundSchema",
    "ArraySchema",
    "ObjectSchema",
    # Constraints
    "Constraint",
    "Required",
    "Custom",
    "Range",
    "Integer",
    "Length",
    "Pattern",
    "Prefix",
    "Suffix",
    "Equals",
    "Unique",
    # Results and errors
    "ParseResult",
    "SchemaValidationError",
]
