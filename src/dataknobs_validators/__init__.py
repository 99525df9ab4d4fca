"""Lightweight, composable validation for application code.

This package provides:

- **ValidationResult**: success/failure container with map/flat_map/merge
- **Field validators**: ``is_string``, ``is_email``, ``is_port``, ... each
  returning a ValidationResult instead of raising
- **SchemaValidator**: field-by-field validation of a mapping
- **Type checkers**: type-tag helpers for validator authors
- **Configuration**: build schemas from dicts or YAML/JSON files

Example:
    ```python
    from dataknobs_validators import SchemaValidator, is_email, is_number

    result = SchemaValidator({"email": is_email, "age": is_number}).validate(data)
    if not result:
        for error in result.errors:
            print(error)
    ```
"""

from .body import (
    require_body_field,
    validate_body_array,
    validate_body_field_exists,
    validate_body_fields,
    validate_body_multiple,
)
from .combinators import all_of, any_of, chain, optional
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    TypeMismatchError,
    ValidationError,
    ValidatorsError,
)
from .factory import SchemaFactory, load_schema, schema_factory
from .field_validators import (
    is_array,
    is_boolean,
    is_email,
    is_identifier,
    is_iso_datetime,
    is_json_string,
    is_number,
    is_object,
    is_one_of,
    is_port,
    is_required,
    is_slug,
    is_string,
    is_url,
    is_uuid,
    matches,
)
from .patterns import PATTERNS
from .registry import ValidatorRegistry, default_registry
from .result import FieldError, ValidationResult
from .schema import SchemaValidator, validate_schema
from .type_checkers import (
    TypeTag,
    assert_type,
    get_type,
    has_properties,
    has_property,
    is_instance_of,
    is_type,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Result types
    "ValidationResult",
    "FieldError",
    # Patterns
    "PATTERNS",
    # Field validators
    "is_string",
    "is_number",
    "is_boolean",
    "is_array",
    "is_object",
    "is_required",
    "is_uuid",
    "is_email",
    "is_url",
    "is_identifier",
    "is_slug",
    "is_iso_datetime",
    "is_json_string",
    "is_one_of",
    "is_port",
    "matches",
    # Combinators
    "chain",
    "all_of",
    "any_of",
    "optional",
    # Schema
    "SchemaValidator",
    "validate_schema",
    # Type checkers
    "TypeTag",
    "is_type",
    "assert_type",
    "has_property",
    "has_properties",
    "is_instance_of",
    "get_type",
    # Body helpers
    "validate_body_fields",
    "validate_body_array",
    "validate_body_field_exists",
    "require_body_field",
    "validate_body_multiple",
    # Configuration
    "ValidatorRegistry",
    "default_registry",
    "SchemaFactory",
    "schema_factory",
    "load_schema",
    # Exceptions
    "ValidatorsError",
    "ValidationError",
    "TypeMismatchError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
