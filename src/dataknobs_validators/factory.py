"""Build schema validators from configuration.

A schema configuration names the validator for each field. A rule is one of:

- a validator name: ``"is_email"``
- a mapping with arguments:
  ``{"validator": "is_one_of", "args": [["admin", "user"]]}`` or
  ``{"validator": "is_required", "kwargs": {"field_name": "email"}}``
- a list of the above, applied in sequence (first failure wins)

Example Configuration:
    ```yaml
    name: user_schema
    fields:
      email: [is_required, is_email]
      role:
        validator: is_one_of
        args: [[admin, user]]
      port: is_port
    ```

``fields`` may also be a list of ``{"name": ..., "rule": ...}`` entries.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml  # type: ignore[import-untyped]

from .combinators import chain
from .exceptions import ConfigurationError, NotFoundError
from .registry import ValidatorRegistry, default_registry
from .result import ValidationResult
from .schema import SchemaValidator, Validator

logger = logging.getLogger(__name__)


class SchemaFactory:
    """Factory for creating SchemaValidator instances from configuration.

    Configuration Options:
        name (str): Schema name, used for logging only
        fields (dict | list): Field rules, see the module docstring
    """

    def __init__(self, registry: ValidatorRegistry | None = None):
        """Initialize factory.

        Args:
            registry: Registry used to resolve validator names. Defaults to
                a registry of the built-in validators.
        """
        self.registry = registry or default_registry()

    def create(self, **config: Any) -> SchemaValidator:
        """Create a SchemaValidator from configuration.

        Args:
            **config: Schema configuration

        Returns:
            SchemaValidator instance

        Raises:
            ConfigurationError: If a field or rule is malformed
            NotFoundError: If a rule names an unregistered validator
        """
        name = config.get("name", "unnamed_schema")
        logger.info(f"Creating schema validator: {name}")

        validator = SchemaValidator()
        for field_name, rule in self._iter_fields(config.get("fields", {})):
            validator.add_rule(field_name, self.build_rule(rule))
        return validator

    def build_rule(self, rule: Any) -> Validator:
        """Resolve one rule configuration to a validator function."""
        if isinstance(rule, str):
            return self.registry.get(rule)

        if isinstance(rule, dict):
            if "validator" not in rule:
                raise ConfigurationError(
                    "Rule configuration missing 'validator'",
                    context={"rule": rule},
                )
            base = self.registry.get(rule["validator"])
            args = rule.get("args", [])
            kwargs = rule.get("kwargs", {})
            if not args and not kwargs:
                return base
            return _bind(base, args, kwargs)

        if isinstance(rule, list):
            if not rule:
                raise ConfigurationError("Rule list cannot be empty", context={"rule": rule})
            return chain(*(self.build_rule(item) for item in rule))

        raise ConfigurationError(
            f"Invalid rule type: {type(rule).__name__}",
            context={"rule": rule},
        )

    def _iter_fields(self, fields: Any) -> list[tuple[str, Any]]:
        if isinstance(fields, dict):
            return list(fields.items())

        if isinstance(fields, list):
            entries = []
            for field_config in fields:
                if not isinstance(field_config, dict) or not field_config.get("name"):
                    raise ConfigurationError(
                        "Field configuration missing 'name'",
                        context={"field": field_config},
                    )
                if "rule" not in field_config:
                    raise ConfigurationError(
                        f"Field '{field_config['name']}' missing 'rule'",
                        context={"field": field_config},
                    )
                entries.append((field_config["name"], field_config["rule"]))
            return entries

        raise ConfigurationError(
            f"Invalid fields type: {type(fields).__name__}",
            context={"fields": fields},
        )


def _bind(base: Validator, args: list[Any], kwargs: dict[str, Any]) -> Validator:
    # Extra arguments follow the value: is_one_of(value, allowed_values)
    def validate(value: Any) -> ValidationResult[Any]:
        return base(value, *args, **kwargs)

    return validate


def load_schema(
    path: Union[str, Path], registry: ValidatorRegistry | None = None
) -> SchemaValidator:
    """Load a schema configuration file and build its validator.

    Args:
        path: YAML (``.yaml``/``.yml``) or JSON (``.json``) file
        registry: Optional registry for resolving validator names

    Returns:
        SchemaValidator instance

    Raises:
        NotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported or the content is
            not a mapping
    """
    path = Path(path).resolve()

    if not path.exists():
        raise NotFoundError(
            f"Schema configuration file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    try:
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}",
                    context={"path": str(path)},
                )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot parse schema configuration: {e}",
            context={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Schema configuration must be a mapping",
            context={"path": str(path)},
        )

    return SchemaFactory(registry).create(**data)


# Singleton instance backed by the built-in validators
schema_factory = SchemaFactory()
