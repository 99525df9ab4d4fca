"""Registry of named validators.

Configuration refers to validators by name; the registry resolves those
names to functions. ``default_registry()`` returns a registry holding every
built-in validator under its function name.

Example:
    ```python
    registry = default_registry()
    registry.register("is_sku", partial(matches, pattern=r"[A-Z]{3}-[0-9]{4}"))
    registry.get("is_email")("a@b.com").is_valid
    # True
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List

from . import field_validators
from .exceptions import NotFoundError, OperationError
from .result import ValidationResult

logger = logging.getLogger(__name__)

Validator = Callable[..., ValidationResult[Any]]

BUILTIN_VALIDATORS: Dict[str, Validator] = {
    fn.__name__: fn
    for fn in (
        field_validators.is_string,
        field_validators.is_number,
        field_validators.is_boolean,
        field_validators.is_array,
        field_validators.is_object,
        field_validators.is_required,
        field_validators.is_uuid,
        field_validators.is_email,
        field_validators.is_url,
        field_validators.is_identifier,
        field_validators.is_slug,
        field_validators.is_iso_datetime,
        field_validators.is_json_string,
        field_validators.is_one_of,
        field_validators.is_port,
        field_validators.matches,
    )
}


class ValidatorRegistry:
    """Thread-safe mapping of names to validator functions.

    Attributes:
        name: Name of the registry (for logging/debugging)
    """

    def __init__(self, name: str = "validators"):
        self._name = name
        self._items: Dict[str, Validator] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, validator: Validator, allow_overwrite: bool = False) -> None:
        """Register a validator by name.

        Args:
            key: Name used in configuration
            validator: Validator function
            allow_overwrite: Whether to replace an existing registration

        Raises:
            OperationError: If the name is taken and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Validator '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = validator
            logger.debug(f"Registered validator '{key}' in {self._name}")

    def unregister(self, key: str) -> Validator:
        """Unregister and return a validator.

        Raises:
            NotFoundError: If no validator has that name
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Validator not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            return self._items.pop(key)

    def get(self, key: str) -> Validator:
        """Get a validator by name.

        Raises:
            NotFoundError: If no validator has that name
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Validator not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[key]

    def has(self, key: str) -> bool:
        """Check if a validator is registered under ``key``."""
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        """List registered names in registration order."""
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        """Get count of registered validators."""
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """Remove every registration."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: str) -> bool:
        return self.has(key)


def default_registry() -> ValidatorRegistry:
    """Create a new registry pre-populated with the built-in validators."""
    registry = ValidatorRegistry("builtin_validators")
    for key, validator in BUILTIN_VALIDATORS.items():
        registry.register(key, validator)
    return registry
