"""Exceptions raised by configuration validation.

Data problems are never raised by the collector, they are collected as
items. The exceptions here are for callers who prefer fail-fast
propagation (``ConfigurationValidationError``) and for mistakes in the
validation rules themselves (``InvalidSelectorError``).
"""

from __future__ import annotations

from collections.abc import Iterable

from configuration_validation.results import (
    ConfigurationValidationCollection,
    ConfigurationValidationItem,
)

__all__ = [
    "DEFAULT_MESSAGE",
    "FAILED_VALIDATIONS_MESSAGE",
    "ConfigurationValidationError",
    "InvalidSelectorError",
]

DEFAULT_MESSAGE = "Configuration validation threw exception."
FAILED_VALIDATIONS_MESSAGE = "Configuration validation found problems with configured values."


class InvalidSelectorError(ValueError):
    """A property selector is not a direct member access on the configuration.

    This is a bug in the validation rules, not in configuration data, so it
    is never collected as a validation item.
    """


class ConfigurationValidationError(Exception):
    """Indicates a strongly typed configuration was not configured correctly.

    Can be created empty, from a message, from a message and failures, or
    from failures alone (default message). Failures may be a
    ``ConfigurationValidationCollection`` (kept as-is) or any iterable of
    ``ConfigurationValidationItem``.

    Example:
        failures = config.validate_configuration()
        if failures:
            raise ConfigurationValidationError("Configuration is incorrect.", failures)
    """

    def __init__(
        self,
        message: str | Iterable[ConfigurationValidationItem] | None = None,
        failures: Iterable[ConfigurationValidationItem] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Message describing the problem. Failures can also be
                passed here directly, in which case the default message is used.
            failures: Validation failures found in the configuration.
        """
        if message is not None and not isinstance(message, str):
            if failures is not None:
                raise TypeError("failures given twice")
            message, failures = None, message

        self.message: str = DEFAULT_MESSAGE if message is None else message
        if isinstance(failures, ConfigurationValidationCollection):
            self.validation_data = failures
        else:
            self.validation_data = ConfigurationValidationCollection(failures)
        super().__init__(self.message)

    def __str__(self) -> str:
        count = len(self.validation_data)
        if self.message == DEFAULT_MESSAGE:
            # Raised without recorded failures, nothing to count.
            if count == 0:
                return self.message
            return f"{FAILED_VALIDATIONS_MESSAGE} {count} validations failed."

        separator = "" if self.message.endswith(".") else "."
        return f"{self.message}{separator} {count} validations failed."
