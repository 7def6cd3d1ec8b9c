"""Collector of configuration validation failures.

One collector is created per configuration section instance. Each
``validate_*`` method reads a property, checks it, and records a
``ConfigurationValidationItem`` when the check fails, so a single pass
reports every problem instead of stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from configuration_validation.accessor import PropertyAccessor, PropertySelector
from configuration_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from configuration_validation.exceptions import ConfigurationValidationError
from configuration_validation.formats import is_absolute_uri, is_email
from configuration_validation.ipv4 import UNSET_ADDRESS, is_private_network, parse_ipv4
from configuration_validation.results import (
    ConfigurationValidationCollection,
    ConfigurationValidationItem,
    ConfigurationValue,
)

__all__ = ["INVALID_IP_ADDRESS_MESSAGE", "ConfigurationValidationCollector"]

TConfig = TypeVar("TConfig")

INVALID_IP_ADDRESS_MESSAGE = "IP address is missing or it is invalid."


class ConfigurationValidationCollector(ObservableMixin, Generic[TConfig]):
    """Runs validations on a configuration section and collects failures.

    Properties are selected with ``lambda c: c.property`` (or the property
    name as a string). Failed checks are appended to ``result`` in call
    order; passing checks append nothing. String comparisons are case
    insensitive through the ``fold`` callable, ``str.casefold`` unless
    another one is given.

    Example:
        validations = ConfigurationValidationCollector(config)
        validations.validate_not_zero(lambda c: c.some_value, "Should not be 0.")
        validations.validate_uri(lambda c: c.some_endpoint, "Endpoint is incorrect.")
        validations.validate_must(
            lambda c: c.some_endpoint.startswith("https"),
            "some_endpoint",
            "Endpoint is not SSL secured.",
        )
        for failure in validations.result:
            print(failure)

    Note:
        Selector mistakes (``InvalidSelectorError``), missing properties and
        exceptions raised inside ``validate_must`` predicates are not
        collected. They propagate and end the validation pass.
    """

    def __init__(
        self,
        configuration_section: TConfig,
        *,
        section_name: str | None = None,
        fold: Callable[[str], str] = str.casefold,
    ) -> None:
        """Initialize the collector.

        Args:
            configuration_section: Instance of the configuration class being validated.
            section_name: Name reported as the section of every failure.
                Defaults to the configuration class name.
            fold: Case folding used by case insensitive string checks.
        """
        self._configuration_section = configuration_section
        self._section_name = section_name or type(configuration_section).__name__
        self._fold = fold
        self._accessor: PropertyAccessor[TConfig] = PropertyAccessor(configuration_section)
        self.result: list[ConfigurationValidationItem] = []

    @property
    def section_name(self) -> str:
        """Name of the configuration section being validated."""
        return self._section_name

    @property
    def configuration_section(self) -> TConfig:
        """The configuration instance being validated."""
        return self._configuration_section

    @property
    def is_valid(self) -> bool:
        """True while no validation has failed."""
        return not self.result

    def _add(self, rule: str, item: str, value: ConfigurationValue, message: str) -> None:
        failure = ConfigurationValidationItem(
            section=self._section_name,
            item=item,
            value=value,
            message=message,
        )
        self.result.append(failure)

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_FAILED,
                source=self,
                data={
                    "rule": rule,
                    "section": failure.section,
                    "item": failure.item,
                    "value": failure.value,
                    "message": failure.message,
                },
            )
        )

    def validate_must(
        self,
        predicate: Callable[[TConfig], bool],
        configuration_item_name: str,
        message: str,
    ) -> None:
        """Validate with a custom predicate over the whole configuration.

        Useful for combined checks where no single property is at fault,
        e.g. ``lambda c: "sparta" in c.some_name and c.some_value > 10``.

        Args:
            predicate: Check returning True when the configuration is fine.
            configuration_item_name: Property name(s) reported for the failure.
            message: Validation message used when the check fails.
        """
        outcome = predicate(self._configuration_section)
        if not outcome:
            self._add("must", configuration_item_name, bool(outcome), message)

    def validate_add_custom(self, configuration_property: PropertySelector, message: str) -> None:
        """Record a failure found by the caller's own logic."""
        name, value = self._accessor.get_name_and_value(configuration_property)
        self._add("custom", name, value, message)

    def validate_not_null_or_empty(
        self, configuration_property: PropertySelector, message: str
    ) -> None:
        """Validate that a string property is neither None nor empty."""
        name, value = self._accessor.get_name_and_value(configuration_property)
        if not value:
            self._add("not_null_or_empty", name, value, message)

    def validate_contains(
        self, configuration_property: PropertySelector, containing: str, message: str
    ) -> None:
        """Validate that a string property contains ``containing``, ignoring case.

        Note:
            The check flags empty values and values where ``containing``
            is found at the very start; a match further in, or no match at
            all, passes.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        if not value or self._fold(value).find(self._fold(containing)) == 0:
            self._add("contains", name, value, message)

    def validate_starts_with(
        self, configuration_property: PropertySelector, starts: str, message: str
    ) -> None:
        """Validate that a string property starts with ``starts``, ignoring case."""
        name, value = self._accessor.get_name_and_value(configuration_property)
        if value is None or not self._fold(value).startswith(self._fold(starts)):
            self._add("starts_with", name, value, message)

    def validate_ends_with(
        self, configuration_property: PropertySelector, ends: str, message: str
    ) -> None:
        """Validate that a string property ends with ``ends``, ignoring case."""
        name, value = self._accessor.get_name_and_value(configuration_property)
        if value is None or not self._fold(value).endswith(self._fold(ends)):
            self._add("ends_with", name, value, message)

    def validate_not_zero(self, configuration_property: PropertySelector, message: str) -> None:
        """Validate that an integer property is not 0.

        Raises:
            TypeError: If the selected property does not hold an int.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value == 0:
            self._add("not_zero", name, value, message)

    def validate_email(self, configuration_property: PropertySelector, message: str) -> None:
        """Validate that a string property is an e-mail address.

        Only the format is checked, not whether the mailbox exists.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        if not is_email(value):
            self._add("email", name, value, message)

    def validate_uri(self, configuration_property: PropertySelector, message: str) -> None:
        """Validate that a string property is an absolute URI (with scheme)."""
        name, value = self._accessor.get_name_and_value(configuration_property)
        if not is_absolute_uri(value):
            self._add("uri", name, value, message)

    def validate_ipv4_address(
        self, configuration_property: PropertySelector, message: str
    ) -> None:
        """Validate that a string property is an IPv4 address (nnn.nnn.nnn.nnn).

        ``0.0.0.0`` is treated as not set and fails.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        is_valid, _ = parse_ipv4(value)
        if not is_valid or value == UNSET_ADDRESS:
            self._add("ipv4_address", name, value, message)

    def validate_public_ipv4_address(
        self, configuration_property: PropertySelector, message: str
    ) -> None:
        """Validate that a string property is an IPv4 address outside private ranges.

        Missing or malformed addresses are reported with
        ``INVALID_IP_ADDRESS_MESSAGE`` instead of ``message``.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        is_valid, address = parse_ipv4(value)
        if not is_valid or address is None or value == UNSET_ADDRESS:
            self._add("public_ipv4_address", name, value, INVALID_IP_ADDRESS_MESSAGE)
            return

        if is_private_network(address):
            self._add("public_ipv4_address", name, value, message)

    def validate_private_ipv4_address(
        self, configuration_property: PropertySelector, message: str
    ) -> None:
        """Validate that a string property is an IPv4 address in a private range.

        Private ranges are 10.0.0.0/8, 172.16.0.0/12 and 192.168.0.0/16.
        Missing or malformed addresses are reported with
        ``INVALID_IP_ADDRESS_MESSAGE`` instead of ``message``.
        """
        name, value = self._accessor.get_name_and_value(configuration_property)
        is_valid, address = parse_ipv4(value)
        if not is_valid or address is None or value == UNSET_ADDRESS:
            self._add("private_ipv4_address", name, value, INVALID_IP_ADDRESS_MESSAGE)
            return

        if not is_private_network(address):
            self._add("private_ipv4_address", name, value, message)

    def to_collection(self) -> ConfigurationValidationCollection:
        """Copy the collected failures into a ConfigurationValidationCollection."""
        return ConfigurationValidationCollection(self.result)

    def raise_if_invalid(self, message: str | None = None) -> None:
        """Raise ConfigurationValidationError when any validation failed.

        Args:
            message: Custom error message. The default message is used if None.

        Raises:
            ConfigurationValidationError: Carrying all collected failures.
        """
        if self.result:
            raise ConfigurationValidationError(message, self.to_collection())

    def __repr__(self) -> str:
        return (
            f"ConfigurationValidationCollector(section={self._section_name!r}, "
            f"failures={len(self.result)})"
        )
