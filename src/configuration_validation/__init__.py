"""Validation of strongly typed configuration sections, collecting all failures."""

from configuration_validation.accessor import (
    PropertyAccessor,
    PropertySelector,
    resolve_member_name,
)
from configuration_validation.base import ValidatableConfiguration
from configuration_validation.collector import (
    INVALID_IP_ADDRESS_MESSAGE,
    ConfigurationValidationCollector,
)
from configuration_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from configuration_validation.exceptions import (
    ConfigurationValidationError,
    InvalidSelectorError,
)
from configuration_validation.formats import is_absolute_uri, is_email
from configuration_validation.ipv4 import (
    IPv4Address,
    is_assigned_ipv4,
    is_private_network,
    is_public_network,
    parse_ipv4,
)
from configuration_validation.protocols import ValidatableConfigurationProtocol
from configuration_validation.results import (
    ConfigurationValidationCollection,
    ConfigurationValidationItem,
    ConfigurationValue,
)
from configuration_validation.rich_observers import (
    RichFailureObserver,
    build_validation_table,
    print_validation_table,
)
from configuration_validation.validators import CompositeConfigurationValidator
from configuration_validation.writers import (
    CSVReportWriter,
    JSONLinesReportWriter,
    ValidationReportWriter,
)

__all__ = [
    # Validation results
    "ConfigurationValue",
    "ConfigurationValidationItem",
    "ConfigurationValidationCollection",
    # Errors
    "ConfigurationValidationError",
    "InvalidSelectorError",
    # Collector
    "ConfigurationValidationCollector",
    "INVALID_IP_ADDRESS_MESSAGE",
    # Property selection
    "PropertyAccessor",
    "PropertySelector",
    "resolve_member_name",
    # Format and address checks
    "is_email",
    "is_absolute_uri",
    "IPv4Address",
    "parse_ipv4",
    "is_assigned_ipv4",
    "is_private_network",
    "is_public_network",
    # Pydantic base
    "ValidatableConfiguration",
    "ValidatableConfigurationProtocol",
    # Multi-section validation
    "CompositeConfigurationValidator",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Output writers
    "CSVReportWriter",
    "JSONLinesReportWriter",
    "ValidationReportWriter",
    # Rich output
    "RichFailureObserver",
    "build_validation_table",
    "print_validation_table",
]

__version__ = "0.1.0"
