"""Validation protocols for type checking.

Protocol for any configuration object that can validate itself, whether
or not it derives from ValidatableConfiguration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from configuration_validation.results import ConfigurationValidationItem


@runtime_checkable
class ValidatableConfigurationProtocol(Protocol):
    """Protocol for strongly typed configuration objects with validations.

    Use this for type hints when accepting any self-validating section.
    """

    def validate_configuration(self) -> list[ConfigurationValidationItem]:
        """Validate this configuration object.

        Returns an empty list if no problems were found, otherwise the
        list contains the validation problems.
        """
        ...
