"""Pydantic base model for self-validating configuration sections.

Provides ValidatableConfiguration, a Pydantic base model that declares its
own validation rules and reports every failed rule in one pass.
"""

from __future__ import annotations

import time
from abc import abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from configuration_validation.collector import ConfigurationValidationCollector
from configuration_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from configuration_validation.exceptions import ConfigurationValidationError
from configuration_validation.results import ConfigurationValidationItem

__all__ = ["ValidatableConfiguration"]


class ValidatableConfiguration(ObservableMixin, BaseModel):
    """Base model for strongly typed configuration sections with validations.

    Subclasses declare their settings as Pydantic fields and describe the
    checks in ``configure_validation``. Pydantic only takes care of types
    here; the collector checks the values.

    Example:
        from configuration_validation import ValidatableConfiguration

        class SampleConfig(ValidatableConfiguration):
            some_value: int = 0
            some_endpoint: str | None = None

            def configure_validation(self, validations):
                validations.validate_not_zero(lambda c: c.some_value, "Should not be 0.")
                validations.validate_uri(lambda c: c.some_endpoint, "Endpoint is wrong.")

        config = SampleConfig.model_validate(settings["SampleConfig"])
        for failure in config.validate_configuration():
            print(failure)

        # Observer support
        config.add_observer(my_observer)
        config.validate_configuration()  # Observer notified of start/failures/complete
    """

    model_config = ConfigDict(
        # Subclasses can override this
        extra="ignore",
    )

    section_name: ClassVar[str | None] = None
    """Section name reported with failures. Defaults to the class name."""

    @abstractmethod
    def configure_validation(
        self, validations: ConfigurationValidationCollector[ValidatableConfiguration]
    ) -> None:
        """Declare the validations of this configuration section.

        Args:
            validations: Collector bound to this instance.
        """
        ...

    def validate_configuration(self) -> list[ConfigurationValidationItem]:
        """Run the declared validations.

        Returns:
            Empty list when no problems were found, otherwise every failure
            in declaration order.

        Note:
            Emits VALIDATION_STARTED before the checks run and
            VALIDATION_COMPLETED afterwards. Observers of this model also
            receive each VALIDATION_FAILED event.
        """
        validations: ConfigurationValidationCollector[ValidatableConfiguration] = (
            ConfigurationValidationCollector(self, section_name=self.section_name)
        )
        for observer in self.observers:
            validations.add_observer(observer)

        start_time = time.perf_counter()
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={"section": validations.section_name},
            )
        )

        self.configure_validation(validations)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "section": validations.section_name,
                    "is_valid": validations.is_valid,
                    "error_count": len(validations.result),
                    "duration_ms": duration_ms,
                },
            )
        )

        return validations.result

    def ensure_valid(self, message: str | None = None) -> None:
        """Validate and raise when anything failed.

        Args:
            message: Custom error message. The default message is used if None.

        Raises:
            ConfigurationValidationError: Carrying all failures.
        """
        failures = self.validate_configuration()
        if failures:
            raise ConfigurationValidationError(message, failures)
