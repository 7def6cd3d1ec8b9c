"""Composite validation over several configuration sections.

Validates every registered section in declaration order and gathers all
failures into one collection, which is what an application start-up
hook needs before deciding whether to abort.
"""

from __future__ import annotations

import time

from configuration_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from configuration_validation.exceptions import ConfigurationValidationError
from configuration_validation.protocols import ValidatableConfigurationProtocol
from configuration_validation.results import ConfigurationValidationCollection

__all__ = ["CompositeConfigurationValidator"]


def _section_name(section: ValidatableConfigurationProtocol) -> str:
    return getattr(section, "section_name", None) or type(section).__name__


class CompositeConfigurationValidator(ObservableMixin):
    """Validator that combines several configuration sections.

    Supports the Observer pattern - add observers to receive
    VALIDATION_STARTED and VALIDATION_COMPLETED events for the whole run.

    Example:
        from configuration_validation import CompositeConfigurationValidator

        startup = CompositeConfigurationValidator([database_config, api_config])
        startup.ensure_valid("Application configuration is incorrect.")
    """

    def __init__(
        self,
        sections: list[ValidatableConfigurationProtocol] | None = None,
        *,
        fail_fast: bool = False,
    ) -> None:
        """Initialize composite validator.

        Args:
            sections: Configuration sections to validate. Defaults to empty list.
            fail_fast: If True, stop after the first section with failures.
                Defaults to False (validate all sections).
        """
        self._sections: list[ValidatableConfigurationProtocol] = sections or []
        self._fail_fast = fail_fast

    def validate(self) -> ConfigurationValidationCollection:
        """Validate all sections and combine their failures.

        Returns:
            Collection with the failures of every section, in section order.
        """
        start_time = time.perf_counter()

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={"section_count": len(self._sections)},
            )
        )

        failures = ConfigurationValidationCollection()
        for section in self._sections:
            failures.add_range(section.validate_configuration())

            if self._fail_fast and failures:
                break

        duration_ms = (time.perf_counter() - start_time) * 1000

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "is_valid": not failures,
                    "error_count": len(failures),
                    "duration_ms": duration_ms,
                },
            )
        )

        return failures

    def ensure_valid(self, message: str | None = None) -> None:
        """Validate all sections and raise one error for all failures.

        Raises:
            ConfigurationValidationError: If any section failed validation.
        """
        failures = self.validate()
        if failures:
            raise ConfigurationValidationError(message, failures)

    def add_section(self, section: ValidatableConfigurationProtocol) -> None:
        """Add a configuration section to validate."""
        self._sections.append(section)

    def remove_section(self, name: str) -> bool:
        """Remove a section by its section name.

        Returns:
            True if a section was removed, False if not found.
        """
        for i, section in enumerate(self._sections):
            if _section_name(section) == name:
                self._sections.pop(i)
                return True
        return False

    def has_section(self, name: str) -> bool:
        """Check if a section with the given name is registered."""
        return any(_section_name(s) == name for s in self._sections)

    def get_section(self, name: str) -> ValidatableConfigurationProtocol | None:
        """Get a section by its section name, or None if not found."""
        for section in self._sections:
            if _section_name(section) == name:
                return section
        return None

    @property
    def section_names(self) -> list[str]:
        """Get list of section names in order."""
        return [_section_name(s) for s in self._sections]

    def __len__(self) -> int:
        """Return number of registered sections."""
        return len(self._sections)

    def __repr__(self) -> str:
        names = ", ".join(self.section_names)
        return f"CompositeConfigurationValidator(sections=[{names}])"
