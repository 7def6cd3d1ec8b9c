"""Observer pattern implementation for configuration validation events.

Validation does no logging of its own. Collectors, models and composite
validators emit events, and attached observers decide what to log,
print or count.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
]


class ValidationEventType(Enum):
    """Types of validation events that can be observed."""

    VALIDATION_STARTED = auto()
    """Emitted when a configuration section (or a set of sections) starts validating."""

    VALIDATION_FAILED = auto()
    """Emitted when a failed check is recorded as a validation item."""

    VALIDATION_COMPLETED = auto()
    """Emitted when a configuration section (or a set of sections) finishes validating."""


@dataclass
class ValidationEvent:
    """A validation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event (collector, model or validator).
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.VALIDATION_FAILED,
            source=collector,
            data={"section": "SampleConfig", "item": "some_ip", "value": "what?"},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for validation event observers.

    Example:
        class LoggingObserver:
            def on_event(self, event: ValidationEvent) -> None:
                if event.event_type == ValidationEventType.VALIDATION_FAILED:
                    logger.warning("%(section)s:%(item)s %(message)s", event.data)
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle a validation event.

        Args:
            event: The validation event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class."""

    _observers: list[ValidationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: ValidationObserver) -> None:
        """Add an observer to receive validation events.

        Args:
            observer: An object implementing the ValidationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Remove an observer from receiving validation events."""
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Notify all observers of a validation event."""
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()
