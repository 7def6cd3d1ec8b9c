"""Validation result containers.

Holds single configuration validation failures and the ordered
collection they are accumulated in.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass
from typing import Any, Union, overload

__all__ = [
    "ConfigurationValue",
    "ConfigurationValidationItem",
    "ConfigurationValidationCollection",
]

ConfigurationValue = Union[str, bool, int, None]
"""Values a failed configuration property can carry."""


@dataclass
class ConfigurationValidationItem:
    """A single failed configuration validation.

    Attributes:
        section: Name of the configuration section (type) where the problem was found.
        item: Name of the configuration property (key).
        value: The faulty value as it was read from the configuration.
        message: Validation message describing the problem with ``value``.
    """

    section: str
    item: str
    value: ConfigurationValue = None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Export the item as a plain dict."""
        return asdict(self)

    def __str__(self) -> str:
        value = "" if self.value is None else self.value
        return f"{self.section}:{self.item} = {value} ({self.message})"


class ConfigurationValidationCollection:
    """Ordered collection of validation failures.

    Keeps insertion order and does no deduplication, so one property can
    appear several times when several rules fail on it.

    Example:
        failures = ConfigurationValidationCollection()
        failures.add(ConfigurationValidationItem("Sect", "cfg", 22, "Something"))
        failures.add_range(collector.result)
        print(len(failures), failures[0])
    """

    def __init__(self, items: Iterable[ConfigurationValidationItem] | None = None) -> None:
        self._validations: list[ConfigurationValidationItem] = list(items or [])

    @property
    def count(self) -> int:
        """Total count of validation failures."""
        return len(self._validations)

    def add(self, validation: ConfigurationValidationItem) -> None:
        """Add a validation failure."""
        self._validations.append(validation)

    def add_range(self, validations: Iterable[ConfigurationValidationItem]) -> None:
        """Add several validation failures, keeping their order."""
        self._validations.extend(validations)

    def to_list(self) -> list[ConfigurationValidationItem]:
        """Get a copy of the items as a list."""
        return self._validations.copy()

    @overload
    def __getitem__(self, index: int) -> ConfigurationValidationItem: ...

    @overload
    def __getitem__(self, index: slice) -> list[ConfigurationValidationItem]: ...

    def __getitem__(
        self, index: int | slice
    ) -> ConfigurationValidationItem | list[ConfigurationValidationItem]:
        return self._validations[index]

    def __iter__(self) -> Iterator[ConfigurationValidationItem]:
        return iter(self._validations)

    def __len__(self) -> int:
        return len(self._validations)

    def __bool__(self) -> bool:
        return bool(self._validations)

    def __repr__(self) -> str:
        return f"ConfigurationValidationCollection(count={len(self._validations)})"
