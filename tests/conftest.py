"""Shared fixtures, sample configurations and Hypothesis strategies for tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from hypothesis import strategies as st

from configuration_validation import (
    ConfigurationValidationCollector,
    ConfigurationValidationItem,
    ValidatableConfiguration,
)

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

octets = st.integers(min_value=0, max_value=255)


def dotted(parts: tuple[int, ...]) -> str:
    return ".".join(str(p) for p in parts)


# Any syntactically valid dotted quad, including 0.0.0.0
any_addresses = st.tuples(octets, octets, octets, octets).map(dotted)

private_addresses = st.one_of(
    st.tuples(st.just(10), octets, octets, octets),
    st.tuples(st.just(172), st.integers(min_value=16, max_value=31), octets, octets),
    st.tuples(st.just(192), st.just(168), octets, octets),
).map(dotted)


def _is_private(parts: tuple[int, int, int, int]) -> bool:
    a, b, _, _ = parts
    return a == 10 or (a == 172 and 16 <= b <= 31) or (a == 192 and b == 168)


public_addresses = (
    st.tuples(octets, octets, octets, octets)
    .filter(lambda p: not _is_private(p) and p != (0, 0, 0, 0))
    .map(dotted)
)

# Octet values that do not fit in a byte
out_of_range_octets = st.integers(min_value=256, max_value=100_000)

# Strategy for messages
messages = st.text(min_size=1, max_size=200)


# -----------------------------------------------------------------------------
# Sample Configuration Classes
# -----------------------------------------------------------------------------


@dataclass
class TestConfig:
    """Plain configuration object, as loaded from a settings file."""

    __test__ = False

    some_value: int = 0
    some_short_value: int = 0
    some_long_value: int = 0
    some_name: str | None = None
    some_endpoint: str | None = None
    some_email: str | None = None
    some_ip: str | None = None


def declare_sample_validations(validations: ConfigurationValidationCollector) -> None:
    """Validations used by the sample configurations."""
    validations.validate_not_zero(
        lambda c: c.some_value, "Configuration should not contain default value (=0)."
    )
    validations.validate_not_null_or_empty(
        lambda c: c.some_name, "Configuration should specify value for Name."
    )
    validations.validate_uri(lambda c: c.some_endpoint, "External API endpoint is incorrect")
    validations.validate_email(lambda c: c.some_email, "E-mail address is wrong.")
    validations.validate_ipv4_address(lambda c: c.some_ip, "IP address is not valid.")
    validations.validate_public_ipv4_address(
        lambda c: c.some_ip, "IP address is not a public IP address."
    )

    # Predicates over the whole configuration
    validations.validate_must(
        lambda c: c.some_endpoint.lower().startswith("https"),
        "some_endpoint",
        "Endpoint is not SSL secured.",
    )
    validations.validate_must(
        lambda c: c.some_endpoint.endswith("/"),
        "some_endpoint",
        "Endpoint should end with slash /.",
    )
    validations.validate_must(
        lambda c: "sparta" in c.some_name.lower() and c.some_value > 10,
        "some_name and some_value",
        "Combined validations failed.",
    )

    validations.validate_starts_with(
        lambda c: c.some_endpoint, "https", "Endpoint is not SSL secured."
    )
    validations.validate_ends_with(
        lambda c: c.some_endpoint, "/", "Endpoint should end with slash /."
    )


class SampleConfig(ValidatableConfiguration):
    """Pydantic configuration section with declared validations."""

    some_value: int = 0
    some_short_value: int = 0
    some_long_value: int = 0
    some_name: str | None = None
    some_endpoint: str | None = None
    some_email: str | None = None
    some_ip: str | None = None

    def configure_validation(self, validations: ConfigurationValidationCollector) -> None:
        declare_sample_validations(validations)


class DatabaseConfig(ValidatableConfiguration):
    """Second configuration section with a custom section name."""

    section_name = "Database"

    host: str | None = None
    port: int = 0

    def configure_validation(self, validations: ConfigurationValidationCollector) -> None:
        validations.validate_private_ipv4_address(lambda c: c.host, "Database must be internal.")
        validations.validate_not_zero(lambda c: c.port, "Port is required.")


VALID_SAMPLE = {
    "some_value": 42,
    "some_name": "This is Sparta",
    "some_endpoint": "https://api.services.lv/",
    "some_email": "name.surname@company.com",
    "some_ip": "8.8.8.8",
}


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def valid_sample_config() -> SampleConfig:
    """Create a SampleConfig that passes every validation."""
    return SampleConfig(**VALID_SAMPLE)


@pytest.fixture
def broken_sample_config() -> SampleConfig:
    """Create a SampleConfig failing every declared validation."""
    return SampleConfig(
        some_value=0, some_name="", some_email="@.", some_endpoint="Crap", some_ip="what?"
    )


@pytest.fixture
def two_items() -> list[ConfigurationValidationItem]:
    """Two validation items of different value types."""
    return [
        ConfigurationValidationItem("Sect", "cfg", 22, "Something"),
        ConfigurationValidationItem("Sect", "set", True, "bool"),
    ]
