"""IPv4 address parsing and private network classification.

Addresses are parsed from dotted-quad strings and classified against the
private ranges with 32-bit mask arithmetic, so range edges such as
``172.15.255.255`` and ``172.32.0.0`` fall outside ``172.16.0.0/12``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "UNSET_ADDRESS",
    "PRIVATE_NETWORKS",
    "IPv4Address",
    "parse_ipv4",
    "is_assigned_ipv4",
    "is_private_network",
    "is_public_network",
]

UNSET_ADDRESS = "0.0.0.0"
"""Syntactically valid, but always treated as a missing address."""


@dataclass(frozen=True)
class IPv4Address:
    """Four octets of an IPv4 address."""

    octets: tuple[int, int, int, int]

    @classmethod
    def from_int(cls, value: int) -> IPv4Address:
        """Build an address from its 32-bit integer form."""
        return cls(
            (
                (value >> 24) & 0xFF,
                (value >> 16) & 0xFF,
                (value >> 8) & 0xFF,
                value & 0xFF,
            )
        )

    def __int__(self) -> int:
        a, b, c, d = self.octets
        return (a << 24) | (b << 16) | (c << 8) | d

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)


PRIVATE_NETWORKS: tuple[tuple[IPv4Address, int], ...] = (
    (IPv4Address((10, 0, 0, 0)), 8),
    (IPv4Address((172, 16, 0, 0)), 12),
    (IPv4Address((192, 168, 0, 0)), 16),
)
"""Private ranges as (base address, prefix length) pairs."""


def _netmask(prefix_length: int) -> int:
    return (0xFFFFFFFF << (32 - prefix_length)) & 0xFFFFFFFF


def parse_ipv4(value: str | None) -> tuple[bool, IPv4Address | None]:
    """Parse a dotted-quad IPv4 address.

    The value must hold exactly three dots and four decimal components in
    ``[0, 255]``. A lone number like ``"1"`` is not accepted. Parsing never
    raises.

    Args:
        value: Candidate address string.

    Returns:
        ``(True, address)`` when valid, ``(False, None)`` otherwise.
    """
    if not value or value.count(".") != 3:
        return False, None

    octets: list[int] = []
    for part in value.split("."):
        if not part or not (part.isascii() and part.isdigit()):
            return False, None
        octet = int(part)
        if octet > 255:
            return False, None
        octets.append(octet)

    return True, IPv4Address((octets[0], octets[1], octets[2], octets[3]))


def is_assigned_ipv4(value: str | None) -> bool:
    """Check that a value is a valid IPv4 address other than ``0.0.0.0``."""
    is_valid, _ = parse_ipv4(value)
    return is_valid and value != UNSET_ADDRESS


def is_private_network(address: IPv4Address) -> bool:
    """Check whether an address falls into 10/8, 172.16/12 or 192.168/16."""
    address_bits = int(address)
    for network, prefix_length in PRIVATE_NETWORKS:
        mask = _netmask(prefix_length)
        if address_bits & mask == int(network) & mask:
            return True
    return False


def is_public_network(value: str | None) -> bool:
    """Check that a value is an assigned IPv4 address outside private ranges."""
    is_valid, address = parse_ipv4(value)
    if not is_valid or address is None or value == UNSET_ADDRESS:
        return False
    return not is_private_network(address)
