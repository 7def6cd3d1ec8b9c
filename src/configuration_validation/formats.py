"""String format checks for e-mail addresses and absolute URIs.

Both checks are syntactic only: they never resolve hosts or mailboxes.
"""

from __future__ import annotations

import ipaddress
import re
from email.utils import parseaddr
from urllib.parse import urlsplit

__all__ = ["is_email", "is_absolute_uri"]

_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_QUOTED = r'"(?:[^"\\]|\\.)+"'
_LABEL = r"[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?"

# RFC 5322 dot-atom or quoted local part, host name or domain literal domain
_MAILBOX_PATTERN = re.compile(
    rf"^(?:{_ATOM}(?:\.{_ATOM})*|{_QUOTED})@(?:{_LABEL}(?:\.{_LABEL})*|\[[0-9.]+\])$"
)
_HOST_LABEL_PATTERN = re.compile(rf"^{_LABEL}$")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")


def is_email(value: str | None) -> bool:
    """Check that a value is shaped like an e-mail mailbox (``local@domain``).

    The local part is a dot-atom or a quoted string. Empty values and
    values with spaces are rejected, as is anything that does not parse
    to exactly one address spec.
    """
    if not value or " " in value:
        return False

    _, address = parseaddr(value)
    if address != value:
        return False
    return _MAILBOX_PATTERN.match(value) is not None


def _is_ipv6(host: str) -> bool:
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        return False
    return True


def _is_valid_host(host: str) -> bool:
    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    return all(_HOST_LABEL_PATTERN.match(label) for label in labels)


def is_absolute_uri(value: str | None) -> bool:
    """Check that a value is a well-formed absolute URI.

    The value must start with a scheme (``http://``, ``ftp://``,
    ``mailto:`` ...). When an authority (``//host``) is present the host
    must be a valid name or a bracketed IPv6 literal; only ``file`` URIs
    may leave it empty.
    Unescaped whitespace and backslashes are not allowed.
    """
    if not value or any(ch.isspace() or ch == "\\" for ch in value):
        return False

    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_PATTERN.match(parts.scheme):
        return False

    remainder = value[len(parts.scheme) + 1 :]
    if not remainder.startswith("//"):
        return bool(remainder)

    host = parts.hostname
    if not host:
        return parts.scheme.lower() == "file" and not parts.netloc
    if port is not None and port > 65535:
        return False
    if parts.netloc.rpartition("@")[2].startswith("["):
        return _is_ipv6(host)
    return _is_valid_host(host)
