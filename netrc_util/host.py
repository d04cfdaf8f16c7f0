"""Validated hostnames for netrc lookups."""

import ipaddress
import re
from dataclasses import dataclass

import idna

from .errors import InvalidHost

# Characters that can never appear in a host (URL delimiters and friends)
_FORBIDDEN = re.compile(r"[\s/\\?#@:%<>\[\]^|\"]")
_IPV4_PART = re.compile(r"^(0[xX][0-9a-fA-F]*|[0-9]+)$")


def _parse_ipv4_part(part: str) -> int:
    if part[:2] in ("0x", "0X"):
        return int(part[2:] or "0", 16)
    if len(part) > 1 and part.startswith("0"):
        return int(part, 8)
    return int(part)


def _parse_ipv4(text: str) -> str | None:
    """Return the canonical dotted form if text is an IPv4 address.

    Accepts the forms URL parsers accept: dotted decimal, fewer than four
    parts ("16843009" is 1.1.1.1), hex/octal parts and one trailing dot.
    Returns None when the last label is not numeric. A numeric last label
    commits the host to being IPv4, so anything malformed after that is
    rejected rather than read as a domain name.
    """
    parts = text.split(".")
    if len(parts) > 1 and parts[-1] == "":
        parts = parts[:-1]
    if not _IPV4_PART.match(parts[-1]):
        return None

    if len(parts) > 4 or not all(_IPV4_PART.match(p) for p in parts):
        raise InvalidHost(text, "invalid IPv4 address")
    try:
        numbers = [_parse_ipv4_part(p) for p in parts]
    except ValueError:
        raise InvalidHost(text, "invalid IPv4 address")

    *head, last = numbers
    if any(n > 255 for n in head) or last >= 256 ** (5 - len(numbers)):
        raise InvalidHost(text, "IPv4 address out of range")

    value = last
    for i, n in enumerate(head):
        value += n * 256 ** (3 - i)
    return str(ipaddress.IPv4Address(value))


def _encode_domain(text: str) -> str:
    if text.isascii():
        labels = text.split(".")
        if labels[-1] == "" and len(labels) > 1:
            labels = labels[:-1]
        if not all(labels):
            raise InvalidHost(text, "empty label")
        return text.lower()

    # UTS46 without transitional mapping keeps "ß" distinct from "ss"
    try:
        return idna.encode(text, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        raise InvalidHost(text, f"invalid domain name ({e})")


@dataclass(frozen=True)
class Host:
    """A normalized hostname, domain or IP address.

    Build instances with Host.parse(); two hosts compare equal when their
    normalized forms match, so lookups are case-insensitive.
    """

    value: str

    @classmethod
    def parse(cls, text: str) -> "Host":
        """Validate and normalize a hostname.

        Args:
            text: Hostname as typed by a user or read from a netrc file

        Returns:
            Host wrapping the normalized name

        Raises:
            InvalidHost: if text is empty or malformed
        """
        if not text:
            raise InvalidHost(text, "empty hostname")

        if text.startswith("[") and text.endswith("]"):
            try:
                return cls(f"[{ipaddress.IPv6Address(text[1:-1])}]")
            except ValueError:
                raise InvalidHost(text, "invalid IPv6 address")

        if _FORBIDDEN.search(text):
            raise InvalidHost(text, "contains forbidden characters")

        ipv4 = _parse_ipv4(text)
        if ipv4 is not None:
            return cls(ipv4)

        return cls(_encode_domain(text))

    def __str__(self) -> str:
        return self.value
