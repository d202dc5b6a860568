from __future__ import annotations

import ipaddress

from .errors import InvalidAddress, InvalidFormat, InvalidInput, RangeOrderError
from .models import AddressRange


def ip_to_int(text: str) -> int:
    """
    Packs a dotted quad into [31:24][23:16][15:8][7:0].
    Raises ValueError for anything that is not an IPv4 literal.
    """
    return int(ipaddress.IPv4Address(text.strip()))


def parse_ip_range(text: str) -> AddressRange:
    """
    Parses "<startIP>-<endIP>" into an AddressRange.
    Whitespace around either address is ignored:
      - "10.0.0.1-10.0.0.20"
      - "192.168.1.1 - 192.168.1.1"
    """
    if not text:
        raise InvalidInput("IP range must be specified")

    parts = text.split("-")
    if len(parts) != 2:
        raise InvalidFormat(f"Invalid IP range: {text}")

    try:
        start = ip_to_int(parts[0])
    except ValueError:
        raise InvalidAddress(f"Invalid start IP address: {parts[0]}") from None

    try:
        end = ip_to_int(parts[1])
    except ValueError:
        raise InvalidAddress(f"Invalid end IP address: {parts[1]}") from None

    if start > end:
        raise RangeOrderError("Start IP address cannot be greater than end IP address")

    return AddressRange(start=start, end=end)
