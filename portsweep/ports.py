from __future__ import annotations

import re
from typing import List

from .errors import InvalidFormat, InvalidInput, InvalidPort, RangeOrderError

MIN_PORT = 1
MAX_PORT = 65535

_DECIMAL = re.compile(r"\+?[0-9]+")


def _to_int(s: str, what: str) -> int:
    if not _DECIMAL.fullmatch(s):
        raise InvalidPort(f"Invalid {what}: {s}")
    try:
        return int(s)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        raise InvalidPort(f"Invalid {what}: {s}") from None


def _check_bounds(n: int, what: str) -> int:
    if n < MIN_PORT or n > MAX_PORT:
        raise InvalidPort(f"{what[0].upper()}{what[1:]} out of range: {n}")
    return n


def parse_ports(spec: str) -> List[int]:
    """
    Parses a port specification string into a list of ports.
    Supports:
    - Single ports: "80"
    - Ranges: "1-1024"
    - Comma-separated: "22,80,443"
    - Mixed: "1-1024,8080,9000-9005"

    Token order is preserved and duplicates are kept.
    """
    if not spec:
        raise InvalidInput("Port list must be specified")

    ports: List[int] = []
    for part in spec.split(","):
        bounds = part.split("-")

        if len(bounds) == 1:
            port = _to_int(bounds[0], "port number")
            ports.append(_check_bounds(port, "port number"))

        elif len(bounds) == 2:
            start = _to_int(bounds[0], "start port number")
            end = _to_int(bounds[1], "end port number")
            _check_bounds(start, "start port number")
            _check_bounds(end, "end port number")
            if start > end:
                raise RangeOrderError("Start port number cannot be greater than end port number")
            ports.extend(range(start, end + 1))

        else:
            raise InvalidFormat(f"Invalid port range: {part}")

    return ports
