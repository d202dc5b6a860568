import ipaddress
from dataclasses import dataclass
from typing import Iterator

from .errors import RangeOrderError


def int_to_ip(value: int) -> str:
    return str(ipaddress.IPv4Address(value))


@dataclass(frozen=True)
class AddressRange:
    """Inclusive IPv4 range held as packed 32-bit integers."""

    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise RangeOrderError("Start IP address cannot be greater than end IP address")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def addresses(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def hosts(self) -> Iterator[str]:
        for address in self.addresses():
            yield int_to_ip(address)


@dataclass(frozen=True)
class ProbeTask:
    address: int
    port: int

    @property
    def host(self) -> str:
        return int_to_ip(self.address)


@dataclass(frozen=True)
class ProbeResult:
    address: int
    port: int
    is_open: bool

    @property
    def host(self) -> str:
        return int_to_ip(self.address)
