"""Concurrent TCP connect scanner for inclusive IPv4 ranges."""

from .errors import (
    InvalidAddress,
    InvalidFormat,
    InvalidInput,
    InvalidPort,
    RangeOrderError,
    ScanInputError,
)
from .models import AddressRange, ProbeResult, ProbeTask
from .ports import parse_ports
from .scanner import probe, scan
from .targets import parse_ip_range

__all__ = [
    "AddressRange",
    "InvalidAddress",
    "InvalidFormat",
    "InvalidInput",
    "InvalidPort",
    "ProbeResult",
    "ProbeTask",
    "RangeOrderError",
    "ScanInputError",
    "parse_ip_range",
    "parse_ports",
    "probe",
    "scan",
]
