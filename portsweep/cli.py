from __future__ import annotations

import argparse
import logging

from .errors import ScanInputError
from .output import Reporter
from .ports import parse_ports
from .scanner import scan
from .targets import parse_ip_range


def setup_logging(verbose: bool = False) -> None:
    # StreamHandler defaults to stderr; stdout is reserved for results.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="portsweep", description="Concurrent TCP port scanner")
    p.add_argument("ip_range", nargs="?", default="", help="IP range: 10.0.0.1-10.0.0.20")
    p.add_argument("ports", nargs="?", default="", help="Port spec: 22,80,443 or 1-1024 or mixed")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        ip_range = parse_ip_range(args.ip_range)
        ports = parse_ports(args.ports)
    except ScanInputError as e:
        print(e)
        return 1

    scan(ip_range, ports, reporter=Reporter())
    return 0
