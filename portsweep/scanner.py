from __future__ import annotations

import logging
import socket
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterator, List, Optional, Sequence

from .models import AddressRange, ProbeResult, ProbeTask
from .output import Reporter

log = logging.getLogger(__name__)

# Fixed on purpose: there is no flag or setting that changes it.
CONNECT_TIMEOUT_S = 1.0


def probe(task: ProbeTask, timeout_s: float = CONNECT_TIMEOUT_S) -> Optional[ProbeResult]:
    """
    TCP connect to task.host:task.port.
    Returns an open ProbeResult, or None when the connect fails for any reason
    (refused, timed out, unreachable). Closed and filtered look the same.
    """
    host = task.host
    try:
        with socket.create_connection((host, task.port), timeout=timeout_s):
            pass
    except OSError as e:
        log.debug("%s:%d closed (%s)", host, task.port, e)
        return None
    return ProbeResult(address=task.address, port=task.port, is_open=True)


def iter_tasks(ip_range: AddressRange, ports: Sequence[int]) -> Iterator[ProbeTask]:
    for address in ip_range.addresses():
        for port in ports:
            yield ProbeTask(address=address, port=port)


def _run(task: ProbeTask, reporter: Optional[Reporter]) -> Optional[ProbeResult]:
    result = probe(task)
    if result is not None and reporter is not None:
        reporter.report(result)
    return result


def scan(
    ip_range: AddressRange,
    ports: Sequence[int],
    reporter: Optional[Reporter] = None,
) -> List[ProbeResult]:
    """
    One pool task per (address, port) pair, with as many workers as pairs.
    Every pair is in flight at once; wide ranges create that many threads.

    Open results go to the reporter from the worker that found them. Returns
    only after every probe has finished, with the open results in completion
    order.
    """
    total = len(ip_range) * len(ports)
    results: List[ProbeResult] = []
    if total == 0:
        return results

    log.debug("Dispatching %d probes (%d addresses x %d ports)", total, len(ip_range), len(ports))
    start_all = time.perf_counter()

    with ThreadPoolExecutor(max_workers=total) as pool:
        futures = [pool.submit(_run, task, reporter) for task in iter_tasks(ip_range, ports)]

        for fut in as_completed(futures):
            r = fut.result()
            if r is not None:
                results.append(r)

    log.debug(
        "Scan finished: %d probes, %d open, %.2fs",
        total,
        len(results),
        time.perf_counter() - start_all,
    )
    return results
