from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from .models import ProbeResult


def format_result(r: ProbeResult) -> str:
    return f"Port {r.port} is open on {r.host}"


class Reporter:
    """
    Line sink shared by every probe thread.
    Each result is written as one whole line under a lock.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()
        self.count = 0

    @property
    def stream(self) -> TextIO:
        # Resolved late so redirected/captured stdout is honored.
        return self._stream if self._stream is not None else sys.stdout

    def report(self, r: ProbeResult) -> None:
        line = format_result(r) + "\n"
        with self._lock:
            out = self.stream
            out.write(line)
            out.flush()
            self.count += 1
