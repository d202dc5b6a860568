import io
import threading

from portsweep.models import ProbeResult
from portsweep.output import Reporter, format_result
from portsweep.targets import ip_to_int


def test_format_result():
    r = ProbeResult(address=ip_to_int("192.168.1.10"), port=443, is_open=True)
    assert format_result(r) == "Port 443 is open on 192.168.1.10"


def test_concurrent_reports_do_not_interleave():
    buf = io.StringIO()
    reporter = Reporter(buf)
    base = ip_to_int("10.0.0.0")

    def worker(n):
        for port in range(1, 51):
            reporter.report(ProbeResult(address=base + n, port=port, is_open=True))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = buf.getvalue().splitlines()
    assert reporter.count == len(lines) == 400
    expected = {f"Port {p} is open on 10.0.0.{n}" for n in range(8) for p in range(1, 51)}
    assert set(lines) == expected


def test_defaults_to_stdout(capsys):
    Reporter().report(ProbeResult(address=ip_to_int("127.0.0.1"), port=22, is_open=True))
    assert capsys.readouterr().out == "Port 22 is open on 127.0.0.1\n"
