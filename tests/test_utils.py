import sys

import requests

import logger
from probes import network
from utils import command_output, format_bytes, read_int, read_text, run_subprocess


def test_run_subprocess_missing_binary():
    code, out, err = run_subprocess(["hyperfetch-no-such-binary-xyz"])
    assert code == 127
    assert out == ""
    assert err


def test_command_output():
    assert command_output([sys.executable, "-c", "print('  hi  ')"]) == "hi"
    assert command_output([sys.executable, "-c", "pass"]) is None
    assert command_output([sys.executable, "-c", "import sys; print('x'); sys.exit(3)"]) is None


def test_read_helpers(tmp_path):
    path = tmp_path / "value"
    path.write_text(" 42\n", encoding="utf-8")
    assert read_text(str(path)) == "42"
    assert read_int(str(path)) == 42
    path.write_text("abc", encoding="utf-8")
    assert read_int(str(path)) is None
    assert read_text(str(tmp_path / "missing")) is None


def test_format_bytes():
    assert format_bytes(512) == "512 B"
    assert format_bytes(1536) == "1.50 KiB"
    assert format_bytes(3 * 1024 ** 3) == "3.00 GiB"


def test_debug_only_when_verbose(capsys):
    logger.set_verbose(False)
    logger.debug("hidden")
    assert capsys.readouterr().err == ""
    logger.set_verbose(True)
    try:
        logger.debug("shown")
    finally:
        logger.set_verbose(False)
    assert "shown" in capsys.readouterr().err


def test_public_ip_failure_warns(monkeypatch, capsys):
    def offline(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(network.requests, "get", offline)
    assert network.fetch_public_ip_info(timeout=0.1) is None
    assert "Could not determine public IP" in capsys.readouterr().err


def test_public_ip_from_geoip(monkeypatch):
    class Response:
        status_code = 200

        def json(self):
            return {"status": "success", "query": "203.0.113.7", "country": "Germany",
                    "regionName": "", "city": "Berlin", "zip": "10115", "isp": "ExampleNet"}

    monkeypatch.setattr(network.requests, "get", lambda *a, **kw: Response())
    ip = network.fetch_public_ip_info()
    assert ip.ip == "203.0.113.7"
    assert ip.region is None
    assert ip.city == "Berlin"
