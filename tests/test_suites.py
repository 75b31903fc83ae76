import pytest
import requests

import accuracy_suite
import quick_suite
from primecheck import BASES_U32, is_strong_probable_prime


def test_check_one_flags_agreement():
    assert accuracy_suite.check_one(4294967291)["ok"] is True
    row = accuracy_suite.check_one(3215031751)
    assert row["ok"] is True and row["expect"] == "composite"


def test_fermat_oracle():
    assert accuracy_suite.fermat_ok(524287) is True
    assert accuracy_suite.fermat_ok(3) is True
    assert accuracy_suite.fermat_ok(15) is False


def test_accuracy_suite_small_run(tmp_path, capsys):
    out = tmp_path / "fails.csv"
    assert accuracy_suite.main(["--per-width", "3", "--out", str(out)]) == 0
    assert "FAIL: 0" in capsys.readouterr().out
    assert not out.exists()


class _Resp:
    def __init__(self, body):
        self.body = body

    def raise_for_status(self):
        pass

    def json(self):
        return self.body


class _ClientSession:
    """Routes quick_suite's requests into the Flask test client."""

    def __init__(self, client):
        self.client = client

    def get(self, url, params=None, timeout=None):
        path = url[len(quick_suite.BASE_URL):]
        return _Resp(self.client.get(path, query_string=params).get_json())


class _DownSession:
    def get(self, url, params=None, timeout=None):
        raise requests.ConnectionError("refused")


def test_quick_suite_against_app(client):
    assert quick_suite.run(_ClientSession(client)) == []


def test_quick_suite_reports_http_errors(monkeypatch):
    monkeypatch.setattr(quick_suite, "MAX_TRIES", 1)
    fails = quick_suite.run(_DownSession())
    assert len(fails) == sum(1 for _ in quick_suite.cases())
    assert fails[0]["reason"].startswith("HTTP:")


def test_quick_suite_with_zero_tries_still_reports(monkeypatch):
    monkeypatch.setattr(quick_suite, "MAX_TRIES", 0)
    fails = quick_suite.run(_DownSession())
    assert len(fails) == sum(1 for _ in quick_suite.cases())
    assert all(f["reason"].startswith("HTTP:") for f in fails)


class _StatusSession:
    """Answers every GET with the given HTTP status and counts the calls."""

    def __init__(self, status):
        self.status = status
        self.calls = 0

    def get(self, url, params=None, timeout=None):
        self.calls += 1
        resp = requests.Response()
        resp.status_code = self.status
        resp.url = url
        return resp


def test_client_errors_are_not_retried(monkeypatch):
    monkeypatch.setattr(quick_suite, "MAX_TRIES", 3)
    session = _StatusSession(400)
    with pytest.raises(requests.HTTPError) as exc:
        quick_suite.jget(session, "/api/is_prime", n="1")
    assert exc.value.response.status_code == 400
    assert session.calls == 1


def test_server_errors_are_retried(monkeypatch):
    monkeypatch.setattr(quick_suite, "MAX_TRIES", 3)
    monkeypatch.setattr(quick_suite.time, "sleep", lambda s: None)
    session = _StatusSession(503)
    fails = quick_suite.run(session)
    assert fails and fails[0]["reason"].startswith("HTTP:")
    assert session.calls == 3 * sum(1 for _ in quick_suite.cases())


def test_listed_pseudoprimes_fool_a_32_bit_base():
    for n in accuracy_suite.STRONG_PSEUDOPRIMES:
        assert any(is_strong_probable_prime(n, b, bits=64) for b in BASES_U32 if b < n), n
