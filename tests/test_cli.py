import io
import json

import pytest

from primecheck_cli import main


def run(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    out, err = capsys.readouterr()
    return exc.value.code, out, err


def test_arguments(capsys):
    rc, out, _ = run(capsys, ["7", "8", "2147483647"])
    assert rc == 0
    assert out.splitlines() == ["7\tprime", "8\tcomposite", "2147483647\tprime"]


def test_out_of_range_sets_exit_code(capsys):
    rc, out, err = run(capsys, ["1", "13", str(2**32)])
    assert rc == 1
    assert out.splitlines() == ["13\tprime"]
    assert err.count("# skip") == 2


def test_64_bit_json(capsys):
    rc, out, _ = run(capsys, ["--bits", "64", "--json", str(2**61 - 1)])
    assert rc == 0
    assert json.loads(out) == {"n": 2**61 - 1, "bits": 64, "prime": True, "class": "prime"}


def test_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("303\n\nxyz\n8191\n"))
    rc, out, err = run(capsys, [])
    assert rc == 1
    assert out.splitlines() == ["303\tcomposite", "8191\tprime"]
    assert "# skip: xyz" in err
