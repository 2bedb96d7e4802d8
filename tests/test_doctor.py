import sys

import pytest
from typer.testing import CliRunner

from cli import doctor
from core.domain.models import HttpResponse

runner = CliRunner()


def test_doctor_run_reports_endpoint(monkeypatch, make_requester):
    requester = make_requester()
    monkeypatch.setattr(doctor, "HttpxRequester", lambda settings: requester)

    result = runner.invoke(doctor.app, ["run"])

    assert result.exit_code == 0, result.output
    assert "HTTP 201" in result.stdout
    assert requester.calls[0].method == "POST"


def test_doctor_run_flags_failing_endpoint(monkeypatch, make_requester):
    requester = make_requester(HttpResponse(error=True, code="ERR_NETWORK", message="refused"))
    monkeypatch.setattr(doctor, "HttpxRequester", lambda settings: requester)

    result = runner.invoke(doctor.app, ["run"])

    assert result.exit_code == 0
    assert "FAIL" in result.stdout


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_doctor_setup_writes_user_env(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(doctor.app, ["setup"], input="https://deposit.test/posts\n4\n")

    assert result.exit_code == 0, result.output
    text = (tmp_path / "deposit-callback" / ".env").read_text(encoding="utf-8")
    assert "DEPOSIT_CB_DEPOSIT_URL=https://deposit.test/posts" in text
    assert "DEPOSIT_CB_HTTP_TIMEOUT_SECONDS=4" in text


def test_doctor_setup_rejects_bad_url(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(doctor.app, ["setup"], input="ftp://nope\n4\n")

    assert result.exit_code != 0


def test_doctor_setup_rejects_timeout_above_cap(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(doctor.app, ["setup"], input="https://deposit.test/posts\n30\n")

    assert result.exit_code != 0
    assert not (tmp_path / "deposit-callback" / ".env").exists()
