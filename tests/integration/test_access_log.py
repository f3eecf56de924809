# tests/integration/test_access_log.py
from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from fundraising.infrastructure.config import get_settings


@pytest.fixture()
def access_log_on(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("FUNDRAISING_ACCESS_LOG", "true")
    get_settings.cache_clear()
    yield
    monkeypatch.undo()
    get_settings.cache_clear()


def test_access_line_written(client: TestClient, access_log_on: None, capsys: pytest.CaptureFixture[str]) -> None:
    client.get("/api/statuses")
    out = capsys.readouterr().out
    assert "[fundraising " in out
    assert "GET /api/statuses 200" in out


def test_access_log_disabled(client: TestClient, capsys: pytest.CaptureFixture[str]) -> None:
    client.get("/api/statuses")
    assert "GET /api/statuses" not in capsys.readouterr().out


def test_client_errors_logged_as_warnings(
    client: TestClient, access_log_on: None, capsys: pytest.CaptureFixture[str]
) -> None:
    client.get("/api/statuses/archived/transitions/active")
    captured = capsys.readouterr()
    assert "WARNING GET /api/statuses/archived/transitions/active 422" in captured.err
    assert "/api/statuses/archived" not in captured.out
