"""Process entry point: startup aborts without API_KEY, otherwise serves on PORT."""

import pytest

from condo_api import server
from condo_api.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_missing_api_key_exits_with_status_1(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    with pytest.raises(SystemExit) as exc_info:
        server.load_settings_or_exit()
    assert exc_info.value.code == 1


def test_run_serves_app_on_configured_port(monkeypatch):
    monkeypatch.setenv("API_KEY", "k")
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setenv("HOST", "127.0.0.1")
    calls = []
    monkeypatch.setattr(
        server.uvicorn, "run",
        lambda app, host, port: calls.append((app, host, port)),
    )

    server.run()

    assert len(calls) == 1
    app, host, port = calls[0]
    assert (host, port) == ("127.0.0.1", 8123)
    assert app.state.settings.api_key == "k"
    assert app.state.store.listing_count == 4


def test_run_does_not_serve_without_api_key(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    called = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *a, **kw: called.append(1))
    with pytest.raises(SystemExit):
        server.run()
    assert called == []
