from __future__ import annotations

import pytest
from pydantic import ValidationError

from airtable_gateway.core.config import REQUIRED_VARIABLES, get_cors_origins, load_settings
from airtable_gateway.shared.exceptions.config import ConfigurationException


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Entorno sin credenciales y sin .env en el cwd."""
    monkeypatch.chdir(tmp_path)
    for name in REQUIRED_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def _set_required(monkeypatch) -> None:
    monkeypatch.setenv("AIRTABLE_API_TOKEN", "pat-x")
    monkeypatch.setenv("AIRTABLE_BASE_ID", "appX")
    monkeypatch.setenv("AIRTABLE_TABLE_NAME", "Tasks")
    monkeypatch.setenv("MCP_SERVER_SECRET", "s3cret")


def test_missing_variables_are_all_reported(clean_env) -> None:
    with pytest.raises(ConfigurationException) as exc_info:
        load_settings()

    assert set(exc_info.value.missing) == set(REQUIRED_VARIABLES)
    assert "MCP_SERVER_SECRET" in exc_info.value.message


def test_empty_value_counts_as_missing(clean_env) -> None:
    _set_required(clean_env)
    clean_env.setenv("AIRTABLE_BASE_ID", "")

    with pytest.raises(ConfigurationException) as exc_info:
        load_settings()

    assert exc_info.value.missing == ["AIRTABLE_BASE_ID"]


def test_defaults_when_only_required_are_set(clean_env) -> None:
    _set_required(clean_env)
    for name in ("PORT", "HOST", "AIRTABLE_TIMEOUT_SECONDS", "ENABLE_DEBUG_ENDPOINT"):
        clean_env.delenv(name, raising=False)

    settings = load_settings()

    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"
    assert settings.AIRTABLE_TIMEOUT_SECONDS == 30.0
    assert settings.AIRTABLE_API_URL == "https://api.airtable.com/v0"
    assert settings.ENABLE_DEBUG_ENDPOINT is False
    assert settings.access_url == "http://localhost:3000"


def test_invalid_port_is_a_configuration_error(clean_env) -> None:
    _set_required(clean_env)
    clean_env.setenv("PORT", "not-a-port")

    with pytest.raises(ConfigurationException) as exc_info:
        load_settings()

    assert exc_info.value.missing == ["PORT"]


def test_settings_are_immutable(clean_env) -> None:
    _set_required(clean_env)
    settings = load_settings()

    with pytest.raises(ValidationError):
        settings.MCP_SERVER_SECRET = "other"


def test_run_exits_before_binding_when_config_is_missing(clean_env) -> None:
    import uvicorn

    from airtable_gateway import main

    calls = []
    clean_env.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append(args))

    with pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 1
    assert calls == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("*", ["*"]),
        ('["http://a.test", "http://b.test"]', ["http://a.test", "http://b.test"]),
        ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
    ],
)
def test_get_cors_origins(raw: str, expected: list[str]) -> None:
    assert get_cors_origins(raw) == expected
