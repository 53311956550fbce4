from pathlib import Path

from promopack.config.settings import DEFAULT_AUDIT_PATH, env_bool, load_settings


def test_env_bool():
    assert env_bool(None) is False
    assert env_bool(None, default=True) is True
    assert env_bool("Yes") is True
    assert env_bool("0", default=True) is False


def test_load_settings_defaults(monkeypatch):
    for name in (
        "PROMOPACK_AUDIT_LOG",
        "PROMOPACK_AUDIT_ENABLED",
        "PROMOPACK_API_HOST",
        "PROMOPACK_API_PORT",
        "PROMOPACK_API_RELOAD",
        "PROMOPACK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("promopack.config.settings.load_dotenv", lambda: False)

    settings = load_settings()
    assert settings.audit_log_path == DEFAULT_AUDIT_PATH
    assert settings.audit_enabled is True
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setattr("promopack.config.settings.load_dotenv", lambda: False)
    monkeypatch.setenv("PROMOPACK_AUDIT_LOG", str(tmp_path / "audit.jsonl"))
    monkeypatch.setenv("PROMOPACK_AUDIT_ENABLED", "off")
    monkeypatch.setenv("PROMOPACK_API_PORT", "9001")
    monkeypatch.setenv("PROMOPACK_API_RELOAD", "1")
    monkeypatch.setenv("PROMOPACK_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.audit_log_path == Path(tmp_path / "audit.jsonl")
    assert settings.audit_enabled is False
    assert settings.api_port == 9001
    assert settings.api_reload is True
    assert settings.log_level == "DEBUG"
