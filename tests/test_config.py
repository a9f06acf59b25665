from valet.config import Settings, get_settings, save_preference


def test_defaults(monkeypatch):
    for key in ("DATABASE_URL", "VALET_EXPORT_DIR", "VALET_DISABLE_ANIMATIONS", "VALET_TOAST_MS"):
        monkeypatch.delenv(key, raising=False)
    settings = get_settings()
    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("valet.db")
    assert settings.disable_animations is False
    assert settings.toast_ms == 1500


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("VALET_DISABLE_ANIMATIONS", "true")
    monkeypatch.setenv("VALET_TOAST_MS", "250")
    settings = Settings()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.disable_animations is True
    assert settings.toast_ms == 250


def test_save_preference_writes_existing_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    monkeypatch.delenv("VALET_DISABLE_ANIMATIONS", raising=False)

    save_preference("VALET_DISABLE_ANIMATIONS", "1", env_path=env_file)

    assert get_settings().disable_animations is True
    assert "VALET_DISABLE_ANIMATIONS" in env_file.read_text()
    monkeypatch.delenv("VALET_DISABLE_ANIMATIONS")


def test_save_preference_skips_missing_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    monkeypatch.setenv("VALET_TOAST_MS", "1500")
    save_preference("VALET_TOAST_MS", "900", env_path=env_file)
    assert not env_file.exists()
    assert get_settings().toast_ms == 900
