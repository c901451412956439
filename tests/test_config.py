from bytediff.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("DIFF_STORE", "REDIS_URL", "OBJECT_STORE_URL", "OBJECT_STORE_TOKEN", "STORE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_from_environment(monkeypatch):
    monkeypatch.setenv("DIFF_STORE", " HTTP ")
    monkeypatch.setenv("OBJECT_STORE_URL", "http://objects.test")
    monkeypatch.setenv("OBJECT_STORE_TOKEN", "secret")
    monkeypatch.setenv("STORE_TIMEOUT", "2.5")
    settings = load_settings()
    assert settings.store == "http"
    assert settings.object_store_url == "http://objects.test"
    assert settings.object_store_token == "secret"
    assert settings.store_timeout == 2.5
