from pokedex.config import Settings


def test_defaults(monkeypatch):
    for name in ("POKEAPI_BASE_URL", "POKEAPI_TIMEOUT", "POKEDEX_LOCALE", "REDIS_URL", "GEMINI_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.pokeapi_base_url == "https://pokeapi.co/api/v2"
    assert settings.locale == "es"
    assert settings.redis_url is None
    assert settings.gemini_api_key is None


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("POKEAPI_TIMEOUT", "2.5")
    monkeypatch.setenv("POKEDEX_LOCALE", "fr")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")

    settings = Settings.from_env()

    assert settings.pokeapi_timeout == 2.5
    assert settings.locale == "fr"
    assert settings.redis_url == "redis://cache:6379"
    assert settings.gemini_api_key == "secret"


def test_empty_variables_count_as_unset(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("REDIS_URL", "")

    settings = Settings.from_env()

    assert settings.gemini_api_key is None
    assert settings.redis_url is None


def test_gemini_timeout_from_environment(monkeypatch):
    monkeypatch.delenv("GEMINI_TIMEOUT", raising=False)
    assert Settings.from_env().gemini_timeout == 30.0

    monkeypatch.setenv("GEMINI_TIMEOUT", "12")
    assert Settings.from_env().gemini_timeout == 12.0
