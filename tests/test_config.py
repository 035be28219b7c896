import pytest

from promptcraft.config import DEFAULT_AZURE_API_VERSION, Settings, get_settings, load_settings
from promptcraft.errors import ConfigurationError


def test_defaults_select_mock_provider():
    settings = Settings.from_env({})
    assert settings.provider == "mock"
    assert settings.request_timeout == 120.0
    assert settings.api_version == DEFAULT_AZURE_API_VERSION
    assert settings.validate() is settings


def test_reads_all_keys():
    settings = Settings.from_env(
        {
            "LLM_PROVIDER": "Azure",
            "LLM_MODEL": "gpt-35-turbo",
            "LLM_EMBEDDING_MODEL": "text-embedding-ada-002",
            "LLM_BASE_URL": "https://example.openai.azure.com",
            "LLM_API_KEY": "secret",
            "LLM_API_VERSION": "2024-02-01",
            "LLM_REQUEST_TIMEOUT": "30",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings == Settings(
        provider="azure",
        chat_model_name="gpt-35-turbo",
        embedding_model_name="text-embedding-ada-002",
        service_endpoint="https://example.openai.azure.com",
        api_key="secret",
        api_version="2024-02-01",
        request_timeout=30.0,
        log_level="DEBUG",
    )
    settings.validate()


def test_openai_api_key_fallback():
    settings = Settings.from_env({"LLM_PROVIDER": "openai", "OPENAI_API_KEY": "sk-fallback"})
    assert settings.api_key == "sk-fallback"


def test_bad_timeout_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="LLM_REQUEST_TIMEOUT"):
        Settings.from_env({"LLM_REQUEST_TIMEOUT": "soon"})


@pytest.mark.parametrize(
    "settings, message",
    [
        (Settings(provider="bedrock"), "Unknown LLM provider"),
        (Settings(provider="openai"), "API key is required"),
        (Settings(provider="azure", api_key="k", chat_model_name="d"), "LLM_BASE_URL"),
        (Settings(provider="azure", api_key="k", service_endpoint="https://x"), "deployment"),
        (Settings(provider="local"), "LLM_BASE_URL"),
        (Settings(request_timeout=0), "positive"),
        (Settings(request_timeout=float("nan")), "finite"),
        (Settings(request_timeout=float("inf")), "finite"),
    ],
)
def test_validation_errors(settings, message):
    with pytest.raises(ConfigurationError, match=message):
        settings.validate()


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Settings(provider="nope").validate()


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.api_key = "changed"  # type: ignore[misc]


def test_redacted_hides_key():
    redacted = Settings(provider="openai", api_key="sk-secret").redacted()
    assert redacted["api_key"] == "***"
    assert "sk-secret" not in str(redacted)


def test_load_settings_reads_dotenv(tmp_path, monkeypatch):
    # setenv first so monkeypatch restores the variable's absence afterwards
    monkeypatch.setenv("LLM_MODEL", "placeholder")
    monkeypatch.delenv("LLM_MODEL")
    env_file = tmp_path / ".env"
    env_file.write_text("LLM_PROVIDER=mock\nLLM_MODEL=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("LLM_PROVIDER", "mock")

    settings = load_settings(str(env_file))

    assert settings.chat_model_name == "from-dotenv"


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("LLM_MODEL=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("LLM_MODEL", "from-env")

    assert load_settings(str(env_file)).chat_model_name == "from-env"


def test_get_settings_loads_once(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "first")
    first = get_settings()
    monkeypatch.setenv("LLM_MODEL", "second")

    assert get_settings() is first
    assert get_settings().chat_model_name == "first"


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_non_finite_timeout_from_env_rejected(raw):
    settings = Settings.from_env({"LLM_REQUEST_TIMEOUT": raw})
    with pytest.raises(ConfigurationError, match="finite"):
        settings.validate()
