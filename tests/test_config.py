from closet_app.config import AppConfig

_ENV_KEYS = [
    "APP_ENV",
    "APP_CONFIG_PATH",
    "CLOSET_CONFIG_DIR",
    "GEMINI_API_KEY",
    "API_KEY",
    "GOOGLE_API_KEY",
    "VISION_MODEL",
    "TEXT_MODEL",
    "REQUEST_TIMEOUT",
    "STORAGE_PATH",
    "LOGIN_DELAY_SECONDS",
    "DEFAULT_LANGUAGE",
]


def _clear_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment(monkeypatch):
    _clear_env(monkeypatch)

    config = AppConfig.from_env()

    assert config.gemini_api_key is None
    assert not config.has_credential
    assert config.vision_model == "gemini-2.5-flash"
    assert config.default_language == "zh"
    assert config.login_delay_seconds == 0.8
    assert config.environment is None


def test_api_key_fallback_order(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert AppConfig.from_env().gemini_api_key == "google"

    monkeypatch.setenv("API_KEY", "generic")
    assert AppConfig.from_env().gemini_api_key == "generic"

    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    assert AppConfig.from_env().gemini_api_key == "gemini"


def test_blank_key_counts_as_missing():
    assert AppConfig(gemini_api_key="   ").gemini_api_key is None


def test_yaml_environment_file_is_merged(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    (tmp_path / "staging.yaml").write_text(
        "# staging\n"
        "gemini_api_key: \"from-yaml\"\n"
        "text_model: gemini-2.5-pro\n"
        "login_delay_seconds: 0\n"
        "default_language: 'en'\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("CLOSET_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")

    config = AppConfig.from_env()

    assert config.gemini_api_key == "from-yaml"
    assert config.text_model == "gemini-2.5-pro"
    assert config.login_delay_seconds == 0
    assert config.default_language == "en"
    assert config.request_timeout == 12.5
    assert config.environment == "staging"


def test_explicit_config_path_wins(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    path = tmp_path / "custom.yaml"
    path.write_text("storage_path: /tmp/closet.json\n", encoding="utf-8")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))

    assert AppConfig.from_env().storage_path == "/tmp/closet.json"
