"""Config loading and validation."""
import pytest
from catalyzer.config import Config


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr("catalyzer.config.load_dotenv", lambda **_: None)
    for name in (
        "PORT",
        "HOST",
        "LOG_LEVEL",
        "VISION_PROVIDER",
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
        "MAX_UPLOAD_MB",
        "STATIC_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: the Gemini key is all that is required."""
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")

    config = Config.from_env()

    assert config.gemini_api_key == "gem-key"
    assert config.vision_provider == "gemini"


def test_config_defaults(monkeypatch):
    """Optional fields have sensible defaults."""
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")

    config = Config.from_env()

    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.log_level == "INFO"
    assert config.gemini_model == "gemini-2.0-flash"
    assert config.max_upload_mb == 20
    assert config.max_upload_bytes == 20 * 1024 * 1024
    assert config.static_dir == "public"


def test_config_port_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")
    monkeypatch.setenv("PORT", "8080")

    assert Config.from_env().port == 8080


def test_config_missing_gemini_key_fails():
    """Missing GEMINI_API_KEY must raise."""
    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        Config.from_env()


def test_config_blank_gemini_key_fails(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")

    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        Config.from_env()


def test_config_claude_provider_needs_anthropic_key(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "claude")
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")

    with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
        Config.from_env()


def test_config_openai_provider_without_gemini_key(monkeypatch):
    """The Gemini key is only required when Gemini is the backend."""
    monkeypatch.setenv("VISION_PROVIDER", "OpenAI")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")

    config = Config.from_env()

    assert config.vision_provider == "openai"
    assert config.openai_api_key == "sk-test123"
    assert config.gemini_api_key is None


def test_config_unknown_provider_fails(monkeypatch):
    monkeypatch.setenv("VISION_PROVIDER", "llama")

    with pytest.raises(ValueError, match="VISION_PROVIDER"):
        Config.from_env()


def test_config_non_positive_upload_limit_fails(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")
    monkeypatch.setenv("MAX_UPLOAD_MB", "0")

    with pytest.raises(ValueError, match="MAX_UPLOAD_MB"):
        Config.from_env()


def test_config_immutable(monkeypatch):
    """Frozen dataclass: attribute assignment must fail."""
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")
    config = Config.from_env()

    with pytest.raises(Exception):
        config.port = 1
