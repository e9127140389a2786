import os

from openai import AsyncOpenAI

from streamscribe.client import get_client, load_prompt
from streamscribe.config import AIConfig, DEFAULT_BASE_URL, DEFAULT_EXTRACTION_MODEL, get_ai_config


def test_primary_api_key_wins(monkeypatch):
    monkeypatch.setenv("API_KEY", "primary")
    monkeypatch.setenv("GEMINI_API_KEY", "secondary")
    assert get_ai_config().api_key == "primary"


def test_falls_back_to_gemini_api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secondary")
    assert get_ai_config().api_key == "secondary"


def test_missing_key_defaults_to_empty_string():
    config = get_ai_config()
    assert config.api_key == ""
    assert config.base_url == DEFAULT_BASE_URL
    assert config.extraction_model == DEFAULT_EXTRACTION_MODEL


def test_models_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_EXTRACTION_MODEL", "gemini-x")
    monkeypatch.setenv("GEMINI_TRANSCRIPTION_MODEL", "gemini-y")
    config = get_ai_config()
    assert config.extraction_model == "gemini-x"
    assert config.transcription_model == "gemini-y"


def test_get_client_builds_fresh_client_per_call():
    config = AIConfig(api_key="k", base_url="https://example.test/v1/")
    first = get_client(config)
    second = get_client(config)
    assert isinstance(first, AsyncOpenAI)
    assert first is not second
    assert first.api_key == "k"
    assert str(first.base_url) == "https://example.test/v1/"


def test_get_client_accepts_empty_key():
    client = get_client(AIConfig(api_key=""))
    assert client.api_key == ""


def test_prompts_are_bundled():
    assert "streamURL" in load_prompt("extract-stream-url.md")
    assert "double newlines" in load_prompt("transcribe-audio.md")


def test_dotenv_in_working_directory_is_read(tmp_path):
    (tmp_path / ".env").write_text("API_KEY=from-dotenv\nGEMINI_EXTRACTION_MODEL=gemini-dotenv\n", encoding="utf-8")
    config = get_ai_config()
    assert config.api_key == "from-dotenv"
    assert config.extraction_model == "gemini-dotenv"


def test_dotenv_found_from_subdirectory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("GEMINI_API_KEY=from-parent\n", encoding="utf-8")
    nested = tmp_path / "app" / "jobs"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert get_ai_config().api_key == "from-parent"


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("API_KEY", "from-env")
    assert get_ai_config().api_key == "from-env"


def test_dotenv_does_not_touch_os_environ(tmp_path):
    (tmp_path / ".env").write_text("API_KEY=from-dotenv\n", encoding="utf-8")
    get_ai_config()
    assert "API_KEY" not in os.environ
