import asyncio
from types import SimpleNamespace

import httpx
import pytest

from streamscribe.config import AIConfig

TEST_URL = "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"


class FakeCompletions:
    """Stands in for client.chat.completions, recording each request."""

    def __init__(self, content=None, error=None, responder=None):
        self.content = content
        self.error = error
        self.responder = responder
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        # Yield so concurrent callers interleave
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        content = self.responder(kwargs) if self.responder else self.content
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeClient:
    def __init__(self, content=None, error=None, responder=None):
        self.completions = FakeCompletions(content=content, error=error, responder=responder)
        self.chat = SimpleNamespace(completions=self.completions)


def make_request() -> httpx.Request:
    return httpx.Request("POST", TEST_URL)


def make_response(status_code: int) -> httpx.Response:
    return httpx.Response(status_code, request=make_request())


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("API_KEY", "GEMINI_API_KEY", "GEMINI_BASE_URL", "GEMINI_EXTRACTION_MODEL", "GEMINI_TRANSCRIPTION_MODEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep any .env from the checkout out of reach
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config():
    return AIConfig(api_key="test-key")
