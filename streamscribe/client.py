"""Client factory for the Gemini OpenAI-compatible API."""

from pathlib import Path

from openai import AsyncOpenAI

from .config import AIConfig, get_ai_config

PROMPTS_DIR = Path(__file__).parent / "prompts"


def get_client(config: AIConfig | None = None) -> AsyncOpenAI:
    """Build a new async client. Nothing is cached between calls.

    Args:
        config: Explicit settings; read from the environment when omitted

    Returns:
        A fresh AsyncOpenAI client pointed at config.base_url
    """
    if config is None:
        config = get_ai_config()
    return AsyncOpenAI(api_key=config.api_key, base_url=config.base_url)


def load_prompt(prompt_name: str) -> str:
    """Load prompt template from the bundled prompts directory."""
    path = PROMPTS_DIR / prompt_name
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return path.read_text(encoding="utf-8")


def response_text(response) -> str | None:
    """Return the text of the first choice of a chat completion.

    Raises AttributeError/IndexError/TypeError when the response does not
    have the chat completion shape.
    """
    return response.choices[0].message.content
