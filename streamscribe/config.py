"""Configuration for the Gemini API credentials and models."""

import os
from typing import Mapping, NamedTuple

from dotenv import dotenv_values, find_dotenv

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_EXTRACTION_MODEL = "gemini-2.0-flash"
DEFAULT_TRANSCRIPTION_MODEL = "gemini-2.0-flash"

# Checked in order, first non-empty wins
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")


class AIConfig(NamedTuple):
    """Settings used to build a client and pick models."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    extraction_model: str = DEFAULT_EXTRACTION_MODEL
    transcription_model: str = DEFAULT_TRANSCRIPTION_MODEL


def read_environment() -> dict[str, str]:
    """Merge the nearest .env file (searched from the working directory) with os.environ.

    Process environment wins over the file. os.environ is not modified.
    """
    dotenv_path = find_dotenv(usecwd=True)
    file_values = dotenv_values(dotenv_path) if dotenv_path else {}
    values = {key: value for key, value in file_values.items() if value is not None}
    values.update(os.environ)
    return values


def get_api_key(env: Mapping[str, str] | None = None) -> str:
    """Get the API key from API_KEY, falling back to GEMINI_API_KEY.

    Returns an empty string when neither is set; the remote call then fails
    with an authentication error.
    """
    if env is None:
        env = os.environ
    for name in API_KEY_ENV_VARS:
        value = env.get(name)
        if value:
            return value
    return ""


def get_ai_config() -> AIConfig:
    """Build an AIConfig from the environment (and a .env file, if present).

    Environment variables:
    - API_KEY / GEMINI_API_KEY: API key
    - GEMINI_BASE_URL: OpenAI-compatible endpoint
    - GEMINI_EXTRACTION_MODEL: model used for stream URL extraction
    - GEMINI_TRANSCRIPTION_MODEL: model used for audio transcription
    """
    env = read_environment()

    return AIConfig(
        api_key=get_api_key(env),
        base_url=env.get("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        extraction_model=env.get("GEMINI_EXTRACTION_MODEL") or DEFAULT_EXTRACTION_MODEL,
        transcription_model=env.get("GEMINI_TRANSCRIPTION_MODEL") or DEFAULT_TRANSCRIPTION_MODEL,
    )
