"""Stream URL extraction: ask the model to find "streamURL" in page source."""

import json
import re

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionUserMessageParam
from openai.types.shared_params import ResponseFormatJSONSchema
from rich.markup import escape

from common.display import err_console, format_size
from common.fetcher_utils import clamp_text
from .client import get_client, load_prompt, response_text
from .config import AIConfig, get_ai_config
from .errors import AnalysisError, classify_failure

PROMPT_NAME = "extract-stream-url.md"

# Longer sources are cut to their first MAX_SOURCE_CHARS characters
MAX_SOURCE_CHARS = 500_000

STREAM_URL_SCHEMA = {
    "type": "object",
    "properties": {
        "found": {"type": "boolean"},
        "url": {"type": "string", "description": "The extracted stream URL"},
        "confidence": {"type": "string", "description": "Low, Medium, or High confidence"},
    },
    "required": ["found"],
}


def build_prompt(source_code: str) -> str:
    """Embed the (already clamped) source code in the extraction prompt."""
    return load_prompt(PROMPT_NAME).format(source=source_code)


def parse_json_response(response_text: str) -> dict | None:
    """Parse JSON from LLM response.

    Handles responses that may include Markdown code blocks.
    Returns None when the text is not a JSON object.
    """
    json_match = re.search(r"```(?:json)?\s*\n?(.*?)\n?```", response_text, re.DOTALL)
    if json_match:
        json_str = json_match.group(1).strip()
    else:
        json_str = response_text.strip()

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        err_console.print(f"[yellow]JSON parse error: {escape(str(e))}[/yellow]")
        return None

    if not isinstance(data, dict):
        err_console.print(f"[yellow]Unexpected JSON type in response: {type(data).__name__}[/yellow]")
        return None
    return data


def stream_url_from_result(result: dict | None) -> str | None:
    """Return the URL only when the result says found and carries a non-empty url."""
    if not result or not result.get("found"):
        return None
    url = result.get("url")
    if not isinstance(url, str) or not url.strip():
        return None
    return url.strip()


async def call_extraction_api(client: AsyncOpenAI, model: str, prompt: str) -> str | None:
    """Call Chat Completions with the stream URL schema as response format.

    Returns:
        Response text or None
    """
    message: ChatCompletionUserMessageParam = {"role": "user", "content": prompt}
    response_format: ResponseFormatJSONSchema = {
        "type": "json_schema",
        "json_schema": {"name": "stream_url_result", "schema": STREAM_URL_SCHEMA},
    }
    response = await client.chat.completions.create(
        model=model,
        messages=[message],
        response_format=response_format,
    )
    return response_text(response)


async def extract_stream_url_from_source(
    source_code: str,
    config: AIConfig | None = None,
    client: AsyncOpenAI | None = None,
    verbose: int = 0,
) -> str | None:
    """Use the model to locate the 'streamURL' in HTML/JS page source.

    Sources longer than MAX_SOURCE_CHARS are cut to the first
    MAX_SOURCE_CHARS characters before being sent.

    Args:
        source_code: Raw page source
        config: Explicit settings; read from the environment when omitted
        client: Client to use; a new one is built from config when omitted
        verbose: Verbosity level (0=quiet, 1=details)

    Returns:
        The stream URL, or None when the model found nothing usable

    Raises:
        AnalysisError: When the request fails for any reason
    """
    if config is None:
        config = get_ai_config()

    source, was_truncated = clamp_text(source_code, MAX_SOURCE_CHARS)
    if was_truncated:
        err_console.print(
            f"[dim]  i Source truncated from {format_size(len(source_code))} to {format_size(MAX_SOURCE_CHARS)}[/dim]"
        )

    try:
        prompt = build_prompt(source)
        if verbose:
            err_console.print(f"[dim]  Extraction prompt: {format_size(len(prompt))}, model={config.extraction_model}[/dim]")
        if client is None:
            client = get_client(config)
        text = await call_extraction_api(client, config.extraction_model, prompt)
    except Exception as e:
        err_console.print(f"[red]Gemini extraction error: {escape(repr(e))}[/red]")
        raise AnalysisError("AI analysis failed.", kind=classify_failure(e)) from e

    result = parse_json_response(text or "{}")
    url = stream_url_from_result(result)
    if verbose:
        if url:
            confidence = result.get("confidence") or "unknown"
            err_console.print(f"[dim]  Found stream URL (confidence: {confidence})[/dim]")
        else:
            err_console.print("[dim]  No stream URL found[/dim]")
    return url
