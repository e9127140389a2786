"""Audio transcription through the Gemini chat endpoint."""

from openai import AsyncOpenAI
from openai.types.chat import (
    ChatCompletionContentPartInputAudioParam,
    ChatCompletionContentPartTextParam,
    ChatCompletionUserMessageParam,
)
from rich.markup import escape

from common.display import err_console, format_size
from .client import get_client, load_prompt, response_text
from .config import AIConfig, get_ai_config
from .errors import TranscriptionError, classify_failure

PROMPT_NAME = "transcribe-audio.md"

# Input is always sent as MP3 (audio/mp3), whatever it really is
AUDIO_FORMAT = "mp3"

NO_TRANSCRIPTION = "No transcription available."


def build_messages(base64_audio: str, instructions: str) -> list[ChatCompletionUserMessageParam]:
    """Build a single user message: inline audio first, then the instructions."""
    audio_part: ChatCompletionContentPartInputAudioParam = {
        "type": "input_audio",
        "input_audio": {"data": base64_audio, "format": AUDIO_FORMAT},
    }
    text_part: ChatCompletionContentPartTextParam = {"type": "text", "text": instructions}
    message: ChatCompletionUserMessageParam = {"role": "user", "content": [audio_part, text_part]}
    return [message]


async def transcribe_audio(
    base64_audio: str,
    config: AIConfig | None = None,
    client: AsyncOpenAI | None = None,
    verbose: int = 0,
) -> str:
    """Transcribe base64-encoded MP3 audio to formatted plain text.

    Returns:
        The transcription, or NO_TRANSCRIPTION when the model returned no text

    Raises:
        TranscriptionError: When the request fails for any reason
    """
    if config is None:
        config = get_ai_config()

    if verbose:
        err_console.print(
            f"[dim]  Transcription payload: {format_size(len(base64_audio))} base64, model={config.transcription_model}[/dim]"
        )

    try:
        messages = build_messages(base64_audio, load_prompt(PROMPT_NAME))
        if client is None:
            client = get_client(config)
        response = await client.chat.completions.create(
            model=config.transcription_model,
            messages=messages,
        )
        text = response_text(response)
    except Exception as e:
        err_console.print(f"[red]Transcription error: {escape(repr(e))}[/red]")
        raise TranscriptionError("AI transcription failed.", kind=classify_failure(e)) from e

    if not text:
        if verbose:
            err_console.print("[dim]  Empty transcription[/dim]")
        return NO_TRANSCRIPTION
    return text
